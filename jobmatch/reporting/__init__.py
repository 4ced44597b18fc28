"""Report export for analysis results"""

from .export import export_results, format_report_date, report_filename, save_report

__all__ = [
    'export_results',
    'format_report_date',
    'report_filename',
    'save_report'
]
