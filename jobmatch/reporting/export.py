"""Markdown report for an analysis result."""

from __future__ import annotations
import logging
from datetime import date
from pathlib import Path
from typing import Optional, Union

from jobmatch.matching.pipeline import AnalysisResult
from jobmatch.observability import MatchingMetrics, counter

logger = logging.getLogger(__name__)

REPORT_TITLE = "JobMatchAI Analysis Report"
REPORT_FOOTER = "Generated by JobMatchAI - AI-Powered Resume Optimization Tool"


def format_report_date(day: date) -> str:
    """US short date without zero padding, e.g. 3/7/2025"""
    return f"{day.month}/{day.day}/{day.year}"


def export_results(
    result: AnalysisResult,
    resume_title: str = "Resume",
    generated_on: Optional[date] = None,
) -> str:
    """Render an analysis result as a Markdown report.

    Args:
        result: The analysis to render
        resume_title: Name shown on the ``Resume:`` line
        generated_on: Report date, defaults to today

    Returns:
        The report text; nothing is written to disk
    """
    day = generated_on or date.today()

    matched = '\n'.join(
        f"• {skill.name} ({skill.relevance}% relevance)" for skill in result.matched_skills
    )
    missing = '\n'.join(f"• {skill.name}" for skill in result.missing_skills)
    suggestions = '\n\n'.join(
        f"{index}. {suggestion}" for index, suggestion in enumerate(result.suggestions, start=1)
    )

    lines = [
        f"# {REPORT_TITLE}",
        f"Generated on: {format_report_date(day)}",
        f"Resume: {resume_title}",
        "",
        f"## Compatibility Score: {result.score}/100",
        "",
        f"## Matched Skills ({len(result.matched_skills)})",
        matched,
        "",
        f"## Missing Skills ({len(result.missing_skills)})",
        missing,
        "",
        "## Improvement Suggestions",
        suggestions,
        "",
        "## Recommended Resume Summary",
        result.summary,
        "",
        "---",
        REPORT_FOOTER,
    ]
    return '\n'.join(lines)


def report_filename(day: Optional[date] = None) -> str:
    """Default file name for a report, e.g. jobmatch-analysis-2025-03-07.md"""
    return f"jobmatch-analysis-{(day or date.today()).isoformat()}.md"


def save_report(
    result: AnalysisResult,
    output_dir: Union[str, Path] = ".",
    resume_title: str = "Resume",
    generated_on: Optional[date] = None,
) -> Path:
    """Write the report for ``result`` into ``output_dir`` and return its path"""
    day = generated_on or date.today()
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    path = output_dir / report_filename(day)
    path.write_text(export_results(result, resume_title, generated_on=day), encoding='utf-8')

    counter(MatchingMetrics.REPORTS_EXPORTED)
    logger.info(f"Wrote analysis report to {path}")
    return path
