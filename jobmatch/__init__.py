"""JobMatch: compare a resume against a job description.

Keyword-based skill extraction, a compatibility score, improvement
suggestions and a suggested resume summary, plus a Markdown report export.
"""

__version__ = "0.1.0"


class JobMatchError(Exception):
    """Base class for errors raised at the edges (file reading, config)."""
    pass
