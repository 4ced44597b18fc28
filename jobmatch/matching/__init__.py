"""Matching module for JobMatch

Scores a resume against a job description using keyword skill matching and
turns the result into suggestions and a suggested resume summary.
"""

from .pipeline import (
    MatchAnalyzer,
    MatchingConfig,
    AnalyzeRequest,
    AnalysisResult,
    analyze_match,
    create_match_analyzer
)
from .scoring import calculate_score, score_label
from .suggestions import generate_suggestions
from .summary import generate_summary

__all__ = [
    'MatchAnalyzer',
    'MatchingConfig',
    'AnalyzeRequest',
    'AnalysisResult',
    'analyze_match',
    'create_match_analyzer',
    'calculate_score',
    'score_label',
    'generate_suggestions',
    'generate_summary'
]
