"""Skill and job posting extraction"""

from .extractors import (
    DEFAULT_VOCABULARY,
    Skill,
    JobDetails,
    SkillExtractor,
    JobPostingExtractor,
    extract_skills,
    extract_job_details
)

__all__ = [
    'DEFAULT_VOCABULARY',
    'Skill',
    'JobDetails',
    'SkillExtractor',
    'JobPostingExtractor',
    'extract_skills',
    'extract_job_details'
]
