"""Compatibility score between resume skills and job skills."""

from __future__ import annotations
import math
from typing import Sequence

from jobmatch.nlp.extractors import Skill

MAX_SCORE = 100
BONUS_PER_SKILL = 5


def skill_names(skills: Sequence[Skill]) -> set[str]:
    """Lowercased names, used for case-insensitive membership checks"""
    return {skill.name.lower() for skill in skills}


def calculate_score(
    resume_skills: Sequence[Skill],
    job_skills: Sequence[Skill],
    bonus_per_skill: float = BONUS_PER_SKILL,
) -> int:
    """Calculate a 0-100 compatibility score.

    The base score is the share of job skills found in the resume. Each
    matched skill adds up to ``bonus_per_skill`` extra points in proportion to
    its relevance in the resume, rewarding skills the resume mentions often.

    Args:
        resume_skills: Skills extracted from the resume
        job_skills: Skills extracted from the job description

    Returns:
        Integer score, 0 when the job description names no known skills
    """
    if not job_skills:
        return 0

    job_skill_names = skill_names(job_skills)
    matched = [skill for skill in resume_skills if skill.name.lower() in job_skill_names]

    base_score = len(matched) / len(job_skills) * 100
    bonus_score = sum(skill.relevance / 100 * bonus_per_skill for skill in matched)

    return min(_round_half_up(base_score + bonus_score), MAX_SCORE)


def _round_half_up(value: float) -> int:
    # round() would send 52.5 to 52
    return int(math.floor(value + 0.5))


def score_label(score: int) -> str:
    """Human-readable band for a score"""
    if score >= 80:
        return "Excellent Match"
    if score >= 60:
        return "Good Match"
    return "Needs Improvement"
