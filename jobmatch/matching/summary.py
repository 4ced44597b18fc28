"""Suggested resume summary built from the matched skills."""

from __future__ import annotations
from typing import Sequence

from jobmatch.nlp.extractors import Skill

SUMMARY_SKILL_LIMIT = 4

FALLBACK_SUMMARY = (
    "Motivated professional seeking to contribute to innovative projects. "
    "Experienced in problem-solving and eager to apply technical skills in a "
    "dynamic environment. Strong communicator with a passion for continuous "
    "learning and growth."
)

SUMMARY_CLOSING = (
    "Proven track record of delivering high-quality solutions and collaborating "
    "effectively in team environments. Passionate about leveraging technology to "
    "solve complex problems and drive business success."
)


def generate_summary(
    matched_skills: Sequence[Skill],
    job_text: str,
    limit: int = SUMMARY_SKILL_LIMIT,
) -> str:
    """Generate a resume summary naming the top matched skills.

    ``job_text`` is accepted so callers can hand over the raw posting; the
    job title and company are extracted separately by
    :func:`jobmatch.nlp.extractors.extract_job_details`.
    """
    top_skills = [skill.name for skill in matched_skills[:limit]]

    if not top_skills:
        return FALLBACK_SUMMARY

    expertise = ', '.join(top_skills[:3])
    if len(top_skills) > 3:
        expertise += f" and {top_skills[3]}"

    return f"Results-driven professional with expertise in {expertise}. {SUMMARY_CLOSING}"
