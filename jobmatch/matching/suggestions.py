"""Templated improvement suggestions for a resume."""

from __future__ import annotations
from typing import List, Sequence

from jobmatch.nlp.extractors import Skill

MAX_MISSING_IN_SUGGESTION = 3

LEADERSHIP_KEYWORDS = ('leadership', 'management')

LEADERSHIP_SUGGESTION = (
    "Highlight any leadership experience, team projects, or management "
    "responsibilities you've had, even in informal settings."
)
ACTION_VERBS_SUGGESTION = (
    "Use action verbs and quantifiable achievements in your resume. For example: "
    "'Developed a React application that increased user engagement by 25%'."
)
ATS_FORMAT_SUGGESTION = (
    "Ensure your resume format is ATS-friendly with clear section headers and "
    "standard fonts. Many companies use automated systems to screen resumes."
)


def generate_suggestions(
    missing_skills: Sequence[Skill],
    matched_skills: Sequence[Skill],
    max_missing: int = MAX_MISSING_IN_SUGGESTION,
) -> List[str]:
    """Build suggestions in a fixed order.

    Skill-specific advice comes first (missing skills, then the strongest
    matched skill, then leadership when the job asks for it), followed by two
    general tips that are always included.
    """
    suggestions = []

    if missing_skills:
        top_missing = ', '.join(skill.name for skill in missing_skills[:max_missing])
        suggestions.append(
            f"Consider adding these key skills to your resume: {top_missing}. "
            "These are frequently mentioned in the job description."
        )

    if matched_skills:
        suggestions.append(
            f"Emphasize your experience with {matched_skills[0].name} by adding "
            "specific examples or projects that demonstrate this skill."
        )

    if any(_mentions_leadership(skill) for skill in missing_skills):
        suggestions.append(LEADERSHIP_SUGGESTION)

    suggestions.append(ACTION_VERBS_SUGGESTION)
    suggestions.append(ATS_FORMAT_SUGGESTION)

    return suggestions


def _mentions_leadership(skill: Skill) -> bool:
    name = skill.name.lower()
    return any(keyword in name for keyword in LEADERSHIP_KEYWORDS)
