"""Tests for suggestion and summary generation"""
from jobmatch.matching.suggestions import (
    ACTION_VERBS_SUGGESTION,
    ATS_FORMAT_SUGGESTION,
    LEADERSHIP_SUGGESTION,
    generate_suggestions,
)
from jobmatch.matching.summary import FALLBACK_SUMMARY, generate_summary
from jobmatch.nlp.extractors import Skill


def skills(*names):
    return [Skill(name, 20) for name in names]


class TestSuggestions:
    """Rule order and content of suggestions"""

    def test_general_tips_always_present(self):
        """With no skills at all only the two general tips remain"""
        assert generate_suggestions([], []) == [ACTION_VERBS_SUGGESTION, ATS_FORMAT_SUGGESTION]

    def test_top_three_missing_skills(self):
        """Only the first three missing skills are named"""
        suggestions = generate_suggestions(skills("Python", "AWS", "SQL", "Redis"), [])

        assert suggestions[0] == (
            "Consider adding these key skills to your resume: Python, AWS, SQL. "
            "These are frequently mentioned in the job description."
        )
        assert "Redis" not in suggestions[0]

    def test_top_matched_skill(self):
        """The first matched skill is the one to emphasize"""
        suggestions = generate_suggestions([], skills("Docker", "Git"))

        assert suggestions == [
            "Emphasize your experience with Docker by adding specific examples or "
            "projects that demonstrate this skill.",
            ACTION_VERBS_SUGGESTION,
            ATS_FORMAT_SUGGESTION,
        ]

    def test_leadership_suggestion_for_missing_management(self):
        """Missing management or leadership skills add the leadership tip"""
        suggestions = generate_suggestions(skills("Project Management"), skills("Python"))

        assert len(suggestions) == 5
        assert suggestions[2] == LEADERSHIP_SUGGESTION
        assert suggestions[3:] == [ACTION_VERBS_SUGGESTION, ATS_FORMAT_SUGGESTION]

    def test_no_leadership_suggestion_for_matched_leadership(self):
        """A matched Leadership skill does not trigger the tip"""
        suggestions = generate_suggestions(skills("AWS"), skills("Leadership"))

        assert LEADERSHIP_SUGGESTION not in suggestions
        assert len(suggestions) == 4

    def test_custom_missing_limit(self):
        suggestions = generate_suggestions(skills("Python", "AWS", "SQL"), [], max_missing=1)

        assert "resume: Python. These" in suggestions[0]


class TestSummary:
    """Summary template"""

    def test_fallback_without_matches(self):
        """No matched skills returns the fallback paragraph"""
        assert generate_summary([], "Role: Engineer") == FALLBACK_SUMMARY
        assert FALLBACK_SUMMARY.startswith("Motivated professional seeking")

    def test_single_skill(self):
        summary = generate_summary(skills("Python"), "")

        assert summary.startswith("Results-driven professional with expertise in Python. Proven track record")
        assert summary.endswith("drive business success.")

    def test_three_skills(self):
        summary = generate_summary(skills("Python", "AWS", "SQL"), "")

        assert "expertise in Python, AWS, SQL. Proven" in summary

    def test_fourth_skill_joined_with_and(self):
        """The fourth skill is appended with 'and', a fifth is dropped"""
        summary = generate_summary(skills("Python", "AWS", "SQL", "Git", "Redis"), "")

        assert "expertise in Python, AWS, SQL and Git. Proven" in summary
        assert "Redis" not in summary

    def test_job_text_does_not_change_summary(self):
        """Job title lines in the posting leave the summary text unchanged"""
        matched = skills("Python")

        assert generate_summary(matched, "Position: CTO\nCompany: Initech") == generate_summary(matched, "")
