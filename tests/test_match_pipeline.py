"""Tests for the resume/job analysis pipeline"""
import json
import logging

import pytest

from jobmatch.matching import (
    AnalysisResult,
    AnalyzeRequest,
    MatchAnalyzer,
    MatchingConfig,
    analyze_match,
    create_match_analyzer,
)
from jobmatch.matching.suggestions import (
    ACTION_VERBS_SUGGESTION,
    ATS_FORMAT_SUGGESTION,
    LEADERSHIP_SUGGESTION,
)
from jobmatch.matching.summary import FALLBACK_SUMMARY
from jobmatch.nlp.extractors import Skill, extract_skills
from jobmatch.observability import MatchingMetrics, get_metrics_collector

RESUME = "I have 3 years of JavaScript and Docker experience, with strong Leadership skills."
JOB = "Looking for a JavaScript and Python developer with Leadership and AWS experience."


@pytest.fixture
def result():
    return analyze_match(RESUME, JOB)


def names(skills):
    return [skill.name for skill in skills]


def test_matched_and_missing_skills(result):
    """Docker is not in the job, Python and AWS are not in the resume"""
    assert names(result.matched_skills) == ["JavaScript", "Leadership"]
    assert names(result.missing_skills) == ["Python", "AWS"]


def test_score(result):
    """Two of four job skills at relevance 20: 50 + 2"""
    assert result.score == 52


def test_suggestions(result):
    """Python and AWS do not trigger the leadership tip"""
    assert result.suggestions == [
        "Consider adding these key skills to your resume: Python, AWS. "
        "These are frequently mentioned in the job description.",
        "Emphasize your experience with JavaScript by adding specific examples or "
        "projects that demonstrate this skill.",
        ACTION_VERBS_SUGGESTION,
        ATS_FORMAT_SUGGESTION,
    ]
    assert LEADERSHIP_SUGGESTION not in result.suggestions


def test_summary(result):
    assert result.summary.startswith(
        "Results-driven professional with expertise in JavaScript, Leadership. Proven"
    )


def test_partition_covers_resume_skills(result):
    """Matched plus unmatched resume skills rebuild the resume skill list"""
    resume_skills = extract_skills(RESUME)
    job_names = {skill.name.lower() for skill in extract_skills(JOB)}
    unmatched = [skill for skill in resume_skills if skill.name.lower() not in job_names]

    assert sorted(names(result.matched_skills + unmatched)) == sorted(names(resume_skills))
    assert names(unmatched) == ["Docker"]


def test_empty_inputs():
    """Empty texts give an empty but valid result"""
    result = analyze_match("", "")

    assert result.score == 0
    assert result.matched_skills == []
    assert result.missing_skills == []
    assert result.suggestions == [ACTION_VERBS_SUGGESTION, ATS_FORMAT_SUGGESTION]
    assert result.summary == FALLBACK_SUMMARY
    assert result.job_title is None
    assert result.company is None


def test_idempotent():
    """Identical inputs give equal results"""
    assert analyze_match(RESUME, JOB) == analyze_match(RESUME, JOB)


def test_leadership_tip_when_management_missing():
    result = analyze_match("Python developer", "Python and Project Management skills required")

    assert names(result.missing_skills) == ["Project Management"]
    assert LEADERSHIP_SUGGESTION in result.suggestions


def test_missing_skills_keep_job_relevance():
    """Missing skills carry their relevance from the job description"""
    result = analyze_match("Python", "AWS, AWS and more AWS. Python.")

    assert result.missing_skills == [Skill("AWS", 60)]


def test_job_details_on_result():
    job = "Role: Backend Engineer\nCompany: Acme\nPython and AWS required."
    result = analyze_match("Python", job)

    assert result.job_title == "Backend Engineer"
    assert result.company == "Acme"


def test_to_dict_is_json_serializable(result):
    data = json.loads(json.dumps(result.to_dict()))

    assert data["score"] == 52
    assert data["matched_skills"][0] == {"name": "JavaScript", "relevance": 20}
    assert data["missing_skills"][1] == {"name": "AWS", "relevance": 20}
    assert len(data["suggestions"]) == 4


class TestMatchAnalyzer:
    """Analyzer configured with a substitute vocabulary"""

    def setup_method(self):
        self.analyzer = create_match_analyzer(MatchingConfig(vocabulary=("Go", "Rust", "Kafka")))

    def test_uses_injected_vocabulary(self):
        result = self.analyzer.analyze(AnalyzeRequest(
            resume_text="Go and Python services",
            job_text="Go, Rust and Kafka. Python welcome.",
        ))

        assert names(result.matched_skills) == ["Go"]
        assert names(result.missing_skills) == ["Rust", "Kafka"]
        # 1/3 of 100 plus 1 bonus point
        assert result.score == 34

    def test_default_config(self):
        analyzer = MatchAnalyzer()

        assert analyzer.config == MatchingConfig()
        assert isinstance(analyzer.analyze(AnalyzeRequest("", "")), AnalysisResult)


def test_records_metrics():
    """Each analysis is counted and timed"""
    collector = get_metrics_collector()
    collector.clear()

    analyze_match(RESUME, JOB)
    analyze_match(RESUME, JOB)
    stats = collector.get_stats()

    assert stats[MatchingMetrics.ANALYSES]["count"] == 2
    assert stats[MatchingMetrics.SCORE]["latest"] == 52
    assert f"{MatchingMetrics.ANALYZE_TIMER}.duration_ms" in stats


def test_logs_job_details_at_debug(caplog):
    """Detected posting labels are logged with structured context"""
    caplog.set_level(logging.DEBUG, logger="jobmatch.matching.pipeline")

    analyze_match(RESUME, "Position: CTO\nCompany: Initech\n" + JOB)

    assert 'Job posting details | {"company": "Initech", "job_title": "CTO"}' in caplog.text
