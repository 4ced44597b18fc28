"""Resume-to-job analysis pipeline for JobMatch

Runs skill extraction over both texts, partitions the skills into matched and
missing, then scores the match and produces suggestions and a summary.
Every call is independent: the analyzer holds only its configuration.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from jobmatch.matching.scoring import BONUS_PER_SKILL, calculate_score, skill_names
from jobmatch.matching.suggestions import MAX_MISSING_IN_SUGGESTION, generate_suggestions
from jobmatch.matching.summary import SUMMARY_SKILL_LIMIT, generate_summary
from jobmatch.nlp.extractors import (
    DEFAULT_VOCABULARY,
    MAX_RELEVANCE,
    RELEVANCE_PER_OCCURRENCE,
    JobPostingExtractor,
    Skill,
    SkillExtractor,
)
from jobmatch.observability import MatchingMetrics, counter, get_logger, histogram, timer

logger = get_logger(__name__)


@dataclass
class MatchingConfig:
    """Configuration for the analysis pipeline"""
    vocabulary: Tuple[str, ...] = DEFAULT_VOCABULARY
    relevance_per_occurrence: int = RELEVANCE_PER_OCCURRENCE
    max_relevance: int = MAX_RELEVANCE
    bonus_per_skill: float = BONUS_PER_SKILL
    max_missing_in_suggestion: int = MAX_MISSING_IN_SUGGESTION
    summary_skill_limit: int = SUMMARY_SKILL_LIMIT


@dataclass(frozen=True)
class AnalyzeRequest:
    """The two raw texts a caller hands to the analyzer"""
    resume_text: str
    job_text: str


@dataclass(frozen=True)
class AnalysisResult:
    """Result of analyzing a resume against a job description"""
    score: int
    matched_skills: List[Skill]
    missing_skills: List[Skill]
    suggestions: List[str]
    summary: str
    job_title: Optional[str] = None
    company: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "matched_skills": [skill.to_dict() for skill in self.matched_skills],
            "missing_skills": [skill.to_dict() for skill in self.missing_skills],
            "suggestions": list(self.suggestions),
            "summary": self.summary,
            "job_title": self.job_title,
            "company": self.company,
        }


class MatchAnalyzer:
    """Analyze how well a resume matches a job description"""

    def __init__(self, config: Optional[MatchingConfig] = None):
        self.config = config or MatchingConfig()
        self.skill_extractor = SkillExtractor(
            vocabulary=self.config.vocabulary,
            relevance_per_occurrence=self.config.relevance_per_occurrence,
            max_relevance=self.config.max_relevance,
        )
        self.posting_extractor = JobPostingExtractor()

    def analyze(self, request: AnalyzeRequest) -> AnalysisResult:
        """Analyze one resume/job pair

        Args:
            request: Raw resume and job description text

        Returns:
            AnalysisResult with score, skill partitions, suggestions and summary
        """
        with timer(MatchingMetrics.ANALYZE_TIMER):
            resume_skills = self.skill_extractor.extract_skills(request.resume_text)
            job_skills = self.skill_extractor.extract_skills(request.job_text)

            matched_skills, missing_skills = self.partition_skills(resume_skills, job_skills)

            score = calculate_score(
                resume_skills, job_skills, bonus_per_skill=self.config.bonus_per_skill
            )
            suggestions = generate_suggestions(
                missing_skills, matched_skills, max_missing=self.config.max_missing_in_suggestion
            )
            summary = generate_summary(
                matched_skills, request.job_text, limit=self.config.summary_skill_limit
            )
            details = self.posting_extractor.extract(request.job_text)
            logger.debug("Job posting details", extra={
                "job_title": details.title,
                "company": details.company,
            })

        counter(MatchingMetrics.ANALYSES)
        histogram(MatchingMetrics.SCORE, score)
        histogram(MatchingMetrics.MATCHED_SKILLS, len(matched_skills))
        histogram(MatchingMetrics.MISSING_SKILLS, len(missing_skills))

        logger.info("Analysis completed", extra={
            "score": score,
            "resume_skills": len(resume_skills),
            "job_skills": len(job_skills),
            "matched": len(matched_skills),
            "missing": len(missing_skills),
        })

        return AnalysisResult(
            score=score,
            matched_skills=matched_skills,
            missing_skills=missing_skills,
            suggestions=suggestions,
            summary=summary,
            job_title=details.title,
            company=details.company,
        )

    @staticmethod
    def partition_skills(
        resume_skills: List[Skill], job_skills: List[Skill]
    ) -> Tuple[List[Skill], List[Skill]]:
        """Split into (resume skills the job asks for, job skills the resume lacks)"""
        job_skill_names = skill_names(job_skills)
        resume_skill_names = skill_names(resume_skills)

        matched = [skill for skill in resume_skills if skill.name.lower() in job_skill_names]
        missing = [skill for skill in job_skills if skill.name.lower() not in resume_skill_names]
        return matched, missing


def create_match_analyzer(config: Optional[MatchingConfig] = None) -> MatchAnalyzer:
    """Factory function to create a match analyzer"""
    return MatchAnalyzer(config)


_default_analyzer = MatchAnalyzer()


def analyze_match(resume_text: str, job_text: str) -> AnalysisResult:
    """Analyze a resume against a job description with the default configuration"""
    return _default_analyzer.analyze(AnalyzeRequest(resume_text=resume_text, job_text=job_text))
