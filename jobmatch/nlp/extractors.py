"""Text extractors for skills and job posting details."""

import logging
import re
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)


# Order matters: it breaks relevance ties in extraction results.
DEFAULT_VOCABULARY = (
    'JavaScript', 'TypeScript', 'React', 'Node.js', 'Python', 'Java', 'C++', 'SQL',
    'HTML', 'CSS', 'Git', 'Docker', 'Kubernetes', 'AWS', 'Azure', 'MongoDB',
    'PostgreSQL', 'Redis', 'GraphQL', 'REST API', 'Microservices', 'Agile',
    'Scrum', 'CI/CD', 'DevOps', 'Machine Learning', 'Data Analysis', 'Excel',
    'Project Management', 'Leadership', 'Communication', 'Problem Solving',
    'Team Collaboration', 'Frontend', 'Backend', 'Full Stack', 'Mobile Development',
    'UI/UX', 'Design', 'Testing', 'Quality Assurance', 'Security', 'Blockchain',
)

RELEVANCE_PER_OCCURRENCE = 20
MAX_RELEVANCE = 100


@dataclass(frozen=True)
class Skill:
    """A vocabulary term with its relevance (0-100) within one text."""
    name: str
    relevance: int

    def to_dict(self) -> Dict[str, object]:
        return {"name": self.name, "relevance": self.relevance}


@dataclass(frozen=True)
class JobDetails:
    """Labelled fields pulled out of a job posting, when present."""
    title: Optional[str] = None
    company: Optional[str] = None


class SkillExtractor:
    """Extract vocabulary skills from free text.

    Every term is matched case-insensitively as a whole word. Relevance grows
    by ``relevance_per_occurrence`` for each match and is capped at
    ``max_relevance``, so it reflects how often a term is mentioned rather
    than any measure of proficiency.
    """

    def __init__(
        self,
        vocabulary: Iterable[str] = DEFAULT_VOCABULARY,
        relevance_per_occurrence: int = RELEVANCE_PER_OCCURRENCE,
        max_relevance: int = MAX_RELEVANCE,
    ):
        self.vocabulary = tuple(vocabulary)
        self.relevance_per_occurrence = relevance_per_occurrence
        self.max_relevance = max_relevance
        self._patterns: List[Tuple[str, re.Pattern]] = [
            (term, self._compile(term)) for term in self.vocabulary
        ]

    @staticmethod
    def _compile(term: str) -> re.Pattern:
        """Whole-word, case-insensitive pattern for a vocabulary term."""
        return re.compile(r'\b' + re.escape(term) + r'\b', re.IGNORECASE)

    def extract_skills(self, text: str) -> List[Skill]:
        """Extract skills from text, most relevant first."""
        skills = []

        for term, pattern in self._patterns:
            count = len(pattern.findall(text))
            if count:
                relevance = min(count * self.relevance_per_occurrence, self.max_relevance)
                skills.append(Skill(name=term, relevance=relevance))

        # sorted() is stable, so equal relevance keeps vocabulary order
        skills = sorted(skills, key=lambda s: s.relevance, reverse=True)
        logger.debug("Extracted %d skills from %d characters", len(skills), len(text))
        return skills


_default_extractor = SkillExtractor()


def extract_skills(text: str, vocabulary: Optional[Sequence[str]] = None) -> List[Skill]:
    """Extract skills with the default vocabulary, or a substitute one."""
    if vocabulary is None:
        return _default_extractor.extract_skills(text)
    return SkillExtractor(vocabulary).extract_skills(text)


class JobPostingExtractor:
    """Pull labelled fields such as ``Position: ...`` out of a job posting."""

    TITLE_PATTERN = re.compile(r'(?:job title|position|role):\s*([^\n\r]+)', re.IGNORECASE)
    COMPANY_PATTERN = re.compile(r'(?:company|organization):\s*([^\n\r]+)', re.IGNORECASE)

    def extract(self, job_text: str) -> JobDetails:
        return JobDetails(
            title=self._first_value(self.TITLE_PATTERN, job_text),
            company=self._first_value(self.COMPANY_PATTERN, job_text),
        )

    @staticmethod
    def _first_value(pattern: re.Pattern, text: str) -> Optional[str]:
        match = pattern.search(text)
        if not match:
            return None
        return match.group(1).strip() or None


def extract_job_details(job_text: str) -> JobDetails:
    """Job title and company from ``Role: ...`` / ``Company: ...`` lines."""
    return JobPostingExtractor().extract(job_text)
