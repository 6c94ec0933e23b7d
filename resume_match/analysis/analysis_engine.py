"""analysis_engine.py
Holds abstract AnalysisEngine class inherited by the rule-based and LLM engines.
"""
from abc import ABC, abstractmethod

from resume_match.models import MatchAnalysis, ResumeInfo

FALLBACK_ASSESSMENT = (
    "Unable to complete a detailed analysis. Please review the resume manually."
)
FALLBACK_SUMMARY = "Unable to extract summary"


class AnalysisEngine(ABC):
    """
    Abstract base class for scoring a resume against a job description.

    Whatever the strategy, implementations guarantee:
        - `match_score` is an int in [0, 100]
        - `strengths` and `gaps` are lists (possibly empty)
        - `overall_assessment` is a non-empty string
    """

    # Name used in health output and strategy selection (define in each child)
    STRATEGY_NAME: str = ""

    @abstractmethod
    def analyze_match(self, resume_text: str, job_description_text: str) -> MatchAnalysis:
        """Score `resume_text` against `job_description_text`."""
        pass

    @abstractmethod
    def extract_resume_info(self, resume_text: str) -> ResumeInfo:
        """Pull skills, job titles, education and a summary out of `resume_text`."""
        pass

    @staticmethod
    def fallback_analysis() -> MatchAnalysis:
        return MatchAnalysis(
            match_score=50,
            strengths=[],
            gaps=[],
            overall_assessment=FALLBACK_ASSESSMENT,
        )

    @staticmethod
    def fallback_resume_info() -> ResumeInfo:
        return ResumeInfo(skills=[], experience=[], education=[], summary=FALLBACK_SUMMARY)
