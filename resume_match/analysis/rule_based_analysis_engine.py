"""rule_based_analysis_engine.py
Scores a resume against a job description with keyword and regex heuristics.
Works offline; needs no provider.
"""
from resume_match.config import SCREENER_DEFAULTS
from resume_match.models import MatchAnalysis, ResumeInfo
from resume_match.analysis.analysis_engine import AnalysisEngine
from resume_match.analysis.helpers import heuristics


class RuleBasedAnalysisEngine(AnalysisEngine):
    """
    Rule-based analysis engine.

    The match score is a weighted blend of:
        - skill coverage (60%): share of the job's known skills found in the resume
        - experience (30%): candidate years against the required years
        - education (10%): degree present when the job asks for one

    Example:
        >>> engine = RuleBasedAnalysisEngine()
        >>> engine.analyze_match(resume_text, job_description_text).match_score
        70
    """

    STRATEGY_NAME = "rule"

    def __init__(
        self,
        max_strengths: int = SCREENER_DEFAULTS.MAX_STRENGTHS,
        max_gaps: int = SCREENER_DEFAULTS.MAX_GAPS,
        current_year: int | None = None,
    ):
        self.max_strengths = max_strengths
        self.max_gaps = max_gaps
        # Pins the date-range fallback for years of experience (None = this year)
        self.current_year = current_year

    def analyze_match(self, resume_text: str, job_description_text: str) -> MatchAnalysis:
        required_skills = heuristics.extract_skills(job_description_text)
        resume_skills = heuristics.extract_skills(resume_text)
        matching_skills, missing_skills = heuristics.split_matching_skills(
            required_skills, resume_skills, resume_text
        )
        skill_score = heuristics.calculate_skill_score(matching_skills, required_skills)

        required_years = heuristics.extract_years_required(job_description_text)
        candidate_years = heuristics.extract_years_experience(resume_text, self.current_year)
        experience_score = heuristics.calculate_experience_score(candidate_years, required_years)

        has_education = heuristics.check_education(resume_text, job_description_text)
        education_score = 100 if has_education else 0

        match_score = heuristics.calculate_match_score(skill_score, experience_score, education_score)

        strengths = heuristics.generate_strengths(
            matching_skills, candidate_years, resume_text, limit=self.max_strengths
        )
        gaps = heuristics.generate_gaps(
            missing_skills, required_years, candidate_years, has_education, limit=self.max_gaps
        )

        return MatchAnalysis(
            match_score=match_score,
            strengths=strengths,
            gaps=gaps,
            overall_assessment=heuristics.generate_assessment(match_score, len(strengths), len(gaps)),
        )

    def extract_resume_info(self, resume_text: str) -> ResumeInfo:
        skills = heuristics.extract_skills(resume_text)
        candidate_years = heuristics.extract_years_experience(resume_text, self.current_year)

        return ResumeInfo(
            skills=skills[:15],
            experience=heuristics.extract_job_titles(resume_text, limit=3),
            education=heuristics.extract_education(resume_text),
            summary=heuristics.build_summary(candidate_years, skills),
        )
