"""llm_analysis_engine.py
Scores a resume against a job description by prompting a hosted LLM.
"""
from typing import Optional

from resume_match.exceptions import LLMError
from resume_match.logging import LoggerFactory
from resume_match.models import MatchAnalysis, ResumeInfo
from resume_match.llm.llm_client import LLMClient
from resume_match.analysis.analysis_engine import AnalysisEngine
from resume_match.analysis.helpers.normalize_llm_output import (
    normalize_match_analysis,
    normalize_resume_info,
)

analysis_logger = LoggerFactory().get_logger(
    name="analysis",
    logger_type="analysis"
)

ANALYZE_MATCH_SYSTEM_PROMPT = (
    "You are an expert HR analyst and technical recruiter. Compare the resume with the "
    "job description and evaluate how well the candidate fits the role.\n\n"
    "Scoring rubric:\n"
    "1. Required skills and technologies covered by the resume (60%).\n"
    "2. Years of relevant experience against the stated requirement (30%).\n"
    "3. Education requirement met (10%).\n\n"
    "Instructions:\n"
    "1. Base the evaluation ONLY on the two documents provided.\n"
    "2. List at most 6 strengths and at most 5 gaps, each one short sentence.\n"
    "3. Return your output strictly as a valid JSON object.\n"
    "4. Use the following format:\n\n"
    "{\n"
    "  \"matchScore\": 75,\n"
    "  \"strengths\": [\"5 years of React experience\"],\n"
    "  \"gaps\": [\"No Docker experience mentioned\"],\n"
    "  \"overallAssessment\": \"Good match for this role...\"\n"
    "}\n\n"
    "matchScore must be an integer between 0 and 100.\n"
    "Do not include any additional text, explanations, or formatting outside the JSON."
)

EXTRACT_RESUME_INFO_SYSTEM_PROMPT = (
    "You are a resume parsing AI. Extract key information from the resume provided to you.\n\n"
    "Instructions:\n"
    "1. `skills`: technical and professional skills, copied as written (at most 15).\n"
    "2. `experience`: job titles with company names (at most 3, most recent first).\n"
    "3. `education`: degrees with institutions.\n"
    "4. `summary`: one sentence summarizing the candidate.\n"
    "5. Return your output strictly as a valid JSON object using the format:\n\n"
    "{\n"
    "  \"skills\": [\"Python\", \"React\"],\n"
    "  \"experience\": [\"Senior Software Engineer at Acme\"],\n"
    "  \"education\": [\"BSc Computer Science, MIT\"],\n"
    "  \"summary\": \"Software engineer with 6 years of experience...\"\n"
    "}\n\n"
    "Do not include any additional text, explanations, or formatting outside the JSON."
)


class LLMAnalysisEngine(AnalysisEngine):
    """
    LLM-backed analysis engine.

    Structured output is requested as JSON and normalized field by field, so a
    malformed or partial completion still yields a valid MatchAnalysis /
    ResumeInfo. Provider failures are logged and answered with the fallback
    values of `AnalysisEngine`.

    Args:
        llm_client (LLMClient): An initialized LLMClient (OpenAI, Gemini or Anthropic).
        temperature (float): Sampling temperature for both prompts.
    """

    STRATEGY_NAME = "llm"

    def __init__(self, llm_client: LLMClient, temperature: float = 0.0):
        if not isinstance(llm_client, LLMClient):
            raise TypeError("llm_client must be an instance of LLMClient.")
        self.llm_client = llm_client
        self.temperature = temperature

    def analyze_match(self, resume_text: str, job_description_text: str) -> MatchAnalysis:
        user_prompt = (
            f"RESUME:\n{resume_text}\n\n"
            f"JOB DESCRIPTION:\n{job_description_text}"
        )
        llm_response = self._query_json("analyze_match", ANALYZE_MATCH_SYSTEM_PROMPT, user_prompt)
        if llm_response is None:
            return self.fallback_analysis()
        return normalize_match_analysis(llm_response)

    def extract_resume_info(self, resume_text: str) -> ResumeInfo:
        llm_response = self._query_json(
            "extract_resume_info",
            EXTRACT_RESUME_INFO_SYSTEM_PROMPT,
            f"RESUME:\n{resume_text}",
        )
        if llm_response is None:
            return self.fallback_resume_info()
        return normalize_resume_info(llm_response)

    def _query_json(self, function_name: str, system_prompt: str, user_prompt: str) -> Optional[object]:
        """
        Run one JSON query. Returns None (after logging) if the provider fails.
        """
        # Selects the canned response when the client runs in test mode
        self.llm_client.function_name = function_name
        try:
            return self.llm_client.query(
                system_prompt=system_prompt,
                user_prompt=user_prompt,
                temperature=self.temperature,
                expect_json=True,
            )
        except LLMError as e:
            analysis_logger.error(f"`{function_name}` failed, returning fallback values: {e}")
            return None
