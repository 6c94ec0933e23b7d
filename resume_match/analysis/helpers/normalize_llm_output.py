"""normalize_llm_output.py
Turns loosely structured LLM JSON into MatchAnalysis / ResumeInfo values.

LLMs regularly return missing keys, wrong types or plain prose where JSON was
asked for. Nothing here raises; every field degrades to a safe default.
"""
import math
from typing import Any, List

from resume_match.models import MatchAnalysis, ResumeInfo
from resume_match.analysis.analysis_engine import FALLBACK_ASSESSMENT, FALLBACK_SUMMARY

DEFAULT_MATCH_SCORE = 50


def _first_present(data: dict, *keys: str) -> Any:
    """Return the value of the first key present in `data` (camelCase or snake_case)."""
    for key in keys:
        if key in data:
            return data[key]
    return None


def normalize_match_score(value: Any) -> int:
    """Coerce `value` to an int clamped to [0, 100]; 50 if it is not numeric."""
    if isinstance(value, bool):
        return DEFAULT_MATCH_SCORE
    if isinstance(value, str):
        try:
            value = float(value.strip().rstrip("%"))
        except ValueError:
            return DEFAULT_MATCH_SCORE
    if not isinstance(value, (int, float)) or math.isnan(value) or math.isinf(value):
        return DEFAULT_MATCH_SCORE
    return max(0, min(100, int(round(value))))


def coerce_string_list(value: Any) -> List[str]:
    """Keep the non-empty string items of a list; anything else becomes []."""
    if not isinstance(value, list):
        return []
    items = []
    for item in value:
        if isinstance(item, (str, int, float)) and not isinstance(item, bool):
            text = str(item).strip()
            if text:
                items.append(text)
    return items


def coerce_text(value: Any, fallback: str) -> str:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return fallback


def normalize_match_analysis(llm_response: Any) -> MatchAnalysis:
    """Build a MatchAnalysis from a parsed LLM response (dict expected)."""
    if not isinstance(llm_response, dict):
        llm_response = {}

    return MatchAnalysis(
        match_score=normalize_match_score(_first_present(llm_response, "matchScore", "match_score")),
        strengths=coerce_string_list(llm_response.get("strengths")),
        gaps=coerce_string_list(llm_response.get("gaps")),
        overall_assessment=coerce_text(
            _first_present(llm_response, "overallAssessment", "overall_assessment"),
            FALLBACK_ASSESSMENT,
        ),
    )


def normalize_resume_info(llm_response: Any) -> ResumeInfo:
    """Build a ResumeInfo from a parsed LLM response (dict expected)."""
    if not isinstance(llm_response, dict):
        llm_response = {}

    return ResumeInfo(
        skills=coerce_string_list(llm_response.get("skills")),
        experience=coerce_string_list(llm_response.get("experience")),
        education=coerce_string_list(llm_response.get("education")),
        summary=coerce_text(llm_response.get("summary"), FALLBACK_SUMMARY),
    )
