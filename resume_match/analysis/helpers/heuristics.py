"""heuristics.py
Pure text heuristics behind the rule-based analysis engine.

Every function maps text (or already extracted signals) to a plain value so
each rule can be tested on its own.
"""
import math
import re
from datetime import date
from typing import List, Optional, Sequence, Tuple

from resume_match.config import SCREENER_DEFAULTS
from resume_match.analysis.vocabularies import (
    ARCHITECTURE_KEYWORDS,
    ASSESSMENT_TEMPLATES,
    COMPUTER_SCIENCE_KEYWORDS,
    DEGREE_KEYWORDS,
    EDUCATION_REQUIREMENT_KEYWORDS,
    SENIORITY_KEYWORDS,
    SKILL_VOCABULARY,
)

# Score weights
SKILL_WEIGHT = 0.6
EXPERIENCE_WEIGHT = 0.3
EDUCATION_WEIGHT = 0.1

# Used when a job description names none of the known skills
NO_REQUIRED_SKILLS_SCORE = 50.0
NO_EXPERIENCE_SCORE = 30

YEARS_REQUIRED_REGEX = re.compile(r"(\d+)\+?\s*(?:years?|yrs?)", re.IGNORECASE)
YEARS_EXPERIENCE_REGEX = re.compile(
    r"(\d+)\+?\s*(?:years?|yrs?)\s*(?:of\s+)?(?:experience|exp)", re.IGNORECASE
)
# Years must look like 19xx/20xx; other digit pairs are usually phone numbers
DATE_RANGE_REGEX = re.compile(
    r"\b((?:19|20)\d{2})\s*[-–]\s*(?:present|current|(?:19|20)\d{2})\b", re.IGNORECASE
)
BACHELOR_REGEXES = (re.compile(r"bachelor[^.\n]*", re.IGNORECASE), re.compile(r"\bb\.?s\.?\s+[^.\n]*", re.IGNORECASE))
MASTER_REGEXES = (re.compile(r"\bmaster[^.\n]*", re.IGNORECASE), re.compile(r"\bm\.?s\.?\s+[^.\n]*", re.IGNORECASE))
JOB_TITLE_REGEX = re.compile(
    r"(?:senior|lead|staff|junior)?\s*(?:software|full[\s-]?stack|backend|frontend|web)\s*(?:engineer|developer)",
    re.IGNORECASE,
)


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive values (Python's round() uses banker's rounding)."""
    return int(math.floor(value + 0.5))


# ----------------------
# SKILLS
# ----------------------
def extract_skills(text: str, vocabulary: Sequence[str] = SKILL_VOCABULARY) -> List[str]:
    """Return every vocabulary term found as a substring of `text`, in vocabulary order."""
    lowered = text.lower()
    return [skill for skill in vocabulary if skill in lowered]


def split_matching_skills(
    required_skills: Sequence[str],
    resume_skills: Sequence[str],
    resume_text: str,
) -> Tuple[List[str], List[str]]:
    """
    Split the job's required skills into (matching, missing) based on the
    resume's extracted skills or its raw text.
    """
    lowered_resume = resume_text.lower()
    matching, missing = [], []
    for skill in required_skills:
        if skill in resume_skills or skill in lowered_resume:
            matching.append(skill)
        else:
            missing.append(skill)
    return matching, missing


def calculate_skill_score(matching_skills: Sequence[str], required_skills: Sequence[str]) -> float:
    if not required_skills:
        return NO_REQUIRED_SKILLS_SCORE
    return 100.0 * len(matching_skills) / len(required_skills)


# ----------------------
# EXPERIENCE
# ----------------------
def extract_years_required(job_description_text: str) -> int:
    """Return the first "N years" figure in a job description, or 0."""
    match = YEARS_REQUIRED_REGEX.search(job_description_text)
    return int(match.group(1)) if match else 0


def extract_years_experience(resume_text: str, current_year: Optional[int] = None) -> int:
    """
    Return the candidate's years of experience.

    Uses an explicit "N years of experience" statement when present; otherwise
    counts from the earliest start year of ranges like "2019 - present".
    Returns 0 when neither is found.
    """
    match = YEARS_EXPERIENCE_REGEX.search(resume_text)
    if match:
        return int(match.group(1))

    current_year = current_year or date.today().year
    start_years = [
        int(year) for year in DATE_RANGE_REGEX.findall(resume_text)
        if int(year) <= current_year
    ]
    if start_years:
        return current_year - min(start_years)

    return 0


def calculate_experience_score(candidate_years: int, required_years: int) -> int:
    if required_years == 0 or candidate_years >= required_years:
        return 100
    if candidate_years == 0:
        return NO_EXPERIENCE_SCORE
    return round_half_up(100 * candidate_years / required_years)


# ----------------------
# EDUCATION
# ----------------------
def has_education_requirement(job_description_text: str) -> bool:
    lowered = job_description_text.lower()
    return any(keyword in lowered for keyword in EDUCATION_REQUIREMENT_KEYWORDS)


def check_education(resume_text: str, job_description_text: str) -> bool:
    """True if the job asks for no education or the resume mentions a degree."""
    if not has_education_requirement(job_description_text):
        return True
    lowered = resume_text.lower()
    return any(keyword in lowered for keyword in DEGREE_KEYWORDS)


def extract_education(resume_text: str) -> List[str]:
    """Return the first bachelor and first master degree lines found in the resume."""
    education = []
    for regexes in (BACHELOR_REGEXES, MASTER_REGEXES):
        for regex in regexes:
            match = regex.search(resume_text)
            if match:
                education.append(match.group(0).strip())
                break
    return education


# ----------------------
# SCORING
# ----------------------
def calculate_match_score(skill_score: float, experience_score: float, education_score: float) -> int:
    """Weighted 60/30/10 blend of the three scores, clamped to [0, 100]."""
    score = round_half_up(
        skill_score * SKILL_WEIGHT
        + experience_score * EXPERIENCE_WEIGHT
        + education_score * EDUCATION_WEIGHT
    )
    return max(0, min(100, score))


# ----------------------
# NATURAL LANGUAGE OUTPUT
# ----------------------
def generate_strengths(
    matching_skills: Sequence[str],
    candidate_years: int,
    resume_text: str,
    limit: int = SCREENER_DEFAULTS.MAX_STRENGTHS,
) -> List[str]:
    lowered = resume_text.lower()
    strengths = []

    if len(matching_skills) >= 5:
        strengths.append(f"Strong technical skill set with {', '.join(matching_skills[:5])}")

    if candidate_years >= 5:
        strengths.append(f"{candidate_years}+ years of professional experience")
    elif candidate_years >= 3:
        strengths.append(f"{candidate_years} years of relevant experience")

    if "bachelor" in lowered or "degree" in lowered:
        if any(keyword in lowered for keyword in COMPUTER_SCIENCE_KEYWORDS):
            strengths.append("Computer Science degree")
        else:
            strengths.append("University degree")

    if any(keyword in lowered for keyword in SENIORITY_KEYWORDS):
        strengths.append("Senior-level experience")

    if any(keyword in lowered for keyword in ARCHITECTURE_KEYWORDS):
        strengths.append("System design and architecture experience")

    return strengths[:limit]


def generate_gaps(
    missing_skills: Sequence[str],
    required_years: int,
    candidate_years: int,
    has_education: bool,
    limit: int = SCREENER_DEFAULTS.MAX_GAPS,
) -> List[str]:
    gaps = [f"No {skill} experience mentioned" for skill in missing_skills[:3]]

    if required_years > 0 and candidate_years < required_years:
        gaps.append(
            f"Experience ({candidate_years} years) below requirement ({required_years}+ years)"
        )

    if not has_education:
        gaps.append("Education requirement not clearly met")

    return gaps[:limit]


def generate_assessment(match_score: int, strengths_count: int, gaps_count: int) -> str:
    """Pick the assessment sentence for the score band `match_score` falls in."""
    for minimum_score, template in ASSESSMENT_TEMPLATES:
        if match_score >= minimum_score:
            return template.format(strengths=strengths_count, gaps=gaps_count)
    return ASSESSMENT_TEMPLATES[-1][1].format(strengths=strengths_count, gaps=gaps_count)


def extract_job_titles(resume_text: str, limit: int = 3) -> List[str]:
    """Return up to `limit` distinct engineering job titles mentioned in the resume."""
    titles = []
    for match in JOB_TITLE_REGEX.finditer(resume_text):
        title = " ".join(match.group(0).split())
        if title and title.lower() not in (t.lower() for t in titles):
            titles.append(title)
        if len(titles) >= limit:
            break
    return titles


def build_summary(candidate_years: int, skills: Sequence[str]) -> str:
    prefix = (
        f"Professional with {candidate_years}+ years of experience"
        if candidate_years > 0
        else "Experienced professional"
    )
    if skills:
        return f"{prefix} and skills in {', '.join(skills[:5])}"
    return prefix
