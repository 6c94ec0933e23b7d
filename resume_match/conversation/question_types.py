"""question_types.py
Keyword table used to classify chat questions for template answers.
"""
from typing import Dict, List, Literal

QuestionType = Literal[
    "work_authorization",
    "education",
    "work_history",
    "experience",
    "skills",
    "generic",
]

# Checked in insertion order; the first type with a keyword in the question wins.
# Work authorization goes first because its questions usually also say "work".
QUESTION_TYPE_KEYWORDS: Dict[str, List[str]] = {
    "work_authorization": [
        "visa", "sponsor", "authorization", "authorized", "citizen",
        "work permit", "green card", "eligible to work", "right to work",
    ],
    "education": [
        "education", "degree", "university", "college", "school", "studied",
        "graduate", "bachelor", "master", "phd", "certification",
    ],
    "work_history": [
        "work history", "worked", "companies", "company", "employer",
        "previous job", "previous role", "current role", "job title", "position",
    ],
    "experience": [
        "experience", "years", "how long", "seniority", "senior",
    ],
    "skills": [
        "skill", "technolog", "know", "proficient", "familiar", "language",
        "framework", "tool", "stack",
    ],
}


def detect_question_type(question: str) -> QuestionType:
    """Return the first question type whose keywords appear in `question`, else "generic"."""
    lowered = question.lower()
    for question_type, keywords in QUESTION_TYPE_KEYWORDS.items():
        if any(keyword in lowered for keyword in keywords):
            return question_type
    return "generic"
