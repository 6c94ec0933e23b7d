"""answer_generator.py
Turns a question plus retrieved resume chunks into an answer.

Two strategies:
    - TemplateAnswerGenerator: keyword-classified question, templated sentence (offline)
    - LLMAnswerGenerator: grounded chat completion through LLMClient
"""
import re
from abc import ABC, abstractmethod
from typing import Sequence

from resume_match.models import ChatMessage, SearchResult
from resume_match.llm.llm_client import LLMClient
from resume_match.analysis.helpers import heuristics
from resume_match.conversation.question_types import detect_question_type

NOT_AVAILABLE_ANSWER = "This information is not available in the resume."
EXCERPT_LENGTH = 300

WORK_AUTHORIZATION_KEYWORDS = [
    "visa", "sponsorship", "authorized to work", "work authorization", "citizen",
    "green card", "permanent resident", "work permit",
]

ANSWER_QUESTION_SYSTEM_PROMPT = """You are an expert HR assistant helping recruiters evaluate candidates.

Your task is to answer questions about a candidate based ONLY on the information provided in their resume context below.

IMPORTANT RULES:
1. Base your answers ONLY on the provided resume context
2. If the information is not in the context, clearly state "This information is not available in the resume"
3. Be specific and cite relevant details from the resume
4. For yes/no questions, provide a clear answer followed by supporting evidence
5. Maintain a professional, objective tone
6. If you're uncertain, acknowledge it rather than guessing

RESUME CONTEXT:
{context}"""


class AnswerGenerator(ABC):
    """Abstract answer producer used by ConversationManager."""

    STRATEGY_NAME: str = ""

    @abstractmethod
    def generate(
        self,
        question: str,
        context: str,
        results: Sequence[SearchResult],
        history: Sequence[ChatMessage],
    ) -> str:
        """
        Answer `question`.

        Args:
            question (str): The user's question.
            context (str): Retrieved chunks formatted for grounding.
            results (Sequence[SearchResult]): The retrieval results behind `context`.
            history (Sequence[ChatMessage]): Previous messages of the conversation, oldest first.
        """
        pass


def _excerpt(text: str, limit: int = EXCERPT_LENGTH) -> str:
    text = " ".join(text.split())
    if len(text) <= limit:
        return text
    return text[:limit].rsplit(" ", 1)[0] + "..."


def _find_sentence(text: str, keywords: Sequence[str]) -> str | None:
    """Return the first line or sentence of `text` containing one of `keywords`."""
    for sentence in re.split(r"(?<=[.!?])\s+|\n+", text):
        lowered = sentence.lower()
        if any(keyword in lowered for keyword in keywords):
            return sentence.strip()
    return None


class TemplateAnswerGenerator(AnswerGenerator):
    """
    Answers from retrieved chunks alone, with no provider.

    The question is classified by `detect_question_type` and the matching
    template is filled with facts pulled from the retrieved text using the same
    heuristics as the rule-based analysis engine. When a template finds nothing
    to say the best matching chunk is quoted instead.
    """

    STRATEGY_NAME = "template"

    def generate(
        self,
        question: str,
        context: str,
        results: Sequence[SearchResult],
        history: Sequence[ChatMessage],
    ) -> str:
        if not results:
            return NOT_AVAILABLE_ANSWER

        retrieved_text = "\n".join(result.text for result in results)
        question_type = detect_question_type(question)

        answer = None
        if question_type == "education":
            answer = self._answer_education(retrieved_text)
        elif question_type == "experience":
            answer = self._answer_experience(retrieved_text)
        elif question_type == "skills":
            answer = self._answer_skills(retrieved_text)
        elif question_type == "work_history":
            answer = self._answer_work_history(retrieved_text)
        elif question_type == "work_authorization":
            return self._answer_work_authorization(retrieved_text)

        return answer or f"Based on the resume: {_excerpt(results[0].text)}"

    @staticmethod
    def _answer_education(text: str) -> str | None:
        education = heuristics.extract_education(text)
        if education:
            return f"The candidate's education includes: {'; '.join(education)}."
        return None

    @staticmethod
    def _answer_experience(text: str) -> str | None:
        years = heuristics.extract_years_experience(text)
        if years > 0:
            return f"Based on the resume, the candidate has {years} years of experience."
        return None

    @staticmethod
    def _answer_skills(text: str) -> str | None:
        skills = heuristics.extract_skills(text)
        if skills:
            return f"The candidate's skills include: {', '.join(skills[:10])}."
        return None

    @staticmethod
    def _answer_work_history(text: str) -> str | None:
        titles = heuristics.extract_job_titles(text)
        if titles:
            return f"The candidate has worked as: {', '.join(titles)}."
        return None

    @staticmethod
    def _answer_work_authorization(text: str) -> str:
        sentence = _find_sentence(text, WORK_AUTHORIZATION_KEYWORDS)
        if sentence:
            return f"Regarding work authorization, the resume states: {sentence}"
        return "Work authorization status is not mentioned in the resume."


class LLMAnswerGenerator(AnswerGenerator):
    """
    Answers through an LLM with `[system instruction with context] + history + [question]`.

    Provider errors propagate (as `LLMError`) so the caller can report them.
    """

    STRATEGY_NAME = "llm"

    def __init__(self, llm_client: LLMClient, temperature: float = 0.3):
        if not isinstance(llm_client, LLMClient):
            raise TypeError("llm_client must be an instance of LLMClient.")
        self.llm_client = llm_client
        self.temperature = temperature

    def generate(
        self,
        question: str,
        context: str,
        results: Sequence[SearchResult],
        history: Sequence[ChatMessage],
    ) -> str:
        self.llm_client.function_name = "answer_question"
        answer = self.llm_client.chat(
            system_prompt=ANSWER_QUESTION_SYSTEM_PROMPT.format(context=context),
            history=list(history),
            user_message=question,
            temperature=self.temperature,
        )
        return answer if isinstance(answer, str) else str(answer)

