"""strategy_factory.py
Builds the search, analysis and chat components named in SCREENER_DEFAULTS.

Strategies are picked once at process start; a component that needs a
provider client gets one built (and initialized) here unless it is passed in.
"""
from typing import Dict, Optional

from resume_match.config import SCREENER_DEFAULTS
from resume_match.exceptions import StrategyConfigError
from resume_match.llm.llm_client import LLMClient
from resume_match.llm.llm_helpers import initialize_llm_if_needed
from resume_match.search.search_index import SearchIndex
from resume_match.search.keyword_search_index import KeywordSearchIndex
from resume_match.search.vector_search_index import VectorSearchIndex
from resume_match.search.embeddings.embedding_client import EmbeddingClient
from resume_match.analysis.analysis_engine import AnalysisEngine
from resume_match.analysis.rule_based_analysis_engine import RuleBasedAnalysisEngine
from resume_match.analysis.llm_analysis_engine import LLMAnalysisEngine
from resume_match.conversation.answer_generator import (
    AnswerGenerator,
    LLMAnswerGenerator,
    TemplateAnswerGenerator,
)

SEARCH_STRATEGIES = [KeywordSearchIndex.STRATEGY_NAME, VectorSearchIndex.STRATEGY_NAME]
ANALYSIS_STRATEGIES = [RuleBasedAnalysisEngine.STRATEGY_NAME, LLMAnalysisEngine.STRATEGY_NAME]
CHAT_STRATEGIES = [TemplateAnswerGenerator.STRATEGY_NAME, LLMAnswerGenerator.STRATEGY_NAME]

STRATEGY_DESCRIPTIONS: Dict[str, Dict[str, str]] = {
    "search": {
        "keyword": "TF-IDF style keyword search (no API needed)",
        "embedding": "Embedding vectors ranked by cosine similarity",
    },
    "analysis": {
        "rule": "Rule-based matching (keyword + pattern recognition)",
        "llm": "LLM-generated match analysis",
    },
    "chat": {
        "template": "Template-based responses with context retrieval",
        "llm": "LLM answers grounded in retrieved resume chunks",
    },
}


def build_search_index(
    strategy: str = SCREENER_DEFAULTS.SEARCH_STRATEGY,
    embedding_client: Optional[EmbeddingClient] = None,
) -> SearchIndex:
    """
    Raises:
        StrategyConfigError: If `strategy` is not one of SEARCH_STRATEGIES.
        EmbeddingConfigError: If the embedding strategy is chosen without a usable provider.
    """
    if strategy == KeywordSearchIndex.STRATEGY_NAME:
        return KeywordSearchIndex()

    if strategy == VectorSearchIndex.STRATEGY_NAME:
        if embedding_client is None:
            embedding_client = EmbeddingClient()
            embedding_client.initialize_client()
        return VectorSearchIndex(embedding_client=embedding_client)

    raise StrategyConfigError(component="search", strategy=strategy, choices=SEARCH_STRATEGIES)


def build_analysis_engine(
    strategy: str = SCREENER_DEFAULTS.ANALYSIS_STRATEGY,
    llm_client: Optional[LLMClient] = None,
) -> AnalysisEngine:
    """
    Raises:
        StrategyConfigError: If `strategy` is not one of ANALYSIS_STRATEGIES.
        LLMConfigError: If the LLM strategy is chosen without a usable provider.
    """
    if strategy == RuleBasedAnalysisEngine.STRATEGY_NAME:
        return RuleBasedAnalysisEngine()

    if strategy == LLMAnalysisEngine.STRATEGY_NAME:
        llm_client = initialize_llm_if_needed(llm_client=llm_client, strategy=strategy)
        return LLMAnalysisEngine(llm_client=llm_client)

    raise StrategyConfigError(component="analysis", strategy=strategy, choices=ANALYSIS_STRATEGIES)


def build_answer_generator(
    strategy: str = SCREENER_DEFAULTS.CHAT_STRATEGY,
    llm_client: Optional[LLMClient] = None,
) -> AnswerGenerator:
    """
    Raises:
        StrategyConfigError: If `strategy` is not one of CHAT_STRATEGIES.
        LLMConfigError: If the LLM strategy is chosen without a usable provider.
    """
    if strategy == TemplateAnswerGenerator.STRATEGY_NAME:
        return TemplateAnswerGenerator()

    if strategy == LLMAnswerGenerator.STRATEGY_NAME:
        llm_client = initialize_llm_if_needed(llm_client=llm_client, strategy=strategy)
        return LLMAnswerGenerator(llm_client=llm_client)

    raise StrategyConfigError(component="chat", strategy=strategy, choices=CHAT_STRATEGIES)


def describe_strategies(search: str, analysis: str, chat: str) -> Dict[str, str]:
    """Human readable description of the active strategies."""
    return {
        "search": STRATEGY_DESCRIPTIONS["search"].get(search, search),
        "analysis": STRATEGY_DESCRIPTIONS["analysis"].get(analysis, analysis),
        "chat": STRATEGY_DESCRIPTIONS["chat"].get(chat, chat),
    }
