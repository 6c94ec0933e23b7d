"""test_strategy_factory.py
Test the strategy factory functions.
"""
from unittest.mock import MagicMock

import pytest

from resume_match.exceptions import LLMConfigError, StrategyConfigError
from resume_match.llm.llm_client import LLMClient
from resume_match.search.embeddings.embedding_client import EmbeddingClient
from resume_match.search.keyword_search_index import KeywordSearchIndex
from resume_match.search.vector_search_index import VectorSearchIndex
from resume_match.analysis.rule_based_analysis_engine import RuleBasedAnalysisEngine
from resume_match.analysis.llm_analysis_engine import LLMAnalysisEngine
from resume_match.conversation.answer_generator import LLMAnswerGenerator, TemplateAnswerGenerator
from resume_match.strategy_factory import (
    ANALYSIS_STRATEGIES,
    CHAT_STRATEGIES,
    SEARCH_STRATEGIES,
    build_analysis_engine,
    build_answer_generator,
    build_search_index,
    describe_strategies,
)


def test_strategy_lists():
    assert SEARCH_STRATEGIES == ["keyword", "embedding"]
    assert ANALYSIS_STRATEGIES == ["rule", "llm"]
    assert CHAT_STRATEGIES == ["template", "llm"]


class TestOfflineStrategies:
    def test_keyword_search(self):
        assert isinstance(build_search_index("keyword"), KeywordSearchIndex)

    def test_rule_analysis(self):
        assert isinstance(build_analysis_engine("rule"), RuleBasedAnalysisEngine)

    def test_template_chat(self):
        assert isinstance(build_answer_generator("template"), TemplateAnswerGenerator)


class TestProviderStrategies:
    def test_embedding_search_with_client(self):
        client = EmbeddingClient(provider="openai", test_mode=True)
        index = build_search_index("embedding", embedding_client=client)
        assert isinstance(index, VectorSearchIndex)
        assert index.embedding_client is client

    def test_llm_strategies_reuse_client(self):
        client = MagicMock(spec=LLMClient)
        assert build_analysis_engine("llm", llm_client=client).llm_client is client
        assert build_answer_generator("llm", llm_client=client).llm_client is client

    @pytest.mark.usefixtures("FORCE_MOCK_LLM_RESPONSES")
    def test_clients_built_when_missing(self):
        assert isinstance(build_search_index("embedding"), VectorSearchIndex)
        assert isinstance(build_analysis_engine("llm"), LLMAnalysisEngine)
        assert isinstance(build_answer_generator("llm"), LLMAnswerGenerator)

    def test_llm_strategy_without_key_fails_fast(self, monkeypatch):
        for key_name in ("OPENAI_API_KEY", "GOOGLE_API_KEY", "ANTHROPIC_API_KEY"):
            monkeypatch.delenv(key_name, raising=False)
        with pytest.raises(LLMConfigError):
            build_analysis_engine("llm")


@pytest.mark.parametrize("builder,component", [
    (build_search_index, "search"),
    (build_analysis_engine, "analysis"),
    (build_answer_generator, "chat"),
])
def test_unknown_strategy_raises(builder, component):
    with pytest.raises(StrategyConfigError) as exc_info:
        builder("magic")
    assert exc_info.value.component == component
    assert exc_info.value.strategy == "magic"


def test_describe_strategies():
    descriptions = describe_strategies(search="keyword", analysis="rule", chat="template")
    assert descriptions["search"].startswith("TF-IDF")
    assert descriptions["analysis"].startswith("Rule-based")
    assert describe_strategies("custom", "rule", "llm")["search"] == "custom"
