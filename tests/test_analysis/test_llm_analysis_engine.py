"""test_llm_analysis_engine.py
Test LLMAnalysisEngine against canned LLMClient responses.
"""
from unittest.mock import MagicMock

import pytest

from resume_match.exceptions import LLMQueryError
from resume_match.llm.llm_client import LLMClient
from resume_match.analysis.analysis_engine import FALLBACK_ASSESSMENT, FALLBACK_SUMMARY
from resume_match.analysis.llm_analysis_engine import LLMAnalysisEngine
from resume_match.test_helpers.dummy_variables.dummy_documents import (
    SAMPLE_JOB_DESCRIPTION,
    SAMPLE_RESUME,
)


def make_engine(response_type="success"):
    llm_client = LLMClient(provider="openai", test_response_type=response_type)
    llm_client.initialize_client()
    return LLMAnalysisEngine(llm_client)


@pytest.mark.usefixtures("FORCE_MOCK_LLM_RESPONSES")
class TestLLMAnalysisEngine:
    def test_analyze_match_success(self):
        analysis = make_engine().analyze_match(SAMPLE_RESUME, SAMPLE_JOB_DESCRIPTION)
        assert analysis.match_score == 78
        assert analysis.strengths == [
            "5 years of React experience",
            "Bachelor of Science in Computer Science",
        ]
        assert analysis.gaps == ["No Docker experience mentioned"]
        assert analysis.overall_assessment.startswith("Good match")

    def test_extract_resume_info_success(self):
        info = make_engine().extract_resume_info(SAMPLE_RESUME)
        assert info.skills == ["React", "Node.js", "AWS"]
        assert info.experience == ["Software Engineer at Acme Corp"]
        assert info.summary.startswith("Software engineer with 5 years")

    def test_function_name_set_per_call(self):
        engine = make_engine()
        engine.analyze_match(SAMPLE_RESUME, SAMPLE_JOB_DESCRIPTION)
        assert engine.llm_client.function_name == "analyze_match"
        engine.extract_resume_info(SAMPLE_RESUME)
        assert engine.llm_client.function_name == "extract_resume_info"

    @pytest.mark.parametrize("response_type", ["failed", "unexpected_json"])
    def test_malformed_json_is_normalized(self, response_type):
        engine = make_engine(response_type)
        analysis = engine.analyze_match(SAMPLE_RESUME, SAMPLE_JOB_DESCRIPTION)
        assert analysis.match_score == 50
        assert analysis.strengths == []
        assert analysis.gaps == []
        assert analysis.overall_assessment == FALLBACK_ASSESSMENT

        info = engine.extract_resume_info(SAMPLE_RESUME)
        assert info.skills == []
        assert info.summary == FALLBACK_SUMMARY

    def test_prose_instead_of_json(self):
        engine = make_engine("not_json")
        with pytest.warns(UserWarning):
            analysis = engine.analyze_match(SAMPLE_RESUME, SAMPLE_JOB_DESCRIPTION)
        assert analysis.match_score == 50
        assert analysis.overall_assessment == FALLBACK_ASSESSMENT


def test_provider_failure_returns_fallback():
    llm_client = MagicMock(spec=LLMClient)
    llm_client.query.side_effect = LLMQueryError(provider="openai", additional_message="timeout")
    engine = LLMAnalysisEngine(llm_client)

    assert engine.analyze_match(SAMPLE_RESUME, SAMPLE_JOB_DESCRIPTION) == LLMAnalysisEngine.fallback_analysis()
    assert engine.extract_resume_info(SAMPLE_RESUME) == LLMAnalysisEngine.fallback_resume_info()


def test_prompts_carry_both_documents():
    llm_client = MagicMock(spec=LLMClient)
    llm_client.query.return_value = {"matchScore": 90}
    engine = LLMAnalysisEngine(llm_client, temperature=0.2)

    assert engine.analyze_match("RESUME BODY", "JOB BODY").match_score == 90
    kwargs = llm_client.query.call_args.kwargs
    assert "RESUME BODY" in kwargs["user_prompt"]
    assert "JOB BODY" in kwargs["user_prompt"]
    assert kwargs["expect_json"] is True
    assert kwargs["temperature"] == 0.2


def test_wrong_client_type_raises():
    with pytest.raises(TypeError):
        LLMAnalysisEngine(llm_client="not-a-client")
