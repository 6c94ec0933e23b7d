"""llm_client_test_helpers.py
Canned LLM responses returned by LLMClient in test mode.
"""
from typing import Literal
import json
import random
import uuid

from langchain_core.messages import AIMessage

MockFunctionName = Literal["analyze_match", "extract_resume_info", "answer_question"]

expected_test_responses = {
    "analyze_match": {
        "success": {
            "matchScore": 78,
            "strengths": [
                "5 years of React experience",
                "Bachelor of Science in Computer Science",
            ],
            "gaps": ["No Docker experience mentioned"],
            "overallAssessment": (
                "Good match for this role. The candidate covers most of the required "
                "stack and exceeds the experience requirement."
            ),
        },
        "failed": {"matchScore": "unknown", "strengths": "none", "gaps": None},
        "unexpected_json": {"score": 91, "summary": "Great candidate!"},
        "not_json": "The candidate looks like a reasonable fit.",
    },
    "extract_resume_info": {
        "success": {
            "skills": ["React", "Node.js", "AWS"],
            "experience": ["Software Engineer at Acme Corp"],
            "education": ["Bachelor of Science in Computer Science"],
            "summary": "Software engineer with 5 years of experience in React and Node.js.",
        },
        "failed": {"skills": [], "experience": [], "education": [], "summary": ""},
        "unexpected_json": {"candidate": {"name": "Jane Doe"}},
        "not_json": "Jane is a software engineer.",
    },
    "answer_question": {
        "success": "The candidate has 5 years of experience working with React and Node.js.",
        "failed": "This information is not available in the resume.",
        "unexpected_json": {"answer": "5 years"},
        "not_json": "5 years.",
    },
}

def create_mock_llm_response(
    function_name: MockFunctionName,
    provider: Literal["openai", "google", "anthropic"],
    response_type: Literal["success", "failed", "unexpected_json", "not_json"] = "success"
) -> AIMessage:
    """
    Create a simulated AIMessage to mimic LLM responses with realistic structure per provider.
    """
    try:
        content_value = expected_test_responses[function_name][response_type]
    except KeyError:
        content_value = "Generic response"

    # Convert dict responses to JSON string; leave strings as-is
    content = json.dumps(content_value) if isinstance(content_value, dict) else content_value

    # --- token counts ---
    input_tokens = random.randint(50, 150)
    output_tokens = random.randint(20, 100)
    total_tokens = input_tokens + output_tokens

    # --- build response metadata depending on provider ---
    if provider == "openai":
        response_metadata = {
            "id": f"chatcmpl-{uuid.uuid4().hex[:24]}",
            "model_name": "gpt-4o-mini",
            "finish_reason": "stop",
            "token_usage": {
                "prompt_tokens": input_tokens,
                "completion_tokens": output_tokens,
                "total_tokens": total_tokens
            }
        }
    elif provider == "google":
        response_metadata = {
            "model_name": "gemini-2.5-flash",
            "finish_reason": "STOP",
            "prompt_feedback": {"block_reason": 0, "safety_ratings": []},
        }
    elif provider == "anthropic":
        response_metadata = {
            "id": str(uuid.uuid4()),
            "model": "claude-haiku-4-5",
            "stop_reason": "end_turn",
            "usage": {
                "input_tokens": input_tokens,
                "output_tokens": output_tokens,
                "total_tokens": total_tokens
            }
        }
    else:
        raise ValueError(f"Unknown llm provider: {provider}")

    return AIMessage(
        content=content,
        additional_kwargs={},
        response_metadata=response_metadata,
        id=str(uuid.uuid4()),
        usage_metadata={
            "input_tokens": input_tokens,
            "output_tokens": output_tokens,
            "total_tokens": total_tokens
        }
    )
