"""conftest_helpers.py
Helper functions for `tests/conftest.py`
"""

from resume_match.llm.llm_client import LLMClient
from resume_match.search.embeddings.embedding_client import EmbeddingClient

FAKE_API_KEYS = {
    "OPENAI_API_KEY": "test-openai-key",
    "GOOGLE_API_KEY": "test-google-key",
    "ANTHROPIC_API_KEY": "test-anthropic-key",
}


# --------------------------------------------------------------
# SETUP MONKEYPATCH FIXTURES
# --------------------------------------------------------------
def apply_fake_api_keys(monkeypatch):
    """Set a placeholder API key for every supported provider."""
    for key_name, value in FAKE_API_KEYS.items():
        monkeypatch.setenv(key_name, value)


def apply_mock_llm_patch(monkeypatch):
    """
    Core patching logic for LLMClient and EmbeddingClient.

    Forces every client created afterwards to use mock responses by default:
      - `LLMClient(test_mode=True)`: canned AIMessages from `llm_client_test_helpers`
      - `EmbeddingClient(test_mode=True)`: hashed bag-of-words vectors

    Placeholder API keys are set so provider resolution succeeds.

    Notes:
      - Intended to be called from a fixture to control scope.
      - Does not yield; directly applies the monkeypatch.
    """
    apply_fake_api_keys(monkeypatch)

    original_llm_init = LLMClient.__init__
    original_embedding_init = EmbeddingClient.__init__

    def patched_llm_init(self, *args, **kwargs):
        kwargs.setdefault("test_mode", True)
        original_llm_init(self, *args, **kwargs)

    def patched_embedding_init(self, *args, **kwargs):
        kwargs.setdefault("test_mode", True)
        original_embedding_init(self, *args, **kwargs)

    monkeypatch.setattr(LLMClient, "__init__", patched_llm_init)
    monkeypatch.setattr(EmbeddingClient, "__init__", patched_embedding_init)
