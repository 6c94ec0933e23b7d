"""
embedding_client.py

LangChain-based client for text embedding providers.
Supports OpenAI and Google (Gemini).
Includes configuration validation and an optional deterministic test mode.
"""
import os
from typing import List, Optional

from dotenv import load_dotenv

from resume_match.config import SCREENER_DEFAULTS
from resume_match.exceptions import EmbeddingConfigError, EmbeddingError
from resume_match.test_helpers.embedding_test_helpers import create_mock_embedding

SUPPORTED_EMBEDDING_PROVIDERS = ["openai", "google"]
load_dotenv()

class EmbeddingClient:
    """
    A provider-agnostic client for turning text into fixed-length vectors through
    the LangChain embeddings interface. Must be "initialized" using
    `initialize_client()` before it can embed text (unless `test_mode` is set).

    Attributes:
        provider (str): Name of the embedding provider ("openai" or "google").
        model (str): Embedding model identifier. Defaults to the provider's model
            in SCREENER_DEFAULTS.
        api_key (Optional[str]): Provider API key pulled from the environment.
        test_mode (bool): If True, returns deterministic mock vectors instead of
            calling the provider.
        client (Any): Initialized LangChain embeddings client.

    Raises:
        EmbeddingConfigError: If the provider, model or API key is missing or invalid.
        EmbeddingError: If the client cannot be initialized or an embedding call fails.

    Example:
        >>> client = EmbeddingClient(provider="openai")
        >>> client.initialize_client()
        >>> vector = client.embed("Senior Python developer")
    """

    def __init__(
        self,
        provider: Optional[str] = SCREENER_DEFAULTS.EMBEDDING_PROVIDER,
        model: Optional[str] = None,
        test_mode: bool = False,
        test_dimensions: int = 64,
    ):
        self.provider = provider
        self.test_mode = test_mode
        self.test_dimensions = test_dimensions

        self._resolve_provider()
        self._resolve_model(model)
        self._resolve_api_key()

        # Only fill client when `initialize_client()` is run
        self.client = None

    # --- Init helpers ---
    def _resolve_provider(self) -> None:
        if self.provider not in SUPPORTED_EMBEDDING_PROVIDERS:
            raise EmbeddingConfigError(
                variable_name="EMBEDDING_PROVIDER",
                message=(
                    f"Unsupported embedding provider `{self.provider}`. "
                    f"Choices are: {SUPPORTED_EMBEDDING_PROVIDERS}"
                )
            )

    def _resolve_model(self, model: Optional[str]) -> None:
        default_models = {
            "openai": SCREENER_DEFAULTS.OPENAI_EMBEDDING_MODEL_ID,
            "google": SCREENER_DEFAULTS.GOOGLE_EMBEDDING_MODEL_ID,
        }
        resolved_model = model or default_models.get(self.provider)
        if not resolved_model:
            raise EmbeddingConfigError(variable_name=f"{self.provider}_EMBEDDING_MODEL_ID")
        self.model = resolved_model

    def _resolve_api_key(self) -> None:
        """
        Load the API key for the selected provider from environment variables.
        Test mode never reaches a provider so it does not require a key.
        """
        api_key_map = {
            "openai": "OPENAI_API_KEY",
            "google": "GOOGLE_API_KEY",
        }
        api_key = os.getenv(api_key_map[self.provider])
        if (not api_key or api_key == "<REPLACE_ME>") and not self.test_mode:
            raise EmbeddingConfigError(
                variable_name=api_key_map[self.provider],
                message=(
                    f"You must set a `{self.provider}` API key in your environment variables "
                    "to generate embeddings."
                )
            )
        self.api_key = api_key

    def initialize_client(self) -> None:
        """
        Initialize the LangChain embeddings client for the selected provider.
        No API call is made during initialization.

        Raises:
            EmbeddingError: If the client cannot be initialized.
        """
        if self.test_mode:
            return

        try:
            if self.provider == "openai":
                from langchain_openai import OpenAIEmbeddings
                self.client = OpenAIEmbeddings(
                    model=self.model,
                    openai_api_key=self.api_key,
                )
            elif self.provider == "google":
                from langchain_google_genai import GoogleGenerativeAIEmbeddings
                self.client = GoogleGenerativeAIEmbeddings(
                    model=self.model,
                    google_api_key=self.api_key,
                )
        except Exception as e:
            raise EmbeddingError(
                message="Failed to initialize embedding client",
                provider=self.provider,
                model=self.model,
                original_exception=e,
            )

    # --- EMBEDDING ---
    def embed(self, text: str) -> List[float]:
        """
        Embed a single text.

        Raises:
            EmbeddingError: If the provider call fails or returns an empty vector.
        """
        if self.test_mode:
            return create_mock_embedding(text, dimensions=self.test_dimensions)
        self._require_client()

        try:
            vector = self.client.embed_query(text)
        except Exception as e:
            raise EmbeddingError(provider=self.provider, model=self.model, original_exception=e)

        if not vector:
            raise EmbeddingError(
                message="Embedding provider returned an empty vector",
                provider=self.provider,
                model=self.model,
            )
        return list(vector)

    def embed_batch(self, texts: List[str]) -> List[List[float]]:
        """
        Embed several texts with one provider call.

        Raises:
            EmbeddingError: If the provider call fails or returns the wrong number of vectors.
        """
        if not texts:
            return []
        if self.test_mode:
            return [create_mock_embedding(text, dimensions=self.test_dimensions) for text in texts]
        self._require_client()

        try:
            vectors = self.client.embed_documents(texts)
        except Exception as e:
            raise EmbeddingError(
                message="Failed to generate embeddings",
                provider=self.provider,
                model=self.model,
                original_exception=e,
            )

        if len(vectors) != len(texts):
            raise EmbeddingError(
                message=f"Expected {len(texts)} embeddings but received {len(vectors)}",
                provider=self.provider,
                model=self.model,
            )
        return [list(vector) for vector in vectors]

    def _require_client(self) -> None:
        if self.client is None:
            raise EmbeddingError(
                message="Embedding client has not been initialized",
                provider=self.provider,
                model=self.model,
            )
