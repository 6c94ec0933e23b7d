"""
llm_client.py

Universal LangChain-based client for multiple LLM providers.
Supports OpenAI, Google (Gemini) and Anthropic (Claude).
Includes configuration validation, flexible prompting, conversation history and
optional JSON parsing.
"""
import json
import os
import re
from typing import Optional, Any, List, Literal, Sequence
import warnings

from dotenv import load_dotenv

from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage

from resume_match.config import SCREENER_DEFAULTS
from resume_match.exceptions import (
    LLMConfigError,
    LLMInitializationError,
    LLMQueryError,
    LLMEmptyResponse
)
from resume_match.models import ChatMessage
from resume_match.test_helpers.llm_client_test_helpers import (
    create_mock_llm_response
)

SUPPORTED_PROVIDERS = ["openai", "google", "anthropic"]
load_dotenv()

class LLMClient:
    """
    A flexible, provider-agnostic client for interacting with large language models (LLMs)
    through the LangChain interface. Must be "initialized" using "initialize_client()" function
    before it can be used to make queries.

    Handles:
        - Pulling API keys from .env file
        - Resolving provider, model ID, and API keys
        - Validating configuration
        - Optional test mode with deterministic responses
        - Integration with LangChain clients (OpenAI, Gemini, Anthropic)

    Initialization uses defaults from `SCREENER_DEFAULTS` if values are not provided.

    Attributes:
        provider (Optional[str]): Name of the LLM provider (e.g., "openai"). Defaults
            to SCREENER_DEFAULTS.LLM_PROVIDER.
        model (Optional[str]): Model identifier or name. If none provided then will automatically match
            the provided provider to its SCREENER_DEFAULTS default model name.
        api_key (Optional[str]): Provider-specific API key used for authentication pulled from .env. Will
            automatically match to selected provider.
        function_name (Optional[str]): Name of the function or feature invoking the LLM. Selects the
            mock response in test mode.
        fallback_message (Optional[str]): Default message returned when the model response is empty.
        test_mode (bool): If True, returns mock responses instead of making real API calls.
        test_response_type (str): Mock response type used in test mode.
        client (Any): Initialized LangChain chat model client.

    Raises:
        LLMConfigError: If required environment variables are missing or invalid.
        LLMInitializationError: If the model client cannot be initialized.
        LLMQueryError: If a query fails during execution.

    Example:
        >>> client = LLMClient(provider="openai", model="gpt-4o-mini")
        >>> client.initialize_client()
        >>> response = client.query(
        ...     system_prompt="You are a helpful assistant.",
        ...     user_prompt="Summarize this paragraph.",
        ...     expect_json=False
        ... )
    """

    def __init__(
        self,
        provider: Optional[str] = SCREENER_DEFAULTS.LLM_PROVIDER,
        model: Optional[str] = None,
        function_name: Optional[str] = None,
        fallback_message: Optional[str] = None,
        test_mode: Optional[bool] = False,
        test_response_type: Literal["success", "failed", "unexpected_json", "not_json"] = "success",
    ):
        """Initialize an LLMClient instance and resolve provider-specific configuration.

        Args:
            provider (Optional[str], optional): Name of the LLM provider ("openai", "google"
                or "anthropic"). Defaults to `SCREENER_DEFAULTS.LLM_PROVIDER`.
            model (Optional[str], optional): Model identifier to use for the provider.
                If None, the default model from SCREENER_DEFAULTS will be used.
            function_name (Optional[str], optional): Name of the function or feature invoking the LLM.
                Used to pick mock responses in test mode. Defaults to None.
            fallback_message (Optional[str], optional): Message to return if the model response is empty.
                Defaults to None.
            test_mode (Optional[bool], optional): If True, the client will return deterministic mock responses
                instead of querying the live LLM. Defaults to False.
            test_response_type (Literal["success", "failed", "unexpected_json", "not_json"], optional):
                Type of mock response to use when `test_mode` is True. Defaults to "success".
        """
        self.function_name = function_name
        self.fallback_message = fallback_message
        self.test_mode = test_mode
        self.test_response_type = test_response_type

        # --- Resolve configuration ---
        self.provider = provider
        self._resolve_provider()

        self._resolve_model(model)
        self._resolve_api_key()

        # Only fill client when `initialize_client()` is run
        self.client = None

    # --- Init helpers ---
    def _resolve_provider(self) -> None:
        """
        Validate that self.provider is valid and supported LLM provider in this class.

        Raises:
            LLMConfigError: If the provider is not one of the supported providers.
        """
        if self.provider not in SUPPORTED_PROVIDERS:
            raise LLMConfigError(
                variable_name="LLM_PROVIDER",
                extra_info=f"Choices are: {SUPPORTED_PROVIDERS}"
            )

    def _resolve_model(self, model: Optional[str]) -> None:
        """
        Resolve and set the model ID for the selected provider.
        - Uses the `model` parameter if provided.
        - Otherwise, falls back to the default model ID from `SCREENER_DEFAULTS`.

        Raises:
            LLMConfigError: If no model ID is provided or available for the selected provider.
        """
        default_models = {
            "openai": SCREENER_DEFAULTS.OPENAI_MODEL_ID,
            "google": SCREENER_DEFAULTS.GOOGLE_MODEL_ID,
            "anthropic": SCREENER_DEFAULTS.ANTHROPIC_MODEL_ID,
        }

        resolved_model = model or default_models.get(self.provider)
        if not resolved_model:
            raise LLMConfigError(
                variable_name=f"{self.provider}_MODEL_ID",
                message=(
                    f"You must provide a model ID for `{self.provider}` either via SCREENER_DEFAULTS "
                    "or by explicitly passing `model` when initializing LLMClient."
                )
            )

        self.model = resolved_model

    def _resolve_api_key(self) -> None:
        """
        Retrieve and validate the API key for the selected provider from environment variables.
        Does not check if the API key is valid, simply loads it.

        Raises:
            LLMConfigError: If the API key is missing or the provider is invalid.
        """
        api_key_map = {
            "openai": "OPENAI_API_KEY",
            "google": "GOOGLE_API_KEY",
            "anthropic": "ANTHROPIC_API_KEY",
        }

        key_name = api_key_map.get(self.provider)
        if not key_name:
            raise LLMConfigError(
                variable_name="LLM_PROVIDER",
                message=f"No API key mapping defined for provider `{self.provider}`"
            )

        api_key = os.getenv(key_name)
        if not api_key or api_key == "<REPLACE_ME>":
            raise LLMConfigError(
                variable_name=f"{self.provider}_API_KEY",
                message=(
                    f"You must set a `{self.provider}` API key in your environment variables "
                    "to run LLM queries to their services."
                )
            )

        self.api_key = api_key

    def initialize_client(self) -> None:
        """
        Initialize the LangChain chat model client for the selected provider.
        - Imports the provider-specific client dynamically.
        - Initializes the client using the resolved `self.model` and `self.api_key`.
        - Assigns the initialized client to `self.client`.

        Notes:
            - No API call is made during initialization, so this method does not incur costs.

        Raises:
            LLMInitializationError: If the client cannot be initialized due to an internal error.
        """
        try:
            if self.provider == "openai":
                from langchain_openai import ChatOpenAI
                self.client = ChatOpenAI(
                    model=self.model,
                    openai_api_key=self.api_key,
                    temperature=0.3,
                    max_tokens=500,
                )
            elif self.provider == "google":
                from langchain_google_genai import ChatGoogleGenerativeAI
                self.client = ChatGoogleGenerativeAI(
                    model=self.model,
                    google_api_key=self.api_key,
                    temperature=0.3,
                )
            elif self.provider == "anthropic":
                from langchain_anthropic import ChatAnthropic
                self.client = ChatAnthropic(
                    model=self.model,
                    anthropic_api_key=self.api_key,
                    temperature=0.3
                )
            else:
                raise LLMConfigError(
                    variable_name="LLM_PROVIDER",
                    extra_info=f"Unsupported provider: {self.provider}"
                )
        except Exception as e:
            raise LLMInitializationError(
                provider=self.provider,
                model=self.model,
                original_exception=e
            )

    # --- QUERY EXECUTION ---
    def query(
        self,
        system_prompt: Optional[str],
        user_prompt: str,
        temperature: float = 0.3,
        expect_json: bool = False,
    ) -> str | dict | list:
        """
        Perform a single-turn model query.

        Args:
            system_prompt (Optional[str]): Instruction or behavioral setup for the model.
            user_prompt (str): Input text or main query.
            temperature (float): Model creativity level (0.0–1.0).
            expect_json (bool): Whether to parse response as JSON.

        Returns:
            str | dict | list: Parsed JSON if `expect_json` is True otherwise str. str may be
                returned even when `expect_json` is True if the LLM does not behave as expected.
        """
        return self.chat(
            system_prompt=system_prompt,
            history=[],
            user_message=user_prompt,
            temperature=temperature,
            expect_json=expect_json,
        )

    def chat(
        self,
        system_prompt: Optional[str],
        history: Sequence[ChatMessage],
        user_message: str,
        temperature: float = 0.3,
        expect_json: bool = False,
    ) -> str | dict | list:
        """
        Query the model with `[system prompt] + history + [user message]`.

        Args:
            system_prompt (Optional[str]): Instruction or behavioral setup for the model.
            history (Sequence[ChatMessage]): Previous user/assistant turns, oldest first.
            user_message (str): The new user message.
            temperature (float): Model creativity level (0.0–1.0).
            expect_json (bool): Whether to parse response as JSON.

        Returns:
            str | dict | list: The model response (parsed when `expect_json` succeeds).

        Raises:
            LLMInitializationError: If `initialize_client()` has not been run.
            LLMQueryError: If the query fails for any reason (wraps the original error).
        """
        if not self.client:
            raise LLMInitializationError(provider=self.provider, model=self.model)

        messages = self._build_messages(system_prompt, history, user_message)

        try:
            if self.test_mode == False:
                # Query the LLM
                response: AIMessage = self.client.invoke(
                    messages,
                    temperature=temperature
                )

            elif self.function_name and self.test_response_type:
                # Return a mock LLM response (for testing)
                response: AIMessage = create_mock_llm_response(
                    function_name=self.function_name,
                    response_type=self.test_response_type,
                    provider=self.provider
                )
            else:
                raise LLMQueryError(
                    provider=self.provider,
                    model=self.model,
                    additional_message= (
                        "Test mode is enabled without valid test variables having been defined. "
                        f"self.test_mode = {self.test_mode} "
                        f"self.function_name = {self.function_name} "
                    ),
                )

            if not response or not response.content:
                raise LLMEmptyResponse(provider=self.provider, model=self.model)

            response_content = self._content_to_text(response.content).strip()

            if expect_json:
                try:
                    response_content = self._clean_llm_json_response(response_text=response_content)
                except Exception as e:
                    # Warn the user if we're expecting a json response but didn't get one (LLM failure)
                    warnings.warn(
                        (
                            f"LLM did not return valid JSON when it was expected to. "
                            f"Provider: `{self.provider}` "
                            f"Model: `{self.model}` "
                            f"Function: `{self.function_name}` \n"
                            f"Exception: `{e}` \n"
                            "This may occur if the LLM output was malformed or test mode variables "
                            "were not correctly defined."
                        ),
                        category=UserWarning,
                    )

            if not response_content:
                response_content = self.fallback_message or "No response generated"

            return response_content

        except Exception as e:
            raise LLMQueryError(provider=self.provider, model=self.model, original_exception=e)

    @staticmethod
    def _build_messages(
        system_prompt: Optional[str],
        history: Sequence[ChatMessage],
        user_message: str,
    ) -> List[BaseMessage]:
        """Convert a system prompt, history and new message into LangChain messages."""
        messages: List[BaseMessage] = []
        if system_prompt:
            messages.append(SystemMessage(content=system_prompt))
        for message in history:
            if message.role == "user":
                messages.append(HumanMessage(content=message.content))
            elif message.role == "assistant":
                messages.append(AIMessage(content=message.content))
            else:
                messages.append(SystemMessage(content=message.content))
        messages.append(HumanMessage(content=user_message))
        return messages

    @staticmethod
    def _content_to_text(content: Any) -> str:
        """
        Flatten LangChain message content to a string. Some providers (Gemini,
        Anthropic) may return a list of content blocks instead of a string.
        """
        if isinstance(content, str):
            return content
        parts = []
        for block in content:
            if isinstance(block, str):
                parts.append(block)
            elif isinstance(block, dict) and block.get("type") == "text":
                parts.append(block.get("text", ""))
        return "".join(parts)

    def _clean_llm_json_response(self, response_text: str):
        """
        Normalize and parse a JSON string returned by an LLM into a valid Python object.

        Handles the common formatting issues that occur when LLMs return JSON-like
        data wrapped in Markdown code fences, extra whitespace, or stray characters:
        1. Removes leading and trailing whitespace.
        2. Strips Markdown-style code fences such as ```json ... ``` or ``` ... ```.
        3. Attempts to directly parse the cleaned string as JSON.
        4. If direct parsing fails, uses a regex search to extract the first JSON
            object (`{...}`) or array (`[...]`) from the text and parses that.

        Args:
            response_text (str): The raw text response from an LLM.

        Returns:
            Any: The parsed Python object (typically a `dict` or `list`).

        Raises:
            json.JSONDecodeError: If no valid JSON structure can be extracted or parsed
                from the provided text.
        """
        text = response_text.strip()

        # Remove any code fences like ```json ... ```
        text = re.sub(r"^```[a-zA-Z]*\n?", "", text)
        text = re.sub(r"\n?```$", "", text)

        try:
            return json.loads(text)
        except json.JSONDecodeError:
            match = re.search(r"(\{.*\}|\[.*\])", text, re.DOTALL)
            if match:
                return json.loads(match.group(1))
            raise  # rethrow if no valid JSON structure was found
