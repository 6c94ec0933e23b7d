"""llm_helpers.py
Functions to help with initiating a LLMClient class
"""

from typing import Optional

from resume_match.llm.llm_client import LLMClient

def initialize_llm_if_needed(
    llm_client: Optional[LLMClient] = None,
    strategy: Optional[str] = "llm",
    provider: Optional[str] = None,
    function_name: Optional[str] = None,
) -> Optional[LLMClient]:
    """
    Initialize or validate an LLMClient if required by the selected strategy.
    This helper ensures that an `LLMClient` is available only when necessary.

    Logic flow:
        1. If an existing `llm_client` is provided validates that it is an instance of `LLMClient`
        and returns it if it is.
        2. If `strategy` is not "llm" returns `None`.
        3. Otherwise initialize and return a new LLMClient (no API call is made).

    Args:
        llm_client (Optional[LLMClient]): Existing LLM client instance to use or validate.
        strategy (Optional[str]): The strategy name of the component asking for a client
            (default: "llm").
        provider (Optional[str]): Provider for a newly created client. Defaults to
            SCREENER_DEFAULTS.LLM_PROVIDER.
        function_name (Optional[str]): Name of the feature invoking the LLM.

    Returns:
        Optional[LLMClient]: A ready-to-use or validated LLMClient instance, or None if not required.

    Raises:
        TypeError: If `llm_client` is provided but not an instance of `LLMClient`.
        LLMConfigError: If an LLM is required but provider/model/API key information is missing.
    """
    if llm_client is not None:
        if not isinstance(llm_client, LLMClient):
            raise TypeError("Provided llm_client must be an instance of LLMClient.")
        return llm_client

    if strategy != "llm":
        return None

    client_kwargs = {"function_name": function_name}
    if provider:
        client_kwargs["provider"] = provider

    llm_client = LLMClient(**client_kwargs)
    llm_client.initialize_client()

    return llm_client
