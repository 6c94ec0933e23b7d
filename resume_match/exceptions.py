"""exceptions.py
Defines custom exceptions for this project.
"""
from typing import Optional, List

# ------------------------ Document Parser Errors ------------------------
class DocumentParserError(Exception):
    """Base exception for document parser errors."""
    pass

class FileNotSupportedError(DocumentParserError):
    """Raised when the current file path has an unsupported extension."""
    def __init__(
        self,
        extension: str,
        supported_extensions: List[str],
        context: Optional[str] = None
    ):
        self.extension = extension
        self.supported_extensions = list(supported_extensions)
        message = (
            f"File with extension '{extension}' is not supported. "
            f"Supported extensions: {self.supported_extensions}"
        )
        if context:
            message += f" Context: {context}"
        super().__init__(message)


class NoFilePathError(DocumentParserError):
    """Raised when no file path is provided but the DocumentParser attempts to access it."""
    def __init__(self):
        message = (
            "No file path was provided. This DocumentParser instance "
            "cannot access or parse a file without a valid 'file_path'."
        )
        super().__init__(message)

class FileTooLargeError(DocumentParserError):
    """Raised when a file exceeds the allowed file size."""
    def __init__(self, max_size: int, actual_size: int):
        super().__init__(
            f"File size is {actual_size} bytes, which exceeds the max allowed {max_size} bytes."
        )
        self.max_size = max_size
        self.actual_size = actual_size

class FileOpenError(DocumentParserError):
    """Raised when a file cannot be opened or read."""
    def __init__(self, file_path: str, original_error: str):
        super().__init__(
            f"Failed to open or read file: {file_path}. Original error: {original_error}"
        )
        self.file_path = file_path
        self.original_error = original_error

class FileEmptyError(DocumentParserError):
    """Raised when a file contains no parsable text."""
    def __init__(self, file_path: str, message: str | None = None):
        self.file_path = file_path
        if message is None:
            message = f"File `{file_path}` contains no parsable text."
        super().__init__(message)

# ------------------------ TextChunker Errors ------------------------
class ChunkerConfigError(Exception):
    """Raised when a TextChunker is configured with an unusable window."""
    def __init__(self, chunk_size: int, chunk_overlap: int, message: str | None = None):
        self.chunk_size = chunk_size
        self.chunk_overlap = chunk_overlap
        if message is None:
            message = (
                f"Invalid chunk window (chunk_size={chunk_size}, chunk_overlap={chunk_overlap}). "
                "chunk_overlap must be non-negative and strictly less than chunk_size."
            )
        super().__init__(f"ChunkerConfigError: {message}")

# ------------------------ Session Errors ------------------------
class SessionError(Exception):
    """Base exception for session store errors."""
    pass

class MissingSessionIdError(SessionError):
    """Raised when an operation needs a session id but none was provided."""
    def __init__(self, operation: str | None = None):
        message = "Session ID is required"
        if operation:
            message += f" to {operation}"
        super().__init__(message)

class SessionNotFoundError(SessionError):
    """Raised when no session exists for the given id."""
    def __init__(self, session_id: str):
        self.session_id = session_id
        super().__init__(f"No session found with id `{session_id}`")

class SessionIncompleteError(SessionError):
    """Raised when a session is analyzed before both documents were uploaded."""
    def __init__(self, session_id: str, missing: List[str]):
        self.session_id = session_id
        self.missing = missing
        super().__init__(
            "Both resume and job description must be uploaded first. "
            f"Session `{session_id}` is missing: {missing}"
        )

# ------------------------ Search Errors ------------------------
class SearchIndexError(Exception):
    """Base exception for search index errors."""
    pass

class EmbeddingError(SearchIndexError):
    """Raised when the embedding provider fails to embed one or more texts."""
    def __init__(
        self,
        message: str = "Failed to generate embedding",
        provider: Optional[str] = None,
        model: Optional[str] = None,
        original_exception: Optional[Exception] = None
    ):
        self.provider = provider
        self.model = model
        self.original_exception = original_exception

        base_msg = message
        if provider:
            base_msg += f" | Provider: {provider}"
        if model:
            base_msg += f" | Model: {model}"
        if original_exception:
            base_msg += f" | Original Exception: {original_exception}"
        super().__init__(base_msg)

class EmbeddingConfigError(SearchIndexError):
    """Raised when the embedding client configuration is missing or invalid."""
    def __init__(self, variable_name: str, message: str = None):
        if message is None:
            message = f"Missing or invalid configuration: {variable_name}. Please set it in your .env file."
        super().__init__(message)
        self.variable_name = variable_name

    def __str__(self):
        return f"[CONFIG ERROR] {super().__str__()} | Variable: {self.variable_name}"

# ------------------------ RAG Errors ------------------------
class RAGQueryError(Exception):
    """Raised when retrieving context or generating a chat answer fails."""
    def __init__(
        self,
        conversation_id: Optional[str] = None,
        original_exception: Optional[Exception] = None
    ):
        self.conversation_id = conversation_id
        self.original_exception = original_exception
        message = "RAG query failed"
        if original_exception:
            message += f": {original_exception}"
        super().__init__(message)

class EmptyQuestionError(Exception):
    """Raised when a chat question is missing or blank."""
    def __init__(self, message: str = "Question and session ID are required"):
        super().__init__(message)

# ------------------------ Strategy Errors ------------------------
class StrategyConfigError(Exception):
    """
    Raised when a configured strategy name has no matching implementation.
    """
    def __init__(self, component: str, strategy: str, choices: List[str]):
        self.component = component
        self.strategy = strategy
        super().__init__(
            f"StrategyConfigError: Unknown {component} strategy `{strategy}`. Choices are: {choices}"
        )

# ------------------------ LLM Querying Errors ------------------------
class LLMConfigError(Exception):
    """Raised when a required configuration (in .env by default) for LLMClient to function
    is missing or invalid."""

    def __init__(
        self,
        variable_name: str,
        message: str = None,
        extra_info: str = None
    ):
        """
        Args:
            variable_name: Name of the config variable.
            message: Optional custom message for the error.
            extra_info: Additional information to append to the error message.
        """
        if message is None:
            message = f"Missing or invalid configuration: {variable_name}. Please set it in your .env file."
        if extra_info:
            message += f" | {extra_info}"
        super().__init__(message)
        self.variable_name = variable_name
        self.extra_info = extra_info

    def __str__(self):
        return f"[CONFIG ERROR] {super().__str__()} | Variable: {self.variable_name}"

class LLMError(Exception):
    """Base exception for all LLM-related errors."""
    def __init__(
        self,
        message: str,
        provider: Optional[str] = None,
        model: Optional[str] = None,
        original_exception: Optional[Exception] = None
    ):
        self.provider = provider
        self.model = model
        self.original_exception = original_exception

        base_msg = message
        if provider:
            base_msg += f" | Provider: {provider}"
        if model:
            base_msg += f" | Model: {model}"
        if original_exception:
            base_msg += f" | Original Exception: {original_exception}"

        super().__init__(base_msg)


class LLMInitializationError(LLMError):
    """Raised when the LLM client fails to initialize."""
    def __init__(
        self,
        provider: Optional[str] = None,
        model: Optional[str] = None,
        original_exception: Optional[Exception] = None,
        additional_message: Optional[str] = None
    ):
        message = "Failed to initialize LLM client"
        if additional_message:
            message += f": {additional_message}"
        super().__init__(
            message=message,
            provider=provider,
            model=model,
            original_exception=original_exception,
        )


class LLMQueryError(LLMError):
    """Raised when a query to the LLM fails."""
    def __init__(
        self,
        provider: Optional[str] = None,
        model: Optional[str] = None,
        additional_message: Optional[str] = None,
        original_exception: Exception = None,
    ):
        message = "LLM query failed"
        if additional_message:
            message += f": {additional_message}"

        super().__init__(
            message=message,
            provider=provider,
            model=model,
            original_exception=original_exception,
        )


class LLMEmptyResponse(LLMError):
    """Raised when the LLM returns an empty response."""
    def __init__(
        self,
        provider: Optional[str] = None,
        model: Optional[str] = None
    ):
        super().__init__(
            message="LLM returned an empty response",
            provider=provider,
            model=model,
        )
