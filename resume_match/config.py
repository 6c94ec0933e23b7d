"""config.py
Holds various defaults for different resume screener settings.
"""
import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()  # load .env

# --------------------------------------------------------------
# SETUP DEFAULT VALUES
# --------------------------------------------------------------
@dataclass
class ScreenerDefaults:
    """
    Default settings for parameters used across the resume_match repo.

    Strategy settings can be overridden through environment variables (or a
    `.env` file) and are resolved once when the process starts.
    """
    # ---- TextChunker settings ----
    CHUNK_SIZE: int = field(
        default = 800,
        metadata = {
            "description": "Size of each chunk in words"
    })
    CHUNK_OVERLAP: int = field(
        default = 200,
        metadata = {
            "description": "Number of words shared by consecutive chunks"
    })

    # ---- DocumentParser settings ----
    MAX_FILE_SIZE_MB: float = field(
        default = 10.0,
        metadata = {
            "description": "Maximum allowed upload size in MB"
    })
    UPLOAD_DIR: str = field(
        default_factory = lambda: os.getenv("UPLOAD_DIR", "uploads"),
        metadata = {
            "description": "Folder uploaded documents are stored in"
    })

    # ---- Search / RAG settings ----
    SEARCH_TOP_K: int = field(
        default = 5,
        metadata = {
            "description": "Number of chunks retrieved to ground a chat answer"
    })
    MAX_HISTORY_MESSAGES: int = field(
        default = 10,
        metadata = {
            "description": "Messages kept per conversation (5 question/answer exchanges)"
    })

    # ---- Analysis settings ----
    MAX_STRENGTHS: int = field(
        default = 6,
        metadata = {
            "description": "Maximum number of strengths returned by the rule-based analysis"
    })
    MAX_GAPS: int = field(
        default = 5,
        metadata = {
            "description": "Maximum number of gaps returned by the rule-based analysis"
    })

    # ---- Strategy selection ----
    SEARCH_STRATEGY: str = field(
        default_factory = lambda: os.getenv("SEARCH_STRATEGY", "keyword"),
        metadata = {
            "description": 'Search index strategy: "keyword" or "embedding"'
    })
    ANALYSIS_STRATEGY: str = field(
        default_factory = lambda: os.getenv("ANALYSIS_STRATEGY", "rule"),
        metadata = {
            "description": 'Analysis engine strategy: "rule" or "llm"'
    })
    CHAT_STRATEGY: str = field(
        default_factory = lambda: os.getenv("CHAT_STRATEGY", "template"),
        metadata = {
            "description": 'Chat answer strategy: "template" or "llm"'
    })

    # ---- LLMClient settings ----
    LLM_PROVIDER: str = field(
        default_factory = lambda: os.getenv("LLM_PROVIDER", "openai"),
        metadata = {
            "description": 'LLM provider: "openai", "google" or "anthropic"'
    })
    OPENAI_MODEL_ID: str = field(
        default = "gpt-4o-mini",
        metadata = {
            "description": "OpenAI chat model ID"
    })
    GOOGLE_MODEL_ID: str = field(
        default = "gemini-2.5-flash",
        metadata = {
            "description": "Google Gemini chat model ID"
    })
    ANTHROPIC_MODEL_ID: str = field(
        default = "claude-haiku-4-5",
        metadata = {
            "description": "Anthropic model ID"
    })

    # ---- EmbeddingClient settings ----
    EMBEDDING_PROVIDER: str = field(
        default_factory = lambda: os.getenv("EMBEDDING_PROVIDER", "openai"),
        metadata = {
            "description": 'Embedding provider: "openai" or "google"'
    })
    OPENAI_EMBEDDING_MODEL_ID: str = field(
        default = "text-embedding-3-small",
        metadata = {
            "description": "OpenAI embedding model ID (1536 dimensions)"
    })
    GOOGLE_EMBEDDING_MODEL_ID: str = field(
        default = "models/text-embedding-004",
        metadata = {
            "description": "Google embedding model ID"
    })

    # ---- API settings ----
    FRONTEND_URL: str = field(
        default_factory = lambda: os.getenv("FRONTEND_URL", "http://localhost:5173"),
        metadata = {
            "description": "Origin allowed by CORS"
    })


# Import this where needed
SCREENER_DEFAULTS = ScreenerDefaults()
