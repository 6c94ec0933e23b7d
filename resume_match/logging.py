"""logging.py
Holds configured loggers for the screener, the RAG chat pipeline and the API.
"""
from typing import Dict, Literal, Optional
import logging
import os
import sys
from datetime import datetime
from dotenv import load_dotenv

load_dotenv()  # load .env

ENV = os.getenv("ENV", "development")  # e.g., development, staging, production
LOG_LEVEL = os.getenv("LOG_LEVEL")  # overrides the per-type level when set

LoggerType = Literal["default", "pytest", "analysis", "rag", "api"]

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class LoggerFactory:
    """
    Factory to create configured loggers for the screening pipeline.

    Each logger type gets its own sub-folder when logging to disk, so
    analysis runs, chat (RAG) traffic and API requests can be read apart.

    Where the logs go depends on ENV:
      - development / local / test: console plus a timestamped file.
      - staging / production: console plus CloudWatch via watchtower,
        when the optional `cloud` extra is installed.
    """

    # Sub-folder under base_log_folder per logger type
    LOG_SUBFOLDERS: Dict[str, str] = {
        "default": "",
        "pytest": "tests",
        "analysis": "analysis",
        "rag": "rag",
        "api": "api",
    }

    FILE_LOGGING_ENVS = ("development", "local", "test")
    CLOUD_LOGGING_ENVS = ("staging", "production")

    def __init__(self, env: str = ENV, base_log_folder: str = "logs", level: Optional[str] = LOG_LEVEL):
        self.env = env
        self.base_log_folder = base_log_folder
        self.level = level

    def get_logger(
        self,
        name: str,
        logger_type: LoggerType = "default",
        console: bool = True
    ) -> logging.Logger:
        """
        Return the named logger, attaching handlers the first time it is requested.
        """
        logger = logging.getLogger(name)

        # Already configured by an earlier import
        if logger.hasHandlers():
            return logger

        logger.propagate = False
        logger.setLevel(self._resolve_level(logger_type))

        formatter = logging.Formatter(LOG_FORMAT)

        if console:
            self._add_handler(logger, logging.StreamHandler(), formatter)

        if self.env in self.FILE_LOGGING_ENVS:
            self._add_handler(logger, self._build_file_handler(name, logger_type), formatter)
        elif self.env in self.CLOUD_LOGGING_ENVS:
            self._add_cloudwatch_handler(logger, logger_type, formatter)

        # console=False with an unknown ENV would otherwise drop every record
        if not logger.handlers:
            self._add_handler(logger, logging.StreamHandler(), formatter)

        return logger

    def _resolve_level(self, logger_type: LoggerType) -> int:
        if self.level:
            return logging.getLevelName(self.level.upper())
        # Chat and API traffic is noisy at DEBUG
        return logging.DEBUG if logger_type in ("default", "pytest", "analysis") else logging.INFO

    @staticmethod
    def _add_handler(logger: logging.Logger, handler: logging.Handler, formatter: logging.Formatter):
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    def _build_file_handler(self, name: str, logger_type: LoggerType) -> logging.FileHandler:
        log_folder = self._get_log_folder_for_type(logger_type)
        os.makedirs(log_folder, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file_path = os.path.join(log_folder, f"{name}_{timestamp}.log")
        return logging.FileHandler(log_file_path, mode="a", encoding="utf-8")

    def _get_log_folder_for_type(self, logger_type: LoggerType) -> str:
        """Return folder path based on logger type. Anything logged under pytest goes to tests/."""
        if any("pytest" in arg for arg in sys.argv):
            logger_type = "pytest"
        subfolder = self.LOG_SUBFOLDERS.get(logger_type, "")
        return os.path.join(self.base_log_folder, subfolder) if subfolder else self.base_log_folder

    def _add_cloudwatch_handler(
        self,
        logger: logging.Logger,
        logger_type: LoggerType,
        formatter: logging.Formatter,
    ):
        """CloudWatch logging for staging/production, one log group per logger type."""
        try:
            import watchtower
        except ImportError:
            logger.warning("watchtower not installed, skipping cloud logging.")
            return

        log_group = f"resume_match/{logger_type if logger_type != 'pytest' else 'default'}"
        self._add_handler(logger, watchtower.CloudWatchLogHandler(log_group=log_group), formatter)
