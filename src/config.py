"""
Configuration from environment variables.

Environment is read from .env.local (local dev, highest priority), then .env,
then the system environment.

Config (env vars):
    LOG_LEVEL: Console log level (default: INFO)
    UKSTEMMER_LOG_FILE: Base log file path (default: logs/ukstemmer.log)
    UKSTEMMER_TRACE: "true" to log every rule that changes a word (DEBUG)

The stemmer itself never reads configuration. Applications wire it at
startup:

    load_environment()
    settings = StemmerSettings.from_env()
    configure_logging(settings)
    stemmer = settings.create_stemmer()
"""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from .logging_config import setup_logging
from .ukstemmer import UkrainianStemmer

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).parent.parent


def load_environment(project_root: Path = PROJECT_ROOT) -> Optional[Path]:
    """
    Load .env.local or .env into os.environ.

    Returns:
        Path of the loaded file, or None if only system environment is used
    """
    env_local = project_root / ".env.local"
    env_file = project_root / ".env"

    for candidate in (env_local, env_file):
        if candidate.exists():
            logger.info(f"Loading environment from: {candidate}")
            load_dotenv(candidate, override=True)
            return candidate

    logger.warning("No .env.local or .env file found - using system environment variables only")
    return None


class StemmerSettings(BaseModel):
    """Runtime settings for the stemmer and its logging"""
    log_level: str = Field(default="INFO", description="Console log level name")
    log_file: str = Field(default="logs/ukstemmer.log", description="Base log file path")
    trace: bool = Field(default=False, description="Log each rule that changes a word")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @classmethod
    def from_env(cls) -> "StemmerSettings":
        return cls(
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_file=os.getenv("UKSTEMMER_LOG_FILE", "logs/ukstemmer.log"),
            trace=os.getenv("UKSTEMMER_TRACE", "false").lower() == "true",
        )

    def create_stemmer(self) -> UkrainianStemmer:
        return UkrainianStemmer(trace=self.trace)


def configure_logging(settings: StemmerSettings) -> Path:
    """Set up console + file logging from settings. Returns the session log path."""
    return setup_logging(
        log_file=settings.log_file,
        console_level=getattr(logging, settings.log_level),
        file_level=logging.DEBUG  # Always DEBUG in file for troubleshooting
    )
