"""
Library configuration settings.

All configuration is loaded from environment variables (prefixed with
``PASSABLEWORDS_``) with sensible defaults.
"""
import logging
from functools import lru_cache
from typing import Any

from pydantic import field_validator
from pydantic_settings import BaseSettings

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    # Logging
    debug: bool = False
    log_level: str = "INFO"

    # Common password corpus
    # None means the list bundled with the package
    corpus_path: str | None = None
    corpus_encoding: str = "utf-8"

    # zxcvbn refuses longer input, so longer passwords are scored in chunks
    zxcvbn_max_length: int = 72

    @field_validator("log_level", mode="before")
    @classmethod
    def parse_log_level(cls, v: Any) -> str:
        """Normalize and validate the log level name."""
        level = str(v).strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("zxcvbn_max_length")
    @classmethod
    def validate_max_length(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("zxcvbn_max_length must be positive")
        return v

    @property
    def log_level_number(self) -> int:
        """Numeric logging level for the configured level name."""
        return logging.getLevelName(self.log_level)

    class Config:
        env_prefix = "PASSABLEWORDS_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
