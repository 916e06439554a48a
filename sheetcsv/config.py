"""
Configuration Module
====================

Loads conversion settings from environment variables and an optional ``.env``
file. Every variable carries the ``SHEETCSV_`` prefix, e.g.
``SHEETCSV_PROGRESS_INTERVAL=5000``.
"""

from pydantic_settings import BaseSettings
from pydantic import field_validator
from dotenv import load_dotenv

load_dotenv()


class Settings(BaseSettings):
    """
    Conversion settings, loaded automatically from the environment.

    Attributes:
        PROGRESS_INTERVAL: report progress and flush output every N rows
        OUTPUT_EXTENSION: extension used when the output name is derived
        OUTPUT_ENCODING: text encoding of the written CSV
        LOG_LEVEL: level name for the ``sheetcsv`` logger
    """
    PROGRESS_INTERVAL: int = 1000
    OUTPUT_EXTENSION: str = ".csv"
    OUTPUT_ENCODING: str = "utf-8"
    LOG_LEVEL: str = "INFO"

    @field_validator("PROGRESS_INTERVAL")
    @classmethod
    def validate_progress_interval(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("PROGRESS_INTERVAL must be a positive number of rows.")
        return v

    @field_validator("OUTPUT_EXTENSION")
    @classmethod
    def validate_output_extension(cls, v: str) -> str:
        """Require a leading dot so ``report`` + ext stays a valid file name."""
        v = v.strip()
        if not v.startswith(".") or len(v) < 2:
            raise ValueError(
                f"OUTPUT_EXTENSION must look like '.csv', got {v!r}."
            )
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown LOG_LEVEL {v!r}.")
        return level

    class Config:
        env_file = ".env"
        env_prefix = "SHEETCSV_"
        case_sensitive = False


_settings_instance = None


def get_settings() -> Settings:
    """
    Return the settings singleton.

    The first call builds the ``Settings`` instance; later calls reuse it.
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
