# taskpad/core/config.py
# -----------------------------------------------------------------------------
# Centralized Configuration Management
# -----------------------------------------------------------------------------

# SECTION: IMPORTS
import logging
from pathlib import Path
from typing import Any, Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from taskpad.helpers._logger import get_logger

log = get_logger("config")

RenameStrategy = Literal["delete_insert", "in_place"]

# SECTION: CONFIGURATION MODELS


# KLASS: TaskpadConfig
class TaskpadConfig(BaseSettings):
    """Application settings, read from ``TASKPAD_*`` variables or a ``.env`` file."""

    model_config = SettingsConfigDict(
        env_prefix="TASKPAD_",  # Example: TASKPAD_ALLOW_EMPTY_NAME
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    allow_empty_name: bool = Field(True, description="Accept tasks whose name is the empty string.")
    rename_strategy: RenameStrategy = Field(
        "delete_insert",
        description="How an edit that changes the task name is applied: drop and re-append, or rename keeping position.",
    )
    log_level: str = Field("INFO", description="Level name for the Taskpad logger.")
    log_dir: Path | None = Field(None, description="Directory for the rotating log file; no file logging when unset.")

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, v: Any) -> str:
        level = str(v).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v!r}")
        return level

    @field_validator("log_dir", mode="before")
    @classmethod
    def _resolve_path(cls, v: Any) -> Path | None:
        if v is None or v == "":
            return None
        return Path(v).expanduser().resolve()


# SECTION: SINGLETON INSTANCE

try:
    app_config: TaskpadConfig = TaskpadConfig()
    log.debug(f"Configuration loaded: {app_config.model_dump()}")
except ValidationError as e:
    log.critical(f"CRITICAL: Configuration validation failed:\n{e}")
    raise SystemExit("Configuration Error") from e


__all__ = ["app_config", "TaskpadConfig", "RenameStrategy"]
