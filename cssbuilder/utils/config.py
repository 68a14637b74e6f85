# cssbuilder/utils/config.py
from __future__ import annotations

import functools
from enum import Enum
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# ---------- Enums ----------

class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class OutputFormat(str, Enum):
    text = "text"
    json = "json"


# ---------- Settings ----------

class Settings(BaseSettings):
    """
    Central configuration for the CSS selector builder.

    Values load in this order of precedence:
      1) Environment variables
      2) .env file in project root
      3) Defaults below
    """

    # ---- Definitions ----
    SELECTORS_DIR: Path = Field(default=Path("./selectors"), description="Selector definition YAML files")
    OUTPUT_FORMAT: OutputFormat = Field(default=OutputFormat.text, description="Default `render` output")

    # ---- Logging ----
    LOG_LEVEL: LogLevel = Field(default=LogLevel.INFO)
    LOG_TO_FILE: bool = Field(default=False)
    LOG_FILE: Path = Field(default=Path("./css-builder.log"))
    COLORIZED_OUTPUT: bool = Field(default=True)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # ignore unknown envs to keep things flexible
    )

    @field_validator("SELECTORS_DIR", "LOG_FILE", mode="before")
    @classmethod
    def _coerce_to_path(cls, v):
        if isinstance(v, Path):
            return v
        return Path(str(v)) if v is not None else v

    @field_validator("SELECTORS_DIR", "LOG_FILE", mode="after")
    @classmethod
    def _absolutize(cls, v: Path):
        return v if v.is_absolute() else Path.cwd() / v

    def ensure_dirs(self) -> None:
        """Create the log directory when file logging is on (idempotent)."""
        if self.LOG_TO_FILE:
            self.LOG_FILE.parent.mkdir(parents=True, exist_ok=True)


# --------- Public accessor (memoized) ---------

@functools.lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Load and cache settings once per process.
    Call `get_settings.cache_clear()` if you need to reload after changing env.
    """
    s = Settings()
    s.ensure_dirs()
    return s

