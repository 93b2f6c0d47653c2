# config.py

"""Run configuration.

Values come from ``INPUT_*`` environment variables, the names GitHub Actions
uses to expose action inputs, and may be read from a local ``.env`` file.
Command-line options override individual fields, see :mod:`keydiff.cli`.
"""

from __future__ import annotations

import os
from functools import lru_cache
from typing import Literal, Mapping

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogFormat = Literal["auto", "text", "json", "github"]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Inputs of a single comparison run."""

    model_config = SettingsConfigDict(
        env_prefix="INPUT_", env_file=".env", extra="ignore", frozen=True
    )

    files: str = ""
    search_path: str = ""
    # Empty means the resolver default (``\.json$``).
    search_pattern: str = ""
    log_level: LogLevel = "INFO"
    log_format: LogFormat = "auto"
    report_file: str = ""

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.strip().upper() if isinstance(value, str) else value


@lru_cache
def get_settings() -> Settings:
    """Return settings read from the environment, cached per process."""

    return Settings()


def effective_log_format(
    settings: Settings, environ: Mapping[str, str] | None = None
) -> str:
    """Resolve ``auto`` to ``github`` inside a workflow run, else ``text``."""

    if settings.log_format != "auto":
        return settings.log_format
    env = os.environ if environ is None else environ
    return "github" if env.get("GITHUB_ACTIONS", "").lower() == "true" else "text"


__all__ = ["LogFormat", "LogLevel", "Settings", "effective_log_format", "get_settings"]
