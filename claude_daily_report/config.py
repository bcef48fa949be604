"""
Configuration for claude-daily-report.

Settings are read from environment variables (and an optional .env file).
Only the CLI reads them; services receive the projects directory explicitly.
"""

from __future__ import annotations

import os
import pathlib
from typing import Literal, TypeVar

import lazy_object_proxy
import pydantic
import pydantic_settings

ReportFormat = Literal['markdown', 'json', 'html']

T = TypeVar('T', bound='DailyReportSettings')


class DailyReportSettings(pydantic_settings.BaseSettings):
    """Process-wide configuration for report generation."""

    model_config = pydantic_settings.SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=True,  # Fail fast on misconfiguration
        extra='ignore',  # .env files are shared with other tools
    )

    # Where Claude Code keeps one encoded directory per project
    CLAUDE_PROJECTS_DIR: pathlib.Path = pathlib.Path.home() / '.claude' / 'projects'

    DEFAULT_FORMAT: ReportFormat = 'markdown'

    @pydantic.field_validator('CLAUDE_PROJECTS_DIR')
    @classmethod
    def expand_projects_dir(cls, v: pathlib.Path) -> pathlib.Path:
        """Allow ~ in the configured directory."""
        return v.expanduser()


def get_settings(settings_class: type[T] = DailyReportSettings, env_file: str | None = None) -> T:
    """
    Factory for creating settings with dynamic .env file loading.

    LOAD_ENV_FILE environment variable specifies custom .env file path.
    When unset, loads from environment variables and ./.env only.

    Raises:
        FileNotFoundError: If specified .env file doesn't exist
    """
    env_file_path = env_file or os.getenv('LOAD_ENV_FILE')

    if not env_file_path:
        return settings_class()

    resolved_path = pathlib.Path(env_file_path).resolve()
    if not resolved_path.exists():
        raise FileNotFoundError(f'Environment file not found: {resolved_path}')

    return settings_class(_env_file=resolved_path)


def lazy_settings(settings_class: type[T]) -> T:
    """Lazy settings - defers instantiation until first access."""
    return lazy_object_proxy.Proxy(lambda: get_settings(settings_class))


# Module-level singleton (lazy-loaded)
settings = lazy_settings(DailyReportSettings)
