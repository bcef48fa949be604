"""
Shared exceptions for claude-daily-report.

Domain-specific exceptions used across services.

Exception Hierarchy:
    DailyReportError (base)
    ├── ConfigurationError (terminal failures before any project is read)
    │   ├── InvalidDateError (target date is not a YYYY-MM-DD calendar date)
    │   └── ProjectsDirectoryNotFoundError (root log directory missing)
    ├── ProjectNotFoundError (display name matches no project directory)
    └── SessionReconstructionError (one log file cannot be turned into a session)
"""

from __future__ import annotations

from pathlib import Path


class DailyReportError(Exception):
    """Base exception for all claude-daily-report errors."""


class ConfigurationError(DailyReportError):
    """Base exception for failures that abort a whole invocation."""


class InvalidDateError(ConfigurationError):
    """Raised when the target date string is not a valid calendar date."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f'Invalid date format: {value} (expected YYYY-MM-DD, e.g. 2025-07-03)')


class ProjectsDirectoryNotFoundError(ConfigurationError):
    """Raised when the Claude projects directory does not exist."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f'Claude projects directory not found: {path}')


class ProjectNotFoundError(DailyReportError):
    """Raised when no project directory decodes to the requested name."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.name = name
        self.available = available
        message = f'Project not found: {name}'
        if available:
            message += '\n\nAvailable projects:\n  ' + '\n  '.join(available[:10])
            if len(available) > 10:
                message += f'\n  ... and {len(available) - 10} more'
        super().__init__(message)


class SessionReconstructionError(DailyReportError):
    """Raised when the events of one log file cannot be reduced to a session."""
