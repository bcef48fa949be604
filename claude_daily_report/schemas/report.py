"""
Report schemas.

Models for reconstructed sessions, per-project aggregates and the daily report,
plus the ParseResult envelope returned by the history parser.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
import datetime as dt

from claude_daily_report.exceptions import DailyReportError
from claude_daily_report.schemas.types import BaseStrictModel

__all__ = [
    'DailyReport',
    'DailySummary',
    'ParseFailure',
    'ParseResult',
    'ProjectRecord',
    'SessionRecord',
]


class SessionRecord(BaseStrictModel):
    """One log file's activity on the target date."""

    session_id: str  # Log file name without the .jsonl suffix
    project_path: str
    start_time: dt.datetime
    end_time: dt.datetime
    duration_minutes: int
    message_count: int
    instructions: Sequence[str]  # User prompts in order of appearance


class ProjectRecord(BaseStrictModel):
    """
    One project's aggregated activity for the target date.

    `name` comes from a heuristic decoder and may collide between projects;
    `directory` is the raw encoded directory name and is the stable identity.
    """

    name: str
    path: str
    directory: str
    date: dt.date
    sessions: Sequence[SessionRecord]  # Sorted by start_time ascending
    total_duration_minutes: int
    total_message_count: int


class DailySummary(BaseStrictModel):
    """Totals across all projects in a report."""

    total_duration_minutes: int
    total_message_count: int
    project_count: int
    session_count: int


class DailyReport(BaseStrictModel):
    """Top-level aggregate for one calendar date."""

    date: dt.date
    projects: Sequence[ProjectRecord]  # Sorted by total_duration_minutes descending
    summary: DailySummary


class ParseFailure(BaseStrictModel):
    """A recoverable failure tied to one file (line_number 0 for file-level failures)."""

    source_file: str
    line_number: int
    message: str


@dataclass(frozen=True)
class ParseResult:
    """
    Outcome of a history parsing call.

    A successful result may still carry failures and warnings: callers must
    inspect both `success` and the lists. When `success` is False, `data` is
    None and `error` holds the terminal error.
    """

    success: bool
    data: DailyReport | None = None
    failures: list[ParseFailure] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    error: DailyReportError | None = None

    def raise_for_error(self) -> DailyReport:
        """Return the report, or raise the terminal error of a failed parse."""
        if self.error is not None:
            raise self.error
        if self.data is None:
            raise DailyReportError('Parse produced no report')
        return self.data
