"""
History parser service - builds the daily report from Claude Code history.

Framework-agnostic service: discovers project directories, reads each session
file, reconstructs sessions for the target date and rolls everything up into
a DailyReport.

Failure handling:
- Invalid date, missing projects directory or unknown project abort the call
  (ParseResult with success=False and the terminal error attached)
- A file that cannot be read, a line that cannot be parsed or a project
  without session files is recorded and processing continues
"""

from __future__ import annotations

import datetime as dt
import re
from collections.abc import Sequence
from pathlib import Path

from claude_daily_report.exceptions import (
    DailyReportError,
    InvalidDateError,
    ProjectNotFoundError,
    ProjectsDirectoryNotFoundError,
    SessionReconstructionError,
)
from claude_daily_report.paths import decode_project_name, decode_project_path
from claude_daily_report.protocols import LoggerProtocol, NullLogger
from claude_daily_report.schemas.report import (
    DailyReport,
    DailySummary,
    ParseFailure,
    ParseResult,
    ProjectRecord,
    SessionRecord,
)
from claude_daily_report.services.discovery import LOG_FILE_SUFFIX, list_log_files, list_project_directories
from claude_daily_report.services.event_log import read_event_log
from claude_daily_report.services.sessions import reconstruct_session

__all__ = ['DailyHistoryParser', 'calculate_summary', 'parse_target_date']

DATE_PATTERN = re.compile(r'^\d{4}-\d{2}-\d{2}$')


def parse_target_date(value: str) -> dt.date:
    """
    Parse a YYYY-MM-DD string into a calendar date.

    Raises:
        InvalidDateError: If the string is not in that shape or not a real date
    """
    if not DATE_PATTERN.match(value):
        raise InvalidDateError(value)
    try:
        return dt.date.fromisoformat(value)
    except ValueError as e:
        raise InvalidDateError(value) from e


def calculate_summary(projects: Sequence[ProjectRecord]) -> DailySummary:
    """Roll project totals up into the report summary."""
    return DailySummary(
        total_duration_minutes=sum(project.total_duration_minutes for project in projects),
        total_message_count=sum(project.total_message_count for project in projects),
        project_count=len(projects),
        session_count=sum(len(project.sessions) for project in projects),
    )


class DailyHistoryParser:
    """
    Service for turning Claude Code session history into daily reports.

    The projects directory is injected so tests can point the parser at
    fixture trees; the CLI passes the configured CLAUDE_PROJECTS_DIR.

    Each public call starts with fresh failure and warning lists, so one
    parser instance can be reused for several dates.
    """

    def __init__(self, projects_dir: Path) -> None:
        self.projects_dir = projects_dir
        self._failures: list[ParseFailure] = []
        self._warnings: list[str] = []

    # ==========================================================================
    # Public API
    # ==========================================================================

    async def parse_for_date(self, target_date: str, logger: LoggerProtocol | None = None) -> ParseResult:
        """
        Build the report for every project with activity on target_date.

        Args:
            target_date: Date string in YYYY-MM-DD format
            logger: Optional logger for progress messages

        Returns:
            ParseResult with the DailyReport, failures and warnings
        """
        logger = logger or NullLogger()
        self._reset()

        try:
            date = self._validate(target_date)
            project_dirs = list_project_directories(self.projects_dir)
        except DailyReportError as e:
            return await self._failed(e, logger)
        except OSError as e:
            return await self._failed(DailyReportError(f'Failed to read projects directory: {e}'), logger)

        if not project_dirs:
            await self._warn('No Claude projects found', logger)
            return self._succeeded(date, [])

        await logger.info(f'Scanning {len(project_dirs)} projects for {date.isoformat()}')

        projects: list[ProjectRecord] = []
        for project_dir in project_dirs:
            project = await self._parse_project(project_dir, date, logger)
            if project is not None:
                projects.append(project)

        return self._succeeded(date, projects)

    async def parse_project_only(
        self,
        project_name: str,
        target_date: str,
        logger: LoggerProtocol | None = None,
    ) -> ParseResult:
        """
        Build the report for a single project, matched by decoded display name.

        Display names come from a heuristic and can collide; the first matching
        directory (in sorted order) wins.

        Returns:
            ParseResult with at most one project, or a failed result carrying
            ProjectNotFoundError when no directory matches
        """
        logger = logger or NullLogger()
        self._reset()

        try:
            date = self._validate(target_date)
            project_dirs = list_project_directories(self.projects_dir)
            matching_dir = next((d for d in project_dirs if decode_project_name(d) == project_name), None)
            if matching_dir is None:
                raise ProjectNotFoundError(project_name, [decode_project_name(d) for d in project_dirs])
        except DailyReportError as e:
            return await self._failed(e, logger)
        except OSError as e:
            return await self._failed(DailyReportError(f'Failed to read projects directory: {e}'), logger)

        await logger.info(f'Parsing project {project_name} ({matching_dir}) for {date.isoformat()}')

        project = await self._parse_project(matching_dir, date, logger)
        return self._succeeded(date, [project] if project is not None else [])

    def list_available_projects(self) -> list[str]:
        """Decoded names of all project directories; empty if discovery fails."""
        try:
            return [decode_project_name(d) for d in list_project_directories(self.projects_dir)]
        except OSError:
            return []

    # ==========================================================================
    # Project / Session Parsing
    # ==========================================================================

    async def _parse_project(
        self,
        project_dir: str,
        date: dt.date,
        logger: LoggerProtocol,
    ) -> ProjectRecord | None:
        """Parse one project directory; None if it has no sessions on date."""
        project_name = decode_project_name(project_dir)
        project_path = decode_project_path(project_dir)

        try:
            log_files = list_log_files(self.projects_dir / project_dir)
        except OSError as e:
            self._failures.append(
                ParseFailure(
                    source_file=project_dir,
                    line_number=0,
                    message=f'Failed to parse project: {e}',
                )
            )
            await logger.error(f'Failed to read project directory {project_dir}: {e}')
            return None

        if not log_files:
            await self._warn(f'No JSONL files found in project: {project_name}', logger)
            return None

        sessions: list[SessionRecord] = []
        for log_file in log_files:
            session = await self._parse_session_file(log_file, date, project_path, logger)
            if session is not None:
                sessions.append(session)

        if not sessions:
            return None

        sessions.sort(key=lambda session: session.start_time.timestamp())
        await logger.info(f'{project_name}: {len(sessions)} sessions')

        return ProjectRecord(
            name=project_name,
            path=project_path,
            directory=project_dir,
            date=date,
            sessions=sessions,
            total_duration_minutes=sum(session.duration_minutes for session in sessions),
            total_message_count=sum(session.message_count for session in sessions),
        )

    async def _parse_session_file(
        self,
        log_file: Path,
        date: dt.date,
        project_path: str,
        logger: LoggerProtocol,
    ) -> SessionRecord | None:
        """Read and reconstruct one session file, recording failures instead of raising."""
        session_id = log_file.name.removesuffix(LOG_FILE_SUFFIX)

        try:
            event_log = read_event_log(log_file)
            self._failures.extend(event_log.failures)
            session = reconstruct_session(event_log.events, date, project_path, session_id)
        except (OSError, SessionReconstructionError) as e:
            self._failures.append(
                ParseFailure(
                    source_file=str(log_file),
                    line_number=0,
                    message=f'Failed to parse session file: {e}',
                )
            )
            await logger.error(f'Failed to parse session file {log_file.name}: {e}')
            return None

        if event_log.failures:
            await logger.warning(f'{log_file.name}: skipped {len(event_log.failures)} unparseable lines')

        return session

    # ==========================================================================
    # Helpers
    # ==========================================================================

    def _reset(self) -> None:
        self._failures = []
        self._warnings = []

    def _validate(self, target_date: str) -> dt.date:
        """Fail fast on configuration errors before touching any project."""
        date = parse_target_date(target_date)
        if not self.projects_dir.is_dir():
            raise ProjectsDirectoryNotFoundError(self.projects_dir)
        return date

    async def _warn(self, message: str, logger: LoggerProtocol) -> None:
        self._warnings.append(message)
        await logger.warning(message)

    async def _failed(self, error: DailyReportError, logger: LoggerProtocol) -> ParseResult:
        """Terminal failure: no partial data is returned."""
        self._failures.append(ParseFailure(source_file='parser', line_number=0, message=f'Parse failed: {error}'))
        await logger.error(str(error))
        return ParseResult(
            success=False,
            failures=list(self._failures),
            warnings=list(self._warnings),
            error=error,
        )

    def _succeeded(self, date: dt.date, projects: list[ProjectRecord]) -> ParseResult:
        # Stable sort keeps discovery order for equal durations
        projects = sorted(projects, key=lambda project: project.total_duration_minutes, reverse=True)
        report = DailyReport(date=date, projects=projects, summary=calculate_summary(projects))
        return ParseResult(
            success=True,
            data=report,
            failures=list(self._failures),
            warnings=list(self._warnings),
        )
