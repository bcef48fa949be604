"""
Event log reader - tolerant JSONL parsing of one session file.

Each line is parsed independently. A bad line becomes a ParseFailure and is
skipped; it never aborts the rest of the file. Failing to open the file is
fatal for that file and propagates as OSError.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

import pydantic

from claude_daily_report.schemas.events import RawEvent, RawEventAdapter, is_reportable
from claude_daily_report.schemas.report import ParseFailure

__all__ = ['EventLog', 'read_event_log']

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EventLog:
    """Events parsed from one file plus the lines that could not be parsed."""

    path: Path
    events: Sequence[RawEvent] = field(default_factory=list)
    failures: Sequence[ParseFailure] = field(default_factory=list)


def read_event_log(file_path: Path) -> EventLog:
    """
    Read a session JSONL file into events.

    Blank lines (including the one after a trailing newline) are skipped.
    Lines are decoded one at a time, so invalid UTF-8 only costs that line.
    Records of kinds other than summary/user/assistant are dropped.

    Args:
        file_path: Path to the .jsonl file

    Returns:
        EventLog with events in file order and per-line failures

    Raises:
        OSError: If the file cannot be opened or read
    """
    events: list[RawEvent] = []
    failures: list[ParseFailure] = []
    ignored = 0

    with open(file_path, 'rb') as f:
        for line_num, raw_line in enumerate(f, 1):
            try:
                line = raw_line.decode('utf-8').strip()
            except UnicodeDecodeError as e:
                failures.append(_line_failure(file_path, line_num, f'Invalid UTF-8: {e}'))
                continue
            if not line:
                continue

            try:
                raw_data = json.loads(line)
                event = RawEventAdapter.validate_python(raw_data)
            except json.JSONDecodeError as e:
                failures.append(_line_failure(file_path, line_num, f'Invalid JSON: {e}'))
                continue
            except pydantic.ValidationError as e:
                failures.append(_line_failure(file_path, line_num, _describe_validation_error(e)))
                continue

            if is_reportable(event):
                events.append(event)
            else:
                ignored += 1

    logger.debug(
        'Read %s: %d events, %d ignored, %d failed lines',
        file_path.name,
        len(events),
        ignored,
        len(failures),
    )
    return EventLog(path=file_path, events=events, failures=failures)


def _line_failure(file_path: Path, line_num: int, message: str) -> ParseFailure:
    return ParseFailure(
        source_file=str(file_path),
        line_number=line_num,
        message=f'Failed to parse line {line_num}: {message}',
    )


def _describe_validation_error(error: pydantic.ValidationError) -> str:
    """Condense a union validation error into one line."""
    details = sorted({err['msg'] for err in error.errors()})
    return f'Invalid record ({error.error_count()} errors): ' + '; '.join(details[:3])
