"""
Session reconstruction - turns one file's events into a SessionRecord.

A session is the span of activity in one log file on one calendar date. Its
boundaries come from every timestamped event in the window (assistant replies
included), because the last reply best approximates when work ended. It only
exists if the user typed at least one instruction on that date.
"""

from __future__ import annotations

import datetime as dt
from collections.abc import Iterable, Sequence

from claude_daily_report.exceptions import SessionReconstructionError
from claude_daily_report.schemas.events import RawEvent, TextContent, UserEvent
from claude_daily_report.schemas.report import SessionRecord

__all__ = [
    'TOOL_USE_PLACEHOLDER',
    'UNKNOWN_CONTENT_PLACEHOLDER',
    'calculate_duration_minutes',
    'extract_instruction',
    'extract_instructions',
    'filter_events_for_date',
    'reconstruct_session',
]

# Instruction text for user records without any text block (tool results)
TOOL_USE_PLACEHOLDER = '[Tool use]'
# Instruction text for content that is neither a string nor a list of blocks
UNKNOWN_CONTENT_PLACEHOLDER = '[Unknown content]'


def filter_events_for_date(events: Iterable[RawEvent], target_date: dt.date) -> list[RawEvent]:
    """
    Keep events whose timestamp falls on target_date.

    The calendar day is read in the timestamp's own recorded offset; no
    timezone conversion happens. Events without a timestamp are dropped.
    """
    return [
        event
        for event in events
        if getattr(event, 'timestamp', None) is not None and event.timestamp.date() == target_date
    ]


def extract_instruction(event: RawEvent) -> str | None:
    """
    Return the instruction text of a user-authored event, None for anything else.

    Plain string content is returned as-is. For a list of content blocks the
    first text block wins; without one the placeholder marks a tool exchange.
    Any other content shape yields the unknown-content placeholder.
    """
    if not isinstance(event, UserEvent):
        return None
    if event.message is None or event.message.role != 'user':
        return None

    content = event.message.content
    if isinstance(content, str):
        return content
    if not isinstance(content, list):
        return UNKNOWN_CONTENT_PLACEHOLDER
    for part in content:
        if isinstance(part, TextContent):
            return part.text or TOOL_USE_PLACEHOLDER
    return TOOL_USE_PLACEHOLDER


def extract_instructions(events: Iterable[RawEvent]) -> list[str]:
    """Instruction texts in order of appearance."""
    instructions = []
    for event in events:
        instruction = extract_instruction(event)
        if instruction is not None:
            instructions.append(instruction)
    return instructions


def calculate_duration_minutes(start_time: dt.datetime, end_time: dt.datetime) -> int:
    """Whole minutes between two instants, truncated and never negative."""
    seconds = (end_time - start_time).total_seconds()
    return max(0, int(seconds // 60))


def reconstruct_session(
    events: Sequence[RawEvent],
    target_date: dt.date,
    project_path: str,
    session_id: str,
) -> SessionRecord | None:
    """
    Build the session for one log file on target_date.

    Args:
        events: Parsed events of one log file, in file order
        target_date: Calendar date to report on
        project_path: Decoded path of the owning project
        session_id: Identifier derived from the log file name

    Returns:
        SessionRecord, or None when no user instruction falls on target_date

    Raises:
        SessionReconstructionError: If the window mixes timestamps with and
            without a UTC offset (they cannot be ordered)
    """
    window = filter_events_for_date(events, target_date)

    instructions = extract_instructions(window)
    if not instructions:
        return None

    timestamps = [event.timestamp for event in window if event.timestamp is not None]
    if not timestamps:
        return None

    try:
        start_time = min(timestamps)
        end_time = max(timestamps)
    except TypeError as e:
        raise SessionReconstructionError(f'Cannot order timestamps in session {session_id}: {e}') from e

    return SessionRecord(
        session_id=session_id,
        project_path=project_path,
        start_time=start_time,
        end_time=end_time,
        duration_minutes=calculate_duration_minutes(start_time, end_time),
        message_count=len(instructions),
        instructions=instructions,
    )
