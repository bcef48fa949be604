"""
Schema models for claude-daily-report.

- events: permissive models for Claude Code session JSONL records
- report: sessions, projects, daily report and the parse result envelope
"""

from __future__ import annotations

from claude_daily_report.schemas.events import (
    AssistantEvent,
    EventMessage,
    RawEvent,
    RawEventAdapter,
    SummaryEvent,
    TextContent,
    UnknownEvent,
    UserEvent,
)
from claude_daily_report.schemas.report import (
    DailyReport,
    DailySummary,
    ParseFailure,
    ParseResult,
    ProjectRecord,
    SessionRecord,
)

__all__ = [
    'AssistantEvent',
    'DailyReport',
    'DailySummary',
    'EventMessage',
    'ParseFailure',
    'ParseResult',
    'ProjectRecord',
    'RawEvent',
    'RawEventAdapter',
    'SessionRecord',
    'SummaryEvent',
    'TextContent',
    'UnknownEvent',
    'UserEvent',
]
