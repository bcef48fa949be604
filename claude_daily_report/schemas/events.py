"""
Pydantic models for Claude Code session JSONL records.

Only the three record kinds that matter for daily reporting are modeled:

- summary: conversation title written by Claude Code (usually no timestamp)
- user: a prompt typed by the user, or a tool result fed back to the model
- assistant: a model response

Every model is permissive (extra='allow') because reporting must survive new
fields appearing in future Claude Code versions. Records of any other kind
(system, file-history-snapshot, progress, ...) validate as UnknownEvent and are
dropped by the reader.

Key findings from real session files:
- summary records have no uuid/timestamp/sessionId
- message.content is a plain string or a list of typed content blocks; any
  other shape is kept as-is rather than rejected
- user records whose content is only tool_result blocks carry no typed text
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Annotated, Any, Literal

import pydantic

from claude_daily_report.schemas.types import JsonDatetime, PermissiveModel

__all__ = [
    'AssistantEvent',
    'ContentPart',
    'EventMessage',
    'RawEvent',
    'RawEventAdapter',
    'SummaryEvent',
    'TextContent',
    'UnknownEvent',
    'UserEvent',
    'is_reportable',
]

REPORTABLE_KINDS = frozenset({'summary', 'user', 'assistant'})


# ==============================================================================
# Message Content
# ==============================================================================


class TextContent(PermissiveModel):
    """Text content block from user or assistant messages."""

    type: Literal['text']
    text: str


class ContentPart(PermissiveModel):
    """Any other content block (tool_use, tool_result, image, thinking, ...)."""

    type: str | None = None


MessageContent = Annotated[
    TextContent | ContentPart,
    pydantic.Field(union_mode='left_to_right'),
]


class EventMessage(PermissiveModel):
    """A message within a user or assistant record."""

    role: Literal['user', 'assistant']
    # Any catches shapes Claude Code may start writing (null, objects, ...)
    content: Annotated[
        str | Sequence[MessageContent] | Any,
        pydantic.Field(union_mode='left_to_right'),
    ] = None


# ==============================================================================
# Records
# ==============================================================================


class UserEvent(PermissiveModel):
    """User message record."""

    type: Literal['user']
    timestamp: JsonDatetime | None = None
    sessionId: str | None = None
    cwd: str | None = None
    message: EventMessage | None = None


class AssistantEvent(PermissiveModel):
    """Assistant message record."""

    type: Literal['assistant']
    timestamp: JsonDatetime | None = None
    sessionId: str | None = None
    cwd: str | None = None
    message: EventMessage | None = None


class SummaryEvent(PermissiveModel):
    """Session summary record (minimal schema, normally no timestamp)."""

    type: Literal['summary']
    summary: str | None = None
    leafUuid: str | None = None
    timestamp: JsonDatetime | None = None


class UnknownEvent(PermissiveModel):
    """Fallback for record kinds this package does not report on."""

    type: str | None = None

    @pydantic.field_validator('type')
    @classmethod
    def reject_reportable_kinds(cls, v: str | None) -> str | None:
        """A malformed user/assistant/summary record must fail validation, not be ignored."""
        if v in REPORTABLE_KINDS:
            raise ValueError(f'malformed {v} record')
        return v


# ==============================================================================
# Union Type
# ==============================================================================

# Order matters: UnknownEvent must stay last, it accepts any other JSON object.
RawEvent = Annotated[
    UserEvent | AssistantEvent | SummaryEvent | UnknownEvent,
    pydantic.Field(union_mode='left_to_right'),
]

RawEventAdapter: pydantic.TypeAdapter[RawEvent] = pydantic.TypeAdapter(RawEvent)


def is_reportable(event: RawEvent) -> bool:
    """Return True for the record kinds that take part in session reconstruction."""
    return isinstance(event, (UserEvent, AssistantEvent, SummaryEvent))
