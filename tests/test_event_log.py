"""Tests for tolerant JSONL reading."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from claude_daily_report.schemas.events import AssistantEvent, SummaryEvent, TextContent, UserEvent
from claude_daily_report.services.event_log import read_event_log
from conftest import assistant_record, summary_record, user_record, write_jsonl


def test_reads_user_assistant_and_summary_records(tmp_path: Path) -> None:
    path = write_jsonl(
        tmp_path / 's.jsonl',
        [
            summary_record(),
            user_record('2025-07-03T09:00:00.000Z', 'fix bug'),
            assistant_record('2025-07-03T09:15:00.000Z'),
        ],
    )

    log = read_event_log(path)

    assert [type(event) for event in log.events] == [SummaryEvent, UserEvent, AssistantEvent]
    assert log.failures == []
    user = log.events[1]
    assert isinstance(user, UserEvent)
    assert user.timestamp is not None
    assert user.timestamp.hour == 9
    assert user.message is not None
    assert user.message.content == 'fix bug'


def test_trailing_newline_produces_no_failure(tmp_path: Path) -> None:
    path = tmp_path / 's.jsonl'
    path.write_text('{"type": "summary", "summary": "x"}\n\n', encoding='utf-8')

    log = read_event_log(path)

    assert len(log.events) == 1
    assert log.failures == []


def test_malformed_line_is_reported_and_skipped(tmp_path: Path) -> None:
    lines = [user_record(f'2025-07-03T09:0{i}:00Z', f'msg {i}') for i in range(9)]
    lines.insert(3, '{"type": "user", "message": ')
    path = write_jsonl(tmp_path / 's.jsonl', lines)

    log = read_event_log(path)

    assert len(log.events) == 9
    assert len(log.failures) == 1
    failure = log.failures[0]
    assert failure.line_number == 4
    assert failure.source_file == str(path)
    assert 'Invalid JSON' in failure.message


def test_record_with_known_kind_but_wrong_shape_is_a_failure(tmp_path: Path) -> None:
    bad_role = user_record('2025-07-03T09:00:00Z', 'x')
    bad_role['message']['role'] = 'system'
    path = write_jsonl(tmp_path / 's.jsonl', [bad_role, '[1, 2, 3]'])

    log = read_event_log(path)

    assert log.events == []
    assert [failure.line_number for failure in log.failures] == [1, 2]
    assert all('Invalid record' in failure.message for failure in log.failures)


@pytest.mark.parametrize('content', [42, {'weird': True}, None])
def test_unrecognized_content_shape_is_kept(tmp_path: Path, content: object) -> None:
    record = user_record('2025-07-03T09:00:00Z', 'x')
    record['message']['content'] = content
    path = write_jsonl(tmp_path / 's.jsonl', [record])

    log = read_event_log(path)

    assert log.failures == []
    (event,) = log.events
    assert isinstance(event, UserEvent)
    assert event.message is not None
    assert event.message.content == content


def test_invalid_utf8_line_is_isolated(tmp_path: Path) -> None:
    path = tmp_path / 's.jsonl'
    good_before = json.dumps(user_record('2025-07-03T09:00:00Z', 'before')).encode()
    good_after = json.dumps(assistant_record('2025-07-03T09:05:00Z')).encode()
    path.write_bytes(good_before + b'\n{"type": "user", "bad": "\xff"}\n' + good_after + b'\n')

    log = read_event_log(path)

    assert [type(event) for event in log.events] == [UserEvent, AssistantEvent]
    (failure,) = log.failures
    assert failure.line_number == 2
    assert 'Invalid UTF-8' in failure.message


def test_unknown_record_kinds_are_ignored(tmp_path: Path) -> None:
    path = write_jsonl(
        tmp_path / 's.jsonl',
        [
            {'type': 'file-history-snapshot', 'messageId': 'm-1', 'snapshot': {}},
            {'type': 'system', 'subtype': 'informational', 'timestamp': '2025-07-03T08:00:00Z'},
            user_record('2025-07-03T09:00:00Z', 'hello'),
        ],
    )

    log = read_event_log(path)

    assert len(log.events) == 1
    assert log.failures == []


def test_content_blocks_keep_text_and_tolerate_unknown_parts(tmp_path: Path) -> None:
    content = [
        {'type': 'tool_result', 'tool_use_id': 't-1', 'content': 'ok'},
        {'type': 'text', 'text': 'now run the tests'},
        {'type': 'image', 'source': {'type': 'base64', 'media_type': 'image/png', 'data': ''}},
    ]
    path = write_jsonl(tmp_path / 's.jsonl', [user_record('2025-07-03T09:00:00Z', content)])

    (event,) = read_event_log(path).events

    assert isinstance(event, UserEvent)
    assert event.message is not None
    parts = list(event.message.content)
    assert isinstance(parts[1], TextContent)
    assert parts[1].text == 'now run the tests'
    assert not isinstance(parts[0], TextContent)


def test_missing_file_raises_os_error(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        read_event_log(tmp_path / 'missing.jsonl')
