"""
Shared fixtures for building fake ~/.claude/projects trees.

Records are written in the shape Claude Code uses, trimmed to the fields the
parser reads plus a few extras to prove unknown fields are tolerated.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any

import pytest


def user_record(timestamp: str | None, content: str | list[dict[str, Any]]) -> dict[str, Any]:
    """A user record as written by Claude Code."""
    record: dict[str, Any] = {
        'type': 'user',
        'parentUuid': None,
        'isSidechain': False,
        'userType': 'external',
        'cwd': '/Users/dev/app',
        'sessionId': 'session-1',
        'version': '2.0.35',
        'message': {'role': 'user', 'content': content},
        'uuid': 'u-1',
    }
    if timestamp is not None:
        record['timestamp'] = timestamp
    return record


def assistant_record(timestamp: str | None, text: str = 'Done.') -> dict[str, Any]:
    """An assistant record with a single text block."""
    record: dict[str, Any] = {
        'type': 'assistant',
        'parentUuid': 'u-1',
        'cwd': '/Users/dev/app',
        'sessionId': 'session-1',
        'message': {
            'role': 'assistant',
            'type': 'message',
            'model': 'claude-sonnet-4-5-20250929',
            'content': [{'type': 'text', 'text': text}],
        },
        'uuid': 'a-1',
    }
    if timestamp is not None:
        record['timestamp'] = timestamp
    return record


def summary_record(summary: str = 'Fixing a bug') -> dict[str, Any]:
    """A summary record (no timestamp)."""
    return {'type': 'summary', 'summary': summary, 'leafUuid': 'a-1'}


def write_jsonl(path: Path, lines: Sequence[dict[str, Any] | str]) -> Path:
    """Write records (dicts) or raw text lines to a JSONL file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        for line in lines:
            f.write((line if isinstance(line, str) else json.dumps(line)) + '\n')
    return path


ProjectFactory = Callable[[str, dict[str, Sequence[dict[str, Any] | str]]], Path]


@pytest.fixture
def projects_dir(tmp_path: Path) -> Path:
    """An empty Claude projects directory."""
    path = tmp_path / 'projects'
    path.mkdir()
    return path


@pytest.fixture
def make_project(projects_dir: Path) -> ProjectFactory:
    """Create an encoded project directory holding {session_id: lines} files."""

    def _make(dir_name: str, sessions: dict[str, Sequence[dict[str, Any] | str]]) -> Path:
        project_dir = projects_dir / dir_name
        project_dir.mkdir()
        for session_id, lines in sessions.items():
            write_jsonl(project_dir / f'{session_id}.jsonl', lines)
        return project_dir

    return _make
