"""Tests for project directory name decoding."""

from __future__ import annotations

import os

import pytest

from claude_daily_report.paths import decode_project_name, decode_project_path


def test_decode_path_replaces_delimiters_with_separator() -> None:
    assert decode_project_path('-Users-me-app') == os.sep.join(['Users', 'me', 'app'])


def test_decode_path_is_idempotent_on_its_output() -> None:
    once = decode_project_path('-Users-me-app')
    assert decode_project_path(once) == once


def test_decode_path_strips_only_one_leading_delimiter() -> None:
    assert decode_project_path('--Users-me') == os.sep.join(['', 'Users', 'me'])


@pytest.mark.parametrize(
    ('dir_name', 'expected'),
    [
        # 6 segments, single-letter third segment: last two
        ('-Users-spyder-c-table-expense-checker', 'expense-checker'),
        # 6 segments, longer third segment: from index 3 onward
        ('-Users-me-personal-claude-daily-reports', 'claude-daily-reports'),
        # 5 segments: last two
        ('-Users-x-table-expense-checker', 'expense-checker'),
        # 4 segments: last two
        ('-Users-dev-my-app', 'my-app'),
        # 3 and 2 segments: last one
        ('-Users-dev-app', 'app'),
        ('-tmp-scratch', 'scratch'),
        # single segment
        ('-workspace', 'workspace'),
        # trailing delimiters are stripped before splitting
        ('-Users-dev-app--', 'app'),
        # 7+ segments: last two
        ('-Users-dev-code-github-org-repo-name', 'repo-name'),
    ],
    ids=lambda value: value if isinstance(value, str) else None,
)
def test_decode_name(dir_name: str, expected: str) -> None:
    assert decode_project_name(dir_name) == expected


@pytest.mark.parametrize('dir_name', ['', '-', '---'])
def test_decode_name_falls_back_to_input_when_nothing_remains(dir_name: str) -> None:
    assert decode_project_name(dir_name) == dir_name
