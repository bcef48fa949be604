"""Tests for the command-line interface."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from claude_daily_report.cli.main import app
from conftest import ProjectFactory, assistant_record, user_record

runner = CliRunner()


@pytest.fixture
def populated(make_project: ProjectFactory, projects_dir: Path) -> Path:
    make_project(
        '-Users-dev-app',
        {
            's1': [
                user_record('2025-07-03T09:00:00Z', 'fix bug'),
                assistant_record('2025-07-03T09:15:00Z'),
            ]
        },
    )
    make_project('-Users-dev-empty', {})
    return projects_dir


def test_report_prints_markdown(populated: Path) -> None:
    result = runner.invoke(app, ['report', '2025-07-03', '--projects-dir', str(populated)])

    assert result.exit_code == 0, result.output
    assert '# Daily Report 2025-07-03' in result.stdout
    assert '### app' in result.stdout


def test_report_writes_json_file(populated: Path, tmp_path: Path) -> None:
    output = tmp_path / 'out' / 'report.json'

    result = runner.invoke(
        app, ['report', '2025-07-03', '-f', 'json', '-o', str(output), '--projects-dir', str(populated)]
    )

    assert result.exit_code == 0, result.output
    data = json.loads(output.read_text(encoding='utf-8'))
    assert data['summary']['total_duration_minutes'] == 15


def test_report_for_unknown_project_exits_with_error(populated: Path) -> None:
    result = runner.invoke(app, ['report', '2025-07-03', '-p', 'nope', '--projects-dir', str(populated)])

    assert result.exit_code == 1
    assert 'Project not found: nope' in result.output


def test_report_with_invalid_date_exits_with_error(populated: Path) -> None:
    result = runner.invoke(app, ['report', '2025-02-30', '--projects-dir', str(populated)])

    assert result.exit_code == 1
    assert 'Invalid date format' in result.output


def test_report_rejects_unknown_format(populated: Path) -> None:
    result = runner.invoke(app, ['report', '2025-07-03', '-f', 'pdf', '--projects-dir', str(populated)])

    assert result.exit_code == 2


def test_summary_shows_totals_and_warnings(populated: Path) -> None:
    result = runner.invoke(app, ['summary', '2025-07-03', '--projects-dir', str(populated)])

    assert result.exit_code == 0, result.output
    assert 'Total time: 15m' in result.output
    assert 'app: 15m (1 messages)' in result.output
    assert 'No JSONL files found in project: empty' in result.output


def test_projects_lists_decoded_names(populated: Path) -> None:
    result = runner.invoke(app, ['projects', '--projects-dir', str(populated)])

    assert result.exit_code == 0
    assert 'Available projects (2)' in result.output
    assert 'app' in result.output
    assert 'empty' in result.output


def test_projects_with_missing_directory(tmp_path: Path) -> None:
    result = runner.invoke(app, ['projects', '--projects-dir', str(tmp_path / 'missing')])

    assert result.exit_code == 0
    assert 'No Claude Code projects found' in result.output
