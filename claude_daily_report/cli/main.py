#!/usr/bin/env python3
"""
Command-line interface for claude-daily-report.

Generates daily work reports from Claude Code session history.

Examples:
    claude-daily-report report                      # Today's report
    claude-daily-report report 2025-07-03           # Specific date
    claude-daily-report report -p expense-checker   # One project
    claude-daily-report report -f html -o out.html  # HTML file
    claude-daily-report summary 2025-07-03          # Totals only
    claude-daily-report projects                    # List projects
"""

from __future__ import annotations

import asyncio
import datetime as dt
import logging
import traceback
from pathlib import Path
from typing import TypeGuard

import typer

from claude_daily_report.cli.logger import CLILogger
from claude_daily_report.config import ReportFormat, settings
from claude_daily_report.exceptions import DailyReportError
from claude_daily_report.rendering import default_output_filename, format_duration, render_report
from claude_daily_report.schemas.report import DailyReport, ParseResult
from claude_daily_report.services.parser import DailyHistoryParser

app = typer.Typer(
    name='claude-daily-report',
    help='Generate daily reports from Claude Code usage history',
    add_completion=False,
)

VALID_FORMATS: tuple[ReportFormat, ...] = ('markdown', 'json', 'html')


def _is_report_format(value: str) -> TypeGuard[ReportFormat]:
    """Type guard for valid report formats."""
    return value in VALID_FORMATS


def _validate_format(value: str | None) -> ReportFormat | None:
    """Validate and narrow report format for typer callback."""
    if value is None:
        return None
    if _is_report_format(value):
        return value
    raise typer.BadParameter(f'Must be one of: {", ".join(VALID_FORMATS)}')


def _resolve_date(date: str | None) -> str:
    return date or dt.date.today().isoformat()


def _make_parser(projects_dir: Path | None) -> DailyHistoryParser:
    return DailyHistoryParser(projects_dir or settings.CLAUDE_PROJECTS_DIR)


def _print_warnings(result: ParseResult) -> None:
    if result.warnings:
        typer.secho('Warnings:', fg=typer.colors.YELLOW, err=True)
        for warning in result.warnings:
            typer.echo(f'  - {warning}', err=True)


def _report_or_exit(result: ParseResult) -> DailyReport:
    """Return the parsed report, or print the terminal error and exit with status 1."""
    try:
        return result.raise_for_error()
    except DailyReportError as e:
        typer.secho(f'Error: {e}', fg=typer.colors.RED, err=True)
        raise typer.Exit(1)


# ==============================================================================
# Commands
# ==============================================================================


@app.command()
def report(
    date: str | None = typer.Argument(None, help='Target date (YYYY-MM-DD, default: today)'),
    project: str | None = typer.Option(None, '--project', '-p', help='Only report on this project'),
    output: Path | None = typer.Option(None, '--output', '-o', help='Write the report to this file'),
    format: str | None = typer.Option(
        None, '--format', '-f', help='Output format: markdown, json or html', callback=_validate_format
    ),
    projects_dir: Path | None = typer.Option(
        None, '--projects-dir', help='Claude projects directory (default: CLAUDE_PROJECTS_DIR)'
    ),
    verbose: bool = typer.Option(False, '--verbose', '-v', help='Verbose output'),
) -> None:
    """Generate the daily report for a date."""
    asyncio.run(_report_async(_resolve_date(date), project, output, format, projects_dir, verbose))


async def _report_async(
    date: str,
    project: str | None,
    output: Path | None,
    format: ReportFormat | None,
    projects_dir: Path | None,
    verbose: bool,
) -> None:
    """Async implementation of report command."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format='[%(levelname)s] %(name)s: %(message)s')

    logger = CLILogger(verbose=verbose)
    parser = _make_parser(projects_dir)
    fmt: ReportFormat = format or settings.DEFAULT_FORMAT

    typer.secho(f'Generating daily report for {date}...', fg=typer.colors.BLUE, err=True)
    if project:
        typer.secho(f'Filtering by project: {project}', fg=typer.colors.BRIGHT_BLACK, err=True)
        result = await parser.parse_project_only(project, date, logger)
    else:
        result = await parser.parse_for_date(date, logger)

    data = _report_or_exit(result)
    _print_warnings(result)
    if verbose:
        for failure in result.failures:
            typer.echo(f'  ! {failure.source_file}:{failure.line_number}: {failure.message}', err=True)

    content = render_report(data, fmt)

    if output is None and fmt != 'markdown':
        output = Path.cwd() / default_output_filename(data.date, fmt)

    if output is None:
        typer.echo(content)
        return

    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(content, encoding='utf-8')
    except OSError as e:
        typer.secho(f'Error: Failed to write file {output}: {e}', fg=typer.colors.RED, err=True)
        if verbose:
            traceback.print_exc()
        raise typer.Exit(1)

    typer.secho(f'✓ Report generated: {output}', fg=typer.colors.GREEN)


@app.command()
def summary(
    date: str | None = typer.Argument(None, help='Target date (YYYY-MM-DD, default: today)'),
    projects_dir: Path | None = typer.Option(
        None, '--projects-dir', help='Claude projects directory (default: CLAUDE_PROJECTS_DIR)'
    ),
) -> None:
    """Show the work summary for a date."""
    asyncio.run(_summary_async(_resolve_date(date), projects_dir))


async def _summary_async(date: str, projects_dir: Path | None) -> None:
    """Async implementation of summary command."""
    parser = _make_parser(projects_dir)
    result = await parser.parse_for_date(date, CLILogger())

    data = _report_or_exit(result)
    totals = data.summary
    typer.secho(f'Daily Summary for {date}', fg=typer.colors.BLUE, bold=True)
    typer.echo('─' * 50)
    typer.echo(f'  Total time: {format_duration(totals.total_duration_minutes)}')
    typer.echo(f'  Messages:   {totals.total_message_count}')
    typer.echo(f'  Projects:   {totals.project_count}')
    typer.echo(f'  Sessions:   {totals.session_count}')

    if data.projects:
        typer.echo()
        typer.echo('Projects:')
        for project in data.projects:
            typer.echo(
                f'  • {project.name}: {format_duration(project.total_duration_minutes)} '
                f'({project.total_message_count} messages)'
            )

    if result.warnings:
        typer.echo()
        _print_warnings(result)


@app.command()
def projects(
    projects_dir: Path | None = typer.Option(
        None, '--projects-dir', help='Claude projects directory (default: CLAUDE_PROJECTS_DIR)'
    ),
) -> None:
    """List available Claude Code projects."""
    parser = _make_parser(projects_dir)
    names = parser.list_available_projects()

    if not names:
        typer.secho('No Claude Code projects found', fg=typer.colors.YELLOW)
        typer.echo(f'Searched in: {parser.projects_dir}')
        return

    typer.secho(f'Available projects ({len(names)}):', fg=typer.colors.BLUE)
    typer.echo('─' * 50)
    for index, name in enumerate(names, 1):
        typer.echo(f'{index:>2}. ' + typer.style(name, fg=typer.colors.CYAN))


def main() -> None:
    """Console script entry point."""
    app()


if __name__ == '__main__':
    main()
