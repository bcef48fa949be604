"""
Report rendering - DailyReport to Markdown, JSON or HTML text.

Pure string assembly; writing the result anywhere is the caller's job.
"""

from __future__ import annotations

import datetime as dt
import html
from collections.abc import Sequence

from claude_daily_report.config import ReportFormat
from claude_daily_report.schemas.report import DailyReport, ProjectRecord, SessionRecord

__all__ = [
    'FILE_EXTENSIONS',
    'default_output_filename',
    'format_duration',
    'format_time',
    'render_html',
    'render_json',
    'render_markdown',
    'render_report',
]

FILE_EXTENSIONS: dict[ReportFormat, str] = {
    'markdown': '.md',
    'json': '.json',
    'html': '.html',
}

NO_ACTIVITY_MESSAGE = 'No activity was recorded on this day.'


# ==============================================================================
# Formatting Helpers
# ==============================================================================


def format_duration(minutes: int) -> str:
    """
    Format a duration in minutes.

    Examples:
        >>> format_duration(0)
        '0m'
        >>> format_duration(90)
        '1h 30m'
    """
    hours, remaining = divmod(minutes, 60)
    if hours == 0:
        return f'{remaining}m'
    if remaining == 0:
        return f'{hours}h'
    return f'{hours}h {remaining}m'


def format_time(timestamp: dt.datetime) -> str:
    """HH:MM in the timestamp's own offset."""
    return timestamp.strftime('%H:%M')


def _time_range(session: SessionRecord) -> str:
    return f'{format_time(session.start_time)}-{format_time(session.end_time)}'


def _timeline(projects: Sequence[ProjectRecord]) -> list[tuple[str, SessionRecord]]:
    """All sessions across projects in chronological order."""
    entries = [(project.name, session) for project in projects for session in project.sessions]
    entries.sort(key=lambda entry: entry[1].start_time.timestamp())
    return entries


def default_output_filename(date: dt.date, fmt: ReportFormat) -> str:
    """File name used when a non-markdown report is requested without --output."""
    return f'daily-report-{date.isoformat()}{FILE_EXTENSIONS[fmt]}'


# ==============================================================================
# Markdown
# ==============================================================================


def render_markdown(report: DailyReport) -> str:
    """Render the report as Markdown."""
    summary = report.summary
    lines = [
        f'# Daily Report {report.date.isoformat()}',
        '',
        '## Summary',
        '',
        f'- **Total time**: {format_duration(summary.total_duration_minutes)}',
        f'- **Projects**: {summary.project_count}',
        f'- **Messages sent**: {summary.total_message_count}',
        f'- **Sessions**: {summary.session_count}',
        '',
    ]

    if not report.projects:
        lines += [NO_ACTIVITY_MESSAGE, '']
        return '\n'.join(lines)

    lines += ['## Projects', '']
    for project in report.projects:
        lines += _project_markdown(project)

    lines += ['## Timeline', '']
    for project_name, session in _timeline(report.projects):
        lines.append(
            f'- **{_time_range(session)}** {project_name} '
            f'({format_duration(session.duration_minutes)}, {session.message_count} messages)'
        )
    lines.append('')

    return '\n'.join(lines)


def _project_markdown(project: ProjectRecord) -> list[str]:
    ranges = ', '.join(_time_range(session) for session in project.sessions)
    lines = [
        f'### {project.name} ({project.path})',
        '',
        f'- **Time**: {format_duration(project.total_duration_minutes)} ({ranges})',
        f'- **Messages**: {project.total_message_count}',
        f'- **Sessions**: {len(project.sessions)}',
        '',
    ]

    if len(project.sessions) > 1:
        lines += ['#### Sessions', '']
        for index, session in enumerate(project.sessions, 1):
            lines += [
                f'**Session {index}** ({_time_range(session)})',
                f'- Time: {format_duration(session.duration_minutes)}',
                f'- Messages: {session.message_count}',
                '',
            ]

    return lines


# ==============================================================================
# JSON
# ==============================================================================


def render_json(report: DailyReport) -> str:
    """Render the report as indented JSON."""
    return report.model_dump_json(indent=2)


# ==============================================================================
# HTML
# ==============================================================================

HTML_STYLES = """
    body { font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Arial, sans-serif;
           line-height: 1.6; color: #333; margin: 0; padding: 20px; background-color: #f5f5f5; }
    .container { max-width: 800px; margin: 0 auto; background-color: white; padding: 30px;
                 border-radius: 8px; box-shadow: 0 2px 10px rgba(0,0,0,0.1); }
    h1 { color: #2c3e50; border-bottom: 3px solid #3498db; padding-bottom: 10px; }
    h2 { color: #34495e; border-bottom: 2px solid #ecf0f1; padding-bottom: 5px; }
    h3 { color: #2980b9; }
    .summary { background-color: #ecf0f1; padding: 20px; border-radius: 5px; margin: 20px 0; }
    .project { margin: 25px 0; padding: 20px; border-left: 4px solid #3498db; background-color: #f8f9fa; }
    .path, .details { color: #7f8c8d; font-size: 0.9em; font-weight: normal; }
    .timeline-list { list-style: none; padding: 0; }
    .timeline-list li { padding: 8px 0; border-bottom: 1px solid #ecf0f1; }
"""


def render_html(report: DailyReport) -> str:
    """Render the report as a standalone HTML page. Project names and paths are escaped."""
    summary = report.summary
    title = f'Daily Report {report.date.isoformat()}'
    parts = [
        '<!DOCTYPE html>',
        '<html lang="en">',
        '<head>',
        '  <meta charset="UTF-8">',
        '  <meta name="viewport" content="width=device-width, initial-scale=1.0">',
        f'  <title>{title}</title>',
        f'  <style>{HTML_STYLES}  </style>',
        '</head>',
        '<body>',
        '  <div class="container">',
        f'    <h1>{title}</h1>',
        '    <div class="summary">',
        '      <h2>Summary</h2>',
        '      <ul>',
        f'        <li><strong>Total time</strong>: {format_duration(summary.total_duration_minutes)}</li>',
        f'        <li><strong>Projects</strong>: {summary.project_count}</li>',
        f'        <li><strong>Messages sent</strong>: {summary.total_message_count}</li>',
        f'        <li><strong>Sessions</strong>: {summary.session_count}</li>',
        '      </ul>',
        '    </div>',
    ]

    if not report.projects:
        parts.append(f'    <p>{NO_ACTIVITY_MESSAGE}</p>')
    else:
        parts += ['    <div class="projects">', '      <h2>Projects</h2>']
        for project in report.projects:
            parts += _project_html(project)
        parts += ['    </div>', '    <div class="timeline">', '      <h2>Timeline</h2>']
        parts.append('      <ul class="timeline-list">')
        for project_name, session in _timeline(report.projects):
            parts.append(
                f'        <li><strong>{_time_range(session)}</strong> {html.escape(project_name)} '
                f'<span class="details">({format_duration(session.duration_minutes)}, '
                f'{session.message_count} messages)</span></li>'
            )
        parts += ['      </ul>', '    </div>']

    parts += ['  </div>', '</body>', '</html>', '']
    return '\n'.join(parts)


def _project_html(project: ProjectRecord) -> list[str]:
    ranges = ', '.join(_time_range(session) for session in project.sessions)
    parts = [
        '      <div class="project">',
        f'        <h3>{html.escape(project.name)} <span class="path">({html.escape(project.path)})</span></h3>',
        '        <ul>',
        f'          <li><strong>Time</strong>: {format_duration(project.total_duration_minutes)} ({ranges})</li>',
        f'          <li><strong>Messages</strong>: {project.total_message_count}</li>',
        f'          <li><strong>Sessions</strong>: {len(project.sessions)}</li>',
        '        </ul>',
    ]

    if len(project.sessions) > 1:
        parts += ['        <h4>Sessions</h4>', '        <ul class="sessions">']
        for index, session in enumerate(project.sessions, 1):
            parts.append(
                f'          <li><strong>Session {index}</strong> ({_time_range(session)}): '
                f'{format_duration(session.duration_minutes)}, {session.message_count} messages</li>'
            )
        parts.append('        </ul>')

    parts.append('      </div>')
    return parts


# ==============================================================================
# Dispatch
# ==============================================================================


def render_report(report: DailyReport, fmt: ReportFormat) -> str:
    """Render in the requested format."""
    if fmt == 'json':
        return render_json(report)
    if fmt == 'html':
        return render_html(report)
    return render_markdown(report)
