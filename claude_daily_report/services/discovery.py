"""
Project discovery - finds project directories and session files.

Claude Code keeps one directory per project under ~/.claude/projects/, named
after the encoded project path (always starting with '-'), holding one
<session-id>.jsonl file per session.
"""

from __future__ import annotations

from pathlib import Path

from claude_daily_report.paths import DELIMITER

__all__ = ['LOG_FILE_SUFFIX', 'list_log_files', 'list_project_directories']

LOG_FILE_SUFFIX = '.jsonl'


def list_project_directories(projects_dir: Path) -> list[str]:
    """
    List encoded project directory names, sorted for deterministic output.

    Entries that are not directories or lack the leading delimiter are skipped.

    Raises:
        OSError: If projects_dir cannot be listed
    """
    return sorted(
        entry.name for entry in projects_dir.iterdir() if entry.name.startswith(DELIMITER) and entry.is_dir()
    )


def list_log_files(project_dir: Path) -> list[Path]:
    """
    List session files in one project directory, sorted by name.

    Matching is by suffix only; an entry that turns out not to be a readable
    file fails when it is opened and is reported for that file alone.

    Raises:
        OSError: If project_dir cannot be listed
    """
    return sorted(
        entry for entry in project_dir.iterdir() if entry.name.endswith(LOG_FILE_SUFFIX)
    )
