"""
Path decoding utilities for Claude Code project directories.

Claude Code stores each project's session files under a directory whose name
is the project's working directory with path separators replaced by `-`:

    /Users/chris/project -> -Users-chris-project

WARNING: The encoding is LOSSY. Real path segments may contain `-` themselves
(and `.`, ` ` and `~` are also flattened to `-`), so neither function below
can be trusted as an identity. Use the raw directory name when correctness
matters.
"""

from __future__ import annotations

import os

__all__ = ['DELIMITER', 'decode_project_name', 'decode_project_path']

DELIMITER = '-'


def decode_project_path(dir_name: str) -> str:
    """
    Reconstruct a filesystem path from an encoded directory name.

    Strips the single leading delimiter and turns every remaining delimiter
    into the platform separator. Lossless only when no original path segment
    contained a delimiter.

    Examples:
        >>> decode_project_path('-Users-chris-project')  # on POSIX
        'Users/chris/project'
    """
    if dir_name.startswith(DELIMITER):
        dir_name = dir_name[1:]
    return dir_name.replace(DELIMITER, os.sep)


def decode_project_name(dir_name: str) -> str:
    """
    Guess a human-readable project name from an encoded directory name.

    Segment count is the only signal for where the user's home/ancestry ends
    and the project name begins, so this is display logic, not a lookup key.

    Examples:
        >>> decode_project_name('-Users-spyder-c-table-expense-checker')
        'expense-checker'

        >>> decode_project_name('-Users-spyder-personal-claude-daily-reports')
        'claude-daily-reports'
    """
    cleaned = dir_name.strip(DELIMITER)
    if not cleaned:
        return dir_name

    parts = cleaned.split(DELIMITER)

    if len(parts) == 6:
        # Ambiguous shape: a single-letter third segment is read as a short
        # directory (e.g. ~/c/table/expense-checker), anything else as part
        # of a longer ancestry followed by a three-part project name.
        if len(parts[2]) == 1:
            selected = parts[-2:]
        else:
            selected = parts[3:]
    elif len(parts) >= 4:
        selected = parts[-2:]
    elif len(parts) >= 2:
        selected = parts[-1:]
    else:
        selected = parts

    return DELIMITER.join(selected) or dir_name
