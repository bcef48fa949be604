"""Daily activity reports reconstructed from Claude Code session history."""

from __future__ import annotations

__version__ = '0.1.0'
