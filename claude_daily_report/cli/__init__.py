"""Command-line interface for claude-daily-report."""
