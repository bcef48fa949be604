"""Service layer for daily report operations."""

from claude_daily_report.services.discovery import list_log_files, list_project_directories
from claude_daily_report.services.event_log import EventLog, read_event_log
from claude_daily_report.services.parser import DailyHistoryParser, calculate_summary, parse_target_date
from claude_daily_report.services.sessions import reconstruct_session

__all__ = [
    'DailyHistoryParser',
    'EventLog',
    'calculate_summary',
    'list_log_files',
    'list_project_directories',
    'parse_target_date',
    'read_event_log',
    'reconstruct_session',
]
