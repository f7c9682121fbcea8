# Path: pod_verifier/engine/tools/formatting/__init__.py
"""
Formatting Tools

- entry_formatter: display-ready, sorted entry views
- categorizer: name-based category and importance
- date_formatter: UTC timestamp/date rendering
"""

from .entry_formatter import (
    FormattedEntry,
    format_resolved_entry,
    format_entry,
    format_resolved_entries,
    format_entries,
    format_record_entries,
)
from .categorizer import categorize_entry, is_important_entry, category_info
from .date_formatter import format_timestamp, format_date_string

__all__ = [
    'FormattedEntry',
    'format_resolved_entry',
    'format_entry',
    'format_resolved_entries',
    'format_entries',
    'format_record_entries',
    'categorize_entry',
    'is_important_entry',
    'category_info',
    'format_timestamp',
    'format_date_string',
]
