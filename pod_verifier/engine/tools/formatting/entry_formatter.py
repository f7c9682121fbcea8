# Path: pod_verifier/engine/tools/formatting/entry_formatter.py
"""
Entry Formatter

Turns verified entries (a mapping, or entries resolved during validation)
into a display-ready, sorted sequence.

Each entry gets:
- display_value:   canonical text per type
- formatted_value: display text after name-based presentation rules
- is_important:    headline field flag
- category:        personal / event / timestamp / technical / other

Pure function of the entries: no I/O, no clock, no locale.
Output order is a stable sort on (importance, category rank), so
equal entries keep their original relative order.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from ...constants.entry_types import (
    TYPE_STRING,
    TYPE_INT,
    TYPE_CRYPTOGRAPHIC,
    TYPE_BOOLEAN,
    TYPE_DATE,
    TYPE_BYTES,
    TYPE_NULL,
)
from ...constants.display import (
    EntryCategory,
    PREFIX_EMAIL,
    PREFIX_PERSON,
    PREFIX_EVENT,
    PREFIX_LOCATION,
    PREFIX_URL,
    PREFIX_SECRET,
    PREFIX_ID,
    BOOLEAN_YES,
    BOOLEAN_NO,
    CATEGORY_NUMBER_LABEL,
    SECRET_DISPLAY_LENGTH,
    ID_DISPLAY_LENGTH,
    ELLIPSIS,
)
from ..validation.entry_resolver import ResolvedEntry, resolve_entry
from .categorizer import categorize_entry, is_important_entry, category_rank
from .date_formatter import format_timestamp, format_date_string, iso_display


@dataclass(frozen=True)
class FormattedEntry:
    """Read-only display view of one entry."""
    name: str
    type: str
    value: Any
    display_value: str
    formatted_value: str
    is_important: bool
    category: EntryCategory


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def to_text(value: Any) -> str:
    """Plain text form of a JSON value (null/true/false spelled the JSON way)."""
    if value is None:
        return 'null'
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def truncate(text: str, limit: int) -> str:
    """Cap text at limit characters, marking the cut with an ellipsis."""
    return text[:limit] + ELLIPSIS if len(text) > limit else text


def display_value_for(entry: ResolvedEntry) -> str:
    """Canonical display text for an entry's value, by type."""
    value = entry.value

    if entry.type == TYPE_STRING:
        return f'"{value}"'
    if entry.type in (TYPE_INT, TYPE_CRYPTOGRAPHIC):
        return to_text(value)
    if entry.type == TYPE_BOOLEAN:
        return BOOLEAN_YES if value else BOOLEAN_NO
    if entry.type == TYPE_DATE:
        return iso_display(value)
    if entry.type == TYPE_BYTES and isinstance(value, (bytes, bytearray, memoryview)):
        return f'[{len(value)} bytes]'
    if entry.type == TYPE_NULL:
        return 'null'
    return to_text(value)


def formatted_value_for(entry: ResolvedEntry, display_value: str) -> str:
    """
    Apply name-based presentation rules.

    Precedence (first match wins):
    timestamp > date > email > personal name > event name > location >
    category number > boolean > url > secret/key > id > display value
    """
    lower = entry.name.lower()
    value = entry.value
    text = to_text(value)

    if 'timestamp' in lower and _is_number(value):
        return format_timestamp(value)
    if 'date' in lower and isinstance(value, str):
        return format_date_string(value)
    if 'email' in lower:
        return f'{PREFIX_EMAIL} {text}'
    if 'name' in lower and 'event' not in lower:
        return f'{PREFIX_PERSON} {text}'
    if 'event' in lower and 'name' in lower:
        return f'{PREFIX_EVENT} {text}'
    if 'location' in lower:
        return f'{PREFIX_LOCATION} {text}'
    if 'category' in lower and _is_number(value):
        return f'{CATEGORY_NUMBER_LABEL} {text}'
    if entry.type == TYPE_BOOLEAN:
        return display_value
    if 'url' in lower:
        return f'{PREFIX_URL} {text}'
    if 'secret' in lower or 'key' in lower:
        return f'{PREFIX_SECRET} {truncate(text, SECRET_DISPLAY_LENGTH)}'
    if 'id' in lower:
        return f'{PREFIX_ID} {truncate(text, ID_DISPLAY_LENGTH)}'
    return display_value


def format_resolved_entry(entry: ResolvedEntry) -> FormattedEntry:
    """Format an entry already resolved to {type, value} form."""
    display_value = display_value_for(entry)

    return FormattedEntry(
        name=entry.name,
        type=entry.type,
        value=entry.value,
        display_value=display_value,
        formatted_value=formatted_value_for(entry, display_value),
        is_important=is_important_entry(entry.name),
        category=categorize_entry(entry.name),
    )


def format_entry(name: str, raw: Any) -> FormattedEntry:
    """Format a single entry (either value shape)."""
    return format_resolved_entry(resolve_entry(name, raw))


def format_resolved_entries(entries: Iterable[ResolvedEntry]) -> list[FormattedEntry]:
    """
    Format and order entries resolved during validation.

    Args:
        entries: ResolvedEntry sequence in record order

    Returns:
        FormattedEntry list: important entries first, then by category
    """
    formatted = [format_resolved_entry(entry) for entry in entries]

    return sorted(
        formatted,
        key=lambda item: (not item.is_important, category_rank(item.category)),
    )


def format_entries(entries: Mapping) -> list[FormattedEntry]:
    """
    Format and order all entries.

    Args:
        entries: name -> primitive or {type, value} mapping

    Returns:
        FormattedEntry list: important entries first, then by category
    """
    if not isinstance(entries, Mapping):
        return []

    return format_resolved_entries(
        resolve_entry(str(name), raw) for name, raw in entries.items()
    )


def format_record_entries(record: Mapping) -> list[FormattedEntry]:
    """Format the entries of a whole record mapping."""
    entries = record.get('entries') if isinstance(record, Mapping) else None
    return format_entries(entries or {})


__all__ = [
    'FormattedEntry',
    'to_text',
    'truncate',
    'display_value_for',
    'formatted_value_for',
    'format_resolved_entry',
    'format_entry',
    'format_resolved_entries',
    'format_entries',
    'format_record_entries',
]
