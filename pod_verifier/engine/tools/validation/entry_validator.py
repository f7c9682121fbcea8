# Path: pod_verifier/engine/tools/validation/entry_validator.py
"""
Entry Validator

Enforces per-entry naming and type/value contracts.

Entries are checked in insertion order and validation stops at the
first invalid entry. Callers get one error describing the first
violation, never a list.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Callable, Optional

from ...constants.entry_types import (
    VALID_TYPES,
    TYPE_SHAPES,
    TYPE_NULL,
    TAG_TYPE,
    TAG_VALUE,
    ENTRY_NAME_PATTERN,
    NUMERIC_TEXT_PATTERN,
)
from .entry_resolver import (
    ResolvedEntry,
    is_primitive_value,
    infer_primitive_type,
    canonical_type_name,
)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


SHAPE_CHECKS: dict[str, Callable[[Any], bool]] = {
    'text': lambda value: isinstance(value, str),
    'number': _is_number,
    'numeric_text': lambda value: (
        isinstance(value, str) and NUMERIC_TEXT_PATTERN.fullmatch(value) is not None
    ),
    'bool': lambda value: isinstance(value, bool),
    'date_value': lambda value: isinstance(value, date),
    'byte_sequence': lambda value: isinstance(value, (bytes, bytearray, memoryview)),
    'null': lambda value: value is None,
}


@dataclass(frozen=True)
class EntryValidation:
    """Result of entry validation."""
    is_valid: bool
    error: Optional[str] = None
    entry_name: Optional[str] = None
    entries: tuple[ResolvedEntry, ...] = field(default_factory=tuple)


def describe_value_kind(value: Any) -> str:
    """JSON-style name of a value's runtime kind, for error messages."""
    if value is None:
        return 'null'
    if isinstance(value, bool):
        return 'boolean'
    if _is_number(value):
        return 'number'
    if isinstance(value, str):
        return 'string'
    if isinstance(value, dict):
        return 'object'
    if isinstance(value, (list, tuple)):
        return 'array'
    return type(value).__name__


def value_matches_type(entry_type: str, value: Any) -> bool:
    """Check a value against the accepted shapes of a declared type."""
    shapes = TYPE_SHAPES.get(entry_type, ())
    return any(SHAPE_CHECKS[shape](value) for shape in shapes)


def validate_entry_name(name: Any) -> Optional[str]:
    """Return an error message for an invalid entry name, else None."""
    if not isinstance(name, str) or len(name) == 0:
        return f'Entry name "{name}" must be a non-empty string'

    if ENTRY_NAME_PATTERN.fullmatch(name) is None:
        return (
            f'Entry name "{name}" must be a valid identifier '
            f'(alphanumeric + underscore, not starting with digit)'
        )
    return None


def validate_entry_value(name: str, raw: Any) -> tuple[Optional[str], Optional[ResolvedEntry]]:
    """
    Validate one entry value and resolve it.

    Args:
        name: Entry name (already validated)
        raw: Entry value as found in the record

    Returns:
        (error or None, ResolvedEntry or None)
    """
    if is_primitive_value(raw):
        return None, ResolvedEntry(name=name, type=infer_primitive_type(raw), value=raw)

    if not isinstance(raw, dict):
        return (
            f'Entry "{name}" must be an object with type and value, or a primitive value',
            None,
        )

    if TAG_TYPE not in raw or TAG_VALUE not in raw:
        return f'Entry "{name}" must have both "{TAG_TYPE}" and "{TAG_VALUE}" fields', None

    declared = raw[TAG_TYPE]
    entry_type = canonical_type_name(declared) if isinstance(declared, str) else None
    if entry_type not in VALID_TYPES:
        return (
            f'Entry "{name}" has invalid type "{declared}". '
            f'Valid types: {", ".join(VALID_TYPES)}',
            None,
        )

    value = raw[TAG_VALUE]
    if not value_matches_type(entry_type, value):
        if entry_type == TYPE_NULL:
            return f'Entry "{name}" type is "null" but value is not null', None
        return (
            f'Entry "{name}" type is "{entry_type}" but value is {describe_value_kind(value)}',
            None,
        )

    return None, ResolvedEntry(name=name, type=entry_type, value=value, tagged=True)


def validate_entries(entries: Any) -> EntryValidation:
    """
    Validate all entries, failing fast on the first invalid one.

    Args:
        entries: The record's entries mapping

    Returns:
        EntryValidation; on success carries the resolved entries in order
    """
    if not isinstance(entries, dict):
        return EntryValidation(is_valid=False, error='Entries must be an object')

    resolved: list[ResolvedEntry] = []

    for name, raw in entries.items():
        error = validate_entry_name(name)
        if error is None:
            error, entry = validate_entry_value(name, raw)
        if error is not None:
            return EntryValidation(is_valid=False, error=error, entry_name=str(name))
        resolved.append(entry)

    return EntryValidation(is_valid=True, entries=tuple(resolved))


__all__ = [
    'EntryValidation',
    'describe_value_kind',
    'value_matches_type',
    'validate_entry_name',
    'validate_entry_value',
    'validate_entries',
]
