# Path: pod_verifier/engine/tools/validation/entry_resolver.py
"""
Entry Resolver

An entry value arrives in one of two shapes:
- a bare primitive:  "attendeeName": "Joe"
- a tagged pair:     "attendeeName": {"type": "string", "value": "Joe"}

Both are resolved once into a ResolvedEntry(name, type, value) so that
validation and formatting never sniff shapes again.
"""

from dataclasses import dataclass
from typing import Any, Optional

from ...constants.entry_types import (
    TYPE_STRING,
    TYPE_INT,
    TYPE_BOOLEAN,
    TYPE_UNKNOWN,
    TYPE_ALIASES,
    TAG_TYPE,
    TAG_VALUE,
)


@dataclass(frozen=True)
class ResolvedEntry:
    """An entry in canonical {type, value} form."""
    name: str
    type: str
    value: Any
    tagged: bool = False


def is_tagged_value(raw: Any) -> bool:
    """True if raw is a {type, value} mapping."""
    return isinstance(raw, dict) and TAG_TYPE in raw and TAG_VALUE in raw


def is_primitive_value(raw: Any) -> bool:
    """True for str, int, float and bool values."""
    return isinstance(raw, (str, int, float, bool))


def infer_primitive_type(raw: Any) -> Optional[str]:
    """
    Infer the entry type of a bare primitive.

    bool is checked first since it is a subclass of int.
    Every JSON number is reported as 'int'.
    """
    if isinstance(raw, bool):
        return TYPE_BOOLEAN
    if isinstance(raw, (int, float)):
        return TYPE_INT
    if isinstance(raw, str):
        return TYPE_STRING
    return None


def canonical_type_name(declared: Any) -> str:
    """Resolve alias spellings to the canonical type name."""
    name = str(declared)
    return TYPE_ALIASES.get(name, name)


def resolve_entry(name: str, raw: Any) -> ResolvedEntry:
    """
    Resolve any entry value without validating it.

    Values that are neither primitive nor tagged get type 'unknown'.
    """
    if is_tagged_value(raw):
        return ResolvedEntry(
            name=name,
            type=canonical_type_name(raw[TAG_TYPE]),
            value=raw[TAG_VALUE],
            tagged=True,
        )

    inferred = infer_primitive_type(raw)
    return ResolvedEntry(name=name, type=inferred or TYPE_UNKNOWN, value=raw)


__all__ = [
    'ResolvedEntry',
    'is_tagged_value',
    'is_primitive_value',
    'infer_primitive_type',
    'canonical_type_name',
    'resolve_entry',
]
