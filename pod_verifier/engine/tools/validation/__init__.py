# Path: pod_verifier/engine/tools/validation/__init__.py
"""
Validation Tools

- structure_validator: top-level record shape
- entry_validator: entry names and type/value contracts
- entry_resolver: primitive vs tagged entry resolution
- format_checks: signature / public key shape hints
"""

from .structure_validator import StructureCheck, StructureValidation, validate_structure
from .entry_resolver import ResolvedEntry, resolve_entry
from .entry_validator import (
    EntryValidation,
    validate_entries,
    validate_entry_name,
    validate_entry_value,
    value_matches_type,
)
from .format_checks import (
    FormatCheck,
    looks_like_signature,
    looks_like_public_key,
    validate_cryptographic_formats,
)

__all__ = [
    'StructureCheck',
    'StructureValidation',
    'validate_structure',
    'ResolvedEntry',
    'resolve_entry',
    'EntryValidation',
    'validate_entries',
    'validate_entry_name',
    'validate_entry_value',
    'value_matches_type',
    'FormatCheck',
    'looks_like_signature',
    'looks_like_public_key',
    'validate_cryptographic_formats',
]
