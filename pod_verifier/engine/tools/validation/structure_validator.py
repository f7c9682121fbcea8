# Path: pod_verifier/engine/tools/validation/structure_validator.py
"""
Structural Validator

Checks the top-level shape of a parsed record.

Checks run in a fixed order and stop at the first failure, so the same
input always produces the same error:
    object -> entries -> signature -> signerPublicKey
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from ....constants import FIELD_ENTRIES, FIELD_SIGNATURE, FIELD_SIGNER_PUBLIC_KEY


class StructureCheck(str, Enum):
    """Structural checks, in the order they run."""

    OBJECT = 'object'
    ENTRIES = 'entries'
    SIGNATURE = 'signature'
    SIGNER_PUBLIC_KEY = 'signer_public_key'


@dataclass(frozen=True)
class StructureValidation:
    """Result of structural validation."""
    is_valid: bool
    error: Optional[str] = None
    failed_check: Optional[StructureCheck] = None


def _fail(check: StructureCheck, error: str) -> StructureValidation:
    return StructureValidation(is_valid=False, error=error, failed_check=check)


def _is_non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and len(value) > 0


def validate_structure(obj: Any) -> StructureValidation:
    """
    Validate top-level record structure.

    Args:
        obj: Parsed JSON value

    Returns:
        StructureValidation with the first failing check, if any
    """
    if not isinstance(obj, dict):
        return _fail(StructureCheck.OBJECT, 'Record must be an object')

    if FIELD_ENTRIES not in obj or obj[FIELD_ENTRIES] is None:
        return _fail(StructureCheck.ENTRIES, f'Record must have an "{FIELD_ENTRIES}" field')
    if not isinstance(obj[FIELD_ENTRIES], dict):
        return _fail(StructureCheck.ENTRIES, 'Record entries must be an object')

    if FIELD_SIGNATURE not in obj or obj[FIELD_SIGNATURE] is None:
        return _fail(StructureCheck.SIGNATURE, f'Record must have a "{FIELD_SIGNATURE}" field')
    if not _is_non_empty_string(obj[FIELD_SIGNATURE]):
        return _fail(StructureCheck.SIGNATURE, 'Record signature must be a non-empty string')

    if FIELD_SIGNER_PUBLIC_KEY not in obj or obj[FIELD_SIGNER_PUBLIC_KEY] is None:
        return _fail(
            StructureCheck.SIGNER_PUBLIC_KEY,
            f'Record must have a "{FIELD_SIGNER_PUBLIC_KEY}" field',
        )
    if not _is_non_empty_string(obj[FIELD_SIGNER_PUBLIC_KEY]):
        return _fail(
            StructureCheck.SIGNER_PUBLIC_KEY,
            'Record signerPublicKey must be a non-empty string',
        )

    return StructureValidation(is_valid=True)


__all__ = ['StructureCheck', 'StructureValidation', 'validate_structure']
