# Path: pod_verifier/engine/tools/validation/format_checks.py
"""
Signature and public key format hints.

Cheap shape checks run before the engine sees a record. They never fail
verification; the orchestrator attaches their findings as warnings.
"""

from dataclasses import dataclass, field

from ...constants.entry_types import (
    BASE64_PATTERN,
    MIN_SIGNATURE_LENGTH,
    MIN_PUBLIC_KEY_LENGTH,
)


@dataclass(frozen=True)
class FormatCheck:
    """Result of the cryptographic format checks."""
    is_valid: bool
    errors: tuple[str, ...] = field(default_factory=tuple)


def looks_like_signature(signature: str) -> bool:
    """Base64 text of plausible signature length."""
    return (
        isinstance(signature, str)
        and BASE64_PATTERN.fullmatch(signature) is not None
        and len(signature) >= MIN_SIGNATURE_LENGTH
    )


def looks_like_public_key(public_key: str) -> bool:
    """Base64 text of plausible public key length."""
    return (
        isinstance(public_key, str)
        and BASE64_PATTERN.fullmatch(public_key) is not None
        and len(public_key) >= MIN_PUBLIC_KEY_LENGTH
    )


def validate_cryptographic_formats(signature: str, public_key: str) -> FormatCheck:
    """Check both signature and public key shapes."""
    errors = []

    if not looks_like_signature(signature):
        errors.append('Signature does not appear to be valid base64 format')

    if not looks_like_public_key(public_key):
        errors.append('Public key does not appear to be valid base64 format')

    return FormatCheck(is_valid=not errors, errors=tuple(errors))


__all__ = [
    'FormatCheck',
    'looks_like_signature',
    'looks_like_public_key',
    'validate_cryptographic_formats',
]
