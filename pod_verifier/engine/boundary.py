# Path: pod_verifier/engine/boundary.py
"""
Verification Engine Boundary

Abstract contract for the external engine that owns the cryptography.

The verifier never computes content IDs or checks signatures itself.
It hands a surface-valid record to an engine and reads back:
- content_id         engine-computed fingerprint over the entries
- signer_public_key  key the signature is checked against
- entries()          the engine's view of the record entries
- verify_signature() whether the signature matches

Any implementation of this contract can be plugged in, including fakes
with fixed accept/reject behavior for tests.

verify_signature() may return a bool or an awaitable resolving to one;
the orchestrator awaits it in the second case.
"""

import importlib
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Mapping
from typing import Any, Union


SignatureOutcome = Union[bool, Awaitable[bool]]


class EngineLoadError(Exception):
    """Raised when a configured engine cannot be imported or built."""
    pass


class EngineRecord(ABC):
    """A record the engine accepted."""

    @property
    @abstractmethod
    def content_id(self) -> str:
        """Engine-computed content fingerprint."""

    @property
    @abstractmethod
    def signer_public_key(self) -> str:
        """Signer public key as carried by the record."""

    @abstractmethod
    def entries(self) -> Mapping[str, Any]:
        """Entries as the engine sees them (primitive or {type, value})."""

    @abstractmethod
    def verify_signature(self) -> SignatureOutcome:
        """Check the signature over the content ID."""


class VerificationEngine(ABC):
    """
    Builds EngineRecords and checks their signatures.

    Subclasses implement parse_record(); verify_signature() delegates to
    the record unless the engine needs to do it differently.
    """

    @abstractmethod
    def parse_record(self, record: dict) -> EngineRecord:
        """
        Build an engine record from a parsed, surface-valid record.

        Raises:
            Exception: any failure is a construction error (e.g. the
                signature is not in the engine's encoding)
        """

    def verify_signature(self, record: EngineRecord) -> SignatureOutcome:
        """Check a record's signature."""
        return record.verify_signature()


def load_engine(target: str) -> VerificationEngine:
    """
    Load an engine from a 'package.module:factory' string.

    The factory is called with no arguments and must return a
    VerificationEngine (a VerificationEngine subclass works as factory).

    Raises:
        EngineLoadError: if the target is malformed, the import fails or
            the factory does not produce an engine
    """
    module_name, sep, attr_name = (target or '').partition(':')
    if not sep or not module_name or not attr_name:
        raise EngineLoadError(f"Engine must be given as 'module:factory', got '{target}'")

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise EngineLoadError(f"Cannot import engine module '{module_name}': {e}") from e

    factory = getattr(module, attr_name, None)
    if factory is None or not callable(factory):
        raise EngineLoadError(f"Module '{module_name}' has no callable '{attr_name}'")

    engine = factory()
    if not isinstance(engine, VerificationEngine):
        raise EngineLoadError(
            f"'{target}' produced {type(engine).__name__}, not a VerificationEngine"
        )
    return engine


__all__ = [
    'SignatureOutcome',
    'EngineLoadError',
    'EngineRecord',
    'VerificationEngine',
    'load_engine',
]
