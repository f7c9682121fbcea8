# Path: pod_verifier/engine/processors/pipeline_data.py
"""
Pipeline Data Structures for Record Verification

Data containers passed between processing stages.

PIPELINE FLOW:
    Raw text -> Preparation (sanitize, repair, parse, validate)
             -> Verification (engine construction, signature check) -> Result

Each stage produces immutable output that the next stage consumes.
Failures are carried as data (error + category), never raised.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Optional

from ...constants import ErrorCategory
from ..tools.repair.repairer import RepairResult
from ..tools.validation.entry_resolver import ResolvedEntry


# ==============================================================================
# PREPARATION OUTPUT
# ==============================================================================

@dataclass(frozen=True)
class PreparationResult:
    """
    Output of the preparation stages (1-5).

    When error is None the record passed every surface check and is
    ready to be handed to the engine.
    """
    record: Optional[dict] = None
    repair: Optional[RepairResult] = None
    entries: tuple[ResolvedEntry, ...] = field(default_factory=tuple)
    warnings: tuple[str, ...] = field(default_factory=tuple)
    error: Optional[str] = None
    error_category: Optional[ErrorCategory] = None

    @property
    def is_ready(self) -> bool:
        """True if the record can go to the engine."""
        return self.error is None and self.record is not None

    @property
    def was_repaired(self) -> bool:
        return self.repair is not None and self.repair.was_repaired

    @property
    def repair_changes(self) -> tuple[str, ...]:
        return self.repair.changes if self.repair is not None else ()


# ==============================================================================
# VERIFICATION OUTPUT
# ==============================================================================

@dataclass(frozen=True)
class VerificationResult:
    """
    Final result of one verification attempt.

    An invalid signature is a normal result (is_signature_valid False,
    error None). error is set only when a stage failed; error_category
    says which one. For signature check errors the engine-provided
    fields are still filled in.

    resolved_entries are the validated entries in {type, value} form,
    set whenever the engine accepted the record.
    """
    is_signature_valid: bool = False
    content_id: Optional[str] = None
    signer_public_key: Optional[str] = None
    entry_count: Optional[int] = None
    entries: Optional[Mapping[str, Any]] = None
    resolved_entries: tuple[ResolvedEntry, ...] = field(default_factory=tuple)
    error: Optional[str] = None
    error_category: Optional[ErrorCategory] = None
    was_repaired: bool = False
    repair_changes: tuple[str, ...] = field(default_factory=tuple)
    warnings: tuple[str, ...] = field(default_factory=tuple)

    @property
    def has_error(self) -> bool:
        return self.error is not None

    @property
    def is_verified(self) -> bool:
        """Signature valid and no stage failed."""
        return self.is_signature_valid and self.error is None

    @classmethod
    def failure(
        cls,
        category: ErrorCategory,
        error: str,
        preparation: Optional[PreparationResult] = None,
    ) -> 'VerificationResult':
        """Result for a pipeline that stopped before the signature check."""
        if preparation is None:
            return cls(error=error, error_category=category)
        return cls(
            error=error,
            error_category=category,
            was_repaired=preparation.was_repaired,
            repair_changes=preparation.repair_changes,
            warnings=preparation.warnings,
        )


__all__ = ['PreparationResult', 'VerificationResult']
