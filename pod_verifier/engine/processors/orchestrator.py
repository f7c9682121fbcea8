# Path: pod_verifier/engine/processors/orchestrator.py
"""
Pipeline Orchestrator for Record Verification

Coordinates the verification pipeline:
    Preparation: bound/sanitize -> repair -> strict parse
                 -> structure -> entries
    Verification: engine construction -> signature check

Every failure is returned as data on VerificationResult, tagged with an
ErrorCategory. The only awaited call is the engine's signature check.

The orchestrator holds no per-request state, so one instance can serve
concurrent verify() calls.
"""

import asyncio
import inspect
from types import MappingProxyType
from typing import Optional, Union

from ...constants import (
    MAX_INPUT_LENGTH,
    MAX_INPUT_LABEL,
    NULL_BYTE,
    FIELD_ENTRIES,
    FIELD_SIGNATURE,
    FIELD_SIGNER_PUBLIC_KEY,
    ErrorCategory,
    PREFIX_PARSE,
    PREFIX_STRUCTURE,
    PREFIX_ENTRIES,
    PREFIX_CONSTRUCTION,
    PREFIX_SIGNATURE,
)
from ...core.logger import get_process_logger
from ..boundary import VerificationEngine
from ..tools.repair import Repairer, try_strict_parse
from ..tools.validation import (
    validate_structure,
    validate_entries,
    validate_cryptographic_formats,
)
from .pipeline_data import PreparationResult, VerificationResult


RawInput = Union[str, bytes, bytearray]


class VerificationOrchestrator:
    """
    Runs raw record text through repair, validation and the engine.

    Usage:
        orchestrator = VerificationOrchestrator(engine)

        # Full pipeline
        result = await orchestrator.verify(text)
        if result.error:
            print(result.error_category, result.error)
        else:
            print(result.is_signature_valid, result.content_id)

        # Or run the stages separately
        preparation = orchestrator.run_preparation(text)
        if preparation.is_ready:
            result = await orchestrator.run_verification(preparation)
    """

    def __init__(
        self,
        engine: VerificationEngine,
        config=None,
        max_input_length: Optional[int] = None,
    ):
        """
        Initialize the orchestrator.

        Args:
            engine: Verification engine that owns the cryptography
            config: Optional ConfigLoader (reads max_input_length)
            max_input_length: Explicit input bound, overrides config
        """
        self.logger = get_process_logger('orchestrator')
        self.engine = engine

        if max_input_length is None and config is not None:
            max_input_length = config.get('max_input_length', MAX_INPUT_LENGTH)
        self.max_input_length = max_input_length or MAX_INPUT_LENGTH

        self._repairer = Repairer()

    async def verify(self, raw_input: RawInput) -> VerificationResult:
        """
        Run the complete pipeline.

        Args:
            raw_input: Untrusted record text (bytes are decoded as UTF-8)

        Returns:
            VerificationResult (never raises for bad input or engine failures)
        """
        preparation = self.run_preparation(raw_input)

        if not preparation.is_ready:
            return VerificationResult.failure(
                preparation.error_category,
                preparation.error,
                preparation,
            )

        return await self.run_verification(preparation)

    # ==========================================================================
    # PREPARATION
    # ==========================================================================

    def run_preparation(self, raw_input: RawInput) -> PreparationResult:
        """
        Run the synchronous stages: sanitize, repair, parse, validate.

        Args:
            raw_input: Untrusted record text

        Returns:
            PreparationResult; is_ready is True when the engine can take over
        """
        # Stage 1: bound and sanitize
        text, error = self._sanitize(raw_input)
        if error is not None:
            self.logger.warning(f"Input rejected: {error}")
            return PreparationResult(error=error, error_category=ErrorCategory.INPUT_TOO_LARGE)

        # Stage 2: repair (a failed repair falls through to the strict parse)
        repair = self._repairer.repair(text)
        if repair.was_repaired:
            self.logger.info(f"Input repaired: {'; '.join(repair.changes)}")

        # Stage 3: strict parse of the canonical text
        parsed_ok, record, parse_error = try_strict_parse(repair.canonical_text)
        if not parsed_ok:
            self.logger.warning(f"Parse failed: {parse_error}")
            return PreparationResult(
                repair=repair,
                error=f"{PREFIX_PARSE}: {parse_error}",
                error_category=ErrorCategory.PARSE_ERROR,
            )

        # Stage 4: structure
        structure = validate_structure(record)
        if not structure.is_valid:
            self.logger.warning(f"Structure check '{structure.failed_check.value}' failed")
            return PreparationResult(
                repair=repair,
                error=f"{PREFIX_STRUCTURE}: {structure.error}",
                error_category=ErrorCategory.STRUCTURE_ERROR,
            )

        # Stage 5: entries
        entry_check = validate_entries(record[FIELD_ENTRIES])
        if not entry_check.is_valid:
            self.logger.warning(f"Entry '{entry_check.entry_name}' failed validation")
            return PreparationResult(
                repair=repair,
                error=f"{PREFIX_ENTRIES}: {entry_check.error}",
                error_category=ErrorCategory.ENTRY_ERROR,
            )

        formats = validate_cryptographic_formats(
            record[FIELD_SIGNATURE],
            record[FIELD_SIGNER_PUBLIC_KEY],
        )
        for warning in formats.errors:
            self.logger.info(f"Format hint: {warning}")

        self.logger.debug(f"Record prepared with {len(entry_check.entries)} entries")

        return PreparationResult(
            record=record,
            repair=repair,
            entries=entry_check.entries,
            warnings=formats.errors,
        )

    def _sanitize(self, raw_input: RawInput) -> tuple[str, Optional[str]]:
        """Decode, bound and strip null bytes. Returns (text, error)."""
        if isinstance(raw_input, (bytes, bytearray)):
            text = bytes(raw_input).decode('utf-8', errors='replace')
        elif raw_input is None:
            text = ''
        else:
            text = str(raw_input)

        if len(text) > self.max_input_length:
            return text, f"Input too large (max {self._limit_label()})"

        return text.replace(NULL_BYTE, ''), None

    def _limit_label(self) -> str:
        if self.max_input_length == MAX_INPUT_LENGTH:
            return MAX_INPUT_LABEL
        return f"{self.max_input_length} characters"

    # ==========================================================================
    # VERIFICATION
    # ==========================================================================

    async def run_verification(self, preparation: PreparationResult) -> VerificationResult:
        """
        Hand a prepared record to the engine and check its signature.

        Args:
            preparation: Ready PreparationResult from run_preparation()

        Returns:
            VerificationResult
        """
        if not preparation.is_ready:
            return VerificationResult.failure(
                preparation.error_category or ErrorCategory.PARSE_ERROR,
                preparation.error or f"{PREFIX_PARSE}: no record",
                preparation,
            )

        # Stage 6: engine construction, accessors included
        try:
            engine_record = self.engine.parse_record(preparation.record)
            content_id = str(engine_record.content_id)
            signer_public_key = engine_record.signer_public_key
            entries = MappingProxyType(dict(engine_record.entries()))
        except Exception as e:
            self.logger.warning(f"Engine rejected record: {e}")
            return VerificationResult.failure(
                ErrorCategory.ENGINE_CONSTRUCTION_ERROR,
                f"{PREFIX_CONSTRUCTION}: {e}",
                preparation,
            )

        # Stage 7: signature check
        is_valid = False
        error = None
        category = None
        try:
            outcome = self.engine.verify_signature(engine_record)
            if inspect.isawaitable(outcome):
                outcome = await outcome
            is_valid = bool(outcome)
        except Exception as e:
            self.logger.warning(f"Signature check raised: {e}")
            error = str(e) or PREFIX_SIGNATURE
            category = ErrorCategory.SIGNATURE_CHECK_ERROR

        self.logger.info(
            f"Verification complete: signature {'valid' if is_valid else 'invalid'}, "
            f"{len(entries)} entries"
        )

        return VerificationResult(
            is_signature_valid=is_valid,
            content_id=content_id,
            signer_public_key=signer_public_key,
            entry_count=len(entries),
            entries=entries,
            resolved_entries=preparation.entries,
            error=error,
            error_category=category,
            was_repaired=preparation.was_repaired,
            repair_changes=preparation.repair_changes,
            warnings=preparation.warnings,
        )


def verify_record(
    raw_input: RawInput,
    engine: VerificationEngine,
    config=None,
    max_input_length: Optional[int] = None,
) -> VerificationResult:
    """
    Convenience function for synchronous callers.

    Must not be called from a running event loop; await
    VerificationOrchestrator.verify() there instead.

    Args:
        raw_input: Untrusted record text
        engine: Verification engine
        config: Optional ConfigLoader
        max_input_length: Optional input bound

    Returns:
        VerificationResult
    """
    orchestrator = VerificationOrchestrator(engine, config, max_input_length)
    return asyncio.run(orchestrator.verify(raw_input))


__all__ = ['VerificationOrchestrator', 'verify_record']
