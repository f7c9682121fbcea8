# Path: pod_verifier/engine/tools/repair/repairer.py
"""
Record Text Repairer

Turns malformed record text into parseable JSON text and reports what
was changed.

Rules:
1. Text that already parses is returned untouched (never "fix" valid input).
2. Otherwise the text is rewritten by StructuralRewriter and parsed again.
3. On success the canonical text is pretty-printed with 2-space indent.
4. On failure the original trimmed text is returned with the parse error.

Only syntax is repaired. String contents and value types are preserved,
so "42" stays a string and 42 stays a number.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Optional

from ....core.logger import get_process_logger
from ...constants.patterns import (
    REPAIR_DESCRIPTIONS,
    GENERIC_REPAIR_DESCRIPTION,
    PRETTY_INDENT,
)
from .detector import MalformationDetector, MalformationReport
from .rewriter import StructuralRewriter
from .strict_json import try_strict_parse


@dataclass(frozen=True)
class RepairResult:
    """
    Outcome of a repair attempt.

    If was_repaired is False and error is None, canonical_text is the
    trimmed input and it is valid JSON.
    """
    was_repaired: bool
    canonical_text: str
    parsed_value: Any = None
    error: Optional[str] = None
    original_text: str = ''
    changes: tuple[str, ...] = field(default_factory=tuple)

    @property
    def succeeded(self) -> bool:
        """True when canonical_text is parseable JSON."""
        return self.error is None


class Repairer:
    """
    Best-effort repair of malformed record text.

    Usage:
        repairer = Repairer()
        result = repairer.repair("{entries: {name: 'Joe'},}")
        if result.was_repaired:
            print(result.changes)
            print(result.canonical_text)
    """

    def __init__(self):
        self.logger = get_process_logger('repairer')
        self._detector = MalformationDetector()
        self._rewriter = StructuralRewriter()

    def repair(self, text: str) -> RepairResult:
        """
        Repair text if needed.

        Args:
            text: Raw record text

        Returns:
            RepairResult
        """
        original = text.strip()

        parsed_ok, parsed, _ = try_strict_parse(original)
        if parsed_ok:
            self.logger.debug("Input is already valid JSON, no repair needed")
            return RepairResult(
                was_repaired=False,
                canonical_text=original,
                parsed_value=parsed,
                original_text=original,
            )

        report = self._detector.detect(original)
        self.logger.info(
            f"Attempting repair, detected: {', '.join(i.value for i in report.issues)}"
        )

        rewritten = self._rewriter.rewrite(original)
        parsed_ok, parsed, error = try_strict_parse(rewritten)

        if parsed_ok:
            try:
                canonical = json.dumps(parsed, indent=PRETTY_INDENT, ensure_ascii=False)
            except RecursionError:
                parsed_ok, error = False, 'Input is nested too deeply'

        if not parsed_ok:
            self.logger.warning(f"Repair failed: {error}")
            return RepairResult(
                was_repaired=False,
                canonical_text=original,
                parsed_value=None,
                error=error or 'Failed to repair JSON',
                original_text=original,
            )

        changes = describe_repairs(report, original, canonical)
        self.logger.info(f"Repair succeeded ({len(changes)} change(s))")
        return RepairResult(
            was_repaired=True,
            canonical_text=canonical,
            parsed_value=parsed,
            original_text=original,
            changes=tuple(changes),
        )


def describe_repairs(report: MalformationReport, original: str, repaired: str) -> list[str]:
    """
    Describe what a repair fixed.

    Args:
        report: Detector report for the original text
        original: Text before repair
        repaired: Text after repair

    Returns:
        Human-readable change descriptions
    """
    changes = [
        REPAIR_DESCRIPTIONS[issue] for issue in report.issues
        if issue in REPAIR_DESCRIPTIONS
    ]

    if not changes and original != repaired:
        changes.append(GENERIC_REPAIR_DESCRIPTION)

    return changes


def repair_record_text(text: str) -> RepairResult:
    """Convenience wrapper around Repairer.repair()."""
    return Repairer().repair(text)


__all__ = ['RepairResult', 'Repairer', 'describe_repairs', 'repair_record_text']
