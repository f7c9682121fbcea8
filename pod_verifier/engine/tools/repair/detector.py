# Path: pod_verifier/engine/tools/repair/detector.py
"""
Malformation Detector

Scans raw record text for known "almost JSON" signatures.

DESIGN: Stateless tool. Every call searches a fresh view of the text
with compiled patterns, so repeated calls with the same input always
report the same issues. Never raises.
"""

from dataclasses import dataclass, field

from ...constants.patterns import (
    MalformationIssue,
    MALFORMED_PATTERNS,
    ISSUE_DESCRIPTIONS,
)
from .strict_json import try_strict_parse


@dataclass(frozen=True)
class MalformationReport:
    """Issues detected in a piece of text. Purely observational."""

    issues: tuple[MalformationIssue, ...] = field(default_factory=tuple)

    @property
    def is_malformed(self) -> bool:
        """True when at least one issue was found."""
        return len(self.issues) > 0

    @property
    def descriptions(self) -> list[str]:
        """Human-readable text for each issue, in detection order."""
        return [ISSUE_DESCRIPTIONS[issue] for issue in self.issues]

    def __contains__(self, issue: MalformationIssue) -> bool:
        return issue in self.issues


class MalformationDetector:
    """
    Detects common malformations in record text.

    Checks, in order: doubled quotes, trailing commas, unquoted keys,
    single quotes, comments, Python constants, ellipses, repeated commas.
    If none of those match but the text still does not parse, a single
    'invalid_syntax' issue is reported.

    Usage:
        detector = MalformationDetector()
        report = detector.detect("{name: 'Joe',}")
        report.is_malformed   # True
        report.descriptions   # ['Trailing commas found', ...]
    """

    def detect(self, text: str) -> MalformationReport:
        """
        Detect malformation patterns in text.

        Args:
            text: Raw text (not modified)

        Returns:
            MalformationReport
        """
        if not isinstance(text, str):
            return MalformationReport(issues=(MalformationIssue.INVALID_SYNTAX,))

        issues = [
            issue for issue, pattern in MALFORMED_PATTERNS
            if pattern.search(text) is not None
        ]

        if not issues:
            parsed_ok, _, _ = try_strict_parse(text)
            if not parsed_ok:
                issues.append(MalformationIssue.INVALID_SYNTAX)

        return MalformationReport(issues=tuple(issues))


def detect_malformations(text: str) -> MalformationReport:
    """Convenience wrapper around MalformationDetector.detect()."""
    return MalformationDetector().detect(text)


__all__ = ['MalformationReport', 'MalformationDetector', 'detect_malformations']
