# Path: pod_verifier/output/report_generator.py
"""
Report Generator for POD Verifier

Turns a VerificationResult into things people read:
- a one-line status with detail lines (summary)
- guidance text for pipeline errors
- a plain-text or dict report with entries grouped by category
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Optional

from ..constants import (
    ErrorCategory,
    LOG_OUTPUT,
    PREFIX_PARSE,
    PREFIX_CONSTRUCTION,
    STATUS_VALID,
    STATUS_INVALID,
    STATUS_ERROR,
)
from ..core.logger import get_output_logger
from ..engine.constants.display import CATEGORY_ORDER, ELLIPSIS, SUMMARY_PREFIX_LENGTH
from ..engine.constants.entry_types import VALID_TYPES
from ..engine.processors.pipeline_data import VerificationResult
from ..engine.tools.formatting import (
    FormattedEntry,
    category_info,
    format_entries,
    format_resolved_entries,
)


# ==============================================================================
# HELPFUL ERROR MESSAGES
# ==============================================================================

HELP_INPUT_TOO_LARGE = 'The input is too large. A POD is normally a few kilobytes of JSON.'
HELP_PARSE = (
    'The input is not valid JSON. Make sure you have properly formatted JSON '
    'with correct brackets, quotes, and commas.'
)
HELP_STRUCTURE = (
    'The JSON is missing required POD fields. A valid POD must have "entries", '
    '"signature", and "signerPublicKey" fields.'
)
HELP_ENTRY_NAME = (
    'POD entry names must be valid identifiers (letters, numbers, and underscores '
    'only, not starting with a number).'
)
HELP_ENTRY_TYPE = (
    'POD entries must have valid types. Supported types are: '
    f'{", ".join(VALID_TYPES)}.'
)
HELP_CONSTRUCTION = (
    'The verification engine could not parse this data. This usually means the '
    'signature format or entry values are invalid.'
)

# Substring rules for plain error strings, tried in order
HELP_RULES = [
    ('Input too large', HELP_INPUT_TOO_LARGE),
    (PREFIX_PARSE, HELP_PARSE),
    (PREFIX_CONSTRUCTION, HELP_CONSTRUCTION),
    ('Entry name', HELP_ENTRY_NAME),
    ('type', HELP_ENTRY_TYPE),
    ('must have', HELP_STRUCTURE),
]

HELP_BY_CATEGORY = {
    ErrorCategory.INPUT_TOO_LARGE: HELP_INPUT_TOO_LARGE,
    ErrorCategory.PARSE_ERROR: HELP_PARSE,
    ErrorCategory.STRUCTURE_ERROR: HELP_STRUCTURE,
    ErrorCategory.ENGINE_CONSTRUCTION_ERROR: HELP_CONSTRUCTION,
}


def get_helpful_error_message(error: str, category: Optional[ErrorCategory] = None) -> str:
    """
    Guidance text for a pipeline error.

    Args:
        error: Error string from a VerificationResult
        category: Error category, if known

    Returns:
        Guidance text, or the error itself when no rule applies
    """
    if category in HELP_BY_CATEGORY:
        return HELP_BY_CATEGORY[category]

    for needle, message in HELP_RULES:
        if needle in error:
            return message

    return error


# ==============================================================================
# SUMMARY
# ==============================================================================

@dataclass(frozen=True)
class VerificationSummary:
    """Headline view of a result."""
    status: str
    message: str
    details: list[str] = field(default_factory=list)


def _prefix(text: Optional[str]) -> str:
    return f"{(text or '')[:SUMMARY_PREFIX_LENGTH]}{ELLIPSIS}"


def get_verification_summary(result: VerificationResult) -> VerificationSummary:
    """
    Status, message and detail lines for a result.

    Status is 'error' when any stage failed, otherwise 'valid' or
    'invalid' depending on the signature.
    """
    if result.error:
        return VerificationSummary(
            status=STATUS_ERROR,
            message='Verification Error',
            details=[result.error],
        )

    if result.is_signature_valid:
        return VerificationSummary(
            status=STATUS_VALID,
            message='POD is Valid! 🎉',
            details=[
                '✅ Signature is cryptographically valid',
                f'📝 Content ID: {_prefix(result.content_id)}',
                f'🔑 Signer: {_prefix(result.signer_public_key)}',
                f'📊 {result.entry_count} entries verified',
            ],
        )

    return VerificationSummary(
        status=STATUS_INVALID,
        message='POD Signature Invalid ❌',
        details=[
            '❌ Cryptographic signature verification failed',
            'This POD may have been tampered with or contain invalid data',
        ],
    )


# ==============================================================================
# REPORTS
# ==============================================================================

class ReportGenerator:
    """
    Creates verification reports.

    Example:
        generator = ReportGenerator()
        print(generator.generate_text(result))
        data = generator.build_report(result)
    """

    def __init__(self):
        self.logger = get_output_logger('report_generator')

    def _entries_for(
        self,
        result: VerificationResult,
        formatted: Optional[Iterable[FormattedEntry]],
    ) -> list[FormattedEntry]:
        if formatted is not None:
            return list(formatted)
        if result.resolved_entries:
            return format_resolved_entries(result.resolved_entries)
        return format_entries(result.entries or {})

    def group_by_category(self, formatted: Iterable[FormattedEntry]) -> dict:
        """Entries grouped by category, in category order, empty groups dropped."""
        groups = {category: [] for category in CATEGORY_ORDER}
        for entry in formatted:
            groups[entry.category].append(entry)
        return {category: entries for category, entries in groups.items() if entries}

    def build_report(
        self,
        result: VerificationResult,
        formatted: Optional[Iterable[FormattedEntry]] = None,
    ) -> dict:
        """
        Build a JSON-serializable report.

        Args:
            result: VerificationResult from the orchestrator
            formatted: Pre-formatted entries (formatted from result if None)

        Returns:
            Report dictionary
        """
        summary = get_verification_summary(result)
        entries = self._entries_for(result, formatted)

        report = {
            'status': summary.status,
            'message': summary.message,
            'details': list(summary.details),
            'is_signature_valid': result.is_signature_valid,
            'content_id': result.content_id,
            'signer_public_key': result.signer_public_key,
            'entry_count': result.entry_count,
            'was_repaired': result.was_repaired,
            'repair_changes': list(result.repair_changes),
            'warnings': list(result.warnings),
        }

        if result.error:
            report['error'] = {
                'category': result.error_category.value if result.error_category else None,
                'message': result.error,
                'help': get_helpful_error_message(result.error, result.error_category),
            }

        report['entries'] = [
            {
                'name': entry.name,
                'type': entry.type,
                'display_value': entry.display_value,
                'formatted_value': entry.formatted_value,
                'category': entry.category.value,
                'is_important': entry.is_important,
            }
            for entry in entries
        ]

        self.logger.info(f"{LOG_OUTPUT} Built report with status '{summary.status}'")
        return report

    def generate_text(
        self,
        result: VerificationResult,
        formatted: Optional[Iterable[FormattedEntry]] = None,
    ) -> str:
        """
        Plain-text report with entries grouped by category.

        Args:
            result: VerificationResult from the orchestrator
            formatted: Pre-formatted entries (formatted from result if None)

        Returns:
            Report text
        """
        summary = get_verification_summary(result)
        lines = [summary.message, '=' * len(summary.message)]
        lines.extend(f"  {detail}" for detail in summary.details)

        if result.error:
            help_text = get_helpful_error_message(result.error, result.error_category)
            if help_text != result.error:
                lines.append('')
                lines.append(f"Hint: {help_text}")

        if result.was_repaired:
            lines.append('')
            lines.append('Input was repaired:')
            lines.extend(f"  - {change}" for change in result.repair_changes)

        if result.warnings:
            lines.append('')
            lines.append('Warnings:')
            lines.extend(f"  - {warning}" for warning in result.warnings)

        groups = self.group_by_category(self._entries_for(result, formatted))
        for category, entries in groups.items():
            info = category_info(category)
            lines.append('')
            lines.append(f"{info['icon']} {info['label']}")
            for entry in entries:
                marker = '*' if entry.is_important else ' '
                lines.append(f" {marker} {entry.name} ({entry.type}): {entry.formatted_value}")

        self.logger.info(f"{LOG_OUTPUT} Generated text report ({len(lines)} lines)")
        return '\n'.join(lines)


__all__ = [
    'VerificationSummary',
    'get_verification_summary',
    'get_helpful_error_message',
    'ReportGenerator',
]
