# Path: pod_verifier/output/__init__.py
"""
Output (OUTPUT layer)

- report_generator: summaries, helpful error messages, reports
"""

from .report_generator import (
    VerificationSummary,
    get_verification_summary,
    get_helpful_error_message,
    ReportGenerator,
)

__all__ = [
    'VerificationSummary',
    'get_verification_summary',
    'get_helpful_error_message',
    'ReportGenerator',
]
