# Path: pod_verifier/constants.py
"""
POD Verifier Module Constants

Module-wide constants for the record verification system.
Component-specific tables live in engine/constants/.
"""

from enum import Enum


# ==============================================================================
# INPUT LIMITS
# ==============================================================================
# Raw input longer than this (in characters) is rejected before parsing
MAX_INPUT_LENGTH = 1_000_000
MAX_INPUT_LABEL = '1MB'

NULL_BYTE = '\0'

# ==============================================================================
# RECORD FIELDS
# ==============================================================================
FIELD_ENTRIES = 'entries'
FIELD_SIGNATURE = 'signature'
FIELD_SIGNER_PUBLIC_KEY = 'signerPublicKey'

REQUIRED_RECORD_FIELDS = [
    FIELD_ENTRIES,
    FIELD_SIGNATURE,
    FIELD_SIGNER_PUBLIC_KEY,
]

# ==============================================================================
# ERROR CATEGORIES
# ==============================================================================


class ErrorCategory(str, Enum):
    """Pipeline failure channels, in pipeline order."""

    INPUT_TOO_LARGE = 'input_too_large'
    PARSE_ERROR = 'parse_error'
    STRUCTURE_ERROR = 'structure_error'
    ENTRY_ERROR = 'entry_error'
    ENGINE_CONSTRUCTION_ERROR = 'engine_construction_error'
    SIGNATURE_CHECK_ERROR = 'signature_check_error'


# Error message prefixes per stage
PREFIX_PARSE = 'JSON parsing failed'
PREFIX_STRUCTURE = 'Record structure invalid'
PREFIX_ENTRIES = 'Record entries invalid'
PREFIX_CONSTRUCTION = 'Record construction failed'
PREFIX_SIGNATURE = 'Signature verification failed'

# ==============================================================================
# SUMMARY STATUSES
# ==============================================================================
STATUS_VALID = 'valid'
STATUS_INVALID = 'invalid'
STATUS_ERROR = 'error'

# ==============================================================================
# IPO LOGGING PREFIXES
# ==============================================================================
LOG_INPUT = '[INPUT]'
LOG_PROCESS = '[PROCESS]'
LOG_OUTPUT = '[OUTPUT]'

# ==============================================================================
# SHARE LINKS
# ==============================================================================
SHARE_QUERY_PARAM = 'pod'
DEFAULT_SHARE_BASE_URL = 'http://localhost:5173/'
