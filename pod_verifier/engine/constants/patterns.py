# Path: pod_verifier/engine/constants/patterns.py
"""
Pattern Constants for Malformed Record Text

Regex patterns used to spot common "almost JSON" mistakes in pasted
record text, with the human-readable text reported for each.

These patterns are DETECTION AIDS. They run over the raw text, string
contents included, so they can report issues the repairer never has to
touch. Repair itself is done by the scanner in tools/repair/, which
understands string boundaries.

Compiled patterns are used through search()/sub() only; a compiled
pattern keeps no scan position between calls.
"""

import re
from enum import Enum


class MalformationIssue(str, Enum):
    """Named malformation tags reported by the detector."""

    DOUBLE_QUOTES = 'double_quotes'
    TRAILING_COMMAS = 'trailing_commas'
    UNQUOTED_KEYS = 'unquoted_keys'
    SINGLE_QUOTES = 'single_quotes'
    COMMENTS = 'comments'
    PYTHON_CONSTANTS = 'python_constants'
    ELLIPSIS = 'ellipsis'
    EXTRA_COMMAS = 'extra_commas'
    INVALID_SYNTAX = 'invalid_syntax'


# ==============================================================================
# MALFORMATION PATTERNS
# ==============================================================================
# Order matters: reports list issues in this order.

# ""key"" token. An empty string "" is followed by a separator, never a word
DOUBLE_QUOTED_STRING = re.compile(r'""([^"\s,:{}\[\]][^"]*)""')

MALFORMED_PATTERNS = [
    (MalformationIssue.DOUBLE_QUOTES, DOUBLE_QUOTED_STRING),                  # ""key""
    (MalformationIssue.TRAILING_COMMAS, re.compile(r',(\s*[}\]])')),           # [1, 2,]
    (MalformationIssue.UNQUOTED_KEYS, re.compile(r'([{,]\s*)([a-zA-Z_$][a-zA-Z0-9_$]*)\s*:')),
    (MalformationIssue.SINGLE_QUOTES, re.compile(r"'([^']*)'")),               # 'value'
    (MalformationIssue.COMMENTS, re.compile(r'/\*[\s\S]*?\*/|(?<!:)//.*$', re.MULTILINE)),
    (MalformationIssue.PYTHON_CONSTANTS, re.compile(r'\b(None|True|False)\b')),
    (MalformationIssue.ELLIPSIS, re.compile(r'\.\.\.')),
    (MalformationIssue.EXTRA_COMMAS, re.compile(r',\s*,')),
]


# ==============================================================================
# ISSUE DESCRIPTIONS
# ==============================================================================
# What the detector reports

ISSUE_DESCRIPTIONS = {
    MalformationIssue.DOUBLE_QUOTES: 'Double-quoted strings detected (""key"")',
    MalformationIssue.TRAILING_COMMAS: 'Trailing commas found',
    MalformationIssue.UNQUOTED_KEYS: 'Unquoted object keys detected',
    MalformationIssue.SINGLE_QUOTES: 'Single quotes found (should be double quotes)',
    MalformationIssue.COMMENTS: 'Comments detected (not valid in JSON)',
    MalformationIssue.PYTHON_CONSTANTS: 'Python constants (None, True, False) detected',
    MalformationIssue.ELLIPSIS: 'Ellipsis (...) detected',
    MalformationIssue.EXTRA_COMMAS: 'Multiple consecutive commas found',
    MalformationIssue.INVALID_SYNTAX: 'Invalid JSON syntax',
}

# What the repairer reports as fixed

REPAIR_DESCRIPTIONS = {
    MalformationIssue.DOUBLE_QUOTES: 'Fixed double-quoted strings (""key"" → "key")',
    MalformationIssue.TRAILING_COMMAS: 'Removed trailing commas',
    MalformationIssue.UNQUOTED_KEYS: 'Added quotes around object keys',
    MalformationIssue.SINGLE_QUOTES: 'Converted single quotes to double quotes',
    MalformationIssue.COMMENTS: 'Removed comments',
    MalformationIssue.PYTHON_CONSTANTS: (
        'Converted Python constants to JSON (None→null, True→true, False→false)'
    ),
    MalformationIssue.ELLIPSIS: 'Removed ellipsis (...)',
    MalformationIssue.EXTRA_COMMAS: 'Fixed multiple consecutive commas',
}

GENERIC_REPAIR_DESCRIPTION = 'Improved JSON formatting and structure'


# ==============================================================================
# SCANNER TOKENS
# ==============================================================================
# Bare words rewritten by the repairer when they appear outside strings

BAREWORD_LITERALS = {
    'True': 'true',
    'False': 'false',
    'None': 'null',
    'true': 'true',
    'false': 'false',
    'null': 'null',
}

IDENTIFIER_START = re.compile(r'[A-Za-z_$]')
IDENTIFIER_BODY = re.compile(r'[A-Za-z0-9_$]*')
NUMBER_TOKEN = re.compile(r'-?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?')

ELLIPSIS_TOKEN = '...'
PRETTY_INDENT = 2
