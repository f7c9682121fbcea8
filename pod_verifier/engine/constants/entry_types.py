# Path: pod_verifier/engine/constants/entry_types.py
"""
Entry Type Constants

The closed set of entry value types a record may declare, the entry
name rule, and the value shapes each type accepts.

Shapes are named here and checked by tools/validation/entry_validator.py:
- 'text':         str
- 'number':       int or float (bool excluded)
- 'numeric_text': str of decimal digits (optional sign) or 0x-prefixed hex
- 'bool':         bool
- 'date_value':   datetime.date / datetime.datetime
- 'byte_sequence': bytes, bytearray or memoryview
- 'null':         None
"""

import re


# ==============================================================================
# ENTRY TYPES
# ==============================================================================
TYPE_STRING = 'string'
TYPE_INT = 'int'
TYPE_CRYPTOGRAPHIC = 'cryptographic'
TYPE_BOOLEAN = 'boolean'
TYPE_DATE = 'date'
TYPE_EDDSA_PUBKEY = 'eddsa_pubkey'
TYPE_BYTES = 'bytes'
TYPE_NULL = 'null'

# Reported for values the formatter cannot place in any type
TYPE_UNKNOWN = 'unknown'

VALID_TYPES = [
    TYPE_STRING,
    TYPE_INT,
    TYPE_CRYPTOGRAPHIC,
    TYPE_BOOLEAN,
    TYPE_DATE,
    TYPE_EDDSA_PUBKEY,
    TYPE_BYTES,
    TYPE_NULL,
]

# Alternate spellings resolved to a canonical type name
TYPE_ALIASES = {
    'signing-key': TYPE_EDDSA_PUBKEY,
}

# ==============================================================================
# TYPE -> ACCEPTED VALUE SHAPES
# ==============================================================================
TYPE_SHAPES = {
    TYPE_STRING: ('text',),
    TYPE_INT: ('number', 'numeric_text'),
    TYPE_CRYPTOGRAPHIC: ('number', 'numeric_text'),
    TYPE_BOOLEAN: ('bool',),
    TYPE_EDDSA_PUBKEY: ('text',),
    TYPE_DATE: ('text', 'date_value'),
    TYPE_BYTES: ('byte_sequence', 'text'),
    TYPE_NULL: ('null',),
}

# ==============================================================================
# PATTERNS
# ==============================================================================
ENTRY_NAME_PATTERN = re.compile(r'^[A-Za-z_][A-Za-z0-9_]*$')
NUMERIC_TEXT_PATTERN = re.compile(r'^(?:[+-]?\d+|0[xX][0-9a-fA-F]+)$')

# Tagged entry keys
TAG_TYPE = 'type'
TAG_VALUE = 'value'

# ==============================================================================
# SIGNATURE / KEY SHAPE HINTS
# ==============================================================================
# EdDSA signatures are 64 bytes (86-88 base64 chars), public keys 32 bytes
BASE64_PATTERN = re.compile(r'^[A-Za-z0-9+/]+=*$')
MIN_SIGNATURE_LENGTH = 40
MIN_PUBLIC_KEY_LENGTH = 20
