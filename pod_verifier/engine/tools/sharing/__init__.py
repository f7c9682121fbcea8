# Path: pod_verifier/engine/tools/sharing/__init__.py
"""
Sharing Tools

- url_codec: record text <-> URL-safe token, share link helpers
"""

from .url_codec import (
    canonicalize_record_text,
    encode_record_for_url,
    decode_record_from_url,
    is_valid_record_json,
    get_shareable_url,
    extract_record_from_url,
    clear_record_from_url,
)

__all__ = [
    'canonicalize_record_text',
    'encode_record_for_url',
    'decode_record_from_url',
    'is_valid_record_json',
    'get_shareable_url',
    'extract_record_from_url',
    'clear_record_from_url',
]
