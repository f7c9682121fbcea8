# Path: pod_verifier/engine/tools/sharing/url_codec.py
"""
URL Codec for Record Sharing

Encodes record text into a URL-safe token and back, and places that
token in a page URL's query string.

Token format:
    base64url(utf-8(canonical text)) with '=' padding removed

Canonical text is compact JSON when the text parses, otherwise the
text with whitespace runs collapsed, so that
    decode(encode(x)) == canonicalize_record_text(x)

The page URL is always passed in explicitly; nothing here reads
ambient location state.
"""

import base64
import binascii
import json
import re
from typing import Optional
from urllib.parse import urlsplit, urlunsplit, parse_qsl, urlencode

from ....constants import REQUIRED_RECORD_FIELDS, SHARE_QUERY_PARAM
from ....core.logger import get_input_logger
from ..repair.strict_json import try_strict_parse


logger = get_input_logger('url_codec')

TOKEN_PATTERN = re.compile(r'^[A-Za-z0-9_-]+$')


def canonicalize_record_text(text: str) -> str:
    """
    Whitespace-normalized form of record text.

    Valid JSON is re-serialized compactly; anything else has runs of
    whitespace collapsed to single spaces.
    """
    parsed_ok, parsed, _ = try_strict_parse(text)
    if parsed_ok:
        return json.dumps(parsed, separators=(',', ':'), ensure_ascii=False)
    return ' '.join(text.split())


def encode_record_for_url(text: str) -> str:
    """
    Encode record text as a URL-safe token.

    Args:
        text: Record text (valid JSON or not)

    Returns:
        Unpadded base64url token
    """
    canonical = canonicalize_record_text(text)
    token = base64.urlsafe_b64encode(canonical.encode('utf-8')).decode('ascii')
    return token.rstrip('=')


def decode_record_from_url(token: str) -> Optional[str]:
    """
    Decode a token produced by encode_record_for_url().

    Never raises.

    Returns:
        Canonical record text, or None for malformed tokens
    """
    if not isinstance(token, str):
        return None

    candidate = token.strip()
    if not TOKEN_PATTERN.fullmatch(candidate):
        logger.warning("Share token contains characters outside base64url")
        return None

    padded = candidate + '=' * (-len(candidate) % 4)
    try:
        return base64.urlsafe_b64decode(padded).decode('utf-8')
    except (binascii.Error, ValueError) as e:
        logger.warning(f"Failed to decode share token: {e}")
        return None


def is_valid_record_json(text: str) -> bool:
    """Cheap check: text parses to an object with the three record fields."""
    if not isinstance(text, str):
        return False
    parsed_ok, parsed, _ = try_strict_parse(text)
    return (
        parsed_ok
        and isinstance(parsed, dict)
        and all(name in parsed for name in REQUIRED_RECORD_FIELDS)
    )


def _set_query_param(current_url: str, param: str, value: Optional[str]) -> str:
    parts = urlsplit(current_url)
    query = [(key, val) for key, val in parse_qsl(parts.query, keep_blank_values=True) if key != param]
    if value is not None:
        query.append((param, value))
    return urlunsplit(parts._replace(query=urlencode(query)))


def get_shareable_url(text: str, current_url: str, param: str = SHARE_QUERY_PARAM) -> str:
    """
    Page URL with the record token in its query string.

    Other query parameters are kept; an existing token is replaced.
    """
    return _set_query_param(current_url, param, encode_record_for_url(text))


def extract_record_from_url(current_url: str, param: str = SHARE_QUERY_PARAM) -> Optional[str]:
    """
    Record text carried by a share link, or None.

    Returns None when the parameter is missing or its token is malformed.
    """
    parts = urlsplit(current_url)
    for key, value in parse_qsl(parts.query, keep_blank_values=True):
        if key == param:
            return decode_record_from_url(value)
    return None


def clear_record_from_url(current_url: str, param: str = SHARE_QUERY_PARAM) -> str:
    """Page URL with the record token removed."""
    return _set_query_param(current_url, param, None)


__all__ = [
    'canonicalize_record_text',
    'encode_record_for_url',
    'decode_record_from_url',
    'is_valid_record_json',
    'get_shareable_url',
    'extract_record_from_url',
    'clear_record_from_url',
]
