# Path: pod_verifier/tests/test_url_codec.py
"""
Unit tests for share-link encoding.

Tests:
- token round trip through canonical text
- malformed tokens decode to None
- query-string handling of share links
"""

import base64
import json

import pytest

from pod_verifier.engine.tools.sharing import (
    canonicalize_record_text,
    clear_record_from_url,
    decode_record_from_url,
    encode_record_for_url,
    extract_record_from_url,
    get_shareable_url,
    is_valid_record_json,
)
from pod_verifier.tests.fixtures import REAL_POD, record_text


# ==============================================================================
# TOKENS
# ==============================================================================

@pytest.mark.parametrize('text', [
    record_text(REAL_POD),
    '{"name": "Zoë 🎫"}',
    "{name: 'not json',}",
    '   spaced    out\n\ttext  ',
])
def test_round_trip_gives_canonical_text(text):
    token = encode_record_for_url(text)
    assert decode_record_from_url(token) == canonicalize_record_text(text)


def test_canonical_text_of_json_is_compact():
    assert canonicalize_record_text('{ "a" : [1, 2] }') == '{"a":[1,2]}'
    assert canonicalize_record_text(record_text(REAL_POD)) == json.dumps(
        REAL_POD, separators=(',', ':')
    )


def test_canonical_text_of_non_json_collapses_whitespace():
    assert canonicalize_record_text('  a   b\n\nc ') == 'a b c'


def test_token_is_url_safe_and_unpadded():
    token = encode_record_for_url(record_text(REAL_POD))

    assert '=' not in token
    assert '+' not in token
    assert '/' not in token


def test_token_matches_plain_base64url():
    text = '{"a":1}'
    expected = base64.urlsafe_b64encode(text.encode('utf-8')).decode('ascii').rstrip('=')
    assert encode_record_for_url(text) == expected


@pytest.mark.parametrize('token', ['', '!!!', 'abc=def', 'A', '__4', None])
def test_malformed_tokens_decode_to_none(token):
    assert decode_record_from_url(token) is None


# ==============================================================================
# RECORD CHECK
# ==============================================================================

def test_is_valid_record_json():
    assert is_valid_record_json(record_text(REAL_POD))
    assert not is_valid_record_json('{"entries": {}}')
    assert not is_valid_record_json('[1, 2]')
    assert not is_valid_record_json('nope')


# ==============================================================================
# SHARE LINKS
# ==============================================================================

def test_share_link_round_trip():
    text = record_text(REAL_POD)
    url = get_shareable_url(text, 'http://localhost:5173/')

    assert url.startswith('http://localhost:5173/?pod=')
    assert extract_record_from_url(url) == canonicalize_record_text(text)


def test_share_link_keeps_other_parameters():
    url = get_shareable_url('{"a":1}', 'https://verify.example/app?tab=raw#top')

    assert url.startswith('https://verify.example/app?tab=raw&pod=')
    assert url.endswith('#top')
    assert extract_record_from_url(url) == '{"a":1}'


def test_share_link_replaces_existing_token():
    first = get_shareable_url('{"a":1}', 'http://x/')
    second = get_shareable_url('{"b":2}', first)

    assert second.count('pod=') == 1
    assert extract_record_from_url(second) == '{"b":2}'


def test_custom_parameter_name():
    url = get_shareable_url('{"a":1}', 'http://x/', param='record')

    assert '?record=' in url
    assert extract_record_from_url(url) is None
    assert extract_record_from_url(url, param='record') == '{"a":1}'


def test_extract_missing_or_broken_token():
    assert extract_record_from_url('http://x/?tab=1') is None
    assert extract_record_from_url('http://x/?pod=%21%21') is None


def test_clear_record_from_url():
    assert clear_record_from_url('http://x/?pod=abc&tab=1') == 'http://x/?tab=1'
    assert clear_record_from_url('http://x/?pod=abc') == 'http://x/'
