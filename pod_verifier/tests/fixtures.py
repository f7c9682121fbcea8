# Path: pod_verifier/tests/fixtures.py
"""
Test Fixtures for POD Verifier

Sample records and fake verification engines for pipeline testing.

Contains:
- A real ticket POD (17 primitive entries)
- Typed-entry and broken records
- Malformed text samples the repairer should fix
- Fake engines with fixed accept/reject behavior (sync and async)
"""

import copy
import hashlib
import json
import re
from collections.abc import Mapping
from typing import Any, Optional

from pod_verifier.engine.boundary import EngineRecord, VerificationEngine


SIGNATURE = 'KX44O1XFLKIbNVRR4m5D42ooxHlbRybHnKbYZFjmuyAwP2TpGYwG1pNH6iE7fUSLtHHikUrPIIO99zSWjjHmBQ'
PUBLIC_KEY = 'NnGAciO/OIz+R5aYBlTUb+QwCgD5xossqB8gZtKLOxs'

REAL_POD = {
    'entries': {
        'attendeeEmail': 'joe@shmo.org',
        'attendeeName': 'Joe Shmo',
        'eventId': '5074edf5-f079-4099-b036-22223c0c69953',
        'eventLocation': 'Bangkok, Thailand',
        'eventName': 'Devcon 7',
        'eventStartDate': '2024-11-09T08:00:00.000',
        'imageUrl': '/images/devcon/devcon-landscape.webp',
        'isAddOn': False,
        'isConsumed': True,
        'isRevoked': False,
        'productId': 'f15237ec-abd9-40ae-8e61-9cf8a7a60c3f3',
        'ticketCategory': 4,
        'ticketId': '2166b436-ac39-5f69-8700-e1dfceae37ebd',
        'ticketName': 'EFer',
        'ticketSecret': 'naswv9f9wb28357u43h9fh4pqn3p3h4gd',
        'timestampConsumed': 1731226670791,
        'timestampSigned': 1750215914826,
    },
    'signature': SIGNATURE,
    'signerPublicKey': PUBLIC_KEY,
}

TYPED_ENTRIES_POD = {
    'entries': {
        'name': {'type': 'string', 'value': 'Alice Frog'},
        'age': {'type': 'int', 'value': 25},
        'verified': {'type': 'boolean', 'value': True},
        'pubkey': {'type': 'eddsa_pubkey', 'value': 'ZnU07tyAUiWW2mmY3/z4aa3WxrctfSc0ch23752z6xM'},
    },
    'signature': SIGNATURE,
    'signerPublicKey': PUBLIC_KEY,
}

MISSING_SIGNATURE_POD = {
    'entries': {'name': 'test'},
    'signerPublicKey': PUBLIC_KEY,
}

INVALID_ENTRY_NAME_POD = {
    'entries': {'123invalid': 'test', 'valid_name': 'test'},
    'signature': SIGNATURE,
    'signerPublicKey': PUBLIC_KEY,
}

EMPTY_ENTRIES_POD = {
    'entries': {},
    'signature': SIGNATURE,
    'signerPublicKey': PUBLIC_KEY,
}

# Unquoted key plus trailing comma; "sig" is not base64-shaped
REPAIRABLE_BAD_SIGNATURE_TEXT = (
    '{"entries":{"name":"Alice"},signature:"sig","signerPublicKey":"key",}'
)

MISSING_BRACE_TEXT = """{
    "entries": {
      "name": "test"
    },
    "signature": "invalid"
    // missing closing brace
  """

UNREPAIRABLE_TEXT = 'not json at all'

# Rewrites to {"not","json","at","all"}, which still does not parse
UNREPAIRABLE_OBJECT_TEXT = '{not json at all'

# text -> value the repaired text must parse to
MALFORMED_EXAMPLES = {
    "{name: 'Joe', active: True, nothing: None,}": {
        'name': 'Joe', 'active': True, 'nothing': None,
    },
    '{""name"": ""Joe""}': {'name': 'Joe'},
    '{"a": 1, // note\n "b": 2 /* block */}': {'a': 1, 'b': 2},
    '{"items": [1, 2, ...]}': {'items': [1, 2]},
    '{"a": 1,, "b": 2}': {'a': 1, 'b': 2},
    "{a: '42', b: 42}": {'a': '42', 'b': 42},
    "{note: 'True or None', flag: False}": {'note': 'True or None', 'flag': False},
    "{'text': 'it\\'s \"quoted\"'}": {'text': 'it\'s "quoted"'},
}


def record_text(record: dict, indent: Optional[int] = 2) -> str:
    """Serialize a fixture record."""
    return json.dumps(record, indent=indent)


def real_pod(**overrides) -> dict:
    """Fresh copy of the real POD with top-level fields replaced."""
    record = copy.deepcopy(REAL_POD)
    record.update(overrides)
    return record


# ==============================================================================
# FAKE ENGINES
# ==============================================================================

ENGINE_BASE64 = re.compile(r'[A-Za-z0-9+/]+=*')


class FakeRecord(EngineRecord):
    """EngineRecord with a fixed signature verdict."""

    def __init__(self, record: dict, verdict: bool, verify_error: Optional[str] = None,
                 asynchronous: bool = False):
        self._record = record
        self._verdict = verdict
        self._verify_error = verify_error
        self._asynchronous = asynchronous

    @property
    def content_id(self) -> str:
        canonical = json.dumps(self._record['entries'], sort_keys=True, separators=(',', ':'))
        return hashlib.sha256(canonical.encode('utf-8')).hexdigest()

    @property
    def signer_public_key(self) -> str:
        return self._record['signerPublicKey']

    def entries(self) -> Mapping[str, Any]:
        return dict(self._record['entries'])

    def _check(self) -> bool:
        if self._verify_error is not None:
            raise RuntimeError(self._verify_error)
        return self._verdict

    def verify_signature(self):
        if self._asynchronous:
            return self._check_async()
        return self._check()

    async def _check_async(self) -> bool:
        return self._check()


class FakeEngine(VerificationEngine):
    """
    Deterministic engine for tests.

    Rejects records whose signature is not base64 text, like a real
    engine rejecting a signature it cannot decode.
    """

    def __init__(self, verdict: bool = True, verify_error: Optional[str] = None,
                 asynchronous: bool = False):
        self.verdict = verdict
        self.verify_error = verify_error
        self.asynchronous = asynchronous
        self.parsed: list[dict] = []

    def parse_record(self, record: dict) -> EngineRecord:
        if ENGINE_BASE64.fullmatch(record['signature']) is None or len(record['signature']) < 40:
            raise ValueError(f"Invalid signature encoding: '{record['signature']}'")
        self.parsed.append(record)
        return FakeRecord(record, self.verdict, self.verify_error, self.asynchronous)


class BrokenAccessorRecord(FakeRecord):
    """Record whose content ID cannot be computed."""

    @property
    def content_id(self) -> str:
        raise ValueError('Entry value out of range for content hashing')


class BrokenAccessorEngine(FakeEngine):
    """Accepts records but hands back a record with a failing accessor."""

    def parse_record(self, record: dict) -> EngineRecord:
        return BrokenAccessorRecord(record, True)


def create_accepting_engine() -> FakeEngine:
    """Factory used with load_engine('pod_verifier.tests.fixtures:create_accepting_engine')."""
    return FakeEngine(verdict=True)


def create_rejecting_engine() -> FakeEngine:
    """Engine that reports every signature as invalid."""
    return FakeEngine(verdict=False)


def create_not_an_engine() -> dict:
    """Factory returning something that is not an engine."""
    return {}
