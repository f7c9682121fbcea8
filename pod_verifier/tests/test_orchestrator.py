# Path: pod_verifier/tests/test_orchestrator.py
"""
Pipeline tests for the verification orchestrator.

Runs fixture records through every stage with fake engines and checks
which stage stops the pipeline and what the result carries.
"""

import asyncio
import json

import pytest

from pod_verifier.constants import ErrorCategory
from pod_verifier.engine.boundary import EngineLoadError, load_engine
from pod_verifier.engine.processors import VerificationOrchestrator, verify_record
from pod_verifier.tests.fixtures import (
    BrokenAccessorEngine,
    EMPTY_ENTRIES_POD,
    FakeEngine,
    INVALID_ENTRY_NAME_POD,
    MISSING_SIGNATURE_POD,
    PUBLIC_KEY,
    REAL_POD,
    REPAIRABLE_BAD_SIGNATURE_TEXT,
    TYPED_ENTRIES_POD,
    UNREPAIRABLE_OBJECT_TEXT,
    UNREPAIRABLE_TEXT,
    record_text,
    real_pod,
)


def run(orchestrator: VerificationOrchestrator, text):
    return asyncio.run(orchestrator.verify(text))


# ==============================================================================
# SUCCESSFUL PIPELINES
# ==============================================================================

def test_valid_record_with_accepting_engine():
    engine = FakeEngine(verdict=True)
    result = run(VerificationOrchestrator(engine), record_text(REAL_POD))

    assert result.is_signature_valid
    assert result.is_verified
    assert result.error is None
    assert result.error_category is None
    assert result.signer_public_key == PUBLIC_KEY
    assert result.entry_count == 17
    assert dict(result.entries) == REAL_POD['entries']
    assert len(result.content_id) == 64
    assert not result.was_repaired
    assert result.warnings == ()
    assert engine.parsed == [REAL_POD]


def test_invalid_signature_is_a_normal_result():
    """A rejected signature is reported, not treated as an error."""
    result = run(VerificationOrchestrator(FakeEngine(verdict=False)), record_text(REAL_POD))

    assert not result.is_signature_valid
    assert result.error is None
    assert result.error_category is None
    assert result.content_id is not None
    assert result.entry_count == 17


def test_async_signature_check_is_awaited():
    engine = FakeEngine(verdict=True, asynchronous=True)
    result = run(VerificationOrchestrator(engine), record_text(TYPED_ENTRIES_POD))

    assert result.is_signature_valid
    assert result.entry_count == 4


def test_empty_entries_are_allowed():
    result = run(VerificationOrchestrator(FakeEngine()), record_text(EMPTY_ENTRIES_POD))

    assert result.is_verified
    assert result.entry_count == 0


def test_bytes_input_is_decoded():
    text = record_text(REAL_POD).encode('utf-8')
    result = run(VerificationOrchestrator(FakeEngine()), text)
    assert result.is_verified


def test_null_bytes_are_removed():
    text = record_text(REAL_POD, indent=None).replace(', ', ',\0 ')
    result = run(VerificationOrchestrator(FakeEngine()), text)

    assert result.is_verified
    assert not result.was_repaired


def test_repaired_record_reports_changes():
    text = (
        "{entries: {attendeeName: 'Joe Shmo', isConsumed: True,},"
        f" signature: '{REAL_POD['signature']}', signerPublicKey: '{PUBLIC_KEY}'}}"
    )
    result = run(VerificationOrchestrator(FakeEngine()), text)

    assert result.is_verified
    assert result.was_repaired
    assert 'Added quotes around object keys' in result.repair_changes
    assert dict(result.entries) == {'attendeeName': 'Joe Shmo', 'isConsumed': True}


def test_repair_keeps_empty_string_entries():
    text = (
        '{entries: {firstName: "", lastName: ""},'
        f' signature: "{REAL_POD["signature"]}", signerPublicKey: "{PUBLIC_KEY}"}}'
    )
    result = run(VerificationOrchestrator(FakeEngine()), text)

    assert result.is_verified
    assert result.was_repaired
    assert dict(result.entries) == {'firstName': '', 'lastName': ''}


def test_resolved_entries_are_carried_to_the_result():
    result = run(VerificationOrchestrator(FakeEngine()), record_text(TYPED_ENTRIES_POD))

    assert [entry.name for entry in result.resolved_entries] == list(TYPED_ENTRIES_POD['entries'])
    assert [entry.type for entry in result.resolved_entries] == [
        'string', 'int', 'boolean', 'eddsa_pubkey',
    ]


def test_failed_result_has_no_resolved_entries():
    result = run(VerificationOrchestrator(FakeEngine()), record_text(INVALID_ENTRY_NAME_POD))
    assert result.resolved_entries == ()


def test_result_entries_are_read_only():
    result = run(VerificationOrchestrator(FakeEngine()), record_text(REAL_POD))

    with pytest.raises(TypeError):
        result.entries['attendeeName'] = 'Mallory'


# ==============================================================================
# FAILING STAGES
# ==============================================================================

def test_input_too_large_default_limit():
    result = run(VerificationOrchestrator(FakeEngine()), ' ' * 1_000_001)

    assert result.error_category == ErrorCategory.INPUT_TOO_LARGE
    assert result.error == 'Input too large (max 1MB)'


def test_input_too_large_custom_limit():
    orchestrator = VerificationOrchestrator(FakeEngine(), max_input_length=10)
    result = run(orchestrator, record_text(REAL_POD))

    assert result.error_category == ErrorCategory.INPUT_TOO_LARGE
    assert result.error == 'Input too large (max 10 characters)'


def test_unrepairable_text_is_a_parse_error():
    """The parser's own message is preserved."""
    result = run(VerificationOrchestrator(FakeEngine()), UNREPAIRABLE_TEXT)

    assert result.error_category == ErrorCategory.PARSE_ERROR
    assert result.error.startswith('JSON parsing failed: Expecting value')
    assert not result.is_signature_valid
    assert result.content_id is None


def test_unrepairable_object_keeps_original_parser_message():
    """The message comes from parsing the input, not the failed rewrite."""
    result = run(VerificationOrchestrator(FakeEngine()), UNREPAIRABLE_OBJECT_TEXT)

    assert result.error_category == ErrorCategory.PARSE_ERROR
    assert result.error == (
        'JSON parsing failed: Expecting property name enclosed in double quotes: '
        'line 1 column 2 (char 1)'
    )
    assert not result.was_repaired


def test_missing_signature_is_a_structure_error():
    engine = FakeEngine()
    result = run(VerificationOrchestrator(engine), record_text(MISSING_SIGNATURE_POD))

    assert result.error_category == ErrorCategory.STRUCTURE_ERROR
    assert 'Record must have a "signature" field' in result.error
    assert engine.parsed == []


def test_structure_is_checked_before_entries():
    text = json.dumps({'entries': {'1bad': 1}, 'signerPublicKey': PUBLIC_KEY})
    result = run(VerificationOrchestrator(FakeEngine()), text)

    assert result.error_category == ErrorCategory.STRUCTURE_ERROR


def test_bad_entry_name_is_an_entry_error():
    result = run(VerificationOrchestrator(FakeEngine()), record_text(INVALID_ENTRY_NAME_POD))

    assert result.error_category == ErrorCategory.ENTRY_ERROR
    assert result.error.startswith('Record entries invalid: Entry name "123invalid"')


def test_repaired_record_rejected_by_engine():
    """Repair succeeds, so the engine's rejection is what gets reported."""
    result = run(VerificationOrchestrator(FakeEngine()), REPAIRABLE_BAD_SIGNATURE_TEXT)

    assert result.error_category == ErrorCategory.ENGINE_CONSTRUCTION_ERROR
    assert result.error.startswith('Record construction failed: Invalid signature encoding')
    assert result.was_repaired
    assert len(result.warnings) == 2
    assert result.content_id is None


def test_failing_accessor_is_a_construction_error():
    result = run(VerificationOrchestrator(BrokenAccessorEngine()), record_text(REAL_POD))

    assert result.error_category == ErrorCategory.ENGINE_CONSTRUCTION_ERROR
    assert 'out of range' in result.error


def test_signature_check_exception_is_reported_as_data():
    engine = FakeEngine(verify_error='Point is not on the curve')
    result = run(VerificationOrchestrator(engine), record_text(REAL_POD))

    assert result.error_category == ErrorCategory.SIGNATURE_CHECK_ERROR
    assert result.error == 'Point is not on the curve'
    assert not result.is_signature_valid
    assert result.content_id is not None
    assert result.entry_count == 17


def test_async_signature_check_exception_is_reported_as_data():
    engine = FakeEngine(verify_error='boom', asynchronous=True)
    result = run(VerificationOrchestrator(engine), record_text(REAL_POD))

    assert result.error_category == ErrorCategory.SIGNATURE_CHECK_ERROR
    assert result.error == 'boom'


# ==============================================================================
# STAGE ACCESS, CONCURRENCY, CONVENIENCE
# ==============================================================================

def test_run_preparation_alone():
    orchestrator = VerificationOrchestrator(FakeEngine())
    preparation = orchestrator.run_preparation(record_text(REAL_POD))

    assert preparation.is_ready
    assert preparation.record == REAL_POD
    assert len(preparation.entries) == 17


def test_concurrent_verifications_are_independent():
    orchestrator = VerificationOrchestrator(FakeEngine(verdict=True))
    other = real_pod(entries={'attendeeName': 'Alice'})

    async def verify_both():
        return await asyncio.gather(
            orchestrator.verify(record_text(REAL_POD)),
            orchestrator.verify(record_text(other)),
            orchestrator.verify(UNREPAIRABLE_TEXT),
        )

    first, second, third = asyncio.run(verify_both())

    assert first.entry_count == 17
    assert second.entry_count == 1
    assert first.content_id != second.content_id
    assert third.error_category == ErrorCategory.PARSE_ERROR


def test_verify_record_wrapper():
    result = verify_record(record_text(REAL_POD), FakeEngine())
    assert result.is_verified


def test_load_engine_from_factory():
    engine = load_engine('pod_verifier.tests.fixtures:create_rejecting_engine')

    assert isinstance(engine, FakeEngine)
    assert not verify_record(record_text(REAL_POD), engine).is_signature_valid


@pytest.mark.parametrize('target', [
    'no_colon_here',
    'pod_verifier.tests.fixtures:',
    'pod_verifier.does_not_exist:factory',
    'pod_verifier.tests.fixtures:missing_factory',
    'pod_verifier.tests.fixtures:create_not_an_engine',
])
def test_load_engine_errors(target):
    with pytest.raises(EngineLoadError):
        load_engine(target)
