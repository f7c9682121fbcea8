# Path: pod_verifier/engine/processors/__init__.py
"""
Verification Processors Module

Pipeline for record verification:
    Preparation (sanitize, repair, parse, validate) -> Verification (engine)

Modules:
- pipeline_data: Data structures passed between stages
- orchestrator: Coordinates the pipeline

Usage:
    from pod_verifier.engine.processors import (
        VerificationOrchestrator,
        verify_record,
    )

    # Quick verification
    result = verify_record(text, engine)
    print(result.is_signature_valid)

    # From async code
    orchestrator = VerificationOrchestrator(engine)
    result = await orchestrator.verify(text)
"""

from .pipeline_data import PreparationResult, VerificationResult
from .orchestrator import VerificationOrchestrator, verify_record


__all__ = [
    # Orchestrator
    'VerificationOrchestrator',
    'verify_record',
    # Data structures
    'PreparationResult',
    'VerificationResult',
]
