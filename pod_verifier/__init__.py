# Path: pod_verifier/__init__.py
"""
POD Verifier

Verifies signed object records (PODs): entries plus a signature and the
signer's public key, delivered as possibly malformed JSON text.

Key Principle: we repair the text, we do NOT alter the record. Repairs
are reported, and the cryptographic verdict always comes from the
injected engine.

Architecture (IPO):
- INPUT: loaders/ - Reading record text from files, stdin, share links
- PROCESS: engine/ - Repair, validation, engine orchestration, formatting
- OUTPUT: output/ - Summaries, helpful errors, text reports

Usage:
    pod-verifier verify record.json --engine my_engine:create_engine

    # Or programmatically:
    from pod_verifier.engine.processors import verify_record

    result = verify_record(text, engine)
    print(result.is_signature_valid)
"""

__version__ = '0.1.0'
__author__ = 'POD Verifier'

# Core exports for convenient access
from .engine.boundary import VerificationEngine, EngineRecord, load_engine
from .engine.processors import VerificationOrchestrator, VerificationResult, verify_record

__all__ = [
    '__version__',
    '__author__',
    'VerificationEngine',
    'EngineRecord',
    'load_engine',
    'VerificationOrchestrator',
    'VerificationResult',
    'verify_record',
]
