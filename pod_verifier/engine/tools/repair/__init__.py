# Path: pod_verifier/engine/tools/repair/__init__.py
"""
Repair Tools

- detector: reports malformation patterns in raw text
- rewriter: string-aware token rewriter
- repairer: repair pipeline producing RepairResult
- strict_json: strict JSON parsing helpers
"""

from .strict_json import strict_loads, try_strict_parse
from .detector import MalformationReport, MalformationDetector, detect_malformations
from .rewriter import StructuralRewriter
from .repairer import RepairResult, Repairer, describe_repairs, repair_record_text

__all__ = [
    'strict_loads',
    'try_strict_parse',
    'MalformationReport',
    'MalformationDetector',
    'detect_malformations',
    'StructuralRewriter',
    'RepairResult',
    'Repairer',
    'describe_repairs',
    'repair_record_text',
]
