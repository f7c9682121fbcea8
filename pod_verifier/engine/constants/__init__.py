# Path: pod_verifier/engine/constants/__init__.py
"""
Engine Constants

- patterns: malformation detection patterns and repair descriptions
- entry_types: closed entry type set and value shapes
- display: formatting heuristics and categories
"""

from .patterns import MalformationIssue
from .display import EntryCategory, CATEGORY_ORDER

__all__ = [
    'MalformationIssue',
    'EntryCategory',
    'CATEGORY_ORDER',
]
