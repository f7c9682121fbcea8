# Path: pod_verifier/engine/tools/repair/strict_json.py
"""
Strict JSON parsing.

Python's json module accepts NaN, Infinity and -Infinity, which are not
JSON. Record text must parse the way any JSON consumer would parse it,
so those constants are rejected here.
"""

import json
from typing import Any, Optional, Tuple


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant '{name}' is not allowed")


def strict_loads(text: str) -> Any:
    """
    Parse text as strict JSON.

    Raises:
        ValueError: (json.JSONDecodeError included) if text is not strict JSON
        RecursionError: if nesting exceeds the interpreter limit
    """
    return json.loads(text, parse_constant=_reject_constant)


def try_strict_parse(text: str) -> Tuple[bool, Any, Optional[str]]:
    """
    Parse without raising.

    Returns:
        (success, parsed value or None, error message or None)
    """
    try:
        return True, strict_loads(text), None
    except RecursionError:
        return False, None, 'Input is nested too deeply'
    except (ValueError, TypeError) as e:
        return False, None, str(e)


__all__ = ['strict_loads', 'try_strict_parse']
