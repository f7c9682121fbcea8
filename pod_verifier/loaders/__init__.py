# Path: pod_verifier/loaders/__init__.py
"""
Loaders (INPUT layer)

- input_reader: record text from files, stdin and share links
"""

from .input_reader import InputReader, STDIN_MARKER

__all__ = ['InputReader', 'STDIN_MARKER']
