# Path: pod_verifier/core/__init__.py
"""
Core infrastructure: configuration and logging.
"""

from .config_loader import ConfigLoader

__all__ = ['ConfigLoader']
