# Path: pod_verifier/tests/__init__.py
"""Tests for the POD verifier."""
