# Path: pod_verifier/engine/__init__.py
"""
Verification Engine for POD Verifier

Three-tier architecture:

1. CONSTANTS - Fixed tables, no hardcoding in working files
   - patterns: Malformation patterns and repair descriptions
   - entry_types: Closed entry type set and value shapes
   - display: Category rules and display heuristics

2. TOOLS - Stateless skill modules
   - repair: Malformation detection and repair
   - validation: Structure and entry contracts
   - formatting: Entry display and categorization
   - sharing: URL codec

3. PROCESSORS - The verification pipeline
   - orchestrator: Runs the stages in order

The boundary module defines the contract for the external engine that
owns content IDs and signature checks.
"""
