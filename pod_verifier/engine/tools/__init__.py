# Path: pod_verifier/engine/tools/__init__.py
"""
Verification Tools

Stateless, reusable skill modules picked up by the orchestrator:
- repair: malformation detection and repair
- validation: structure and entry contracts
- formatting: display-ready entry views
- sharing: URL codec for share links
"""
