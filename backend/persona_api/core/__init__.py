"""Core Layer - domain types, error hierarchy and boundary contracts.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - No IO, no DB access
"""
