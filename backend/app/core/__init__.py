"""Core Layer: domain types, error hierarchy, boundary protocols and pure parsers.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Parsers are pure and deterministic (logging aside)
"""
