"""Infrastructure Layer: database sessions, game server gateway, logging setup.

Invariants:
    - External calls are wrapped with timeout and error mapping to core/errors.py
"""
