"""Services Layer: private game lifecycle, messaging and CSV seed import.

Invariants:
    - Services receive an AsyncSession (and collaborators) through the constructor or arguments
    - Store failures are re-raised as operation-scoped errors from core/errors.py
"""
