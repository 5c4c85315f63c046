"""Game Platform Backend: private games, messaging and seed data import.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
