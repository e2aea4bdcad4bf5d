"""Core Layer — pure domain values, no IO, no async.

Invariants:
    - No module in core/ imports from api/, schemas/ or infrastructure/
"""
