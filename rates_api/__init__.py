"""Rates API Package — profile endpoint and exchange-rate proxy.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
