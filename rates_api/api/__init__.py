"""API Layer — FastAPI routes, request guards and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return envelope-shaped JSON responses
"""
