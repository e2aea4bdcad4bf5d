"""Route Modules — one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter
    - Routes never format errors inline (they raise; error_handlers renders)
"""
