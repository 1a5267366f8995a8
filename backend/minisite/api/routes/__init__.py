"""Route Modules — one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter with tags
    - Routes never contain business logic (delegate to core/ and rendering/)

Design Decisions:
    - Explicit registration in main.py over auto-discovery
"""
