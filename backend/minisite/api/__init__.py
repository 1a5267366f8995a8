"""API Layer — FastAPI routes, dependencies, middleware, and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Settings and session state reach handlers through Depends, never globals

Design Decisions:
    - Thin routes delegate to core/ (rules) and rendering/ (markup)
"""
