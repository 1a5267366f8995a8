"""Infrastructure Layer — process-wide state and cross-cutting concerns.

Invariants:
    - Holds the only cross-request mutable state (the session store)
    - Never renders markup or builds responses

Design Decisions:
    - Stores and logging setup kept apart from core/ so core stays pure
"""
