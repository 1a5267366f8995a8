"""Core Layer — request/response-safety logic, no IO, no framework imports.

Invariants:
    - No module in core/ imports from api/, rendering/, or infrastructure/
    - Functions work on plain values (strings, header pairs, dataclasses)

Design Decisions:
    - Functional core separated from the FastAPI shell: every rule testable without a client
"""
