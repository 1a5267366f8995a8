"""Pydantic Schemas — response contracts for the JSON endpoints.

Invariants:
    - Schemas describe what leaves the API boundary; no business logic

Design Decisions:
    - Separate from core/: schemas are wire contracts, core types are domain values
"""
