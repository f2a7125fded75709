"""Pydantic Schemas — record model and JSON wire contract.

Invariants:
    - Schemas validate at system boundary (data file bytes, API responses)

Design Decisions:
    - Separate from core/: schemas are wire contracts, core is lookup logic (ADR: DDD boundary)
"""
