"""Core Layer — record store, identifier shape check, error hierarchy. No file IO, no async.

Invariants:
    - No module in core/ imports from services/, api/, or infrastructure/
    - The only shared mutable state is RecordStore's snapshot reference

Design Decisions:
    - Functional core separated from imperative shell (ADR: ExMA impureim sandwich)
"""
