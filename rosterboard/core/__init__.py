"""Core Layer — roster state, page planning, control addressing and rendering.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - All functions are pure and deterministic; no IO, no async

Design Decisions:
    - Functional core separated from imperative shell (ADR: impureim sandwich)
"""
