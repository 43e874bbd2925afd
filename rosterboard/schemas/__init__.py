"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (inbound events, outbound replies)
    - Domain types from core/ used for enum fields

Design Decisions:
    - Separate from core replies: schemas are API contracts, replies are domain results
"""
