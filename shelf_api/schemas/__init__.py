"""Pydantic Schemas — request/response shapes for API endpoints.

Invariants:
    - Schemas validate at system boundary (request bodies, responses)
    - Validation is type coercion only: no length or format rules

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
