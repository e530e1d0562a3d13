"""Pydantic Schemas — request/response shapes for API endpoints.

Invariants:
    - Schemas check structure only; field rules live in core/validate_event.py

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
