"""Pydantic Schemas — response projections for API endpoints.

Invariants:
    - Projections never include password hashes or timestamps
    - Field names on the wire are camelCase

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
    - Write payloads are NOT schemas: they are plain mappings checked by core/field_rules
"""
