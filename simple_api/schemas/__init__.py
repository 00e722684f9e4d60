"""Pydantic Schemas — request/response shapes for API endpoints.

Invariants:
    - Schemas define the wire contract; field names on the wire are camelCase
      only where the published contract says so (totalMessages)

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
