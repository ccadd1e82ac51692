"""Schemas Layer — Pydantic models for API request/response validation.

Invariants:
    - Every request body is validated before reaching the route handler
    - Response models mirror core view dataclasses field for field
"""
