"""Pydantic Schemas: request/response contracts for API endpoints.

Invariants:
    - Schemas describe the wire format; domain values live in core/domain_types.py
"""
