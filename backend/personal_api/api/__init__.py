"""API Layer: FastAPI routes, middleware, and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All JSON endpoints return structured responses

Design Decisions:
    - Thin routes delegate to services (validation and email formatting live in core/)
"""
