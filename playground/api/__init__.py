"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return structured JSON responses (except the SSE stream)

Design Decisions:
    - Thin routes delegate to core (sessions, pane views) and infrastructure (loader)
"""
