"""Core Layer — load state, edit sessions, pane views. No IO, no async.

Invariants:
    - No module in core/ imports from api/ or infrastructure/
    - Everything except the injected capability is pure and deterministic

Design Decisions:
    - Functional core separated from the HTTP shell; the shell owns the event loop
"""
