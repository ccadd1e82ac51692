"""Infrastructure Layer — capability loading and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from api/
    - Every failure while acquiring the capability is mapped to CapabilityLoadError

Design Decisions:
    - Loader owns the only async step of the pipeline; core stays synchronous
"""
