"""Boundary Protocols — the parsing capability contract between core and shell.

Invariants:
    - A capability is a synchronous, pure, total function (raw: str) -> str
    - Core never imports a concrete capability; it is injected once loaded

Design Decisions:
    - Protocol over ABC: any plain function with the right signature conforms
"""

from typing import Protocol


class ParsingCapability(Protocol):
    """Structural contract for the externally supplied parser."""
    def __call__(self, raw: str, /) -> str: ...


def capability_name(capability: ParsingCapability) -> str:
    """Human-readable "module:qualname" for logs and shell views."""
    module = getattr(capability, "__module__", None) or "?"
    name = (
        getattr(capability, "__qualname__", None)
        or type(capability).__name__
    )
    return f"{module}:{name}"
