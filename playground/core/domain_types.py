"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - SessionId wraps UUID — never use bare UUID in domain logic
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

SessionId = NewType("SessionId", UUID)


# ─── Value Types ─────────────────────────────────────────────────

Revision = NewType("Revision", int)     # 0 at session start, +1 per edit


# ─── Enums ───────────────────────────────────────────────────────

class LoadStatus(str, Enum):
    """Capability acquisition states."""
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


class SessionStatus(str, Enum):
    """Edit session lifecycle states."""
    ACTIVE = "active"
    FAULTED = "faulted"
    CLOSED = "closed"


class SessionEventType(str, Enum):
    """Events published by an edit session to its subscribers."""
    UPDATED = "updated"
    FAULTED = "faulted"
    CLOSED = "closed"
