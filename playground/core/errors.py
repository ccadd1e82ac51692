"""Error Hierarchy — typed, categorized exceptions for all playground failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400-level) are recoverable; capability errors (500-level) are critical
    - to_response() produces REST envelope; to_sse_event() produces SSE envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with PlaygroundError base: FastAPI global handler catches all
    - ErrorContext as dataclass: observability fields without coupling to logging
    - AcquisitionFailure and ParseFault are distinct classes: the first becomes
      load state at the loader boundary, the second terminates one session
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    UNAVAILABLE = "unavailable"
    CAPABILITY = "capability"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    session_id: str | None = None
    revision: int | None = None
    entrypoint: str | None = None
    user_message: str | None = None
    debug_info: dict[str, Any] | None = None


class PlaygroundError(Exception):
    """Base exception for all playground errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.context.user_message or self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "session_id": self.context.session_id,
                    "revision": self.context.revision,
                    "entrypoint": self.context.entrypoint,
                },
            }
        }

    def to_sse_event(self) -> dict:
        """Convert to SSE error event."""
        return {
            "type": "error",
            "data": {
                "code": self.code,
                "message": self.context.user_message or self.message,
                "severity": self.severity.value,
                "recoverable": self.severity in (
                    ErrorSeverity.INFO, ErrorSeverity.WARNING,
                ),
            },
        }


# ─── Client Errors (400-level) ──────────────────────────────────

class ResourceNotFoundError(PlaygroundError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )


class SessionFaultedError(PlaygroundError):
    """Edit attempted on a session whose capability already failed."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Session is faulted after a parser failure and accepts no further edits.",
            "SESSION_FAULTED", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context, 409,
        )


class SessionClosedError(PlaygroundError):
    """Edit attempted on a session that was already closed."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Session is closed.",
            "SESSION_CLOSED", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context, 409,
        )


# ─── Capability Errors (500-level) ──────────────────────────────

class CapabilityNotReadyError(PlaygroundError):
    """Parsing capability is still loading; sessions cannot be created yet."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Parser is still loading.",
            "CAPABILITY_NOT_READY", ErrorCategory.UNAVAILABLE,
            ErrorSeverity.WARNING, context, 503,
        )


class CapabilityLoadError(PlaygroundError):
    """Parsing capability could not be acquired (AcquisitionFailure)."""
    def __init__(
        self, message: str, entrypoint: str | None = None,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.entrypoint = entrypoint
        ctx.user_message = ctx.user_message or "The parser failed to load."
        super().__init__(
            f"Failed to load parser: {message}",
            "CAPABILITY_LOAD_FAILED", ErrorCategory.CAPABILITY,
            ErrorSeverity.CRITICAL, ctx, 503,
        )


class ParseFaultError(PlaygroundError):
    """Parsing capability raised instead of returning text (ParseFault)."""
    def __init__(
        self, cause: BaseException, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.user_message = ctx.user_message or "The parser failed on this input."
        super().__init__(
            f"Parser raised {type(cause).__name__}: {cause}",
            "PARSE_FAULT", ErrorCategory.CAPABILITY,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
        self.cause = cause
