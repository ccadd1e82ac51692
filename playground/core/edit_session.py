"""Edit Session — owns raw text and recomputes derived text on every edit.

Invariants:
    - derived == capability(raw) for every published snapshot
    - One capability per session, fixed at construction
    - Every edit is a full replace; the capability always sees the whole text
    - No debouncing or batching: each edit() parses immediately and publishes once
    - Subscribers are notified in subscription order, after raw and derived are both set
    - A capability failure faults the session permanently; the half-updated pair is
      never published

Design Decisions:
    - Synchronous edit(): the caller's event loop cannot interleave two parses
    - Explicit subscribe/publish instead of framework re-render: the SSE stream
      and tests observe the exact same sequence of snapshots
    - Expensive capabilities slow every edit; that latency is visible to callers
      rather than hidden behind batching
"""

import logging
from dataclasses import dataclass
from typing import Callable

from playground.core.capability import ParsingCapability
from playground.core.domain_types import (
    Revision, SessionEventType, SessionId, SessionStatus,
)
from playground.core.errors import (
    ErrorContext, ParseFaultError, SessionClosedError, SessionFaultedError,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EditSnapshot:
    """A (raw, derived) pair produced by one parse invocation."""
    raw: str
    derived: str
    revision: Revision


@dataclass(frozen=True)
class SessionEvent:
    """What subscribers receive. snapshot is set for UPDATED, error for FAULTED."""
    type: SessionEventType
    snapshot: EditSnapshot | None = None
    error: ParseFaultError | None = None


SessionListener = Callable[[SessionEvent], None]


class EditSession:
    """Per-editor owner of RawText and DerivedText."""

    def __init__(
        self, capability: ParsingCapability, session_id: SessionId | None = None,
    ):
        self._capability = capability
        self.session_id = session_id
        self.status = SessionStatus.ACTIVE
        self.fault: ParseFaultError | None = None
        self._listeners: list[SessionListener] = []
        self._snapshot = EditSnapshot(
            raw="", derived=self._parse("", Revision(0)), revision=Revision(0),
        )

    @property
    def capability(self) -> ParsingCapability:
        return self._capability

    @property
    def snapshot(self) -> EditSnapshot:
        """Last published pair. After a fault this is the last good pair."""
        return self._snapshot

    @property
    def raw(self) -> str:
        return self._snapshot.raw

    @property
    def derived(self) -> str:
        return self._snapshot.derived

    @property
    def revision(self) -> Revision:
        return self._snapshot.revision

    def edit(self, new_raw: str) -> EditSnapshot:
        """Replace the raw text, parse it, publish and return the new pair."""
        self._ensure_editable()
        revision = Revision(self._snapshot.revision + 1)
        derived = self._parse(new_raw, revision)
        self._snapshot = EditSnapshot(
            raw=new_raw, derived=derived, revision=revision,
        )
        self._publish(SessionEvent(
            SessionEventType.UPDATED, snapshot=self._snapshot,
        ))
        return self._snapshot

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """Register a listener. Returns a callable that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def close(self) -> None:
        """Discard the session. Listeners get CLOSED, then are dropped."""
        if self.status == SessionStatus.CLOSED:
            return
        self.status = SessionStatus.CLOSED
        self._publish(SessionEvent(SessionEventType.CLOSED))
        self._listeners.clear()

    # -- internals -------------------------------------------------------------

    def _ensure_editable(self) -> None:
        if self.status == SessionStatus.FAULTED:
            raise SessionFaultedError(self._error_context())
        if self.status == SessionStatus.CLOSED:
            raise SessionClosedError(self._error_context())

    def _parse(self, raw: str, revision: Revision) -> str:
        # No sanitizing or retry: a raising capability is a defect in the capability
        try:
            return self._capability(raw)
        except Exception as exc:
            fault = ParseFaultError(exc, self._error_context(revision))
            self.status = SessionStatus.FAULTED
            self.fault = fault
            logger.error(
                "Parser fault, session terminated: %s", fault.message,
                extra={
                    "session_id": str(self.session_id),
                    "revision": revision,
                    "error_code": fault.code,
                },
            )
            self._publish(SessionEvent(SessionEventType.FAULTED, error=fault))
            raise fault from exc

    def _publish(self, event: SessionEvent) -> None:
        for listener in list(self._listeners):
            listener(event)

    def _error_context(self, revision: int | None = None) -> ErrorContext:
        if revision is None:
            revision = self._snapshot.revision
        return ErrorContext(
            session_id=str(self.session_id) if self.session_id else None,
            revision=revision,
        )
