"""Session Stream Helpers — SSE formatting and the session event pump.

Invariants:
    - The stream opens with the current pair, then one panes event per edit, in order
    - A faulted or closed session ends the stream with exactly one terminal event
    - The listener is always unsubscribed when the stream ends or the client leaves

Design Decisions:
    - asyncio.Queue as the subscriber: EditSession publishes synchronously with
      put_nowait, the generator drains it on the event loop
    - Extracted from session_stream.py so routes stay thin and the pump is
      testable without an HTTP client
"""

import asyncio
import json
from typing import AsyncIterator

from playground.core.domain_types import SessionEventType, SessionStatus
from playground.core.edit_session import EditSession, EditSnapshot, SessionEvent
from playground.core.panes import ShellLabels, build_panes

# SSE headers prevent proxy/browser buffering of streamed events.
SSE_HEADERS = {
    "Cache-Control": "no-cache",
    "X-Accel-Buffering": "no",
    "Connection": "keep-alive",
}


def sse_line(event: dict) -> str:
    """Format event as SSE data line."""
    return f"data: {json.dumps(event, ensure_ascii=False)}\n\n"


def panes_event(snapshot: EditSnapshot, labels: ShellLabels) -> dict:
    return {"type": "panes", "data": build_panes(snapshot, labels).to_dict()}


def closed_event() -> dict:
    return {"type": "closed", "data": {}}


async def session_events(
    session: EditSession, labels: ShellLabels,
) -> AsyncIterator[dict]:
    """Yield event dicts for a session until it faults or closes."""
    queue: asyncio.Queue[SessionEvent] = asyncio.Queue()
    unsubscribe = session.subscribe(queue.put_nowait)
    try:
        yield panes_event(session.snapshot, labels)
        if session.status == SessionStatus.FAULTED:
            yield session.fault.to_sse_event()
            return
        if session.status == SessionStatus.CLOSED:
            yield closed_event()
            return
        while True:
            event = await queue.get()
            if event.type == SessionEventType.UPDATED:
                yield panes_event(event.snapshot, labels)
            elif event.type == SessionEventType.FAULTED:
                yield event.error.to_sse_event()
                return
            else:
                yield closed_event()
                return
    finally:
        unsubscribe()
