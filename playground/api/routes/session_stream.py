"""Session Stream — SSE feed of pane updates for one edit session.

Invariants:
    - One "panes" event per published snapshot, in revision order
    - Stream ends after a "closed" event or an "error" event (parser fault)

Design Decisions:
    - StreamingResponse for SSE: event generator yields formatted SSE lines
    - Event pump lives in session_stream_helpers.py; this module only wires HTTP
"""

import asyncio
import logging
from uuid import UUID

from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse

from playground.api.dependencies import get_shell_labels
from playground.api.routes.session_lifecycle import get_session_or_404
from playground.api.routes.session_stream_helpers import (
    SSE_HEADERS, session_events, sse_line,
)
from playground.core.panes import ShellLabels

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/sessions", tags=["sessions"])


@router.get("/{session_id}/stream")
async def stream_session(
    session_id: UUID, labels: ShellLabels = Depends(get_shell_labels),
):
    """SSE stream — current pair first, then every edit as it happens."""
    session = get_session_or_404(session_id)

    async def event_generator():
        try:
            async for event in session_events(session, labels):
                yield sse_line(event)
        except asyncio.CancelledError:
            logger.info(
                "Client disconnected from stream",
                extra={"session_id": str(session_id)},
            )
            raise

    return StreamingResponse(
        event_generator(),
        media_type="text/event-stream",
        headers=SSE_HEADERS,
    )
