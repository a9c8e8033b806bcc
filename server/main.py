"""FastAPI web service for decoding NMEA sentences.

Start with::

    uvicorn server.main:app --host 0.0.0.0 --port 8000

Clients POST sentences to ``/sentences`` as ``{"sentence": "$GNRMC,...*7E"}``
and get the decoded message back as JSON. WebSocket clients connect to
``ws://<host>:8000/ws`` and receive every decoded message as it arrives.
"""

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import (
    Body,
    FastAPI,
    HTTPException,
    Request,
    Response,
    WebSocket,
    WebSocketDisconnect,
)

from gnssdecode.worker import DecodeWorker
from server.broadcaster import Broadcaster
from server.formatters import format_nmea_message

logger = logging.getLogger(__name__)

_QUEUE_MAX_SIZE = 10
_TIMEOUT_SECONDS = 5.0
_DECODE_WORKERS = 2

broadcaster = Broadcaster(queue_size=_QUEUE_MAX_SIZE)


async def _send_messages_until_disconnect(
    queue: asyncio.Queue[str],
    websocket: WebSocket,
) -> None:
    try:
        while True:
            message = await asyncio.wait_for(queue.get(), timeout=_TIMEOUT_SECONDS)
            await websocket.send_text(message)
    except TimeoutError:
        await websocket.close(code=1001)
    except WebSocketDisconnect:
        pass


@asynccontextmanager
async def _lifespan(application: FastAPI) -> AsyncIterator[None]:
    with DecodeWorker(max_workers=_DECODE_WORKERS) as worker:
        application.state.decode_worker = worker
        yield


app = FastAPI(lifespan=_lifespan)


@app.post("/sentences")
async def decode_sentence(
    request: Request,
    sentence: str = Body(..., embed=True),
) -> Response:
    """Decode one NMEA sentence and broadcast the result to subscribers.

    Args:
        request: The incoming request, used to reach the decode worker.
        sentence: Raw NMEA sentence text.

    Returns:
        The decoded message as JSON.

    Raises:
        HTTPException: 422 if the sentence checksum is missing, malformed,
            or wrong.
    """
    worker: DecodeWorker = request.app.state.decode_worker
    data = await worker.decode(sentence)
    if data is None:
        logger.info("Rejected sentence with bad checksum: %r", sentence)
        raise HTTPException(
            status_code=422,
            detail="NMEA checksum is missing, malformed, or wrong",
        )

    message = format_nmea_message(data)
    broadcaster.publish(message)
    return Response(content=message, media_type="application/json")


@app.websocket("/ws")
async def websocket_endpoint(websocket: WebSocket) -> None:
    """Stream decoded messages as JSON to a connected WebSocket client.

    Each client gets its own bounded queue (max ``_QUEUE_MAX_SIZE`` messages).
    The oldest message is dropped when the queue is full so slow clients do
    not stall decoding. The connection closes, and the client should
    reconnect, if no message arrives within ``_TIMEOUT_SECONDS``.

    Args:
        websocket: The incoming WebSocket connection.
    """
    queue = broadcaster.subscribe()
    try:
        await websocket.accept()
        await _send_messages_until_disconnect(queue, websocket)
    finally:
        broadcaster.unsubscribe(queue)
