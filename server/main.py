"""FastAPI web server streaming live GPS fixes over WebSocket.

Start with::

    SERIALGPS_DEVICE=/dev/ttyUSB0 uvicorn server.main:app --host 0.0.0.0 --port 8000

WebSocket clients connect to ``ws://<host>:8000/ws`` and receive one JSON
message per decoded sentence: ``type="fix"`` with the accumulated fix, or
``type="error"`` when a read failed. Errors are transient; the next fix
message supersedes them.
"""

import asyncio
import logging
import os
from collections.abc import AsyncIterator
from concurrent.futures import ThreadPoolExecutor
from contextlib import asynccontextmanager

from fastapi import FastAPI, WebSocket, WebSocketDisconnect

from serialgps.errors import GPSError
from serialgps.gps import SerialGPS
from serialgps.gps.source import DEFAULT_BAUDRATE
from server.formatters import format_frame_message

logger = logging.getLogger(__name__)

_DEVICE_ENV = "SERIALGPS_DEVICE"
_BAUDRATE_ENV = "SERIALGPS_BAUDRATE"
_DEFAULT_DEVICE = "/dev/ttyUSB0"
_QUEUE_MAX_SIZE = 10
_TIMEOUT_SECONDS = 5.0
_subscribers: list[asyncio.Queue[str]] = []


def _open_gps() -> SerialGPS:
    device = os.environ.get(_DEVICE_ENV, _DEFAULT_DEVICE)
    baudrate = int(os.environ.get(_BAUDRATE_ENV, DEFAULT_BAUDRATE))
    return SerialGPS(device, baudrate=baudrate)


def _enqueue_message(queue: asyncio.Queue[str], message: str) -> None:
    if queue.full():
        queue.get_nowait()
    queue.put_nowait(message)


def _broadcast(
    message: str,
    subscribers: list[asyncio.Queue[str]],
    loop: asyncio.AbstractEventLoop,
) -> None:
    for queue in list(subscribers):
        loop.call_soon_threadsafe(_enqueue_message, queue, message)


def _run_gps_thread(
    gps: SerialGPS,
    subscribers: list[asyncio.Queue[str]],
    loop: asyncio.AbstractEventLoop,
) -> None:
    try:
        with gps:
            for frame in gps:
                _broadcast(format_frame_message(frame), subscribers, loop)
    except GPSError:
        logger.exception("GPS stream stopped")


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
async def _lifespan(_application: FastAPI) -> AsyncIterator[None]:
    loop = asyncio.get_running_loop()
    executor = ThreadPoolExecutor(max_workers=1)
    gps = _open_gps()
    loop.run_in_executor(executor, _run_gps_thread, gps, _subscribers, loop)
    yield
    gps.cancel()
    executor.shutdown(wait=False)


app = FastAPI(lifespan=_lifespan)


@app.websocket("/ws")
async def websocket_endpoint(websocket: WebSocket) -> None:
    """Stream GPS fix and error messages to a connected WebSocket client.

    Each client gets its own bounded queue (max ``_QUEUE_MAX_SIZE`` messages).
    The oldest message is dropped when the queue is full so a slow client
    does not stall the decoding thread. The connection closes, and the client
    should reconnect, if no message arrives within ``_TIMEOUT_SECONDS``.

    Args:
        websocket: The incoming WebSocket connection.
    """
    await websocket.accept()
    queue: asyncio.Queue[str] = asyncio.Queue(maxsize=_QUEUE_MAX_SIZE)
    _subscribers.append(queue)
    try:
        await _send_messages_until_disconnect(queue, websocket)
    finally:
        _subscribers.remove(queue)
