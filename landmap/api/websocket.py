"""WebSocket handlers for real-time view updates."""

import asyncio

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from .dependencies import get_context

router = APIRouter()


class ConnectionManager:
    """Fans view change messages out to connected clients.

    Each connection gets its own queue so projector callbacks, which run
    synchronously inside event handlers, never wait on a slow client.
    """

    def __init__(self):
        self.active_connections: dict[WebSocket, asyncio.Queue] = {}

    async def connect(self, websocket: WebSocket) -> asyncio.Queue:
        """Accept a new WebSocket connection."""
        await websocket.accept()
        queue: asyncio.Queue = asyncio.Queue()
        self.active_connections[websocket] = queue
        return queue

    def disconnect(self, websocket: WebSocket):
        """Remove a WebSocket connection."""
        self.active_connections.pop(websocket, None)

    def publish(self, message: dict):
        """Queue a message for every connection."""
        for queue in self.active_connections.values():
            queue.put_nowait(message)


@router.websocket("/ws/view")
async def view_websocket(websocket: WebSocket):
    """WebSocket endpoint for view updates.

    Sends the full view state on connect, then every change. Clients may
    send {"type": "ping"} and get a pong back.

    Message format:
    {
        "type": "view" | "list" | "popup" | "highlight" | "pong" | "keepalive",
        "data": ...
    }
    """
    context = get_context(websocket)
    manager: ConnectionManager = websocket.app.state.connections

    queue = await manager.connect(websocket)
    await websocket.send_json({
        "type": "view",
        "data": context.projector.state().model_dump(),
    })

    async def send_updates():
        while True:
            try:
                message = await asyncio.wait_for(queue.get(), timeout=30.0)
            except asyncio.TimeoutError:
                # Send keepalive
                message = {"type": "keepalive"}
            await websocket.send_json(message)

    async def receive_messages():
        while True:
            msg = await websocket.receive_json()
            if isinstance(msg, dict) and msg.get("type") == "ping":
                queue.put_nowait({"type": "pong"})

    tasks = [asyncio.create_task(send_updates()), asyncio.create_task(receive_messages())]
    try:
        done, _ = await asyncio.wait(tasks, return_when=asyncio.FIRST_COMPLETED)
        for task in done:
            exc = task.exception()
            if exc is not None and not isinstance(exc, WebSocketDisconnect):
                raise exc
    finally:
        for task in tasks:
            task.cancel()
        manager.disconnect(websocket)
