from typing import Set

from fastapi import WebSocket, WebSocketDisconnect

from matrix_reloaded.core.logfire_config import log_info, log_warning


class ConnectionStore:
    """Open viewer WebSockets that receive reload notifications."""

    def __init__(self):
        self._connections: Set[WebSocket] = set()

    def __len__(self) -> int:
        return len(self._connections)

    async def connect(self, websocket: WebSocket) -> None:
        # Registered before accept so a client that sees the handshake is already subscribed
        self._connections.add(websocket)
        await websocket.accept()
        log_info("Viewer connected", connections=len(self._connections))

    def disconnect(self, websocket: WebSocket) -> None:
        if websocket in self._connections:
            self._connections.discard(websocket)
            log_info("Viewer disconnected", connections=len(self._connections))

    async def broadcast(self, message: dict) -> int:
        """
        Send a JSON message to every open connection.
        Returns the number of successful sends; connections that fail are dropped.
        """
        successful_sends = 0
        dead_connections = []

        # Snapshot, connects and disconnects may interleave with the sends below
        for websocket in list(self._connections):
            try:
                await websocket.send_json(message)
                successful_sends += 1
            except (WebSocketDisconnect, OSError, RuntimeError) as e:
                log_warning("Dropping viewer connection", error=str(e))
                dead_connections.append(websocket)

        for websocket in dead_connections:
            self.disconnect(websocket)

        return successful_sends
