"""Viewer page and the WebSocket it listens on for reloads."""
from fastapi import APIRouter, Request, WebSocket
from fastapi.responses import HTMLResponse

router = APIRouter(tags=["viewer"])


@router.get("/", response_class=HTMLResponse)
async def viewer(request: Request):
    return HTMLResponse(request.app.state.viewer_html)


@router.websocket("/ws")
async def reload_channel(websocket: WebSocket):
    """Push-only channel: the server sends {"type": "reload"}, anything the client sends is ignored."""
    connections = websocket.app.state.connections
    await connections.connect(websocket)
    try:
        while True:
            message = await websocket.receive()
            if message["type"] == "websocket.disconnect":
                break
    finally:
        connections.disconnect(websocket)
