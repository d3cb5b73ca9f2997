from __future__ import annotations

import json
import logging
import math
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict

from fastapi import FastAPI, HTTPException, WebSocket, WebSocketDisconnect
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

from .canvas import RecordingCanvas
from .config import AppConfig
from .scene import on_pointer_move

logger = logging.getLogger(__name__)


class SceneController:
    def __init__(self, config: AppConfig):
        self.config = config

    def render(self, x: float, y: float, width: float, height: float) -> Dict[str, Any]:
        if not all(math.isfinite(value) for value in (x, y, width, height)):
            raise ValueError(f"Pointer and surface size must be finite, got ({x}, {y}) on {width}x{height}")
        canvas = RecordingCanvas()
        scene = on_pointer_move((x, y), (width, height), canvas, self.config.scene)
        # huge finite inputs can still overflow in the projection
        for command in canvas.commands:
            if any(isinstance(arg, float) and not math.isfinite(arg) for arg in command[1:]):
                raise ValueError(f"Scene overflowed for pointer ({x}, {y}) on {width}x{height}")
        return {"angle": _json_float(scene.angle), "label": scene.label.text, "commands": canvas.commands}


def _json_float(value: float) -> float | None:
    # JSON has no NaN
    return value if value == value else None


app = FastAPI(title="Vector Projection Demo")
controller = SceneController(AppConfig())
static_dir = Path(__file__).parent / "static"
app.mount("/static", StaticFiles(directory=static_dir), name="static")


@app.get("/")
async def index() -> FileResponse:
    return FileResponse(static_dir / "index.html")


@app.get("/api/config")
async def get_config() -> JSONResponse:
    return JSONResponse(asdict(controller.config))


@app.get("/api/scene")
async def get_scene(x: float, y: float, width: float, height: float) -> JSONResponse:
    try:
        payload = controller.render(x, y, width, height)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return JSONResponse(payload)


@app.websocket("/ws")
async def websocket_endpoint(websocket: WebSocket) -> None:
    await websocket.accept()
    logger.info("Client connected")
    try:
        while True:
            message = await websocket.receive_text()
            try:
                payload = json.loads(message)
            except json.JSONDecodeError:
                continue
            if not isinstance(payload, dict) or payload.get("type") != "pointer":
                await websocket.send_json({"type": "error", "detail": "expected a pointer message"})
                continue
            try:
                scene = controller.render(
                    float(payload["x"]),
                    float(payload["y"]),
                    float(payload["width"]),
                    float(payload["height"]),
                )
            except (KeyError, TypeError, ValueError) as exc:
                await websocket.send_json({"type": "error", "detail": str(exc)})
                continue
            await websocket.send_json({"type": "scene", **scene})
    except WebSocketDisconnect:
        logger.info("Client disconnected")


__all__ = ["app", "controller"]
