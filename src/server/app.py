from __future__ import annotations

import asyncio
import contextlib
import json
from typing import Optional, Set

from fastapi import FastAPI, HTTPException, WebSocket, WebSocketDisconnect
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from control import ElevatorController, build_controller
from lift import BuildingConfig, ElevatorError, ErrorKind

ERROR_STATUS_CODES = {
    ErrorKind.INVALID_ARGUMENT: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.INVALID_OPERATION: 409,
}


class ElevatorRequest(BaseModel):
    floor: int
    count: int = 0
    direction: str = "Up"


class UnloadRequest(BaseModel):
    amount: int


class DispatchManager:
    """Serializes every request against one controller."""

    def __init__(self, config: Optional[BuildingConfig] = None) -> None:
        self.controller: ElevatorController = build_controller(config)
        self.clients: Set[WebSocket] = set()
        # dispatch + move + load on an elevator must not interleave
        self._lock = asyncio.Lock()

    async def broadcast(self, payload: dict) -> None:
        message = json.dumps(payload)
        disconnected: Set[WebSocket] = set()
        for client in set(self.clients):
            try:
                await client.send_text(message)
            except WebSocketDisconnect:
                disconnected.add(client)
        for client in disconnected:
            await self.unregister(client)

    async def register(self, websocket: WebSocket) -> None:
        await websocket.accept()
        self.clients.add(websocket)
        await websocket.send_text(json.dumps(self.current_state()))

    async def unregister(self, websocket: WebSocket) -> None:
        if websocket in self.clients:
            self.clients.remove(websocket)
        with contextlib.suppress(Exception):
            await websocket.close()

    def current_state(self) -> dict:
        return {"building": self.controller.building.snapshot()}

    async def request_elevator(self, floor: int, count: int, direction: str) -> dict:
        async with self._lock:
            elevator = self.controller.request_elevator(floor, count, direction)
            result = {"elevator_id": elevator.elevator_id, "status": elevator.get_status().to_dict()}
            state = self.current_state()
        await self.broadcast(state)
        return result

    async def release_load(self, elevator_id: int, amount: int) -> dict:
        async with self._lock:
            status = self.controller.release_load(elevator_id, amount)
            state = self.current_state()
        await self.broadcast(state)
        return status.to_dict()

    def elevator_status(self, elevator_id: int) -> dict:
        return self.controller.get_elevator_status(elevator_id).to_dict()


def _http_error(exc: ElevatorError) -> HTTPException:
    return HTTPException(status_code=ERROR_STATUS_CODES[exc.kind], detail={"kind": exc.kind.value, "message": exc.message})


def create_app(config: Optional[BuildingConfig] = None) -> FastAPI:
    manager = DispatchManager(config)
    app = FastAPI(title="Elevator Dispatch API")
    app.state.manager = manager
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/state")
    async def get_state() -> dict:
        return manager.current_state()

    @app.post("/requests")
    async def request_elevator(request: ElevatorRequest) -> dict:
        try:
            return await manager.request_elevator(request.floor, request.count, request.direction)
        except ElevatorError as exc:
            raise _http_error(exc)

    @app.get("/elevators/{elevator_id}/status")
    async def elevator_status(elevator_id: int) -> dict:
        try:
            return manager.elevator_status(elevator_id)
        except ElevatorError as exc:
            raise _http_error(exc)

    @app.post("/elevators/{elevator_id}/unload")
    async def unload(elevator_id: int, request: UnloadRequest) -> dict:
        try:
            return await manager.release_load(elevator_id, request.amount)
        except ElevatorError as exc:
            raise _http_error(exc)

    @app.websocket("/ws/stream")
    async def websocket_endpoint(websocket: WebSocket) -> None:
        await manager.register(websocket)
        try:
            while True:
                await websocket.receive_text()
        except WebSocketDisconnect:
            await manager.unregister(websocket)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("server.app:app", host="0.0.0.0", port=8000, reload=False)
