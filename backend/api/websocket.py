"""
WebSocket Handler

Live capture sessions via WebSocket connection.
The capture client streams one message per swing and receives the
swing's analysis plus a freshly recomputed session summary.
"""

import json
import time
import logging
from typing import Optional
from fastapi import WebSocket, WebSocketDisconnect
from pydantic import ValidationError

import config
from core.domain import AgeGroup, CBSwingAnalysis
from core.services import SwingAnalyzer

from .converters import convert_analysis, convert_summary, to_features
from .schemas import SwingFeaturesSchema, WebSocketMessageType

# Configure logging
logger = logging.getLogger(__name__)


def _now_ms() -> int:
    return int(time.time() * 1000)


class ConnectionManager:
    """
    Manages WebSocket connections.

    Each connection owns its own list of analysed swings; nothing is
    shared between connections.
    """

    def __init__(self):
        self.active_connections: list[WebSocket] = []
        self.session_swings: dict[WebSocket, list[CBSwingAnalysis]] = {}
        self.age_groups: dict[WebSocket, AgeGroup] = {}

    async def connect(self, websocket: WebSocket, age_group: AgeGroup) -> None:
        """Accept new WebSocket connection."""
        await websocket.accept()
        self.active_connections.append(websocket)
        self.session_swings[websocket] = []
        self.age_groups[websocket] = age_group

        logger.info(f"New WebSocket connection. Total: {len(self.active_connections)}")

    def disconnect(self, websocket: WebSocket) -> None:
        """Handle WebSocket disconnection."""
        if websocket in self.active_connections:
            self.active_connections.remove(websocket)
        self.session_swings.pop(websocket, None)
        self.age_groups.pop(websocket, None)

        logger.info(f"WebSocket disconnected. Remaining: {len(self.active_connections)}")

    def get_swings(self, websocket: WebSocket) -> list[CBSwingAnalysis]:
        """Swings analysed so far on a connection."""
        return self.session_swings.get(websocket, [])

    def get_age_group(self, websocket: WebSocket) -> Optional[AgeGroup]:
        return self.age_groups.get(websocket)

    async def send_json(self, websocket: WebSocket, data: dict) -> None:
        """Send JSON data to a specific connection."""
        try:
            await websocket.send_json(data)
        except (WebSocketDisconnect, RuntimeError) as e:
            logger.error(f"Failed to send WebSocket message: {e}")

    async def send_error(self, websocket: WebSocket, error: str) -> None:
        await self.send_json(websocket, {
            "type": WebSocketMessageType.ERROR.value,
            "data": {"error": error},
            "timestamp": _now_ms()
        })


# Global connection manager
manager = ConnectionManager()


async def websocket_endpoint(websocket: WebSocket) -> None:
    """
    WebSocket endpoint for live capture sessions.

    Protocol:
    1. Client connects (optional ?age_group=HS query parameter)
    2. Client sends one 'swing' message per swing
    3. Server responds with 'swing_result' and 'session_summary'
    4. Client sends 'end_session' to get the final summary

    Message format (client -> server):
    {
        "type": "swing",
        "data": {"bat_speed_mph": 68.2, "trigger_to_impact_ms": 152},
        "timestamp": 1704067200000
    }

    Message format (server -> client):
    {
        "type": "session_summary",
        "data": {"summary": { ... }},
        "timestamp": 1704067200025
    }
    """
    label = websocket.query_params.get("age_group") or config.DEFAULT_AGE_GROUP
    try:
        age_group = AgeGroup.parse(label)
    except ValueError:
        age_group = AgeGroup.parse(config.DEFAULT_AGE_GROUP)
        logger.warning(f"Unknown age group {label!r}, using {age_group.value}")

    await manager.connect(websocket, age_group)
    analyzer: SwingAnalyzer = websocket.app.state.analyzer

    try:
        # Send session started message
        await manager.send_json(websocket, {
            "type": WebSocketMessageType.SESSION_STARTED.value,
            "data": {
                "message": f"Connected to {config.APP_NAME} live session",
                "age_group": age_group.value
            },
            "timestamp": _now_ms()
        })

        # Main message loop
        while True:
            try:
                # Receive message from client
                data = await websocket.receive_json()

                if not isinstance(data, dict):
                    await manager.send_error(websocket, "Message must be a JSON object")
                    continue

                # Process based on message type
                msg_type = data.get("type")

                if msg_type == WebSocketMessageType.SWING.value:
                    await handle_swing(websocket, analyzer, data)

                elif msg_type == WebSocketMessageType.END_SESSION.value:
                    summary = analyzer.summarize(
                        manager.get_swings(websocket), manager.get_age_group(websocket)
                    )
                    await manager.send_json(websocket, {
                        "type": WebSocketMessageType.SESSION_ENDED.value,
                        "data": {
                            "message": "Session ended",
                            "summary": convert_summary(summary).model_dump(mode="json")
                        },
                        "timestamp": _now_ms()
                    })
                    break

                else:
                    await manager.send_error(websocket, f"Unknown message type: {msg_type}")

            except json.JSONDecodeError:
                await manager.send_error(websocket, "Invalid JSON")

    except WebSocketDisconnect:
        logger.info("Client disconnected")
    except Exception as e:
        logger.error(f"WebSocket error: {e}")
    finally:
        manager.disconnect(websocket)


async def handle_swing(websocket: WebSocket, analyzer: SwingAnalyzer, message: dict) -> None:
    """
    Analyze one swing and push the result plus a full summary recompute.
    """
    start_time = time.time()

    try:
        features = SwingFeaturesSchema.model_validate(message.get("data") or {})
    except ValidationError as e:
        await manager.send_error(websocket, f"Invalid swing data: {e.errors()[0]['msg']}")
        return

    age_group = manager.get_age_group(websocket)
    swings = manager.get_swings(websocket)

    analysis = analyzer.analyze(to_features(features), age_group)
    swings.append(analysis)
    summary = analyzer.summarize(swings, age_group)

    processing_time = (time.time() - start_time) * 1000

    await manager.send_json(websocket, {
        "type": WebSocketMessageType.SWING_RESULT.value,
        "data": {
            "swing_number": len(swings),
            "analysis": convert_analysis(analysis).model_dump(mode="json"),
            "processing_time_ms": processing_time
        },
        "timestamp": _now_ms()
    })
    await manager.send_json(websocket, {
        "type": WebSocketMessageType.SESSION_SUMMARY.value,
        "data": {"summary": convert_summary(summary).model_dump(mode="json")},
        "timestamp": _now_ms()
    })
