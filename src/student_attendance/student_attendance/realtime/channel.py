"""Socket.IO channel used to tell dashboards that attendance changed."""
from __future__ import annotations

import logging

from flask import request
from flask_socketio import SocketIO

from ..attendance.events import EventPublisher, RealtimeEvent

logger = logging.getLogger(__name__)

# Global Socket.IO instance, bound to the app in create_app().
socketio = SocketIO()


@socketio.on("connect")
def _on_connect():
    logger.info("Client connected: %s", request.sid)


@socketio.on("disconnect")
def _on_disconnect(*args):
    logger.info("Client disconnected: %s", request.sid)


class SocketIOEventPublisher(EventPublisher):
    """Broadcasts bare events to every connected client (best-effort)."""

    def __init__(self, server: SocketIO):
        self._server = server

    def publish(self, event: RealtimeEvent) -> None:
        try:
            self._server.emit(event.name)
        except Exception as e:
            # Delivery is best-effort; the write already succeeded.
            logger.warning("Broadcast of %s failed: %s", event.name, e)
