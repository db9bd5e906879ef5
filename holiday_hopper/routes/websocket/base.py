# holiday_hopper/routes/websocket/base.py
"""Shared plumbing for the explorer's Socket.IO handlers."""

import logging
from flask import request
from flask_socketio import emit

from holiday_hopper.routes import NAMESPACE

logger = logging.getLogger(__name__)


class BaseWebSocketHandler:
    """Gives handlers access to the calling client's TripController."""

    def __init__(self, socketio, registry, namespace=NAMESPACE):
        self.socketio = socketio
        self.registry = registry
        self.namespace = namespace

    def emit_to_client(self, event, data):
        """Reply to the client whose event is being handled."""
        try:
            emit(event, data, namespace=self.namespace)
        except Exception as e:
            logger.error(f"Failed to emit {event}: {e}")

    def get_controller(self):
        """Controller for the calling client, or None when it has none."""
        return self.registry.get(request.sid)

    def log_event(self, event_name, data=None):
        if data:
            logger.info(f"[WS] {event_name} - Client: {request.sid}, Data: {data}")
        else:
            logger.info(f"[WS] {event_name} - Client: {request.sid}")

    def handle_error(self, error, event_name=""):
        """Log an unexpected handler failure and tell the page about it."""
        logger.error(f"[WS] Error in {event_name} - Client: {request.sid}, Error: {error}")
        self.emit_to_client('error', {'message': str(error), 'event': event_name})
