# holiday_hopper/routes/websocket/connection.py
"""WebSocket connection and disconnection handlers."""

import time
import logging
from flask import request
from flask_socketio import ConnectionRefusedError

from .base import BaseWebSocketHandler
from .callback_helpers import wire_controller_callbacks

logger = logging.getLogger(__name__)


class ConnectionHandler(BaseWebSocketHandler):
    """Handles WebSocket connection lifecycle events."""

    def register_handlers(self):
        """Register connection-related event handlers."""

        @self.socketio.on('connect', namespace=self.namespace)
        def handle_connect(auth=None):
            """Create a fresh trip for the connecting browser tab."""
            sid = request.sid
            self.log_event('connect')

            if self.registry.provider_getter() is None:
                # Fatal: no controller is created, so every later event is a no-op.
                logger.error("❌ Google Maps is not configured; client gets config_error only")
                self.emit_to_client('config_error', {
                    'message': 'Missing Google Maps API key. Set GOOGLE_MAPS_API_KEY and reload.',
                })
                return

            controller = self.registry.create(sid)
            if controller is None:
                logger.error("❌ Refusing connection: server at capacity")
                raise ConnectionRefusedError("Server at capacity")

            wire_controller_callbacks(self.socketio, controller, sid, self.namespace)
            logger.info(f"🔗 Client connected to {self.namespace}: {sid}")

            self.emit_to_client('connected', {
                'session_id': sid,
                'status': 'connected',
            })
            self.emit_to_client('state', controller.snapshot())

        @self.socketio.on('disconnect', namespace=self.namespace)
        def handle_disconnect(*args):
            """Forget the trip; session history does not outlive the page."""
            try:
                self.registry.remove(request.sid)
                self.log_event('disconnect')
            except Exception as e:
                logger.error(f"Disconnect cleanup failed: {e}")

        @self.socketio.on('ping', namespace=self.namespace)
        def handle_ping():
            """Handle ping for connection testing."""
            self.emit_to_client('pong', {'timestamp': time.time()})
