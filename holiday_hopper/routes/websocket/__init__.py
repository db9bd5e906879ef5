# holiday_hopper/routes/websocket/__init__.py
"""WebSocket route handlers initialization."""

import logging

from holiday_hopper.routes import NAMESPACE
from .connection import ConnectionHandler
from .explorer import ExplorerHandler

logger = logging.getLogger(__name__)


def register_websocket_handlers(socketio, registry):
    """Register all WebSocket event handlers with SocketIO.

    Args:
        socketio: Flask-SocketIO instance
        registry: ControllerRegistry holding one TripController per client
    """
    logger.info("Registering WebSocket handlers...")

    try:
        connection_handler = ConnectionHandler(socketio, registry, NAMESPACE)
        explorer_handler = ExplorerHandler(socketio, registry, NAMESPACE)

        logger.info(f"Registering connection handler for namespace: {NAMESPACE}")
        connection_handler.register_handlers()

        logger.info(f"Registering explorer handler for namespace: {NAMESPACE}")
        explorer_handler.register_handlers()

        logger.info("✅ WebSocket handlers registered successfully")

    except Exception as e:
        logger.error(f"❌ Failed to register WebSocket handlers: {e}")
        logger.exception("WebSocket registration error:")
        raise


__all__ = ['register_websocket_handlers', 'NAMESPACE']
