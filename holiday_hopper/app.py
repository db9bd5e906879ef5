"""Flask + Socket.IO application factory."""

import os
import logging

from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO

from holiday_hopper.api.config import get_websocket_config, validate_maps_config
from holiday_hopper.api.session_manager import ControllerRegistry, get_registry
from holiday_hopper.routes import NAMESPACE
from holiday_hopper.routes.holiday import create_holiday_blueprint
from holiday_hopper.routes.websocket import register_websocket_handlers

logger = logging.getLogger(__name__)

BASE_DIR = os.path.dirname(os.path.abspath(__file__))


def create_app(registry: ControllerRegistry = None):
    """Build the Flask app and its Socket.IO server.

    Returns:
        (app, socketio) tuple
    """
    app = Flask(__name__)

    flask_secret_key = os.getenv("FLASK_SECRET_KEY") or os.urandom(32).hex()
    if "FLASK_SECRET_KEY" not in os.environ:
        logger.warning("No FLASK_SECRET_KEY found. Generated a temporary key.")
    app.secret_key = flask_secret_key

    try:
        validate_maps_config()
    except ValueError as e:
        # Fatal, but the page still has to come up to say so.
        logger.error(f"Google Maps is not configured: {e}")

    CORS(app, origins="*", supports_credentials=True)

    ws_config = get_websocket_config()
    socketio = SocketIO(
        app,
        cors_allowed_origins=ws_config["cors_allowed_origins"],
        ping_interval=ws_config["ping_interval"],
        ping_timeout=ws_config["ping_timeout"],
        async_mode="threading",
        logger=False,
        engineio_logger=False,
    )
    logger.info("Socket.IO initialised (async_mode=threading)")

    registry = registry or get_registry()

    app.register_blueprint(create_holiday_blueprint(BASE_DIR))
    register_websocket_handlers(socketio, registry)

    @app.route("/debug")
    def debug():
        """Simple JSON diagnostics endpoint."""
        return {
            "status": "ok",
            "maps_configured": registry.provider_getter() is not None,
            "websocket_namespace": NAMESPACE,
            "sessions": registry.get_stats(),
        }

    return app, socketio


__all__ = ["create_app"]
