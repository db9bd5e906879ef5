# api/config.py
"""Configuration management for the holiday explorer."""
import os
from dotenv import load_dotenv

load_dotenv()


def get_google_maps_config():
    """Get Google Maps configuration."""
    return {
        "api_key": os.getenv("GOOGLE_MAPS_API_KEY", ""),
        "request_timeout": float(os.getenv("REQUEST_TIMEOUT_SECONDS", "10")),
    }


def get_google_maps_api_key():
    return os.getenv("GOOGLE_MAPS_API_KEY", "")


def get_port():
    """Get port configuration."""
    return int(os.getenv("PORT", 5000))


def get_explorer_config():
    """Get exploration workflow configuration."""
    return {
        # Input controller
        "debounce_seconds": float(os.getenv("EXPLORER_DEBOUNCE_SECONDS", "1.0")),
        "suggestion_limit": int(os.getenv("SUGGESTION_LIMIT", "5")),
        "suggestion_min_length": 2,
        "auto_explore_min_length": 3,

        # "Surprise me" lets the text field render before exploring
        "random_delay_seconds": float(os.getenv("EXPLORER_RANDOM_DELAY_SECONDS", "0.1")),

        # Street View lookup and rendering
        "streetview_radius": int(os.getenv("STREETVIEW_RADIUS_METERS", "50")),
        "panorama_pov": {"heading": 34, "pitch": 10},
        "panorama_zoom": 1,
        "map_zoom": int(os.getenv("MAP_ZOOM", "15")),
    }


def get_websocket_config():
    """Get WebSocket configuration."""
    return {
        "ping_interval": int(os.getenv("WEBSOCKET_PING_INTERVAL", "25")),
        "ping_timeout": int(os.getenv("WEBSOCKET_PING_TIMEOUT", "60")),
        "cors_allowed_origins": os.getenv("WEBSOCKET_CORS_ORIGINS", "*").split(",")
    }


def validate_maps_config():
    """Validate that Google Maps is configured.

    A missing key is fatal: the page shows a static message and nothing else.
    """
    if not get_google_maps_api_key():
        raise ValueError("GOOGLE_MAPS_API_KEY not set")
    return True
