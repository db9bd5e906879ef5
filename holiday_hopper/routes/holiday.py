# holiday_hopper/routes/holiday.py
"""Page routes and blueprint configuration."""

import os
from flask import Blueprint, render_template, jsonify

from holiday_hopper.api.config import get_google_maps_config
from holiday_hopper.routes import NAMESPACE


def create_holiday_blueprint(base_dir):
    """Create and configure the holiday blueprint.

    Args:
        base_dir: Absolute path to the package directory

    Returns:
        Configured Flask Blueprint
    """
    holiday_bp = Blueprint(
        "holiday",
        __name__,
        template_folder=os.path.join(base_dir, 'templates'),
    )

    @holiday_bp.route("/")
    def index():
        """Explorer page, or the fatal configuration message."""
        if not get_google_maps_config().get("api_key"):
            return render_template("missing_key.html"), 500
        return render_template("explorer.html", namespace=NAMESPACE)

    @holiday_bp.route("/api/config")
    def api_config():
        """Return Google Maps configuration for the page's script loader."""
        config = get_google_maps_config()

        if config.get("api_key"):
            return jsonify({
                "auth_type": "api_key",
                "google_maps_api_key": config["api_key"],
                "libraries": "geometry,places",
                "namespace": NAMESPACE,
            })
        else:
            return jsonify({
                "error": "No Google Maps API key configured"
            }), 500

    @holiday_bp.route("/health")
    def health():
        """Health check endpoint."""
        return jsonify({"status": "ok", "service": "holiday-hopper"})

    return holiday_bp


__all__ = ['create_holiday_blueprint']
