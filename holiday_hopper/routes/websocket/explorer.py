# holiday_hopper/routes/websocket/explorer.py
"""WebSocket handlers for the destination input and exploration."""

import logging

from .base import BaseWebSocketHandler

logger = logging.getLogger(__name__)


class ExplorerHandler(BaseWebSocketHandler):
    """Forwards page events to the client's TripController.

    Every event is a silent no-op when the client has no controller; state
    updates reach the page through the wired callbacks.
    """

    def register_handlers(self):
        """Register exploration event handlers."""

        @self.socketio.on("maps_ready", namespace=self.namespace)
        def handle_maps_ready(data=None):
            """The page finished loading the Maps JavaScript API."""
            controller = self.get_controller()
            if controller is None:
                return
            try:
                if controller.mark_maps_ready():
                    self.log_event("maps_ready")
            except Exception as exc:
                self.handle_error(exc, "maps_ready")

        @self.socketio.on("text_changed", namespace=self.namespace)
        def handle_text_changed(data):
            controller = self.get_controller()
            if controller is None:
                return
            try:
                text = (data or {}).get("text", "")
                controller.text_changed(str(text))
            except Exception as exc:
                self.handle_error(exc, "text_changed")

        @self.socketio.on("suggestion_chosen", namespace=self.namespace)
        def handle_suggestion_chosen(data):
            controller = self.get_controller()
            if controller is None:
                return
            try:
                place_id = (data or {}).get("place_id", "")
                self.log_event("suggestion_chosen", {"place_id": place_id})
                controller.suggestion_chosen(place_id)
            except Exception as exc:
                self.handle_error(exc, "suggestion_chosen")

        @self.socketio.on("dismiss_suggestions", namespace=self.namespace)
        def handle_dismiss_suggestions(data=None):
            controller = self.get_controller()
            if controller is None:
                return
            try:
                controller.dismiss_suggestions()
            except Exception as exc:
                self.handle_error(exc, "dismiss_suggestions")

        @self.socketio.on("submit", namespace=self.namespace)
        def handle_submit(data=None):
            """Explicit "Start Virtual Holiday" with the current or given text."""
            controller = self.get_controller()
            if controller is None:
                return
            try:
                place = (data or {}).get("place") or None
                self.log_event("submit", {"place": place} if place else None)
                controller.explore(place)
            except Exception as exc:
                self.handle_error(exc, "submit")

        @self.socketio.on("surprise_me", namespace=self.namespace)
        def handle_surprise_me(data=None):
            controller = self.get_controller()
            if controller is None:
                return
            try:
                destination = controller.explore_random()
                if destination:
                    self.log_event("surprise_me", {"destination": destination})
            except Exception as exc:
                self.handle_error(exc, "surprise_me")

        @self.socketio.on("reset", namespace=self.namespace)
        def handle_reset(data=None):
            """Start a new trip."""
            controller = self.get_controller()
            if controller is None:
                return
            try:
                controller.reset()
                self.log_event("reset")
            except Exception as exc:
                self.handle_error(exc, "reset")
