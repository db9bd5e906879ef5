# holiday_hopper/routes/websocket/callback_helpers.py
"""Helper functions for wiring controller callbacks to Socket.IO events."""

import logging

from holiday_hopper.routes import NAMESPACE

logger = logging.getLogger(__name__)


def wire_controller_callbacks(socketio, controller, sid: str, namespace: str = NAMESPACE) -> None:
    """Bridge TripController callbacks to Socket.IO events for one client.

    Callbacks may fire from timer threads (debounce, "surprise me"), so they
    always address the client by room rather than relying on request context.
    """

    # -- state ----------------------------------------------------------------
    def _on_state_change(snapshot: dict) -> None:
        try:
            socketio.emit("state", snapshot, room=sid, namespace=namespace)
        except Exception as exc:
            logger.exception("Failed emitting state: %s", exc)

    # -- view -----------------------------------------------------------------
    def _on_render(view) -> None:
        payload = view.to_dict() if view is not None else {"kind": "none"}
        try:
            socketio.emit("render_view", payload, room=sid, namespace=namespace)
            logger.debug("Rendered %s for %s", payload["kind"], sid)
        except Exception as exc:
            logger.exception("Failed emitting render_view: %s", exc)

    controller.on_state_change = _on_state_change
    controller.on_render = _on_render
