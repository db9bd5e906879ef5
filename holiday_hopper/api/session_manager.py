# holiday_hopper/api/session_manager.py
"""Lifecycle management for per-client trip controllers."""

import logging
import os
import threading
from datetime import datetime
from typing import Any, Callable, Dict, Optional

from holiday_hopper.api.controller import TripController
from holiday_hopper.api.maps_provider import get_maps_provider

logger = logging.getLogger(__name__)


class ControllerRegistry:
    """Maps Socket.IO session ids to their TripController.

    State is in memory only; a page reload is a new sid and a new trip.
    """

    def __init__(self, provider_getter: Callable[[], Any] = get_maps_provider,
                 controller_factory: Callable[..., TripController] = TripController,
                 max_sessions: Optional[int] = None):
        self.provider_getter = provider_getter
        self.controller_factory = controller_factory
        self.max_sessions = max_sessions or int(os.getenv("EXPLORER_MAX_SESSIONS", "200"))
        self.controllers: Dict[str, TripController] = {}
        self.lock = threading.Lock()

    def create(self, sid: str) -> Optional[TripController]:
        """Create (or reuse) the controller for ``sid``.

        Returns None when the server is at capacity.
        """
        with self.lock:
            existing = self.controllers.get(sid)
            if existing is not None:
                return existing

            if len(self.controllers) >= self.max_sessions:
                logger.warning("Maximum concurrent explorer sessions reached")
                return None

            controller = self.controller_factory(self.provider_getter())
            self.controllers[sid] = controller
            logger.info(f"Created explorer session for {sid}")
            return controller

    def get(self, sid: str) -> Optional[TripController]:
        with self.lock:
            return self.controllers.get(sid)

    def remove(self, sid: str) -> None:
        with self.lock:
            controller = self.controllers.pop(sid, None)
        if controller is None:
            return
        controller.close()
        duration = (datetime.now() - controller.created_at).total_seconds()
        logger.info(
            f"Removed explorer session {sid} - "
            f"Duration: {duration:.1f}s, Visited: {controller.session.visited_count}"
        )

    def get_stats(self) -> Dict[str, Any]:
        """Overall registry statistics."""
        with self.lock:
            controllers = list(self.controllers.values())
        return {
            "total_sessions": len(controllers),
            "active_trips": sum(1 for c in controllers if c.session.trip_active),
            "total_places_visited": sum(c.session.visited_count for c in controllers),
            "max_sessions": self.max_sessions,
        }


_registry = None


def get_registry() -> ControllerRegistry:
    """Get the global ControllerRegistry instance."""
    global _registry
    if _registry is None:
        _registry = ControllerRegistry()
    return _registry


__all__ = ["ControllerRegistry", "get_registry"]
