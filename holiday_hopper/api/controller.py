# holiday_hopper/api/controller.py
"""Top-level controller for one browser session."""

import logging
import random
from datetime import datetime
from typing import Any, Callable, Dict, Optional

from holiday_hopper.api.config import get_explorer_config
from holiday_hopper.api.models import ExplorerSession, ImmersiveView
from holiday_hopper.api.services.debounce import threading_scheduler
from holiday_hopper.api.services.explorer_service import ExplorerService
from holiday_hopper.api.services.input_controller import InputController

logger = logging.getLogger(__name__)


class TripController:
    """Owns the explorer session and the two handlers that mutate it.

    Listeners are plain attributes so the transport layer can wire them
    after construction:

    * ``on_state_change(snapshot: dict)`` after every state mutation
    * ``on_render(view: ImmersiveView | None)`` whenever the view is replaced
      or released
    """

    def __init__(self, provider, config: Optional[Dict[str, Any]] = None,
                 scheduler: Callable[..., Any] = threading_scheduler,
                 chooser: Callable = random.choice):
        self.provider = provider
        self.config = config or get_explorer_config()
        self.session = ExplorerSession()
        self.created_at = datetime.now()
        self.last_activity = datetime.now()

        self.on_state_change: Optional[Callable[[dict], None]] = None
        self.on_render: Optional[Callable[[Optional[ImmersiveView]], None]] = None

        self.explorer = ExplorerService(
            self.session,
            provider,
            config=self.config,
            scheduler=scheduler,
            on_change=self._state_changed,
            on_render=self._view_rendered,
            chooser=chooser,
        )
        self.input = InputController(
            self.session,
            provider,
            self.explorer,
            config=self.config,
            scheduler=scheduler,
            on_change=self._state_changed,
        )

    def _state_changed(self) -> None:
        self.last_activity = datetime.now()
        if self.on_state_change is not None:
            self.on_state_change(self.snapshot())

    def _view_rendered(self, view: Optional[ImmersiveView]) -> None:
        if self.on_render is not None:
            self.on_render(view)

    def mark_maps_ready(self) -> bool:
        """Record that the page finished loading the Maps script."""
        if self.provider is None:
            logger.warning("Maps reported ready but no provider is configured")
            return False
        if not self.session.maps_ready:
            self.session.maps_ready = True
            self._state_changed()
        return True

    def text_changed(self, text: str) -> None:
        self.input.on_text_changed(text)

    def suggestion_chosen(self, place_id: str):
        return self.input.on_suggestion_chosen(place_id)

    def dismiss_suggestions(self) -> None:
        self.input.dismiss_suggestions()

    def explore(self, place: Optional[str] = None):
        return self.explorer.explore(place)

    def explore_random(self):
        return self.explorer.explore_random()

    def reset(self) -> None:
        self.explorer.reset()

    def snapshot(self) -> dict:
        return self.session.snapshot()

    def close(self) -> None:
        """Drop listeners and any pending debounced lookup."""
        self.input.debouncer.cancel()
        self.on_state_change = None
        self.on_render = None


__all__ = ["TripController"]
