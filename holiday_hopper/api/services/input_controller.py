# holiday_hopper/api/services/input_controller.py
"""Destination text field: suggestions, debounced lookup and selection."""

import logging
from typing import Any, Callable, Dict, Optional

from holiday_hopper.api.config import get_explorer_config
from holiday_hopper.api.maps_provider import OK
from holiday_hopper.api.models import ExplorerSession, PlaceSuggestion
from holiday_hopper.api.services.debounce import Debouncer, threading_scheduler
from holiday_hopper.api.services.explorer_service import ExplorerService

logger = logging.getLogger(__name__)


def _noop(*_args):
    return None


class InputController:
    """Owns the text field and the suggestion list of one session.

    Two independent paths hang off every keystroke: an immediate city
    autocomplete, and a trailing debounce that explores the text once typing
    pauses.
    """

    def __init__(self, session: ExplorerSession, provider, explorer: ExplorerService,
                 config: Optional[Dict[str, Any]] = None,
                 scheduler: Callable[..., Any] = threading_scheduler,
                 on_change: Callable[[], None] = _noop):
        self.session = session
        self.provider = provider
        self.explorer = explorer
        self.config = config or get_explorer_config()
        self.on_change = on_change
        self.debouncer = Debouncer(
            self._debounced_search, self.config["debounce_seconds"], scheduler=scheduler
        )

    @property
    def ready(self) -> bool:
        return self.provider is not None and self.session.maps_ready

    def on_text_changed(self, text: str) -> None:
        """Handle a keystroke in the destination field."""
        if not self.ready:
            # Text entry stays disabled until Maps has loaded.
            return
        self.session.destination = text
        self._update_suggestions(text)
        self.on_change()
        self.debouncer(text)

    def _update_suggestions(self, text: str) -> None:
        if len(text) < self.config["suggestion_min_length"]:
            self._clear_suggestions()
            return

        status, suggestions = self.provider.autocomplete_cities(text)
        if status == OK and suggestions:
            self.session.suggestions = suggestions[: self.config["suggestion_limit"]]
            self.session.show_suggestions = True
        else:
            self._clear_suggestions()

    def _clear_suggestions(self) -> None:
        self.session.suggestions = []
        self.session.show_suggestions = False

    def _debounced_search(self, query: str) -> None:
        if len(query) >= self.config["auto_explore_min_length"] and self.ready:
            logger.debug(f"Debounced exploration for '{query}'")
            self.explorer.explore(query)

    def on_suggestion_chosen(self, place_id: str) -> Optional[PlaceSuggestion]:
        """Fill the field with the chosen suggestion and explore it right away."""
        suggestion = next(
            (s for s in self.session.suggestions if s.place_id == place_id), None
        )
        if suggestion is None:
            logger.warning(f"Ignoring unknown suggestion id: {place_id}")
            return None

        self.session.destination = suggestion.description
        self.session.show_suggestions = False
        self.on_change()
        self.explorer.explore(suggestion.description)
        return suggestion

    def dismiss_suggestions(self) -> None:
        """Click outside the list: hide it, keep the text."""
        if self.session.show_suggestions:
            self.session.show_suggestions = False
            self.on_change()


__all__ = ["InputController"]
