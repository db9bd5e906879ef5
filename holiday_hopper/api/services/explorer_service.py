# holiday_hopper/api/services/explorer_service.py
"""Service layer for exploring a destination: geocode, then show it."""

import logging
import random
from typing import Any, Callable, Dict, Optional

from holiday_hopper.api.config import get_explorer_config
from holiday_hopper.api.maps_provider import OK
from holiday_hopper.api.models import (
    ExplorerSession,
    ImmersiveView,
    MapMarker,
    PanoramaView,
    ResolvedPlace,
    SatelliteMapView,
)
from holiday_hopper.api.services.debounce import threading_scheduler

logger = logging.getLogger(__name__)

RANDOM_DESTINATIONS = (
    "Santorini, Greece",
    "Kyoto, Japan",
    "Banff National Park, Canada",
    "Machu Picchu, Peru",
    "Maldives",
    "Swiss Alps, Switzerland",
    "Bora Bora, French Polynesia",
    "Iceland Northern Lights",
    "Tuscany, Italy",
    "Great Barrier Reef, Australia",
)


def _noop(*_args):
    return None


class ExplorerService:
    """Resolves destinations and renders the immersive view for one session.

    Overlapping ``explore`` calls are not serialised: whichever geocode answer
    arrives last decides what the session ends up showing.
    """

    def __init__(self, session: ExplorerSession, provider,
                 config: Optional[Dict[str, Any]] = None,
                 scheduler: Callable[..., Any] = threading_scheduler,
                 on_change: Callable[[], None] = _noop,
                 on_render: Callable[[Optional[ImmersiveView]], None] = _noop,
                 chooser: Callable = random.choice):
        self.session = session
        self.provider = provider
        self.config = config or get_explorer_config()
        self.scheduler = scheduler
        self.on_change = on_change
        self.on_render = on_render
        self.chooser = chooser

    @property
    def ready(self) -> bool:
        return self.provider is not None and self.session.maps_ready

    def explore(self, place: Optional[str] = None) -> Optional[ResolvedPlace]:
        """Geocode ``place`` (or the text field) and show it.

        Returns the resolved place, or None when nothing changed.
        """
        search_place = place or self.session.destination
        if not search_place.strip() or not self.ready:
            return None

        self.session.is_loading = True
        self.on_change()
        try:
            status, resolved = self.provider.geocode(search_place)
            if status != OK or resolved is None:
                logger.info(f"Geocoding '{search_place}' returned {status}; keeping current state")
                return None

            self.session.current_location = resolved
            self.session.visited_places.append(resolved.address)
            self.session.trip_active = True
            logger.info(f"Exploring {resolved.address} ({resolved.lat}, {resolved.lng})")
            self.on_change()

            self._render(resolved)
            return resolved
        finally:
            self.session.is_loading = False
            self.on_change()

    def _render(self, place: ResolvedPlace) -> ImmersiveView:
        """Show a panorama when one exists nearby, otherwise a satellite map."""
        status = self.provider.lookup_panorama(
            place.lat, place.lng, self.config["streetview_radius"]
        )
        if status == OK:
            pov = self.config["panorama_pov"]
            view = PanoramaView(
                lat=place.lat,
                lng=place.lng,
                heading=pov["heading"],
                pitch=pov["pitch"],
                zoom=self.config["panorama_zoom"],
            )
        else:
            view = SatelliteMapView(
                lat=place.lat,
                lng=place.lng,
                marker=MapMarker(lat=place.lat, lng=place.lng, title=place.address),
                zoom=self.config["map_zoom"],
            )
        self.session.view = view
        self.on_render(view)
        return view

    def explore_random(self) -> Optional[str]:
        """Pick a curated destination, fill the text field, explore shortly after."""
        if not self.ready:
            return None
        destination = self.chooser(RANDOM_DESTINATIONS)
        self.session.destination = destination
        self.on_change()
        logger.info(f"Surprise destination: {destination}")
        self.scheduler(self.config["random_delay_seconds"], self.explore)
        return destination

    def reset(self) -> None:
        """Start a brand new trip with no memory of this one."""
        self.session.trip_active = False
        self.session.destination = ""
        self.session.current_location = None
        self.session.visited_places.clear()
        self.session.suggestions = []
        self.session.show_suggestions = False
        self.session.view = None
        self.on_render(None)
        self.on_change()


__all__ = ["ExplorerService", "RANDOM_DESTINATIONS"]
