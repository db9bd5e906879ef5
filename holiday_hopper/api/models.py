"""Shared data structures for destination exploration.

The explorer session is a single explicit state object owned by the trip
controller and passed by reference to the input controller and the
exploration service, which are the only two things that mutate it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Union


def short_place_name(address: str) -> str:
    """Text before the first comma, as shown on badges and stats."""
    return address.split(",")[0]


@dataclass(frozen=True)
class PlaceSuggestion:
    """One autocomplete prediction."""

    place_id: str
    main_text: str  # e.g. "Paris"
    secondary_text: str  # e.g. "France"
    description: str  # full label, e.g. "Paris, France"

    def to_dict(self) -> dict:
        return {
            "place_id": self.place_id,
            "main_text": self.main_text,
            "secondary_text": self.secondary_text,
            "description": self.description,
        }


@dataclass(frozen=True)
class ResolvedPlace:
    """A geocoded destination: canonical address plus coordinate."""

    address: str
    lat: float
    lng: float

    @property
    def short_name(self) -> str:
        return short_place_name(self.address)

    def to_dict(self) -> dict:
        return {
            "address": self.address,
            "lat": self.lat,
            "lng": self.lng,
        }


@dataclass(frozen=True)
class PanoramaView:
    """Street View panorama centred on a coordinate."""

    lat: float
    lng: float
    heading: float = 34
    pitch: float = 10
    zoom: int = 1

    kind = "panorama"

    def to_dict(self) -> dict:
        return {
            "kind": self.kind,
            "position": {"lat": self.lat, "lng": self.lng},
            "pov": {"heading": self.heading, "pitch": self.pitch},
            "zoom": self.zoom,
            "addressControl": False,
            "linksControl": True,
            "panControl": True,
            "enableCloseButton": False,
        }


@dataclass(frozen=True)
class MapMarker:
    lat: float
    lng: float
    title: str

    def to_dict(self) -> dict:
        return {"position": {"lat": self.lat, "lng": self.lng}, "title": self.title}


@dataclass(frozen=True)
class SatelliteMapView:
    """Overhead satellite map used when no panorama is available."""

    lat: float
    lng: float
    marker: MapMarker
    zoom: int = 15

    kind = "satellite_map"

    def to_dict(self) -> dict:
        return {
            "kind": self.kind,
            "center": {"lat": self.lat, "lng": self.lng},
            "zoom": self.zoom,
            "mapTypeId": "satellite",
            "markers": [self.marker.to_dict()],
        }


ImmersiveView = Union[PanoramaView, SatelliteMapView]


@dataclass
class ExplorerSession:
    """In-memory state of one user's trip. Lost on reload."""

    destination: str = ""
    suggestions: List[PlaceSuggestion] = field(default_factory=list)
    show_suggestions: bool = False
    is_loading: bool = False
    maps_ready: bool = False
    trip_active: bool = False
    current_location: Optional[ResolvedPlace] = None
    visited_places: List[str] = field(default_factory=list)
    view: Optional[ImmersiveView] = None

    @property
    def visited_count(self) -> int:
        return len(self.visited_places)

    def recent_places(self, limit: int = 3) -> List[str]:
        """Short names of the last few visits, oldest first."""
        if limit <= 0:
            return []
        return [short_place_name(place) for place in self.visited_places[-limit:]]

    def snapshot(self) -> dict:
        """JSON-ready view of the session for the browser."""
        count = self.visited_count
        location = self.current_location
        return {
            "destination": self.destination,
            "suggestions": [s.to_dict() for s in self.suggestions],
            "show_suggestions": self.show_suggestions and bool(self.suggestions),
            "is_loading": self.is_loading,
            "maps_ready": self.maps_ready,
            "trip_active": self.trip_active,
            "current_location": location.to_dict() if location else None,
            "current_short_name": location.short_name if location else "",
            "visited_places": list(self.visited_places),
            "visited_count": count,
            "visited_label": f"{count} place{'' if count == 1 else 's'} visited",
            "recent_places": self.recent_places(),
            "view_kind": self.view.kind if self.view else None,
            "input_enabled": self.maps_ready,
            "can_submit": bool(self.destination.strip()) and not self.is_loading and self.maps_ready,
            "can_explore_random": not self.is_loading and self.maps_ready,
        }
