# holiday_hopper/api/maps_provider.py
"""Google Maps access: city autocomplete, geocoding and Street View lookup.

Every call answers with a provider status string. Library and transport
failures are logged here and reported as a not-OK status, so callers only
ever branch on ``status == OK``.
"""
from __future__ import annotations

import logging
from typing import List, Optional, Tuple

import googlemaps
import requests

from holiday_hopper.api.config import get_google_maps_config
from holiday_hopper.api.models import PlaceSuggestion, ResolvedPlace

logger = logging.getLogger(__name__)

OK = "OK"
ZERO_RESULTS = "ZERO_RESULTS"
ERROR = "ERROR"

STREETVIEW_METADATA_URL = "https://maps.googleapis.com/maps/api/streetview/metadata"
CITY_TYPES = "(cities)"

_provider: "MapsProvider | None" = None


class MapsProvider:
    """Thin wrapper over ``googlemaps.Client`` plus the Street View metadata API."""

    def __init__(self, client: googlemaps.Client, api_key: str,
                 timeout: float = 10.0, session: Optional[requests.Session] = None):
        self.client = client
        self.api_key = api_key
        self.timeout = timeout
        self.session = session or requests.Session()

    def autocomplete_cities(self, text: str) -> Tuple[str, List[PlaceSuggestion]]:
        """Return city predictions for ``text`` in provider order."""
        try:
            predictions = self.client.places_autocomplete(text, types=CITY_TYPES)
        except googlemaps.exceptions.ApiError as e:
            logger.warning(f"Autocomplete rejected for '{text}': {e.status}")
            return e.status or ERROR, []
        except (googlemaps.exceptions.TransportError, googlemaps.exceptions.Timeout) as e:
            logger.error(f"Autocomplete request failed for '{text}': {e}")
            return ERROR, []

        if not predictions:
            return ZERO_RESULTS, []

        suggestions = []
        for prediction in predictions:
            formatting = prediction.get("structured_formatting") or {}
            description = prediction.get("description", "")
            suggestions.append(PlaceSuggestion(
                place_id=prediction.get("place_id", ""),
                main_text=formatting.get("main_text", description),
                secondary_text=formatting.get("secondary_text", ""),
                description=description,
            ))
        return OK, suggestions

    def geocode(self, address: str) -> Tuple[str, Optional[ResolvedPlace]]:
        """Resolve free text to the first result's formatted address and coordinate."""
        try:
            logger.debug(f"Geocoding place: {address}")
            results = self.client.geocode(address)
        except googlemaps.exceptions.ApiError as e:
            logger.warning(f"Geocoding rejected for '{address}': {e.status}")
            return e.status or ERROR, None
        except (googlemaps.exceptions.TransportError, googlemaps.exceptions.Timeout) as e:
            logger.error(f"Geocoding error for '{address}': {e}")
            return ERROR, None

        if not results:
            logger.warning(f"No results found for place: {address}")
            return ZERO_RESULTS, None

        first = results[0]
        loc = first["geometry"]["location"]
        place = ResolvedPlace(
            address=first.get("formatted_address", address),
            lat=loc["lat"],
            lng=loc["lng"],
        )
        logger.debug(f"Geocoded {address} to {place.lat}, {place.lng}")
        return OK, place

    def lookup_panorama(self, lat: float, lng: float, radius: int = 50) -> str:
        """Ask whether a Street View panorama exists within ``radius`` metres."""
        params = {
            "location": f"{lat},{lng}",
            "radius": radius,
            "key": self.api_key,
        }
        try:
            resp = self.session.get(STREETVIEW_METADATA_URL, params=params, timeout=self.timeout)
            resp.raise_for_status()
            status = resp.json().get("status", ERROR)
        except (requests.RequestException, ValueError) as e:
            logger.error(f"Street View lookup failed at {lat}, {lng}: {e}")
            return ERROR

        if status != OK:
            logger.info(f"No panorama within {radius}m of {lat}, {lng} ({status})")
        return status


def get_maps_provider() -> MapsProvider | None:
    """Return a cached MapsProvider, or None when Maps is not configured."""
    global _provider
    if _provider is None:
        cfg = get_google_maps_config()
        api_key = cfg.get("api_key", "")
        if not api_key:
            logger.error("No Google Maps API key found in config")
            return None
        try:
            logger.info(f"Initializing Google Maps client with key: {api_key[:10]}...")
            client = googlemaps.Client(key=api_key, timeout=cfg["request_timeout"])
        except ValueError as e:
            logger.error(f"Failed to initialize Google Maps client: {e}")
            return None
        _provider = MapsProvider(client, api_key, timeout=cfg["request_timeout"])
    return _provider


def reset_maps_provider() -> None:
    """Forget the cached provider (configuration changed)."""
    global _provider
    _provider = None


__all__ = [
    "MapsProvider",
    "get_maps_provider",
    "reset_maps_provider",
    "OK",
    "ZERO_RESULTS",
    "ERROR",
]
