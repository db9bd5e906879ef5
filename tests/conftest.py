import sys
from pathlib import Path

import pytest

# Ensure the project root is on sys.path for direct pytest runs
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from holiday_hopper.api.config import get_explorer_config  # noqa: E402
from holiday_hopper.api.controller import TripController  # noqa: E402
from holiday_hopper.api.models import PlaceSuggestion, ResolvedPlace  # noqa: E402


class _Handle:
    def __init__(self, delay, func, args):
        self.delay = delay
        self.func = func
        self.args = args
        self.cancelled = False
        self.fired = False

    def cancel(self):
        self.cancelled = True


class ManualScheduler:
    """Collects scheduled calls; tests fire them explicitly."""

    def __init__(self):
        self.handles = []

    def __call__(self, delay, func, *args):
        handle = _Handle(delay, func, args)
        self.handles.append(handle)
        return handle

    @property
    def pending(self):
        return [h for h in self.handles if not h.cancelled and not h.fired]

    def run_pending(self):
        for handle in self.pending:
            handle.fired = True
            handle.func(*handle.args)


class FakeProvider:
    """Scripted stand-in for MapsProvider."""

    def __init__(self):
        self.places = {}
        self.panoramas = set()
        self.predictions = {}
        self.autocomplete_calls = []
        self.geocode_calls = []
        self.panorama_calls = []

    def add_place(self, query, address, lat, lng, panorama=True):
        self.places[query] = ResolvedPlace(address=address, lat=lat, lng=lng)
        if panorama:
            self.panoramas.add((lat, lng))

    def autocomplete_cities(self, text):
        self.autocomplete_calls.append(text)
        suggestions = self.predictions.get(text, [])
        return ("OK" if suggestions else "ZERO_RESULTS"), list(suggestions)

    def geocode(self, address):
        self.geocode_calls.append(address)
        place = self.places.get(address)
        return ("OK", place) if place else ("ZERO_RESULTS", None)

    def lookup_panorama(self, lat, lng, radius=50):
        self.panorama_calls.append((lat, lng, radius))
        return "OK" if (lat, lng) in self.panoramas else "ZERO_RESULTS"


def make_suggestions(count, prefix="City"):
    return [
        PlaceSuggestion(
            place_id=f"id{i}",
            main_text=f"{prefix} {i}",
            secondary_text="Country",
            description=f"{prefix} {i}, Country",
        )
        for i in range(count)
    ]


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def provider():
    fake = FakeProvider()
    fake.add_place("Paris", "Paris, France", 48.8566, 2.3522)
    fake.add_place("Antarctica Base X", "Antarctica Base X, Antarctica", -77.85, 166.67, panorama=False)
    return fake


@pytest.fixture
def explorer_config():
    config = get_explorer_config()
    config.update({
        "debounce_seconds": 1.0,
        "random_delay_seconds": 0.1,
        "suggestion_limit": 5,
        "streetview_radius": 50,
        "map_zoom": 15,
    })
    return config


@pytest.fixture
def controller(provider, scheduler, explorer_config):
    ctrl = TripController(provider, config=explorer_config, scheduler=scheduler)
    ctrl.mark_maps_ready()
    return ctrl
