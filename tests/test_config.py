import pytest

from holiday_hopper.api import config


def test_validate_maps_config_requires_key(monkeypatch):
    monkeypatch.delenv("GOOGLE_MAPS_API_KEY", raising=False)
    with pytest.raises(ValueError, match="GOOGLE_MAPS_API_KEY"):
        config.validate_maps_config()

    monkeypatch.setenv("GOOGLE_MAPS_API_KEY", "AIzaTestKey")
    assert config.validate_maps_config() is True


def test_explorer_config_defaults(monkeypatch):
    for name in ["EXPLORER_DEBOUNCE_SECONDS", "EXPLORER_RANDOM_DELAY_SECONDS",
                 "STREETVIEW_RADIUS_METERS", "SUGGESTION_LIMIT", "MAP_ZOOM"]:
        monkeypatch.delenv(name, raising=False)

    cfg = config.get_explorer_config()

    assert cfg["debounce_seconds"] == 1.0
    assert cfg["random_delay_seconds"] == 0.1
    assert cfg["streetview_radius"] == 50
    assert cfg["suggestion_limit"] == 5
    assert cfg["map_zoom"] == 15
    assert cfg["panorama_pov"] == {"heading": 34, "pitch": 10}


def test_explorer_config_env_overrides(monkeypatch):
    monkeypatch.setenv("EXPLORER_DEBOUNCE_SECONDS", "0.5")
    monkeypatch.setenv("STREETVIEW_RADIUS_METERS", "100")

    cfg = config.get_explorer_config()

    assert cfg["debounce_seconds"] == 0.5
    assert cfg["streetview_radius"] == 100
