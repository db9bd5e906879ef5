import pytest

from holiday_hopper.api.controller import TripController

from conftest import make_suggestions


@pytest.mark.parametrize("text", ["", "P"])
def test_short_text_requests_nothing_and_clears_suggestions(controller, provider, text):
    controller.session.suggestions = make_suggestions(2)
    controller.session.show_suggestions = True

    controller.text_changed(text)

    assert provider.autocomplete_calls == []
    assert controller.session.suggestions == []
    assert controller.session.show_suggestions is False
    assert controller.session.destination == text


def test_suggestions_capped_at_five_in_provider_order(controller, provider):
    provider.predictions["Sa"] = make_suggestions(8)

    controller.text_changed("Sa")

    assert provider.autocomplete_calls == ["Sa"]
    assert [s.place_id for s in controller.session.suggestions] == ["id0", "id1", "id2", "id3", "id4"]
    assert controller.session.show_suggestions is True


def test_failed_autocomplete_hides_list(controller, provider):
    provider.predictions["Sa"] = make_suggestions(3)
    controller.text_changed("Sa")

    controller.text_changed("Sax")

    assert controller.session.suggestions == []
    assert controller.session.show_suggestions is False


def test_debounce_explores_final_text_only(controller, provider, scheduler):
    for text in ["P", "Pa", "Par", "Pari", "Paris"]:
        controller.text_changed(text)

    assert provider.geocode_calls == []
    assert len(scheduler.pending) == 1

    scheduler.run_pending()

    assert provider.geocode_calls == ["Paris"]
    assert controller.session.current_location.address == "Paris, France"


def test_debounce_ignores_text_of_two_characters(controller, provider, scheduler):
    controller.text_changed("Pa")
    scheduler.run_pending()
    assert provider.geocode_calls == []


def test_debounce_checks_readiness_when_firing(controller, provider, scheduler):
    controller.text_changed("Paris")
    controller.session.maps_ready = False
    scheduler.run_pending()
    assert provider.geocode_calls == []


def test_text_entry_disabled_until_maps_ready(provider, scheduler, explorer_config):
    ctrl = TripController(provider, config=explorer_config, scheduler=scheduler)

    ctrl.text_changed("Paris")

    assert ctrl.session.destination == ""
    assert provider.autocomplete_calls == []
    assert scheduler.pending == []


def test_choosing_suggestion_explores_immediately(controller, provider, scheduler):
    provider.predictions["Pa"] = make_suggestions(1, prefix="Paris")
    provider.add_place("Paris 0, Country", "Paris, France", 48.8566, 2.3522)
    controller.text_changed("Pa")

    chosen = controller.suggestion_chosen("id0")

    assert chosen.description == "Paris 0, Country"
    assert controller.session.destination == "Paris 0, Country"
    assert controller.session.show_suggestions is False
    assert provider.geocode_calls == ["Paris 0, Country"]
    assert controller.session.trip_active is True


def test_unknown_suggestion_is_ignored(controller, provider):
    assert controller.suggestion_chosen("missing") is None
    assert provider.geocode_calls == []


def test_click_outside_hides_list_but_keeps_text(controller, provider):
    provider.predictions["Ky"] = make_suggestions(2)
    controller.text_changed("Ky")

    controller.dismiss_suggestions()

    assert controller.session.show_suggestions is False
    assert controller.session.destination == "Ky"
    assert len(controller.session.suggestions) == 2
