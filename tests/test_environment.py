"""Tests for ambient conditions and random events."""

import pytest

import constants as C
from environment import Environment


@pytest.fixture
def environment(seeded_rng):
    return Environment(seeded_rng)


def test_initial_state(environment):
    state = environment.get_state()

    assert state['temperature'] == C.ENV_INITIAL_TEMPERATURE
    assert state['rainfall'] == C.ENV_INITIAL_RAINFALL
    assert state['light_level'] == C.ENV_INITIAL_LIGHT_LEVEL
    assert state['pollution'] == C.ENV_INITIAL_POLLUTION
    assert state['drought'] is False


def test_light_follows_time_of_day(environment):
    environment.update(C.ENV_DAY_DURATION_SECONDS / 4)

    assert environment.time_of_day == pytest.approx(0.75)
    assert environment.get_light_level() == pytest.approx(0.7071, abs=1e-3)


def test_light_never_below_minimum(environment):
    environment.update(C.ENV_DAY_DURATION_SECONDS / 2)

    assert environment.get_light_level() == pytest.approx(C.ENV_MIN_LIGHT_LEVEL)


def test_temperature_drifts_slowly(environment):
    for _ in range(100):
        environment.update(0.1)

    drift_bound = 100 * 0.5 * C.ENV_TEMPERATURE_DRIFT_PER_SECOND * 0.1
    assert abs(environment.get_temperature() - C.ENV_INITIAL_TEMPERATURE) <= drift_bound


def test_pollution_is_clamped(environment):
    assert environment.set_param("pollution", 2.5)
    assert environment.get_pollution() == C.ENV_POLLUTION_MAX
    assert environment.set_param("pollution", -1)
    assert environment.get_pollution() == C.ENV_POLLUTION_MIN


def test_rejected_edits(environment):
    assert environment.set_param("humidity", 3.0) is False
    assert environment.set_param("rainfall", None) is False
    assert environment.set_param("rainfall", float("nan")) is False
    assert environment.get_rainfall() == C.ENV_INITIAL_RAINFALL


def test_numeric_strings_are_accepted(environment):
    assert environment.set_param("temperature", "30") is True
    assert environment.get_temperature() == 30.0


def test_drought_reduces_rainfall_then_restores(fixed_random):
    environment = Environment(fixed_random(0.0))

    environment.trigger_random_events(1.0)
    assert environment.is_drought_active()
    assert environment.get_rainfall() == pytest.approx(C.ENV_INITIAL_RAINFALL * C.DROUGHT_RAINFALL_FACTOR)

    # A second roll during the drought does not compound it.
    environment.trigger_random_events(1.0)
    assert environment.get_rainfall() == pytest.approx(C.ENV_INITIAL_RAINFALL * C.DROUGHT_RAINFALL_FACTOR)

    environment.update(0.1)
    assert not environment.is_drought_active()
    assert environment.get_rainfall() == pytest.approx(C.ENV_INITIAL_RAINFALL)


def test_rainfall_edit_during_drought_survives_it(fixed_random):
    environment = Environment(fixed_random(0.0))
    environment.trigger_random_events(1.0)
    assert environment.is_drought_active()

    environment.set_param("rainfall", 30.0)
    assert environment.get_rainfall() == 30.0

    environment.update(0.1)
    assert not environment.is_drought_active()
    assert environment.get_rainfall() == pytest.approx(30.0)
