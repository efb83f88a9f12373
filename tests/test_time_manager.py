"""Tests for the simulation clock."""

import pytest

import constants as C
from time_manager import TimeManager


@pytest.fixture
def time_manager(fake_clock):
    return TimeManager(clock=fake_clock)


def test_real_delta_is_capped(time_manager, fake_clock):
    fake_clock.advance(5.0)
    assert time_manager.consume_real_delta() == C.MAX_REAL_DELTA_SECONDS


def test_real_delta_never_negative(time_manager, fake_clock):
    fake_clock.advance(-1.0)
    assert time_manager.consume_real_delta() == 0.0


def test_paused_delta_is_zero(time_manager, fake_clock):
    time_manager.pause()
    fake_clock.advance(0.1)
    assert time_manager.next_delta() == 0.0


def test_resume_resets_baseline(time_manager, fake_clock):
    time_manager.pause()
    fake_clock.advance(10.0)
    time_manager.resume()
    fake_clock.advance(0.05)

    assert time_manager.next_delta() == pytest.approx(0.05)


def test_speed_levels(time_manager):
    time_manager.set_speed_level(3)
    assert time_manager.current_multiplier == C.TIME_MULTIPLIERS[3]

    time_manager.set_speed_level(42)
    assert time_manager.current_multiplier == C.TIME_MULTIPLIERS[3]


def test_negative_speed_clamped(time_manager):
    time_manager.set_speed(-2)
    assert time_manager.current_multiplier == 0.0


def test_toggle_pause(time_manager):
    time_manager.toggle_pause()
    assert time_manager.is_paused
    assert time_manager.get_display_string().endswith("PAUSED")
    time_manager.toggle_pause()
    assert not time_manager.is_paused


def test_display_string(time_manager):
    time_manager.update_total_time(75.0)
    time_manager.set_speed(2.0)
    assert time_manager.get_display_string() == "Time: 01:15 | Speed: x2"


def test_reset(time_manager):
    time_manager.update_total_time(12.0)
    time_manager.reset()
    assert time_manager.total_sim_seconds == 0.0


@pytest.mark.parametrize("bad_speed", ["fast", None, float("nan"), float("inf")])
def test_invalid_speed_rejected(time_manager, bad_speed):
    time_manager.set_speed(2.0)

    assert time_manager.set_speed(bad_speed) is False
    assert time_manager.current_multiplier == 2.0


def test_numeric_string_speed_accepted(time_manager):
    assert time_manager.set_speed("4") is True
    assert time_manager.current_multiplier == 4.0
