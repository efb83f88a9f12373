"""Pytest configuration and fixtures for ecosystem tests."""

import random

import pytest

import traits as T
from creatures import create_creature, create_plant
from listeners import WorldListener
from world import World


class FixedRandom(random.Random):
    """A Random whose draws in [0, 1) always return the same value."""

    def __init__(self, value):
        super().__init__(0)
        self.value = value

    def random(self):
        return self.value


class FakeClock:
    """Injectable wall clock for TimeManager."""

    def __init__(self, start=100.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


class RecordingListener(WorldListener):
    """Keeps every World notification in order."""

    def __init__(self):
        self.events = []

    def on_creature_added(self, creature_id, species, position, size):
        self.events.append(("added", creature_id, species, position, size))

    def on_creature_moved(self, creature_id, position):
        self.events.append(("moved", creature_id, position))

    def on_creature_resized(self, creature_id, size):
        self.events.append(("resized", creature_id, size))

    def on_creature_removed(self, creature_id):
        self.events.append(("removed", creature_id))

    def on_statistics(self, snapshot):
        self.events.append(("statistics", snapshot))

    def on_reset(self):
        self.events.append(("reset",))

    def of_kind(self, kind):
        return [event for event in self.events if event[0] == kind]


@pytest.fixture
def seeded_rng():
    """Provide a deterministic RNG for tests."""
    return random.Random(42)


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def recorder():
    return RecordingListener()


@pytest.fixture
def world(recorder):
    """An empty, seeded world with a recording listener attached."""
    return World(seed=42, listeners=[recorder])


@pytest.fixture
def spawn(world):
    """Create a creature on the ground at (x, z) and insert it into the world."""

    def _spawn(species, x=0.0, z=0.0, energy=None, size=None):
        if species == T.PLANT and size is not None:
            creature = create_plant(world.rng, position=(x, size * 0.5, z), energy=energy, size=size)
        else:
            height = T.get_traits(species).size * 0.5
            creature = create_creature(species, world.rng, position=(x, height, z), energy=energy)
        return world.add_creature(creature)

    return _spawn


@pytest.fixture
def fixed_random():
    return FixedRandom
