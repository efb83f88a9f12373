"""Tests for the id-keyed creature store."""

import pytest

import traits as T
from creatures import create_herbivore, create_plant
from registry import CreatureRegistry


def _make(rng, species, creature_id):
    creature = create_plant(rng) if species == T.PLANT else create_herbivore(rng)
    creature.id = creature_id
    return creature


@pytest.fixture
def registry():
    return CreatureRegistry()


def test_swap_and_pop_keeps_index_consistent(registry, seeded_rng):
    herbivores = [_make(seeded_rng, T.HERBIVORE, i) for i in range(4)]
    for herbivore in herbivores:
        registry.add(herbivore)

    registry.remove(herbivores[1])

    subset = registry.species(T.HERBIVORE)
    assert len(subset) == 3
    assert herbivores[1] not in subset
    for slot, creature in enumerate(subset):
        assert registry.species_index[creature.id] == slot


def test_duplicate_id_rejected(registry, seeded_rng):
    assert registry.add(_make(seeded_rng, T.PLANT, 1)) is True
    assert registry.add(_make(seeded_rng, T.PLANT, 1)) is False
    assert len(registry) == 1


def test_remove_unregistered(registry, seeded_rng):
    assert registry.remove(_make(seeded_rng, T.PLANT, 5)) is False


def test_get_alive_hides_dead(registry, seeded_rng):
    herbivore = _make(seeded_rng, T.HERBIVORE, 3)
    registry.add(herbivore)

    assert registry.get_alive(3) is herbivore
    herbivore.die("starvation")
    assert registry.get_alive(3) is None
    assert registry.get(3) is herbivore
    assert registry.get_alive(None) is None


def test_snapshot_is_stable(registry, seeded_rng):
    plants = [_make(seeded_rng, T.PLANT, i) for i in range(3)]
    for plant in plants:
        registry.add(plant)

    snapshot = registry.snapshot()
    registry.remove(plants[0])

    assert snapshot == plants
    assert registry.count(T.PLANT) == 2


def test_positions_shape(registry, seeded_rng):
    plants = [_make(seeded_rng, T.PLANT, i) for i in range(3)]
    assert registry.positions(plants).shape == (3, 3)
    assert registry.positions([]).shape == (0, 3)
