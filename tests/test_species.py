"""Tests for species rules: feeding, hunting, mating and plant life."""

import pytest

import constants as C
import species
import traits as T
from creatures import AIState, create_plant


class TestEatPlant:
    """Test herbivore bites."""

    def test_gain_bounded_by_max_energy(self, world, spawn):
        herbivore = spawn(T.HERBIVORE, energy=240.0)
        plant = spawn(T.PLANT, x=0.5, energy=100.0, size=1.0)

        gain = species.eat_plant(herbivore, plant, world)

        assert gain == pytest.approx(10.0)
        assert herbivore.energy == pytest.approx(C.HERBIVORE_MAX_ENERGY)
        assert plant.energy == pytest.approx(100.0 - 10.0 * C.HERBIVORE_BITE_LOSS_MULTIPLIER)
        assert herbivore.state == AIState.EATING

    def test_gain_bounded_by_plant_energy(self, world, spawn):
        herbivore = spawn(T.HERBIVORE, energy=50.0)
        plant = spawn(T.PLANT, x=0.5, energy=20.0, size=1.0)

        gain = species.eat_plant(herbivore, plant, world)

        assert gain == pytest.approx(20.0 * C.HERBIVORE_PLANT_ENERGY_FRACTION)
        assert plant.energy >= 0

    def test_cooldown(self, world, spawn):
        herbivore = spawn(T.HERBIVORE, energy=50.0)
        plant = spawn(T.PLANT, x=0.5, energy=100.0, size=1.0)

        assert species.eat_plant(herbivore, plant, world) is not None
        assert species.eat_plant(herbivore, plant, world) is None
        assert herbivore.last_feed_time == world.current_time

    def test_velocity_damped(self, world, spawn):
        herbivore = spawn(T.HERBIVORE, energy=50.0)
        herbivore.velocity[:] = (1.0, 0.0, 0.0)
        plant = spawn(T.PLANT, x=0.5, energy=100.0, size=1.0)

        species.eat_plant(herbivore, plant, world)

        assert herbivore.velocity[0] == pytest.approx(C.POST_ACTION_VELOCITY_DAMPING)


class TestHuntPrey:
    """Test carnivore attacks."""

    def test_non_lethal_hunt(self, world, spawn):
        carnivore = spawn(T.CARNIVORE, energy=100.0)
        prey = spawn(T.HERBIVORE, x=1.0, energy=200.0)

        gain = species.hunt_prey(carnivore, prey, world)

        assert gain == pytest.approx(C.CARNIVORE_HUNT_AMOUNT)
        assert carnivore.energy == pytest.approx(200.0)
        assert prey.energy == pytest.approx(200.0 - 100.0 * C.CARNIVORE_HUNT_LOSS_MULTIPLIER)
        assert not prey.is_dead()

    def test_lethal_hunt_kills_immediately(self, world, spawn):
        carnivore = spawn(T.CARNIVORE, energy=100.0)
        prey = spawn(T.HERBIVORE, x=1.0, energy=50.0)

        gain = species.hunt_prey(carnivore, prey, world)

        assert gain == pytest.approx(50.0)
        assert prey.state == AIState.DEAD
        assert prey.death_cause == "hunted"
        assert prey.energy == 0.0

    def test_dead_prey_is_ignored(self, world, spawn):
        carnivore = spawn(T.CARNIVORE, energy=100.0)
        prey = spawn(T.HERBIVORE, x=1.0, energy=50.0)
        prey.die("starvation")

        assert species.hunt_prey(carnivore, prey, world) is None
        assert carnivore.energy == pytest.approx(100.0)


class TestMate:
    """Test sexual reproduction."""

    def test_both_parents_pay_and_record_time(self, world, spawn):
        first = spawn(T.HERBIVORE, energy=250.0)
        second = spawn(T.HERBIVORE, x=1.0, energy=250.0)

        offspring = species.mate(first, second, world)

        assert offspring is not None
        assert offspring.species == T.HERBIVORE
        assert offspring.energy == pytest.approx(C.HERBIVORE_REPRODUCTION_ENERGY_COST * C.OFFSPRING_ENERGY_FRACTION)
        assert offspring.position[0] == pytest.approx(0.5)
        for parent in (first, second):
            assert parent.energy == pytest.approx(250.0 - C.HERBIVORE_REPRODUCTION_ENERGY_COST)
            assert parent.last_reproduce_time == world.current_time
            assert parent.state == AIState.REPRODUCING
            assert not parent.can_reproduce(world.current_time)
        assert world.newborns == [offspring]
        assert offspring.id is None

    def test_ineligible_partner(self, world, spawn):
        first = spawn(T.HERBIVORE, energy=250.0)
        second = spawn(T.HERBIVORE, x=1.0, energy=150.0)

        assert species.mate(first, second, world) is None
        assert first.energy == pytest.approx(250.0)
        assert world.newborns == []

    def test_cannot_mate_with_self_or_other_species(self, world, spawn):
        herbivore = spawn(T.HERBIVORE, energy=250.0)
        carnivore = spawn(T.CARNIVORE, energy=350.0)

        assert species.mate(herbivore, herbivore, world) is None
        assert species.mate(herbivore, carnivore, world) is None


class TestPlantLife:
    """Test the passive plant update."""

    def test_forced_reproduction(self, world, fixed_random):
        world.rng = fixed_random(0.0)
        plant = create_plant(world.rng, position=(10.0, 0.95, -10.0), energy=200.0, size=1.9)
        world.add_creature(plant)

        species.update_plant(plant, world, 1.0)

        # +0.5 light, -1.0 growth (0.1 size), -0.1 metabolism, then halved.
        assert plant.size == pytest.approx(C.PLANT_MAX_SIZE)
        assert plant.energy == pytest.approx(199.4 * C.PLANT_REPRODUCTION_ENERGY_KEPT)
        assert len(world.newborns) == 1
        seed = world.newborns[0]
        assert seed.species == T.PLANT
        assert seed.energy == pytest.approx(plant.energy * C.PLANT_OFFSPRING_ENERGY_FRACTION)
        assert seed.position[0] == pytest.approx(10.0 - C.PLANT_SEED_SCATTER)
        assert seed.position[1] == pytest.approx(C.PLANT_SEED_HEIGHT)
        assert seed.position[2] == pytest.approx(-10.0 - C.PLANT_SEED_SCATTER)

    def test_forced_reproduction_near_threshold(self, world, fixed_random):
        world.rng = fixed_random(0.0)
        plant = create_plant(world.rng, position=(0.0, 0.9, 0.0), energy=90.0, size=1.8)
        world.add_creature(plant)
        assert plant.max_size == C.PLANT_MAX_SIZE

        species.update_plant(plant, world, 1.0)

        # +0.5 light, -2.0 growth (0.2 size), -0.1 metabolism leaves 88.4, then halved.
        assert plant.energy == pytest.approx(88.4 * C.PLANT_REPRODUCTION_ENERGY_KEPT)
        assert len(world.newborns) == 1
        assert world.newborns[0].energy == pytest.approx(plant.energy * C.PLANT_OFFSPRING_ENERGY_FRACTION)

    def test_no_reproduction_when_draw_fails(self, world, fixed_random):
        world.rng = fixed_random(0.999)
        plant = create_plant(world.rng, position=(0.0, 0.95, 0.0), energy=200.0, size=1.9)
        world.add_creature(plant)

        species.update_plant(plant, world, 1.0)

        assert world.newborns == []
        assert plant.energy == pytest.approx(199.4)

    def test_seed_stays_inside_world(self, world, fixed_random):
        world.rng = fixed_random(0.0)
        plant = create_plant(world.rng, position=(-48.5, 1.0, -48.5), energy=200.0, size=2.0)
        world.add_creature(plant)

        species.reproduce_asexually(plant, world)

        seed = world.newborns[0]
        assert seed.position[0] == pytest.approx(-C.WORLD_HALF_EXTENT)
        assert seed.position[2] == pytest.approx(-C.WORLD_HALF_EXTENT)

    def test_growth_raises_plant(self, world, fixed_random):
        world.rng = fixed_random(0.999)
        plant = create_plant(world.rng, position=(0.0, 0.5, 0.0), energy=100.0, size=1.0)
        world.add_creature(plant)

        species.update_plant(plant, world, 1.0)

        assert plant.size > 1.0
        assert plant.position[1] == pytest.approx(plant.size * 0.5)

    def test_energy_capped(self, world, fixed_random):
        world.rng = fixed_random(0.999)
        plant = create_plant(world.rng, position=(0.0, 1.0, 0.0), energy=5000.0, size=2.0)
        world.add_creature(plant)

        species.update_plant(plant, world, 1.0)

        assert plant.energy == pytest.approx(C.PLANT_MAX_ENERGY)
