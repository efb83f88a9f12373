# species.py

import constants as C
import traits as T
import logger as log
from creatures import AIState, create_creature, create_plant

class SpeciesBehavior:
    """The behaviour table for one species. A missing rule means the capability is absent."""
    def __init__(self, feed=None, reproduce=None, passive_update=None):
        self.feed = feed # feed(consumer, source, world) -> energy gained, or None if not allowed yet
        self.reproduce = reproduce # reproduce(creature, partner, world) -> offspring or None
        self.passive_update = passive_update # passive_update(creature, world, time_step)

def _transfer_energy(consumer, source, gain, loss_multiplier):
    gain = max(0.0, gain)
    source.energy -= gain * loss_multiplier
    consumer.energy += gain
    return gain

def eat_plant(herbivore, plant, world):
    """A herbivore takes one bite out of a plant, subject to its eat cooldown."""
    now = world.current_time
    if not herbivore.can_feed(now) or plant.is_dead():
        return None

    herbivore.state = AIState.EATING
    gain = min(herbivore.traits.feed_amount,
               plant.energy * C.HERBIVORE_PLANT_ENERGY_FRACTION,
               herbivore.max_energy - herbivore.energy)
    gain = _transfer_energy(herbivore, plant, gain, C.HERBIVORE_BITE_LOSS_MULTIPLIER)
    herbivore.last_feed_time = now
    if world.is_focused(herbivore) or world.is_focused(plant):
        log.log(f"DEBUG: Herbivore {herbivore.id} ate Plant {plant.id}. Gained {gain:.2f} energy, plant left with {plant.energy:.2f}.")

    if plant.energy <= 0:
        plant.die("eaten")
    # Stop moving while eating.
    herbivore.damp_velocity()
    return gain

def hunt_prey(carnivore, prey, world):
    """A carnivore attacks a herbivore, subject to its hunt cooldown."""
    now = world.current_time
    if not carnivore.can_feed(now) or prey.is_dead():
        return None

    carnivore.state = AIState.EATING
    gain = min(carnivore.traits.feed_amount,
               prey.energy,
               carnivore.max_energy - carnivore.energy)
    gain = _transfer_energy(carnivore, prey, gain, C.CARNIVORE_HUNT_LOSS_MULTIPLIER)
    carnivore.last_feed_time = now
    if world.is_focused(carnivore) or world.is_focused(prey):
        log.log(f"DEBUG: Carnivore {carnivore.id} hunted Herbivore {prey.id}. Gained {gain:.2f} energy, prey left with {prey.energy:.2f}.")

    if prey.energy <= 0:
        # The kill is immediate, not deferred to the prey's next update.
        prey.die("hunted")
        if world.is_focused(prey) or world.is_focused(carnivore):
            log.log(f"DEATH ({prey.id}): Killed by Carnivore {carnivore.id}.")
    carnivore.damp_velocity()
    return gain

def mate(creature, partner, world):
    """Sexual reproduction. Both partners must be eligible at call time."""
    now = world.current_time
    if partner is None or partner is creature or partner.species != creature.species:
        return None
    if not creature.can_reproduce(now) or not partner.can_reproduce(now):
        return None

    cost = creature.traits.reproduction_energy_cost
    for parent in (creature, partner):
        parent.energy -= cost
        parent.last_reproduce_time = now
        parent.state = AIState.REPRODUCING
        parent.reproducing_until = now + C.REPRODUCING_DISPLAY_SECONDS
        parent.mate_target_id = None
        parent.damp_velocity()

    midpoint = (creature.position + partner.position) * 0.5
    midpoint[1] = C.GROUND_LEVEL + creature.traits.size * 0.5
    offspring = create_creature(creature.species, world.rng, position=midpoint,
                                energy=cost * C.OFFSPRING_ENERGY_FRACTION)
    world.queue_birth(offspring, parents=(creature, partner))
    if world.is_focused(creature) or world.is_focused(partner):
        log.log(f"DEBUG: {creature.species.capitalize()}s {creature.id} and {partner.id} reproduced.")
    return offspring

def reproduce_asexually(plant, world):
    """Seeding: the plant halves its energy and drops one offspring nearby."""
    plant.energy *= C.PLANT_REPRODUCTION_ENERGY_KEPT

    offset_x = world.rng.uniform(-C.PLANT_SEED_SCATTER, C.PLANT_SEED_SCATTER)
    offset_z = world.rng.uniform(-C.PLANT_SEED_SCATTER, C.PLANT_SEED_SCATTER)
    x = max(-C.WORLD_HALF_EXTENT, min(C.WORLD_HALF_EXTENT, plant.position[0] + offset_x))
    z = max(-C.WORLD_HALF_EXTENT, min(C.WORLD_HALF_EXTENT, plant.position[2] + offset_z))

    offspring = create_plant(world.rng, position=(x, C.PLANT_SEED_HEIGHT, z),
                             energy=plant.energy * C.PLANT_OFFSPRING_ENERGY_FRACTION)
    world.queue_birth(offspring, parents=(plant,))
    if world.is_focused(plant):
        log.log(f"DEBUG: Plant {plant.id} dropped a seed at ({x:.1f}, {z:.1f}). Energy left: {plant.energy:.2f}")
    return offspring

def update_plant(plant, world, time_step):
    """Photosynthesis, growth, size-based metabolism and seeding for one tick."""
    light_level = world.environment.get_light_level()
    plant.energy += C.PLANT_GROWTH_RATE * light_level * time_step

    # --- Growth ---
    potential_growth = plant.energy * C.PLANT_GROWTH_ENERGY_FRACTION * time_step
    if plant.size < plant.max_size and potential_growth > 0:
        actual_growth = min(potential_growth, plant.max_size - plant.size)
        plant.size = max(plant.min_size, min(plant.max_size, plant.size + actual_growth))
        plant.energy -= actual_growth * C.PLANT_GROWTH_ENERGY_COST
        plant.position[1] = C.GROUND_LEVEL + plant.size * 0.5

    # --- Metabolism ---
    plant.energy -= plant.size * C.PLANT_SIZE_METABOLISM_RATE * time_step
    plant.energy = min(plant.energy, plant.max_energy)

    # --- Seeding ---
    if (plant.energy > C.PLANT_REPRODUCTION_ENERGY_THRESHOLD and
            plant.size > plant.max_size * C.PLANT_REPRODUCTION_SIZE_FRACTION and
            world.rng.random() < C.PLANT_REPRODUCTION_CHANCE_PER_SECOND * time_step):
        reproduce_asexually(plant, world)

BEHAVIORS = {
    T.PLANT: SpeciesBehavior(reproduce=reproduce_asexually, passive_update=update_plant),
    T.HERBIVORE: SpeciesBehavior(feed=eat_plant, reproduce=mate),
    T.CARNIVORE: SpeciesBehavior(feed=hunt_prey, reproduce=mate),
}

def get_behavior(species):
    return BEHAVIORS[species]
