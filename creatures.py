# creatures.py

import numpy as np
import constants as C
import traits as T
import logger as log

class AIState:
    """Names of the discrete behaviour states a creature can be in."""
    IDLE = "idle"
    WANDERING = "wandering"
    SEEKING_FOOD = "seeking_food"
    EATING = "eating"
    FLEEING = "fleeing"
    SEEKING_MATE = "seeking_mate"
    REPRODUCING = "reproducing"
    DEAD = "dead"

class Creature:
    """
    A single simulated organism. The species tag selects the trait table
    (and, in species.py, the behaviour table) that applies to it.
    """
    def __init__(self, species, position, energy=None, size=None, max_age=None, max_speed=None):
        self.species = species
        self.traits = T.get_traits(species)
        self.id = None # Assigned by the World upon insertion

        # --- Kinematics ---
        self.position = np.array(position, dtype=np.float64) # World coordinate (x, y, z), y is up
        self.velocity = np.zeros(3, dtype=np.float64) # Units per second
        self.steering_force = np.zeros(3, dtype=np.float64) # Accumulated until the next integrate()
        self.heading = None # Last non-zero horizontal direction, unit vector
        self.max_speed = max(0.0, self.traits.max_speed_min if max_speed is None else max_speed)
        self.max_force = max(0.0, self.traits.max_force)

        # --- Vitals ---
        self.energy = self.traits.initial_energy if energy is None else energy
        self.max_energy = self.traits.max_energy
        self.age = 0.0 # Seconds
        self.max_age = self.traits.max_age if max_age is None else max_age # Seconds
        self.size = max(0.0, self.traits.size if size is None else size)
        self.min_size = self.size
        self.max_size = self.size

        # --- Behaviour ---
        self.state = AIState.IDLE
        self.steering_mode = "idle" # Movement tag set by the steering primitives
        self.perception_radius = self.traits.perception_radius
        self.flee_radius = self.traits.flee_radius
        self.hunger_threshold = self.traits.hunger_threshold
        self.reproduction_threshold = self.traits.reproduction_threshold
        self.reproduction_cooldown = self.traits.reproduction_cooldown
        self.feed_cooldown = self.traits.feed_cooldown
        # Cooldown timestamps start one cooldown in the past so the first action is allowed immediately.
        self.last_feed_time = -self.feed_cooldown
        self.last_reproduce_time = -self.reproduction_cooldown
        self.last_wander_change = None
        self.reproducing_until = 0.0 # Sim time until which the post-mating display lasts

        # --- Transient AI memory (ids, looked up in the World's registry) ---
        self.food_target_id = None
        self.mate_target_id = None
        self.threat_id = None

        self.death_cause = None

    def __repr__(self):
        return f"<{self.species.capitalize()} id={self.id} state={self.state} energy={self.energy:.1f}>"

    # --- Physics ---
    def apply_force(self, force):
        self.steering_force += force

    def integrate(self, time_step):
        """Advances age, base metabolism and (for mobile species) motion by one step."""
        self.age += time_step
        self.energy -= time_step * self.traits.base_metabolic_rate

        if self.traits.mobile:
            self.velocity += self.steering_force * time_step
            speed_sq = float(np.dot(self.velocity, self.velocity))
            if speed_sq > self.max_speed * self.max_speed:
                self.velocity *= self.max_speed / np.sqrt(speed_sq)
            self.position += self.velocity * time_step

            horizontal = np.array([self.velocity[0], 0.0, self.velocity[2]])
            horizontal_len = np.linalg.norm(horizontal)
            if horizontal_len > 1e-9:
                self.heading = horizontal / horizontal_len

        self.steering_force[:] = 0.0

        # Keep the creature on the ground.
        ground_height = C.GROUND_LEVEL + self.size * 0.5
        if self.position[1] < ground_height:
            self.position[1] = ground_height
            self.velocity[1] = 0.0

    def damp_velocity(self, factor=C.POST_ACTION_VELOCITY_DAMPING):
        self.velocity *= factor

    # --- Survival ---
    def is_dead(self):
        return self.energy <= 0 or self.age > self.max_age

    def is_alive(self):
        return not self.is_dead()

    def die(self, cause="unknown"):
        """Marks the creature dead. Removal from the World happens at the end of the tick."""
        if self.state == AIState.DEAD:
            return False
        self.state = AIState.DEAD
        self.energy = 0.0
        self.velocity[:] = 0.0
        self.food_target_id = None
        self.mate_target_id = None
        self.threat_id = None
        self.death_cause = cause
        return True

    # --- Needs ---
    def is_hungry(self):
        return self.traits.food_species is not None and self.energy < self.hunger_threshold

    def can_reproduce(self, current_time):
        return (self.energy > self.reproduction_threshold and
                current_time - self.last_reproduce_time >= self.reproduction_cooldown)

    def can_feed(self, current_time):
        return current_time - self.last_feed_time >= self.feed_cooldown

    # --- Geometry ---
    def distance_sq_to(self, other):
        delta = other.position - self.position
        return float(np.dot(delta, delta))

    def distance_to(self, other):
        return float(np.sqrt(self.distance_sq_to(other)))

    def contact_distance(self, other):
        """Distance below which this creature can act on (eat) the other."""
        return self.size * 0.5 + other.size * 0.5 + self.traits.contact_epsilon

    def mate_reach(self, other):
        return self.size + other.size

def _random_ground_position(rng, half_extent, height):
    return (rng.uniform(-half_extent, half_extent), height, rng.uniform(-half_extent, half_extent))

def create_plant(rng, position=None, energy=None, size=None):
    if size is None:
        size = C.PLANT_INITIAL_SIZE_MIN + rng.random() * C.PLANT_INITIAL_SIZE_RANGE
    if position is None:
        position = _random_ground_position(rng, C.PLANT_SPAWN_HALF_EXTENT, size * 0.5)
    if energy is None:
        energy = size * C.PLANT_ENERGY_PER_SIZE
    max_age = C.PLANT_MAX_AGE_MIN_SECONDS + rng.random() * C.PLANT_MAX_AGE_RANGE_SECONDS
    plant = Creature(T.PLANT, position, energy=energy, size=size, max_age=max_age)
    plant.min_size = min(C.PLANT_MIN_SIZE, plant.size)
    plant.max_size = C.PLANT_MAX_SIZE
    plant.size = max(plant.min_size, min(plant.max_size, plant.size))
    return plant

def create_herbivore(rng, position=None, energy=None):
    traits = T.HERBIVORE_TRAITS
    if position is None:
        position = _random_ground_position(rng, C.HERBIVORE_SPAWN_HALF_EXTENT, traits.size * 0.5)
    max_speed = traits.max_speed_min + rng.random() * traits.max_speed_range
    return Creature(T.HERBIVORE, position, energy=energy, max_speed=max_speed)

def create_carnivore(rng, position=None, energy=None):
    traits = T.CARNIVORE_TRAITS
    if position is None:
        position = _random_ground_position(rng, C.CARNIVORE_SPAWN_HALF_EXTENT, traits.size * 0.5)
    max_speed = traits.max_speed_min + rng.random() * traits.max_speed_range
    return Creature(T.CARNIVORE, position, energy=energy, max_speed=max_speed)

_FACTORIES = {
    T.PLANT: create_plant,
    T.HERBIVORE: create_herbivore,
    T.CARNIVORE: create_carnivore,
}

def create_creature(species, rng, position=None, energy=None):
    factory = _FACTORIES.get(species)
    if factory is None:
        log.log(f"WARNING: Cannot create creature of unknown species '{species}'.")
        return None
    return factory(rng, position=position, energy=energy)
