#traits.py

import constants as C

PLANT = "plant"
HERBIVORE = "herbivore"
CARNIVORE = "carnivore"
ALL_SPECIES = (PLANT, HERBIVORE, CARNIVORE)

class SpeciesTraits:
    """A data container for the fixed traits and capabilities of one species."""
    def __init__(self, species, **overrides):
        self.species = species
        # --- Capabilities ---
        self.mobile = True # Integrates velocity and steers
        self.can_flee = False
        self.threat_species = () # Species this one runs away from
        self.food_species = None # Species this one eats, if any
        self.reproduces_sexually = False
        # --- Vitals ---
        self.base_metabolic_rate = C.CREATURE_BASE_METABOLIC_RATE # Energy per second
        self.initial_energy = C.CREATURE_DEFAULT_ENERGY
        self.max_energy = C.CREATURE_DEFAULT_ENERGY
        self.max_age = C.CREATURE_DEFAULT_MAX_AGE_SECONDS # Seconds
        self.size = 1.0
        # --- Movement & perception ---
        self.max_speed_min = C.CREATURE_DEFAULT_MAX_SPEED
        self.max_speed_range = 0.0
        self.max_force = C.CREATURE_DEFAULT_MAX_FORCE
        self.perception_radius = C.CREATURE_DEFAULT_PERCEPTION_RADIUS
        self.flee_radius = C.CREATURE_DEFAULT_FLEE_RADIUS
        # --- Feeding ---
        self.hunger_threshold = 0.0
        self.feed_amount = 0.0 # Max energy gained per bite or hunt
        self.feed_cooldown = 0.0 # Seconds between bites or hunts
        self.contact_epsilon = 0.0
        # --- Reproduction ---
        self.reproduction_threshold = float('inf')
        self.reproduction_cooldown = 0.0
        self.reproduction_energy_cost = 0.0

        for name, value in overrides.items():
            if not hasattr(self, name):
                raise AttributeError(f"Unknown species trait '{name}'")
            setattr(self, name, value)

PLANT_TRAITS = SpeciesTraits(
    PLANT,
    mobile=False,
    base_metabolic_rate=0.0, # Plant metabolism is size-based, see species.update_plant
    max_energy=C.PLANT_MAX_ENERGY,
    max_speed_min=0.0,
    max_force=0.0,
)

HERBIVORE_TRAITS = SpeciesTraits(
    HERBIVORE,
    can_flee=True,
    threat_species=(CARNIVORE,),
    food_species=PLANT,
    reproduces_sexually=True,
    initial_energy=C.HERBIVORE_INITIAL_ENERGY,
    max_energy=C.HERBIVORE_MAX_ENERGY,
    size=C.HERBIVORE_SIZE,
    max_speed_min=C.HERBIVORE_MAX_SPEED_MIN,
    max_speed_range=C.HERBIVORE_MAX_SPEED_RANGE,
    perception_radius=C.HERBIVORE_PERCEPTION_RADIUS,
    flee_radius=C.HERBIVORE_FLEE_RADIUS,
    hunger_threshold=C.HERBIVORE_HUNGER_THRESHOLD,
    feed_amount=C.HERBIVORE_EAT_AMOUNT,
    feed_cooldown=C.HERBIVORE_EAT_COOLDOWN_SECONDS,
    contact_epsilon=C.HERBIVORE_CONTACT_EPSILON,
    reproduction_threshold=C.HERBIVORE_REPRODUCTION_THRESHOLD,
    reproduction_cooldown=C.HERBIVORE_REPRODUCTION_COOLDOWN_SECONDS,
    reproduction_energy_cost=C.HERBIVORE_REPRODUCTION_ENERGY_COST,
)

CARNIVORE_TRAITS = SpeciesTraits(
    CARNIVORE,
    food_species=HERBIVORE,
    reproduces_sexually=True,
    initial_energy=C.CARNIVORE_INITIAL_ENERGY,
    max_energy=C.CARNIVORE_MAX_ENERGY,
    size=C.CARNIVORE_SIZE,
    max_speed_min=C.CARNIVORE_MAX_SPEED_MIN,
    max_speed_range=C.CARNIVORE_MAX_SPEED_RANGE,
    perception_radius=C.CARNIVORE_PERCEPTION_RADIUS,
    hunger_threshold=C.CARNIVORE_HUNGER_THRESHOLD,
    feed_amount=C.CARNIVORE_HUNT_AMOUNT,
    feed_cooldown=C.CARNIVORE_HUNT_COOLDOWN_SECONDS,
    contact_epsilon=C.CARNIVORE_CONTACT_EPSILON,
    reproduction_threshold=C.CARNIVORE_REPRODUCTION_THRESHOLD,
    reproduction_cooldown=C.CARNIVORE_REPRODUCTION_COOLDOWN_SECONDS,
    reproduction_energy_cost=C.CARNIVORE_REPRODUCTION_ENERGY_COST,
)

TRAITS_BY_SPECIES = {
    PLANT: PLANT_TRAITS,
    HERBIVORE: HERBIVORE_TRAITS,
    CARNIVORE: CARNIVORE_TRAITS,
}

def get_traits(species):
    return TRAITS_BY_SPECIES[species]
