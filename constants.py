# constants.py

# =============================================================================
# --- SIMULATION & PERFORMANCE SETTINGS ---
# =============================================================================
CLOCK_TICK_RATE = 60 # Frames per second targeted by the viewer loop
MAX_REAL_DELTA_SECONDS = 0.25 # Cap on one real-time delta to prevent a "spiral of death"
DEFAULT_SIMULATION_SPEED = 1.0
TIME_MULTIPLIERS = {
    0: 0.0, # Frozen (equivalent to pause)
    1: 1.0,
    2: 2.0,
    3: 4.0,
    4: 8.0,
    5: 16.0
}
DEFAULT_SEED = None # None means a fresh, non-reproducible seed per run
HEADLESS_STEP_SECONDS = 1.0 / 60.0 # Fixed step used by the headless driver
MAX_POPULATION = 600 # Soft cap; births beyond it are dropped with a warning
POSITION_CHANGE_EPSILON_SQ = 0.0001 # Squared distance that counts as "moved" for render updates
SIZE_CHANGE_EPSILON = 0.0001 # Size delta that counts as "resized" for render updates
STATS_LOG_INTERVAL_SECONDS = 60.0 # Simulated seconds between population reports
STATS_HISTORY_MAX_LENGTH = 30 # Points kept by the population history ring buffer
STATS_HISTORY_SAMPLE_INTERVAL_SECONDS = 1.0 # Simulated seconds between two history points
PROFILER_PRINT_LINE_COUNT = 15 # Rows shown by the optional --profile report

# =============================================================================
# --- WORLD ---
# =============================================================================
WORLD_HALF_EXTENT = 49.0 # World spans [-49, 49] on the x and z axes, in units
GROUND_LEVEL = 0.0
FALLBACK_HEADING = (1.0, 0.0, 0.0) # Used when a direction has zero length and no heading is known
INITIAL_PLANT_COUNT = 30
INITIAL_HERBIVORE_COUNT = 10
INITIAL_CARNIVORE_COUNT = 3
PLANT_SPAWN_HALF_EXTENT = 25.0
HERBIVORE_SPAWN_HALF_EXTENT = 20.0
CARNIVORE_SPAWN_HALF_EXTENT = 15.0

# =============================================================================
# --- ENVIRONMENT ---
# =============================================================================
ENV_INITIAL_TEMPERATURE = 25.0 # Degrees Celsius
ENV_INITIAL_RAINFALL = 50.0 # mm per day
ENV_INITIAL_LIGHT_LEVEL = 1.0 # 0 (dark) to 1 (bright)
ENV_INITIAL_POLLUTION = 0.0 # 0 (clean) to 1 (highly polluted)
ENV_INITIAL_TIME_OF_DAY = 0.5 # 0 = midnight, 0.5 = noon
ENV_DAY_DURATION_SECONDS = 60.0 # Simulated seconds for a full day-night cycle
ENV_MIN_LIGHT_LEVEL = 0.1
ENV_TEMPERATURE_DRIFT_PER_SECOND = 0.1 # Amplitude of the random temperature walk
ENV_POLLUTION_MIN = 0.0
ENV_POLLUTION_MAX = 1.0
ENV_EDITABLE_PARAMS = ("temperature", "rainfall", "pollution")

# --- Random events ---
DROUGHT_PROBABILITY_PER_SECOND = 0.001
DROUGHT_RAINFALL_FACTOR = 0.1
DROUGHT_MAX_DURATION_SECONDS = 10.0

# =============================================================================
# --- CREATURES (GENERAL) ---
# =============================================================================
CREATURE_DEFAULT_ENERGY = 100.0
CREATURE_DEFAULT_MAX_AGE_SECONDS = 100.0
CREATURE_DEFAULT_PERCEPTION_RADIUS = 5.0
CREATURE_DEFAULT_FLEE_RADIUS = 8.0
CREATURE_DEFAULT_MAX_SPEED = 1.0 # Units per second
CREATURE_DEFAULT_MAX_FORCE = 0.1 # Steering force limit
CREATURE_BASE_METABOLIC_RATE = 0.1 # Energy lost per second by animals

# --- Steering ---
WANDER_CHANGE_INTERVAL_SECONDS = 5.0
WANDER_SPEED_FRACTION = 0.5
WANDER_FORWARD_BIAS_FRACTION = 0.1 # Fraction of max force pushing along the current heading

# --- Behaviour ---
FLEE_EXIT_RADIUS_FACTOR = 1.5 # A threat is forgotten beyond this multiple of the flee radius
REPRODUCING_DISPLAY_SECONDS = 0.5 # Non-actionable "reproducing" display after mating
POST_ACTION_VELOCITY_DAMPING = 0.1 # Velocity multiplier after eating, hunting or mating
OFFSPRING_ENERGY_FRACTION = 0.8 # Fraction of the mating cost handed to the offspring

# =============================================================================
# --- PLANTS ---
# =============================================================================
PLANT_INITIAL_SIZE_MIN = 0.5
PLANT_INITIAL_SIZE_RANGE = 0.5
PLANT_MIN_SIZE = 0.1
PLANT_MAX_SIZE = 2.0
PLANT_ENERGY_PER_SIZE = 20.0 # Initial energy of a spawned plant is size times this
PLANT_MAX_AGE_MIN_SECONDS = 50.0
PLANT_MAX_AGE_RANGE_SECONDS = 50.0
PLANT_GROWTH_RATE = 0.5 # Energy gained per second at full light
PLANT_GROWTH_ENERGY_FRACTION = 0.01 # Fraction of stored energy turned into growth per second
PLANT_GROWTH_ENERGY_COST = 10.0 # Energy cost per unit of size grown
PLANT_SIZE_METABOLISM_RATE = 0.05 # Energy lost per second per unit of size
PLANT_REPRODUCTION_ENERGY_THRESHOLD = 80.0
PLANT_REPRODUCTION_SIZE_FRACTION = 0.8 # Must exceed this fraction of max size to reproduce
PLANT_REPRODUCTION_CHANCE_PER_SECOND = 0.01
PLANT_REPRODUCTION_ENERGY_KEPT = 0.5 # Parent keeps this fraction of its energy
PLANT_OFFSPRING_ENERGY_FRACTION = 0.4 # Of the parent's post-cost energy
PLANT_SEED_SCATTER = 2.0 # Offspring lands within +/- this on x and z
PLANT_SEED_HEIGHT = 0.5
PLANT_MAX_ENERGY = 1000.0

# =============================================================================
# --- HERBIVORES ---
# =============================================================================
HERBIVORE_SIZE = 1.2
HERBIVORE_MAX_SPEED_MIN = 1.5
HERBIVORE_MAX_SPEED_RANGE = 0.5
HERBIVORE_INITIAL_ENERGY = 150.0
HERBIVORE_MAX_ENERGY = 250.0
HERBIVORE_HUNGER_THRESHOLD = 100.0
HERBIVORE_EAT_AMOUNT = 50.0 # Energy gained per bite
HERBIVORE_EAT_COOLDOWN_SECONDS = 1.0
HERBIVORE_PLANT_ENERGY_FRACTION = 0.8 # A bite takes at most this fraction of the plant's energy
HERBIVORE_BITE_LOSS_MULTIPLIER = 1.2 # Plant loses this multiple of the energy gained
HERBIVORE_CONTACT_EPSILON = 0.2
HERBIVORE_PERCEPTION_RADIUS = 10.0
HERBIVORE_FLEE_RADIUS = 12.0
HERBIVORE_REPRODUCTION_THRESHOLD = 200.0
HERBIVORE_REPRODUCTION_COOLDOWN_SECONDS = 15.0
HERBIVORE_REPRODUCTION_ENERGY_COST = 80.0

# =============================================================================
# --- CARNIVORES ---
# =============================================================================
CARNIVORE_SIZE = 1.5
CARNIVORE_MAX_SPEED_MIN = 2.0
CARNIVORE_MAX_SPEED_RANGE = 0.8
CARNIVORE_INITIAL_ENERGY = 200.0
CARNIVORE_MAX_ENERGY = 400.0
CARNIVORE_HUNGER_THRESHOLD = 150.0
CARNIVORE_HUNT_AMOUNT = 100.0 # Energy gained per successful hunt
CARNIVORE_HUNT_COOLDOWN_SECONDS = 5.0
CARNIVORE_HUNT_LOSS_MULTIPLIER = 1.5 # Prey loses this multiple of the energy gained
CARNIVORE_CONTACT_EPSILON = 0.3
CARNIVORE_PERCEPTION_RADIUS = 15.0
CARNIVORE_REPRODUCTION_THRESHOLD = 300.0
CARNIVORE_REPRODUCTION_COOLDOWN_SECONDS = 25.0
CARNIVORE_REPRODUCTION_ENERGY_COST = 120.0

# =============================================================================
# --- UI, CAMERA & COLORS ---
# =============================================================================
SCREEN_WIDTH = 800
SCREEN_HEIGHT = 800
PIXELS_PER_UNIT = 8.0 # Screen pixels per world unit at zoom 1.0
CAMERA_PANSPEED_PIXELS = 15
CAMERA_ZOOM_SPEED = 0.1
CAMERA_MAX_ZOOM = 4.0
CAMERA_MIN_ZOOM = 0.5
CAMERA_CLICK_TOLERANCE_PIXELS = 4
UI_FONT_SIZE = 24
UI_TIME_DISPLAY_POS_X = 10
UI_TIME_DISPLAY_POS_Y = 10
UI_LINE_SPACING = 22
UI_TEMPERATURE_STEP = 1.0
UI_RAINFALL_STEP = 5.0
UI_POLLUTION_STEP = 0.1
COLOR_WHITE = (255, 255, 255); COLOR_BLACK = (0, 0, 0); COLOR_VOID = (10, 0, 20)
COLOR_GROUND = (34, 80, 34)
COLOR_PLANT = (74, 200, 0)
COLOR_HERBIVORE = (60, 120, 255)
COLOR_CARNIVORE = (220, 40, 40)
COLOR_FOCUS_RING = (255, 255, 0)
SPECIES_COLORS = {
    "plant": COLOR_PLANT,
    "herbivore": COLOR_HERBIVORE,
    "carnivore": COLOR_CARNIVORE,
}

# --- Population charts ---
CHART_FILE_PATH = "population_history.png"
CHART_FIGURE_SIZE = (12, 7)
