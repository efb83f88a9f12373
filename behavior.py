# behavior.py

import constants as C
import logger as log
import steering
from creatures import AIState
from species import get_behavior

FOOD_STATES = (AIState.SEEKING_FOOD, AIState.EATING)
MATE_STATES = (AIState.SEEKING_MATE, AIState.REPRODUCING)

def _flee_exit_radius(creature):
    return creature.flee_radius * C.FLEE_EXIT_RADIUS_FACTOR

def _threat_candidates(creature, world):
    candidates = []
    for species in creature.traits.threat_species:
        candidates.extend(world.registry.species(species))
    return candidates

def find_threat(creature, world):
    """
    Returns the threat this creature should be running from, updating its memory.
    A remembered threat is kept until it is more than 1.5 flee radii away, so the
    creature does not flicker between fleeing and feeding at the boundary.
    """
    threat = world.registry.get_alive(creature.threat_id)
    if threat is not None and creature.distance_to(threat) <= _flee_exit_radius(creature):
        return threat

    threat = world.find_nearest_creature(creature, _threat_candidates(creature, world), creature.flee_radius)
    creature.threat_id = threat.id if threat is not None else None
    return threat

def _mate_candidates(creature, world):
    now = world.current_time
    return [c for c in world.registry.species(creature.species)
            if c is not creature and c.can_reproduce(now)]

def _remembered_food(creature, world):
    return world.registry.get_alive(creature.food_target_id)

def _remembered_mate(creature, world):
    mate = world.registry.get_alive(creature.mate_target_id)
    if mate is not None and not mate.can_reproduce(world.current_time):
        return None
    return mate

def decide_next_state(creature, world):
    """Picks the state for this tick. Priority: dead, flee, post-mating display, eat, mate, wander."""
    if creature.is_dead():
        return AIState.DEAD
    if not creature.traits.mobile:
        return AIState.IDLE

    now = world.current_time

    if creature.traits.can_flee and find_threat(creature, world) is not None:
        return AIState.FLEEING

    if now < creature.reproducing_until:
        return AIState.REPRODUCING

    if creature.is_hungry():
        food = _remembered_food(creature, world)
        if food is not None and creature.distance_to(food) < creature.contact_distance(food):
            return AIState.EATING
        return AIState.SEEKING_FOOD

    if creature.traits.reproduces_sexually and creature.can_reproduce(now):
        mate = _remembered_mate(creature, world)
        if mate is not None and creature.distance_to(mate) < creature.mate_reach(mate):
            return AIState.REPRODUCING
        return AIState.SEEKING_MATE

    return AIState.WANDERING

def set_state(creature, new_state, world):
    """Switches state, forgetting memory that belongs to the state group being left."""
    old_state = creature.state
    if old_state == new_state:
        return
    if new_state not in FOOD_STATES:
        creature.food_target_id = None
    if new_state not in MATE_STATES:
        creature.mate_target_id = None
    if new_state != AIState.FLEEING:
        creature.threat_id = None
    creature.state = new_state
    if world.is_focused(creature):
        log.log(f"DEBUG ({creature.id}): State {old_state} -> {new_state}. Energy={creature.energy:.2f}")

def _redecide(creature, world, time_step, allow_redecide):
    """Re-runs the decision right away so no tick is wasted idling."""
    set_state(creature, decide_next_state(creature, world), world)
    if allow_redecide:
        execute_state_action(creature, world, time_step, allow_redecide=False)

def _seek_food(creature, world, time_step, allow_redecide):
    food = _remembered_food(creature, world)
    if food is not None and creature.distance_to(food) > creature.perception_radius:
        food = None
    if food is None:
        candidates = world.registry.species(creature.traits.food_species)
        food = world.find_nearest_creature(creature, candidates, creature.perception_radius)

    if food is None:
        creature.food_target_id = None
        set_state(creature, AIState.WANDERING, world)
        steering.wander(creature, world.current_time, world.rng)
        return

    creature.food_target_id = food.id
    if creature.distance_to(food) < creature.contact_distance(food):
        set_state(creature, AIState.EATING, world)
        _eat(creature, world, time_step, allow_redecide)
    else:
        steering.seek(creature, food.position)

def _eat(creature, world, time_step, allow_redecide):
    food = _remembered_food(creature, world)
    if food is None:
        creature.food_target_id = None
        _redecide(creature, world, time_step, allow_redecide)
        return

    if creature.distance_to(food) >= creature.contact_distance(food):
        # The food moved away; chase it again.
        set_state(creature, AIState.SEEKING_FOOD, world)
        creature.food_target_id = food.id
        steering.seek(creature, food.position)
        return

    get_behavior(creature.species).feed(creature, food, world)
    if not creature.is_hungry() or food.is_dead():
        creature.food_target_id = None

def _flee(creature, world, time_step, allow_redecide):
    threat = world.registry.get_alive(creature.threat_id)
    if threat is None:
        creature.threat_id = None
        _redecide(creature, world, time_step, allow_redecide)
        return

    steering.flee(creature, threat.position)
    if creature.distance_to(threat) > _flee_exit_radius(creature):
        if world.is_focused(creature):
            log.log(f"DEBUG ({creature.id}): Escaped from {threat.species} {threat.id}.")
        creature.threat_id = None

def _seek_mate(creature, world, time_step, allow_redecide):
    mate = _remembered_mate(creature, world)
    if mate is not None and creature.distance_to(mate) > creature.perception_radius:
        mate = None
    if mate is None:
        mate = world.find_nearest_creature(creature, _mate_candidates(creature, world), creature.perception_radius)

    if mate is None:
        creature.mate_target_id = None
        set_state(creature, AIState.WANDERING, world)
        steering.wander(creature, world.current_time, world.rng)
        return

    creature.mate_target_id = mate.id
    if creature.distance_to(mate) < creature.mate_reach(mate):
        set_state(creature, AIState.REPRODUCING, world)
        _reproduce(creature, world, time_step, allow_redecide)
    else:
        steering.seek(creature, mate.position)

def _reproduce(creature, world, time_step, allow_redecide):
    mate = world.registry.get_alive(creature.mate_target_id)
    if mate is None:
        creature.mate_target_id = None
        if world.current_time < creature.reproducing_until:
            # Post-mating display: nothing to do until it expires.
            return
        _redecide(creature, world, time_step, allow_redecide)
        return

    if creature.distance_to(mate) >= creature.mate_reach(mate):
        set_state(creature, AIState.SEEKING_MATE, world)
        creature.mate_target_id = mate.id
        steering.seek(creature, mate.position)
        return

    offspring = get_behavior(creature.species).reproduce(creature, mate, world)
    if offspring is None:
        # The partner was not eligible after all; look again next tick.
        creature.mate_target_id = None

_ACTIONS = {
    AIState.SEEKING_FOOD: _seek_food,
    AIState.EATING: _eat,
    AIState.FLEEING: _flee,
    AIState.SEEKING_MATE: _seek_mate,
    AIState.REPRODUCING: _reproduce,
}

def execute_state_action(creature, world, time_step, allow_redecide=True):
    """Runs the action for the creature's current state."""
    if creature.state == AIState.WANDERING:
        steering.wander(creature, world.current_time, world.rng)
        return
    action = _ACTIONS.get(creature.state)
    if action is not None:
        action(creature, world, time_step, allow_redecide)

def think(creature, world, time_step):
    """One decision plus the matching action. Called once per tick per mobile creature."""
    set_state(creature, decide_next_state(creature, world), world)
    execute_state_action(creature, world, time_step)
