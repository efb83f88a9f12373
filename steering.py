# steering.py

import numpy as np
import constants as C

def limit(vector, max_length):
    """Returns the vector scaled down so its length does not exceed max_length."""
    max_length = max(0.0, max_length)
    length = np.linalg.norm(vector)
    if length > max_length and length > 0:
        return vector * (max_length / length)
    return vector

def direction_or_fallback(vector, creature):
    """
    Normalizes a direction. A zero-length direction (e.g. the target sits exactly
    on the creature) falls back to the creature's last heading, then to a fixed axis.
    """
    length = np.linalg.norm(vector)
    if length > 1e-9:
        return vector / length
    if creature.heading is not None:
        return creature.heading.copy()
    return np.array(C.FALLBACK_HEADING, dtype=np.float64)

def _steer_towards(creature, desired_velocity):
    steer = limit(desired_velocity - creature.velocity, creature.max_force)
    creature.apply_force(steer)
    return steer

def wander(creature, current_time, rng):
    """Keeps a random horizontal heading, re-rolled every few seconds, and steers along it."""
    if (creature.last_wander_change is None or creature.heading is None or
            current_time - creature.last_wander_change > C.WANDER_CHANGE_INTERVAL_SECONDS):
        angle = rng.uniform(0.0, 2.0 * np.pi)
        creature.heading = np.array([np.cos(angle), 0.0, np.sin(angle)])
        creature.last_wander_change = current_time

    desired_velocity = creature.heading * creature.max_speed * C.WANDER_SPEED_FRACTION
    _steer_towards(creature, desired_velocity)

    # A small forward push every tick so the creature never stalls.
    forward = direction_or_fallback(creature.velocity, creature)
    creature.apply_force(forward * creature.max_force * C.WANDER_FORWARD_BIAS_FRACTION)
    creature.steering_mode = "wandering"

def seek(creature, target_position):
    direction = direction_or_fallback(np.asarray(target_position) - creature.position, creature)
    steer = _steer_towards(creature, direction * creature.max_speed)
    creature.steering_mode = "seeking"
    return steer

def flee(creature, threat_position):
    direction = direction_or_fallback(creature.position - np.asarray(threat_position), creature)
    steer = _steer_towards(creature, direction * creature.max_speed)
    creature.steering_mode = "fleeing"
    return steer
