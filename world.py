#world.py

import random
import time
import numpy as np
import constants as C
import traits as T
import steering
import logger as log
from behavior import think, find_threat, set_state
from creatures import AIState, create_creature
from environment import Environment
from registry import CreatureRegistry
from species import get_behavior
from time_manager import TimeManager

class World:
    def __init__(self, seed=C.DEFAULT_SEED, listeners=None, clock=time.perf_counter,
                 speed=C.DEFAULT_SIMULATION_SPEED, paused=False):
        log.log("Creating a new World...")
        self.seed = seed
        self.rng = random.Random(seed) # Every random draw in the simulation goes through this
        self.time_manager = TimeManager(clock=clock, speed=speed, paused=paused)
        log.set_time_manager(self.time_manager)
        self.environment = Environment(self.rng)
        self.registry = CreatureRegistry()
        self.newborns = [] # Offspring queued during a tick, inserted after the creature pass
        self.listeners = list(listeners) if listeners else []
        self.next_creature_id = 0

        self.debug_focused_creature_id = None
        self.last_reported = {} # id -> (position, size) last sent to listeners
        self.last_statistics = None

        self.last_log_time_seconds = 0.0
        self.births_this_period = {species: 0 for species in T.ALL_SPECIES}
        self.deaths_this_period = {} # cause -> count
        self.dropped_births_this_period = 0
        log.log("World created. Creature lists are empty.")

    @property
    def current_time(self):
        return self.time_manager.total_sim_seconds

    # --- Read-only views for external collaborators (copies) ---
    @property
    def creatures(self):
        return self.registry.snapshot()

    @property
    def plants(self):
        return list(self.registry.species(T.PLANT))

    @property
    def herbivores(self):
        return list(self.registry.species(T.HERBIVORE))

    @property
    def carnivores(self):
        return list(self.registry.species(T.CARNIVORE))

    def add_listener(self, listener):
        self.listeners.append(listener)

    def _notify(self, callback_name, *args):
        for listener in self.listeners:
            getattr(listener, callback_name)(*args)

    # --- Creation & destruction authority ---
    def _get_next_id(self):
        creature_id = self.next_creature_id
        self.next_creature_id += 1
        return creature_id

    def add_creature(self, creature):
        """Assigns an id, indexes the creature and tells the listeners about it."""
        creature.id = self._get_next_id()
        self.registry.add(creature)
        position = tuple(float(v) for v in creature.position)
        self.last_reported[creature.id] = (creature.position.copy(), creature.size)
        self._notify('on_creature_added', creature.id, creature.species, position, creature.size)
        return creature

    def queue_birth(self, offspring, parents=()):
        """Offspring wait here until every creature has been updated this tick."""
        if offspring is not None:
            self.newborns.append(offspring)

    def remove_creature(self, creature):
        if not self.registry.remove(creature):
            return False
        self.last_reported.pop(creature.id, None)
        if self.debug_focused_creature_id == creature.id:
            log.log(f"DEBUG: Focused creature {creature.id} was removed ({creature.death_cause}). Focus cleared.")
            self.debug_focused_creature_id = None
        self._notify('on_creature_removed', creature.id)
        return True

    def populate_world(self, plant_count=C.INITIAL_PLANT_COUNT, herbivore_count=C.INITIAL_HERBIVORE_COUNT,
                       carnivore_count=C.INITIAL_CARNIVORE_COUNT):
        log.log("Populating the world with initial creatures...")
        for species, count in ((T.PLANT, plant_count), (T.HERBIVORE, herbivore_count), (T.CARNIVORE, carnivore_count)):
            for _ in range(max(0, count)):
                self.add_creature(create_creature(species, self.rng))
        log.log(f"World population complete. Plants: {plant_count}, Herbivores: {herbivore_count}, Carnivores: {carnivore_count}.")

    # --- Spatial queries ---
    def find_nearest_creature(self, source, candidates, max_distance):
        """
        Returns the nearest live candidate (other than source) strictly closer than
        max_distance, or None. Ties go to the candidate listed first.
        """
        live = [c for c in candidates if c is not source and not c.is_dead()]
        if not live:
            return None
        deltas = self.registry.positions(live) - source.position
        dist_sq = np.einsum('ij,ij->i', deltas, deltas)
        nearest_idx = int(np.argmin(dist_sq))
        if dist_sq[nearest_idx] < max_distance * max_distance:
            return live[nearest_idx]
        return None

    def get_creatures_in_radius(self, position, radius, candidates):
        """All live candidates strictly within radius of position. Order is unspecified."""
        live = [c for c in candidates if not c.is_dead()]
        if not live:
            return []
        deltas = self.registry.positions(live) - np.asarray(position, dtype=np.float64)
        dist_sq = np.einsum('ij,ij->i', deltas, deltas)
        inside = np.flatnonzero(dist_sq < radius * radius)
        return [live[i] for i in inside]

    def get_creature_by_id(self, creature_id):
        return self.registry.get(creature_id)

    def get_creature_details(self, creature_id):
        """A plain-dict description of one creature for inspection panels."""
        creature = self.registry.get(creature_id)
        if creature is None:
            return None
        return {
            'id': creature.id,
            'species': creature.species,
            'state': creature.state,
            'energy': creature.energy,
            'max_energy': creature.max_energy,
            'age': creature.age,
            'max_age': creature.max_age,
            'size': creature.size,
            'position': tuple(float(v) for v in creature.position),
        }

    # --- Debug focus ---
    def focus_creature(self, creature_id):
        if creature_id not in self.registry:
            log.log(f"WARNING: Cannot focus on unknown creature {creature_id}.")
            return False
        self.debug_focused_creature_id = creature_id
        log.log(f"DEBUG: Now focusing on creature ID: {creature_id}. Detailed logs enabled.")
        return True

    def clear_focus(self):
        if self.debug_focused_creature_id is not None:
            log.log(f"DEBUG: Stopped focusing on creature ID: {self.debug_focused_creature_id}. Detailed logs disabled.")
        self.debug_focused_creature_id = None

    def is_focused(self, creature):
        return creature is not None and creature.id is not None and creature.id == self.debug_focused_creature_id

    # --- Simulation step ---
    def update(self):
        """Measures the wall clock and advances the simulation accordingly. For real-time drivers."""
        scaled_delta_time = self.time_manager.next_delta()
        if scaled_delta_time > 0:
            self.step(scaled_delta_time)
        return scaled_delta_time

    def step(self, time_step):
        """
        Advances the world by time_step simulated seconds. This is the single entry
        point for every driver (real-time loop, headless loop, tests).
        Returns the statistics snapshot, or None if nothing happened.
        """
        if self.time_manager.is_paused or time_step <= 0:
            return None

        self.time_manager.update_total_time(time_step)
        self.environment.update(time_step)

        # Iterate a stable snapshot; creatures killed earlier in the pass are skipped.
        for creature in self.registry.snapshot():
            if creature.is_dead():
                continue
            self._run_isolated(creature, self._update_creature, creature, time_step)

        self._resolve_interactions()
        self._process_births()
        self._remove_dead()
        self.environment.trigger_random_events(time_step)
        self._publish_render_updates()
        return self._publish_statistics()

    def _run_isolated(self, creature, fn, *args):
        """Runs one creature's work so that a failure cannot abort the tick for everyone else."""
        try:
            fn(*args)
        except Exception as e:
            log.log(f"ERROR: Update of {creature.species} {creature.id} failed: {e!r}. Skipping it this tick.")

    def _update_creature(self, creature, time_step):
        creature.integrate(time_step)
        if creature.is_dead():
            self._mark_dead(creature)
            return

        behavior = get_behavior(creature.species)
        if behavior.passive_update is not None:
            behavior.passive_update(creature, self, time_step)
        if creature.traits.mobile:
            think(creature, self, time_step)

    def _mark_dead(self, creature):
        cause = "old_age" if creature.age > creature.max_age else "starvation"
        if creature.die(cause) and self.is_focused(creature):
            log.log(f"DEATH ({creature.id}): {creature.species} died of {cause}. Age: {creature.age:.1f}s")

    def _resolve_interactions(self):
        """
        Catches threats that moved into range after their prey already decided this
        tick. The prey switches to fleeing and gets a flee force for its next integrate.
        """
        for species in T.ALL_SPECIES:
            if not T.get_traits(species).can_flee:
                continue
            for prey in list(self.registry.species(species)):
                if prey.is_dead() or prey.state == AIState.FLEEING:
                    continue
                self._run_isolated(prey, self._startle, prey)

    def _startle(self, prey):
        threat = find_threat(prey, self)
        if threat is not None:
            set_state(prey, AIState.FLEEING, self)
            prey.threat_id = threat.id
            steering.flee(prey, threat.position)

    def _process_births(self):
        """Inserts queued offspring, respecting the soft population cap."""
        for creature in self.newborns:
            if len(self.registry) >= C.MAX_POPULATION:
                self.dropped_births_this_period += 1
                log.log(f"WARNING: Population cap of {C.MAX_POPULATION} reached. A {creature.species} birth was dropped.")
                continue
            self.add_creature(creature)
            self.births_this_period[creature.species] += 1
        self.newborns.clear()

    def _remove_dead(self):
        """Mark-then-compact: everything that died during this tick leaves the world here."""
        for creature in self.registry.snapshot():
            if not creature.is_dead():
                continue
            self._mark_dead(creature)
            cause = creature.death_cause or "unknown"
            self.deaths_this_period[cause] = self.deaths_this_period.get(cause, 0) + 1
            self.remove_creature(creature)

    def _publish_render_updates(self):
        for creature in self.registry:
            last_position, last_size = self.last_reported[creature.id]
            delta = creature.position - last_position
            moved = float(np.dot(delta, delta)) > C.POSITION_CHANGE_EPSILON_SQ
            resized = abs(creature.size - last_size) > C.SIZE_CHANGE_EPSILON
            if not (moved or resized):
                continue
            if moved:
                last_position = creature.position.copy()
                self._notify('on_creature_moved', creature.id, tuple(float(v) for v in creature.position))
            if resized:
                last_size = creature.size
                self._notify('on_creature_resized', creature.id, creature.size)
            self.last_reported[creature.id] = (last_position, last_size)

    def get_statistics(self):
        return {
            'sim_time': self.current_time,
            'plant_count': self.registry.count(T.PLANT),
            'herbivore_count': self.registry.count(T.HERBIVORE),
            'carnivore_count': self.registry.count(T.CARNIVORE),
            'total_creatures': len(self.registry),
            'environment': self.environment.get_state(),
        }

    def _publish_statistics(self):
        snapshot = self.get_statistics()
        self.last_statistics = snapshot
        self._notify('on_statistics', snapshot)

        if self.current_time - self.last_log_time_seconds >= C.STATS_LOG_INTERVAL_SECONDS:
            self.print_population_statistics()
            self.last_log_time_seconds = self.current_time
            self.births_this_period = {species: 0 for species in T.ALL_SPECIES}
            self.deaths_this_period = {}
            self.dropped_births_this_period = 0
        return snapshot

    # --- Control surface ---
    def pause(self):
        self.time_manager.pause()

    def resume(self):
        self.time_manager.resume()

    def toggle_pause(self):
        self.time_manager.toggle_pause()

    def set_speed(self, speed):
        return self.time_manager.set_speed(speed)

    def set_environment_param(self, name, value):
        return self.environment.set_param(name, value)

    def reset(self, populate=True):
        """Clears every creature and restarts the clock and the environment."""
        log.log("Event: Resetting the world...")
        self.debug_focused_creature_id = None
        for creature in self.registry.snapshot():
            self.remove_creature(creature)
        self.registry.clear()
        self.newborns.clear()
        self.last_reported.clear()
        if self.seed is not None:
            self.rng.seed(self.seed)
        self.time_manager.reset()
        self.environment = Environment(self.rng)
        self.last_statistics = None
        self.last_log_time_seconds = 0.0
        self.births_this_period = {species: 0 for species in T.ALL_SPECIES}
        self.deaths_this_period = {}
        self.dropped_births_this_period = 0
        self._notify('on_reset')
        if populate:
            self.populate_world()

    def print_population_statistics(self):
        """Prints a formatted summary of the world's population statistics."""
        period_minutes = C.STATS_LOG_INTERVAL_SECONDS / 60.0
        log.log("--- Population Statistics ---")
        log.log(f"  > Report for t={self.current_time:.1f}s (covering the last {period_minutes:.1f} minutes)")
        log.log(f"  Living Plants: {self.registry.count(T.PLANT):,}")
        log.log(f"  Living Herbivores: {self.registry.count(T.HERBIVORE):,}")
        log.log(f"  Living Carnivores: {self.registry.count(T.CARNIVORE):,}")
        for species, births in self.births_this_period.items():
            log.log(f"  - {species.capitalize()} Births this Period: {births:,}")
        for cause, deaths in sorted(self.deaths_this_period.items()):
            log.log(f"  - Deaths by {cause} this Period: {deaths:,}")
        if self.dropped_births_this_period:
            log.log(f"  - Births dropped by the population cap: {self.dropped_births_this_period:,}")
        log.log("---------------------------")
