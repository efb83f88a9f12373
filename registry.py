# registry.py
import numpy as np
import traits as T
import logger as log

class CreatureRegistry:
    """
    The World's arena of live creatures, keyed by id, plus one index list per
    species. The species lists are derived indices: they are only changed
    together with the id table, never on their own.
    """
    def __init__(self):
        self.creatures = {} # id -> Creature, in insertion order
        self.by_species = {species: [] for species in T.ALL_SPECIES}
        self.species_index = {} # id -> slot in its species list

    def add(self, creature):
        """Registers a creature that already carries its id."""
        if creature.id in self.creatures:
            log.log(f"ERROR: Creature id {creature.id} is already registered. Insert ignored.")
            return False
        subset = self.by_species[creature.species]
        self.species_index[creature.id] = len(subset)
        subset.append(creature)
        self.creatures[creature.id] = creature
        return True

    def remove(self, creature):
        """
        Removes a creature using the 'swap and pop' method on its species list.
        The creature that gets moved into the vacated slot has its slot updated.
        """
        if self.creatures.get(creature.id) is not creature:
            log.log(f"ERROR: Attempted to remove an unregistered creature. ID: {creature.id}")
            return False

        subset = self.by_species[creature.species]
        idx_to_remove = self.species_index.pop(creature.id)
        last_idx = len(subset) - 1
        if idx_to_remove != last_idx:
            last_creature = subset[last_idx]
            subset[idx_to_remove] = last_creature
            self.species_index[last_creature.id] = idx_to_remove
        subset.pop()

        del self.creatures[creature.id]
        return True

    def get(self, creature_id):
        if creature_id is None:
            return None
        return self.creatures.get(creature_id)

    def get_alive(self, creature_id):
        """Looks up an id and returns the creature only if it is still alive."""
        creature = self.get(creature_id)
        if creature is None or creature.is_dead():
            return None
        return creature

    def species(self, species):
        """The live list for one species. Callers inside the core must not mutate it."""
        return self.by_species[species]

    def snapshot(self):
        """A stable copy of all creatures, safe to iterate while the registry changes."""
        return list(self.creatures.values())

    def count(self, species):
        return len(self.by_species[species])

    def clear(self):
        self.creatures.clear()
        self.species_index.clear()
        for subset in self.by_species.values():
            subset.clear()

    def positions(self, creatures):
        """Stacks creature positions into an (n, 3) array for vectorized distance checks."""
        if not creatures:
            return np.zeros((0, 3), dtype=np.float64)
        return np.stack([c.position for c in creatures])

    def __iter__(self):
        return iter(self.creatures.values())

    def __len__(self):
        return len(self.creatures)

    def __contains__(self, creature_id):
        return creature_id in self.creatures
