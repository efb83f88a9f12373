"""Observer interface between the World and its external collaborators.

Renderers, statistics collectors and UIs subclass WorldListener and override
only the callbacks they need. The World hands out copies (positions are fresh
tuples, snapshots are fresh dicts), never its own mutable state.
"""


class WorldListener:
    """Default no-op listener."""

    def on_creature_added(self, creature_id, species, position, size):
        """A creature was inserted into the World."""
        pass

    def on_creature_moved(self, creature_id, position):
        """A creature's position changed beyond the render epsilon."""
        pass

    def on_creature_resized(self, creature_id, size):
        """A creature's size changed."""
        pass

    def on_creature_removed(self, creature_id):
        """A dead creature was removed from the World."""
        pass

    def on_statistics(self, snapshot):
        """Called once per tick with the latest statistics snapshot."""
        pass

    def on_reset(self):
        """The World was reset; all creatures are gone."""
        pass
