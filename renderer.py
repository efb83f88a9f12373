#renderer.py

import pygame
import constants as C
import logger as log
from listeners import WorldListener

class Sprite:
    def __init__(self, species, position, size):
        self.species = species
        self.position = position # (x, y, z) tuple copied from the World
        self.size = size

class Renderer(WorldListener):
    """
    Keeps its own sprite per creature, fed only by World notifications, and
    draws them as discs on the ground plane.
    """
    def __init__(self, camera):
        self.camera = camera
        self.sprites = {} # id -> Sprite

    def on_creature_added(self, creature_id, species, position, size):
        self.sprites[creature_id] = Sprite(species, position, size)

    def on_creature_moved(self, creature_id, position):
        sprite = self.sprites.get(creature_id)
        if sprite is not None:
            sprite.position = position

    def on_creature_resized(self, creature_id, size):
        sprite = self.sprites.get(creature_id)
        if sprite is not None:
            sprite.size = size

    def on_creature_removed(self, creature_id):
        self.sprites.pop(creature_id, None)

    def on_reset(self):
        self.sprites.clear()

    def draw(self, screen, focused_id=None):
        self.camera.draw_ground(screen)
        # Plants first so animals are drawn on top of them.
        for sprite_id, sprite in sorted(self.sprites.items(), key=lambda item: item[1].species != "plant"):
            screen_x, screen_y = self.camera.world_to_screen(sprite.position[0], sprite.position[2])
            radius = max(1, self.camera.scale(sprite.size * 0.5))
            color = C.SPECIES_COLORS.get(sprite.species, C.COLOR_WHITE)
            pygame.draw.circle(screen, color, (screen_x, screen_y), radius)
            if sprite_id == focused_id:
                pygame.draw.circle(screen, C.COLOR_FOCUS_RING, (screen_x, screen_y), radius + 3, 2)

    def pick(self, screen_pos):
        """Returns the id of the topmost sprite under a screen position, or None."""
        world_x, world_z = self.camera.screen_to_world(screen_pos[0], screen_pos[1])
        tolerance = C.CAMERA_CLICK_TOLERANCE_PIXELS / (self.camera.zoom * C.PIXELS_PER_UNIT)
        best_id, best_rank = None, None
        for sprite_id, sprite in self.sprites.items():
            radius = sprite.size * 0.5 + tolerance
            dist_sq = (world_x - sprite.position[0]) ** 2 + (world_z - sprite.position[2]) ** 2
            if dist_sq > radius ** 2:
                continue
            # Animals win over the plant they stand on.
            rank = (sprite.species == "plant", dist_sq)
            if best_rank is None or rank < best_rank:
                best_id, best_rank = sprite_id, rank
        return best_id

    def handle_click(self, screen_pos, world):
        """Toggles the world's debug focus on the creature under the cursor."""
        creature_id = self.pick(screen_pos)
        if creature_id is None:
            return
        sprite = self.sprites[creature_id]
        log.log(f"Clicked on a {sprite.species} at world coordinates ({sprite.position[0]:.1f}, {sprite.position[2]:.1f}).")
        if world.debug_focused_creature_id == creature_id:
            world.clear_focus()
        else:
            world.focus_creature(creature_id)
