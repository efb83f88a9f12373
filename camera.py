#camera.py

import pygame
import constants as C

class Camera:
    """Top-down view of the ground plane. Screen x follows world x, screen y follows world z."""
    def __init__(self):
        self.x = 0.0
        self.z = 0.0
        self.zoom = 1.0
        print(f"Camera initialized at world coordinates ({self.x:.0f}, {self.z:.0f}) with zoom {self.zoom:.2f}")

    def world_to_screen(self, world_x, world_z):
        screen_x = (world_x - self.x) * self.zoom * C.PIXELS_PER_UNIT + C.SCREEN_WIDTH / 2
        screen_y = (world_z - self.z) * self.zoom * C.PIXELS_PER_UNIT + C.SCREEN_HEIGHT / 2
        return int(screen_x), int(screen_y)

    def screen_to_world(self, screen_x, screen_y):
        """Converts a point from screen coordinates to world (x, z) coordinates."""
        world_x = (screen_x - C.SCREEN_WIDTH / 2) / (self.zoom * C.PIXELS_PER_UNIT) + self.x
        world_z = (screen_y - C.SCREEN_HEIGHT / 2) / (self.zoom * C.PIXELS_PER_UNIT) + self.z
        return world_x, world_z

    def scale(self, value):
        return int(value * self.zoom * C.PIXELS_PER_UNIT)

    def pan(self, dx, dy):
        """Pans the camera by a screen offset and keeps its center inside the world."""
        self.x += dx / (self.zoom * C.PIXELS_PER_UNIT)
        self.z += dy / (self.zoom * C.PIXELS_PER_UNIT)
        self.x = max(-C.WORLD_HALF_EXTENT, min(C.WORLD_HALF_EXTENT, self.x))
        self.z = max(-C.WORLD_HALF_EXTENT, min(C.WORLD_HALF_EXTENT, self.z))

    def zoom_in(self):
        """Zooms in, clamping to a maximum zoom level."""
        self.zoom *= (1 + C.CAMERA_ZOOM_SPEED)
        self.zoom = min(self.zoom, C.CAMERA_MAX_ZOOM) # Clamp to max zoom

    def zoom_out(self):
        """Zooms out, clamping to a minimum zoom level."""
        self.zoom *= (1 - C.CAMERA_ZOOM_SPEED)
        self.zoom = max(self.zoom, C.CAMERA_MIN_ZOOM) # Clamp to min zoom

    def draw_ground(self, screen):
        start_x, start_y = self.world_to_screen(-C.WORLD_HALF_EXTENT, -C.WORLD_HALF_EXTENT)
        extent = self.scale(C.WORLD_HALF_EXTENT * 2)
        ground_rect = pygame.Rect(start_x, start_y, extent, extent)
        pygame.draw.rect(screen, C.COLOR_GROUND, ground_rect)
        pygame.draw.rect(screen, C.COLOR_BLACK, ground_rect, 1)
