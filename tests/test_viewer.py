"""Tests for the viewer pieces that do not need a display."""

import pytest

import constants as C
import traits as T
from camera import Camera
from renderer import Renderer
from ui import build_hud_lines


def test_camera_round_trip_at_center():
    camera = Camera()
    assert camera.world_to_screen(0.0, 0.0) == (C.SCREEN_WIDTH // 2, C.SCREEN_HEIGHT // 2)
    world_x, world_z = camera.screen_to_world(C.SCREEN_WIDTH / 2 + C.PIXELS_PER_UNIT, C.SCREEN_HEIGHT / 2)
    assert world_x == pytest.approx(1.0)
    assert world_z == pytest.approx(0.0)


def test_camera_pan_is_clamped():
    camera = Camera()
    camera.pan(10 ** 6, -10 ** 6)
    assert camera.x == C.WORLD_HALF_EXTENT
    assert camera.z == -C.WORLD_HALF_EXTENT


def test_camera_zoom_limits():
    camera = Camera()
    for _ in range(100):
        camera.zoom_in()
    assert camera.zoom == C.CAMERA_MAX_ZOOM
    for _ in range(100):
        camera.zoom_out()
    assert camera.zoom == C.CAMERA_MIN_ZOOM


def test_renderer_tracks_world(world, spawn):
    renderer = Renderer(Camera())
    world.add_listener(renderer)
    herbivore = spawn(T.HERBIVORE, x=1.0)
    herbivore.velocity[:] = (1.0, 0.0, 0.0)

    world.step(0.1)

    sprite = renderer.sprites[herbivore.id]
    assert sprite.species == T.HERBIVORE
    assert sprite.position[0] == pytest.approx(herbivore.position[0])

    world.reset(populate=False)
    assert renderer.sprites == {}


def test_click_toggles_focus(world, spawn):
    camera = Camera()
    renderer = Renderer(camera)
    world.add_listener(renderer)
    plant = spawn(T.PLANT, size=1.0)
    herbivore = spawn(T.HERBIVORE, x=0.2)
    click = camera.world_to_screen(0.2, 0.0)

    renderer.handle_click(click, world)
    assert world.debug_focused_creature_id == herbivore.id

    renderer.handle_click(click, world)
    assert world.debug_focused_creature_id is None
    assert plant.id in renderer.sprites


def test_hud_lines(world, spawn):
    herbivore = spawn(T.HERBIVORE)
    world.focus_creature(herbivore.id)
    world.step(0.1)

    lines = build_hud_lines(world)

    assert lines[0].startswith("Time:")
    assert "Herbivores: 1" in lines[1]
    assert any(line.startswith("Focus: herbivore") for line in lines)
