#main.py

import argparse
import cProfile
import pstats
import matplotlib
import pygame
import constants as C
import logger
from camera import Camera
from population_history import PopulationHistory
from renderer import Renderer
from ui import draw_hud
from world import World

SPEED_KEYS = {
    pygame.K_0: 0, pygame.K_1: 1, pygame.K_2: 2,
    pygame.K_3: 3, pygame.K_4: 4, pygame.K_5: 5,
}

# key -> (environment parameter, step)
ENVIRONMENT_KEYS = {
    pygame.K_t: ("temperature", C.UI_TEMPERATURE_STEP),
    pygame.K_g: ("temperature", -C.UI_TEMPERATURE_STEP),
    pygame.K_y: ("rainfall", C.UI_RAINFALL_STEP),
    pygame.K_h: ("rainfall", -C.UI_RAINFALL_STEP),
    pygame.K_u: ("pollution", C.UI_POLLUTION_STEP),
    pygame.K_j: ("pollution", -C.UI_POLLUTION_STEP),
}

def initialize_simulation():
    logger.log("Attempting to initialize Pygame...")
    pygame.init()
    logger.log("Pygame initialized successfully.")
    logger.log(f"Creating display surface with width: {C.SCREEN_WIDTH} and height: {C.SCREEN_HEIGHT}")
    screen = pygame.display.set_mode((C.SCREEN_WIDTH, C.SCREEN_HEIGHT))
    pygame.display.set_caption("Eco-System Simulation")
    font = pygame.font.Font(None, C.UI_FONT_SIZE)
    logger.log("Display surface and font created.")
    return screen, font

def nudge_environment(world, name, step):
    current = world.environment.get_state()[name]
    world.set_environment_param(name, current + step)

def handle_key(world, key):
    if key == pygame.K_SPACE:
        world.toggle_pause()
    elif key in SPEED_KEYS:
        world.time_manager.set_speed_level(SPEED_KEYS[key])
    elif key == pygame.K_r:
        world.reset()
    elif key in ENVIRONMENT_KEYS:
        name, step = ENVIRONMENT_KEYS[key]
        nudge_environment(world, name, step)

def run_simulation(seed, history):
    screen, font = initialize_simulation()
    clock = pygame.time.Clock()
    camera = Camera()
    renderer = Renderer(camera)
    world = World(seed=seed, listeners=[renderer, history])
    world.populate_world()

    logger.log("Starting main simulation loop...")
    logger.log("CONTROLS: [SPACE] Pause, [0-5] Speed, [R] Reset, [T/G] Temperature, [Y/H] Rainfall, [U/J] Pollution, [Click] Focus.")

    running = True
    while running:
        clock.tick(C.CLOCK_TICK_RATE)

        for event in pygame.event.get():
            if event.type == pygame.QUIT: running = False
            if event.type == pygame.MOUSEBUTTONDOWN:
                if event.button == 1: renderer.handle_click(event.pos, world)
                elif event.button == 3 or event.button == 4: camera.zoom_in()
                elif event.button == 5: camera.zoom_out()
            if event.type == pygame.KEYDOWN:
                handle_key(world, event.key)

        keys = pygame.key.get_pressed()
        if keys[pygame.K_LEFT]: camera.pan(-C.CAMERA_PANSPEED_PIXELS, 0)
        if keys[pygame.K_RIGHT]: camera.pan(C.CAMERA_PANSPEED_PIXELS, 0)
        if keys[pygame.K_UP]: camera.pan(0, -C.CAMERA_PANSPEED_PIXELS)
        if keys[pygame.K_DOWN]: camera.pan(0, C.CAMERA_PANSPEED_PIXELS)

        # --- Simulation Logic (The "Update" part) ---
        world.update()

        # --- Drawing (The "Render" part) ---
        screen.fill(C.COLOR_VOID)
        renderer.draw(screen, world.debug_focused_creature_id)
        draw_hud(screen, font, world)
        pygame.display.flip()

    logger.log("Main simulation loop ended.")

def run_headless(seconds, seed, history):
    """Steps the world with a fixed time step, as fast as possible, without a window."""
    world = World(seed=seed, listeners=[history])
    world.populate_world()
    logger.log(f"Running headless for {seconds:.1f} simulated seconds (seed={seed}).")
    while world.current_time < seconds:
        world.step(C.HEADLESS_STEP_SECONDS)
    world.print_population_statistics()
    return world

def shutdown_simulation():
    logger.log("Quitting Pygame...")
    pygame.quit()
    logger.log("Simulation ended cleanly.")

def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Predator-prey-plant ecosystem simulation.")
    parser.add_argument("--headless", action="store_true", help="run without a window")
    parser.add_argument("--seconds", type=float, default=120.0, help="simulated seconds to run in headless mode")
    parser.add_argument("--seed", type=int, default=C.DEFAULT_SEED, help="seed for a reproducible run")
    parser.add_argument("--chart", default=C.CHART_FILE_PATH, help="where to save the population chart on exit")
    parser.add_argument("--profile", action="store_true", help="print a cProfile report on exit")
    return parser.parse_args(argv)

def main(args):
    logger.log("--- Simulation Start ---")
    history = PopulationHistory()
    if args.headless:
        matplotlib.use("Agg")
        run_headless(args.seconds, args.seed, history)
    else:
        run_simulation(args.seed, history)
        shutdown_simulation()
    history.generate_and_save_population_graph(args.chart)
    logger.log("--- Simulation Exit ---")

if __name__ == '__main__':
    args = parse_args()
    if not args.profile:
        main(args)
    else:
        profiler = cProfile.Profile()
        try:
            profiler.runcall(main, args)
        finally:
            print("\n\n--- PROFILER REPORT ---")
            stats = pstats.Stats(profiler)
            # Sort the stats by the cumulative time spent in each function
            stats.sort_stats(pstats.SortKey.CUMULATIVE)
            stats.print_stats(C.PROFILER_PRINT_LINE_COUNT)
