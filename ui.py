#ui.py

import constants as C

def build_hud_lines(world):
    """Text lines shown in the top-left corner: time, population, environment and focus."""
    stats = world.last_statistics or world.get_statistics()
    env = stats['environment']
    lines = [
        world.time_manager.get_display_string(),
        f"Plants: {stats['plant_count']}  Herbivores: {stats['herbivore_count']}  Carnivores: {stats['carnivore_count']}",
        f"Temp: {env['temperature']:.1f}C  Rain: {env['rainfall']:.0f}  Light: {env['light_level']:.2f}  Pollution: {env['pollution']:.2f}",
    ]
    if env['drought']:
        lines.append("DROUGHT")

    details = world.get_creature_details(world.debug_focused_creature_id)
    if details is not None:
        lines.append(f"Focus: {details['species']} #{details['id']} ({details['state']})")
        lines.append(f"  Energy {details['energy']:.1f}/{details['max_energy']:.0f}  Age {details['age']:.1f}/{details['max_age']:.0f}s  Size {details['size']:.2f}")
    return lines

def draw_hud(screen, font, world):
    for i, line in enumerate(build_hud_lines(world)):
        text_surface = font.render(line, True, C.COLOR_WHITE)
        screen.blit(text_surface, (C.UI_TIME_DISPLAY_POS_X, C.UI_TIME_DISPLAY_POS_Y + i * C.UI_LINE_SPACING))
