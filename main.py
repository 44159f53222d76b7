import argparse
import logging

import pygame

from constants import BACKGROUND, CUT_COLOR, FLOOR_COLOR, FPS, GREY, HEIGHT, ORIGIN_X, ORIGIN_Y, SCALE, WHITE, WIDTH, WIND_COLOR
from clothsim.config import DEFAULT_CONFIG
from clothsim.logging_config import setup_logging
from clothsim.materials import MATERIALS, load_materials
from clothsim.world import ClothWorld

from multiprocessing import Process, Manager

logger = logging.getLogger("clothsim.main")


# screen <-> simulation plane. The plane's y already points down like the screen's.
def to_plane(sx, sy):
    return (sx - ORIGIN_X) / SCALE, (sy - ORIGIN_Y) / SCALE


def to_screen(x, y):
    return int(ORIGIN_X + x * SCALE), int(ORIGIN_Y + y * SCALE)


def draw_cloth(screen, snap):
    # snapshot y points up for the renderer, flip it back
    xy = snap.plane_positions()
    points = [to_screen(x, y) for x, y in xy]
    color = ((snap.color >> 16) & 0xFF, (snap.color >> 8) & 0xFF, snap.color & 0xFF)
    for i, j in snap.active_edges():
        pygame.draw.line(screen, color, points[i], points[j], 1)


def draw_labels(screen, font, world):
    for cloth in world.cloths:
        sx, sy = to_screen(cloth.offset_x, world.config.start_y - 30)
        label = font.render(f"{cloth.material.name} ({cloth.material.particles_x}x{cloth.material.particles_y})",
                            True, cloth.material.rgb)
        screen.blit(label, (sx, sy))


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Interactive cloth playground")
    parser.add_argument("--materials", type=str, help="JSON file with material profiles")
    parser.add_argument("--no-gui", action="store_true", help="Do not start the control panel")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], type=str.upper, help="Logging level")
    parser.add_argument("--log-file", type=str, help="Also write logs to this file")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    setup_logging(level=args.log_level, log_file=args.log_file)

    materials = load_materials(args.materials) if args.materials else list(MATERIALS.values())

    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption("Cloth Lab")
    clock = pygame.time.Clock()
    font = pygame.font.Font(None, 24)

    world = ClothWorld(DEFAULT_CONFIG)
    world.create_default_cloths(materials)

    # spawn DearPyGui controller process (protected inside main)
    _shared = None
    _gui_proc = None
    if not args.no_gui:
        import gui_controller as gui_ctrl

        _mgr = Manager()
        _shared = _mgr.dict()
        _shared['toggle_pause'] = False
        _shared['reset_world'] = False
        _shared['wind_lock'] = False
        _shared['paused'] = False
        _shared['cloth_stats'] = world.stats()
        _shared['__exit__'] = False
        _gui_proc = Process(target=gui_ctrl.run_gui, args=(_shared,), daemon=True)
        _gui_proc.start()

    running = True
    right_held = False

    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.MOUSEBUTTONDOWN:
                if event.button == 1:
                    world.cutting = True
                elif event.button == 3:
                    right_held = True
            elif event.type == pygame.MOUSEBUTTONUP:
                if event.button == 1:
                    world.cutting = False
                elif event.button == 3:
                    right_held = False
            elif event.type == pygame.MOUSEMOTION:
                world.move_pointer(*to_plane(*event.pos))
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_SPACE:
                    world.reset_all()
                elif event.key == pygame.K_p:
                    world.paused = not world.paused
                elif event.key == pygame.K_ESCAPE:
                    running = False

        # --- Handle GUI updates ---
        wind_lock = False
        if _shared is not None:
            try:
                if _shared.get('toggle_pause', False):
                    world.paused = not world.paused
                    _shared['toggle_pause'] = False
                if _shared.get('reset_world', False):
                    world.reset_all()
                    _shared['reset_world'] = False
                if _shared.get('__exit__', False):
                    running = False
                wind_lock = bool(_shared.get('wind_lock', False))
                _shared['paused'] = world.paused
                _shared['cloth_stats'] = world.stats()
                _shared['fps'] = clock.get_fps()
            except (BrokenPipeError, EOFError, ConnectionError):
                logger.warning("Control panel connection lost")
                _shared = None

        world.blowing = right_held or wind_lock

        # --- Update ---
        world.update()

        # --- Draw ---
        screen.fill(BACKGROUND)
        _, floor_sy = to_screen(0, world.config.floor_y)
        pygame.draw.line(screen, FLOOR_COLOR, (0, floor_sy), (WIDTH, floor_sy), 2)

        for snap in world.snapshots():
            draw_cloth(screen, snap)
        draw_labels(screen, font, world)

        cursor = to_screen(world.pointer.x, world.pointer.y)
        if world.blowing:
            pygame.draw.circle(screen, WIND_COLOR, cursor, int(world.config.wind_radius * SCALE), 1)
        elif world.cutting:
            pygame.draw.circle(screen, CUT_COLOR, cursor, 4)

        if world.paused:
            pause_text = font.render("PAUSED", True, WHITE)
            screen.blit(pause_text, (WIDTH - pause_text.get_width() - 10, 10))

        help_text = font.render("Left drag: cut   Right hold: wind   Space: reset   P: pause", True, GREY)
        screen.blit(help_text, (10, HEIGHT - 30))

        pygame.display.flip()
        clock.tick(FPS)

    # cleanup: signal GUI to exit and join
    if _gui_proc is not None:
        try:
            if _shared is not None:
                _shared['__exit__'] = True
            _gui_proc.join(timeout=1.0)
        except (BrokenPipeError, EOFError, ConnectionError):
            pass

    pygame.quit()

if __name__ == "__main__":
    main()
