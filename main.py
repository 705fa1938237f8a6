import argparse
import logging

import pygame

from gravity.constants import BLACK, DAMPING, DT, FPS, G, HEIGHT, TICK_INTERVAL_MS, WIDTH
from gravity.records import parse_records
from gravity.render import RenderContext, draw_entities
from gravity.ticker import AutoTicker, SimulationController
from gravity.world import World

from multiprocessing import Process, Manager
import gui_controller as gui_ctrl

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="2D gravity simulator")
    parser.add_argument("--width", type=int, default=WIDTH, help="arena width in pixels")
    parser.add_argument("--height", type=int, default=HEIGHT, help="arena height in pixels")
    parser.add_argument("--damping", type=float, default=DAMPING, help="velocity kept after a wall bounce")
    parser.add_argument("--gravity", type=float, default=G, help="gravitational constant")
    parser.add_argument("--dt", type=float, default=DT, help="simulated seconds per tick")
    parser.add_argument("--interval", type=int, default=TICK_INTERVAL_MS, help="auto tick interval (ms)")
    parser.add_argument("--log-level", default="INFO", help="logging level")
    return parser.parse_args(argv)


def reset_from_shared(controller, shared):
    errors = []
    entities = parse_records(shared.get('entries', []), on_error=errors.append)
    controller.reset(entities)
    shared['parse_errors'] = [str(e) for e in errors]


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, str(args.log_level).upper(), logging.INFO),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    pygame.init()
    screen = pygame.display.set_mode((args.width, args.height))
    pygame.display.set_caption("Gravity Visualization")
    clock = pygame.time.Clock()
    font = pygame.font.Font(None, 24)

    # --- Simulation ---
    world = World(args.width, args.height, damping=args.damping, g=args.gravity)
    controller = SimulationController(world, dt=args.dt)
    ticker = AutoTicker(controller, interval_ms=args.interval)
    ctx = RenderContext(screen, args.width, args.height)

    # spawn DearPyGui controller process (protected inside main)
    _mgr = Manager()
    _shared = _mgr.dict()
    _shared['entries'] = []
    _shared['parse_errors'] = []
    _shared['tick_requests'] = 0
    _shared['auto_update'] = False
    _shared['tick_interval_ms'] = ticker.interval_ms
    _shared['reset_world'] = False
    _shared['status'] = ''
    _shared['__exit__'] = False
    _gui_proc = Process(target=gui_ctrl.run_gui, args=(_shared,), daemon=True)
    _gui_proc.start()

    ticks_served = 0
    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_t:
                    controller.tick()
                elif event.key == pygame.K_SPACE:
                    _shared['auto_update'] = not _shared.get('auto_update', False)

        # --- Handle GUI updates ---
        if _shared.get('__exit__', False):
            running = False

        if _shared.get('reset_world', False):
            reset_from_shared(controller, _shared)
            _shared['reset_world'] = False

        requested = int(_shared.get('tick_requests', 0))
        while ticks_served < requested:
            controller.tick()
            ticks_served += 1

        interval = int(_shared.get('tick_interval_ms', ticker.interval_ms))
        if interval != ticker.interval_ms:
            ticker.interval_ms = interval

        auto = bool(_shared.get('auto_update', False))
        if auto and not ticker.running:
            ticker.start()
        elif not auto and ticker.running:
            ticker.stop()

        # --- Draw ---
        def _draw(w):
            draw_entities(ctx, w.entities)
            return len(w.entities), w.tick_count
        count, ticks = controller.read(_draw)

        status = f"Entities: {count}  Ticks: {ticks}  {'AUTO' if ticker.running else 'MANUAL'}"
        _shared['status'] = status
        screen.blit(font.render(status, True, BLACK), (10, args.height - 24))

        pygame.display.flip()
        clock.tick(FPS)

    # cleanup: stop ticking, signal GUI to exit and join
    ticker.stop(timeout=1.0)
    try:
        _shared['__exit__'] = True
        _gui_proc.join(timeout=1.0)
    except (OSError, EOFError, BrokenPipeError):
        logger.debug("GUI process already gone")

    pygame.quit()


if __name__ == "__main__":
    main()
