# tile_astar/main.py
"""Demo bootstrap: logging, config, and the GUI or terminal loop."""

from __future__ import annotations

from pathlib import Path
import logging
import os
import sys

from dotenv import load_dotenv

from .config import CONFIG_PATH, Config, LoggingConfig, load_config
from .demo import Demo
from .utils.cli.command_parser import read_commands
from .utils.cli.commands import HELP_TEXT, execute
from .utils.cli.terminal_view import TerminalView

logger = logging.getLogger(__name__)


def configure_logging(log_cfg: LoggingConfig) -> None:
    """Configure the root logger and any per-module levels from ``log_cfg``."""
    numeric_level = getattr(logging, log_cfg.global_level, logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        force=True
    )
    for module_name, level_str in log_cfg.module_levels.items():
        module_numeric_level = getattr(logging, str(level_str).upper(), None)
        if module_numeric_level is not None:
            logging.getLogger(module_name).setLevel(module_numeric_level)
        else:
            logger.warning("Invalid log level '%s' for module '%s' in config.", level_str, module_name)


def bootstrap(config_path: str | Path | None = None) -> tuple[Config, Demo]:
    env_path = Path(".env")
    if env_path.exists(): load_dotenv(env_path)

    if config_path is None:
        config_path = os.getenv("TILE_ASTAR_CONFIG") or CONFIG_PATH
    cfg = load_config(Path(config_path))
    configure_logging(cfg.logging)

    demo = Demo(cfg.grid)
    logger.info(
        "[Bootstrap] %dx%d map, block probability %.2f, seed %s",
        cfg.grid.width, cfg.grid.height, cfg.grid.block_probability, cfg.grid.seed,
    )
    return cfg, demo


def run_terminal(demo: Demo) -> None:
    """Read ``/commands`` from stdin until ``/quit`` or EOF."""
    view = TerminalView(colour=sys.stdout.isatty())
    state = {"running": True, "view": view}
    print(HELP_TEXT)
    view.render(demo.grid, demo.path, demo.start)
    for cmd in read_commands(sys.stdin):
        execute(cmd.name, cmd.args, demo, state)
        if not state["running"]:
            break


def run_gui(cfg: Config, demo: Demo) -> None:
    import pygame

    from .gui import input as gui_input
    from .gui.renderer import Renderer
    from .gui.window import Window

    tile_w, tile_h = cfg.gui.tile_size
    window = Window((demo.grid.width * tile_w, demo.grid.height * tile_h))
    renderer = Renderer(window, cfg.gui.tile_size)
    clock = pygame.time.Clock()
    state = {"running": True, "dirty": True}

    logger.info("Click an open tile to find a path. R regenerates the map, Esc quits.")
    try:
        while state["running"]:
            gui_input.handle_events(demo, renderer, state)
            if state["dirty"]:
                renderer.update(demo.grid, demo.path)
                state["dirty"] = False
            clock.tick(cfg.gui.fps)
    except KeyboardInterrupt:
        logger.info("KeyboardInterrupt caught. Shutting down...")
    finally:
        if pygame.get_init():
            pygame.quit()


def main() -> None:
    cfg, demo = bootstrap()
    if cfg.gui.enabled:
        run_gui(cfg, demo)
    else:
        run_terminal(demo)


if __name__ == "__main__":
    main()
