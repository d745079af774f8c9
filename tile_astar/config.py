"""Simple configuration loader for tile_astar."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


CONFIG_PATH = Path(__file__).resolve().parents[1] / "config.yaml"


@dataclass
class GridConfig:
    """Size and obstacle layout of the demo map."""

    width: int = 20
    height: int = 20
    block_probability: float = 0.25
    seed: Optional[int] = None


@dataclass
class GuiConfig:
    """Window settings for the pygame demo."""

    enabled: bool = True
    tile_size: tuple[int, int] = (24, 24)
    fps: int = 30


@dataclass
class LoggingConfig:
    """Root log level plus optional per-module overrides."""

    global_level: str = "INFO"
    module_levels: Dict[str, str] = field(default_factory=dict)


@dataclass
class Config:
    """Top level configuration dataclass."""

    grid: GridConfig
    gui: GuiConfig
    logging: LoggingConfig


def _parse_config(data: dict[str, Any]) -> Config:
    """Convert raw ``data`` into :class:`Config`."""

    grid_data = data.get("grid", {}) or {}
    seed = grid_data.get("seed")
    grid = GridConfig(
        width=int(grid_data.get("width", 20)),
        height=int(grid_data.get("height", 20)),
        block_probability=float(grid_data.get("block_probability", 0.25)),
        seed=int(seed) if seed is not None else None,
    )
    if not 0.0 <= grid.block_probability <= 1.0:
        raise ValueError(f"grid.block_probability must be within [0, 1], got {grid.block_probability}")

    gui_data = data.get("gui", {}) or {}
    tile_size = gui_data.get("tile_size", [24, 24])
    gui = GuiConfig(
        enabled=bool(gui_data.get("enabled", True)),
        tile_size=(int(tile_size[0]), int(tile_size[1])),
        fps=int(gui_data.get("fps", 30)),
    )
    if gui.tile_size[0] <= 0 or gui.tile_size[1] <= 0:
        raise ValueError(f"gui.tile_size must be positive, got {gui.tile_size}")
    if gui.fps < 0:
        raise ValueError(f"gui.fps must not be negative, got {gui.fps}")

    log_data = data.get("logging", {}) or {}
    logging_cfg = LoggingConfig(
        global_level=str(log_data.get("global_level", "INFO")).upper(),
        module_levels=dict(log_data.get("module_levels") or {}),
    )

    return Config(grid=grid, gui=gui, logging=logging_cfg)


def load_config(path: Path = CONFIG_PATH) -> Config:
    """Load configuration from ``path`` and return a :class:`Config`."""

    path = Path(path)
    if path.is_file():
        raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    else:
        raw = {}
    return _parse_config(raw)


# Load configuration at module import time.
CONFIG = load_config()


__all__ = [
    "CONFIG",
    "CONFIG_PATH",
    "Config",
    "GridConfig",
    "GuiConfig",
    "LoggingConfig",
    "load_config",
]
