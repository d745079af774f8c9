from pathlib import Path

import pytest
import yaml

from tile_astar.config import CONFIG, GridConfig, GuiConfig, LoggingConfig, load_config


def test_config_module_loads_config():
    assert isinstance(CONFIG.grid, GridConfig)
    assert isinstance(CONFIG.gui, GuiConfig)
    assert isinstance(CONFIG.logging, LoggingConfig)
    assert CONFIG.grid.block_probability == 0.25
    assert CONFIG.gui.tile_size == (24, 24)


def test_config_file_keys():
    data = yaml.safe_load((Path(__file__).resolve().parents[1] / "config.yaml").read_text())
    assert data["grid"]["width"] == 20
    assert data["gui"]["tile_size"] == [24, 24]
    assert data["logging"]["global_level"] == "INFO"


def test_missing_file_uses_defaults(tmp_path: Path):
    cfg = load_config(tmp_path / "nope.yaml")
    assert cfg.grid == GridConfig()
    assert cfg.gui == GuiConfig()
    assert cfg.logging.global_level == "INFO"


def test_partial_file_overrides(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "grid:\n  width: 5\n  seed: 7\n"
        "gui:\n  enabled: false\n  tile_size: [10, 12]\n"
        "logging:\n  global_level: debug\n  module_levels:\n    tile_astar.demo: WARNING\n"
    )
    cfg = load_config(path)
    assert (cfg.grid.width, cfg.grid.height, cfg.grid.seed) == (5, 20, 7)
    assert cfg.gui.enabled is False
    assert cfg.gui.tile_size == (10, 12)
    assert cfg.logging.global_level == "DEBUG"
    assert cfg.logging.module_levels == {"tile_astar.demo": "WARNING"}


def test_bad_block_probability(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text("grid:\n  block_probability: 1.5\n")
    with pytest.raises(ValueError):
        load_config(path)


@pytest.mark.parametrize(
    "gui_yaml",
    [
        "gui:\n  tile_size: [0, 24]\n",
        "gui:\n  tile_size: [24, -5]\n",
        "gui:\n  fps: -1\n",
    ],
)
def test_bad_gui_settings(tmp_path: Path, gui_yaml):
    path = tmp_path / "config.yaml"
    path.write_text(gui_yaml)
    with pytest.raises(ValueError):
        load_config(path)


def test_zero_fps_allowed(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text("gui:\n  fps: 0\n")
    assert load_config(path).gui.fps == 0
