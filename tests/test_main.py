import io
import logging
from pathlib import Path

from tile_astar import main
from tile_astar.config import LoggingConfig


def test_logging_configured():
    logging.basicConfig(level=logging.WARNING, force=True)
    main.configure_logging(LoggingConfig(global_level="INFO", module_levels={"tile_astar.demo": "ERROR"}))
    assert logging.getLogger().getEffectiveLevel() == logging.INFO
    assert logging.getLogger("tile_astar.demo").level == logging.ERROR
    logging.getLogger("tile_astar.demo").setLevel(logging.NOTSET)


def test_bootstrap_reads_config_from_env(tmp_path: Path, monkeypatch):
    cfg_path = tmp_path / "config.yaml"
    cfg_path.write_text("grid:\n  width: 6\n  height: 4\n  seed: 2\ngui:\n  enabled: false\n")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("TILE_ASTAR_CONFIG", str(cfg_path))

    cfg, demo = main.bootstrap()
    assert cfg.gui.enabled is False
    assert (demo.grid.width, demo.grid.height) == (6, 4)
    assert not demo.grid.tile(0, 0).blocked


def test_main_runs_terminal_loop(tmp_path: Path, monkeypatch, capsys):
    cfg_path = tmp_path / "config.yaml"
    cfg_path.write_text(
        "grid:\n  width: 3\n  height: 3\n  block_probability: 0.0\n"
        "gui:\n  enabled: false\n"
    )
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("TILE_ASTAR_CONFIG", str(cfg_path))
    monkeypatch.setattr("sys.stdin", io.StringIO("/goal 2 2\n/quit\n/goal 0 0\n"))

    main.main()

    out = capsys.readouterr().out
    assert "/goal X Y" in out
    assert "S" in out and "G" in out
