"""Implementations of terminal demo commands."""

from __future__ import annotations

from typing import Any, Dict, List
import logging

from ...core.grid import GridError
from ...demo import Demo
from .terminal_view import TerminalView

logger = logging.getLogger(__name__)

HELP_TEXT = """Commands:
  /goal X Y     find a path from the current start to (X, Y)
  /start X Y    move the start tile
  /regen [SEED] generate a new obstacle layout
  /view         toggle map drawing
  /help         show this message
  /quit         exit"""


def _coords(args: List[str]) -> tuple[int, int]:
    if len(args) != 2:
        raise ValueError("expected two integer coordinates")
    return int(args[0]), int(args[1])


def goal(demo: Demo, args: List[str], view: TerminalView) -> None:
    x, y = _coords(args)
    path = demo.search_to(x, y)
    if not path:
        print("No path.")
    view.render(demo.grid, path, demo.start)


def start(demo: Demo, args: List[str], view: TerminalView) -> None:
    x, y = _coords(args)
    demo.set_start(x, y)
    view.render(demo.grid, start=demo.start)


def regen(demo: Demo, args: List[str], view: TerminalView) -> None:
    seed = int(args[0]) if args else None
    demo.regenerate(seed)
    view.render(demo.grid, start=demo.start)


def execute(
    command: str, args: List[str], demo: Demo, state: Dict[str, Any]
) -> None:
    """Run ``command`` with ``args`` against ``demo``.

    ``state`` carries the loop flags (``running``) and the :class:`TerminalView`
    under ``"view"``.
    """

    view: TerminalView = state.setdefault("view", TerminalView())
    try:
        if command == "goal":
            goal(demo, args, view)
        elif command == "start":
            start(demo, args, view)
        elif command == "regen":
            regen(demo, args, view)
        elif command == "view":
            enabled = view.toggle()
            logger.info("Map drawing %s.", "enabled" if enabled else "disabled")
            view.render(demo.grid, demo.path, demo.start)
        elif command == "help":
            print(HELP_TEXT)
        elif command in ("quit", "exit"):
            state["running"] = False
        else:
            logger.warning("Unknown command: /%s (try /help)", command)
    except (ValueError, GridError) as exc:
        logger.warning("/%s %s: %s", command, " ".join(args), exc)


__all__ = ["execute", "goal", "start", "regen", "HELP_TEXT"]
