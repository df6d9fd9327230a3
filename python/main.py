#!/usr/bin/env python3
"""Fifteen Puzzle.

Usage::

    python main.py                  # interactive menu
    python main.py -f rich          # Rich terminal
    python main.py -f pyqt -b 1     # PyQt GUI with tile 1 blank
    python main.py -f pyqt --strict # only tiles next to the blank may move
"""

import importlib
import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

logger = logging.getLogger(__name__)


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    rich = "rich"
    pyqt = "pyqt"


_RUNNERS = {
    Frontend.rich: "frontend.cli.rich.app",
    Frontend.pyqt: "frontend.gui.pyqt.app",
}

_GUI = {Frontend.pyqt}


# -- helpers ------------------------------------------------------------------


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(show_path=False, rich_tracebacks=True)],
        force=True,
    )


def _launch(frontend: Frontend, blank: int, strict: bool, margin: float) -> None:
    logger.debug("launching %s frontend (blank=%d, strict=%s)", frontend, blank, strict)
    mod = importlib.import_module(_RUNNERS[frontend])
    if frontend in _GUI:
        mod.run(blank=blank, strict=strict, margin=margin)
    else:
        mod.run(blank=blank, strict=strict)


def _menu_loop(blank: int, strict: bool, margin: float) -> None:
    while True:
        print()
        print("  ====================================")
        print("        F I F T E E N   P U Z Z L E   ")
        print("  ====================================")
        print()
        print("  1.  Play  (Rich Terminal)")
        print("  2.  Play  (PyQt GUI)")
        print("  0.  Quit")
        print()

        choice = input("  Select: ").strip()

        if choice == "0":
            print("\n  Goodbye!\n")
            return

        if choice == "1":
            _launch(Frontend.rich, blank, strict, margin)
        elif choice == "2":
            _launch(Frontend.pyqt, blank, strict, margin)
        else:
            print("  Unknown option.")


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Optional[Frontend] = typer.Option(
        None, "-f", "--frontend",
        help="Frontend to launch. Omit for interactive menu.",
    ),
    blank: int = typer.Option(
        16, "-b", "--blank",
        min=1, max=16,
        help="Number of the tile that starts blank (1-16).",
    ),
    margin: float = typer.Option(
        20.0, "-m", "--margin",
        min=0.0,
        help="Outer margin of the GUI board in pixels.",
    ),
    strict: bool = typer.Option(
        False, "--strict",
        help="Only accept tiles next to the blank.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log every move.",
    ),
) -> None:
    """Fifteen Puzzle."""
    _setup_logging(verbose)

    if frontend is None:
        _menu_loop(blank, strict, margin)
        return

    _launch(frontend, blank, strict, margin)


if __name__ == "__main__":
    app()
