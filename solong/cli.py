"""Command-line entry point: load a map and play it in a window."""

from __future__ import annotations

import sys
from collections.abc import Sequence

import pygame

from .game import Game
from .mapfile import MapError, load_map
from .output import put_endl
from .render import run

TEXTURES_DIR = "./textures"
USAGE = "Usage: ./so_long maps/<file.ber>."


def _report(message: str) -> int:
    put_endl("Error", sys.stderr)
    put_endl(message, sys.stderr)
    return 1


def main(argv: Sequence[str] | None = None) -> int:
    """Play the map named by the single argument; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        return _report(USAGE)
    try:
        game = Game(load_map(args[0]))
        run(game, TEXTURES_DIR)
    except MapError as error:
        return _report(str(error))
    except OSError as error:
        return _report(str(error))
    except pygame.error:
        return _report("Can't initialize the display.")
    return 0


if __name__ == "__main__":
    sys.exit(main())