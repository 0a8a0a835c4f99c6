"""Loading, checking and path-validating ``.ber`` tile maps."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

WALL = "1"
GROUND = "0"
COIN = "C"
EXIT = "E"
PLAYER = "P"
ENEMY = "N"
VALID_TILES = frozenset({WALL, GROUND, COIN, EXIT, PLAYER, ENEMY})
MAP_SUFFIX = ".ber"


class MapError(Exception):
    """A map file is missing, badly named, malformed or not playable."""


@dataclass
class GameMap:
    """A rectangular grid of tiles with the positions found while parsing.

    Positions are ``(x, y)`` tile coordinates.
    """

    rows: list[str]
    player: tuple[int, int] | None = None
    exit: tuple[int, int] | None = None
    enemies: list[tuple[int, int]] = field(default_factory=list)
    coins: int = 0

    @property
    def width(self) -> int:
        return len(self.rows[-1]) if self.rows else 0

    @property
    def height(self) -> int:
        return len(self.rows)

    def tile(self, x: int, y: int) -> str:
        """Return the tile character at column ``x`` and row ``y``."""
        if not (0 <= y < len(self.rows) and 0 <= x < len(self.rows[y])):
            raise IndexError(f"tile ({x}, {y}) is outside the map")
        return self.rows[y][x]


@dataclass(frozen=True)
class FillResult:
    """What a flood fill reached: coins, exits and the set of visited cells."""

    coins: int
    exits: int
    reached: frozenset[tuple[int, int]]


def check_map_path(path: str) -> str:
    """Check that ``path`` names a ``.ber`` file inside a folder; return its file name."""
    slash = path.rfind("/")
    if slash < 0:
        raise MapError("Map need to be in a folder <maps/map.ber>.")
    name = path[slash + 1:]
    hidden = len(name) >= 1 and name[0] == "." and name[1:2] != "."
    dot = name.rfind(".")
    if hidden or dot < 0 or not name[dot:].startswith(MAP_SUFFIX):
        raise MapError("Map name: map.ber")
    return name


def _char_at(row: str, index: int) -> str:
    return row[index] if index < len(row) else ""


def parse_map(text: str) -> GameMap:
    """Parse and check the text of a map, returning its grid and positions."""
    exits = text.count(EXIT)
    if exits == 0:
        raise MapError("No exit found.")
    if exits > 1:
        raise MapError("More than 1 exit.")
    if text.startswith("\n") or "\n\n" in text:
        raise MapError("There is a leak on the map.")

    rows = [row for row in text.split("\n") if row]
    game_map = GameMap(rows=rows)
    expected_width = 0
    for y, row in enumerate(rows):
        for x, char in enumerate(row):
            if _char_at(rows[0], x) != WALL or row[0] != WALL:
                raise MapError("Map must be surrounded by walls.")
            if char == PLAYER:
                if game_map.player is not None:
                    raise MapError("More than 1 player spawn.")
                game_map.player = (x, y)
            elif char == ENEMY:
                game_map.enemies.append((x, y))
        if y == 0:
            expected_width = len(row)
        if len(row) != expected_width:
            raise MapError("Not a supported map.")
        if row[expected_width - 1] != WALL:
            raise MapError("Map must be surrounded by walls.")

    for y, row in enumerate(rows):
        for x, char in enumerate(row):
            if char not in VALID_TILES:
                raise MapError(f"Invalid char: {char}")
            if char == COIN:
                game_map.coins += 1
            elif char == EXIT:
                game_map.exit = (x, y)
    if game_map.coins == 0:
        raise MapError("No coin found.")
    return game_map


def flood_fill(rows: Sequence[str], start: tuple[int, int]) -> FillResult:
    """Explore from ``start`` through every tile that is not a wall or an enemy."""
    width = len(rows[-1]) if rows else 0
    height = len(rows)
    visited: set[tuple[int, int]] = set()
    coins = exits = 0
    pending = [start]
    while pending:
        x, y = pending.pop()
        if not (0 <= x < width and 0 <= y < height) or x >= len(rows[y]):
            continue
        if (x, y) in visited or rows[y][x] in (WALL, ENEMY):
            continue
        visited.add((x, y))
        if rows[y][x] == COIN:
            coins += 1
        elif rows[y][x] == EXIT:
            exits += 1
        pending.extend([(x, y - 1), (x, y + 1), (x - 1, y), (x + 1, y)])
    return FillResult(coins=coins, exits=exits, reached=frozenset(visited))


def validate_playable(game_map: GameMap) -> FillResult:
    """Check that every coin and the exit can be reached from the player."""
    if game_map.player is None:
        raise MapError("No Player spawn.")
    result = flood_fill(game_map.rows, game_map.player)
    if result.coins == 0 and game_map.coins > 0:
        raise MapError("No coin path found.")
    if result.exits > 1:
        raise MapError("More than 1 exit.")
    if result.exits < 1:
        raise MapError("No exit path found.")
    if result.coins != game_map.coins:
        raise MapError("Unplayable Map.")
    return result


def load_map(path: str) -> GameMap:
    """Read, parse and validate the map file at ``path``."""
    check_map_path(path)
    try:
        with open(path, encoding="latin-1", newline="") as handle:
            text = handle.read()
    except OSError:
        raise MapError("Map File not found.") from None
    game_map = parse_map(text)
    validate_playable(game_map)
    return game_map