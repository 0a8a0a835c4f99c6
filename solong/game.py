"""Game state: player movement, coin pickup, win and loss, enemy animation."""

from __future__ import annotations

from enum import Enum, IntEnum

from .mapfile import COIN, ENEMY, EXIT, GROUND, WALL, GameMap, MapError, flood_fill
from .printf import printf

ENEMY_DELAY_UNIT = 10000
ENEMY_FRAMES = 3


class Direction(IntEnum):
    """Facing of the player; the value indexes the player textures."""

    DOWN = 0
    UP = 1
    LEFT = 2
    RIGHT = 3

    @property
    def delta(self) -> tuple[int, int]:
        """The ``(dx, dy)`` tile offset of one step in this direction."""
        return {
            Direction.DOWN: (0, 1),
            Direction.UP: (0, -1),
            Direction.LEFT: (-1, 0),
            Direction.RIGHT: (1, 0),
        }[self]


class Outcome(Enum):
    """State of a game after an update, or how a session ended."""

    PLAYING = "playing"
    WON = "won"
    LOST = "lost"
    QUIT = "quit"


class Game:
    """A running game on a parsed map.

    Positions are ``(x, y)`` tile coordinates.  A key press in a new
    direction only turns the player; a press in the direction already faced
    moves one tile unless a wall is in the way.
    """

    def __init__(self, game_map: GameMap, delay_unit: int = ENEMY_DELAY_UNIT) -> None:
        if game_map.player is None:
            raise MapError("No Player spawn.")
        self.tiles: list[list[str]] = [list(row) for row in game_map.rows]
        self.width = game_map.width
        self.height = game_map.height
        self.player: tuple[int, int] = game_map.player
        self.enemies: list[tuple[int, int]] = list(game_map.enemies)
        self.direction = Direction.DOWN
        self.steps = 0
        self.coins = 0
        self.coins_needed = flood_fill(game_map.rows, game_map.player).coins
        self.can_exit = False
        self.in_door = False
        self.needs_redraw = True
        self.delay_unit = delay_unit
        self.enemy_frame = 0
        self.enemy_delay = 0
        self.enemy_index = 0

    def _tile_at(self, x: int, y: int) -> str:
        return self.tiles[y][x]

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height and x < len(self.tiles[y])

    def press(self, direction: Direction) -> bool:
        """Handle a movement key; return True when the player moved."""
        self.needs_redraw = True
        if self.direction != direction:
            self.direction = direction
            return False
        dx, dy = direction.delta
        x, y = self.player[0] + dx, self.player[1] + dy
        if not self._inside(x, y) or self._tile_at(x, y) == WALL:
            return False
        self.player = (x, y)
        self.steps += 1
        printf("Steps: %d\n", self.steps)
        return True

    def update(self) -> Outcome:
        """Apply the effects of the player's tile and report the game state."""
        x, y = self.player
        if self._tile_at(x, y) == COIN:
            self.tiles[y][x] = GROUND
            self.coins += 1
        tile = self._tile_at(x, y)
        all_coins = self.coins == self.coins_needed
        self.in_door = tile == EXIT and not all_coins
        if all_coins and self.coins > 0:
            self.can_exit = True
        if tile == ENEMY:
            return Outcome.LOST
        if tile == EXIT and all_coins:
            return Outcome.WON
        self.advance_enemies()
        return Outcome.PLAYING

    def advance_enemies(self) -> tuple[tuple[int, int], int] | None:
        """Step the enemy animation.

        Returns the enemy position shown this tick with its frame index, or
        None when the map has no enemies.
        """
        if self.enemy_index >= len(self.enemies):
            self.enemy_index = 0
        if self.enemy_frame >= ENEMY_FRAMES:
            self.enemy_frame = 0
        shown = None
        if self.enemies:
            shown = (self.enemies[self.enemy_index], self.enemy_frame)
        if self.enemy_delay == 0:
            self.enemy_delay = self.delay_unit + self.delay_unit * (
                ENEMY_FRAMES - 1 - self.enemy_frame
            )
            self.needs_redraw = True
            self.enemy_frame += 1
        self.enemy_index += 1
        self.enemy_delay -= 1
        return shown