"""Textures, drawing and the interactive window loop."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import pygame

from .game import Direction, Game, Outcome, ENEMY_FRAMES
from .mapfile import COIN, ENEMY, EXIT, GROUND, PLAYER, WALL, MapError
from .printf import printf

LABEL_COLOR = (0xFF, 0xFF, 0xFF)
STEPS_COLOR = (0xF2, 0xB7, 0x05)
WINDOW_TITLE = "So_long"

_PLAYER_NAMES = ("pd", "pu", "pl", "pr")
_ENEMY_NAMES = ("e_f0", "e_f1_2", "e_f1_3")

_KEY_DIRECTIONS = {
    pygame.K_w: Direction.UP,
    pygame.K_UP: Direction.UP,
    pygame.K_s: Direction.DOWN,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_a: Direction.LEFT,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_d: Direction.RIGHT,
    pygame.K_RIGHT: Direction.RIGHT,
}


def _load(directory: Path, name: str, message: str) -> pygame.Surface:
    try:
        return pygame.image.load(str(directory / f"{name}.xpm"))
    except (pygame.error, OSError) as error:
        raise OSError(message) from error


@dataclass
class Textures:
    """Every image the game draws.

    ``player`` is indexed by ``[in_door][direction]``; ``exits`` by whether
    the exit is open.
    """

    player: tuple[tuple[pygame.Surface, ...], tuple[pygame.Surface, ...]]
    enemies: tuple[pygame.Surface, ...]
    ground: pygame.Surface
    wall: pygame.Surface
    coin: pygame.Surface
    exits: tuple[pygame.Surface, pygame.Surface]

    @property
    def tile_size(self) -> tuple[int, int]:
        """Width and height of one tile, taken from the wall image."""
        return self.wall.get_size()

    @classmethod
    def load(cls, directory: str | Path) -> Textures:
        """Load all ``.xpm`` textures from ``directory``."""
        folder = Path(directory)
        player_message = "Can't create Player image."
        outside = tuple(_load(folder, name, player_message) for name in _PLAYER_NAMES)
        in_door = tuple(
            _load(folder, name + "1", player_message) for name in _PLAYER_NAMES
        )
        enemies = tuple(
            _load(folder, name, "Can't create Enemy image.") for name in _ENEMY_NAMES
        )
        ground = _load(folder, "01", "Can't create Ground image.")
        wall = _load(folder, "00", "Can't create Wall image.")
        coin = _load(folder, "coin3", "Can't create Coin image.")
        exits = (
            _load(folder, "door", "Can't create Exit image."),
            _load(folder, "door1", "Can't create Exit image."),
        )
        return cls(
            player=(outside, in_door),
            enemies=enemies,
            ground=ground,
            wall=wall,
            coin=coin,
            exits=exits,
        )


class Renderer:
    """Draws a game onto a surface with a set of textures."""

    def __init__(self, surface: pygame.Surface, textures: Textures) -> None:
        self.surface = surface
        self.textures = textures
        self._font = self._make_font()

    @staticmethod
    def _make_font():
        try:
            if not pygame.font.get_init():
                pygame.font.init()
            return pygame.font.Font(None, 18)
        except (pygame.error, NotImplementedError, ImportError):
            return None

    def _tile_image(self, char: str, game: Game) -> pygame.Surface:
        if char == WALL:
            return self.textures.wall
        if char == COIN:
            return self.textures.coin
        if char == EXIT:
            return self.textures.exits[int(game.can_exit)]
        if char in (GROUND, PLAYER, ENEMY):
            return self.textures.ground
        raise MapError(f"Invalid char: {char}")

    def draw(self, game: Game) -> None:
        """Draw tiles, enemies, the player and the step counter."""
        width, height = self.textures.tile_size
        self.surface.fill((0, 0, 0))
        for y, row in enumerate(game.tiles):
            for x, char in enumerate(row):
                self.surface.blit(self._tile_image(char, game), (x * width, y * height))
        frame = self.textures.enemies[game.enemy_frame % ENEMY_FRAMES]
        for x, y in game.enemies:
            self.surface.blit(frame, (x * width, y * height))
        player = self.textures.player[int(game.in_door)][game.direction]
        self.surface.blit(player, (game.player[0] * width, game.player[1] * height))
        if self._font is not None:
            self.surface.blit(self._font.render("STEPS = ", True, LABEL_COLOR), (0, 4))
            self.surface.blit(
                self._font.render(str(game.steps), True, STEPS_COLOR), (45, 4)
            )


def direction_for_key(key: int) -> Direction | None:
    """Map a WASD or arrow key to a direction; other keys give None."""
    return _KEY_DIRECTIONS.get(key)


def _quit_early() -> Outcome:
    printf("Exited Early.\n")
    return Outcome.QUIT


def run(game: Game, textures_dir: str | Path) -> Outcome:
    """Open a window and play ``game`` until it is won, lost or closed."""
    pygame.init()
    try:
        textures = Textures.load(textures_dir)
        width, height = textures.tile_size
        screen = pygame.display.set_mode((width * game.width, height * game.height))
        pygame.display.set_caption(WINDOW_TITLE)
        renderer = Renderer(screen, textures)
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return _quit_early()
                if event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        return _quit_early()
                    direction = direction_for_key(event.key)
                    if direction is not None:
                        game.press(direction)
            outcome = game.update()
            if game.needs_redraw or outcome is not Outcome.PLAYING:
                renderer.draw(game)
                pygame.display.flip()
                game.needs_redraw = False
            if outcome is Outcome.WON:
                printf("You Win!\n")
                return outcome
            if outcome is Outcome.LOST:
                printf("You Lose.\n")
                return outcome
    finally:
        pygame.quit()