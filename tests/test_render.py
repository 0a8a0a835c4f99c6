import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame  # noqa: E402
import pytest  # noqa: E402

from solong.game import Direction, Game  # noqa: E402
from solong.mapfile import MapError, parse_map  # noqa: E402
from solong.render import Renderer, Textures, direction_for_key, run  # noqa: E402

TILE = 32
MAP = "11111\n1PNC1\n10001\n1E001\n11111\n"

WALL = (200, 0, 0)
GROUND = (0, 200, 0)
COIN = (220, 220, 0)
CLOSED = (0, 0, 200)
OPEN = (0, 200, 200)
PLAYER = (200, 0, 200)
ENEMY = (90, 90, 90)


def solid(color):
    surface = pygame.Surface((TILE, TILE))
    surface.fill(color)
    return surface


def make_textures():
    player = tuple(solid(PLAYER) for _ in range(4))
    return Textures(
        player=(player, player),
        enemies=tuple(solid(ENEMY) for _ in range(3)),
        ground=solid(GROUND),
        wall=solid(WALL),
        coin=solid(COIN),
        exits=(solid(CLOSED), solid(OPEN)),
    )


def color_at(surface, x, y):
    return tuple(surface.get_at((x * TILE + TILE // 2, y * TILE + TILE // 2)))[:3]


@pytest.mark.parametrize(
    "key, expected",
    [
        (pygame.K_w, Direction.UP),
        (pygame.K_UP, Direction.UP),
        (pygame.K_s, Direction.DOWN),
        (pygame.K_DOWN, Direction.DOWN),
        (pygame.K_a, Direction.LEFT),
        (pygame.K_LEFT, Direction.LEFT),
        (pygame.K_d, Direction.RIGHT),
        (pygame.K_RIGHT, Direction.RIGHT),
    ],
)
def test_direction_for_key(key, expected):
    assert direction_for_key(key) is expected


def test_other_keys_have_no_direction():
    assert direction_for_key(pygame.K_q) is None


def test_draw_places_each_tile():
    pygame.init()
    game = Game(parse_map(MAP))
    surface = pygame.Surface((5 * TILE, 5 * TILE))
    Renderer(surface, make_textures()).draw(game)
    assert color_at(surface, 4, 4) == WALL
    assert color_at(surface, 1, 1) == PLAYER
    assert color_at(surface, 2, 1) == ENEMY
    assert color_at(surface, 3, 1) == COIN
    assert color_at(surface, 1, 3) == CLOSED
    assert color_at(surface, 2, 2) == GROUND


def test_exit_opens_after_all_coins():
    pygame.init()
    game = Game(parse_map(MAP))
    game.player = (3, 1)
    game.update()
    surface = pygame.Surface((5 * TILE, 5 * TILE))
    Renderer(surface, make_textures()).draw(game)
    assert color_at(surface, 1, 3) == OPEN
    assert color_at(surface, 3, 1) == PLAYER


def test_invalid_tile_raises():
    pygame.init()
    game = Game(parse_map(MAP))
    game.tiles[2][2] = "Z"
    surface = pygame.Surface((5 * TILE, 5 * TILE))
    with pytest.raises(MapError, match="Invalid char: Z"):
        Renderer(surface, make_textures()).draw(game)


def test_tile_size_comes_from_wall():
    assert make_textures().tile_size == (TILE, TILE)


def test_load_missing_textures_raises(tmp_path):
    with pytest.raises(OSError, match="Can't create Player image."):
        Textures.load(tmp_path)


XPM = """/* XPM */
static char *image[] = {
"2 2 1 1",
". c #FF0000",
"..",
".."
};
"""

NAMES = [
    "pd", "pu", "pl", "pr", "pd1", "pu1", "pl1", "pr1",
    "e_f0", "e_f1_2", "e_f1_3", "01", "00", "coin3", "door", "door1",
]


def test_load_reads_xpm_files(tmp_path):
    for name in NAMES:
        (tmp_path / f"{name}.xpm").write_text(XPM)
    textures = Textures.load(tmp_path)
    assert textures.tile_size == (2, 2)
    assert tuple(textures.wall.get_at((0, 0)))[:3] == (255, 0, 0)
    assert len(textures.enemies) == 3


def test_run_reports_missing_textures(tmp_path):
    game = Game(parse_map(MAP))
    with pytest.raises(OSError, match="Can't create Player image."):
        run(game, tmp_path)