from pathlib import Path

import pygame
import pytest

from solong.display import (
    Renderer,
    USAGE,
    main,
    main_bonus,
    run,
    select_sprite,
)
from solong.maps import GameMap
from solong.sprites import SIZE, Sprite


def make_map(rows, enemy=None):
    grid = [list(row) for row in rows]
    start = exit_pos = None
    for y, row in enumerate(rows):
        for x, tile in enumerate(row):
            if tile == "P":
                start = (x, y)
            elif tile == "E":
                exit_pos = (x, y)
    collectibles = sum(row.count("C") for row in rows)
    return GameMap(grid=grid, start=start, exit=exit_pos,
                   collectibles=collectibles, enemy=enemy)


ROWS = [
    "1111111",
    "1P0C0E1",
    "1010X01",
    "1111111",
]


def colour_for(sprite):
    return pygame.Color(list(Sprite).index(sprite) * 10, 100, 200)


def colour_loader(calls=None):
    def load(path):
        sprite = Sprite(Path(path).as_posix())
        if calls is not None:
            calls.append(sprite)
        surface = pygame.Surface((SIZE, SIZE))
        surface.fill(colour_for(sprite))
        return surface
    return load


def make_renderer(game_map, bonus=False, calls=None):
    surface = pygame.Surface((game_map.width * SIZE, game_map.height * SIZE))
    return Renderer(surface, bonus=bonus, loader=colour_loader(calls))


@pytest.mark.parametrize(
    "x, y, expected",
    [
        (0, 0, Sprite.WALL),
        (6, 1, Sprite.WALL),
        (3, 3, Sprite.WALL),
        (1, 1, Sprite.NARUTO),
        (2, 1, Sprite.FLOOR),
        (3, 1, Sprite.HAT),
        (5, 1, Sprite.HINATA_BACK),
        (2, 2, Sprite.WALL),
    ],
)
def test_select_sprite_basic(x, y, expected):
    assert select_sprite(make_map(ROWS), x, y) is expected


def test_select_sprite_enemy_only_in_bonus():
    game_map = make_map(ROWS, enemy=(4, 2))
    assert select_sprite(game_map, 4, 2, bonus=True) is Sprite.SAKURA
    assert select_sprite(game_map, 4, 2, bonus=False) is Sprite.FLOOR


def test_draw_tile_places_texture_on_grid():
    game_map = make_map(ROWS)
    renderer = make_renderer(game_map)
    rect = renderer.draw_tile(2, 1, Sprite.HAT)
    assert rect.topleft == (2 * SIZE, SIZE)
    assert rect.size == (SIZE, SIZE)
    assert renderer.surface.get_at((2 * SIZE + 5, SIZE + 5)) == colour_for(Sprite.HAT)


def test_textures_are_loaded_once():
    calls = []
    game_map = make_map(ROWS)
    renderer = make_renderer(game_map, calls=calls)
    renderer.draw_tile(1, 1, Sprite.FLOOR)
    renderer.draw_tile(2, 1, Sprite.FLOOR)
    assert calls == [Sprite.FLOOR]


@pytest.mark.parametrize("bonus", [False, True])
def test_draw_map_covers_every_cell(bonus):
    game_map = make_map(ROWS, enemy=(4, 2))
    renderer = make_renderer(game_map, bonus=bonus)
    renderer.draw_map(game_map)
    for y in range(game_map.height):
        for x in range(game_map.width):
            expected = colour_for(select_sprite(game_map, x, y, bonus))
            assert renderer.surface.get_at((x * SIZE + 1, y * SIZE + 1)) == expected


def test_draw_map_reports_missing_texture():
    def failing(path):
        raise FileNotFoundError(path)

    game_map = make_map(ROWS)
    surface = pygame.Surface((game_map.width * SIZE, game_map.height * SIZE))
    renderer = Renderer(surface, loader=failing)
    with pytest.raises(RuntimeError, match="Failed to load image"):
        renderer.draw_map(game_map)


def test_draw_text_marks_surface_around_baseline():
    surface = pygame.Surface((200, 60))
    surface.fill((0, 0, 0))
    renderer = Renderer(surface)
    rect = renderer.draw_text("MOVES: 3", 10, 40, 0xFFFFFF)
    assert rect.left == 10
    assert rect.top <= 40 <= rect.bottom
    lit = [
        surface.get_at((px, py))
        for px in range(rect.left, rect.right)
        for py in range(rect.top, rect.bottom)
    ]
    assert any(colour.r > 0 for colour in lit)


@pytest.mark.parametrize("argv", [[], ["one.ber", "two.ber"]])
def test_main_requires_exactly_one_argument(argv, capsys):
    assert main(argv) == 0
    assert capsys.readouterr().out == USAGE
    assert main_bonus(argv) == 0
    assert capsys.readouterr().out == USAGE


def test_main_reports_missing_map(tmp_path, capsys):
    assert main([str(tmp_path / "missing.ber")]) == 0
    out = capsys.readouterr().out
    assert out == "Error\nNo map found\nError\nFailed to initialize map\n"


def test_run_bonus_requires_enemy(tmp_path, capsys):
    path = tmp_path / "level.ber"
    path.write_text("11111\n1PCE1\n11111\n")
    assert run(path, bonus=True) is None
    out = capsys.readouterr().out
    assert "no enemy" in out
    assert out.endswith("Error\nFailed to initialize map\n")


def test_run_rejects_wrong_extension(tmp_path, capsys):
    path = tmp_path / "level.txt"
    path.write_text("11111\n1PCE1\n11111\n")
    assert run(path) is None
    assert "File name must end with .ber" in capsys.readouterr().out