from pathlib import Path

import pytest

from solong.sprites import (
    ENEMY_FRAMES,
    EXIT_CLOSED_FRAMES,
    EXIT_OPEN_FRAMES,
    PLAYER_IDLE_FRAMES,
    Sprite,
    texture_path,
)


def test_relative_path_of_known_textures():
    assert texture_path(Sprite.HAT) == Path("textures/hat.xpm")
    assert texture_path(Sprite.WALL) == Path("textures/tree.xpm")
    assert texture_path(Sprite.NARUTO_LOSE) == Path("textures/naruto_die.xpm")


def test_path_under_root(tmp_path):
    assert texture_path(Sprite.FLOOR, tmp_path) == tmp_path / "textures" / "floor.xpm"


def test_root_given_as_string():
    assert texture_path(Sprite.SAKURA, "game") == Path("game/textures/sakura.xpm")


@pytest.mark.parametrize("sprite", list(Sprite))
def test_every_sprite_is_an_xpm_in_textures(sprite):
    path = texture_path(sprite)
    assert path.parent == Path("textures")
    assert path.suffix == ".xpm"


def test_sprite_paths_are_distinct():
    paths = [texture_path(sprite) for sprite in Sprite]
    assert len(paths) == len(set(paths))


@pytest.mark.parametrize(
    "frames, first",
    [
        (PLAYER_IDLE_FRAMES, Sprite.NARUTO),
        (EXIT_CLOSED_FRAMES, Sprite.HINATA_BACK),
        (EXIT_OPEN_FRAMES, Sprite.HINATA),
        (ENEMY_FRAMES, Sprite.SAKURA),
    ],
)
def test_frame_sets_start_with_base_sprite(frames, first):
    assert frames[0] is first
    assert len(frames) == 3
    assert len(set(frames)) == 3