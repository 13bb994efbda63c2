"""Texture names used to draw the game."""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path

SIZE = 64
"""Width and height, in pixels, of one map tile."""


class Sprite(Enum):
    """A texture, identified by its path relative to the game directory."""

    WALL = "textures/tree.xpm"
    WALL_WOOD = "textures/wood.xpm"
    WALL_BUSH = "textures/bush.xpm"
    HAT = "textures/hat.xpm"
    FLOOR = "textures/floor.xpm"
    NARUTO = "textures/naruto.xpm"
    NARUTO_2 = "textures/naruto2.xpm"
    NARUTO_3 = "textures/naruto3.xpm"
    NARUTO_LEFT = "textures/naruto_left.xpm"
    NARUTO_RIGHT = "textures/naruto_right.xpm"
    NARUTO_UP = "textures/naruto_up.xpm"
    NARUTO_LOSE = "textures/naruto_die.xpm"
    NARUTO_WIN = "textures/naruto_win.xpm"
    HINATA_BACK = "textures/hinata_back.xpm"
    HINATA_BACK_2 = "textures/hinata_back2.xpm"
    HINATA_BACK_3 = "textures/hinata_back3.xpm"
    HINATA = "textures/hinata.xpm"
    HINATA_2 = "textures/hinata2.xpm"
    HINATA_3 = "textures/hinata3.xpm"
    SAKURA = "textures/sakura.xpm"
    SAKURA_2 = "textures/sakura2.xpm"
    SAKURA_3 = "textures/sakura3.xpm"


PLAYER_IDLE_FRAMES = (Sprite.NARUTO, Sprite.NARUTO_2, Sprite.NARUTO_3)
EXIT_CLOSED_FRAMES = (Sprite.HINATA_BACK, Sprite.HINATA_BACK_2, Sprite.HINATA_BACK_3)
EXIT_OPEN_FRAMES = (Sprite.HINATA, Sprite.HINATA_2, Sprite.HINATA_3)
ENEMY_FRAMES = (Sprite.SAKURA, Sprite.SAKURA_2, Sprite.SAKURA_3)


def texture_path(sprite: Sprite, root: str | os.PathLike[str] | None = None) -> Path:
    """Return the file holding ``sprite``, relative to ``root`` if one is given."""
    relative = Path(sprite.value)
    if root is None:
        return relative
    return Path(root) / relative