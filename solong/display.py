"""Drawing the game in a window and running it from the command line."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Callable, Sequence

import pygame

from solong.animation import Animator
from solong.game import Direction, Game, MoveResult, Outcome, direction_for_key
from solong.maps import (
    COLLECTIBLE,
    ENEMY,
    EXIT,
    PLAYER,
    WALL,
    GameMap,
    MapError,
    Position,
    load_map,
)
from solong.sprites import SIZE, Sprite, texture_path

WINDOW_TITLE = "Naruto"
USAGE = "Error\n Usage: ./so_long <map_file.ber>\n"
TEXT_COLOUR = 0xFFFFFF
BANNER_COLOUR = 0x000000
FONT_SIZE = 16
FRAMES_PER_SECOND = 60
FAREWELL_DELAY_MS = 1000
_ANIMATION_SPEED = 10

_STEP_SPRITES = {
    Direction.UP: Sprite.NARUTO_UP,
    Direction.DOWN: Sprite.NARUTO,
    Direction.LEFT: Sprite.NARUTO_LEFT,
    Direction.RIGHT: Sprite.NARUTO_RIGHT,
}

Loader = Callable[[Path], pygame.Surface]


def _write(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def _load_texture(path: Path) -> pygame.Surface:
    return pygame.image.load(os.fspath(path))


def _colour(value) -> pygame.Color:
    if isinstance(value, int):
        return pygame.Color((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)
    return pygame.Color(value)


def select_sprite(game_map: GameMap, x: int, y: int, bonus: bool = False) -> Sprite:
    """Return the sprite that starts out on cell ``(x, y)`` of the map."""
    if x == 0 or y == 0 or x == game_map.width - 1 or y == game_map.height - 1:
        return Sprite.WALL
    tile = game_map.tile(x, y)
    if tile == PLAYER:
        return Sprite.NARUTO
    if tile == WALL:
        return Sprite.WALL
    if tile == COLLECTIBLE:
        return Sprite.HAT
    if tile == EXIT:
        return Sprite.HINATA_BACK
    if bonus and tile == ENEMY:
        return Sprite.SAKURA
    return Sprite.FLOOR


class Renderer:
    """Draws map tiles and text onto a surface, caching loaded textures."""

    def __init__(
        self,
        surface: pygame.Surface,
        bonus: bool = False,
        root: str | os.PathLike[str] | None = None,
        loader: Loader | None = None,
    ) -> None:
        self.surface = surface
        self.bonus = bonus
        self.root = root
        self._loader = loader or _load_texture
        self._images: dict[Sprite, pygame.Surface] = {}
        self._font: pygame.font.Font | None = None

    def image(self, sprite: Sprite) -> pygame.Surface:
        """Return the texture for ``sprite``, loading it on first use."""
        if sprite not in self._images:
            path = texture_path(sprite, self.root)
            try:
                self._images[sprite] = self._loader(path)
            except (pygame.error, OSError) as exc:
                raise RuntimeError(f"Failed to load image '{path}'") from exc
        return self._images[sprite]

    def draw_tile(self, x: int, y: int, sprite: Sprite) -> pygame.Rect:
        """Draw ``sprite`` on map cell ``(x, y)`` and return the area covered."""
        return self.surface.blit(self.image(sprite), (x * SIZE, y * SIZE))

    def draw_map(self, game_map: GameMap) -> None:
        """Draw every cell of ``game_map``."""
        for y in range(game_map.height):
            for x in range(game_map.width):
                self.draw_tile(x, y, select_sprite(game_map, x, y, self.bonus))

    @property
    def font(self) -> pygame.font.Font:
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, FONT_SIZE)
        return self._font

    def draw_text(self, text: str, x: int, y: int, color=TEXT_COLOUR) -> pygame.Rect:
        """Draw ``text`` starting at ``x`` with its baseline at ``y``."""
        rendered = self.font.render(text, True, _colour(color))
        return self.surface.blit(rendered, (x, y - self.font.get_ascent()))

    def draw_moves(self, moves: int) -> pygame.Rect:
        """Draw the move counter in the top left corner over a dark patch."""
        self.surface.fill(_colour(0x000000), pygame.Rect(SIZE - 30, SIZE - 30, SIZE, SIZE - 40))
        return self.draw_text(f"MOVES: {moves}", SIZE - 25, SIZE - 15, TEXT_COLOUR)

    def draw_banner(self, game_map: GameMap, text: str) -> pygame.Rect:
        """Draw ``text`` around the middle of the map."""
        x = (SIZE * game_map.width) // 2 - len(text) * 5
        y = (SIZE * game_map.height) // 2
        return self.draw_text(text, x, y, BANNER_COLOUR)


def _farewell(game: Game, renderer: Renderer, sprite: Sprite, text: str) -> None:
    renderer.draw_tile(*game.position, sprite)
    renderer.draw_banner(game.map, text)
    pygame.display.flip()
    pygame.time.wait(FAREWELL_DELAY_MS)


def _give_up(game: Game, renderer: Renderer) -> Outcome:
    if game.bonus:
        _farewell(game, renderer, Sprite.NARUTO_LOSE, "YOU LOST!")
    _write(game.quit())
    return Outcome.LOST


def _show_move(game: Game, renderer: Renderer, result: MoveResult) -> None:
    if result.outcome is Outcome.MOVED:
        renderer.draw_tile(*result.start, Sprite.FLOOR)
        step = _STEP_SPRITES[result.direction] if game.bonus else Sprite.NARUTO
        renderer.draw_tile(*result.end, step)
        if game.bonus:
            renderer.draw_moves(result.moves)
        elif result.message:
            _write(result.message)
    elif result.outcome is Outcome.WON:
        _write(result.message or "")
        if game.bonus:
            _farewell(game, renderer, Sprite.NARUTO_WIN, "YOU WON!")
    elif result.outcome is Outcome.LOST:
        _farewell(game, renderer, Sprite.NARUTO_LOSE, "YOU LOST!")
        _write(result.message or "")


def _animated_position(game: Game, role: str) -> Position | None:
    if role == "exit":
        return game.map.exit
    if role == "enemy":
        return game.map.enemy
    return game.position


def _play(game: Game, renderer: Renderer) -> Outcome:
    animator = Animator(_ANIMATION_SPEED) if game.bonus else None
    clock = pygame.time.Clock()
    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return _give_up(game, renderer)
            if event.type != pygame.KEYDOWN:
                continue
            key = pygame.key.name(event.key)
            if key == "escape":
                return _give_up(game, renderer)
            direction = direction_for_key(key, game.bonus)
            if direction is None:
                continue
            _show_move(game, renderer, game.move(direction))
            if game.finished:
                return game.outcome
        if animator is not None:
            for role, sprite in animator.tick(game.collectibles, game.player_moving):
                position = _animated_position(game, role)
                if position is not None:
                    renderer.draw_tile(*position, sprite)
        pygame.display.flip()
        clock.tick(FRAMES_PER_SECOND)


def run(path: str | os.PathLike[str], bonus: bool = False) -> Outcome | None:
    """Load the map at ``path`` and play it in a window.

    Returns how the game ended, or None if it could not be started.
    """
    try:
        game_map = load_map(path, with_enemies=bonus)
    except MapError as exc:
        _write(f"Error\n{exc}\n")
        _write("Error\nFailed to initialize map\n")
        return None
    game = Game(game_map, bonus=bonus)
    pygame.init()
    try:
        screen = pygame.display.set_mode((game_map.width * SIZE, game_map.height * SIZE))
        pygame.display.set_caption(WINDOW_TITLE)
        renderer = Renderer(screen, bonus=bonus)
        try:
            renderer.draw_map(game_map)
        except RuntimeError as exc:
            _write(f"Error\n{exc}\n")
            _write("Error\n Could not render the game\n")
            return None
        pygame.display.flip()
        return _play(game, renderer)
    finally:
        pygame.quit()


def _main(argv: Sequence[str] | None, bonus: bool) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        _write(USAGE)
        return 0
    run(args[0], bonus=bonus)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Play the basic game on the map file named in ``argv``."""
    return _main(argv, bonus=False)


def main_bonus(argv: Sequence[str] | None = None) -> int:
    """Play the game with enemies and animations on the map named in ``argv``."""
    return _main(argv, bonus=True)