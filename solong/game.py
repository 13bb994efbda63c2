"""Game state and player movement on a validated map."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from solong.maps import COLLECTIBLE, ENEMY, EXIT, FLOOR, WALL, GameMap, Position


class Direction(Enum):
    """A step the player can take, as a ``(dx, dy)`` offset."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


class Outcome(Enum):
    """What happened when the player tried to move."""

    MOVED = "moved"
    BLOCKED = "blocked"
    WON = "won"
    LOST = "lost"


@dataclass(frozen=True)
class MoveResult:
    """The result of one attempted move."""

    outcome: Outcome
    direction: Direction
    start: Position
    end: Position
    moves: int
    collected: bool = False
    message: str | None = None


_LETTER_KEYS = {
    "w": Direction.UP,
    "a": Direction.LEFT,
    "s": Direction.DOWN,
    "d": Direction.RIGHT,
}

_ARROW_KEYS = {
    "up": Direction.UP,
    "left": Direction.LEFT,
    "down": Direction.DOWN,
    "right": Direction.RIGHT,
}


def direction_for_key(key: str, with_arrows: bool = False) -> Direction | None:
    """Map a key name to a direction, or None if the key does not move."""
    if key in _LETTER_KEYS:
        return _LETTER_KEYS[key]
    if with_arrows:
        return _ARROW_KEYS.get(key)
    return None


def win_message(moves: int, bonus: bool = False) -> str:
    """Return the text shown when the player reaches the exit."""
    if bonus:
        return f"YOU WON\nYOU DID {moves} MOVES.\nIS THIS YOUR BEST?\n"
    return f"You Won\nYou did {moves} moves\nThis is the best you can do?\n"


def lose_message(moves: int, bonus: bool = False) -> str:
    """Return the text shown when the player quits or is caught."""
    if bonus:
        return f"YOU DID {moves} MOVES\nYOU LOSE...\nWANNA TRY AGAIN?\n"
    return f"You did {moves} moves\nNice try ....\nMaybe one more time?\n"


@dataclass
class Game:
    """A running game: the map, the player's position and the move count."""

    map: GameMap
    bonus: bool = False
    position: Position = field(init=False)
    moves: int = field(init=False, default=0)
    collectibles: int = field(init=False)
    finished: bool = field(init=False, default=False)
    outcome: Outcome | None = field(init=False, default=None)
    player_moving: bool = field(init=False, default=False)

    def __post_init__(self) -> None:
        self.position = self.map.start
        self.collectibles = self.map.collectibles

    def _finish(self, outcome: Outcome) -> None:
        self.finished = True
        self.outcome = outcome

    def move(self, direction: Direction) -> MoveResult:
        """Try to step one cell in ``direction`` and report what happened."""
        if self.finished:
            raise RuntimeError("the game is over")
        self.player_moving = True
        start = self.position
        target = (start[0] + direction.dx, start[1] + direction.dy)
        tile = self.map.tile(*target)

        def result(outcome: Outcome, end: Position, collected: bool = False,
                   message: str | None = None) -> MoveResult:
            return MoveResult(outcome, direction, start, end, self.moves,
                              collected, message)

        if tile == WALL:
            return result(Outcome.BLOCKED, start)

        collected = False
        if tile == COLLECTIBLE:
            self.collectibles -= 1
            self.map.grid[target[1]][target[0]] = FLOOR
            tile = FLOOR
            collected = True

        if self.bonus and tile == ENEMY:
            self._finish(Outcome.LOST)
            return result(Outcome.LOST, start, collected,
                          lose_message(self.moves, self.bonus))

        if tile == EXIT:
            if self.collectibles:
                return result(Outcome.BLOCKED, start, collected)
            self.moves += 1
            self._finish(Outcome.WON)
            return result(Outcome.WON, target, collected,
                          win_message(self.moves, self.bonus))

        self.position = target
        self.moves += 1
        self.player_moving = False
        message = None if self.bonus else f"moves = {self.moves}\n"
        return result(Outcome.MOVED, target, collected, message)

    def quit(self) -> str:
        """End the game as a loss and return the farewell text."""
        self._finish(Outcome.LOST)
        return lose_message(self.moves, self.bonus)