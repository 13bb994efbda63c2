"""Frame counters that cycle the animated sprites of the bonus game."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from solong.sprites import (
    ENEMY_FRAMES,
    EXIT_CLOSED_FRAMES,
    EXIT_OPEN_FRAMES,
    PLAYER_IDLE_FRAMES,
    Sprite,
)

DEFAULT_SPEED = 40000
"""Number of ticks between two frames of an animation."""


@dataclass
class SpriteCycle:
    """Steps through ``frames``, advancing one frame every ``speed`` ticks."""

    frames: Sequence[Sprite]
    speed: int = DEFAULT_SPEED
    counter: int = field(default=0)
    index: int = field(default=0)

    def __post_init__(self) -> None:
        self.frames = tuple(self.frames)
        if not self.frames:
            raise ValueError("an animation needs at least one frame")
        if self.speed < 1:
            raise ValueError("animation speed must be at least 1")

    @property
    def current(self) -> Sprite:
        return self.frames[self.index]

    def tick(self) -> Sprite | None:
        """Count one tick; return the new frame when it changes, else None."""
        self.counter += 1
        if self.counter < self.speed:
            return None
        self.counter = 0
        self.index = (self.index + 1) % len(self.frames)
        return self.frames[self.index]


class Animator:
    """Drives the exit, enemy and idle player animations together.

    The exit keeps one counter for its whole life; once every collectible is
    taken it switches, once and for good, from facing away to facing the player.
    """

    def __init__(self, speed: int = DEFAULT_SPEED) -> None:
        self.exit_cycle = SpriteCycle(EXIT_CLOSED_FRAMES, speed)
        self.enemy_cycle = SpriteCycle(ENEMY_FRAMES, speed)
        self.player_cycle = SpriteCycle(PLAYER_IDLE_FRAMES, speed)
        self.exit_open = False

    def tick(self, collectibles_left: int, player_moving: bool) -> list[tuple[str, Sprite]]:
        """Advance one tick and return ``(role, sprite)`` pairs to redraw.

        Roles are ``"exit"``, ``"enemy"`` and ``"player"``, in that order.
        """
        updates: list[tuple[str, Sprite]] = []
        if not self.exit_open and collectibles_left == 0:
            self.exit_open = True
            self.exit_cycle.frames = EXIT_OPEN_FRAMES
            updates.append(("exit", Sprite.HINATA))
        frame = self.exit_cycle.tick()
        if frame is not None:
            updates.append(("exit", frame))
        frame = self.enemy_cycle.tick()
        if frame is not None:
            updates.append(("enemy", frame))
        if not player_moving:
            frame = self.player_cycle.tick()
            if frame is not None:
                updates.append(("player", frame))
        return updates