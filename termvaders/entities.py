"""Objects that live on the playing field: the base object, bullets and the player."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

EMPTY_NAME = " "
BULLET_NAME = "*"
PLAYER_NAME = "@"

INITIAL_LIVES = 3
PLAYER_MAX_X = 35
BULLET_MAX_Y = 27


@dataclass
class GameObject:
    """Something with a position on the field and a one-character name."""

    x: int = 0
    y: int = 0
    name: str = EMPTY_NAME

    def move_to(self, x: int, y: int) -> None:
        """Place the object at the given column and row."""
        self.x = x
        self.y = y

    def __str__(self) -> str:
        return self.name


class Direction(IntEnum):
    """Direction a bullet travels in."""

    UP = 1
    DOWN = 2


@dataclass
class Bullet(GameObject):
    """A projectile that moves one row per update."""

    name: str = field(default=BULLET_NAME, init=False)
    direction: Direction = Direction.UP

    def update(self) -> None:
        """Advance one row in the bullet's direction, stopping at the edges."""
        if self.direction == Direction.UP and self.y > 0:
            self.y -= 1
        elif self.direction == Direction.DOWN and self.y < BULLET_MAX_Y:
            self.y += 1


@dataclass
class Player(GameObject):
    """The player's ship, with score, lives and a reload counter."""

    name: str = field(default=PLAYER_NAME, init=False)
    score: int = 0
    lives: int = INITIAL_LIVES
    reload: int = 0

    def go_left(self) -> None:
        """Move one column left unless already at the left edge."""
        if self.x > 0:
            self.x -= 1

    def go_right(self) -> None:
        """Move one column right unless already at the right edge."""
        if self.x < PLAYER_MAX_X:
            self.x += 1

    def shoot(self) -> GameObject:
        """Return the spot just above the player where a bullet starts."""
        return GameObject(self.x, self.y - 1)

    def lose_life(self) -> None:
        self.lives -= 1

    def add_score(self, points: int) -> None:
        self.score += points

    def tick_reload(self) -> None:
        self.reload -= 1