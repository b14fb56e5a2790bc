"""The playing field, the game loop and the text rendering of a frame."""

from __future__ import annotations

import sys
import time
from typing import Callable, Iterable, Iterator, List, Optional, TextIO

from .entities import BULLET_NAME, Bullet, Direction, GameObject, Player
from .keys import is_key_pressed

CLEAR_SCREEN = "\033[2J\033[H"
CURSOR_HOME = "\033[H"
CONTROLS = "controls: a - go left, d - go right, w - shoot, s - stop"

KeySource = Callable[[str], bool]

_TICK_SPEED_KEYS = {"1": 200, "2": 100, "3": 50, "4": 1, "5": 0}
_RELOAD_TIME_KEYS = {"6": 10, "7": 8, "8": 5, "9": 3, "0": 0}


def _commands(stream: Iterable[str]) -> Iterator[str]:
    """Yield the non-blank characters of a stream one at a time."""
    for line in stream:
        for char in line:
            if not char.isspace():
                yield char


class Game:
    """A field of rows and columns holding the player and the bullets in flight."""

    ROWS = 20
    COLS = 36
    DEFAULT_TICK_SPEED = 100
    DEFAULT_RELOAD_TIME = 10

    def __init__(self) -> None:
        self.game_over = False
        self.tick_speed = self.DEFAULT_TICK_SPEED
        self.reload_time = self.DEFAULT_RELOAD_TIME
        self.player = Player(self.COLS // 2, self.ROWS - 1)
        self.field: List[List[Optional[GameObject]]] = [
            [None] * self.COLS for _ in range(self.ROWS)
        ]
        self.bullets: List[Bullet] = []
        self._place(self.player)

    def _place(self, obj: GameObject) -> None:
        self.field[obj.y][obj.x] = obj

    def _remove_from(self, x: int, y: int) -> None:
        self.field[y][x] = None

    def _finish(self, out: TextIO) -> None:
        out.write(CLEAR_SCREEN)
        out.write("game ended...\n")
        out.write(f"final score: {self.player.score}\n")

    def run(
        self,
        key_source: Optional[KeySource] = None,
        out: Optional[TextIO] = None,
        sleep: Optional[Callable[[float], None]] = None,
    ) -> None:
        """Play in real time, polling keys each tick until 'S' is pressed."""
        pressed = key_source if key_source is not None else is_key_pressed
        out = sys.stdout if out is None else out
        sleep = time.sleep if sleep is None else sleep

        out.write(CLEAR_SCREEN)
        while not pressed("S"):
            self.update(out)
            if pressed("A"):
                self.move_player_left()
            if pressed("D"):
                self.move_player_right()
            if pressed("W") and self.player.reload <= 0:
                self.shoot_player_bullet()
                self.player.reload = self.reload_time
            for key, speed in _TICK_SPEED_KEYS.items():
                if pressed(key):
                    self.tick_speed = speed
            for key, reload_time in _RELOAD_TIME_KEYS.items():
                if pressed(key):
                    self.reload_time = reload_time
            sleep(self.tick_speed / 1000)
        self._finish(out)

    def run_manual_input(
        self, input_stream: Optional[TextIO] = None, out: Optional[TextIO] = None
    ) -> None:
        """Play one step per typed command: a, d, w, and s to stop."""
        input_stream = sys.stdin if input_stream is None else input_stream
        out = sys.stdout if out is None else out
        actions = {
            "a": self.move_player_left,
            "d": self.move_player_right,
            "w": self.shoot_player_bullet,
        }

        commands = _commands(input_stream)
        command = " "
        while command != "s" and not self.game_over:
            self.update(out)
            next_command = next(commands, None)
            if next_command is None:
                break
            command = next_command
            action = actions.get(command)
            if action is not None:
                action()
        self._finish(out)

    def update(self, out: Optional[TextIO] = None) -> None:
        """Advance one tick: count down the reload, move bullets, draw the frame."""
        out = sys.stdout if out is None else out
        if self.player.reload > 0:
            self.player.tick_reload()
        self.move_bullets()
        out.write(self.render())

    def move_player_left(self) -> None:
        self._remove_from(self.player.x, self.player.y)
        self.player.go_left()
        self._place(self.player)

    def move_player_right(self) -> None:
        self._remove_from(self.player.x, self.player.y)
        self.player.go_right()
        self._place(self.player)

    def shoot_player_bullet(self) -> None:
        """Fire a bullet upwards from just above the player."""
        start = self.player.shoot()
        bullet = Bullet(start.x, start.y, Direction.UP)
        self.bullets.append(bullet)
        self.field[self.ROWS - 2][self.player.x] = bullet

    def clear_bullets(self) -> None:
        """Drop bullets that have reached the top or bottom row."""
        for row in (self.field[0], self.field[self.ROWS - 1]):
            for col, occupant in enumerate(row):
                if occupant is not None and occupant.name == BULLET_NAME:
                    row[col] = None
        self.bullets = [b for b in self.bullets if 0 < b.y < self.ROWS - 1]

    def move_bullets(self) -> None:
        """Move every bullet one step; a bullet landing on the player costs a life."""
        self.clear_bullets()
        for bullet in self.bullets:
            self._remove_from(bullet.x, bullet.y)
            bullet.update()
            occupant = self.field[bullet.y][bullet.x]
            if occupant is not None and occupant.name == self.player.name:
                self.player.lose_life()
                if self.player.lives <= 0:
                    self.game_over = True
                    return
            else:
                self._place(bullet)

    def render(self) -> str:
        """Return the frame as text, starting with a cursor-home sequence."""
        rule = "_" * (self.COLS * 3)
        lines = [
            "Space Invaders:",
            f"score: {self.player.score} lives: {self.player.lives}",
            rule,
        ]
        for row in self.field:
            cells = "".join(
                "   " if occupant is None else f" {occupant.name} " for occupant in row
            )
            lines.append(f"| {cells} |")
        lines.append(rule)
        lines.append(CONTROLS)
        return CURSOR_HOME + "\n".join(lines)

    def __str__(self) -> str:
        return self.render()