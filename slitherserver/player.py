"""Connected players and the registry that tracks them."""

from __future__ import annotations

import copy
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from slitherserver.snake import Snake

Address = Any  # typically a (host, port) tuple


@dataclass
class Player:
    """A connected player and their snake."""

    id: str
    name: str
    score: int
    current_rank: str
    snake: Snake
    addr: Address
    move_x: float = 0.0
    move_y: float = 0.0
    window_w: float = 0.0
    window_h: float = 0.0
    last_seen: float = 0.0

    def update_xy(self, x: float, y: float) -> None:
        self.move_x = x
        self.move_y = y


class PlayerRegistry:
    """Players addressed by position; ``clock`` gives seconds for activity tracking."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._players: list[Player] = []

    def _live(self, index: int) -> Player | None:
        if 0 <= index < len(self._players):
            return self._players[index]
        return None

    def create(self, player_id: str, name: str, score: int, current_rank: str,
               snake: Snake, addr: Address) -> Player:
        """Register a new player and return a copy of it."""
        player = Player(player_id, name, score, current_rank, copy.deepcopy(snake),
                        addr, last_seen=self._clock())
        self._players.append(player)
        return copy.deepcopy(player)

    def get(self, index: int) -> Player | None:
        """A copy of the player at ``index``, or None."""
        player = self._live(index)
        return copy.deepcopy(player) if player is not None else None

    def get_snake(self, index: int) -> Snake | None:
        """A copy of the snake of the player at ``index``, or None."""
        player = self._live(index)
        return copy.deepcopy(player.snake) if player is not None else None

    def remove(self, index: int) -> None:
        """Remove the player at ``index``; later players shift down.

        Raises IndexError when no player holds ``index``.
        """
        if not 0 <= index < len(self._players):
            raise IndexError(f"no player at index {index}")
        self._players.pop(index)

    def keys(self) -> list[int]:
        return list(range(len(self._players)))

    def __len__(self) -> int:
        return len(self._players)

    def update_position(self, index: int, x: float, y: float,
                        window_w: float, window_h: float) -> None:
        player = self._live(index)
        if player is not None:
            player.update_xy(x, y)
            player.window_w = window_w
            player.window_h = window_h
            player.last_seen = self._clock()

    def update_name(self, index: int, name: str) -> None:
        player = self._live(index)
        if player is not None:
            player.name = name
            player.last_seen = self._clock()

    def update_acceleration(self, index: int, accelerate: bool) -> None:
        player = self._live(index)
        if player is not None:
            player.snake.accelerate = accelerate
            player.last_seen = self._clock()

    def update_snake(self, index: int, snake: Snake) -> None:
        player = self._live(index)
        if player is not None:
            player.snake = copy.deepcopy(snake)

    def grow_snake(self, index: int) -> None:
        player = self._live(index)
        if player is not None:
            player.snake.grow()

    def find_by_addr(self, addr: Address) -> int | None:
        """Index of the first player with ``addr``, or None."""
        return next((i for i, p in enumerate(self._players) if p.addr == addr), None)

    def touch(self, index: int) -> None:
        player = self._live(index)
        if player is not None:
            player.last_seen = self._clock()

    def clean_inactive(self, timeout_secs: int) -> list[int]:
        """Remove players silent for more than ``timeout_secs`` whole seconds.

        Returns the indices they held before removal.
        """
        now = self._clock()
        inactive = [i for i, p in enumerate(self._players)
                    if int(now - p.last_seen) > timeout_secs]
        for index in reversed(inactive):
            del self._players[index]
        return inactive