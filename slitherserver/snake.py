"""Snake bodies, their movement, and a registry of snakes."""

from __future__ import annotations

import copy
import math
import random
from dataclasses import dataclass, field

from slitherserver import constants as C


@dataclass
class Node:
    """One segment of a snake's body."""

    x: float
    y: float


def _clamp_to_map(node: Node) -> None:
    half = C.SNAKE_INITIAL_SIZE / 2.0
    if node.x - half < C.OFFSET_X:
        node.x = C.OFFSET_X + half
    if node.y - half < C.OFFSET_Y:
        node.y = C.OFFSET_Y + half
    if node.x + half > C.TRUE_MAP_WIDTH:
        node.x = C.TRUE_MAP_WIDTH - half
    if node.y + half > C.TRUE_MAP_HEIGHT:
        node.y = C.TRUE_MAP_HEIGHT - half


@dataclass
class Snake:
    """A snake: its body nodes plus movement state."""

    length: float
    skin: int
    speed: float
    nodes: list[Node] = field(default_factory=list)
    current_speed_sec: float = 0.0
    current_angle: float = 0.0
    rotate_angle: float = 0.0
    is_dead: bool = False
    accelerate: bool = False
    accelerate_time: float = 0.0

    def grow(self) -> None:
        """Append a copy of the tail node, up to the node limit."""
        if len(self.nodes) < C.SNAKE_MAX_NODES:
            tail = self.nodes[-1]
            self.nodes.append(Node(tail.x, tail.y))

    def shorter(self) -> None:
        """Drop the tail node if there is one."""
        if self.nodes:
            self.nodes.pop()

    def set_rotate_angle(self, angle: float) -> None:
        self.rotate_angle = angle

    def rotate(self) -> None:
        """Turn the current angle towards the target by at most the rotate speed."""
        if self.rotate_angle > self.current_angle:
            self.current_angle = min(
                self.rotate_angle, self.current_angle + C.SNAKE_ROTATE_SPEED
            )
        else:
            self.current_angle = max(
                self.rotate_angle, self.current_angle - C.SNAKE_ROTATE_SPEED
            )

    def _step_head(self, to_x: float, to_y: float, center_x: float,
                   center_y: float, speed: float) -> None:
        dx = to_x - center_x / 2.0
        dy = to_y - center_y / 2.0
        dist = math.hypot(dx, dy) or 1.0
        head = self.nodes[0]
        head.x += dx / dist * speed
        head.y += dy / dist * speed
        _clamp_to_map(head)

    def move(self, to_x: float, to_y: float, center_x: float, center_y: float,
             method: int = C.SERVER_CURRENT_UPDATE_PLAYER_METHOD) -> None:
        """Advance the snake one step towards the pointer.

        Method 1 shifts every node into its predecessor's place; method 2
        pulls each node towards its predecessor in proportion to their gap.
        """
        if method == 1:
            self.nodes[1:] = [Node(n.x, n.y) for n in self.nodes[:-1]]
            self._step_head(to_x, to_y, center_x, center_y, C.SNAKE_SPEED)
        elif method == 2:
            base = C.SNAKE_SPEED_ACCELERATE * C.SNAKE_SPEED if self.accelerate else C.SNAKE_SPEED
            pairs = list(zip(self.nodes, self.nodes[1:]))
            for ahead, node in reversed(pairs):
                dx = ahead.x - node.x
                dy = ahead.y - node.y
                dist = math.hypot(dx, dy)
                speed = base * (dist / C.SNAKE_NODE_INITIAL_DISTANCE)
                divisor = dist if dist != 0.0 else 0.1
                node.x += dx / divisor * speed
                node.y += dy / divisor * speed
                _clamp_to_map(node)
            self._step_head(to_x, to_y, center_x, center_y, base)
        else:
            raise ValueError(f"unknown update method: {method}")


def initial_nodes(x: float, y: float) -> list[Node]:
    """The starting body: a chain of nodes beginning at (x, y)."""
    nodes = [Node(x, y)]
    for _ in range(1, C.SNAKE_INITIAL_LENGTH):
        last = nodes[-1]
        nodes.append(Node(last.x + C.SNAKE_NODE_SPACE, last.y + C.SNAKE_NODE_SPACE))
    return nodes


def create_snake(length: float, skin: int, speed: float,
                 rng: random.Random | None = None) -> Snake:
    """A new snake placed at a random spot inside the inner map area."""
    rng = rng or random.Random()
    border_w = C.BORDER_WIDTH - C.MAP_WIDTH
    border_h = C.BORDER_HEIGHT - C.MAP_HEIGHT
    x = rng.uniform(border_w / 2.0 + 500.0, border_w / 2.0 + C.MAP_WIDTH - 500.0)
    y = rng.uniform(border_h / 2.0 + 500.0, border_h / 2.0 + C.MAP_HEIGHT - 500.0)
    return Snake(length=length, skin=skin, speed=speed, nodes=initial_nodes(x, y))


class SnakeRegistry:
    """Slot-based snake storage; removed slots stay empty."""

    def __init__(self) -> None:
        self._snakes: list[Snake | None] = []

    def add(self, snake: Snake) -> int:
        """Store a copy of ``snake`` and return its slot index."""
        self._snakes.append(copy.deepcopy(snake))
        return len(self._snakes) - 1

    def get(self, index: int) -> Snake | None:
        """A copy of the snake in ``index``, or None."""
        if 0 <= index < len(self._snakes) and self._snakes[index] is not None:
            return copy.deepcopy(self._snakes[index])
        return None

    def remove(self, index: int) -> None:
        """Empty the slot at ``index``; out of range is ignored."""
        if 0 <= index < len(self._snakes):
            self._snakes[index] = None

    def keys(self) -> list[int]:
        """Indices of occupied slots."""
        return [i for i, s in enumerate(self._snakes) if s is not None]

    def __len__(self) -> int:
        """Number of slots, including emptied ones."""
        return len(self._snakes)