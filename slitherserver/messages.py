"""Building and parsing the comma-separated wire messages."""

from __future__ import annotations

import math
from collections.abc import Iterable
from decimal import Decimal

from slitherserver import constants as C
from slitherserver.bait import Bait
from slitherserver.snake import Node, Snake

_START = C.COMM_START_NEW_MESS


def _display(value: float) -> str:
    """Shortest decimal form of a float, without exponent or trailing ``.0``."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value == 0.0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"
    if value.is_integer():
        return str(int(value))
    text = repr(value)
    if "e" in text or "E" in text:
        text = format(Decimal(text), "f")
    return text


def _fixed(value: float) -> str:
    return f"{value:.4f}"


def format_nodes(nodes: Iterable[Node], fixed: bool = True) -> str:
    """Node coordinates as ``x,y,x,y,...``; four decimals when ``fixed``."""
    fmt = _fixed if fixed else _display
    return ",".join(f"{fmt(node.x)},{fmt(node.y)}" for node in nodes)


def new_snake_message(snake: Snake) -> str:
    """The first full body sent to the snake's own player."""
    return f"{_START}{C.COMM_NEW_SNAKE}{format_nodes(snake.nodes, True)}"


def update_snake_message(snake: Snake) -> str:
    """Every node of the player's own snake."""
    return f"{_START}{C.COMM_UPDATE_SNAKE}{format_nodes(snake.nodes, True)}"


def update_head_message(snake: Snake) -> str:
    """Only the head of the player's own snake."""
    head = snake.nodes[0]
    return f"{_START}{C.COMM_UPDATE_SNAKE_HEAD_ONLY}{_display(head.x)},{_display(head.y)}"


def new_enemy_message(player_id: object, name: str, nodes: Iterable[Node],
                      fixed: bool = True) -> str:
    """Announce another player's snake, with its name and body."""
    return f"{_START}{C.COMM_NEW_ENEMY}{player_id},{name},{format_nodes(nodes, fixed)}"


def update_enemy_message(index: int, snake: Snake) -> str:
    """Every node of another player's snake."""
    return f"{_START}{C.COMM_UPDATE_ENEMY}{index},{format_nodes(snake.nodes, True)}"


def update_enemy_head_message(index: int, snake: Snake) -> str:
    """Only the head of another player's snake."""
    head = snake.nodes[0]
    return f"{_START}61,{index},{_display(head.x)},{_display(head.y)}"


def new_bait_message(bait: Bait) -> str:
    return (f"{_START}{C.COMM_NEW_BAIT}{_display(bait.x)},{_display(bait.y)},"
            f"{_display(bait.size)}")


def delete_bait_message(bait: Bait) -> str:
    return f"{_START}{C.COMM_DELETE_BAIT}{_display(bait.x)},{_display(bait.y)}"


def dead_enemy_message(player_id: object) -> str:
    return f"{_START}{C.COMM_DEAD_ENEMY}{player_id}"


def die_message() -> str:
    return f"{_START}8"


def enemy_name_message(player_id: object) -> str:
    return f"{_START}{C.COMM_ENEMY_NAME}{player_id}"


def grown_message(index: int) -> str:
    return f"{_START}62,{index}"


def parse_command(data: bytes | str) -> list[str]:
    """Split an incoming datagram into its comma-separated fields.

    Invalid UTF-8 is replaced rather than rejected; the result always holds
    at least one field.
    """
    text = data.decode("utf-8", errors="replace") if isinstance(data, (bytes, bytearray)) else data
    return text.split(",")