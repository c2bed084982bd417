import pytest

from slitherserver import constants as C
from slitherserver.bait import Bait
from slitherserver.messages import (
    dead_enemy_message,
    delete_bait_message,
    die_message,
    enemy_name_message,
    format_nodes,
    grown_message,
    new_bait_message,
    new_enemy_message,
    new_snake_message,
    parse_command,
    update_enemy_head_message,
    update_enemy_message,
    update_head_message,
    update_snake_message,
)
from slitherserver.snake import Node, Snake


def make_snake(coords):
    return Snake(length=5.0, skin=0, speed=1.0, nodes=[Node(x, y) for x, y in coords])


COORDS = [(1000.123456, 1500.5), (1001.25, 1499.0), (0.1, 2.0)]


def test_die_message():
    assert die_message() == "$8"


def test_new_bait_integral_values_drop_fraction():
    assert new_bait_message(Bait(1.0, 2.5, "3", 4.0)) == "$3,1,2.5,4"


def test_format_nodes_fixed_pins_four_decimals():
    assert format_nodes([Node(1.0, 2.0)], True) == "1.0000,2.0000"


def test_format_nodes_display_round_trips():
    nodes = [Node(x, y) for x, y in COORDS]
    fields = format_nodes(nodes, False).split(",")
    values = [float(f) for f in fields]
    assert values == [v for pair in COORDS for v in pair]


def test_format_nodes_fixed_close_to_values():
    nodes = [Node(x, y) for x, y in COORDS]
    fields = format_nodes(nodes, True).split(",")
    assert len(fields) == 2 * len(COORDS)
    for field, value in zip(fields, [v for pair in COORDS for v in pair]):
        assert len(field.split(".")[1]) == 4
        assert float(field) == pytest.approx(value, abs=5e-5)


def test_format_nodes_empty():
    assert format_nodes([], True) == ""


def test_display_large_float_has_no_exponent():
    bait = Bait(1e20, 1e-7, "0", 1.0)
    fields = new_bait_message(bait).split(",")
    assert "e" not in fields[1] and "e" not in fields[2]
    assert float(fields[1]) == 1e20
    assert float(fields[2]) == 1e-7


def test_new_and_update_snake_messages():
    snake = make_snake(COORDS)
    body = format_nodes(snake.nodes, True)
    assert new_snake_message(snake) == C.COMM_START_NEW_MESS + C.COMM_NEW_SNAKE + body
    assert update_snake_message(snake) == C.COMM_START_NEW_MESS + C.COMM_UPDATE_SNAKE + body


def test_update_head_message():
    snake = make_snake(COORDS)
    fields = update_head_message(snake).split(",")
    assert fields[0] == "$21"
    assert [float(f) for f in fields[1:]] == [COORDS[0][0], COORDS[0][1]]


def test_new_enemy_message_fields():
    snake = make_snake(COORDS)
    msg = new_enemy_message("abc", "Unnamed", snake.nodes, True)
    fields = msg.split(",")
    assert fields[:3] == ["$5", "abc", "Unnamed"]
    assert ",".join(fields[3:]) == format_nodes(snake.nodes, True)


def test_new_enemy_message_display_mode():
    snake = make_snake(COORDS)
    fields = new_enemy_message("p", "bob", snake.nodes, False).split(",")
    assert [float(f) for f in fields[3:]] == [v for pair in COORDS for v in pair]


def test_update_enemy_message():
    snake = make_snake(COORDS)
    fields = update_enemy_message(3, snake).split(",")
    assert fields[:2] == ["$6", "3"]
    assert ",".join(fields[2:]) == format_nodes(snake.nodes, True)


def test_update_enemy_head_message():
    snake = make_snake(COORDS)
    fields = update_enemy_head_message(2, snake).split(",")
    assert fields[:2] == ["$61", "2"]
    assert [float(f) for f in fields[2:]] == list(COORDS[0])


def test_delete_bait_message():
    bait = Bait(12.75, 0.5, "9", 3.0)
    fields = delete_bait_message(bait).split(",")
    assert fields[0] == "$4"
    assert [float(f) for f in fields[1:]] == [12.75, 0.5]


@pytest.mark.parametrize(
    "func, prefix",
    [(dead_enemy_message, "$7"), (enemy_name_message, "$9"), (grown_message, "$62")],
)
def test_id_messages(func, prefix):
    assert func(5).split(",") == [prefix, "5"]


def test_parse_command_bytes():
    assert parse_command(b"2,1,2,3,4") == ["2", "1", "2", "3", "4"]


def test_parse_command_str_and_empty():
    assert parse_command("9,alice") == ["9", "alice"]
    assert parse_command(b"") == [""]


def test_parse_command_invalid_utf8_replaced():
    fields = parse_command(b"9,\xff")
    assert fields[0] == "9"
    assert fields[1] == "\ufffd"