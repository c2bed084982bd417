"""The game world: player commands, the per-tick simulation and outgoing packets."""

from __future__ import annotations

import logging
import random
import time
import uuid
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from slitherserver import constants as C
from slitherserver.bait import Bait, BaitStore
from slitherserver.collision import Rect
from slitherserver.messages import (
    dead_enemy_message,
    delete_bait_message,
    die_message,
    enemy_name_message,
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
from slitherserver.player import Address, PlayerRegistry
from slitherserver.snake import create_snake
from slitherserver.spawning import (
    generate_bait,
    generate_mass_bait,
    generate_specific_bait,
)

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Packet:
    """A datagram to send to one client."""

    addr: Address
    data: bytes


def _parse_float(text: str) -> float:
    """A strict float parse that yields 0.0 for anything malformed."""
    if text != text.strip() or "_" in text:
        return 0.0
    try:
        return float(text)
    except ValueError:
        return 0.0


class GameWorld:
    """All players and baits, advanced one step at a time by :meth:`tick`.

    Every method that produces traffic returns the packets to send rather
    than sending them itself.
    """

    def __init__(self, rng: random.Random | None = None,
                 clock: Callable[[], float] = time.monotonic) -> None:
        self.rng = rng or random.Random()
        self._clock = clock
        self._last_tick: float | None = None
        self.players = PlayerRegistry(clock)
        self.baits = BaitStore()

    def _to_all(self, keys: Iterable[int], text: str,
                skip: int | None = None) -> list[Packet]:
        packets = []
        for index in keys:
            if index == skip:
                continue
            player = self.players.get(index)
            if player is not None:
                packets.append(Packet(player.addr, text.encode()))
        return packets

    def _advance_snakes(self, keys: list[int], new_baits: list[Bait]) -> None:
        for index in keys:
            player = self.players.get(index)
            if player is None:
                continue
            snake = player.snake
            if snake.accelerate and len(snake.nodes) > C.SNAKE_INITIAL_LENGTH:
                if snake.accelerate_time < C.SNAKE_IT_IS_TIME_TO_SHORTER:
                    snake.accelerate_time += 1.0
                else:
                    snake.accelerate_time = 0.0
                    tail = snake.nodes[-1]
                    color = self.rng.randrange(0, C.MAX_BAIT_COLOR_RANGE)
                    new_baits.append(
                        generate_specific_bait(self.baits, tail.x, tail.y, color, 5.0))
                    snake.shorter()
            snake.move(player.move_x, player.move_y, player.window_w, player.window_h)
            self.players.update_snake(index, snake)

    def _collisions(self, keys: list[int], out: list[Packet]) -> tuple[list[int], str]:
        dead: list[int] = []
        bait_parts: list[str] = []
        third = C.SNAKE_INITIAL_SIZE / 3.0
        for i in keys:
            player_i = self.players.get(i)
            if player_i is None or i in dead:
                continue
            for j in keys:
                if i == j:
                    continue
                player_j = self.players.get(j)
                if player_j is None:
                    continue
                head = player_j.snake.nodes[0]
                head_rect = Rect.centered(head.x, head.y, third)
                if any(Rect.centered(n.x, n.y, third).intersects(head_rect)
                       for n in player_i.snake.nodes):
                    bait_parts.extend(
                        new_bait_message(b)
                        for b in generate_mass_bait(self.baits, player_j.snake, self.rng))
                    dead.append(j)
                    out.append(Packet(player_j.addr, die_message().encode()))
                    break
        return dead, "".join(bait_parts)

    def _eat_baits(self, keys: list[int], out: list[Packet]) -> tuple[list[Bait], str]:
        half = C.SNAKE_INITIAL_SIZE / 2.0
        bait_keys = self.baits.keys()
        deleted: list[Bait] = []
        grown: list[str] = []
        for i in keys:
            player = self.players.get(i)
            if player is None:
                continue
            head = player.snake.nodes[0]
            head_rect = Rect.centered(head.x, head.y, half)
            for j in bait_keys:
                bait = self.baits.get(j)
                if bait is None:
                    continue
                if head_rect.intersects(Rect.centered(bait.x, bait.y, bait.size / 2.0)):
                    self.players.grow_snake(i)
                    if C.SERVER_CURRENT_SENDING_PLAYER_METHOD == 21:
                        out.append(Packet(player.addr,
                                          f"{C.COMM_START_NEW_MESS}22".encode()))
                    grown.append(grown_message(i))
                    self.baits.remove(j)
                    deleted.append(bait)
        return deleted, "".join(grown)

    def _own_updates(self, keys: list[int]) -> list[Packet]:
        packets = []
        for index in keys:
            player = self.players.get(index)
            if player is None:
                continue
            if C.SERVER_CURRENT_SENDING_PLAYER_METHOD == 2:
                text = update_snake_message(player.snake)
            elif C.SERVER_CURRENT_SENDING_PLAYER_METHOD == 21:
                text = update_head_message(player.snake)
            else:
                continue
            packets.append(Packet(player.addr, text.encode()))
        return packets

    def _enemy_updates(self, keys: list[int]) -> list[Packet]:
        if C.SERVER_UPDATE_ENEMY_METHOD == 61:
            build = update_enemy_head_message
        elif C.SERVER_UPDATE_ENEMY_METHOD == 6:
            build = update_enemy_message
        else:
            return []
        packets = []
        for i in keys:
            player_i = self.players.get(i)
            if player_i is None:
                continue
            parts = []
            for j in keys:
                if i == j:
                    continue
                player_j = self.players.get(j)
                if player_j is not None:
                    parts.append(build(j, player_j.snake))
            text = "".join(parts)
            if text:
                packets.append(Packet(player_i.addr, text.encode()))
        return packets

    def tick(self) -> list[Packet]:
        """Run one step of the game and return the packets it produces."""
        now = self._clock()
        if self._last_tick is not None:
            log.debug("Ticked: %.0f ms", (now - self._last_tick) * 1000.0)
        self._last_tick = now

        out: list[Packet] = []
        new_baits: list[Bait] = []
        if len(self.baits) < C.MAX_BAITS:
            new_baits.append(generate_bait(
                self.baits, C.OFFSET_X + 10.0, C.TRUE_MAP_WIDTH - 10.0, self.rng))

        keys = self.players.keys()
        self._advance_snakes(keys, new_baits)

        dead, mass_bait_text = self._collisions(keys, out)
        dead_text = "".join(dead_enemy_message(d) for d in dead)
        if dead_text:
            out.extend(self._to_all(keys, dead_text))
        if mass_bait_text:
            out.extend(self._to_all(keys, mass_bait_text))

        deleted, grown_text = self._eat_baits(keys, out)
        deleted_text = "".join(delete_bait_message(b) for b in deleted)
        for index in keys:
            player = self.players.get(index)
            if player is None:
                continue
            if deleted_text:
                out.append(Packet(player.addr, deleted_text.encode()))
            if grown_text:
                out.append(Packet(player.addr, grown_text.encode()))

        out.extend(self._own_updates(keys))
        out.extend(self._enemy_updates(keys))

        new_bait_text = "".join(new_bait_message(b) for b in new_baits)
        if new_bait_text:
            out.extend(self._to_all(keys, new_bait_text))

        for gone in self.players.clean_inactive(C.PLAYER_TIMEOUT_SECS):
            log.info("Player %s disconnected due to inactivity", gone)
            log.info("Total player(s): %d", len(self.players))
            out.extend(self._to_all(keys, dead_enemy_message(gone), skip=gone))
        return out

    def handle_packet(self, data: bytes | str, addr: Address) -> list[Packet]:
        """Apply one client datagram and return the packets it produces."""
        fields = parse_command(data)
        log.debug("%s", ",".join(fields))
        index = self.players.find_by_addr(addr)
        command = fields[0]

        if command == "0":
            _, packets = self.create_player(addr)
            return packets
        if index is None:
            return []
        if command == "2":
            if len(fields) >= 5:
                x, y, w, h = (_parse_float(f) for f in fields[1:5])
                self.players.update_position(index, x, y, w, h)
        elif command == "9":
            if len(fields) >= 2:
                self.players.update_name(index, fields[1])
                return self._to_all(self.players.keys(), enemy_name_message(index),
                                    skip=index)
        elif command == "10":
            self.players.update_acceleration(index, True)
        elif command == "11":
            self.players.update_acceleration(index, False)
        return []

    def create_player(self, addr: Address) -> tuple[str, list[Packet]]:
        """Add a player at ``addr``; return its id and the welcome traffic."""
        player_id = str(uuid.UUID(int=self.rng.getrandbits(128), version=4))
        log.info("New player created: %s", player_id)
        snake = create_snake(float(C.SNAKE_INITIAL_LENGTH),
                             self.rng.randrange(0, C.SNAKE_SKIN_COLOR_RANGE),
                             C.SNAKE_SPEED, self.rng)
        self.players.create(player_id, "", 0, player_id, snake, addr)

        packets = [Packet(addr, new_snake_message(snake).encode())]
        announce = new_enemy_message(player_id, "Unnamed", snake.nodes, fixed=True)

        keys = self.players.keys()
        others = [p for p in (self.players.get(i) for i in keys)
                  if p is not None and p.id != player_id]
        existing = "".join(new_enemy_message(p.id, p.name, p.snake.nodes, fixed=False)
                           for p in others)
        if existing:
            packets.append(Packet(addr, existing.encode()))
        packets.extend(Packet(p.addr, announce.encode()) for p in others)

        for bait_index in self.baits.keys():
            bait = self.baits.get(bait_index)
            if bait is not None:
                packets.append(Packet(addr, new_bait_message(bait).encode()))

        log.info("Total player(s): %d", len(self.players))
        return player_id, packets

    def delete_player(self, index: int) -> list[Packet]:
        """Remove the player at ``index`` and tell everyone else.

        Raises IndexError when there is no such player.
        """
        packets = self._to_all(self.players.keys(), dead_enemy_message(index), skip=index)
        self.players.remove(index)
        log.info("Total player(s): %d", len(self.players))
        return packets