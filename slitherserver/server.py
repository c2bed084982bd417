"""UDP transport for the game world and the command-line entry point."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from collections.abc import Iterable

from slitherserver import constants as C
from slitherserver.engine import GameWorld, Packet

log = logging.getLogger(__name__)

_MAX_DATAGRAM = 1024


class GameProtocol(asyncio.DatagramProtocol):
    """Feeds incoming datagrams to the world and sends its replies."""

    def __init__(self, world: GameWorld) -> None:
        self.world = world
        self.transport: asyncio.DatagramTransport | None = None

    def connection_made(self, transport: asyncio.BaseTransport) -> None:
        self.transport = transport  # type: ignore[assignment]

    def datagram_received(self, data: bytes, addr) -> None:
        if not data:
            log.error("no data received")
            return
        self.send_all(self.world.handle_packet(data[:_MAX_DATAGRAM], addr))

    def send_all(self, packets: Iterable[Packet]) -> None:
        """Send every packet; raises RuntimeError before a transport is attached."""
        if self.transport is None:
            raise RuntimeError("protocol is not connected")
        for packet in packets:
            self.transport.sendto(packet.data, packet.addr)


async def game_loop(world: GameWorld, protocol: GameProtocol,
                    delay: float = C.GAME_LOOP_DELAY / 1000.0) -> None:
    """Tick the world forever, ``delay`` seconds apart, sending what it produces."""
    log.info("Game loop started")
    while True:
        await asyncio.sleep(delay)
        protocol.send_all(world.tick())


async def run(host: str = C.SERVER_IP, port: int = C.SERVER_PORT) -> None:
    """Bind the UDP socket and run the game until cancelled."""
    log.info("Starting UDP game server on %s:%s", host, port)
    loop = asyncio.get_running_loop()
    world = GameWorld()
    transport, protocol = await loop.create_datagram_endpoint(
        lambda: GameProtocol(world), local_addr=(host, port))
    try:
        await game_loop(world, protocol)
    finally:
        transport.close()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Multiplayer snake game server over UDP.")
    parser.add_argument("--host", default=C.SERVER_IP)
    parser.add_argument("--port", type=int, default=C.SERVER_PORT)
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    print("Slither.io game server")
    print("Starting UDP game server...")
    try:
        asyncio.run(run(args.host, args.port))
    except OSError as exc:
        print(f"Failed to start server: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())