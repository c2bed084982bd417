import asyncio
import random
import socket

import pytest

from slitherserver.engine import GameWorld, Packet
from slitherserver.server import GameProtocol, game_loop, main, run

ADDR = ("127.0.0.1", 6001)


class FakeTransport:
    def __init__(self):
        self.sent = []

    def sendto(self, data, addr):
        self.sent.append((data, addr))

    def close(self):
        pass


def connected():
    world = GameWorld(random.Random(11))
    protocol = GameProtocol(world)
    transport = FakeTransport()
    protocol.connection_made(transport)
    return world, protocol, transport


def free_port():
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


def test_join_datagram_replies_with_snake():
    world, protocol, transport = connected()
    protocol.datagram_received(b"0", ADDR)
    assert transport.sent[0][1] == ADDR
    assert transport.sent[0][0].startswith(b"$1,")
    assert len(world.players) == 1


def test_empty_datagram_is_ignored():
    world, protocol, transport = connected()
    protocol.datagram_received(b"", ADDR)
    assert transport.sent == []
    assert len(world.players) == 0


def test_long_datagram_is_truncated():
    world, protocol, _ = connected()
    protocol.datagram_received(b"0", ADDR)
    protocol.datagram_received(b"9," + b"x" * 2000, ADDR)
    assert world.players.get(0).name == "x" * 1022


def test_send_all_sends_each_packet():
    _, protocol, transport = connected()
    protocol.send_all([Packet(ADDR, b"$8"), Packet(("127.0.0.1", 6002), b"$7,1")])
    assert transport.sent == [(b"$8", ADDR), (b"$7,1", ("127.0.0.1", 6002))]


def test_send_all_without_transport_raises():
    protocol = GameProtocol(GameWorld(random.Random(1)))
    with pytest.raises(RuntimeError):
        protocol.send_all([Packet(ADDR, b"$8")])


def test_game_loop_ticks_and_sends():
    world, protocol, transport = connected()
    protocol.datagram_received(b"0", ADDR)
    transport.sent.clear()

    async def scenario():
        task = asyncio.create_task(game_loop(world, protocol, 0.001))
        await asyncio.sleep(0.05)
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

    asyncio.run(scenario())
    assert any(data.startswith(b"$2,") for data, _ in transport.sent)
    assert len(world.baits) >= 1


def test_run_fails_when_port_is_taken():
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
        sock.bind(("127.0.0.1", 0))
        port = sock.getsockname()[1]
        with pytest.raises(OSError):
            asyncio.run(run("127.0.0.1", port))


def test_main_reports_bind_failure(capsys):
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
        sock.bind(("127.0.0.1", 0))
        port = sock.getsockname()[1]
        assert main(["--host", "127.0.0.1", "--port", str(port)]) == 1
    assert "Failed to start server" in capsys.readouterr().err


class _Client(asyncio.DatagramProtocol):
    def __init__(self):
        self.queue = asyncio.Queue()

    def datagram_received(self, data, addr):
        self.queue.put_nowait(data)


def test_run_answers_a_real_client():
    port = free_port()

    async def scenario():
        server = asyncio.create_task(run("127.0.0.1", port))
        await asyncio.sleep(0.1)
        loop = asyncio.get_running_loop()
        transport, client = await loop.create_datagram_endpoint(
            _Client, remote_addr=("127.0.0.1", port))
        try:
            transport.sendto(b"0")
            reply = await asyncio.wait_for(client.queue.get(), timeout=2.0)
        finally:
            transport.close()
            server.cancel()
            with pytest.raises(asyncio.CancelledError):
                await server
        return reply

    reply = asyncio.run(scenario())
    assert reply.startswith(b"$1,")