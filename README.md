# slitherserver

A UDP game server for a multiplayer snake arena. Players steer snakes across a
bounded map. They eat baits to grow and lose length while they accelerate. A
snake dies when its head runs into another snake's body. The server runs a
fixed-rate game loop and exchanges short text messages with clients over UDP.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running the server

```
slitherserver
slitherserver --host 127.0.0.1 --port 4000
```

By default the server binds to `0.0.0.0:3000` and ticks every 10 ms. It runs
until it is interrupted. If the socket cannot be bound, it prints the error and
exits with status 1.

## Protocol

Every message is plain text. Messages sent by the server start with `$`. One
datagram may carry several messages joined together. Incoming datagrams are
read up to 1024 bytes.

Client to server (comma separated):

| Message                      | Meaning                                    |
|------------------------------|--------------------------------------------|
| `0`                          | join the game                              |
| `2,<x>,<y>,<width>,<height>` | mouse position and window size             |
| `9,<name>`                   | set the player's name                      |
| `10`                         | start accelerating                         |
| `11`                         | stop accelerating                          |

The server ignores commands 2, 9, 10 and 11 when they come from an address that
has not joined. In command 2, a value that does not parse counts as 0.

Server to client:

| Prefix | Meaning                                                   |
|--------|-----------------------------------------------------------|
| `$1,`  | your new snake's nodes                                    |
| `$2,`  | your snake's nodes after a tick                           |
| `$3,`  | a new bait: x, y, size                                    |
| `$4,`  | a bait was eaten: x, y                                    |
| `$5,`  | an enemy: id, name, nodes                                 |
| `$6,`  | an enemy's nodes, preceded by its player index            |
| `$62,` | the player at this index grew                             |
| `$7,`  | the player at this index died or left                     |
| `$8`   | you died                                                  |
| `$9,`  | the player at this index set its name                     |

Snake coordinates are sent with four decimals. The constants in
`slitherserver.constants` can switch the tick updates to head-only messages
(`$21,` for your own head and `$61,` for an enemy's head). By default the
server sends full bodies.

A player is dropped after more than 30 seconds without sending a command 2, 9,
10 or 11. Remaining players then receive `$7,`.

## Using it as a library

The game rules do not depend on the network. They live in
`slitherserver.engine.GameWorld`, which takes a random generator and a clock.
`handle_packet` applies one client datagram and `tick` advances the game by
one step. Both return a list of `Packet` objects (`addr`, `data`) to send, so
you can drive the game yourself:

```python
import random
import time

from slitherserver.engine import GameWorld

world = GameWorld(random.Random(1), time.monotonic)
for packet in world.handle_packet(b"0", ("127.0.0.1", 5000)):
    print(packet.addr, packet.data)
for packet in world.tick():
    print(packet.addr, packet.data)
```

`GameWorld.create_player(addr)` returns the new player's id and the welcome
packets. `GameWorld.delete_player(index)` removes a player and returns the
notices for the other players. It raises `IndexError` when no player has that
index.

The building blocks can also be used on their own:

- `slitherserver.snake`: `Snake`, `Node`, `create_snake` and `SnakeRegistry`
- `slitherserver.collision`: `Rect` and `rect_intersect`
- `slitherserver.messages`: message builders and `parse_command`
- `slitherserver.spawning`: random baits, placed baits, and baits left by dead snakes
- `slitherserver.bait` and `slitherserver.player`: `BaitStore` and `PlayerRegistry`
- `slitherserver.server`: `GameProtocol`, `game_loop`, `run` and `main`

## What it does not do

- The whole game state is held in memory. Nothing is saved between runs.
- There are no scores or rankings. The fields exist on a player but are never updated.
- There is no client. Only the server side of the protocol is provided.