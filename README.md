# morrisclient

A library for a Nine Men's Morris (mill game) client that plays against a
line-based game server. It reads connection settings from a small
configuration file, keeps track of the board, and picks a random legal
`PLAY` command for whichever phase of the game is in progress: placing
pieces, moving them, jumping with the last three, or capturing an
opponent's piece.

It has no dependencies outside the Python standard library and works on
Python 3.10 and later.

## Configuration

Settings live in a plain text file, one `Key=value` pair per line. Lines
starting with `#` are ignored, as are lines without `=` and unknown keys.
A value is read up to its first space or line break.

```
# client.conf
Hostname=localhost
Port=1357
Gamename=NMMorris
```

`Config` (in `morrisclient.config`) is a dataclass with `hostname`,
`port` (default `1357`) and `gamename` (default `NMMorris`).
`load_config(path, config)` applies each line of the file to `config`
(a fresh `Config` when `None` is passed) and returns it;
`Config.apply_line` applies a single line and `Config.describe` returns a
text summary:

```python
from morrisclient.config import Config, load_config

config = load_config("client.conf", Config())
print(config.describe())
```

A file that cannot be opened raises `ConfigFileError`.

## Errors

`morrisclient.errors` defines `ClientError` and its subclasses
`InvalidParameterError`, `FunctionFailedError`, `HostError` and
`ConfigFileError`. It also has `trace_received(message)`, which prints
`Message received: [...]` and returns that line.

## Game state

`morrisclient.model` holds plain dataclasses:

- `PieceInfo` – owner, piece number and position: `"A"` (not yet placed),
  `"C"` (captured) or a board point such as `"B3"`. `on_board()` tells
  whether it stands on the board.
- `PlayerInfo` – player number, name, flags and the list of pieces;
  `count_pieces()` counts those on the board.
- `GameInfo` – game name, which index is "me" and which the enemy, the
  number of pieces per player, whether a move is wanted (`provide_move`)
  and how many pieces are to be captured.

## The board

Board points are a ring letter (`A` outer, `B` middle, `C` inner)
followed by a spot from `0` to `7`. `morrisclient.board` converts between
that notation and `(ring, spot)` pairs:

```python
from morrisclient.board import map_coord, remap_coordinates

map_coord("B3")            # (1, 3)
map_coord("A")             # None – the piece is not on the board
remap_coordinates(2, -1)   # "C7" – a spot of -1 wraps round the ring
```

Invalid positions or coordinates raise `ValueError`.

A `Board` records which piece occupies each point. `Board.place` puts a
piece on its position, `Board.is_free` and `Board.player_at` answer
questions about one point, and `Board.from_players` builds a board from
the players' pieces. `render_board(players)` returns the three-square
diagram as text, with each piece shown as `(1)` or `(2)` by player index.

## Choosing a move

`morrisclient.phases` has one function per phase, each returning the
command to send, such as `"PLAY A3\n"` or `"PLAY B1:B2\n"`:

- `set_piece(board, rng, step)` – a random free point.
- `make_a_move(board, player, rng, step)` – a random piece to a free
  neighbouring point.
- `jump(board, player, rng, step)` – a random piece to any free point.
- `capture_a_piece(board, enemy, rng, step)` – a random enemy piece on
  the board (pieces in a mill may be captured too).

`rng` is a `random.Random`; `step` perturbs the random draws. When no
such move exists, `FunctionFailedError` is raised.

`Thinker` (in `morrisclient.thinker`) ties these together. When
`game.provide_move` is set, `Thinker.think(game, players)` prints the
board, picks the phase (capture if pieces are to be captured, placing
while the last piece is unplaced, moving with more than three pieces on
the board, jumping otherwise), writes the command to its output, clears
`provide_move` and returns the command. Otherwise it returns `None`.

```python
import io
import random

from morrisclient.thinker import Thinker

output = io.StringIO()
thinker = Thinker(random.Random(7), output)
# thinker.think(game, players) writes e.g. "PLAY C4\n" to output
```

A seeded `random.Random` makes the choices reproducible.

## Command-line options and connecting

`morrisclient.client` offers `parse_arguments(argv)`, which reads
`-g <game id>` (exactly 13 characters), `-p <player>` (`1` or `2`) and
optionally `-f <config file>` (default `client.conf`) into an `Options`
value, printing `usage()` and raising `InvalidParameterError` when they
are missing or invalid. `connect(config)` opens a TCP connection to the
configured host and port, trying each resolved address in turn, and
raises `HostError` if none succeeds.

## What is not included

The package installs no command to run. It does not carry out the
message exchange with the game server: `connect` only opens the socket,
and filling in `GameInfo` and `PlayerInfo` from server messages, and
sending the thinker's commands back, is left to the caller.

## Running the tests

Install the package with its `test` extra and run `pytest` from the
project directory.