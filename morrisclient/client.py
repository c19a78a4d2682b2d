"""Command-line options and the server connection of the game client."""

from __future__ import annotations

import getopt
import socket
import sys
from collections.abc import Sequence
from dataclasses import dataclass

from morrisclient.config import Config
from morrisclient.errors import HostError, InvalidParameterError

DEFAULT_CONFIG_FILE = "client.conf"
GAME_ID_LENGTH = 13
_PLAYER_NUMBERS = ("1", "2")
_SHORT_OPTIONS = "g:p:f:"


@dataclass(frozen=True)
class Options:
    """Validated command-line options."""

    game_id: str
    player_number: int
    config_file: str = DEFAULT_CONFIG_FILE


def usage() -> str:
    """Return the usage text for the command line."""
    return "-g <GAME-ID> 13-stellige Game-ID\n-p gewünschte Spielernummer\n"


def _fail(name: str) -> InvalidParameterError:
    print(usage(), end="")
    return InvalidParameterError(name)


def parse_arguments(argv: Sequence[str] | None = None) -> Options:
    """Parse ``-g <game id> -p <player> [-f <config file>]``.

    Prints the usage text and raises InvalidParameterError when the
    arguments are missing, unknown or invalid.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        raise _fail("arguments")

    try:
        pairs, _ = getopt.gnu_getopt(args, _SHORT_OPTIONS)
    except getopt.GetoptError as exc:
        print(usage(), end="")
        raise InvalidParameterError("option") from exc

    game_id = ""
    player = ""
    config_file = DEFAULT_CONFIG_FILE
    for option, value in pairs:
        if option == "-g":
            game_id = value
        elif option == "-p":
            player = value
        elif option == "-f":
            config_file = value

    if len(game_id) != GAME_ID_LENGTH:
        raise _fail("Game-ID")
    if player not in _PLAYER_NUMBERS:
        raise _fail("Player number")

    return Options(game_id=game_id, player_number=int(player), config_file=config_file)


def connect(config: Config) -> socket.socket:
    """Open a TCP connection to the configured server.

    Every address the host name resolves to is tried in turn; the first
    successful connection is returned. Raises HostError when resolution
    fails or no address accepts the connection.
    """
    try:
        addresses = socket.getaddrinfo(
            config.hostname,
            str(config.port),
            socket.AF_UNSPEC,
            socket.SOCK_STREAM,
            socket.IPPROTO_TCP,
        )
    except socket.gaierror as exc:
        raise HostError("getaddrinfo", config.hostname, str(exc)) from exc

    last_error: OSError | None = None
    for family, _, _, _, address in addresses:
        try:
            sock = socket.socket(family, socket.SOCK_STREAM)
        except OSError as exc:
            last_error = exc
            continue
        try:
            sock.connect(address)
        except OSError as exc:
            last_error = exc
            sock.close()
            continue
        return sock

    reason = str(last_error) if last_error is not None else None
    raise HostError("Connect to server", config.hostname, reason)