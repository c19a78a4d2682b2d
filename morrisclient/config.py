"""Client configuration: defaults and the key=value configuration file."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass

from morrisclient.errors import ConfigFileError

DEFAULT_HOSTNAME = "sysprak.priv.lab.nm.ifi.lmu.de"
DEFAULT_PORT = 1357
DEFAULT_GAMENAME = "NMMorris"

_VALUE = re.compile(r"[^ \r\n]*")
_INTEGER = re.compile(r"\s*([+-]?\d+)")


def _trim(text: str) -> str:
    """Drop leading spaces and cut the value at the first space or line break."""
    match = _VALUE.match(text.lstrip(" "))
    return match.group() if match else ""


def _to_int(text: str) -> int:
    """Read a leading integer the lenient way; anything else counts as zero."""
    match = _INTEGER.match(text)
    return int(match.group(1)) if match else 0


@dataclass
class Config:
    """Connection settings for the game server."""

    hostname: str = DEFAULT_HOSTNAME
    port: int = DEFAULT_PORT
    gamename: str = DEFAULT_GAMENAME

    def apply_line(self, line: str) -> bool:
        """Apply one configuration line; return whether it set a value."""
        if line.startswith("#"):
            return False
        key, sep, value = line.partition("=")
        if not sep:
            return False
        if "Hostname" in key:
            self.hostname = _trim(value)
        elif "Port" in key:
            self.port = _to_int(_trim(value))
        elif "Gamename" in key:
            self.gamename = _trim(value)
        else:
            return False
        return True

    def describe(self) -> str:
        """Return a human-readable summary of the configuration."""
        return (
            "Actual Configuration\n"
            f"Hostname: [{self.hostname}]\n"
            f"Port    :  {self.port}\n"
            f"Gamename: [{self.gamename}]\n"
        )


def load_config(path: str | os.PathLike[str], config: Config | None = None) -> Config:
    """Read a configuration file into ``config`` (a fresh one if omitted)."""
    if config is None:
        config = Config()
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            for line in handle:
                config.apply_line(line)
    except OSError as exc:
        raise ConfigFileError("fopen", os.fspath(path), exc.strerror) from exc
    return config