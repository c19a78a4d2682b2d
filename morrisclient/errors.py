"""Exceptions raised by the client and a trace helper for received messages."""

from __future__ import annotations


class ClientError(Exception):
    """Base class for every error the client raises."""


class InvalidParameterError(ClientError):
    """A command-line or protocol parameter has an invalid value."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Invalid {name}.")


class FunctionFailedError(ClientError):
    """An internal operation could not complete."""

    def __init__(self, func_name: str) -> None:
        self.func_name = func_name
        super().__init__(f"Function {func_name} failed.")


class HostError(ClientError):
    """Resolving or connecting to the game server failed."""

    def __init__(self, operation: str, hostname: str, reason: str | None = None) -> None:
        self.operation = operation
        self.hostname = hostname
        self.reason = reason
        message = f"{operation} failed, Host [{hostname}]"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class ConfigFileError(ClientError):
    """The configuration file could not be read."""

    def __init__(self, operation: str, filename: str, reason: str | None = None) -> None:
        self.operation = operation
        self.filename = filename
        self.reason = reason
        message = f"{operation} failed, File [{filename}]"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


def trace_received(message: str) -> str:
    """Print a trace line for a message received from the server and return it."""
    line = f"Message received: [{message}]"
    print(line)
    return line