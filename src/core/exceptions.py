"""Exceptions raised by the client. None of them are fatal: callers log and skip the unit of work."""


class ClientError(Exception):
    """Base class for every error raised inside the board client."""


class InvalidAddressError(ClientError):
    """A string could not be interpreted as a cell on the 8x8 board."""


class InvalidPieceError(ClientError):
    """A board entry does not describe a known (side, kind) pair."""


class ResponseFormatError(ClientError):
    """A response body from the game service could not be parsed."""
