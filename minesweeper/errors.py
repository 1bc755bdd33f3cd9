"""Errors raised by the game registry."""


class MinesweeperError(Exception):
    """Base class for errors reported back to the caller."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(MinesweeperError):
    """Request parameters are malformed (board size, mine count, coordinates)."""


class NotFoundError(MinesweeperError):
    """No game exists with the requested id."""


class StateError(MinesweeperError):
    """The operation is not legal in the current state of the game."""
