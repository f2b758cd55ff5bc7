"""Custom exceptions shared across layers"""


class ChessError(Exception):
    """Base class for all errors raised by the chess engine and its boundary layer."""


class InvalidNotationError(ChessError):
    """A square name could not be parsed (or written) in algebraic notation."""


class InvalidRequestError(ChessError):
    """A request coming from the presentation layer is structurally invalid."""
