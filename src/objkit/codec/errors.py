"""Codec error types."""

from objkit.errors import ObjkitError


class ParseError(ObjkitError):
    """Raised when text cannot be parsed as JSON, or is not a JSON object."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        super().__init__(message)


class SerializationError(ObjkitError):
    """Raised when a value cannot be represented as JSON."""
