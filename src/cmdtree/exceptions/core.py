"""
Exception classes for cmdtree command parsing.

This module defines specific exception types for the error conditions that
can occur while registering commands (configuration errors, raised at
startup) and while parsing a typed line (parse errors, recoverable).
"""

from enum import Enum


class BindErrorReason(Enum):
    """Why a raw argument value could not be coerced into its field."""

    INVALID_BOOL = "invalid bool"
    INVALID_INT = "invalid int"
    INVALID_UINT = "invalid uint"


class CmdTreeError(Exception):
    """Base exception for all cmdtree errors."""

    pass


class ConfigurationError(CmdTreeError):
    """Base class for programmer mistakes detected while building a registry."""

    pass


class EmptyCommandPathError(ConfigurationError):
    """Raised when a command is registered under an empty path."""

    def __init__(self, path: str):
        """
        Initialize the exception.

        Params:
            path: The raw path string that contained no words
        """
        self.path = path
        super().__init__(f"Empty command path: {path!r}")


class DuplicateCommandError(ConfigurationError):
    """Raised when a command path is registered more than once."""

    def __init__(self, path: str, existing_shape: str):
        """
        Initialize the exception.

        Params:
            path: The normalized path that is already registered
            existing_shape: Name of the shape registered under that path
        """
        self.path = path
        self.existing_shape = existing_shape
        super().__init__(
            f"Command path collision: '{path}' is already registered to '{existing_shape}'"
        )


class MissingHandlerError(ConfigurationError):
    """Raised when a dispatcher is built without a handler for every shape."""

    def __init__(self, missing: list[str]):
        self.missing = missing
        super().__init__(f"No handler for command shapes: {', '.join(missing)}")


class ParseError(CmdTreeError):
    """Base class for errors caused by user input; the caller should re-prompt."""

    pass


class EmptyInputError(ParseError):
    """Raised when a line contains no tokens."""

    def __init__(self):
        super().__init__("empty input")


class UnknownCommandError(ParseError):
    """Raised when no registered command path is a prefix of the input."""

    def __init__(self, line: str):
        """
        Initialize the exception.

        Params:
            line: The original input line, kept for display
        """
        self.line = line
        super().__init__(f"unknown command: {line}")


class BindError(ParseError):
    """Raised when an argument value cannot be coerced to its field's type."""

    def __init__(self, field: str, key: str, raw: str, reason: BindErrorReason):
        """
        Initialize the exception.

        Params:
            field: Attribute name of the field on the command shape
            key: Binding key the value was supplied under
            raw: The offending raw string value
            reason: Which coercion failed
        """
        self.field = field
        self.key = key
        self.raw = raw
        self.reason = reason
        super().__init__(f"{reason.value} for {key}: {raw!r}")
