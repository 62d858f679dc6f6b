"""
cmdtree exception classes.

This package provides all exception types used throughout cmdtree for
consistent error handling and reporting.
"""

from cmdtree.exceptions.core import (
    BindError,
    BindErrorReason,
    CmdTreeError,
    ConfigurationError,
    DuplicateCommandError,
    EmptyCommandPathError,
    EmptyInputError,
    MissingHandlerError,
    ParseError,
    UnknownCommandError,
)

__all__ = [
    "CmdTreeError",
    "ConfigurationError",
    "EmptyCommandPathError",
    "DuplicateCommandError",
    "MissingHandlerError",
    "ParseError",
    "EmptyInputError",
    "UnknownCommandError",
    "BindError",
    "BindErrorReason",
]
