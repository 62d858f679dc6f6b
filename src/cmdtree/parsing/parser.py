"""
Parser for interactive shell command lines.

This module composes the tokenizer, the registry's longest-prefix matcher
and the argument binder into a single parse step that turns a raw line into
a populated, strongly-typed command value.
"""

import logging
from dataclasses import dataclass
from typing import Generic

from cmdtree.core.config import ParserConfig
from cmdtree.exceptions import EmptyInputError, UnknownCommandError
from cmdtree.structure.binding import bind_arguments
from cmdtree.structure.registry import CommandDefinition, CommandRegistry, ShapeT

from .arguments import parse_arguments
from .tokenizer import tokenize

logger = logging.getLogger(__name__)


@dataclass
class ParsedCommand(Generic[ShapeT]):
    """A matched definition together with its bound command value."""

    definition: CommandDefinition[ShapeT]
    value: ShapeT

    @property
    def shape(self) -> type[ShapeT]:
        """The concrete shape of the value, used as the dispatch tag."""
        return type(self.value)

    def __str__(self) -> str:
        return f"{self.definition.name}: {self.value!r}"


class CommandParser:
    """
    Parses raw lines against an explicitly supplied registry.

    Each call to parse() is self-contained: it creates a new command value
    and keeps no reference to it after returning.
    """

    def __init__(self, registry: CommandRegistry, config: ParserConfig | None = None):
        self.registry = registry
        self.config = config or registry.config

    def parse(self, line: str) -> ParsedCommand:
        """
        Parse a single input line.

        Params:
            line: The raw line, trailing newline already stripped

        Returns:
            ParsedCommand with the matched definition and populated value

        Raises:
            EmptyInputError: If the line contains no tokens
            UnknownCommandError: If no registered path prefixes the tokens
            BindError: If an argument value fails type coercion
        """
        tokens = tokenize(line)
        if not tokens:
            raise EmptyInputError()

        match = self.registry.match(tokens)
        if match is None:
            logger.debug("No command matches %r", line)
            raise UnknownCommandError(line)

        arguments = parse_arguments(match.remaining, self.config.flag_value)
        value = match.definition.new_value()
        bind_arguments(value, arguments, self.config)

        logger.debug("Parsed %r as '%s'", line, match.definition.name)
        return ParsedCommand(definition=match.definition, value=value)


def parse_line(registry: CommandRegistry, line: str) -> ParsedCommand:
    """
    Convenience function to parse a line against a registry.

    Params:
        registry: The registry to match against
        line: The raw input line

    Returns:
        ParsedCommand for the line

    Raises:
        ParseError: If the line is empty, unknown, or fails binding
    """
    return CommandParser(registry).parse(line)
