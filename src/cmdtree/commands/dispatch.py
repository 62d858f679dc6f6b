"""
Dispatch of parsed command values to their handlers.

The dispatcher is built from a closed set of command shapes and a handler
for each. A missing handler is a configuration error raised at
construction, so dispatching a parsed value can never fall through to an
unhandled shape.
"""

import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from cmdtree.exceptions import MissingHandlerError
from cmdtree.parsing.parser import CommandParser, ParsedCommand
from cmdtree.structure.shapes import CommandShape

from .catalog import FLOW_COMMAND_SHAPES

logger = logging.getLogger(__name__)

Handler = Callable[[Any], Any]


class CommandDispatcher:
    """
    Routes parsed command values to handlers by exact shape.

    Usage:
        dispatcher = CommandDispatcher({TableInfo: show_table, ...})
        parsed = parser.parse(line)
        dispatcher.dispatch(parsed)
    """

    def __init__(
        self,
        handlers: Mapping[type[CommandShape], Handler],
        shapes: Iterable[type[CommandShape]] = FLOW_COMMAND_SHAPES,
    ):
        """
        Params:
            handlers: Mapping from command shape class to handler callable
            shapes: The closed set of shapes that must all be handled

        Raises:
            MissingHandlerError: If any shape in shapes has no handler
        """
        self.shapes = tuple(shapes)
        missing = [shape.__name__ for shape in self.shapes if shape not in handlers]
        if missing:
            raise MissingHandlerError(missing)
        self._handlers = dict(handlers)

    def dispatch(self, parsed: ParsedCommand) -> Any:
        """
        Invoke the handler registered for the parsed value's shape.

        Params:
            parsed: Result of CommandParser.parse

        Returns:
            Whatever the handler returns

        Raises:
            MissingHandlerError: If the value's shape is not in this
                dispatcher's closed shape set, which happens when the
                parser's registry holds shapes the dispatcher was not built for
        """
        if parsed.shape not in self.shapes:
            raise MissingHandlerError([parsed.shape.__name__])
        handler = self._handlers[parsed.shape]
        logger.debug("Dispatching '%s' to %r", parsed.definition.name, handler)
        return handler(parsed.value)

    def dispatch_line(self, parser: CommandParser, line: str) -> Any:
        """Parse a line and dispatch it; parse errors propagate to the caller."""
        return self.dispatch(parser.parse(line))

    def covers(self, parser: CommandParser) -> bool:
        """
        Check that every shape the parser's registry can produce is dispatchable.

        Definitions registered with a non-class factory and no declared shape
        cannot be checked without running the factory, so they count as uncovered.
        """
        return all(definition.shape in self.shapes for definition in parser.registry)
