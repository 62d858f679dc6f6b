"""
Command registry and longest-prefix matcher.

The registry holds command definitions, each identified by an ordered
sequence of lower-cased path words and owning a factory that produces a
fresh, zero-valued command value. Registries are built once at startup and
passed explicitly to a parser; they are not process-wide singletons.
"""

import logging
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from cmdtree.core.config import ParserConfig
from cmdtree.core.types import CommandPath
from cmdtree.exceptions import DuplicateCommandError, EmptyCommandPathError

from .shapes import CommandShape

logger = logging.getLogger(__name__)

ShapeT = TypeVar("ShapeT", bound=CommandShape)

CommandFactory = Callable[[], ShapeT]


def normalize_path(path: str) -> CommandPath:
    """Lower-case a path string and split it on whitespace."""
    return tuple(path.lower().split())


@dataclass(frozen=True)
class CommandDefinition(Generic[ShapeT]):
    """A registered command: its path words and the factory for its value."""

    path: CommandPath
    factory: CommandFactory
    shape: type[ShapeT] | None = None  # None for a non-class factory given no shape

    @property
    def name(self) -> str:
        """The path words joined by single spaces."""
        return " ".join(self.path)

    @property
    def label(self) -> str:
        """Display name: the shape name, else the factory's name."""
        if self.shape is not None:
            return self.shape.__name__
        return getattr(self.factory, "__name__", repr(self.factory))

    def new_value(self) -> ShapeT:
        """Instantiate a fresh zero-valued command value."""
        return self.factory()

    def matches(self, tokens: Sequence[str]) -> bool:
        """Check whether every path word equals the corresponding token, ignoring case."""
        if len(tokens) < len(self.path):
            return False
        return all(
            token.lower() == word for word, token in zip(self.path, tokens)
        )


@dataclass(frozen=True)
class CommandMatch:
    """Result of matching tokens against the registry."""

    definition: CommandDefinition
    remaining: list[str]


class CommandRegistry:
    """
    Registry of command definitions with longest-prefix matching.

    Usage:
        registry = CommandRegistry()
        registry.register("s3 add", S3Add)
        registry.register_many(S3Help, "s3", "s3 help", "s3 h")
        match = registry.match(["s3", "add", "name=x"])
    """

    def __init__(self, config: ParserConfig | None = None):
        self.config = config or ParserConfig()
        self._definitions: list[CommandDefinition] = []
        self._by_path: dict[CommandPath, CommandDefinition] = {}

    def register(
        self,
        path: str,
        factory: CommandFactory,
        shape: type[CommandShape] | None = None,
    ) -> CommandDefinition:
        """
        Register a factory under a command path.

        Params:
            path: Space-separated path words, e.g. "s3 add"; case is ignored
            factory: Zero-argument callable returning a fresh command value,
                usually the CommandShape subclass itself
            shape: Shape class the factory produces; taken from factory
                when it is a class, otherwise unknown until a parse

        Returns:
            The new CommandDefinition

        Raises:
            EmptyCommandPathError: If path contains no words
            DuplicateCommandError: If path is already registered and
                duplicates are not allowed by the configuration
        """
        words = normalize_path(path)
        if not words:
            raise EmptyCommandPathError(path)

        if shape is None and isinstance(factory, type):
            shape = factory
        definition = CommandDefinition(path=words, factory=factory, shape=shape)
        existing = self._by_path.get(words)
        if existing is not None:
            if not self.config.allow_duplicate_paths:
                raise DuplicateCommandError(
                    definition.name, existing.label
                )
            logger.debug(
                "Duplicate command path '%s'; first registration wins",
                definition.name,
            )
        else:
            self._by_path[words] = definition

        self._definitions.append(definition)
        logger.debug(
            "Registered command '%s' -> %s", definition.name, definition.label
        )
        return definition

    def register_many(
        self,
        factory: CommandFactory,
        *paths: str,
        shape: type[CommandShape] | None = None,
    ) -> list[CommandDefinition]:
        """Register the same factory under several alias paths."""
        return [self.register(path, factory, shape) for path in paths]

    def find(self, tokens: Sequence[str]) -> CommandDefinition | None:
        """
        Find the definition whose path is the longest prefix of tokens.

        Among definitions of equal length the earliest registered wins.

        Params:
            tokens: Token sequence from the tokenizer

        Returns:
            The best matching definition, or None
        """
        best: CommandDefinition | None = None
        for definition in self._definitions:
            if best is not None and len(definition.path) <= len(best.path):
                continue
            if definition.matches(tokens):
                best = definition
        return best

    def match(self, tokens: Sequence[str]) -> CommandMatch | None:
        """Find the best definition and split off the tokens after its path."""
        definition = self.find(tokens)
        if definition is None:
            return None
        return CommandMatch(
            definition=definition, remaining=list(tokens[len(definition.path) :])
        )

    def list_commands(self) -> list[tuple[str, str]]:
        """Return (path, label) for every registered path, sorted by path."""
        return sorted(
            (definition.name, definition.label)
            for definition in self._by_path.values()
        )

    def __iter__(self) -> Iterator[CommandDefinition]:
        return iter(self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)

    def __contains__(self, path: object) -> bool:
        if not isinstance(path, str):
            return False
        return normalize_path(path) in self._by_path
