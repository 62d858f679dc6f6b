"""
cmdtree - Command parsing and dispatch core for interactive line-oriented shells

cmdtree turns raw typed lines into strongly-typed command values through a
quoting-aware tokenizer, a longest-prefix command registry and a typed
argument binder.
"""

from importlib.metadata import version

from cmdtree.core.config import ParserConfig
from cmdtree.parsing.parser import CommandParser, ParsedCommand, parse_line
from cmdtree.structure.registry import CommandRegistry
from cmdtree.structure.shapes import CommandShape

__version__ = version("cmdtree")

__all__ = [
    "__version__",
    "CommandShape",
    "CommandRegistry",
    "CommandParser",
    "ParsedCommand",
    "ParserConfig",
    "parse_line",
]
