"""
cmdtree parsing components.

This package provides the line tokenizer, key/value argument splitting and
the command parser that ties them to a registry.
"""

from cmdtree.parsing.arguments import parse_arguments, strip_enclosing_quotes
from cmdtree.parsing.parser import CommandParser, ParsedCommand, parse_line
from cmdtree.parsing.tokenizer import tokenize

__all__ = [
    "tokenize",
    "parse_arguments",
    "strip_enclosing_quotes",
    "CommandParser",
    "ParsedCommand",
    "parse_line",
]
