"""
Core cmdtree components.

This package provides configuration and the fundamental type definitions
shared by the parsing and structure packages.
"""

from cmdtree.core.config import ParserConfig
from cmdtree.core.types import ArgumentMap, CommandPath, FieldKind, TokenSequence

__all__ = [
    "ParserConfig",
    "FieldKind",
    "ArgumentMap",
    "CommandPath",
    "TokenSequence",
]
