"""
Core type definitions for the cmdtree framework.

This module contains the semantic field types and shared type aliases used
throughout the tokenizer, registry and binder.
"""

from enum import Enum

TokenSequence = list[str]

ArgumentMap = dict[str, str]

CommandPath = tuple[str, ...]


class FieldKind(Enum):
    """Semantic type of a bindable command field."""

    TEXT = "text"
    FLAG = "flag"
    INTEGER = "integer"
    UNSIGNED = "unsigned"
