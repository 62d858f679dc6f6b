"""
cmdtree structure components.

This package provides command shapes with their binding tables, the
argument binder, and the command registry with longest-prefix matching.
"""

from cmdtree.structure.binding import FieldBinding, bind_arguments
from cmdtree.structure.registry import (
    CommandDefinition,
    CommandMatch,
    CommandRegistry,
    normalize_path,
)
from cmdtree.structure.shapes import CommandShape, build_binding_table, field_kind

__all__ = [
    "CommandShape",
    "FieldBinding",
    "bind_arguments",
    "build_binding_table",
    "field_kind",
    "CommandDefinition",
    "CommandMatch",
    "CommandRegistry",
    "normalize_path",
]
