"""
Argument binding for command shapes.

Coerces raw string values from a parsed key/value map into the typed
fields of a command value. Each shape carries a declarative binding table
(see shapes.py) mapping binding keys to FieldBinding entries; only the
fields listed there are ever written.
"""

import logging
import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from cmdtree.core.config import ParserConfig
from cmdtree.core.types import FieldKind
from cmdtree.exceptions import BindError, BindErrorReason

if TYPE_CHECKING:
    from cmdtree.structure.shapes import CommandShape

logger = logging.getLogger(__name__)

TRUE_STRINGS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
FALSE_STRINGS = frozenset({"0", "f", "F", "FALSE", "false", "False"})

INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
UNSIGNED_PATTERN = re.compile(r"[0-9]+")


def coerce_text(raw: str, config: ParserConfig) -> str:
    return raw


def coerce_flag(raw: str, config: ParserConfig) -> bool:
    if raw in TRUE_STRINGS:
        return True
    if raw in FALSE_STRINGS:
        return False
    raise ValueError(raw)


def coerce_integer(raw: str, config: ParserConfig) -> int:
    if not INTEGER_PATTERN.fullmatch(raw):
        raise ValueError(raw)
    value = int(raw)
    if not config.int_min <= value <= config.int_max:
        raise ValueError(raw)
    return value


def coerce_unsigned(raw: str, config: ParserConfig) -> int:
    if not UNSIGNED_PATTERN.fullmatch(raw):
        raise ValueError(raw)
    value = int(raw)
    if value > config.uint_max:
        raise ValueError(raw)
    return value


COERCERS: dict[FieldKind, Callable[[str, ParserConfig], Any]] = {
    FieldKind.TEXT: coerce_text,
    FieldKind.FLAG: coerce_flag,
    FieldKind.INTEGER: coerce_integer,
    FieldKind.UNSIGNED: coerce_unsigned,
}

FAILURE_REASONS = {
    FieldKind.FLAG: BindErrorReason.INVALID_BOOL,
    FieldKind.INTEGER: BindErrorReason.INVALID_INT,
    FieldKind.UNSIGNED: BindErrorReason.INVALID_UINT,
}


@dataclass(frozen=True)
class FieldBinding:
    """One entry of a shape's binding table."""

    name: str  # Attribute name on the shape
    key: str  # Lower-cased binding key looked up in the argument map
    kind: FieldKind

    def coerce(self, raw: str, config: ParserConfig) -> Any:
        """
        Convert a raw string to this field's semantic type.

        Params:
            raw: Raw value from the argument map
            config: Parser configuration (integer width)

        Returns:
            The typed value

        Raises:
            BindError: If the raw value is not a valid form for the field's type
        """
        try:
            return COERCERS[self.kind](raw, config)
        except ValueError:
            raise BindError(
                self.name, self.key, raw, FAILURE_REASONS[self.kind]
            ) from None

    def apply(self, target: "CommandShape", raw: str, config: ParserConfig) -> None:
        """Coerce raw and set it on target."""
        setattr(target, self.name, self.coerce(raw, config))


def bind_arguments(
    target: "CommandShape",
    arguments: Mapping[str, str],
    config: ParserConfig | None = None,
) -> "CommandShape":
    """
    Populate a command value from a key/value map.

    Fields whose key is absent keep their default. Keys that correspond to
    no field are ignored. The first coercion failure aborts binding; fields
    already written are not rolled back, so callers must discard the value.

    Params:
        target: A fresh command value to populate in place
        arguments: Lower-cased key to raw value mapping
        config: Parser configuration, defaults used when omitted

    Returns:
        The same target, populated

    Raises:
        BindError: On the first value that fails coercion
    """
    if config is None:
        config = ParserConfig()

    for key, binding in type(target).binding_table().items():
        raw = arguments.get(key)
        if raw is None:
            continue
        try:
            binding.apply(target, raw, config)
        except BindError as e:
            logger.debug("Binding %s failed: %s", type(target).__name__, e)
            raise

    return target
