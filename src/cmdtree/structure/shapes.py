"""
Base class for command shapes.

A command shape is a pydantic model whose fields are the typed arguments of
one command. When a subclass is defined, its fields are inspected once and
a binding table is built: binding key -> FieldBinding. Fields whose
annotation is not one of the supported semantic types are left out of the
table, so the binder never touches them.
"""

from collections.abc import Mapping
from types import MappingProxyType

from annotated_types import Ge, GroupedMetadata, Gt
from pydantic import BaseModel, ConfigDict
from pydantic.fields import FieldInfo

from cmdtree.core.types import FieldKind

from .binding import FieldBinding

_BINDING_TABLES: dict[type, Mapping[str, FieldBinding]] = {}


def _expand_constraints(metadata: list) -> list:
    expanded = []
    for item in metadata:
        if item is None:
            continue
        if isinstance(item, GroupedMetadata):
            expanded.extend(item)
        else:
            expanded.append(item)
    return expanded


def _is_non_negative(constraint) -> bool:
    if isinstance(constraint, Ge):
        return constraint.ge == 0
    if isinstance(constraint, Gt):
        return constraint.gt == -1
    return False


def field_kind(info: FieldInfo) -> FieldKind | None:
    """
    Determine the semantic type of a model field.

    Only unconstrained str, bool and int fields are supported, plus int
    constrained to exactly ge=0 or gt=-1 (UNSIGNED). Values are set without
    pydantic validation, so any other constraint makes the field unsupported.

    Params:
        info: pydantic field information

    Returns:
        The FieldKind, or None when the field type is unsupported
    """
    annotation = info.annotation
    constraints = _expand_constraints(info.metadata)
    if annotation is int and len(constraints) == 1 and _is_non_negative(constraints[0]):
        return FieldKind.UNSIGNED
    if constraints:
        return None
    if annotation is str:
        return FieldKind.TEXT
    if annotation is bool:
        return FieldKind.FLAG
    if annotation is int:
        return FieldKind.INTEGER
    return None


def binding_key(name: str, info: FieldInfo) -> str:
    """Binding key for a field: its alias if declared, else its name, lower-cased."""
    return (info.alias or name).lower()


def build_binding_table(shape: type[BaseModel]) -> Mapping[str, FieldBinding]:
    """Build the read-only binding table for a model class."""
    table: dict[str, FieldBinding] = {}
    for name, info in shape.model_fields.items():
        kind = field_kind(info)
        if kind is None:
            continue
        key = binding_key(name, info)
        table[key] = FieldBinding(name=name, key=key, kind=kind)
    return MappingProxyType(table)


class CommandShape(BaseModel):
    """
    Base class for all command values.

    Subclasses declare typed fields with zero-value defaults. Use a pydantic
    alias to bind a field under a different key, e.g. a field named from_
    with alias "from".
    """

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs):
        super().__pydantic_init_subclass__(**kwargs)
        _BINDING_TABLES[cls] = build_binding_table(cls)

    @classmethod
    def binding_table(cls) -> Mapping[str, FieldBinding]:
        """Return the binding table for this shape."""
        table = _BINDING_TABLES.get(cls)
        if table is None:
            table = _BINDING_TABLES[cls] = build_binding_table(cls)
        return table
