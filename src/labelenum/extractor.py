"""
Constant extraction for labeled enum classes.

Turns an enum class into a Declaration by reading its class attributes,
and splits a Declaration into the raw name->value and value->label tables
the index builder consumes.
"""

from __future__ import annotations

from typing import Any

from .declaration import PRIMITIVE_TYPES, Declaration, build_declaration
from .errors import MalformedEnum

# Reserved class attribute carrying display labels (value -> label)
LABELS_ATTR = "__labels__"

# Set by define_enum() on types built from a ready Declaration
DECLARATION_ATTR = "__declaration__"


def _is_constant(attr_name: str, attr_value: Any) -> bool:
    """Check whether a class attribute is an enum constant."""
    if attr_name.startswith("_"):
        return False
    return isinstance(attr_value, PRIMITIVE_TYPES)


def reserved_names() -> frozenset[str]:
    """Public attribute names of the enum base class, unavailable as constants."""
    from .base import LabeledEnum

    return frozenset(name for name in dir(LabeledEnum) if not name.startswith("_"))


def _hierarchy(enum_type: type) -> list[type]:
    """Classes contributing constants, base first, stopping at the root enum class."""
    from .base import LabeledEnum

    return [klass for klass in reversed(enum_type.__mro__) if not issubclass(LabeledEnum, klass)]


def extract_declaration(enum_type: type) -> Declaration:
    """
    Build the Declaration of an enum class.

    Constants are collected base class first so subclasses inherit their
    parents' constants; an override keeps the position of the original
    declaration. The labels come from the nearest __labels__ in the MRO.

    Args:
        enum_type: Enum class to introspect

    Returns:
        Declaration of the enum type

    Raises:
        MalformedEnum: If the collected data fails validation
    """
    prebuilt = enum_type.__dict__.get(DECLARATION_ATTR)
    if isinstance(prebuilt, Declaration):
        return prebuilt

    reserved = reserved_names()
    constants: dict[str, Any] = {}
    for klass in _hierarchy(enum_type):
        inherited = klass.__dict__.get(DECLARATION_ATTR)
        if isinstance(inherited, Declaration):
            constants.update(inherited.entries)
        for attr_name, attr_value in vars(klass).items():
            if _is_constant(attr_name, attr_value):
                constants[attr_name] = attr_value

    clashes = [name for name in constants if name in reserved]
    if clashes:
        raise MalformedEnum(
            "Constant names shadow enum API attributes",
            enum_type.__name__,
            [f"{name!r} is reserved" for name in clashes],
        )

    labels = getattr(enum_type, LABELS_ATTR, None) or {}
    if not isinstance(labels, dict):
        labels = dict(labels)

    return build_declaration(enum_type.__name__, constants.items(), labels)


def extract_constants(declaration: Declaration) -> tuple[dict[str, Any], dict[Any, str]]:
    """
    Split a Declaration into its raw lookup tables.

    Returns:
        (value_of, labels): ordered constant name -> value, and value -> label
    """
    return dict(declaration.entries), dict(declaration.labels)


__all__ = [
    "LABELS_ATTR",
    "DECLARATION_ATTR",
    "extract_declaration",
    "extract_constants",
    "reserved_names",
]
