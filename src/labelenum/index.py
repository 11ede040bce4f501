"""
Bidirectional lookup index for one enum type.

The index holds four read-only maps derived from a Declaration:

    value_of       constant name -> value      (declaration order)
    name_of        value -> constant name      (inverse of value_of)
    label_of       value -> display label      (as declared)
    name_label_of  constant name -> label      (label_of[value_of[name]])

When two constants share a value the inverse is lossy: the last-declared
name owns the value in name_of. Values Python hashes as one key (1, 1.0,
True) count as shared.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from .config import MissingLabelPolicy
from .declaration import Declaration
from .errors import MalformedEnum
from .extractor import extract_constants

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EnumIndex:
    """
    Derived lookup tables of one enum type.

    Attributes:
        enum_name: Name of the indexed enum type
        value_of: Constant name to value, in declaration order
        name_of: Value to constant name (last-declared wins)
        label_of: Value to display label
        name_label_of: Constant name to display label; unlabeled constants
            are absent under the passthrough policy
        policy: Missing label policy the index was built with
    """

    enum_name: str
    value_of: Mapping[str, Any]
    name_of: Mapping[Any, str]
    label_of: Mapping[Any, str]
    name_label_of: Mapping[str, str]
    policy: MissingLabelPolicy = MissingLabelPolicy.ERROR

    def __len__(self) -> int:
        return len(self.value_of)

    @property
    def unlabeled(self) -> list[str]:
        """Constant names without a display label."""
        return [name for name in self.value_of if name not in self.name_label_of]


def invert(value_of: Mapping[str, Any]) -> dict[Any, str]:
    """
    Invert a name -> value mapping.

    Later names overwrite earlier ones on a shared value.
    """
    name_of: dict[Any, str] = {}
    for name, value in value_of.items():
        previous = name_of.get(value)
        if previous is not None:
            logger.warning(
                "Value %r is declared by both %s and %s; %s wins the reverse lookup",
                value,
                previous,
                name,
                name,
            )
        name_of[value] = name
    return name_of


def build_index(
    declaration: Declaration,
    policy: MissingLabelPolicy = MissingLabelPolicy.ERROR,
) -> EnumIndex:
    """
    Build the lookup index of a declaration.

    Args:
        declaration: Validated enum declaration
        policy: What to do with declared values that have no label

    Returns:
        Immutable EnumIndex

    Raises:
        MalformedEnum: If the declaration is empty, has labels for undeclared
            values, or (under the error policy) has unlabeled values
    """
    value_of, label_of = extract_constants(declaration)

    if not value_of:
        raise MalformedEnum("Enum declares no constants", declaration.name)

    declared = set(value_of.values())
    dangling = [value for value in label_of if value not in declared]
    if dangling:
        raise MalformedEnum(
            "Labels reference undeclared values",
            declaration.name,
            [f"label for {value!r} has no constant" for value in dangling],
        )

    name_label_of: dict[str, str] = {}
    missing: list[str] = []
    for name, value in value_of.items():
        if value in label_of:
            name_label_of[name] = label_of[value]
        else:
            missing.append(name)

    if missing:
        if policy == MissingLabelPolicy.ERROR:
            raise MalformedEnum(
                "Constants without display label",
                declaration.name,
                [f"{name} = {value_of[name]!r}" for name in missing],
            )
        logger.warning(
            "%s: constants without display label will pass through: %s",
            declaration.name,
            ", ".join(missing),
        )

    index = EnumIndex(
        enum_name=declaration.name,
        value_of=MappingProxyType(value_of),
        name_of=MappingProxyType(invert(value_of)),
        label_of=MappingProxyType(label_of),
        name_label_of=MappingProxyType(name_label_of),
        policy=policy,
    )
    logger.debug("Built index for %s with %d constants", declaration.name, len(index))
    return index


__all__ = ["EnumIndex", "build_index", "invert"]
