"""
Declaration types for labeled enums.

A declaration is the authored data of one enum type: its constants in
declaration order and the display label of each value. Declarations are
immutable and validated on construction; values are never coerced, so
"1" stays a string and True stays a bool.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
    ValidationError,
    field_validator,
)

from .errors import MalformedEnum

logger = logging.getLogger(__name__)

# bool is listed first so True never validates as an int
Primitive = StrictBool | StrictInt | StrictFloat | StrictStr

PRIMITIVE_TYPES: tuple[type, ...] = (bool, int, float, str)


class Declaration(BaseModel):
    """
    Authored (name, value, label) data for one enum type.

    Examples:
        Declaration(
            name="Status",
            entries=(("SUCCESS", 0), ("ERROR", 1)),
            labels={0: "request success", 1: "request failure"},
        )
    """

    name: str = Field(..., min_length=1, description="Enum type name")
    entries: tuple[tuple[StrictStr, Primitive], ...] = Field(
        default=(), description="Ordered (constant name, value) pairs"
    )
    labels: dict[Primitive, StrictStr] = Field(
        default_factory=dict, description="Display label per value"
    )

    model_config = ConfigDict(frozen=True)

    @field_validator("entries")
    @classmethod
    def validate_entries(
        cls, v: tuple[tuple[str, Any], ...]
    ) -> tuple[tuple[str, Any], ...]:
        """Validate constant names: identifiers, declared once."""
        seen: set[str] = set()
        for const_name, _ in v:
            if not const_name.isidentifier():
                raise ValueError(f"Constant name {const_name!r} is not an identifier")
            if const_name in seen:
                raise ValueError(f"Constant {const_name!r} is declared more than once")
            seen.add(const_name)
        return v

    @property
    def names(self) -> list[str]:
        """Constant names in declaration order."""
        return [const_name for const_name, _ in self.entries]

    @property
    def values(self) -> list[Any]:
        """Constant values in declaration order, duplicates included."""
        return [value for _, value in self.entries]

    def __len__(self) -> int:
        return len(self.entries)

    @classmethod
    def from_triples(cls, name: str, triples: Iterable[tuple[str, Any, str]]) -> Declaration:
        """
        Build a declaration from (constant name, value, label) triples.

        Raises:
            MalformedEnum: If a triple is not a 3-tuple or fails validation
        """
        entries = []
        labels = {}
        for triple in triples:
            try:
                const_name, value, label = triple
            except (TypeError, ValueError) as e:
                raise MalformedEnum(
                    f"Expected (name, value, label) triple, got {triple!r}", name
                ) from e
            entries.append((const_name, value))
            labels[value] = label
        return build_declaration(name, entries, labels)


def build_declaration(
    name: str,
    entries: Iterable[tuple[str, Any]],
    labels: dict[Any, str] | None = None,
) -> Declaration:
    """
    Validate and build a Declaration.

    Args:
        name: Enum type name
        entries: Ordered (constant name, value) pairs
        labels: Value to display label mapping

    Returns:
        Validated Declaration

    Raises:
        MalformedEnum: If the data does not form a valid declaration
    """
    try:
        declaration = Declaration(name=name, entries=tuple(entries), labels=labels or {})
    except ValidationError as e:
        problems = [
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in e.errors()
        ]
        raise MalformedEnum("Invalid enum declaration", name, problems) from e
    _warn_merged_values(declaration)
    return declaration


def _warn_merged_values(declaration: Declaration) -> None:
    """Log values of different types that Python keys as one (1, 1.0, True)."""
    first_seen: dict[Any, Any] = {}
    for value in declaration.values:
        other = first_seen.setdefault(value, value)
        if type(other) is not type(value):
            logger.warning(
                "%s: values %r and %r share one label and reverse lookup slot",
                declaration.name,
                other,
                value,
            )


__all__ = ["Declaration", "Primitive", "PRIMITIVE_TYPES", "build_declaration"]
