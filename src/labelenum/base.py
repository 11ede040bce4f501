"""
Class-based labeled enums.

Subclass LabeledEnum, declare constants as class attributes and their
display labels in __labels__:

    class Status(LabeledEnum):
        SUCCESS = 0
        ERROR = 1

        __labels__ = {0: "request success", 1: "request failure"}

    Status.has_name("SUCCESS")       # True
    Status.value_to_name(1)          # "ERROR"
    Status.trans_value(0)            # "request success"
    Status(1).name                   # "ERROR"

Constants stay plain values (Status.ERROR == 1); instances are only built
when asked for. All lookups go through the process-wide metadata cache.
"""

from __future__ import annotations

import types
from collections.abc import Iterable
from typing import Any, ClassVar

from pydantic import ValidationError

from . import lookup
from .cache import OPTIONS_ATTR
from .config import EnumOptions, MissingLabelPolicy
from .declaration import Declaration
from .errors import MalformedEnum
from .extractor import DECLARATION_ATTR, LABELS_ATTR, reserved_names


class LabeledEnum:
    """
    Base class for enums with display labels and bidirectional lookup.

    Class keywords:
        missing_label: "error" or "passthrough"; overrides the process
            default for this type and its subclasses
    """

    __labels__: ClassVar[dict[Any, str]] = {}

    def __init_subclass__(
        cls, *, missing_label: MissingLabelPolicy | str | None = None, **kwargs: Any
    ) -> None:
        super().__init_subclass__(**kwargs)
        if missing_label is not None:
            try:
                options = EnumOptions(missing_label=missing_label)
            except ValidationError as e:
                raise MalformedEnum(
                    f"Invalid missing_label option {missing_label!r}", cls.__name__
                ) from e
            setattr(cls, OPTIONS_ATTR, options)

    def __init__(self, value: Any):
        """
        Create a member from a declared value.

        Raises:
            UnknownValue: If the value is not declared (strict comparison)
        """
        self._name = lookup.value_to_name(type(self), value)
        self._value = value

    @property
    def name(self) -> str:
        return self._name

    @property
    def value(self) -> Any:
        return self._value

    @property
    def label(self) -> Any:
        """Display label of this member, or the raw value if unlabeled."""
        return lookup.trans_value(type(self), self._value)

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"<{type(self).__name__}.{self._name}: {self._value!r}>"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return lookup.strict_equals(self._value, other._value)  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), type(self._value), self._value))

    @classmethod
    def from_name(cls, name: str) -> LabeledEnum:
        """
        Create a member from a constant name.

        Raises:
            UnknownName: If the name is not declared
        """
        return cls(lookup.name_to_value(cls, name))

    # Lookup surface

    @classmethod
    def has_name(cls, name: Any) -> bool:
        return lookup.has_name(cls, name)

    @classmethod
    def has_value(cls, value: Any, strict: bool = True) -> bool:
        return lookup.has_value(cls, value, strict)

    @classmethod
    def name_to_value(cls, name: Any) -> Any:
        return lookup.name_to_value(cls, name)

    @classmethod
    def value_to_name(cls, value: Any, strict: bool = True) -> str:
        return lookup.value_to_name(cls, value, strict)

    @classmethod
    def trans_name(cls, name: Any) -> Any:
        return lookup.trans_name(cls, name)

    @classmethod
    def trans_value(cls, value: Any, strict: bool = True) -> Any:
        return lookup.trans_value(cls, value, strict)

    @classmethod
    def get_map(cls) -> dict[str, Any]:
        return lookup.get_map(cls)

    @classmethod
    def get_name_map(cls) -> dict[Any, str]:
        return lookup.get_name_map(cls)

    @classmethod
    def get_dict(cls) -> dict[Any, str]:
        return lookup.get_dict(cls)

    @classmethod
    def get_name_dict(cls) -> dict[str, str]:
        return lookup.get_name_dict(cls)

    @classmethod
    def call(cls, operation: str, *args: Any, **kwargs: Any) -> Any:
        """
        Invoke a lookup operation by name, e.g. Status.call("transName", "ERROR").

        Raises:
            UnsupportedOperation: If the operation name is unknown
        """
        return lookup.call(cls, operation, *args, **kwargs)


def define_enum(
    name: str,
    source: Declaration | Iterable[tuple[str, Any, str]],
    *,
    missing_label: MissingLabelPolicy | str | None = None,
    module: str | None = None,
) -> type[LabeledEnum]:
    """
    Create a LabeledEnum subclass without a class statement.

    Args:
        name: Name of the new enum type
        source: Declaration, or (constant name, value, label) triples
        missing_label: Optional per-type missing label policy
        module: __module__ of the new type

    Returns:
        The new enum type; constants are set as class attributes

    Raises:
        MalformedEnum: If the triples are invalid or a constant name
            shadows the enum API

    Example:
        Status = define_enum("Status", [
            ("SUCCESS", 0, "request success"),
            ("ERROR", 1, "request failure"),
        ])
    """
    if isinstance(source, Declaration):
        declaration = source
    else:
        declaration = Declaration.from_triples(name, source)

    clashes = [const_name for const_name in declaration.names if const_name in reserved_names()]
    if clashes:
        raise MalformedEnum(
            "Constant names shadow enum API attributes",
            name,
            [f"{const_name!r} is reserved" for const_name in clashes],
        )

    def exec_body(namespace: dict[str, Any]) -> None:
        namespace.update(declaration.entries)
        namespace[LABELS_ATTR] = dict(declaration.labels)
        namespace[DECLARATION_ATTR] = declaration
        namespace["__module__"] = module or __name__

    kwds = {"missing_label": missing_label} if missing_label is not None else {}
    return types.new_class(name, (LabeledEnum,), kwds, exec_body)


__all__ = ["LabeledEnum", "define_enum"]
