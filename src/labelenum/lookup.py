"""
Lookup operations over labeled enum types.

Every operation takes the enum type as first argument and reads the type's
cached index; none of them mutate it. Map accessors return fresh dict
copies.

Value comparison has two modes:
    - strict (default): same type and equal, so 1, 1.0, True and "1"
      are four different values
    - non-strict: plain equality, plus numeric equality between a number
      and a numeric string ("1" matches 1, " 2.5" matches 2.5). Only
      ASCII decimal spellings are numeric strings, so "1_000" and "0x1"
      are not. Two strings are compared as text, so "1" != "1.0".

Usage:
    from labelenum import lookup

    lookup.has_name(Status, "SUCCESS")
    lookup.call(Status, "valueToName", 1)
"""

from __future__ import annotations

import math
import re
from collections.abc import Callable
from typing import Any

from .cache import MetadataCache, get_metadata_cache
from .errors import UnknownName, UnknownValue, UnsupportedOperation
from .index import EnumIndex

_NOT_FOUND = object()

_NUMERIC_STRING = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?", re.ASCII)


def _index(enum_type: type, cache: MetadataCache | None) -> EnumIndex:
    if cache is None:
        cache = get_metadata_cache()
    return cache.get(enum_type)


def _as_number(value: Any) -> int | float | None:
    """Numeric reading of an int, float, or numeric string; None otherwise."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not _NUMERIC_STRING.fullmatch(text):
            return None
        try:
            return int(text)
        except ValueError:
            number = float(text)
        return number if math.isfinite(number) else None
    return None


def strict_equals(left: Any, right: Any) -> bool:
    """Equal value with identical type."""
    return type(left) is type(right) and left == right


def loose_equals(left: Any, right: Any) -> bool:
    """Equal value, letting numeric strings match numbers."""
    if left == right:
        return True
    if isinstance(left, str) == isinstance(right, str):
        return False
    left_number, right_number = _as_number(left), _as_number(right)
    if left_number is None or right_number is None:
        return False
    return left_number == right_number


def _match_value(index: EnumIndex, value: Any, strict: bool) -> Any:
    """Return the declared value matching `value`, or _NOT_FOUND."""
    equals = strict_equals if strict else loose_equals
    for declared in index.value_of.values():
        if equals(declared, value):
            return declared
    return _NOT_FOUND


def has_name(enum_type: type, name: Any, *, cache: MetadataCache | None = None) -> bool:
    """Check if the given constant name exists in the enum."""
    return isinstance(name, str) and name in _index(enum_type, cache).value_of


def has_value(
    enum_type: type, value: Any, strict: bool = True, *, cache: MetadataCache | None = None
) -> bool:
    """Check if the given value exists in the enum."""
    return _match_value(_index(enum_type, cache), value, strict) is not _NOT_FOUND


def name_to_value(enum_type: type, name: Any, *, cache: MetadataCache | None = None) -> Any:
    """
    Translate a constant name to its value.

    Raises:
        UnknownName: If the name is not declared
    """
    index = _index(enum_type, cache)
    if not isinstance(name, str) or name not in index.value_of:
        raise UnknownName(name, index.enum_name)
    return index.value_of[name]


def value_to_name(
    enum_type: type, value: Any, strict: bool = True, *, cache: MetadataCache | None = None
) -> str:
    """
    Translate a value to its constant name.

    Presence is decided exactly as in has_value(). When several constants
    share the value, the last-declared one is returned.

    Raises:
        UnknownValue: If no declared value matches
    """
    index = _index(enum_type, cache)
    declared = _match_value(index, value, strict)
    if declared is _NOT_FOUND:
        raise UnknownValue(value, index.enum_name)
    return index.name_of[declared]


def trans_name(enum_type: type, name: Any, *, cache: MetadataCache | None = None) -> Any:
    """Translate a constant name to its display label; unknown names pass through."""
    index = _index(enum_type, cache)
    if isinstance(name, str):
        return index.name_label_of.get(name, name)
    return name


def trans_value(
    enum_type: type, value: Any, strict: bool = True, *, cache: MetadataCache | None = None
) -> Any:
    """Translate a value to its display label; unknown values pass through."""
    index = _index(enum_type, cache)
    declared = _match_value(index, value, strict)
    if declared is _NOT_FOUND:
        return value
    return index.label_of.get(declared, value)


def get_map(enum_type: type, *, cache: MetadataCache | None = None) -> dict[str, Any]:
    """Constant name -> value, in declaration order."""
    return dict(_index(enum_type, cache).value_of)


def get_name_map(enum_type: type, *, cache: MetadataCache | None = None) -> dict[Any, str]:
    """Value -> constant name."""
    return dict(_index(enum_type, cache).name_of)


def get_dict(enum_type: type, *, cache: MetadataCache | None = None) -> dict[Any, str]:
    """Value -> display label."""
    return dict(_index(enum_type, cache).label_of)


def get_name_dict(enum_type: type, *, cache: MetadataCache | None = None) -> dict[str, str]:
    """Constant name -> display label."""
    return dict(_index(enum_type, cache).name_label_of)


OPERATIONS: dict[str, Callable[..., Any]] = {
    "has_name": has_name,
    "has_value": has_value,
    "name_to_value": name_to_value,
    "value_to_name": value_to_name,
    "trans_name": trans_name,
    "trans_value": trans_value,
    "get_map": get_map,
    "get_name_map": get_name_map,
    "get_dict": get_dict,
    "get_name_dict": get_name_dict,
}

# camelCase spellings accepted by call()
_ALIASES: dict[str, str] = {
    "hasName": "has_name",
    "hasValue": "has_value",
    "nameToValue": "name_to_value",
    "valueToName": "value_to_name",
    "transName": "trans_name",
    "transValue": "trans_value",
    "getMap": "get_map",
    "getNameMap": "get_name_map",
    "getDict": "get_dict",
    "getNameDict": "get_name_dict",
}


def resolve_operation(operation: str, enum_name: str | None = None) -> Callable[..., Any]:
    """
    Look up an operation by name.

    Raises:
        UnsupportedOperation: If the name is not a known operation
    """
    func = OPERATIONS.get(_ALIASES.get(operation, operation))
    if func is None:
        raise UnsupportedOperation(operation, enum_name)
    return func


def call(enum_type: type, operation: str, *args: Any, **kwargs: Any) -> Any:
    """
    Invoke a lookup operation by name.

    Example:
        call(Status, "transValue", 0)  # "request success"

    Raises:
        UnsupportedOperation: If the operation name is unknown
    """
    func = resolve_operation(operation, getattr(enum_type, "__name__", None))
    return func(enum_type, *args, **kwargs)


__all__ = [
    "OPERATIONS",
    "call",
    "get_dict",
    "get_map",
    "get_name_dict",
    "get_name_map",
    "has_name",
    "has_value",
    "loose_equals",
    "name_to_value",
    "resolve_operation",
    "strict_equals",
    "trans_name",
    "trans_value",
    "value_to_name",
]
