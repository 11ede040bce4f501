"""
labelenum - Enums with display labels and bidirectional lookup.

Declare a closed set of constants, each bound to a primitive value and a
display label, then query it by name, by value, or by display text.
"""

from __future__ import annotations

from ._version import get_version
from .base import LabeledEnum, define_enum
from .cache import MetadataCache, get_metadata_cache
from .config import EnumOptions, MissingLabelPolicy
from .declaration import Declaration, build_declaration
from .errors import (
    LabelEnumError,
    MalformedEnum,
    UnknownName,
    UnknownValue,
    UnsupportedOperation,
)
from .index import EnumIndex, build_index
from .lookup import (
    call,
    get_dict,
    get_map,
    get_name_dict,
    get_name_map,
    has_name,
    has_value,
    name_to_value,
    trans_name,
    trans_value,
    value_to_name,
)

__version__ = get_version()

__all__ = [
    "__version__",
    "LabeledEnum",
    "define_enum",
    "Declaration",
    "build_declaration",
    "EnumIndex",
    "build_index",
    "MetadataCache",
    "get_metadata_cache",
    "EnumOptions",
    "MissingLabelPolicy",
    "LabelEnumError",
    "UnknownName",
    "UnknownValue",
    "MalformedEnum",
    "UnsupportedOperation",
    "call",
    "has_name",
    "has_value",
    "name_to_value",
    "value_to_name",
    "trans_name",
    "trans_value",
    "get_map",
    "get_name_map",
    "get_dict",
    "get_name_dict",
]
