"""
Error types for labeled enum declaration, indexing, and lookup.
"""

from typing import Any


class LabelEnumError(Exception):
    """Base exception for all labelenum errors."""

    def __init__(self, message: str, enum_name: str | None = None):
        self.message = message
        self.enum_name = enum_name
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Prefix the message with the enum name if available."""
        if self.enum_name:
            return f"{self.enum_name}: {self.message}"
        return self.message


class UnknownName(LabelEnumError, LookupError):
    """
    Raised when a constant name is not declared in the enum.

    Examples:
    - name_to_value() with a misspelled name
    - from_name() with a name from another enum
    """

    def __init__(self, name: Any, enum_name: str | None = None):
        self.name = name
        super().__init__(f"Const {name!r} is not in enum", enum_name)


class UnknownValue(LabelEnumError, LookupError):
    """
    Raised when a value is not declared in the enum.

    Presence follows the strict/non-strict comparison mode of the call.

    Examples:
    - value_to_name() with an undeclared value
    - value_to_name("1") in strict mode when the declared value is 1
    - constructing a member from an undeclared value
    """

    def __init__(self, value: Any, enum_name: str | None = None):
        self.value = value
        super().__init__(f"Value {value!r} is not in enum", enum_name)


class MalformedEnum(LabelEnumError):
    """
    Raised when an enum declaration cannot be indexed.

    This is a programmer error in the enum definition, not a per-call
    condition.

    Examples:
    - Declaration without constants
    - Declared value without a display label
    - Label for a value that no constant declares
    - Non-primitive constant value
    """

    def __init__(
        self,
        message: str,
        enum_name: str | None = None,
        problems: list[str] | None = None,
    ):
        self.problems = problems or []
        if self.problems:
            message = message + "\n" + "\n".join(f"  - {p}" for p in self.problems)
        super().__init__(message, enum_name)


class UnsupportedOperation(LabelEnumError, AttributeError):
    """Raised when a lookup operation is requested by an unknown name."""

    def __init__(self, operation: str, enum_name: str | None = None):
        self.operation = operation
        super().__init__(f"Operation {operation!r} does not exist", enum_name)


__all__ = [
    "LabelEnumError",
    "UnknownName",
    "UnknownValue",
    "MalformedEnum",
    "UnsupportedOperation",
]
