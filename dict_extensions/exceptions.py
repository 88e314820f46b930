"""Error types raised by the mapping helpers."""

from __future__ import annotations

from typing import Any


class DictExtensionError(Exception):
    """Base class for errors raised by dict-extensions."""


class DuplicateKeyError(DictExtensionError, KeyError):
    """Raised by strict-add merges when the destination already holds a key."""

    def __init__(self, key: Any) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"key already present in target mapping: {self.key!r}"


class ConstructionError(DictExtensionError, TypeError):
    """Raised when a target class cannot be instantiated without arguments."""


class TypeMismatchError(DictExtensionError, TypeError):
    """Raised in strict mode when a value cannot be converted to a member's type."""

    def __init__(self, name: str, value: Any, expected: Any) -> None:
        expected_name = getattr(expected, "__name__", repr(expected))
        msg = f"cannot assign {type(value).__name__} value {value!r} to {name!r} of type {expected_name}"
        super().__init__(msg)
        self.name = name
        self.value = value
        self.expected = expected
