"""Reverse lookups from value to key."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar


if TYPE_CHECKING:
    from collections.abc import Mapping


_K = TypeVar("_K")


def try_find_key_by_value(mapping: Mapping[_K, Any], value: Any) -> tuple[bool, _K | None]:
    """Return ``(True, key)`` for the first entry holding ``value``, else ``(False, None)``.

    Entries are compared by identity, then by equality, the same rule the
    ``in`` operator applies to containers. The one place this differs from
    plain ``==`` is an object that is not equal to itself: the very ``nan``
    object stored in the mapping is found, an equal-looking other ``nan`` is not.
    """
    for key, candidate in mapping.items():
        if candidate is value or candidate == value:
            return True, key
    return False, None


def find_key_by_value(mapping: Mapping[_K, Any], value: Any, default: _K | None = None) -> _K | None:
    """Return the first key holding ``value``, or ``default`` when none does."""
    found, key = try_find_key_by_value(mapping, value)
    return key if found else default
