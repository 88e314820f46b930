"""In-place merging of mappings into a destination mapping."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from .exceptions import DuplicateKeyError


if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Mapping, MutableMapping


_K = TypeVar("_K")
_V = TypeVar("_V")


def merge_into(target: MutableMapping[_K, _V], source: Mapping[_K, _V]) -> None:
    """Copy every entry of ``source`` into ``target``, overwriting existing keys."""
    for key, value in source.items():
        target[key] = value


def add_dictionary(target: MutableMapping[_K, _V], source: Mapping[_K, _V]) -> None:
    """Add every entry of ``source`` to ``target``, refusing to overwrite.

    All keys are checked before anything is written, so when a
    ``DuplicateKeyError`` is raised ``target`` is left untouched.
    """
    for key in source:
        if key in target:
            raise DuplicateKeyError(key)
    merge_into(target, source)


def add_range_by_key(
    target: MutableMapping[_K, _V],
    items: Iterable[_V],
    key_selector: Callable[[_V], _K],
) -> None:
    """Store each item in ``target`` under ``key_selector(item)``.

    Items are processed in order and later items replace earlier ones sharing a
    key. Errors raised by ``key_selector`` propagate as-is; items stored before
    the failure stay in ``target``.
    """
    for item in items:
        target[key_selector(item)] = item
