"""Flattening of grouped mappings."""

from __future__ import annotations

from itertools import chain
from typing import TYPE_CHECKING, TypeVar


if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping


_K = TypeVar("_K")
_V = TypeVar("_V")


def flatten_values(grouped: Mapping[_K, Iterable[_V] | None]) -> list[_V]:
    """Return every grouped value in a single new list.

    Groups are visited in mapping iteration order and each group keeps its own
    order. Missing (``None``) or empty groups contribute nothing.

    Example:
        >>> flatten_values({"a": [1, 2], "b": None, "c": [3]})
        [1, 2, 3]
    """
    return list(chain.from_iterable(group for group in grouped.values() if group is not None))
