"""dict-extensions - helper operations for dict-like mappings"""

import importlib.metadata
import logging

from .exceptions import ConstructionError, DictExtensionError, DuplicateKeyError, TypeMismatchError
from .flatten import flatten_values
from .lookup import find_key_by_value, try_find_key_by_value
from .merge import add_dictionary, add_range_by_key, merge_into
from .objects import settable_members, to_object


try:
    __version__ = importlib.metadata.version("dict-extensions")
except importlib.metadata.PackageNotFoundError:  # pragma: no cover - running from a source checkout
    __version__ = "0.0.0+unknown"

logging.getLogger(__name__).addHandler(logging.NullHandler())


__all__ = [
    "ConstructionError",
    "DictExtensionError",
    "DuplicateKeyError",
    "TypeMismatchError",
    "__version__",
    "add_dictionary",
    "add_range_by_key",
    "find_key_by_value",
    "flatten_values",
    "merge_into",
    "settable_members",
    "to_object",
    "try_find_key_by_value",
]
