"""Construct objects from mappings by assigning matching public members."""

from __future__ import annotations

import inspect
import logging
import types
from functools import lru_cache
from typing import (
    TYPE_CHECKING,
    Annotated,
    Any,
    ClassVar,
    Final,
    Literal,
    TypeVar,
    Union,
    get_args,
    get_origin,
    get_type_hints,
)

from pydantic import ConfigDict, PydanticUserError, TypeAdapter, ValidationError

from .exceptions import ConstructionError, TypeMismatchError


if TYPE_CHECKING:
    from collections.abc import Callable, Mapping


logger = logging.getLogger(__name__)

_T = TypeVar("_T")

_UNCONVERTED = object()
_LAX_CONFIG = ConfigDict(coerce_numbers_to_str=True)


def to_object(
    source: Mapping[str, Any],
    cls: type[_T],
    *,
    case_sensitive: bool = True,
    strict: bool = False,
) -> _T:
    """Create a ``cls`` instance and populate it from ``source``.

    ``cls`` is called without arguments, then each entry whose key names a
    public settable member is assigned to it. Values that are ``None`` or
    already match the member's declared type are assigned as-is; anything else
    goes through pydantic's lax validation for that type and is skipped when
    it does not validate. Keys without a matching member are ignored.

    ``case_sensitive=False`` lets a key that matches no member exactly match
    one case-insensitively. ``strict=True`` raises ``TypeMismatchError`` for
    values that fail validation instead of skipping them.
    """
    instance = _instantiate(cls)
    members = settable_members(cls, instance)

    for key, value in source.items():
        name = _match_member(members, key, case_sensitive=case_sensitive)
        if name is None:
            logger.debug("skipping %r: no public settable member on %s", key, cls.__qualname__)
            continue

        declared = members[name]
        if value is not None and not _is_instance(value, declared):
            converted = _convert(value, declared)
            if converted is _UNCONVERTED:
                if strict:
                    raise TypeMismatchError(name, value, declared)
                logger.debug("skipping %r: cannot convert %r to %r", name, value, declared)
                continue
            value = converted

        try:
            setattr(instance, name, value)
        except AttributeError:
            logger.debug("skipping %r: attribute is read-only on %s", name, cls.__qualname__)

    return instance


def settable_members(cls: type, instance: Any | None = None) -> dict[str, Any]:
    """Return public settable member names of ``cls`` mapped to their declared types.

    Members with no usable annotation map to ``Any``. When ``instance`` is
    given, plain attributes it carries are included too, typed by their
    current value.
    """
    members = {
        name: hint
        for name, hint in _class_hints(cls).items()
        if not name.startswith("_") and get_origin(hint) is not ClassVar and hint is not ClassVar
    }

    for name in dir(cls):
        if name.startswith("_"):
            continue
        attribute = inspect.getattr_static(cls, name, None)
        if isinstance(attribute, property):
            if attribute.fset is None:
                _ = members.pop(name, None)
            else:
                members[name] = _property_type(attribute)
        elif name in members and isinstance(attribute, (types.FunctionType, staticmethod, classmethod)):
            _ = members.pop(name)

    if instance is not None:
        try:
            attributes = vars(instance)
        except TypeError:
            attributes = {}
        for name, current in attributes.items():
            if name.startswith("_") or name in members:
                continue
            members[name] = Any if current is None else type(current)

    return members


def _instantiate(cls: type[_T]) -> _T:
    if not isinstance(cls, type):
        msg = f"{cls!r} is not a class"
        raise ConstructionError(msg)
    try:
        return cls()
    except TypeError as exc:
        msg = f"{cls.__qualname__} cannot be constructed without arguments"
        raise ConstructionError(msg) from exc


def _class_hints(cls: type) -> dict[str, Any]:
    try:
        return get_type_hints(cls, include_extras=True)
    except (NameError, TypeError):
        pass

    # unresolvable forward references: fall back to per-class annotations
    hints: dict[str, Any] = {}
    for klass in reversed(cls.__mro__):
        try:
            annotations = inspect.get_annotations(klass, eval_str=False)
        except NameError:
            continue
        for name, annotation in annotations.items():
            hints[name] = Any if isinstance(annotation, str) else annotation
    return hints


def _callable_hints(function: Callable[..., Any]) -> dict[str, Any]:
    try:
        return get_type_hints(function, include_extras=True)
    except (NameError, TypeError):
        return {}


def _property_type(prop: property) -> Any:
    if prop.fset is not None:
        parameters = list(inspect.signature(prop.fset).parameters)
        if len(parameters) >= 2:
            hint = _callable_hints(prop.fset).get(parameters[1])
            if hint is not None:
                return hint
    if prop.fget is not None:
        return _callable_hints(prop.fget).get("return", Any)
    return Any


def _match_member(members: Mapping[str, Any], key: Any, *, case_sensitive: bool) -> str | None:
    if not isinstance(key, str):
        return None
    if key in members:
        return key
    if case_sensitive:
        return None
    folded = key.casefold()
    return next((name for name in members if name.casefold() == folded), None)


def _is_union(origin: Any) -> bool:
    return origin is Union or origin is types.UnionType


def _unwrap(declared: Any) -> Any:
    """Strip ``Final`` and ``NewType`` wrappers down to the underlying type."""
    while True:
        if get_origin(declared) is Final:
            args = get_args(declared)
            declared = args[0] if args else Any
        elif hasattr(declared, "__supertype__"):
            declared = declared.__supertype__
        else:
            return declared


def _is_instance(value: Any, declared: Any) -> bool:
    declared = _unwrap(declared)
    if declared is Any or declared is object or isinstance(declared, TypeVar):
        return True

    origin = get_origin(declared)
    if _is_union(origin):
        return any(_is_instance(value, arg) for arg in get_args(declared))
    if origin is Annotated:
        return _is_instance(value, get_args(declared)[0])
    if origin is Literal:
        return value in get_args(declared)
    if origin is not None:
        declared = origin

    if not isinstance(declared, type):
        # typing constructs we cannot check at runtime are accepted as-is
        return True
    # bool subclasses int, but only counts as a bool
    if isinstance(value, bool) and not issubclass(declared, bool) and issubclass(declared, int):
        return False
    try:
        return isinstance(value, declared)
    except TypeError:
        # TypedDict and non runtime-checkable protocols refuse isinstance
        return True


def _build_adapter(declared: Any) -> TypeAdapter[Any] | None:
    try:
        return TypeAdapter(declared, config=_LAX_CONFIG)
    except (PydanticUserError, TypeError):
        pass
    # models, dataclasses and TypedDicts carry their own config
    try:
        return TypeAdapter(declared)
    except (PydanticUserError, TypeError):
        logger.debug("no validator available for %r", declared)
        return None


_cached_adapter = lru_cache(maxsize=256)(_build_adapter)


def _convert(value: Any, declared: Any) -> Any:
    declared = _unwrap(declared)
    try:
        adapter = _cached_adapter(declared)
    except TypeError:
        # unhashable annotation metadata
        adapter = _build_adapter(declared)
    if adapter is None:
        return _UNCONVERTED

    try:
        return adapter.validate_python(value)
    except ValidationError:
        return _UNCONVERTED
