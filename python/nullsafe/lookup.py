from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from .absent import UNDEFINED, is_absent, is_falsy

_LOG = logging.getLogger(__name__)


def _is_mapping(obj) -> bool:
    if isinstance(obj, Mapping):
        return True
    return hasattr(obj, "keys") and hasattr(obj, "__getitem__")


def _is_subscriptable(obj) -> bool:
    return hasattr(type(obj), "__getitem__")


def _is_position(key) -> bool:
    return hasattr(type(key), "__index__") and not isinstance(key, bool)


def _lookup_key(obj, key):
    # Membership first: __missing__ (defaultdict, Counter) must not run.
    if key not in obj.keys():
        return UNDEFINED
    return obj[key]


def _lookup_item(obj, key):
    try:
        return obj[key]
    except (KeyError, IndexError):
        return UNDEFINED


def _lookup_attr(obj, name):
    if not isinstance(name, str):
        return UNDEFINED
    return getattr(obj, name, UNDEFINED)


def lookup(obj, key) -> Any:
    """Resolve ``key`` on ``obj`` and return the value or ``UNDEFINED``.

    Mappings are looked up by key, integer keys index other subscriptable
    values, and everything else is an attribute name. Nothing is written
    to ``obj``.
    """
    if is_absent(obj):
        return UNDEFINED
    if _is_mapping(obj):
        return _lookup_key(obj, key)
    if _is_position(key) and _is_subscriptable(obj):
        return _lookup_item(obj, key)
    return _lookup_attr(obj, key)


def lookup_member(obj, name) -> Any:
    """Like ``lookup`` but falls back to attributes on mappings.

    Used to find something to invoke, so ``{"a": 1}`` still exposes ``get``.
    """
    value = lookup(obj, name)
    if value is UNDEFINED and _is_mapping(obj):
        return _lookup_attr(obj, name)
    return value


def index(obj, position) -> Any:
    if is_absent(obj):
        return UNDEFINED
    if _is_mapping(obj):
        return _lookup_key(obj, position)
    if not _is_position(position) or not _is_subscriptable(obj):
        return UNDEFINED
    return _lookup_item(obj, position)


def missing(value, loose: bool) -> bool:
    return is_falsy(value) if loose else is_absent(value)


def _path_keys(path) -> Iterable:
    if isinstance(path, (str, bytes)):
        return (path,)
    if not isinstance(path, Iterable):
        raise TypeError(
            f"path must be a key or an iterable of keys, got {type(path).__name__}"
        )
    return path


def traverse(obj, path, loose: bool = False) -> Any:
    """Walk ``path`` from ``obj``, stopping at the first absent step.

    Returns the value reached, or ``None`` once a step is absent (or falsy
    in loose mode). Raises ``TypeError`` when ``path`` is neither a key string
    nor iterable.
    """
    cur = obj
    for depth, key in enumerate(_path_keys(path)):
        if missing(cur, loose):
            _LOG.debug("path stopped before step %d (%r): value is absent", depth, key)
            return None
        cur = lookup(cur, key)
        if missing(cur, loose):
            _LOG.debug("path stopped at step %d: %r is absent", depth, key)
            return None
    return cur
