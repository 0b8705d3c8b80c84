"""Null-safe chaining proxy.

A ``NullsafeProxy`` wraps a value that may be missing and exposes ``get``,
``call`` and ``apply``. Each returns a new proxy, so a chain never raises on
a missing attribute, key, index or method; the end of the chain is either
the value reached or an absent proxy.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Sequence

from .absent import UNDEFINED, is_absent
from .env import EnvSettings
from .lookup import index, lookup, lookup_member, missing, traverse

_LOG = logging.getLogger(__name__)


class NotCallableError(TypeError):
    """Raised when a present member (or the target itself) is invoked but is not callable."""


class NullsafeProxy:
    """Immutable wrapper around a possibly absent value."""

    __slots__ = ("_target", "_is_null", "_loose")

    def __init__(self, target=None, path=None, *, loose: bool = False) -> None:
        if path is not None:
            target = traverse(target, path, loose)
        object.__setattr__(self, "_target", target)
        object.__setattr__(self, "_is_null", is_absent(target))
        object.__setattr__(self, "_loose", bool(loose))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def value(self) -> Any:
        return self._target

    @property
    def loose(self) -> bool:
        return self._loose

    def is_null(self) -> bool:
        return self._is_null

    def value_or(self, default):
        """Return the wrapped value, or ``default`` when absent."""
        if self._is_null:
            return default
        return self._target

    def _wrap(self, target) -> NullsafeProxy:
        return NullsafeProxy(target, loose=self._loose)

    def _absent(self) -> NullsafeProxy:
        return NullsafeProxy(None, loose=self._loose)

    def get(self, attribute, position=None) -> NullsafeProxy:
        """Look up ``attribute`` and, if ``position`` is given, index into it.

        Returns an absent proxy when this proxy is absent, the attribute is
        missing, or the position is out of range or not indexable.
        """
        if self._is_null:
            return self._absent()
        found = lookup(self._target, attribute)
        if missing(found, self._loose):
            _LOG.debug("get %r: absent on %s", attribute, type(self._target).__name__)
            return self._absent()
        if position is not None:
            found = index(found, position)
            if is_absent(found):
                _LOG.debug("get %r[%r]: no such position", attribute, position)
                return self._absent()
        return self._wrap(found)

    def call(self, method_name=None, /, *args, **kwargs) -> NullsafeProxy:
        """Invoke ``method_name`` on the target with ``args`` and wrap the result.

        With no method name the target itself is invoked.
        """
        return self.apply(method_name, args, kwargs)

    def apply(
        self,
        method_name=None,
        args: Optional[Sequence[Any]] = None,
        kwargs: Optional[Mapping[str, Any]] = None,
    ) -> NullsafeProxy:
        """Invoke ``method_name`` with an explicit argument list and wrap the result."""
        if self._is_null:
            return self._absent()
        if method_name is None or method_name is UNDEFINED:
            func = self._target
            label = type(func).__name__
        else:
            func = lookup_member(self._target, method_name)
            if missing(func, self._loose):
                _LOG.debug(
                    "call %r: no such member on %s",
                    method_name,
                    type(self._target).__name__,
                )
                return self._absent()
            label = f"{type(self._target).__name__}.{method_name}"
        if not callable(func):
            raise NotCallableError(
                f"{label} is not callable, got {type(func).__name__}"
            )
        return self._wrap(func(*(args or ()), **(kwargs or {})))

    def __repr__(self) -> str:
        if self._is_null:
            return "NullsafeProxy(<absent>)"
        return f"NullsafeProxy({self._target!r})"


def wrap(target=None, path=None, *, loose: Optional[bool] = None) -> NullsafeProxy:
    """Wrap ``target``, optionally walking ``path`` first.

    ``loose`` defaults to the ``NULLSAFE_LOOSE`` environment variable.
    """
    if loose is None:
        loose = EnvSettings().loose
    return NullsafeProxy(target, path, loose=loose)
