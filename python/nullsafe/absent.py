"""The undefined sentinel and the shared notion of absence."""

from __future__ import annotations


class UndefinedType:
    """Marker for a name that was looked up but does not exist.

    There is exactly one instance, ``UNDEFINED``. It is falsy and compares
    by identity.
    """

    __slots__ = ()

    _instance: UndefinedType | None = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self):
        return False

    def __repr__(self):
        return "UNDEFINED"

    def __reduce__(self):
        return (UndefinedType, ())


UNDEFINED = UndefinedType()


def is_absent(value) -> bool:
    """Return True for ``None`` and ``UNDEFINED``, the two forms of nothing."""
    return value is None or value is UNDEFINED


def is_falsy(value) -> bool:
    # Truthiness can raise (numpy arrays, for one); those values count as present.
    if is_absent(value):
        return True
    try:
        return not value
    except (TypeError, ValueError):
        return False
