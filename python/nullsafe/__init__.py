from __future__ import annotations

from .absent import UNDEFINED, is_absent
from .proxy import NotCallableError, NullsafeProxy, wrap


def _resolve_version() -> str:
    try:
        from importlib.metadata import version

        return version("nullsafe-proxy")
    except Exception:  # pragma: no cover - during development
        return "0.0.0"


def __getattr__(name: str):
    if name == "__version__":
        value = _resolve_version()
        globals()["__version__"] = value
        return value
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__() -> list[str]:
    return sorted(list(globals().keys()) + ["__version__"])


__all__ = [
    "NotCallableError",
    "NullsafeProxy",
    "UNDEFINED",
    "is_absent",
    "wrap",
    "__version__",
]
