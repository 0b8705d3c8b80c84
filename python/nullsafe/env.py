from __future__ import annotations

import os

LOOSE_VAR = "NULLSAFE_LOOSE"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})


class EnvSettings:
    __slots__ = ("_env",)

    def __init__(self, env=None) -> None:
        self._env = os.environ if env is None else env

    def _flag(self, key) -> bool:
        raw = self._env.get(key)
        if raw is None:
            return False
        return str(raw).strip().lower() in _TRUE_VALUES

    @property
    def loose(self) -> bool:
        """Whether ``NULLSAFE_LOOSE`` asks for truthiness presence checks."""
        return self._flag(LOOSE_VAR)

    def __repr__(self) -> str:
        return f"EnvSettings(loose={self.loose})"
