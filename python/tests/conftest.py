from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import pytest

PYTHON_DIR = Path(__file__).resolve().parents[1]
if str(PYTHON_DIR) not in sys.path:
    sys.path.insert(0, str(PYTHON_DIR))


@dataclass
class Address:
    city: str
    zip_code: Optional[str] = None


@dataclass
class User:
    name: str
    address: Optional[Address] = None
    tags: list[str] = field(default_factory=list)
    visits: int = 0

    def greet(self, greeting: str = "Hello", punctuation: str = "!") -> str:
        return f"{greeting}, {self.name}{punctuation}"

    def nothing(self) -> None:
        return None


@pytest.fixture
def user() -> User:
    return User(name="Jon", address=Address(city="Oslo"), tags=["admin", "ops"])


@pytest.fixture
def homeless_user() -> User:
    return User(name="Ann")


@pytest.fixture
def record() -> dict:
    return {
        "id": 50,
        "ids": [1, 2, 3],
        "owner": {"name": "Jon", "roles": ["admin"]},
        "count": 0,
        "label": "",
        "enabled": False,
        "missing": None,
        "getName": lambda: "Jon",
    }


@pytest.fixture(autouse=True)
def _strict_by_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("NULLSAFE_LOOSE", raising=False)
