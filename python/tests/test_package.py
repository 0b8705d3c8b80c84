from __future__ import annotations

import nullsafe


def test_public_exports() -> None:
    for name in nullsafe.__all__:
        assert hasattr(nullsafe, name)
    assert "__version__" in dir(nullsafe)


def test_version_is_a_string() -> None:
    assert isinstance(nullsafe.__version__, str)
    assert nullsafe.__version__
