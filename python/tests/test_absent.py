from __future__ import annotations

import copy
import pickle

from nullsafe.absent import UNDEFINED, UndefinedType, is_absent, is_falsy


def test_undefined_is_singleton() -> None:
    assert UndefinedType() is UNDEFINED
    assert copy.deepcopy(UNDEFINED) is UNDEFINED
    assert pickle.loads(pickle.dumps(UNDEFINED)) is UNDEFINED


def test_undefined_is_falsy_with_stable_repr() -> None:
    assert not UNDEFINED
    assert repr(UNDEFINED) == "UNDEFINED"


def test_is_absent_covers_both_forms_of_nothing() -> None:
    assert is_absent(None)
    assert is_absent(UNDEFINED)
    for value in (0, "", False, [], {}, 0.0):
        assert not is_absent(value)


def test_is_falsy_treats_empty_values_as_missing() -> None:
    for value in (None, UNDEFINED, 0, "", False, [], {}):
        assert is_falsy(value)
    for value in (1, "x", True, [0], {"a": None}):
        assert not is_falsy(value)


def test_is_falsy_keeps_values_with_ambiguous_truth() -> None:
    class Ambiguous:
        def __bool__(self):
            raise ValueError("truth value is ambiguous")

    assert not is_falsy(Ambiguous())
