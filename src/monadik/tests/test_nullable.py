"""Tests for the Option vocabulary on plain nullable references."""

from __future__ import annotations

import pytest

from monadik import AbsentValueError, Failure, Left, Right, Success, nullable


def test_map() -> None:
    assert nullable.map(5, lambda x: x + 1) == 6
    assert nullable.map(None, lambda x: x + 1) is None
    assert nullable.map({"a": 1}, lambda d: d.get("b")) is None


def test_filter() -> None:
    assert nullable.filter(5, lambda x: x > 3) == 5
    assert nullable.filter(2, lambda x: x > 3) is None
    assert nullable.filter(None, lambda _: True) is None


def test_falsy_values_are_present() -> None:
    assert nullable.map(0, lambda x: x + 1) == 1
    assert nullable.or_else("", "default") == ""


def test_fold_returns_input() -> None:
    seen: list[object] = []

    assert nullable.fold(1, seen.append, lambda: seen.append("absent")) == 1
    assert nullable.fold(None, seen.append, lambda: seen.append("absent")) is None
    assert seen == [1, "absent"]


def test_if_present_and_if_absent() -> None:
    seen: list[object] = []

    nullable.if_present("x", seen.append)
    nullable.if_present(None, seen.append)
    nullable.if_absent(None, lambda: seen.append("absent"))
    nullable.if_absent("x", lambda: seen.append("unexpected"))

    assert seen == ["x", "absent"]


def test_or_else_variants() -> None:
    assert nullable.or_else(None, 2) == 2
    assert nullable.or_else(1, 2) == 1
    assert nullable.or_else_get(None, lambda: 3) == 3
    assert nullable.or_else_throw(1, lambda: KeyError()) == 1
    with pytest.raises(KeyError):
        nullable.or_else_throw(None, lambda: KeyError("missing"))


def test_to_either() -> None:
    assert nullable.to_left(1, "r") == Left(1)
    assert nullable.to_left(None, "r") == Right("r")
    assert nullable.to_right(1, "l") == Right(1)
    assert nullable.to_right(None, "l") == Left("l")


def test_to_try() -> None:
    err = LookupError("absent")

    assert nullable.to_try(1) == Success(1)
    assert nullable.to_try(None, lambda: err) == Failure(err)
    assert isinstance(nullable.to_try(None).error, AbsentValueError)


def test_collection_adapters() -> None:
    assert nullable.to_list(1) == [1]
    assert nullable.to_list(None) == []
    assert nullable.to_set("a") == {"a"}
    assert nullable.to_set(None) == set()
    assert list(nullable.to_iter(1)) == [1]
    assert list(nullable.to_iter(None)) == []
