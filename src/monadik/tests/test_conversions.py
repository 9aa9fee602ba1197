"""Tests for conversions between Option, Either and Try."""

from __future__ import annotations

import pytest

from monadik import AbsentValueError, Failure, Left, Nothing, Option, Right, Some, Success


# ═════════════════════════════════════════════════════════════════════════════
# Option → Either / Try
# ═════════════════════════════════════════════════════════════════════════════


def test_option_to_left() -> None:
    assert Some(1).to_left("unused") == Left(1)
    assert Nothing.to_left("default") == Right("default")


def test_option_to_right() -> None:
    assert Some(1).to_right("unused") == Right(1)
    assert Nothing.to_right("default") == Left("default")


def test_option_to_try_with_supplier() -> None:
    err = KeyError("missing")

    assert Some(1).to_try(lambda: err) == Success(1)
    assert Nothing.to_try(lambda: err) == Failure(err)


def test_option_to_try_default_error() -> None:
    result = Nothing.to_try()

    assert result.is_failure()
    assert isinstance(result.error, AbsentValueError)


def test_option_to_try_supplier_is_lazy() -> None:
    def supplier() -> Exception:
        raise AssertionError("supplier should not run")

    assert Some(1).to_try(supplier) == Success(1)


# ═════════════════════════════════════════════════════════════════════════════
# Try → Option / Either
# ═════════════════════════════════════════════════════════════════════════════


def test_try_to_option() -> None:
    assert Success(1).to_option() == Some(1)
    assert Failure(ValueError()).to_option() == Nothing


def test_success_none_to_option_is_nothing() -> None:
    assert Success(None).to_option() == Nothing


def test_try_to_either() -> None:
    err = ValueError("e")

    assert Success(1).to_either() == Left(1)
    assert Failure(err).to_either() == Right(err)


def test_success_none_has_no_either_form() -> None:
    with pytest.raises(TypeError, match="Success\(None\)"):
        Success(None).to_either()


def test_option_to_either_rejects_none_default() -> None:
    with pytest.raises(TypeError):
        Nothing.to_left(None)
    with pytest.raises(TypeError):
        Nothing.to_right(None)
    assert Some(1).to_left(None) == Left(1)


# ═════════════════════════════════════════════════════════════════════════════
# Round Trips
# ═════════════════════════════════════════════════════════════════════════════


@pytest.mark.parametrize("opt", [Some(1), Nothing])
def test_option_try_option_round_trip(opt: Option[int]) -> None:
    assert opt.to_try().to_option() == opt


def test_option_left_round_trip() -> None:
    assert Some(1).to_left(0).left_option() == Some(1)
    assert Nothing.to_left(0).left_option() == Nothing


def test_option_right_round_trip() -> None:
    assert Some(1).to_right(0).right_option() == Some(1)
    assert Nothing.to_right(0).right_option() == Nothing


def test_try_either_swap_round_trip() -> None:
    err = ValueError()

    assert Success(1).to_either().swap() == Right(1)
    assert Failure(err).to_either().swap() == Left(err)


def test_chain_across_types() -> None:
    port = (
        Option.of("8080")
        .to_try()
        .map(int)
        .recover(lambda _: 80)
        .to_option()
        .filter(lambda p: p > 1024)
        .or_else(0)
    )
    assert port == 8080

    fallback = Option.of(None).to_try().map(int).recover(lambda _: 80).value
    assert fallback == 80
