"""Option vocabulary for plain nullable references (T | None).

Every function wraps its argument with Option.of and delegates, so absence
means exactly `value is None` and the semantics match Option's.

Example:
    >>> from monadik import nullable
    >>> nullable.map("8080", int)
    8080
    >>> nullable.map(None, int) is None
    True
    >>> nullable.or_else(nullable.filter("  ", str.strip), "anonymous")
    'anonymous'
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, TypeVar

from .monads.option import Option

if TYPE_CHECKING:
    from collections.abc import Iterator

    from .monads.either import Either
    from .monads.try_ import Try

T = TypeVar("T")
U = TypeVar("U")


def map(value: T | None, f: Callable[[T], U | None]) -> U | None:  # noqa: A001
    """f(value), or None when value is None."""
    return Option.of(value).map(f).or_none()


def filter(value: T | None, predicate: Callable[[T], bool]) -> T | None:  # noqa: A001
    """value if it is present and satisfies predicate, else None."""
    return Option.of(value).filter(predicate).or_none()


def fold(value: T | None, on_present: Callable[[T], Any], on_absent: Callable[[], Any]) -> T | None:
    """Run exactly one branch; returns value unchanged."""
    Option.of(value).fold(on_present, on_absent)
    return value


def if_present(value: T | None, f: Callable[[T], Any]) -> T | None:
    Option.of(value).if_present(f)
    return value


def if_absent(value: T | None, f: Callable[[], Any]) -> T | None:
    Option.of(value).if_absent(f)
    return value


def or_else(value: T | None, default: T) -> T:
    return Option.of(value).or_else(default)


def or_else_get(value: T | None, supplier: Callable[[], T]) -> T:
    return Option.of(value).or_else_get(supplier)


def or_else_throw(value: T | None, error_supplier: Callable[[], BaseException]) -> T:
    return Option.of(value).or_else_throw(error_supplier)


def to_left(value: T | None, right: U) -> Either[T, U]:
    return Option.of(value).to_left(right)


def to_right(value: T | None, left: U) -> Either[U, T]:
    return Option.of(value).to_right(left)


def to_try(value: T | None, error_supplier: Callable[[], BaseException] | None = None) -> Try[T]:
    """Success(value), or a Failure holding error_supplier() (AbsentValueError by default)."""
    return Option.of(value).to_try(error_supplier)


def to_list(value: T | None) -> list[T]:
    return Option.of(value).to_list()


def to_set(value: T | None) -> set[T]:
    return Option.of(value).to_set()


def to_iter(value: T | None) -> Iterator[T]:
    return Option.of(value).to_iter()


__all__ = [
    "map", "filter", "fold", "if_present", "if_absent",
    "or_else", "or_else_get", "or_else_throw",
    "to_left", "to_right", "to_try",
    "to_list", "to_set", "to_iter",
]
