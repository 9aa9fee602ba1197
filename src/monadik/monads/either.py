"""Either: a value that is one of two possible types, Left or Right.

Unlike Result, neither side is an error channel. Both sides are read through
guarded accessors that raise on the wrong variant rather than defaulting.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar

from monadik.errors import NotLeftError, NotRightError

from .option import Nothing, Option

if TYPE_CHECKING:
    from collections.abc import Iterator

L = TypeVar("L")  # Left type
R = TypeVar("R")  # Right type

_LEFT = True
_RIGHT = False


class Either(Generic[L, R]):
    """Discriminated union holding exactly one of a Left or a Right payload.

    Neither side holds None: Left(None) and Right(None) raise TypeError, so
    exactly one of left_option() and right_option() is present.

    Examples:
        >>> Left(1).swap()
        Right(1)
        >>> Left(Left(1)).flatten_left()
        Left(1)
        >>> left, right = Right("x")
        >>> (left, right)
        (Nothing, Some('x'))
    """

    __slots__ = ("_value", "_is_left")
    __match_args__ = ("_value",)

    def __init__(self, value: L | R, is_left: bool) -> None:
        """Private constructor. Use Left() or Right() instead."""
        self._value = value
        self._is_left = is_left

    # ─── Type Checking ───────────────────────────────────────────────

    def is_left(self) -> bool:
        return self._is_left

    def is_right(self) -> bool:
        return not self._is_left

    # ─── Value Extraction ────────────────────────────────────────────

    @property
    def left(self) -> L:
        """Left payload. Raises NotLeftError on a Right."""
        if self._is_left:
            return self._value  # type: ignore[return-value]
        raise NotLeftError(f"left accessed on Right({self._value!r})")

    @property
    def right(self) -> R:
        """Right payload. Raises NotRightError on a Left."""
        if not self._is_left:
            return self._value  # type: ignore[return-value]
        raise NotRightError(f"right accessed on Left({self._value!r})")

    def left_option(self) -> Option[L]:
        return Option.of(self._value) if self._is_left else Nothing

    def right_option(self) -> Option[R]:
        return Option.of(self._value) if not self._is_left else Nothing

    def to_pair(self) -> tuple[Option[L], Option[R]]:
        """(left_option, right_option) for destructuring. Exactly one side is present."""
        return self.left_option(), self.right_option()

    # ─── Side Effects ────────────────────────────────────────────────

    def fold(self, on_left: Callable[[L], Any], on_right: Callable[[R], Any]) -> Either[L, R]:
        """Invoke on_left or on_right with the payload. Returns self."""
        if self._is_left:
            on_left(self._value)  # type: ignore[arg-type]
        else:
            on_right(self._value)  # type: ignore[arg-type]
        return self

    def if_left(self, f: Callable[[L], Any]) -> Either[L, R]:
        return self.fold(f, _noop)

    def if_right(self, f: Callable[[R], Any]) -> Either[L, R]:
        return self.fold(_noop, f)

    # ─── Transformations ─────────────────────────────────────────────

    def swap(self) -> Either[R, L]:
        """Left(v) → Right(v), Right(v) → Left(v)."""
        return Either(self._value, not self._is_left)

    def flatten_left(self: Either[Either[L, R], R]) -> Either[L, R]:
        """Either[Either[L,R], R] → Either[L,R]. An outer Right passes through."""
        if not self._is_left:
            return self  # type: ignore[return-value]
        if not isinstance(self._value, Either):
            raise TypeError(f"flatten_left() needs a nested Either, got Left({self._value!r})")
        return self._value

    def flatten_right(self: Either[L, Either[L, R]]) -> Either[L, R]:
        """Either[L, Either[L,R]] → Either[L,R]. An outer Left passes through."""
        if self._is_left:
            return self  # type: ignore[return-value]
        if not isinstance(self._value, Either):
            raise TypeError(f"flatten_right() needs a nested Either, got Right({self._value!r})")
        return self._value

    # ─── Dunder Methods ──────────────────────────────────────────────

    __hash__ = lambda self: hash((self._is_left, self._value))  # noqa: E731
    __repr__ = lambda self: f"{'Left' if self._is_left else 'Right'}({self._value!r})"  # noqa: E731
    __str__ = __repr__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Either):
            return NotImplemented
        return self._is_left == other._is_left and self._value == other._value

    def __iter__(self) -> Iterator[Option[Any]]:
        """Unpack as (left_option, right_option)."""
        return iter(self.to_pair())


def _noop(_: object) -> None:
    pass


# ═══════════════════════════════════════════════════════════════════════════════
# Constructors
# ═══════════════════════════════════════════════════════════════════════════════


def Left(value: L) -> Either[L, Any]:  # noqa: N802
    """Construct the Left variant. Raises TypeError for None."""
    if value is None:
        raise TypeError("Left() requires a value, got None")
    return Either(value, _LEFT)


def Right(value: R) -> Either[Any, R]:  # noqa: N802
    """Construct the Right variant. Raises TypeError for None."""
    if value is None:
        raise TypeError("Right() requires a value, got None")
    return Either(value, _RIGHT)
