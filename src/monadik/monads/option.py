"""Option monad: a possibly present value, or the absence thereof.

Implements a discriminated union of Some (wrapping a non-None value) and the
canonical empty instance Nothing:
- Functor: map
- Monad: flat_map, flatten
- Filtering, one-branch callbacks, terminal extraction
- Conversions to Either and Try, singleton-or-empty collections
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar

from monadik.errors import AbsentValueError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from .either import Either
    from .try_ import Try

T = TypeVar("T")
U = TypeVar("U")

_PRESENT = True
_ABSENT = False


class Option(Generic[T]):
    """Discriminated union representing presence (Some) or absence (Nothing).

    Construct with Some(value) for a known value, or Option.of(value) for a
    reference that may be None.

    Examples:
        >>> Option.of(5).map(lambda x: x + 1).or_else(-1)
        6
        >>> Option.of(None).map(lambda x: x + 1).or_else(-1)
        -1
        >>> Some(3).filter(lambda x: x > 5)
        Nothing

    Notes:
        - Some never wraps None; map collapses a None result to Nothing
        - Immutable: every operation returns an Option, fold/if_* return self
        - No positional match args: match on is_present() first, then
          case Option(value=v), since Nothing.value raises
    """

    __slots__ = ("_value", "_present")

    def __init__(self, value: T | None, present: bool) -> None:
        """Private constructor. Use Some(), Option.of() or Nothing instead."""
        self._value = value
        self._present = present

    @classmethod
    def of(cls, value: T | None) -> Option[T]:
        """Some(value) if value is not None, otherwise Nothing."""
        return Option(value, _PRESENT) if value is not None else Nothing

    # ─── Type Checking ───────────────────────────────────────────────

    def is_present(self) -> bool:
        return self._present

    def is_absent(self) -> bool:
        return not self._present

    def contains(self, other: object) -> bool:
        """True when present and the wrapped value equals other."""
        return self._present and self._value == other

    # ─── Value Extraction ────────────────────────────────────────────

    @property
    def value(self) -> T:
        """The wrapped value. Raises AbsentValueError on Nothing."""
        if self._present:
            return self._value  # type: ignore[return-value]
        raise AbsentValueError("value accessed on Nothing")

    def or_else_get(self, supplier: Callable[[], T]) -> T:
        """Wrapped value, or the result of supplier() when absent."""
        return self._value if self._present else supplier()  # type: ignore[return-value]

    def or_else(self, default: T) -> T:
        return self._value if self._present else default  # type: ignore[return-value]

    def or_none(self) -> T | None:
        return self._value if self._present else None

    def or_else_throw(self, error_supplier: Callable[[], BaseException]) -> T:
        """Wrapped value, or raise the exception built by error_supplier()."""
        if self._present:
            return self._value  # type: ignore[return-value]
        raise error_supplier()

    # ─── Functor / Monad ─────────────────────────────────────────────

    def flat_map(self, f: Callable[[T], Option[U]]) -> Option[U]:
        """Apply f to the value if present. Signature: Option[T] → (T→Option[U]) → Option[U]"""
        return f(self._value) if self._present else Nothing  # type: ignore[arg-type]

    def map(self, f: Callable[[T], U | None]) -> Option[U]:
        """Apply f to the value if present. A None result becomes Nothing."""
        return self.flat_map(lambda v: Option.of(f(v)))

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        """Self if present and predicate holds, otherwise Nothing."""
        return self.flat_map(lambda v: self if predicate(v) else Nothing)

    def flatten(self: Option[Option[T]]) -> Option[T]:
        """Option[Option[T]] → Option[T]. A non-nested Option is returned unchanged."""
        if self._present and isinstance(self._value, Option):
            return self._value
        return self  # type: ignore[return-value]

    # ─── Side Effects ────────────────────────────────────────────────

    def fold(self, on_present: Callable[[T], Any], on_absent: Callable[[], Any]) -> Option[T]:
        """Invoke on_present(value) if present, else on_absent(). Returns self."""
        if self._present:
            on_present(self._value)  # type: ignore[arg-type]
        else:
            on_absent()
        return self

    def if_present(self, f: Callable[[T], Any]) -> Option[T]:
        return self.fold(f, _noop)

    def if_absent(self, f: Callable[[], Any]) -> Option[T]:
        return self.fold(_noop, f)

    # ─── Conversion ──────────────────────────────────────────────────

    def to_left(self, right: U) -> Either[T, U]:
        """Left(value) if present, otherwise Right(right). A None default raises TypeError."""
        from .either import Left, Right
        return Left(self._value) if self._present else Right(right)

    def to_right(self, left: U) -> Either[U, T]:
        """Right(value) if present, otherwise Left(left). A None default raises TypeError."""
        from .either import Left, Right
        return Right(self._value) if self._present else Left(left)

    def to_try(self, error_supplier: Callable[[], BaseException] | None = None) -> Try[T]:
        """Success(value) if present, otherwise Failure(error_supplier()).

        Without a supplier the failure holds an AbsentValueError.
        """
        from .try_ import Failure, Success
        if self._present:
            return Success(self._value)
        return Failure(error_supplier() if error_supplier else AbsentValueError())

    def to_list(self) -> list[T]:
        return [self._value] if self._present else []  # type: ignore[list-item]

    def to_set(self) -> set[T]:
        return {self._value} if self._present else set()  # type: ignore[arg-type]

    def to_iter(self) -> Iterator[T]:
        return iter(self.to_list())

    # ─── Dunder Methods ──────────────────────────────────────────────

    __bool__ = lambda self: self._present  # noqa: E731
    __contains__ = contains
    __hash__ = lambda self: hash((self._present, self._value))  # noqa: E731
    __repr__ = lambda self: f"Some({self._value!r})" if self._present else "Nothing"  # noqa: E731
    __str__ = __repr__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Option):
            return NotImplemented
        return self._present == other._present and self._value == other._value

    def __iter__(self) -> Iterator[T]:
        """Iterate: yields value if present, nothing otherwise."""
        if self._present:
            yield self._value  # type: ignore[misc]


def _noop(*_: object) -> None:
    pass


# ═══════════════════════════════════════════════════════════════════════════════
# Constructors
# ═══════════════════════════════════════════════════════════════════════════════


Nothing: Option[Any] = Option(None, _ABSENT)


def Some(value: T) -> Option[T]:  # noqa: N802
    """Construct a present Option. Raises TypeError for None; use Option.of for nullable input."""
    if value is None:
        raise TypeError("Some() requires a value; use Option.of() for a nullable reference")
    return Option(value, _PRESENT)


def from_nullable(value: T | None) -> Option[T]:
    """Alias of Option.of for call sites that read better as a function."""
    return Option.of(value)
