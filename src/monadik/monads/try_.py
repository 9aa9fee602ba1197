"""Try monad: the outcome of a computation that may raise.

A Try is either Success(value) or Failure(exception). Try.of() is the single
boundary where a raised exception is turned into data:
- Functor: map (captures exceptions raised by the mapper)
- Monad: flat_map (does not capture; the function already returns a Try)
- Recovery: recover, recover_with
- Conversions to Option and Either
- Collection operations: sequence, traverse
"""

from __future__ import annotations

import logging
from functools import wraps
from typing import TYPE_CHECKING, Any, Callable, Generic, ParamSpec, TypeVar

from monadik.config import get_settings
from monadik.errors import FailureInfo, NotAFailureError
from monadik.observability import get_logger

from .option import Nothing, Option

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from .either import Either

P = ParamSpec("P")
T = TypeVar("T")
U = TypeVar("U")

_SUCCESS = True
_FAILURE = False

_log = get_logger("monadik.try")


class Try(Generic[T]):
    """Discriminated union representing a computed value (Success) or a raised exception (Failure).

    Examples:
        >>> Try.of(lambda: 10 / 0)
        Failure(ZeroDivisionError('division by zero'))
        >>> Try.of(lambda: 10 / 0).recover(lambda _: 0)
        Success(0)
        >>> Try.of(int, "42").map(lambda n: n * 2).or_else(-1)
        84

    Notes:
        - map and recover capture exceptions raised by their function;
          flat_map and recover_with do not, since that function returns a Try itself
        - Reading value on a Failure re-raises the held exception
    """

    __slots__ = ("_value", "_ok")
    __match_args__ = ("_value",)

    def __init__(self, value: T | BaseException, ok: bool) -> None:
        """Private constructor. Use Try.of(), Success() or Failure() instead."""
        self._value = value
        self._ok = ok

    @classmethod
    def of(cls, fn: Callable[..., T], /, *args: Any, **kwargs: Any) -> Try[T]:
        """Run fn(*args, **kwargs): a return becomes Success, a raised Exception becomes Failure.

        KeyboardInterrupt, SystemExit and other non-Exception errors propagate.
        """
        try:
            return Success(fn(*args, **kwargs))
        except Exception as exc:
            _record_capture(fn, exc)
            return Failure(exc)

    # ─── Type Checking ───────────────────────────────────────────────

    def is_success(self) -> bool:
        return self._ok

    def is_failure(self) -> bool:
        return not self._ok

    def contains(self, other: object) -> bool:
        """True when successful and the value equals other."""
        return self._ok and self._value == other

    # ─── Value Extraction ────────────────────────────────────────────

    @property
    def value(self) -> T:
        """The computed value. On a Failure the held exception is re-raised."""
        if self._ok:
            return self._value  # type: ignore[return-value]
        raise self._value  # type: ignore[misc]

    @property
    def error(self) -> BaseException:
        """The held exception. Raises NotAFailureError on a Success."""
        if not self._ok:
            return self._value  # type: ignore[return-value]
        raise NotAFailureError(f"error accessed on Success({self._value!r})")

    def or_else_get(self, supplier: Callable[[], T]) -> T:
        return self._value if self._ok else supplier()  # type: ignore[return-value]

    def or_else(self, default: T) -> T:
        return self._value if self._ok else default  # type: ignore[return-value]

    def or_else_throw(self, error_supplier: Callable[[], BaseException]) -> T:
        """Value, or raise error_supplier() chained to the held exception."""
        if self._ok:
            return self._value  # type: ignore[return-value]
        raise error_supplier() from self._value  # type: ignore[misc]

    def throw_if_failure(self) -> Try[T]:
        """Re-raise the held exception on a Failure. Returns self on a Success."""
        if not self._ok:
            _record_rethrow(self._value)  # type: ignore[arg-type]
            raise self._value  # type: ignore[misc]
        return self

    def to_pair(self) -> tuple[Option[T], Option[BaseException]]:
        """(value_option, error_option) for destructuring."""
        if self._ok:
            return Option.of(self._value), Nothing  # type: ignore[arg-type]
        return Nothing, Option.of(self._value)  # type: ignore[arg-type]

    def failure_info(self) -> FailureInfo | None:
        """Serializable description of the held exception, None on a Success."""
        if self._ok:
            return None
        return FailureInfo.from_exception(
            self._value, include_traceback=get_settings().try_.include_traceback)  # type: ignore[arg-type]

    # ─── Functor / Monad ─────────────────────────────────────────────

    def flat_map(self, f: Callable[[T], Try[U]]) -> Try[U]:
        """Chain a Try-returning step. Exceptions raised by f are NOT captured."""
        return f(self._value) if self._ok else self  # type: ignore[arg-type,return-value]

    def map(self, f: Callable[[T], U]) -> Try[U]:
        """Apply f to the value. Exceptions raised by f become a Failure."""
        return self.flat_map(lambda v: Try.of(f, v))

    def flatten(self: Try[Try[T]]) -> Try[T]:
        """Try[Try[T]] → Try[T]. A non-nested Try is returned unchanged."""
        if self._ok and isinstance(self._value, Try):
            return self._value
        return self  # type: ignore[return-value]

    # ─── Recovery ────────────────────────────────────────────────────

    def recover_with(self, f: Callable[[BaseException], Try[T]]) -> Try[T]:
        """On Failure, replace with f(error). On Success, pass through."""
        return self if self._ok else f(self._value)  # type: ignore[arg-type]

    def recover(self, f: Callable[[BaseException], T]) -> Try[T]:
        """On Failure, compute a value from the error. Exceptions raised by f are captured."""
        return self.recover_with(lambda e: Try.of(f, e))

    # ─── Side Effects ────────────────────────────────────────────────

    def fold(self, on_success: Callable[[T], Any], on_failure: Callable[[BaseException], Any]) -> Try[T]:
        """Invoke on_success(value) or on_failure(error). Returns self."""
        if self._ok:
            on_success(self._value)  # type: ignore[arg-type]
        else:
            on_failure(self._value)  # type: ignore[arg-type]
        return self

    def if_success(self, f: Callable[[T], Any]) -> Try[T]:
        return self.fold(f, _noop)

    def if_failure(self, f: Callable[[BaseException], Any]) -> Try[T]:
        return self.fold(_noop, f)

    # ─── Conversion ──────────────────────────────────────────────────

    def to_option(self) -> Option[T]:
        """Some(value) on Success (Nothing if the value is None), Nothing on Failure."""
        return Option.of(self._value) if self._ok else Nothing  # type: ignore[arg-type]

    def to_either(self) -> Either[T, BaseException]:
        """Left(value) on Success, Right(error) on Failure.

        Success(None) has no Left form and raises TypeError; use to_option() for it.
        """
        from .either import Left, Right
        if not self._ok:
            return Right(self._value)  # type: ignore[arg-type]
        if self._value is None:
            raise TypeError("Success(None) cannot convert to Either; an Either never holds None")
        return Left(self._value)

    # ─── Dunder Methods ──────────────────────────────────────────────

    __bool__ = lambda self: self._ok  # noqa: E731
    __contains__ = contains
    __hash__ = lambda self: hash((self._ok, self._value))  # noqa: E731
    __repr__ = lambda self: f"{'Success' if self._ok else 'Failure'}({self._value!r})"  # noqa: E731
    __str__ = __repr__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Try):
            return NotImplemented
        return self._ok == other._ok and self._value == other._value

    def __iter__(self) -> Iterator[Option[Any]]:
        """Unpack as (value_option, error_option)."""
        return iter(self.to_pair())


def _noop(_: object) -> None:
    pass


def _record_capture(fn: Callable[..., Any], exc: Exception) -> None:
    try:
        if _log.is_enabled_for(logging.DEBUG) and get_settings().try_.log_captures:
            _log.debug("try.captured", function=getattr(fn, "__qualname__", None) or repr(fn),
                       error_type=type(exc).__qualname__, error=_safe_str(exc))
    except Exception:  # noqa: BLE001
        pass  # logging never turns a capture into a raise


def _record_rethrow(exc: BaseException) -> None:
    try:
        _log.debug("try.rethrow", error_type=type(exc).__qualname__)
    except Exception:  # noqa: BLE001
        pass  # the held exception is what gets raised


def _safe_str(exc: BaseException) -> str:
    try:
        return str(exc)
    except Exception:  # noqa: BLE001
        return f"<unprintable {type(exc).__qualname__}>"


# ═══════════════════════════════════════════════════════════════════════════════
# Constructors
# ═══════════════════════════════════════════════════════════════════════════════


def Success(value: T) -> Try[T]:  # noqa: N802
    """Construct a Success. An exception instance is not a valid value (TypeError)."""
    if isinstance(value, BaseException):
        raise TypeError(f"Success() cannot hold an exception, use Failure(): {value!r}")
    return Try(value, _SUCCESS)


def Failure(error: BaseException) -> Try[Any]:  # noqa: N802
    """Construct a Failure holding error."""
    if not isinstance(error, BaseException):
        raise TypeError(f"Failure() requires an exception instance, got {type(error).__name__}")
    return Try(error, _FAILURE)


def attempt(fn: Callable[P, T]) -> Callable[P, Try[T]]:
    """Decorator: calls to fn return a Try instead of raising.

    Example:
        >>> @attempt
        ... def parse_port(raw: str) -> int:
        ...     return int(raw)
        >>> parse_port("80")
        Success(80)
    """
    @wraps(fn)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Try[T]:
        return Try.of(fn, *args, **kwargs)
    return wrapper


# ═══════════════════════════════════════════════════════════════════════════════
# Collection Operations
# ═══════════════════════════════════════════════════════════════════════════════


def sequence(tries: Iterable[Try[T]]) -> Try[list[T]]:
    """Iterable[Try[T]] → Try[list[T]]. Fail-fast: the first Failure is returned as is."""
    values: list[T] = []
    for t in tries:
        if not t._ok:
            return t  # type: ignore[return-value]
        values.append(t._value)  # type: ignore[arg-type]
    return Try(values, _SUCCESS)


def traverse(items: Iterable[T], f: Callable[[T], U]) -> Try[list[U]]:
    """Apply f to each item through Try.of. Stops at the first raised exception."""
    return sequence(Try.of(f, item) for item in items)
