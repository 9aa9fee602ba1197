"""Error taxonomy for monadic containers.

Illegal access to a container (the value of an absent Option, the wrong side
of an Either, the error of a successful Try) raises one of the exceptions
below. Captured exceptions are described by FailureInfo for logging and
serialization.
"""

from __future__ import annotations

import traceback
from enum import StrEnum
from typing import Annotated, Self

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    computed_field,
    field_validator,
)


class ErrorCode(StrEnum):
    """Machine-readable classification of container errors."""
    ABSENT_VALUE = "ABSENT_VALUE"
    WRONG_VARIANT = "WRONG_VARIANT"
    NOT_A_FAILURE = "NOT_A_FAILURE"
    CAPTURED = "CAPTURED"


class MonadikError(Exception):
    """Base class for errors raised by container access."""

    code: ErrorCode = ErrorCode.WRONG_VARIANT
    default_message: str = "illegal container access"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class AbsentValueError(MonadikError, LookupError):
    """Raised when reading the value of an empty Option."""

    code = ErrorCode.ABSENT_VALUE
    default_message = "no value present"


class WrongVariantError(MonadikError, TypeError):
    """Raised when reading a payload the container's variant does not hold."""


class NotLeftError(WrongVariantError):
    default_message = "not an instance of Either.Left"


class NotRightError(WrongVariantError):
    default_message = "not an instance of Either.Right"


class NotAFailureError(WrongVariantError):
    code = ErrorCode.NOT_A_FAILURE
    default_message = "not a failure"


def classify_exception(exc: BaseException) -> ErrorCode:
    """Library errors keep their own code, anything else was captured from user code."""
    return exc.code if isinstance(exc, MonadikError) else ErrorCode.CAPTURED


class FailureInfo(BaseModel):
    """Serializable description of an exception held by a failed Try.

    Attributes:
        error_type: Qualified class name of the exception
        message: str() of the exception
        code: Classification of the exception
        traceback: Formatted traceback, when requested
    """

    model_config = ConfigDict(
        frozen=True,
        str_strip_whitespace=True,
        json_schema_extra={
            "title": "Failure Info",
            "examples": [{
                "error_type": "builtins.ZeroDivisionError",
                "message": "division by zero",
                "code": "CAPTURED",
            }],
        },
    )

    error_type: Annotated[str, Field(min_length=1, description="Qualified exception class name")]
    message: str = Field(default="", description="Exception message")
    code: ErrorCode = Field(default=ErrorCode.CAPTURED, description="Error classification")
    traceback: str | None = Field(default=None, repr=False, description="Formatted traceback")

    @field_validator("message", mode="before")
    @classmethod
    def _ensure_message(cls, v: str | BaseException) -> str:
        return str(v) if isinstance(v, BaseException) else v

    @computed_field
    @property
    def is_library_error(self) -> bool:
        """Whether the exception came from illegal container access rather than user code."""
        return self.code is not ErrorCode.CAPTURED

    @classmethod
    def from_exception(cls, exc: BaseException, *, include_traceback: bool = False) -> Self:
        """Describe exc, optionally with its formatted traceback."""
        kind = type(exc)
        return cls(
            error_type=f"{kind.__module__}.{kind.__qualname__}",
            message=str(exc),
            code=classify_exception(exc),
            traceback="".join(traceback.format_exception(exc)) if include_traceback else None,
        )

    def render(self) -> str:
        """Human-readable one-liner, followed by the traceback if present."""
        head = f"{self.error_type}: {self.message}" if self.message else self.error_type
        return f"{head}\n{self.traceback}" if self.traceback else head

    __str__ = render
