"""Errors raised by illegal container access, and descriptions of captured ones.

- ErrorCode: Classification of container errors
- AbsentValueError: Value read from an empty Option
- NotLeftError/NotRightError/NotAFailureError: Wrong-variant access
- FailureInfo: Serializable description of an exception held by a Try
"""

from .errors import (
    AbsentValueError,
    ErrorCode,
    FailureInfo,
    MonadikError,
    NotAFailureError,
    NotLeftError,
    NotRightError,
    WrongVariantError,
    classify_exception,
)
from .types import JsonDict, JsonValue

__all__ = [
    "ErrorCode", "MonadikError", "AbsentValueError", "WrongVariantError",
    "NotLeftError", "NotRightError", "NotAFailureError", "classify_exception",
    "FailureInfo",
    "JsonDict", "JsonValue",
]
