"""monadik - Option, Either and Try containers for Python.

Three immutable containers with map/flat_map/filter/fold chaining and total
conversions between them, plus the same vocabulary for plain nullable
references.

Quick Start:
    >>> from monadik import Option, Try, Left
    >>>
    >>> Option.of(None).map(lambda x: x + 1).or_else(-1)
    -1
    >>> Try.of(lambda: 10 / 0).recover(lambda _: 0)
    Success(0)
    >>> Option.of(1).to_try().to_option()
    Some(1)
    >>> Left(Left(1)).flatten_left()
    Left(1)

Nullable references:
    >>> from monadik import nullable
    >>> nullable.or_else(nullable.map(None, str.upper), "n/a")
    'n/a'

Configuration (environment, MONADIK_ prefix):
    MONADIK_LOG_LEVEL=DEBUG        # show captured exceptions
    MONADIK_LOG_FORMAT=json        # console | json | none
    MONADIK_TRY_INCLUDE_TRACEBACK=true
"""

from . import nullable
from .config import MonadikSettings, clear_settings_cache, get_settings
from .errors import (
    AbsentValueError,
    ErrorCode,
    FailureInfo,
    MonadikError,
    NotAFailureError,
    NotLeftError,
    NotRightError,
    WrongVariantError,
)
from .monads import (
    Either,
    Failure,
    Left,
    Nothing,
    Option,
    Right,
    Some,
    Success,
    Try,
    attempt,
    from_nullable,
    sequence,
    traverse,
)
from .observability import configure_logging, get_logger

__version__ = "0.1.0"

__all__ = [
    # Containers
    "Option", "Some", "Nothing", "from_nullable",
    "Either", "Left", "Right",
    "Try", "Success", "Failure", "attempt", "sequence", "traverse",
    # Nullable bridge
    "nullable",
    # Errors
    "ErrorCode", "MonadikError", "AbsentValueError", "WrongVariantError",
    "NotLeftError", "NotRightError", "NotAFailureError", "FailureInfo",
    # Config & logging
    "MonadikSettings", "get_settings", "clear_settings_cache",
    "configure_logging", "get_logger",
]
