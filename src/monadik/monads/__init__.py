"""Monadic containers: Option, Either and Try.

Example:
    >>> from monadik.monads import Option, Try
    >>>
    >>> port = (
    ...     Option.of(os.environ.get("PORT"))
    ...     .to_try()
    ...     .map(int)
    ...     .recover(lambda _: 8080)
    ...     .value
    ... )
"""

from .either import Either, Left, Right
from .option import Nothing, Option, Some, from_nullable
from .try_ import Failure, Success, Try, attempt, sequence, traverse

__all__ = [
    # Option
    "Option", "Some", "Nothing", "from_nullable",
    # Either
    "Either", "Left", "Right",
    # Try
    "Try", "Success", "Failure", "attempt",
    # Collection ops
    "sequence", "traverse",
]
