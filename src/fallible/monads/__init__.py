"""Container types: Result, Option, Either and Try.

Each is an immutable two-variant sum type with map / and_then (flat_map)
and, where it makes sense, filter. All obey the monad laws, which is what
lets fallible.query desugar chained bindings predictably.

Example:
    >>> from fallible.monads import Ok, Err, Some, Right, Try
    >>> Ok(10).and_then(lambda x: Ok(x // 2) if x else Err("zero"))
    Ok(5)
    >>> Some(3).filter(lambda x: x > 1).map(str)
    Some('3')
"""

from .either import Either, Left, Right
from .option import NOTHING, Nothing, Option, Some
from .result import Err, Ok, Result
from .try_ import Failure, Success, Try

__all__ = [
    # Result
    "Result", "Ok", "Err",
    # Option
    "Option", "Some", "Nothing", "NOTHING",
    # Either
    "Either", "Left", "Right",
    # Try
    "Try", "Success", "Failure",
]
