###############################################################################
# Copyright (C) 2023 Oliver Michael Kamperis
# Email: olliekampo@gmail.com
#
# This program is free software: you can redistribute it and/or modify it under
# the terms of the GNU General Public License as published by the Free Software
# Foundation, either version 3 of the License, or any later version.
#
# This program is distributed in the hope that it will be useful, but WITHOUT
# ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS
# FOR A PARTICULAR PURPOSE. See the GNU General Public License for details.
#
# You should have received a copy of the GNU General Public License along with
# this program. If not, see <https://www.gnu.org/licenses/>.

"""Module defining additional higher-order functions."""

import functools
from typing import Any, Callable, NoReturn, TypeVar

__copyright__ = "Copyright (C) 2023 Oliver Michael Kamperis"
__license__ = "GPL-3.0"

__all__ = (
    "rethrow",
    "rethrowing",
    "and_then"
)


def __dir__() -> tuple[str, ...]:
    """Get the names of module attributes."""
    return tuple(sorted(__all__))


_AT = TypeVar("_AT")
_RT = TypeVar("_RT")


def rethrow(error: BaseException | type[BaseException], /) -> NoReturn:
    """
    Raise the given exception.

    If an exception type is given instead of an instance, a new instance is
    created with no arguments and raised.
    """
    if isinstance(error, type):
        raise error()
    raise error


def rethrowing(
    function: Callable[[_AT], _RT],
    /, *,
    wrap: Callable[[str], BaseException] | None = None
) -> Callable[[_AT], _RT]:
    """
    Adapt a fallible unary function into a plain unary function.

    Parameters
    ----------
    `function: Callable[[AT], RT]` - The function to adapt, it may raise any
    exception.

    `wrap: Callable[[str], BaseException] | None = None` - An exception type
    (or factory) to convert failures into. The original exception is chained
    as the cause. If not given or None, failures are re-raised unchanged.

    Returns
    -------
    `Callable[[AT], RT]` - The adapted function.

    Example Usage
    -------------
    ```
    >>> parse = rethrowing(int, wrap=RuntimeError)
    >>> list(map(parse, ["1", "2"]))
    [1, 2]
    >>> parse("x")
    Traceback (most recent call last):
        ...
    RuntimeError: invalid literal for int() with base 10: 'x'
    ```
    """
    if not callable(function):
        raise TypeError(f"Function must be callable. Got; {function!r}.")

    @functools.wraps(function)
    def wrapper(argument: _AT, /) -> _RT:
        try:
            return function(argument)
        except Exception as error:
            if wrap is None:
                rethrow(error)
            raise wrap(str(error)) from error

    return wrapper


def and_then(
    first: Callable[[Any, Any], None],
    after: Callable[[Any, Any], None],
    /
) -> Callable[[Any, Any], None]:
    """
    Compose two operations taking two arguments and returning no result.

    The composed operation performs `first` followed by `after` on the same
    arguments. If `first` raises an exception, it is relayed to the caller
    and `after` is not performed.

    Raises
    ------
    `TypeError` - If either operation is None or not callable.
    """
    for operation in (first, after):
        if not callable(operation):
            raise TypeError(
                f"Operation must be callable. Got; {operation!r}."
            )

    def composed(first_arg: Any, second_arg: Any, /) -> None:
        first(first_arg, second_arg)
        after(first_arg, second_arg)

    return composed
