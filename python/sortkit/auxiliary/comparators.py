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

"""
Module defining three-way comparison functions.

A comparator is any callable taking two values and returning a negative
integer, zero, or a positive integer as the first value is less than, equal
to, or greater than the second. Comparators are used by the sorted data
structures of `sortkit.datastructures` to define their ordering.
"""

from typing import Any, Final

from sortkit.auxiliary.typingutils import Comparator, SupportsRichComparison

__copyright__ = "Copyright (C) 2023 Oliver Michael Kamperis"
__license__ = "GPL-3.0"

__all__ = (
    "natural_order",
    "reverse_order",
    "NATURAL",
    "REVERSE"
)


def __dir__() -> tuple[str, ...]:
    """Get the names of module attributes."""
    return tuple(sorted(__all__))


def natural_order(
    first: SupportsRichComparison,
    second: SupportsRichComparison,
    /
) -> int:
    """
    Compare two values by their natural ordering.

    The natural ordering is given by the values' rich comparison methods
    `__lt__` and `__gt__`, values that are neither less than nor greater than
    each other are considered equal.

    Returns
    -------
    `int` - `-1` if `first < second`, `1` if `first > second`, otherwise `0`.
    """
    if first < second:
        return -1
    if first > second:
        return 1
    return 0


def reverse_order(comparator: Comparator, /) -> Comparator:
    """
    Get a comparator that imposes the reverse ordering of the given one.

    Raises
    ------
    `TypeError` - If the comparator is not callable.
    """
    if not callable(comparator):
        raise TypeError(f"Comparator must be callable. Got; {comparator!r}.")

    def _reversed(first: Any, second: Any, /) -> int:
        return comparator(second, first)

    _reversed.__name__ = f"reversed_{getattr(comparator, '__name__', 'order')}"
    return _reversed


NATURAL: Final[Comparator] = natural_order
REVERSE: Final[Comparator] = reverse_order(NATURAL)
