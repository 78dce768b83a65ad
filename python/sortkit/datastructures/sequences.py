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
Module containing growable and sorted sequence data structures.

These data structures are for algorithmic use. They are not thread-safe, and
not intended to be shared between threads without external locking around
every mutating operation.
"""

import collections.abc
import functools
import logging
from typing import Any, Generic, Iterable, Iterator, TypeVar, overload

import numpy as np

from sortkit.auxiliary.comparators import natural_order
from sortkit.auxiliary.typingutils import Comparator
from sortkit.datastructures._datastructure_errors import (
    SortkitUnsupportedOperationError
)

__copyright__ = "Copyright (C) 2023 Oliver Michael Kamperis"
__license__ = "GPL-3.0"

__all__ = (
    "GrowableBuffer",
    "SortedList"
)


def __dir__() -> tuple[str, ...]:
    """Get the names of module attributes."""
    return tuple(sorted(__all__))


LT = TypeVar("LT")


def _check_size(name: str, value: int) -> None:
    """Check that a size argument is a non-negative integer."""
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an integer. Got; {value!r}.")
    if value < 0:
        raise ValueError(f"{name} must be non-negative. Got; {value}.")


class GrowableBuffer(collections.abc.Sequence, Generic[LT]):
    """
    A list structure that preallocates memory.

    The buffer is backed by a numpy object array whose length is the
    capacity of the buffer. Only the first `len(buffer)` slots hold valid
    items, the remaining slots are unused and hold None. When the buffer is
    full, the capacity grows by a fixed increment, or doubles if the
    increment is zero. Inserting and deleting shift the trailing items with
    a single slice assignment.

    The buffer has no ordering constraints, it is the storage used by
    `SortedList`.
    """

    __slots__ = {
        "__array": "The backing array, its length is the capacity.",
        "__length": "The number of valid items in the buffer.",
        "__increment": "The capacity increment, the capacity doubles if zero."
    }

    __BUFFER_LOGGER = logging.getLogger("SortkitBuffer")

    def __init__(self, capacity: int = 10, increment: int = 0) -> None:
        """
        Create a new empty growable buffer.

        Parameters
        ----------
        `capacity: int = 10` - The initial number of preallocated slots.

        `increment: int = 0` - The number of slots to add when the buffer is
        full. If zero, the capacity doubles instead.

        Raises
        ------
        `TypeError` - If either argument is not an integer.

        `ValueError` - If either argument is negative.
        """
        _check_size("capacity", capacity)
        _check_size("increment", increment)
        self.__array: np.ndarray = np.empty(capacity, dtype=object)
        self.__length: int = 0
        self.__increment: int = increment

    def __repr__(self) -> str:
        """Get a string representation of the buffer."""
        return (f"{self.__class__.__name__}({list(self)!r}, "
                f"capacity={self.capacity})")

    @property
    def capacity(self) -> int:
        """Get the number of allocated slots in the buffer."""
        return len(self.__array)

    @property
    def increment(self) -> int:
        """Get the capacity increment of the buffer."""
        return self.__increment

    def __len__(self) -> int:
        """Get the number of valid items in the buffer."""
        return self.__length

    def __normalise_index(self, index: int) -> int:
        if index < 0:
            index += self.__length
        if index < 0 or index >= self.__length:
            raise IndexError("Index out of range")
        return index

    @overload
    def __getitem__(self, index: int, /) -> LT:
        ...

    @overload
    def __getitem__(self, index: slice, /) -> list[LT]:
        ...

    def __getitem__(self, index: int | slice, /) -> LT | list[LT]:
        """Get the item or slice of items at the given index."""
        if isinstance(index, slice):
            return list(self.__array[:self.__length][index])
        return self.__array[self.__normalise_index(index)]

    def __iter__(self) -> Iterator[LT]:
        """
        Iterate over the items in the buffer.

        The iterator is over a snapshot of the buffer, so the buffer may be
        modified during iteration.
        """
        return iter(list(self.__array[:self.__length]))

    def ensure_capacity(self, minimum: int, /) -> None:
        """
        Grow the buffer so that it has at least the given capacity.

        The new array is allocated before any items are moved, so the buffer
        is left unchanged if the allocation fails.
        """
        capacity = len(self.__array)
        if minimum <= capacity:
            return
        if self.__increment > 0:
            new_capacity = capacity + self.__increment
        else:
            new_capacity = capacity * 2
        new_capacity = max(new_capacity, minimum, 1)
        array = np.empty(new_capacity, dtype=object)
        array[:self.__length] = self.__array[:self.__length]
        self.__array = array
        self.__BUFFER_LOGGER.debug(
            "Grew buffer capacity from %s to %s.", capacity, new_capacity
        )

    def append(self, value: LT, /) -> None:
        """Append the given value to the end of the buffer."""
        self.ensure_capacity(self.__length + 1)
        self.__array[self.__length] = value
        self.__length += 1

    def insert(self, index: int, value: LT, /) -> None:
        """
        Insert the given value at the given index.

        All items at or after the index are shifted one slot to the right.

        Raises
        ------
        `IndexError` - If the index is not in the range `[0, len(buffer)]`.
        """
        if index < 0 or index > self.__length:
            raise IndexError("Index out of range")
        self.ensure_capacity(self.__length + 1)
        if index < self.__length:
            self.__array[index + 1:self.__length + 1] = \
                self.__array[index:self.__length]
        self.__array[index] = value
        self.__length += 1

    def delete(self, index: int, /) -> LT:
        """
        Delete and return the item at the given index.

        All items after the index are shifted one slot to the left.
        """
        index = self.__normalise_index(index)
        value = self.__array[index]
        self.__array[index:self.__length - 1] = \
            self.__array[index + 1:self.__length]
        self.__length -= 1
        self.__array[self.__length] = None
        return value

    def extend_from(
        self,
        other: "GrowableBuffer[LT]",
        start: int,
        stop: int,
        /
    ) -> None:
        """
        Append the items `other[start:stop]` to the end of the buffer.

        Raises
        ------
        `ValueError` - If the range is not within the other buffer.
        """
        if not 0 <= start <= stop <= len(other):
            raise ValueError(
                f"Range [{start}, {stop}) is not within a buffer of "
                f"length {len(other)}."
            )
        count = stop - start
        self.ensure_capacity(self.__length + count)
        self.__array[self.__length:self.__length + count] = \
            other.__array[start:stop]
        self.__length += count

    def truncate(self, length: int, /) -> None:
        """Discard all items at or after the given length."""
        if not 0 <= length <= self.__length:
            raise ValueError(
                f"Length must be in [0, {self.__length}]. Got; {length}."
            )
        self.__array[length:self.__length] = None
        self.__length = length

    def clear(self) -> None:
        """Discard all items in the buffer, keeping its capacity."""
        self.truncate(0)

    def trim_to_size(self) -> None:
        """Reduce the capacity of the buffer to its length."""
        capacity = len(self.__array)
        if capacity > self.__length:
            self.__array = self.__array[:self.__length].copy()
            self.__BUFFER_LOGGER.debug(
                "Trimmed buffer capacity from %s to %s.",
                capacity, self.__length
            )

    # pylint: disable=W0212,W0238
    def copy(self) -> "GrowableBuffer[LT]":
        """Return a shallow copy of the buffer with the same capacity."""
        buffer: "GrowableBuffer[LT]" = self.__class__(
            self.capacity, self.__increment
        )
        buffer.__array[:self.__length] = self.__array[:self.__length]
        buffer.__length = self.__length
        return buffer


def _binary_search(
    sequence: collections.abc.Sequence,
    value: Any,
    low: int,
    high: int,
    compare: Comparator
) -> int:
    """
    Search the sorted range `sequence[low:high]` for an item equal to value.

    Returns the index of some equal item, or `-(insertion_point + 1)` if
    there is none.
    """
    while low < high:
        mid = (low + high) // 2
        result = compare(sequence[mid], value)
        if result < 0:
            low = mid + 1
        elif result > 0:
            high = mid
        else:
            return mid
    return -(low + 1)


def _lower_bound(
    sequence: collections.abc.Sequence,
    value: Any,
    low: int,
    high: int,
    compare: Comparator
) -> int:
    """Get the first index in `[low, high)` not less than the value."""
    while low < high:
        mid = (low + high) // 2
        if compare(sequence[mid], value) < 0:
            low = mid + 1
        else:
            high = mid
    return low


def _upper_bound(
    sequence: collections.abc.Sequence,
    value: Any,
    low: int,
    high: int,
    compare: Comparator
) -> int:
    """Get the first index in `[low, high)` greater than the value."""
    while low < high:
        mid = (low + high) // 2
        if compare(sequence[mid], value) <= 0:
            low = mid + 1
        else:
            high = mid
    return low


ST = TypeVar("ST")


class SortedList(collections.abc.Sequence, Generic[ST]):
    """
    A self-sorting list structure.

    A sorted list keeps its items in ascending order at all times, according
    to a comparator given on construction, or the natural ordering of the
    items otherwise. Equal items are kept adjacent to one another, but the
    relative order of equal items is not defined.

    Insertion finds its position by binary search, and membership tests are
    binary searches, so both take logarithmic time in the number of
    comparisons. The list cannot be modified at a caller-chosen position;
    item assignment raises `SortkitUnsupportedOperationError`.

    Instances are not thread-safe.
    """

    __slots__ = {
        "__buffer": "The growable buffer holding the items in sorted order.",
        "__compare": "The comparator defining the order of the items."
    }

    __LIST_LOGGER = logging.getLogger("SortkitSortedList")

    @overload
    def __init__(self, *items: ST) -> None:
        """
        Create a sorted list from a series of items.

        The order of the items is defined by the natural ordering of the items
        according to their rich comparison methods.
        """
        ...

    @overload
    def __init__(
        self,
        *items: ST,
        comparator: Comparator[ST] | None = None,
        capacity: int = 10,
        increment: int = 0
    ) -> None:
        """
        Create a sorted list from a series of items and a comparator.

        The order of the items is defined by the comparator. The capacity and
        increment configure the growth of the underlying buffer, see
        `GrowableBuffer`.
        """
        ...

    def __init__(
        self,
        *items: ST,
        comparator: Comparator[ST] | None = None,
        capacity: int = 10,
        increment: int = 0
    ) -> None:
        """Create a sorted list of items."""
        if comparator is None:
            comparator = natural_order
        elif not callable(comparator):
            raise TypeError(
                f"Comparator must be callable. Got; {comparator!r}."
            )
        self.__compare: Comparator[ST] = comparator
        self.__buffer: GrowableBuffer[ST] = GrowableBuffer(capacity, increment)
        self.__buffer.ensure_capacity(len(items))
        for item in items:
            self.add(item)

    @classmethod
    def from_iterable(
        cls,
        iterable: Iterable[ST],
        /, *,
        comparator: Comparator[ST] | None = None,
        capacity: int = 10,
        increment: int = 0
    ) -> "SortedList[ST]":
        """
        Create a sorted list from an unordered iterable.

        Each item is inserted one at a time.
        """
        return cls(
            *iterable,
            comparator=comparator,
            capacity=capacity,
            increment=increment
        )

    # pylint: disable=W0212,W0238
    def copy(self) -> "SortedList[ST]":
        """
        Return a shallow copy of the list.

        The copy has its own buffer and shares the comparator, modifying
        either list does not affect the other.
        """
        cls = self.__class__
        sorted_list: "SortedList[ST]" = cls.__new__(cls)
        sorted_list.__compare = self.__compare
        sorted_list.__buffer = self.__buffer.copy()
        return sorted_list

    def __copy__(self) -> "SortedList[ST]":
        return self.copy()

    def __str__(self) -> str:
        """Return a string representation of the list."""
        return f"Sorted List with {len(self)} items"

    def __repr__(self) -> str:
        """Return an instantiable string representation of the list."""
        items = ", ".join(repr(item) for item in self)
        return f"{self.__class__.__name__}({items})"

    def __eq__(self, other: object) -> bool:
        """Return whether another sorted list holds equal items in order."""
        if not isinstance(other, SortedList):
            return NotImplemented
        return list(self) == list(other)

    @property
    def comparator(self) -> Comparator[ST]:
        """Get the comparator defining the order of the list."""
        return self.__compare

    @property
    def capacity(self) -> int:
        """Get the number of allocated slots in the underlying buffer."""
        return self.__buffer.capacity

    def __len__(self) -> int:
        """Return the number of items in the list."""
        return len(self.__buffer)

    @overload
    def __getitem__(self, index: int, /) -> ST:
        ...

    @overload
    def __getitem__(self, index: slice, /) -> list[ST]:
        ...

    def __getitem__(self, index: int | slice, /) -> ST | list[ST]:
        """Get the item or slice of items at the given index."""
        return self.__buffer[index]

    def __iter__(self) -> Iterator[ST]:
        """Iterate over the items in the list in sorted order."""
        return iter(self.__buffer)

    def __contains__(self, value: object) -> bool:
        """Return whether an item equal to the value is in the list."""
        return self.index_of(value) >= 0

    def __setitem__(self, index: int | slice, value: Any) -> None:
        """Item assignment is not supported, use `add()` instead."""
        raise SortkitUnsupportedOperationError(
            "Sorted list does not support item assignment."
        )

    def set_at(self, index: int, item: ST, /) -> None:
        """Item assignment is not supported, use `add()` instead."""
        raise SortkitUnsupportedOperationError(
            "Sorted list does not support item assignment."
        )

    def add(self, item: ST, /) -> bool:
        """
        Add an item to the list in its sorted position.

        The item is placed before any items equal to it.

        Returns
        -------
        `bool` - Always True.
        """
        index = _lower_bound(
            self.__buffer, item, 0, len(self.__buffer), self.__compare
        )
        self.__buffer.insert(index, item)
        return True

    def add_all(self, iterable: Iterable[ST], /) -> bool:
        """
        Add all items of an iterable to the list.

        The iterable does not need to be sorted. The underlying buffer is
        grown once to fit all the items before any are added.

        Returns
        -------
        `bool` - False if the iterable was empty and the list is unchanged,
        True otherwise.
        """
        if not isinstance(iterable, collections.abc.Sized):
            iterable = list(iterable)
        if len(iterable) == 0:
            return False
        self.__buffer.ensure_capacity(len(self.__buffer) + len(iterable))
        for item in iterable:
            self.add(item)
        return True

    def insert(self, index: int, item: ST, /) -> None:
        """
        Add an item to the list in its sorted position.

        The index is ignored, since inserting at an arbitrary index would
        break the order of the list. This is equivalent to `add(item)`.
        """
        self.add(item)

    def add_all_at(self, index: int, iterable: Iterable[ST], /) -> None:
        """Positional bulk insertion is not supported, use `add_all()`."""
        raise SortkitUnsupportedOperationError(
            "Sorted list does not support positional insertion."
        )

    def index_of(self, value: Any, start: int = 0, /) -> int:
        """
        Search for an item equal to the value at or after the start index.

        Parameters
        ----------
        `value: Any` - The value to search for.

        `start: int = 0` - The index to start searching from. Negative
        indices count from the end of the list.

        Returns
        -------
        `int` - The index of some item equal to the value, not necessarily
        the first, or `-(insertion_point + 1)` if there is none.
        """
        length = len(self.__buffer)
        if start < 0:
            start = max(start + length, 0)
        start = min(start, length)
        return _binary_search(
            self.__buffer, value, start, length, self.__compare
        )

    def index(
        self,
        value: Any,
        start: int = 0,
        stop: int | None = None
    ) -> int:
        """
        Return the first index of an item equal to the value.

        Raises
        ------
        `ValueError` - If there is no equal item in `[start, stop)`.
        """
        length = len(self.__buffer)
        if stop is None:
            stop = length
        if start < 0:
            start = max(start + length, 0)
        if stop < 0:
            stop += length
        stop = min(stop, length)
        index = _lower_bound(self.__buffer, value, start, stop, self.__compare)
        if index < stop and self.__compare(self.__buffer[index], value) == 0:
            return index
        raise ValueError(f"{value!r} is not in sorted list")

    def count(self, value: Any) -> int:
        """Return the number of items equal to the value."""
        length = len(self.__buffer)
        lower = _lower_bound(self.__buffer, value, 0, length, self.__compare)
        upper = _upper_bound(
            self.__buffer, value, lower, length, self.__compare
        )
        return upper - lower

    def contains_all(self, iterable: Iterable[Any], /) -> bool:
        """
        Return whether an equal item is in the list for every given value.

        If the iterable is a sorted list with the same comparator, each
        search starts from the index found by the previous one.
        """
        if (isinstance(iterable, SortedList)
                and iterable.comparator is self.__compare):
            index = 0
            for value in iterable:
                index = self.index_of(value, index)
                if index < 0:
                    return False
            return True
        return all(value in self for value in iterable)

    def retain_all(self, iterable: Iterable[Any], /) -> bool:
        """
        Remove all items that are not equal to any of the given values.

        The values are sorted once, then the smaller of the values and the
        list is swept in order, binary searching each of its items in the
        unswept part of the other. When sweeping the values, every item equal
        to a found value is retained.

        Returns
        -------
        `bool` - Whether the list changed.
        """
        compare = self.__compare
        candidates: list[Any] = sorted(
            iterable, key=functools.cmp_to_key(compare)
        )
        buffer = self.__buffer
        length = len(buffer)
        retained: GrowableBuffer[ST] = GrowableBuffer(length, buffer.increment)

        lower: int = 0
        if len(candidates) < length:
            for candidate in candidates:
                index = _binary_search(
                    buffer, candidate, lower, length, compare
                )
                if index < 0:
                    lower = -(index + 1)
                    continue
                start = index
                while (start > lower
                       and compare(buffer[start - 1], candidate) == 0):
                    start -= 1
                stop = index + 1
                while stop < length and compare(buffer[stop], candidate) == 0:
                    stop += 1
                retained.extend_from(buffer, start, stop)
                lower = stop
        else:
            for item in buffer:
                index = _binary_search(
                    candidates, item, lower, len(candidates), compare
                )
                if index < 0:
                    lower = -(index + 1)
                    continue
                retained.append(item)
                lower = index

        self.__LIST_LOGGER.debug(
            "Retained %s of %s items against %s values.",
            len(retained), length, len(candidates)
        )
        self.__buffer = retained
        return len(retained) != length

    def remove(self, value: Any, /) -> None:
        """
        Remove an item equal to the value from the list.

        Raises
        ------
        `ValueError` - If there is no equal item.
        """
        self.__buffer.delete(self.index(value))

    def pop(self, index: int = -1, /) -> ST:
        """
        Remove and return the item at the given index.

        Raises
        ------
        `IndexError` - If the list is empty or the index is out of range.
        """
        if not self.__buffer:
            raise IndexError("Pop from empty sorted list.")
        return self.__buffer.delete(index)

    def clear(self) -> None:
        """Remove all items from the list."""
        self.__buffer.clear()

    def ensure_capacity(self, minimum: int, /) -> None:
        """Grow the underlying buffer to at least the given capacity."""
        self.__buffer.ensure_capacity(minimum)

    def trim_to_size(self) -> None:
        """Reduce the capacity of the underlying buffer to the list length."""
        self.__buffer.trim_to_size()
