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

"""Module containing mapping structures."""

import collections.abc
from typing import (Any, Callable, Generic, Hashable, ItemsView, Iterator,
                    KeysView, MutableMapping, TypeVar, ValuesView)

__copyright__ = "Copyright (C) 2023 Oliver Michael Kamperis"
__license__ = "GPL-3.0"

__all__ = (
    "ForwardingMap",
)


def __dir__() -> tuple[str, ...]:
    """Get the names of module attributes."""
    return __all__


_KT = TypeVar("_KT", bound=Hashable)
_VT = TypeVar("_VT")


class ForwardingMap(collections.abc.MutableMapping, Generic[_KT, _VT]):
    """
    Class defining a mapping that forwards all operations to a source mapping.

    The forwarding map itself adds no behaviour, it is intended as a base
    class for mappings that override some operations of the source mapping,
    possibly transforming data along the way or providing additional
    functionality.

    The compute and merge helpers follow the convention that a key mapped to
    None is treated as absent, and that a helper producing None removes the
    key.

    Example Usage
    -------------
    ```
    >>> from sortkit.datastructures.mappings import ForwardingMap
    >>> class UpperMap(ForwardingMap[str, int]):
    ...     def __setitem__(self, key, value):
    ...         super().__setitem__(key.upper(), value)
    >>> source = {}
    >>> upper = UpperMap(source)
    >>> upper["a"] = 1
    >>> source
    {'A': 1}
    ```
    """

    __slots__ = {
        "__source": "The mapping that all operations are forwarded to."
    }

    def __init__(self, source: MutableMapping[_KT, _VT], /) -> None:
        """
        Create a new forwarding map over the given source mapping.

        Raises
        ------
        `TypeError` - If the source is None.
        """
        if source is None:
            raise TypeError("Source mapping must not be None.")
        self.__source: MutableMapping[_KT, _VT] = source

    def __repr__(self) -> str:
        """Get an instantiable string representation of the map."""
        return f"{self.__class__.__name__}({self.__source!r})"

    @property
    def source(self) -> MutableMapping[_KT, _VT]:
        """Get the source mapping."""
        return self.__source

    def __getitem__(self, key: _KT, /) -> _VT:
        return self.__source[key]

    def __setitem__(self, key: _KT, value: _VT, /) -> None:
        self.__source[key] = value

    def __delitem__(self, key: _KT, /) -> None:
        del self.__source[key]

    def __iter__(self) -> Iterator[_KT]:
        return iter(self.__source)

    def __len__(self) -> int:
        return len(self.__source)

    def __contains__(self, key: object, /) -> bool:
        return key in self.__source

    def get(self, key: _KT, default: Any = None, /) -> Any:
        return self.__source.get(key, default)

    def keys(self) -> KeysView[_KT]:
        return self.__source.keys()

    def values(self) -> ValuesView[_VT]:
        return self.__source.values()

    def items(self) -> ItemsView[_KT, _VT]:
        return self.__source.items()

    def pop(self, key: _KT, /, *default: Any) -> Any:
        return self.__source.pop(key, *default)

    def popitem(self) -> tuple[_KT, _VT]:
        return self.__source.popitem()

    def setdefault(self, key: _KT, default: Any = None, /) -> Any:
        return self.__source.setdefault(key, default)

    def update(self, *args: Any, **kwargs: _VT) -> None:
        self.__source.update(*args, **kwargs)

    def clear(self) -> None:
        self.__source.clear()

    def contains_value(self, value: object, /) -> bool:
        """Return whether any key maps to the given value."""
        return value in self.__source.values()

    def put_if_absent(self, key: _KT, value: _VT, /) -> _VT | None:
        """
        Map the key to the value if it is absent or mapped to None.

        Returns
        -------
        `VT | None` - The previous value of the key, or None if it was absent.
        """
        current = self.__source.get(key)
        if current is None:
            self.__source[key] = value
        return current

    def replace(self, key: _KT, value: _VT, /) -> _VT | None:
        """
        Map the key to the value only if it is already present.

        Returns
        -------
        `VT | None` - The previous value of the key, or None if it was absent.
        """
        if key in self.__source:
            current = self.__source[key]
            self.__source[key] = value
            return current
        return None

    def replace_if(self, key: _KT, old_value: _VT, new_value: _VT, /) -> bool:
        """Map the key to the new value only if it maps to the old value."""
        if key in self.__source and self.__source[key] == old_value:
            self.__source[key] = new_value
            return True
        return False

    def remove_if(self, key: _KT, value: _VT, /) -> bool:
        """Remove the key only if it maps to the given value."""
        if key in self.__source and self.__source[key] == value:
            del self.__source[key]
            return True
        return False

    def compute_if_absent(
        self,
        key: _KT,
        mapping_function: Callable[[_KT], _VT | None],
        /
    ) -> _VT | None:
        """
        Compute a value for the key if it is absent or mapped to None.

        If the function returns None, no mapping is recorded.

        Returns
        -------
        `VT | None` - The current (existing or computed) value of the key.
        """
        current = self.__source.get(key)
        if current is None:
            value = mapping_function(key)
            if value is not None:
                self.__source[key] = value
            return value
        return current

    def compute_if_present(
        self,
        key: _KT,
        remapping_function: Callable[[_KT, _VT], _VT | None],
        /
    ) -> _VT | None:
        """
        Compute a new value for the key if it is mapped to a non-None value.

        If the function returns None, the key is removed.
        """
        current = self.__source.get(key)
        if current is None:
            return None
        value = remapping_function(key, current)
        if value is None:
            del self.__source[key]
        else:
            self.__source[key] = value
        return value

    def compute(
        self,
        key: _KT,
        remapping_function: Callable[[_KT, _VT | None], _VT | None],
        /
    ) -> _VT | None:
        """
        Compute a new value for the key from its current value (or None).

        If the function returns None, the key is removed if present.
        """
        value = remapping_function(key, self.__source.get(key))
        if value is None:
            self.__source.pop(key, None)
        else:
            self.__source[key] = value
        return value

    def merge(
        self,
        key: _KT,
        value: _VT,
        remapping_function: Callable[[_VT, _VT], _VT | None],
        /
    ) -> _VT | None:
        """
        Merge the value into the current value of the key.

        If the key is absent or mapped to None, it is mapped to the value.
        Otherwise it is mapped to the result of the function applied to the
        current value and the given value, and removed if that is None.

        Raises
        ------
        `TypeError` - If the value is None.
        """
        if value is None:
            raise TypeError("Merge value must not be None.")
        current = self.__source.get(key)
        if current is None:
            new_value = value
        else:
            new_value = remapping_function(current, value)
        if new_value is None:
            self.__source.pop(key, None)
        else:
            self.__source[key] = new_value
        return new_value

    def for_each(self, action: Callable[[_KT, _VT], None], /) -> None:
        """Perform the action on every key and value of the map."""
        for key, value in list(self.__source.items()):
            action(key, value)

    def replace_all(self, function: Callable[[_KT, _VT], _VT], /) -> None:
        """Map every key to the result of the function on its current value."""
        for key, value in list(self.__source.items()):
            self.__source[key] = function(key, value)
