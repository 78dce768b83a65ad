# Copyright (C) 2023 Oliver Michael Kamperis
# Email: o.m.kamperis@gmail.com
#
# This program is free software: you can redistribute it and/or modify it under
# the terms of the GNU General Public License as published by the Free Software
# Foundation, either version 3 of the License, or any later version.
#
# This program is distributed in the hope that it will be useful, but WITHOUT
# ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS
# FOR A PARTICULAR PURPOSE. See the GNU General Public License for details.
#
# You should have received a copy of the GNU General Public License
# along with this program. If not, see <https://www.gnu.org/licenses/>.

"""Module defining argument parsing utilities."""

from typing import Any

__copyright__ = "Copyright (C) 2023 Oliver Michael Kamperis"
__license__ = "GPL-3.0"

__all__ = (
    "bool_options",
    "optional_bool",
    "optional_int",
    "scalar"
)


def __dir__() -> tuple[str, ...]:
    """Get the names of module attributes."""
    return tuple(sorted(__all__))


def bool_options(default: bool | None = None) -> dict[str, Any]:
    """
    Create the options of a Boolean argument.

    The argument may be given without a value to mean True, or with any
    value accepted by `optional_bool`.

    Parameters
    ----------
    `default: bool | None = None` - The default argument value used when the
    argument is not given.

    Returns
    -------
    `dict[str, Any]` - A dictionary of options for `add_argument()`.
    """
    return {
        "nargs": "?",
        "default": default,
        "const": True,
        "type": optional_bool
    }


def optional_bool(value: str) -> bool | None:
    """
    Optional boolean argument type.

    Return None if the value is an empty string or the string "None",
    otherwise return the input string parsed as a boolean.
    """
    if not value or value == "None":
        return None
    if value.lower() in ["true", "yes", "on"]:
        return True
    if value.lower() in ["false", "no", "off"]:
        return False
    raise ValueError(f"Cannot parse {value} as a boolean.")


def optional_int(value: str) -> int | None:
    """
    Optional integer argument type.

    Return None if the value is an empty string or the string "None", otherwise
    return the input string parsed as an integer.
    """
    if not value or value == "None":
        return None
    return int(value)


def scalar(value: str) -> int | float | str:
    """
    Scalar argument type.

    Return the input string parsed as an integer if possible, otherwise as a
    float if possible, otherwise the input string unchanged.
    """
    try:
        return int(value)
    except ValueError:
        pass
    try:
        return float(value)
    except ValueError:
        return value
