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
Build a sorted list on the command line.

Example Usage
-------------
```
$ python -m sortkit 5 1 3 1 4 --retain 1 4 --contains 1 2
[1, 1, 4]
1: True
2: False
```

Options may also be read from a TOML file given with `--config`, from a
table named `sortkit`, for example:
```
[sortkit]
reverse = true
capacity = 64
increment = 16
```
Options given on the command line take precedence over the file.
"""

import argparse
import logging
import sys
import tomllib
from typing import Any, Final, Sequence

from sortkit.auxiliary.argparseutils import bool_options, optional_int, scalar
from sortkit.auxiliary.comparators import NATURAL, REVERSE
from sortkit.datastructures.sequences import SortedList

__copyright__ = "Copyright (C) 2023 Oliver Michael Kamperis"
__license__ = "GPL-3.0"
__version__ = "1.0.0"

__all__ = ()


def __dir__() -> tuple[str, ...]:
    """Get the names of module attributes."""
    return __all__


_CONFIG_TABLE: Final[str] = "sortkit"
_CONFIG_TYPES: Final[dict[str, type]] = {
    "reverse": bool,
    "capacity": int,
    "increment": int
}
_DEFAULT_CAPACITY: Final[int] = 10
_DEFAULT_INCREMENT: Final[int] = 0

_CLI_LOGGER = logging.getLogger("SortkitCli")


def _load_config(path: str) -> dict[str, Any]:
    """
    Load the options table from a TOML configuration file.

    Raises
    ------
    `ValueError` - If the table contains unknown keys or values of the wrong
    type.
    """
    with open(path, "rb") as file:
        config = tomllib.load(file).get(_CONFIG_TABLE, {})
    for key, value in config.items():
        if key not in _CONFIG_TYPES:
            raise ValueError(
                f"Unknown option '{key}'. "
                f"Allowed options are: {list(_CONFIG_TYPES)}."
            )
        if type(value) is not _CONFIG_TYPES[key]:
            raise ValueError(
                f"Option '{key}' must be of type "
                f"{_CONFIG_TYPES[key].__name__}. Got; {value!r}."
            )
    return config


def _build_parser() -> argparse.ArgumentParser:
    """Build the command line argument parser."""
    parser = argparse.ArgumentParser(
        prog="sortkit",
        description="Insert items into a sorted list and query it."
    )
    parser.add_argument(
        "items",
        nargs="*",
        type=scalar,
        help="The items to insert, in any order."
    )
    parser.add_argument(
        "-r", "--retain",
        nargs="*",
        type=scalar,
        default=None,
        help="Retain only the items equal to one of these values."
    )
    parser.add_argument(
        "-c", "--contains",
        nargs="*",
        type=scalar,
        default=[],
        help="Report whether each of these values is in the list."
    )
    parser.add_argument(
        "--reverse",
        help="Sort in descending order.",
        **bool_options(default=None)
    )
    parser.add_argument(
        "--capacity",
        type=optional_int,
        default=None,
        help="The initial capacity of the list."
    )
    parser.add_argument(
        "--increment",
        type=optional_int,
        default=None,
        help="The capacity increment of the list, doubles if zero."
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="A TOML file of options, in a table named 'sortkit'."
    )
    parser.add_argument(
        "--debug",
        help="Log debug messages.",
        **bool_options(default=False)
    )
    return parser


def _main(argv: Sequence[str] | None = None) -> int:
    """Build a sorted list on the command line."""
    parser = _build_parser()
    args: argparse.Namespace = parser.parse_args(argv)

    if args.debug:
        logging.basicConfig(level=logging.DEBUG)

    config: dict[str, Any] = {}
    if args.config is not None:
        try:
            config = _load_config(args.config)
        except (OSError, tomllib.TOMLDecodeError, ValueError) as error:
            parser.error(f"Cannot load configuration '{args.config}': {error}")
        _CLI_LOGGER.debug("Loaded configuration %s.", config)

    reverse: bool = config.get("reverse", False)
    if args.reverse is not None:
        reverse = args.reverse
    capacity: int = config.get("capacity", _DEFAULT_CAPACITY)
    if args.capacity is not None:
        capacity = args.capacity
    increment: int = config.get("increment", _DEFAULT_INCREMENT)
    if args.increment is not None:
        increment = args.increment

    try:
        sorted_list = SortedList.from_iterable(
            args.items,
            comparator=REVERSE if reverse else NATURAL,
            capacity=capacity,
            increment=increment
        )
        if args.retain is not None:
            changed = sorted_list.retain_all(args.retain)
            _CLI_LOGGER.debug("Retain changed the list: %s.", changed)
        contains = [(value, value in sorted_list) for value in args.contains]
    except (TypeError, ValueError) as error:
        parser.error(str(error))

    print(list(sorted_list))
    for value, found in contains:
        print(f"{value}: {found}")
    return 0


if __name__ == "__main__":
    sys.exit(_main())
