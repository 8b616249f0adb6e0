"""A single named, typed solver option."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

OptionValue = Union[bool, float, int, str]


class OptionType(str, Enum):
    """Kinds of values an option may hold."""

    BOOL = "bool"
    DOUBLE = "double"
    INTEGER = "integer"
    STRING = "string"

    def __str__(self) -> str:
        return self.value


@dataclass
class Option:
    """A named option with a typed value, optional bounds and a description.

    Bounds are only meaningful for double and integer options.
    """

    name: str
    type: OptionType
    value: OptionValue
    description: str
    lower_bound: float | int | None = None
    upper_bound: float | int | None = None

    def format(self) -> str:
        """Return a human-readable, multi-line description of the option."""
        lines = [
            f"Name        : {self.name}",
            f"Type        : {self.type.value}",
        ]
        if self.type is OptionType.BOOL:
            lines.append(f"Value       : {'true' if self.value else 'false'}")
        elif self.type is OptionType.DOUBLE:
            lines.append("Value       : %+e" % self.value)
            lines.append("Lower bound : %+e" % self.lower_bound)
            lines.append("Upper bound : %+e" % self.upper_bound)
        elif self.type is OptionType.INTEGER:
            lines.append("Value       : %d" % self.value)
            lines.append("Lower bound : %d" % self.lower_bound)
            lines.append("Upper bound : %d" % self.upper_bound)
        else:
            lines.append(f"Value       : {self.value}")
        lines.append(f"Description : {self.description}")
        return "".join(line + "\n" for line in lines)