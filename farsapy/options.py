"""A collection of named, typed and bounded solver options."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator
from pathlib import Path

from farsapy.option import Option, OptionType, OptionValue

logger = logging.getLogger(__name__)

# Leading numeric prefix accepted when reading numbers from an options file.
_NUMBER_PREFIX = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


class OptionError(ValueError):
    """Raised when an option cannot be added, found, read or modified."""


def _parse_number_prefix(text: str) -> float:
    """Parse the longest leading number in ``text``, ignoring any trailing text."""
    match = _NUMBER_PREFIX.match(text)
    if match is None:
        raise ValueError(f"no number at the start of {text!r}")
    return float(match.group(1))


class Options:
    """An ordered set of options, each looked up by its unique name."""

    def __init__(self) -> None:
        self._options: dict[str, Option] = {}

    def __len__(self) -> int:
        return len(self._options)

    def __iter__(self) -> Iterator[Option]:
        return iter(self._options.values())

    def __contains__(self, name: object) -> bool:
        return name in self._options

    def format(self) -> str:
        """Return a description of every option, separated by blank lines."""
        if not self._options:
            return "Option list is empty.\n"
        return "\n".join(option.format() for option in self._options.values())

    # Adding options

    def _check_new_name(self, name: str) -> None:
        if name in self._options:
            raise OptionError(f"Option with name '{name}' already exists.")

    def _check_bounds(self, kind: str, name: str, value, lower_bound, upper_bound, fmt: str) -> None:
        if lower_bound > upper_bound:
            raise OptionError(
                f"Attempted to add {kind} option '{name}', but lower bound "
                f"'{fmt % lower_bound}' greater than upper bound '{fmt % upper_bound}'."
            )
        if not lower_bound <= value <= upper_bound:
            raise OptionError(
                f"Attempted to add {kind} option '{name}', but value '{fmt % value}' "
                f"outside of bound interval '[{fmt % lower_bound},{fmt % upper_bound}]'."
            )

    def add_bool_option(self, name: str, value: bool, description: str) -> None:
        """Add a bool option; raise OptionError if the name is taken."""
        self._check_new_name(name)
        self._options[name] = Option(name, OptionType.BOOL, bool(value), description)

    def add_double_option(
        self,
        name: str,
        value: float,
        lower_bound: float,
        upper_bound: float,
        description: str,
    ) -> None:
        """Add a bounded double option; raise OptionError on a bad name or bounds."""
        self._check_new_name(name)
        value, lower_bound, upper_bound = float(value), float(lower_bound), float(upper_bound)
        self._check_bounds("double", name, value, lower_bound, upper_bound, "%+e")
        self._options[name] = Option(
            name, OptionType.DOUBLE, value, description, lower_bound, upper_bound
        )

    def add_integer_option(
        self,
        name: str,
        value: int,
        lower_bound: int,
        upper_bound: int,
        description: str,
    ) -> None:
        """Add a bounded integer option; raise OptionError on a bad name or bounds."""
        self._check_new_name(name)
        value, lower_bound, upper_bound = int(value), int(lower_bound), int(upper_bound)
        self._check_bounds("integer", name, value, lower_bound, upper_bound, "%d")
        self._options[name] = Option(
            name, OptionType.INTEGER, value, description, lower_bound, upper_bound
        )

    def add_string_option(self, name: str, value: str, description: str) -> None:
        """Add a string option; raise OptionError if the name is taken."""
        self._check_new_name(name)
        self._options[name] = Option(name, OptionType.STRING, str(value), description)

    # Reading options

    def _lookup(self, name: str, option_type: OptionType, what: str) -> Option:
        try:
            option = self._options[name]
        except KeyError:
            raise OptionError(f"Option with name '{name}' does not exist.") from None
        if option.type is not option_type:
            raise OptionError(
                f"Attempted to access {what} for option '{name}' as "
                f"{option_type.value}, but type is {option.type.value}."
            )
        return option

    def lower_bound_as_double(self, name: str) -> float:
        """Return the lower bound of a double option."""
        return self._lookup(name, OptionType.DOUBLE, "lower bound").lower_bound

    def lower_bound_as_integer(self, name: str) -> int:
        """Return the lower bound of an integer option."""
        return self._lookup(name, OptionType.INTEGER, "lower bound").lower_bound

    def upper_bound_as_double(self, name: str) -> float:
        """Return the upper bound of a double option."""
        return self._lookup(name, OptionType.DOUBLE, "upper bound").upper_bound

    def upper_bound_as_integer(self, name: str) -> int:
        """Return the upper bound of an integer option."""
        return self._lookup(name, OptionType.INTEGER, "upper bound").upper_bound

    def value_as_bool(self, name: str) -> bool:
        """Return the value of a bool option."""
        return self._lookup(name, OptionType.BOOL, "value").value

    def value_as_double(self, name: str) -> float:
        """Return the value of a double option."""
        return self._lookup(name, OptionType.DOUBLE, "value").value

    def value_as_integer(self, name: str) -> int:
        """Return the value of an integer option."""
        return self._lookup(name, OptionType.INTEGER, "value").value

    def value_as_string(self, name: str) -> str:
        """Return the value of a string option."""
        return self._lookup(name, OptionType.STRING, "value").value

    # Modifying options

    def _set(self, option: Option, value: OptionValue, shown: str) -> None:
        option.value = value
        logger.info("Set value for option '%s' as %s.", option.name, shown)

    def modify_bool_value(self, name: str, value: bool) -> None:
        """Set the value of a bool option."""
        option = self._lookup(name, OptionType.BOOL, "value")
        value = bool(value)
        self._set(option, value, "true" if value else "false")

    def modify_double_value(self, name: str, value: float) -> None:
        """Set the value of a double option; raise OptionError if out of bounds."""
        option = self._lookup(name, OptionType.DOUBLE, "value")
        value = float(value)
        if not option.lower_bound <= value <= option.upper_bound:
            raise OptionError(
                f"Attempted to set value for option '{name}', but value {value:+e} "
                f"outside of bound interval '[{option.lower_bound:+e},{option.upper_bound:+e}]'."
            )
        self._set(option, value, f"{value:+e}")

    def modify_integer_value(self, name: str, value: int) -> None:
        """Set the value of an integer option; raise OptionError if out of bounds."""
        option = self._lookup(name, OptionType.INTEGER, "value")
        value = int(value)
        if not option.lower_bound <= value <= option.upper_bound:
            raise OptionError(
                f"Attempted to set value for option '{name}', but value {value} "
                f"outside of bound interval '[{option.lower_bound},{option.upper_bound}]'."
            )
        self._set(option, value, str(value))

    def modify_string_value(self, name: str, value: str) -> None:
        """Set the value of a string option."""
        option = self._lookup(name, OptionType.STRING, "value")
        self._set(option, str(value), str(value))

    def modify_options_from_file(self, file_name: str | Path = "nonopt.opt") -> None:
        """Apply ``name value`` lines from a file.

        A missing file changes nothing. Lines naming unknown options, holding
        values that cannot be converted, or values out of bounds are logged and
        skipped.
        """
        try:
            text = Path(file_name).read_text()
        except FileNotFoundError:
            return

        for line in text.splitlines():
            words = line.split()
            name = words[0] if words else ""
            raw = words[1] if len(words) > 1 else ""

            option = self._options.get(name)
            if option is None:
                logger.warning("Option with name '%s' does not exist.  Ignoring request.", name)
                continue

            try:
                if option.type is OptionType.BOOL:
                    self.modify_bool_value(name, raw in ("true", "1"))
                elif option.type is OptionType.DOUBLE:
                    try:
                        number = _parse_number_prefix(raw)
                    except ValueError:
                        logger.warning(
                            "Attempted to set value for option '%s', but cannot convert "
                            "'%s' to double.  Ignoring request.",
                            name,
                            raw,
                        )
                        continue
                    self.modify_double_value(name, number)
                elif option.type is OptionType.INTEGER:
                    try:
                        number = int(_parse_number_prefix(raw))
                    except (ValueError, OverflowError):
                        logger.warning(
                            "Attempted to set value for option '%s', but cannot convert "
                            "'%s' to int.  Ignoring request.",
                            name,
                            raw,
                        )
                        continue
                    self.modify_integer_value(name, number)
                else:
                    self.modify_string_value(name, raw)
            except OptionError as error:
                logger.warning("%s  Ignoring request.", error)