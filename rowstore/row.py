"""Student records and validation of the text used to build them."""

from __future__ import annotations

from dataclasses import dataclass

NAME_SIZE = 20
BRANCH_SIZE = 4
LOC_SIZE = 12

NAME_MAX_LENGTH = NAME_SIZE - 1
BRANCH_MAX_LENGTH = BRANCH_SIZE - 1
CITY_MAX_LENGTH = LOC_SIZE - 1


class InvalidInputError(ValueError):
    """Raised when user-supplied text cannot become a field value."""


def _first_line(text: str) -> str:
    return text.split("\n", 1)[0]


def parse_integer(text: str) -> int:
    """Parse a non-negative decimal integer made of digits only."""
    line = _first_line(text)
    if not line:
        raise InvalidInputError("Empty input is not allowed.")
    if not all("0" <= c <= "9" for c in line):
        raise InvalidInputError("Invalid input. Please enter an integer.")
    return int(line)


def _is_letter_or_space(c: str) -> bool:
    return "A" <= c <= "Z" or "a" <= c <= "z" or c == " "


def parse_letters(text: str, max_length: int) -> str:
    """Validate letters-and-spaces text and cut it to ``max_length`` characters."""
    line = _first_line(text)
    if not line:
        raise InvalidInputError("Input cannot be empty.")
    if not all(_is_letter_or_space(c) for c in line):
        raise InvalidInputError(
            "Invalid character in input. Use letters and spaces only."
        )
    return line[:max_length]


@dataclass
class Row:
    """One student's record: identity, location and course marks."""

    id: int
    name: str
    branch: str
    city: str
    mth: int
    phy: int
    chm: int
    ta: int
    lif: int

    def describe(self, position: int) -> str:
        """Render the row as a single line labelled with ``position``."""
        return (
            f"Row {position}: ID={self.id}, Name={self.name}, "
            f"Branch={self.branch}, City={self.city}, MTH={self.mth}, "
            f"PHY={self.phy}, CHM={self.chm}, TA={self.ta}, LIF={self.lif}"
        )