"""
Contains the ChoiceId and ChoiceNames classes.
"""

from __future__ import annotations
from typing import Dict, Iterator, Mapping, Optional, Union

import functools
import re

from rcv_tally.errors import MalformedBallotField

UNKNOWN_CHOICE = "Unknown"

DEFAULT_CHOICE_NAMES = {
    1: "Medieval Fantasy",
    2: "Alternate Universe",
    3: "Steampunk",
    4: "Vestiges",
    5: "Invasion",
}

_trailing_digits = re.compile(r"(\d+)\D*$")
_ascii_digits = "0123456789"


@functools.total_ordering
class ChoiceId:
    """Opaque identifier of one choice on the ballot. Equal when the numbers are equal."""

    __slots__ = ("value",)

    @staticmethod
    def from_label(label: str, whole_number: bool = True) -> ChoiceId:
        """Derive a choice identifier from a raw ballot cell such as "Option 3".

        :param label: Raw text of the ballot cell.
        :type label: str
        :param whole_number: If True, the last run of consecutive digits is the identifier ("Option 12" is 12).
            If False, only the last numeric character is used ("Option 12" is 2), and it must be 0-9
            ("Option 3²" is malformed). Defaults to True
        :type whole_number: bool, optional
        :raises MalformedBallotField: Raised if the label has no usable digit.
        :return: Identifier parsed from the label.
        :rtype: ChoiceId
        """
        if whole_number:
            match = _trailing_digits.search(label)
            if match is None:
                raise MalformedBallotField(label)
            return ChoiceId(int(match.group(1)))

        # the last numeric character decides, and only 0-9 read as a number
        for char in reversed(label):
            if char.isnumeric():
                if char not in _ascii_digits:
                    break
                return ChoiceId(int(char))
        raise MalformedBallotField(label)

    def __init__(self, value: int) -> None:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"choice id must be an int, got {type(value).__name__}")
        self.value = value

    def __eq__(self, other) -> bool:
        if not isinstance(other, ChoiceId):
            return NotImplemented
        return self.value == other.value

    def __lt__(self, other) -> bool:
        if not isinstance(other, ChoiceId):
            return NotImplemented
        return self.value < other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __repr__(self) -> str:
        return f"ChoiceId({self.value})"

    def __str__(self) -> str:
        return str(self.value)


class ChoiceNames(Mapping):
    """Read-only lookup from choice number to display name, with an "Unknown" fallback
    for any number not in the table.
    """

    def __init__(self, names: Optional[Mapping[Union[int, str], str]] = None) -> None:
        if names is None:
            names = DEFAULT_CHOICE_NAMES
        # json object keys arrive as strings
        self._names: Dict[int, str] = {int(k): str(v) for k, v in names.items()}

    def __getitem__(self, key: int) -> str:
        return self._names[key]

    def __iter__(self) -> Iterator[int]:
        return iter(self._names)

    def __len__(self) -> int:
        return len(self._names)

    def name(self, choice: ChoiceId) -> str:
        return self._names.get(choice.value, UNKNOWN_CHOICE)

    def label(self, choice: ChoiceId) -> str:
        """Name followed by the identifier, e.g. "Steampunk (3)"."""
        return f"{self.name(choice)} ({choice.value})"
