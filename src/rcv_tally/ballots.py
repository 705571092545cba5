"""
Contains the Voter class and the ballot parsing functions.
"""

from __future__ import annotations
from typing import Collection, Iterable, List, Optional, Sequence, Tuple

import collections

from rcv_tally.choices import ChoiceId
from rcv_tally.errors import MalformedBallotField, MalformedBallots
from rcv_tally.reporting import Reporter


class Voter:
    """Wrap up the ranked choices of one ballot, most preferred first."""

    def __init__(self, choices: Iterable[ChoiceId] = ()) -> None:
        """Constructor

        :param choices: Choice identifiers in preference order. Duplicates are kept as given.
        :type choices: Iterable[ChoiceId], optional
        """
        self.choices = collections.deque(choices)
        for choice in self.choices:
            if not isinstance(choice, ChoiceId):
                raise TypeError(f"voter choices must be ChoiceId, got {type(choice).__name__}")

    def copy(self) -> Voter:
        return Voter(self.choices)

    def front(self) -> Optional[ChoiceId]:
        """
        :return: Current top preference, or None if the ballot is exhausted.
        :rtype: Optional[ChoiceId]
        """
        return self.choices[0] if self.choices else None

    def is_exhausted(self) -> bool:
        return not self.choices

    def drop_eliminated(self, eliminated: Collection[ChoiceId]) -> None:
        """Pop leading choices while they are eliminated, so the front is a continuing
        choice or the ballot is exhausted.

        :param eliminated: Set of eliminated choice identifiers.
        :type eliminated: Collection[ChoiceId]
        """
        while self.choices and self.choices[0] in eliminated:
            self.choices.popleft()

    def __len__(self) -> int:
        return len(self.choices)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Voter):
            return NotImplemented
        return list(self.choices) == list(other.choices)

    def __repr__(self) -> str:
        return f"Voter([{', '.join(str(c) for c in self.choices)}])"


def parse_ballot(raw_fields: Sequence[str], whole_number_ids: bool = True) -> Voter:
    """Parse one row of raw ballot cells into a Voter. The first field is the first preference.

    :param raw_fields: Raw text of each ranked choice cell, in rank order.
    :type raw_fields: Sequence[str]
    :param whole_number_ids: Passed to :meth:`ChoiceId.from_label`, defaults to True
    :type whole_number_ids: bool, optional
    :raises MalformedBallotField: Raised on the first field without a choice number.
    :return: Voter holding the parsed preferences.
    :rtype: Voter
    """
    return Voter(ChoiceId.from_label(str(field), whole_number=whole_number_ids) for field in raw_fields)


def parse_ballots(
    rows: Iterable[Sequence[str]],
    first_row: int = 1,
    whole_number_ids: bool = True,
    reporter: Optional[Reporter] = None,
) -> List[Voter]:
    """Parse a whole batch of ballot rows. Every row is validated before anything is returned,
    and if any field is malformed the whole batch is rejected.

    :param rows: Ballot rows, each a sequence of raw choice cells.
    :type rows: Iterable[Sequence[str]]
    :param first_row: Sheet row number of the first row, used in error messages. Defaults to 1
    :type first_row: int, optional
    :param whole_number_ids: Passed to :meth:`ChoiceId.from_label`, defaults to True
    :type whole_number_ids: bool, optional
    :param reporter: Sink told about each ballot counted, defaults to None
    :type reporter: Optional[Reporter], optional
    :raises MalformedBallots: Raised with every malformed (row, field) pair found in the batch.
    :return: One Voter per row, in row order.
    :rtype: List[Voter]
    """
    if reporter is None:
        reporter = Reporter()

    voters = []
    failures: List[Tuple[int, str]] = []

    reporter.counting_started()
    for row_num, row in enumerate(reporter.track_ballots(rows), start=first_row):
        reporter.counting_ballot(row)

        row_failures = []
        choices = []
        for field in row:
            try:
                choices.append(ChoiceId.from_label(str(field), whole_number=whole_number_ids))
            except MalformedBallotField as err:
                row_failures.append((row_num, err.field))

        if row_failures:
            failures += row_failures
        else:
            voters.append(Voter(choices))

    if failures:
        raise MalformedBallots(failures)

    reporter.ballots_counted(len(voters))
    return voters
