"""
Contains the reporting sinks told about each step of a tabulation run.

Reporters are write-only: nothing they do changes the course of a run.
"""

from __future__ import annotations
from typing import IO, Iterable, List, Optional, Sequence, Tuple

import sys

import tqdm

from rcv_tally.choices import ChoiceId, ChoiceNames
import rcv_tally.util as util


class Reporter:
    """Silent reporter. Subclass and override the hooks of interest."""

    def track_ballots(self, rows: Iterable) -> Iterable:
        return rows

    def counting_started(self) -> None:
        pass

    def counting_ballot(self, fields: Sequence[str]) -> None:
        pass

    def ballots_counted(self, n_ballots: int) -> None:
        pass

    def round_started(self, round_num: int) -> None:
        pass

    def round_tally(self, tally: List[Tuple[ChoiceId, int]]) -> None:
        pass

    def current_leader(self, choice: ChoiceId, votes: int, total: int) -> None:
        pass

    def eliminated(self, choice: ChoiceId, votes: int, total: int) -> None:
        pass

    def winner(self, choice: ChoiceId, votes: int, total: int) -> None:
        pass


class ConsoleReporter(Reporter):
    """Print the run to the console.

    :param names: Display names of the choices, defaults to the packaged table.
    :param stream: Text stream to print to, defaults to sys.stdout
    :param quiet: If True, the per-ballot echo is replaced with a progress bar. Defaults to False
    """

    def __init__(self, names: Optional[ChoiceNames] = None, stream: Optional[IO] = None, quiet: bool = False) -> None:
        self.names = names if names is not None else ChoiceNames()
        self.stream = stream
        self.quiet = quiet

    def _print(self, *args, **kwargs) -> None:
        print(*args, file=self.stream if self.stream is not None else sys.stdout, **kwargs)

    def track_ballots(self, rows: Iterable) -> Iterable:
        if self.quiet:
            return tqdm.tqdm(rows, desc="Counting ballots", unit="ballot", file=self.stream or sys.stderr)
        return rows

    def counting_started(self) -> None:
        self._print("==== Counting ballots ====")

    def counting_ballot(self, fields: Sequence[str]) -> None:
        if not self.quiet:
            self._print("Counting ballot: " + "".join(f"{f}; " for f in fields))

    def ballots_counted(self, n_ballots: int) -> None:
        self._print(f"\nIn total, {n_ballots} ballots were counted.")

    def round_started(self, round_num: int) -> None:
        self._print(f"==== Round {round_num} ====")

    def round_tally(self, tally: List[Tuple[ChoiceId, int]]) -> None:
        self._print("The current tally is:")
        for choice, votes in tally:
            self._print(f"  {self.names.label(choice)}: {votes}")

    def current_leader(self, choice: ChoiceId, votes: int, total: int) -> None:
        self._print(
            f"The current leader is {self.names.name(choice)}, with {util.format_percent(votes, total)}% "
            f"of the final vote, or {votes} out of {total} votes."
        )

    def eliminated(self, choice: ChoiceId, votes: int, total: int) -> None:
        self._print(
            f"Eliminating {self.names.name(choice)}, which had {util.format_percent(votes, total)}% "
            f"of the current vote, or {votes} out of {total} votes."
        )

    def winner(self, choice: ChoiceId, votes: int, total: int) -> None:
        self._print(
            f"The winner is {self.names.name(choice)}, with {util.format_percent(votes, total)}% "
            f"of the final vote, or {votes} out of {total} votes!"
        )
