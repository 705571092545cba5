"""
Contains the exceptions raised for conditions that end a tabulation run.
"""

from typing import List, Tuple


class TallyError(RuntimeError):
    """Base class for every fatal condition in a tabulation run."""


class InvalidCellReference(TallyError):
    """Raised when a cell reference such as "R3" cannot be parsed."""

    def __init__(self, reference: str, reason: str = "") -> None:
        self.reference = reference
        msg = f"invalid cell reference: {reference!r}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


class SourceUnavailable(TallyError):
    """Raised when the ballot source file is missing or cannot be read."""

    def __init__(self, path, reason: str = "") -> None:
        self.path = path
        msg = f"ballot source unavailable: {path}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


class InvalidRunConfig(TallyError):
    """Raised when the run configuration has an unusable value."""


class ParseError(TallyError):
    """Base class for ballot parsing failures."""


class MalformedBallotField(ParseError):
    """Raised when a single ballot field contains no numeric character."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"ballot field has no choice number: {field!r}")


class MalformedBallots(ParseError):
    """Raised after validating a whole batch of rows, listing every malformed field.

    :param failures: (sheet row number, raw field) pairs, in row order.
    """

    def __init__(self, failures: List[Tuple[int, str]]) -> None:
        self.failures = failures
        lines = [f"row {row_num}: {field!r}" for row_num, field in failures]
        super().__init__(f"{len(failures)} malformed ballot field(s):\n" + "\n".join(lines))


class ExhaustedElectorate(TallyError):
    """Raised when every ballot is exhausted before any choice wins a majority."""

    def __init__(self, round_num: int) -> None:
        self.round_num = round_num
        super().__init__(f"(round={round_num}) all ballots are exhausted, no choice left to count")


class TiedElimination(TallyError):
    """Raised under the "reject" tie-break policy when the round loser is not unique."""

    def __init__(self, round_num: int, tied: List) -> None:
        self.round_num = round_num
        self.tied = tied
        names = ", ".join(str(c) for c in tied)
        super().__init__(f"(round={round_num}) tie for elimination between: {names}")
