
import pandas as pd
import pytest

from rcv_tally.reporting import Reporter

# number of fields ahead of the ballot block when the block starts at column R
LEAD_FIELDS = 17


def write_sheet_csv(path, ballot_rows, lead_fields=LEAD_FIELDS):
    """Write a sheet export with a header row, `lead_fields` filler columns, then the ballot cells."""
    n_rank = max((len(r) for r in ballot_rows), default=1)
    header = [f"meta{i}" for i in range(lead_fields)] + [f"Rank {i}" for i in range(1, n_rank + 1)]

    records = []
    for row_num, ballot in enumerate(ballot_rows, start=2):
        lead = [f"r{row_num}c{i}" for i in range(lead_fields)]
        records.append(lead + list(ballot) + [""] * (n_rank - len(ballot)))

    pd.DataFrame(records, columns=header).to_csv(path, index=False)

    return path


class RecordingReporter(Reporter):
    """Keeps every reported event as a tuple, in order."""

    def __init__(self):
        self.events = []

    def counting_ballot(self, fields):
        self.events.append(("ballot", list(fields)))

    def ballots_counted(self, n_ballots):
        self.events.append(("counted", n_ballots))

    def round_started(self, round_num):
        self.events.append(("round", round_num))

    def round_tally(self, tally):
        self.events.append(("tally", {c.value: v for c, v in tally}))

    def current_leader(self, choice, votes, total):
        self.events.append(("leader", choice.value, votes, total))

    def eliminated(self, choice, votes, total):
        self.events.append(("eliminated", choice.value, votes, total))

    def winner(self, choice, votes, total):
        self.events.append(("winner", choice.value, votes, total))

    def of_kind(self, kind):
        return [e for e in self.events if e[0] == kind]


@pytest.fixture
def recorder():
    return RecordingReporter()


@pytest.fixture
def write_sheet(tmp_path):

    def _write(ballot_rows, name="responses.csv", lead_fields=LEAD_FIELDS):
        return write_sheet_csv(tmp_path / name, ballot_rows, lead_fields=lead_fields)

    return _write
