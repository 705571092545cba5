from rcv_tally.ballots import Voter, parse_ballot, parse_ballots
from rcv_tally.choices import ChoiceId, ChoiceNames
from rcv_tally.config import read_run_config
from rcv_tally.election import tabulate_sheet
from rcv_tally.errors import (
    ExhaustedElectorate,
    InvalidCellReference,
    InvalidRunConfig,
    MalformedBallotField,
    MalformedBallots,
    ParseError,
    SourceUnavailable,
    TallyError,
    TiedElimination,
)
from rcv_tally.grid import CellRef, GridRegion
from rcv_tally.parsers import sheet_region_csv
from rcv_tally.rcv.base import InstantRunoff
from rcv_tally.reporting import ConsoleReporter, Reporter
