"""
Contains the function that tabulates one election from a sheet export.
"""

from typing import Dict, Optional

from rcv_tally.ballots import parse_ballots
from rcv_tally.choices import ChoiceNames
from rcv_tally.grid import GridRegion
from rcv_tally.parsers import sheet_region_csv
from rcv_tally.rcv.base import InstantRunoff
from rcv_tally.reporting import ConsoleReporter, Reporter


def tabulate_sheet(run_config: Dict, reporter: Optional[Reporter] = None) -> InstantRunoff:
    """Locate the ballot block, parse every ballot, and run the instant-runoff tabulation.
    If run_config["output_dir"] is set, the round by round table and json are written there.

    :param run_config: Run configuration, as returned by :func:`rcv_tally.config.read_run_config`.
    :type run_config: Dict
    :param reporter: Reporting sink, defaults to a ConsoleReporter using the configured choice names
    :type reporter: Optional[Reporter], optional
    :return: The tabulated election.
    :rtype: InstantRunoff
    """
    names = ChoiceNames(run_config["choice_names"])
    if reporter is None:
        reporter = ConsoleReporter(names, quiet=run_config["quiet"])

    region = GridRegion.from_str(run_config["start_cell"], run_config["end_cell"])
    rows = sheet_region_csv(run_config["cvr_path"], region)

    voters = parse_ballots(
        rows,
        first_row=region.start.row + 1,
        whole_number_ids=run_config["whole_number_ids"],
        reporter=reporter,
    )

    election = InstantRunoff(
        voters,
        names=names,
        reporter=reporter,
        tie_break=run_config["tie_break"],
        majority_basis=run_config["majority_basis"],
        random_seed=run_config["random_seed"],
        election_name=run_config["election_name"],
    )

    if run_config["output_dir"]:
        InstantRunoff.write_round_by_round_table(election, run_config["output_dir"])
        InstantRunoff.write_round_by_round_json(election, run_config["output_dir"])

    return election
