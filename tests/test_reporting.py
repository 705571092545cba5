import io

import pytest

from rcv_tally.ballots import Voter, parse_ballots
from rcv_tally.choices import ChoiceId, ChoiceNames
from rcv_tally.rcv.base import InstantRunoff
from rcv_tally.reporting import ConsoleReporter, Reporter
import rcv_tally.util as util


def make_voters(ranks):
    return [Voter(ChoiceId(c) for c in r) for r in ranks]


def test_console_rounds():

    stream = io.StringIO()
    InstantRunoff(make_voters([[1, 2], [1, 2], [2, 3], [3, 1], [3, 1]]), reporter=ConsoleReporter(stream=stream))

    assert stream.getvalue().splitlines() == [
        "==== Round 1 ====",
        "The current tally is:",
        "  Medieval Fantasy (1): 2",
        "  Steampunk (3): 2",
        "  Alternate Universe (2): 1",
        "The current leader is Medieval Fantasy, with 40% of the final vote, or 2 out of 5 votes.",
        "Eliminating Alternate Universe, which had 20% of the current vote, or 1 out of 5 votes.",
        "==== Round 2 ====",
        "The current tally is:",
        "  Steampunk (3): 3",
        "  Medieval Fantasy (1): 2",
        "The winner is Steampunk, with 60% of the final vote, or 3 out of 5 votes!",
    ]


def test_console_custom_names():

    stream = io.StringIO()
    reporter = ConsoleReporter(ChoiceNames({1: "Yes"}), stream=stream)
    InstantRunoff(make_voters([[1], [1], [2]]), reporter=reporter)

    assert stream.getvalue().splitlines() == [
        "==== Round 1 ====",
        "The current tally is:",
        "  Yes (1): 2",
        "  Unknown (2): 1",
        "The winner is Yes, with 66.67% of the final vote, or 2 out of 3 votes!",
    ]


def test_console_counting():

    stream = io.StringIO()
    parse_ballots([["Option 1", "Option 2"], ["Option 3"]], reporter=ConsoleReporter(stream=stream))

    assert stream.getvalue().splitlines() == [
        "==== Counting ballots ====",
        "Counting ballot: Option 1; Option 2; ",
        "Counting ballot: Option 3; ",
        "",
        "In total, 2 ballots were counted.",
    ]


def test_console_quiet_counting():

    stream = io.StringIO()
    voters = parse_ballots([["Option 1"], ["Option 3"]], reporter=ConsoleReporter(stream=stream, quiet=True))

    output = stream.getvalue()
    assert len(voters) == 2
    assert "Counting ballot:" not in output
    assert "Counting ballots" in output
    assert "In total, 2 ballots were counted." in output


def test_silent_reporter(capsys):

    rows = [["Option 1"]]
    reporter = Reporter()

    assert reporter.track_ballots(rows) is rows
    InstantRunoff(make_voters([[1]]), reporter=reporter)
    assert capsys.readouterr().out == ""


params = [
    (3, 5, "60"),
    (1, 3, "33.33"),
    (2, 3, "66.67"),
    (1, 8, "12.5"),
    (0, 4, "0"),
    (0, 0, "0"),
]


@pytest.mark.parametrize("votes, total, expected", params)
def test_format_percent(votes, total, expected):

    assert util.format_percent(votes, total) == expected
