"""
Contains the InstantRunoff class.
Defines the round loop and adds in methods from rcv/tables.py.
"""
from __future__ import annotations
from typing import Dict, Iterable, List, Optional, Tuple, Type, Union

import collections
import json
import pathlib
import random

from rcv_tally.ballots import Voter
from rcv_tally.choices import ChoiceId, ChoiceNames
from rcv_tally.errors import ExhaustedElectorate, TiedElimination
from rcv_tally.rcv.tables import IRV_tables
from rcv_tally.reporting import Reporter
import rcv_tally.util as util


class InstantRunoff(IRV_tables):
    """
    Single winner instant-runoff contest.
    - Winner is the first choice to hold more than half of the ballots.
    - Each round without a winner eliminates the choice with the fewest votes and moves its ballots
      to their next continuing preference.
    """

    TIE_BREAK_POLICIES = ("lowest_id", "random", "reject")
    MAJORITY_BASES = ("original", "active")

    @staticmethod
    def write_round_by_round_table(irv_obj: Type[InstantRunoff], save_dir: Union[str, pathlib.Path]) -> pathlib.Path:
        """Wrapper for `InstantRunoff.get_round_by_round_table` that writes the table to
        '{save_dir}/round_by_round_table/{election_name}.csv'

        :param irv_obj: Tabulated InstantRunoff object
        :type irv_obj: Type[InstantRunoff]
        :param save_dir: Directory path to write the table under
        :type save_dir: Union[str, pathlib.Path]
        :return: Path of the written file
        :rtype: pathlib.Path
        """
        save_path = util.verifyDir(pathlib.Path(save_dir) / "round_by_round_table")
        out_path = save_path / f"{irv_obj.get_election_name()}.csv"
        irv_obj.get_round_by_round_table().to_csv(out_path, index=False)
        return out_path

    @staticmethod
    def write_round_by_round_json(irv_obj: Type[InstantRunoff], save_dir: Union[str, pathlib.Path]) -> pathlib.Path:
        """Wrapper for `InstantRunoff.get_round_by_round_dict` that writes the dictionary to
        '{save_dir}/round_by_round_json/{election_name}.json'

        :param irv_obj: Tabulated InstantRunoff object
        :type irv_obj: Type[InstantRunoff]
        :param save_dir: Directory path to write the json under
        :type save_dir: Union[str, pathlib.Path]
        :return: Path of the written file
        :rtype: pathlib.Path
        """
        save_path = util.verifyDir(pathlib.Path(save_dir) / "round_by_round_json")
        out_path = save_path / f"{irv_obj.get_election_name()}.json"
        with open(out_path, "w") as outfile:
            json.dump(irv_obj.get_round_by_round_dict(), outfile, indent=2)
        return out_path

    def __init__(
        self,
        voters: Iterable[Voter],
        names: Optional[ChoiceNames] = None,
        reporter: Optional[Reporter] = None,
        tie_break: str = "lowest_id",
        majority_basis: str = "original",
        random_seed: Optional[int] = None,
        election_name: str = "election",
    ) -> None:
        """
        Constructor. Copies the voters and tabulates the election.

        :param voters: Parsed ballots. They are copied, the caller's objects are never modified.
        :type voters: Iterable[Voter]
        :param names: Display names for choices, defaults to the packaged table
        :type names: Optional[ChoiceNames], optional
        :param reporter: Sink told about each round, defaults to a silent reporter
        :type reporter: Optional[Reporter], optional
        :param tie_break: "lowest_id" (leader ties go to the lowest id, elimination ties to the highest id),
            "random" (uniform choice among tied entries), or "reject" (a tie for elimination is an error).
            Defaults to "lowest_id"
        :type tie_break: str, optional
        :param majority_basis: "original" compares the leader against all ballots counted at the start,
            "active" against the ballots still counting this round. Defaults to "original"
        :type majority_basis: str, optional
        :param random_seed: Seed for the "random" tie-break, defaults to None
        :type random_seed: Optional[int], optional
        :param election_name: Used to name output files, defaults to "election"
        :type election_name: str, optional
        :raises ValueError: Raised on an unknown tie_break or majority_basis.
        :raises ExhaustedElectorate: Raised if every ballot runs out before a choice wins.
        :raises TiedElimination: Raised on an elimination tie when tie_break is "reject".
        """
        if tie_break not in self.TIE_BREAK_POLICIES:
            raise ValueError(f"tie_break must be one of {self.TIE_BREAK_POLICIES}, got {tie_break!r}")
        if majority_basis not in self.MAJORITY_BASES:
            raise ValueError(f"majority_basis must be one of {self.MAJORITY_BASES}, got {majority_basis!r}")

        # CONTEST INPUTS
        self._voters = [voter.copy() for voter in voters]
        self._names = names if names is not None else ChoiceNames()
        self._reporter = reporter if reporter is not None else Reporter()
        self._tie_break = tie_break
        self._majority_basis = majority_basis
        self._random = random.Random(random_seed)
        self._election_name = election_name

        # INIT STATE INFO
        self._total_ballots = len(self._voters)
        self._eliminated: List[ChoiceId] = []
        self._eliminated_set = set()
        self._rounds: List[Dict] = []
        self._round_num = 0
        self._winner: Optional[ChoiceId] = None

        # RUN
        self._tabulate()

    def _tabulate(self) -> None:
        """
        Run the rounds of the contest.
        """
        while self._winner is None:
            self._round_num += 1
            self._reporter.round_started(self._round_num)

            #############################################
            # COUNT ROUND RESULTS
            round_dict = self._tally_active_ballots()
            self._reporter.round_tally(self.get_round_tally_tuple(self._round_num))

            if not round_dict["tally"]:
                raise ExhaustedElectorate(self._round_num)

            #############################################
            # CHECK FOR ROUND WINNER
            leader, leader_votes = self._round_leader(round_dict["tally"])
            round_dict["leader"] = leader
            round_dict["leader_votes"] = leader_votes

            if self._has_majority(leader_votes, round_dict["tally"]):
                self._winner = leader
                round_dict["winner"] = leader
                self._reporter.winner(leader, leader_votes, self._total_ballots)
                break

            self._reporter.current_leader(leader, leader_votes, self._total_ballots)

            #############################################
            # IDENTIFY ROUND LOSER
            loser, loser_votes = self._round_loser(round_dict["tally"])
            round_dict["eliminated"] = loser
            round_dict["eliminated_votes"] = loser_votes
            self._reporter.eliminated(loser, loser_votes, self._total_ballots)

            self._eliminated.append(loser)
            self._eliminated_set.add(loser)

            #############################################
            # CLEAN ROUND BALLOTS
            round_dict["transfers"] = self._clean_ballots(loser)

    def _tally_active_ballots(self) -> Dict:

        tally = collections.Counter()
        exhausted = 0
        for voter in self._voters:
            choice = voter.front()
            if choice is None:
                exhausted += 1
            else:
                tally[choice] += 1

        round_dict = {
            "round": self._round_num,
            "tally": dict(tally),
            "exhausted": exhausted,
            "leader": None,
            "leader_votes": None,
            "eliminated": None,
            "eliminated_votes": None,
            "transfers": {},
            "winner": None,
        }
        self._rounds.append(round_dict)
        return round_dict

    def _has_majority(self, votes: int, tally: Dict[ChoiceId, int]) -> bool:
        if self._majority_basis == "active":
            basis = sum(tally.values())
        else:
            basis = self._total_ballots
        # strictly more than half
        return votes * 2 > basis

    def _round_leader(self, tally: Dict[ChoiceId, int]) -> Tuple[ChoiceId, int]:
        """
        Find the choice with the most votes. Ties only matter for reporting, since two choices
        can never both hold a majority.
        """
        leader_count = max(tally.values())
        round_leaders = sorted(choice for choice, votes in tally.items() if votes == leader_count)

        if self._tie_break == "random":
            return self._random.sample(round_leaders, 1)[0], leader_count
        return round_leaders[0], leader_count

    def _round_loser(self, tally: Dict[ChoiceId, int]) -> Tuple[ChoiceId, int]:
        """
        Find the choice with the fewest votes, breaking ties by the tie_break policy.
        """
        loser_count = min(tally.values())
        round_losers = sorted(choice for choice, votes in tally.items() if votes == loser_count)

        if len(round_losers) > 1 and self._tie_break == "reject":
            raise TiedElimination(self._round_num, round_losers)

        if self._tie_break == "random":
            return self._random.sample(round_losers, 1)[0], loser_count
        return round_losers[-1], loser_count

    def _clean_ballots(self, loser: ChoiceId) -> Dict[Union[ChoiceId, str], int]:
        """
        Strip eliminated choices from the front of every ballot.
        Returns where the loser's ballots went, keyed by choice or util.EXHAUSTED.
        """
        transfers = collections.Counter()
        for voter in self._voters:
            moved = voter.front() == loser
            voter.drop_eliminated(self._eliminated_set)
            if moved:
                transfers[voter.front() if voter.front() is not None else util.EXHAUSTED] += 1
        return dict(transfers)

    def get_round_tally_tuple(self, round_num: int) -> List[Tuple[ChoiceId, int]]:
        """
        Return a list of (choice, vote count) tuples for a round, sorted by descending vote count
        and then by ascending choice id.

        :param round_num: Round number, starting at 1.
        :type round_num: int
        :rtype: List[Tuple[ChoiceId, int]]
        """
        tally = self._rounds[round_num - 1]["tally"]
        return sorted(tally.items(), key=lambda x: (-x[1], x[0]))

    def get_round_tally_dict(self, round_num: int) -> Dict[ChoiceId, int]:
        return dict(self.get_round_tally_tuple(round_num))

    def get_round(self, round_num: int) -> Dict:
        """
        Return a copy of the stored record for a round. Keys are round, tally, exhausted, leader,
        leader_votes, eliminated, eliminated_votes, transfers and winner.
        """
        round_dict = self._rounds[round_num - 1]
        return {k: (dict(v) if isinstance(v, dict) else v) for k, v in round_dict.items()}

    def get_exhausted(self, round_num: int) -> int:
        """Number of exhausted ballots at the start of the round."""
        return self._rounds[round_num - 1]["exhausted"]

    def get_eliminated(self) -> List[ChoiceId]:
        """Eliminated choices, in order of elimination."""
        return list(self._eliminated)

    def get_names(self) -> ChoiceNames:
        return self._names

    def get_election_name(self) -> str:
        return self._election_name

    def winner(self) -> ChoiceId:
        return self._winner

    def winner_votes(self) -> int:
        return self._rounds[-1]["leader_votes"]

    def winner_percent(self) -> float:
        return util.percent(self.winner_votes(), self._total_ballots)

    def total_ballots(self) -> int:
        return self._total_ballots

    def n_rounds(self) -> int:
        return len(self._rounds)
