"""Contains IRV_tables class which is added into InstantRunoff.
"""

from typing import Dict, List

import pandas as pd

import rcv_tally.util as util


class IRV_tables:
    """Extra methods added into InstantRunoff class"""

    def _ordered_choices(self) -> List:
        """
        Winner first, followed by eliminated choices in descending order of the round they were eliminated.
        """
        ordered = []
        if self._winner is not None:
            ordered.append(self._winner)
        ordered += reversed(self._eliminated)

        seen = set(ordered)
        leftover = sorted({c for r in self._rounds for c in r["tally"]} - seen)
        return ordered + leftover

    def get_round_by_round_table(self) -> pd.DataFrame:
        """Create a table containing round by round details for the tabulation. One row per choice
        that received a vote in any round, plus a final row for exhausted ballots. For each round there are
        votes, percent (of all ballots counted) and transfer (change before the next round) columns.
        Choices eliminated in an earlier round have empty cells.

        :return: round by round table
        :rtype: pd.DataFrame
        """
        total = self._total_ballots
        rows = []

        for choice in self._ordered_choices():
            row = {"choice_id": choice.value, "choice": self._names.name(choice)}
            eliminated_round = None
            if choice in self._eliminated_set:
                eliminated_round = self._eliminated.index(choice) + 1

            for round_dict in self._rounds:
                n = round_dict["round"]
                if eliminated_round is not None and n > eliminated_round:
                    votes = transfer = percent = None
                else:
                    votes = round_dict["tally"].get(choice, 0)
                    percent = util.percent(votes, total)
                    transfer = self._round_transfer(n, choice, votes)
                row[f"round{n}_votes"] = votes
                row[f"round{n}_percent"] = percent
                row[f"round{n}_transfer"] = transfer
            rows.append(row)

        exhaust_row = {"choice_id": None, "choice": util.EXHAUSTED}
        for round_dict in self._rounds:
            n = round_dict["round"]
            votes = round_dict["exhausted"]
            exhaust_row[f"round{n}_votes"] = votes
            exhaust_row[f"round{n}_percent"] = util.percent(votes, total)
            exhaust_row[f"round{n}_transfer"] = self._round_transfer(n, util.EXHAUSTED, votes)
        rows.append(exhaust_row)

        return pd.DataFrame(rows)

    def _round_transfer(self, round_num: int, key, votes: int):
        # the final round has no transfer
        round_dict = self._rounds[round_num - 1]
        if round_dict["eliminated"] is None:
            return None
        if key == round_dict["eliminated"]:
            return -votes
        return round_dict["transfers"].get(key, 0)

    def get_round_by_round_dict(self) -> Dict:
        """Return a json-serialisable dictionary with the contest configuration and, for each round,
        the tally and where the eliminated choice's ballots went. Choices are keyed by "name (id)".

        :rtype: Dict
        """
        label = self._names.label

        results = []
        for round_dict in self._rounds:
            round_results = {
                "round": round_dict["round"],
                "tally": {label(c): v for c, v in sorted(round_dict["tally"].items(), key=lambda x: (-x[1], x[0]))},
                "exhausted": round_dict["exhausted"],
                "tallyResults": [],
            }
            if round_dict["eliminated"] is not None:
                round_results["tallyResults"].append(
                    {
                        "eliminated": label(round_dict["eliminated"]),
                        "transfers": {
                            (k if k == util.EXHAUSTED else label(k)): v for k, v in round_dict["transfers"].items()
                        },
                    }
                )
            if round_dict["winner"] is not None:
                round_results["tallyResults"].append({"elected": label(round_dict["winner"])})
            results.append(round_results)

        return {
            "config": {
                "contest": self._election_name,
                "totalBallots": self._total_ballots,
                "majorityBasis": self._majority_basis,
                "tieBreak": self._tie_break,
            },
            "results": results,
        }
