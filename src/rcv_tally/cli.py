"""
Module that contains the command line app.

Why does this file exist, and why not put this in __main__?

  You might be tempted to import things from __main__ later, but that will cause
  problems: the code will get executed twice:

  - When you run `python -mrcv_tally` python will execute
    ``__main__.py`` as a script. That means there won't be any
    ``rcv_tally.__main__`` in ``sys.modules``.
  - When you import __main__ it will get executed again (as a module) because
    there's no ``rcv_tally.__main__`` in ``sys.modules``.

  Also see (1) from http://click.pocoo.org/5/setuptools/#setuptools-integration
"""
import argparse
import sys

import rcv_tally.config as config
import rcv_tally.election as election
from rcv_tally.errors import TallyError
from rcv_tally.rcv.base import InstantRunoff


def build_parser():

    p = argparse.ArgumentParser(description='Tabulate an instant-runoff election from ranked ballots in a sheet export.')

    p.add_argument('run_config', nargs='?', default=None,
                   help='Path to a run config json file. Options given on the command line override it.')
    p.add_argument('--cvr-path', dest='cvr_path', help='Path to the csv sheet export (default: responses.csv).')
    p.add_argument('--start', dest='start_cell', help='Top left cell of the ballot block (default: R3).')
    p.add_argument('--end', dest='end_cell', help='Bottom right cell of the ballot block (default: V18).')
    p.add_argument('--tie-break', dest='tie_break', choices=InstantRunoff.TIE_BREAK_POLICIES,
                   help='How to choose between tied choices (default: lowest_id).')
    p.add_argument('--majority-basis', dest='majority_basis', choices=InstantRunoff.MAJORITY_BASES,
                   help='Count a majority against all ballots (original) or continuing ballots (active).')
    p.add_argument('--seed', dest='random_seed', type=int, help='Seed for the random tie-break.')
    p.add_argument('--single-digit-ids', dest='whole_number_ids', action='store_const', const=False,
                   help='Read only the last digit of each ballot cell as the choice number.')
    p.add_argument('--output-dir', dest='output_dir',
                   help='Write round by round csv and json results under this directory.')
    p.add_argument('--quiet', action='store_const', const=True,
                   help='Show a progress bar instead of echoing each ballot.')

    return p


def main(argv=None):

    args = build_parser().parse_args(argv)
    overrides = {k: v for k, v in vars(args).items() if k != 'run_config'}

    try:
        run_config = config.read_run_config(args.run_config, overrides=overrides)
        election.tabulate_sheet(run_config)
    except TallyError as err:
        print(f'error: {err}', file=sys.stderr)
        return 1

    return 0
