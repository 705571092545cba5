import os
import pathlib

###############################################################
# constants

EXHAUSTED = "exhausted"

########################
# helper funcs


def percent(votes, total) -> float:
    # share of total as a percentage, 0 when there is nothing to divide by
    if not total:
        return 0.0
    return votes / total * 100


def format_percent(votes, total, round_places=2) -> str:
    """Percentage formatted for console output, without trailing zeros ("60", "33.33")."""
    return f"{round(percent(votes, total), round_places):.{round_places}f}".rstrip("0").rstrip(".")


def verifyDir(dir_path, make_if_missing=True, error_msg_tail="is not an existing folder"):
    """
    Check that a directory exists and if missing, either error or create it.

    :param dir_path: directory path to verify
    :param make_if_missing: if True, create directory (and parents) if missing
    :param error_msg_tail: if make_if_missing is False and directory missing,
     use this error message after the dir_path.
    """
    dir_path = pathlib.Path(dir_path)
    if os.path.isdir(dir_path) is False:
        if make_if_missing:
            dir_path.mkdir(parents=True)
        else:
            raise RuntimeError(f"{dir_path} {error_msg_tail}")
    return dir_path
