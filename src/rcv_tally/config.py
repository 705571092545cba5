"""
Contains functions used to read the run configuration.

Defaults for every option live in run_config_settings.json next to this file. A user run config is a
json object holding any subset of those options.
"""

from typing import Dict, Optional, Union

import json
import os
import pathlib

from rcv_tally.errors import InvalidRunConfig
from rcv_tally.rcv.base import InstantRunoff


# typecast functions
def _cast_str(s):
    if s is None:
        return None
    return str(s)


def _cast_int(s):
    if s is None or isinstance(s, int) and not isinstance(s, bool):
        return s
    return int(s)


def _cast_bool(s):
    if isinstance(s, bool):
        return s
    if str(s).title() not in ("True", "False"):
        raise ValueError(f'"{s}" is not "true" or "false"')
    return str(s).title() == "True"


def _cast_dict(dct):
    if isinstance(dct, dict):
        return dct
    # "1=Name One;2=Name Two"
    dct_return = {}
    for arg in [a for a in str(dct).strip("\n").split(";") if a]:
        equal_split = arg.split("=")
        dct_return.update({equal_split[0].strip(): "=".join(equal_split[1:]).strip()})
    return dct_return


cast_dict = {
    "str": _cast_str,
    "int": _cast_int,
    "bool": _cast_bool,
    "dict": _cast_dict,
}


def read_run_config_settings() -> Dict:
    run_config_settings_fpath = f"{os.path.dirname(__file__)}/run_config_settings.json"
    if os.path.isfile(run_config_settings_fpath) is False:
        raise RuntimeError(
            f"(developer error) Looking for run_config_settings.json. Not a valid file path: {run_config_settings_fpath}"
        )

    with open(run_config_settings_fpath) as run_config_settings_file:
        return json.load(run_config_settings_file)


def read_run_config(
    run_config_fpath: Optional[Union[str, pathlib.Path]] = None, overrides: Optional[Dict] = None
) -> Dict:
    """Assemble the run configuration: packaged defaults, then the user's json file, then overrides.

    :param run_config_fpath: Path to a json run config, defaults to None
    :type run_config_fpath: Optional[Union[str, pathlib.Path]], optional
    :param overrides: Option values that win over the file. None values are ignored. Defaults to None
    :type overrides: Optional[Dict], optional
    :raises InvalidRunConfig: Raised if the file cannot be read or an option has an invalid value.
    :return: Dictionary with every option in run_config_settings.json. A relative cvr_path is resolved against
        the run config file's directory.
    :rtype: Dict
    """
    run_config_settings = read_run_config_settings()

    run_config = {}
    if run_config_fpath is not None:
        run_config_fpath = pathlib.Path(run_config_fpath)
        if os.path.isfile(run_config_fpath) is False:
            raise InvalidRunConfig(f"not a valid file path: {run_config_fpath}")
        try:
            with open(run_config_fpath) as run_config_file:
                run_config = json.load(run_config_file)
        except (OSError, json.JSONDecodeError) as err:
            raise InvalidRunConfig(f"could not read run config {run_config_fpath}: {err}") from err
        if not isinstance(run_config, dict):
            raise InvalidRunConfig(f"run config {run_config_fpath} must hold a json object")

    for option in list(run_config):
        if option not in run_config_settings:
            print(f'info -- "{option}" is an unrecognized option in run config, it will be ignored.')
            del run_config[option]

    if overrides:
        run_config.update({k: v for k, v in overrides.items() if v is not None})

    # add in defaults for missing options
    for field in run_config_settings:
        if field not in run_config:
            run_config.update({field: run_config_settings[field]["default"]})

    for field, setting in run_config_settings.items():
        try:
            run_config[field] = cast_dict[setting["type"]](run_config[field])
        except (TypeError, ValueError) as err:
            raise InvalidRunConfig(f'invalid value ({run_config[field]!r}) for option "{field}": {err}') from err

    if run_config["tie_break"] not in InstantRunoff.TIE_BREAK_POLICIES:
        raise InvalidRunConfig(
            f'tie_break must be one of {InstantRunoff.TIE_BREAK_POLICIES}, got "{run_config["tie_break"]}"'
        )
    if run_config["majority_basis"] not in InstantRunoff.MAJORITY_BASES:
        raise InvalidRunConfig(
            f'majority_basis must be one of {InstantRunoff.MAJORITY_BASES}, got "{run_config["majority_basis"]}"'
        )
    try:
        run_config["choice_names"] = {int(k): str(v) for k, v in run_config["choice_names"].items()}
    except ValueError as err:
        raise InvalidRunConfig(f"choice_names keys must be choice numbers: {err}") from err

    cvr_path = pathlib.Path(run_config["cvr_path"])
    cvr_path_from_file = (overrides or {}).get("cvr_path") is None
    if not cvr_path.is_absolute() and run_config_fpath is not None and cvr_path_from_file:
        cvr_path = run_config_fpath.parent / cvr_path
    run_config["cvr_path"] = cvr_path

    # store file location
    run_config["run_config_file_path"] = run_config_fpath

    return run_config
