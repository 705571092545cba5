"""
Contains the sheet parser functions, which pull the block of ballot cells out of a sheet export.
"""

from typing import List, Union

import os
import pathlib

import pandas as pd

from rcv_tally.errors import SourceUnavailable
from rcv_tally.grid import GridRegion


def read_sheet_csv(cvr_path: Union[str, pathlib.Path]) -> pd.DataFrame:
    """Read a sheet exported as csv. The first line is the header row and fixes the number of
    fields every data record must have. All cells are kept as raw strings.

    :param cvr_path: Path to the csv file.
    :type cvr_path: Union[str, pathlib.Path]
    :raises SourceUnavailable: Raised if the file is missing, cannot be read as csv,
        or has a record with a different number of fields than the header.
    :return: One row per data record, with columns in file order.
    :rtype: pd.DataFrame
    """
    cvr_path = pathlib.Path(cvr_path)
    if os.path.isfile(cvr_path) is False:
        raise SourceUnavailable(cvr_path, "no such file")

    # read the header as a record so long records fail to tokenize instead of becoming an index
    try:
        df = pd.read_csv(
            cvr_path, encoding="utf8", dtype=str, keep_default_na=False, header=None, index_col=False
        )
    except (OSError, UnicodeDecodeError, pd.errors.ParserError, pd.errors.EmptyDataError) as err:
        raise SourceUnavailable(cvr_path, str(err)) from err

    # short records are padded with NaN
    short_records = df.index[df.isna().any(axis=1)]
    if len(short_records):
        raise SourceUnavailable(
            cvr_path, f"record {short_records[0] + 1} has fewer fields than the header ({len(df.columns)})"
        )

    return df.iloc[1:].reset_index(drop=True)


def sheet_region_csv(cvr_path: Union[str, pathlib.Path], region: GridRegion) -> List[List[str]]:
    """Return the cells of `region` from a csv sheet export, one list per sheet row.

    Rows or columns past the end of the file are not returned.

    :param cvr_path: Path to the csv file.
    :type cvr_path: Union[str, pathlib.Path]
    :param region: Block of ballot cells to read.
    :type region: GridRegion
    :raises SourceUnavailable: Raised if the file is missing or unreadable.
    :return: Region rows, each a list of raw cell strings.
    :rtype: List[List[str]]
    """
    df = read_sheet_csv(cvr_path)

    block = df.iloc[
        region.first_record : region.first_record + region.n_rows,
        region.first_field : region.first_field + region.n_cols,
    ]
    return [list(row) for row in block.itertuples(index=False, name=None)]
