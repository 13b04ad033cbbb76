"""Map the fatal accidents of one state in one year.

FARS marks unrecorded coordinates with out-of-range values (longitude above
900, latitude above 90). Those become NaN before plotting so they neither
appear as points nor widen the map bounds.
"""

import logging
from pathlib import Path
from typing import Optional, Union

import pandas as pd

from fars.contracts import InvalidStateError, SchemaError
from fars.data.reader import build_filename, coerce_int, coerce_year, load_records
from fars.schemas import InternalConfig, default_config
from fars.visualization.plotter import StateMapPlotter

__all__ = ['select_state', 'sanitize_coordinates', 'map_state']

logger = logging.getLogger(__name__)

MAP_COLUMNS = ["STATE", "LONGITUD", "LATITUDE"]


def select_state(records: pd.DataFrame, state_code: int) -> pd.DataFrame:
    """Rows of ``records`` whose STATE equals ``state_code``."""
    return records.loc[records["STATE"] == state_code].reset_index(drop=True)


def sanitize_coordinates(
    df: pd.DataFrame,
    longitude_sentinel: float = 900.0,
    latitude_sentinel: float = 90.0,
) -> pd.DataFrame:
    """Replace sentinel coordinates with NaN.

    ``LONGITUD > longitude_sentinel`` and ``LATITUDE > latitude_sentinel``
    are masked independently. No row is dropped.
    """
    out = df.copy()
    out["LONGITUD"] = out["LONGITUD"].mask(out["LONGITUD"] > longitude_sentinel)
    out["LATITUDE"] = out["LATITUDE"].mask(out["LATITUDE"] > latitude_sentinel)
    return out


def map_state(
    state_code,
    year,
    config: Optional[InternalConfig] = None,
    plotter=None,
    output_path: Optional[Union[Path, str]] = None,
):
    """Plot the accident locations of one state for one year.

    Parameters
    ----------
    state_code : int or str
        FARS state number (FIPS code), e.g. 22 for Louisiana, 11 for the
        District of Columbia. Truncated to int like the year (``"22.0"`` is 22).
    year : int, float or str
        Data year.
    config : InternalConfig, optional
        Runtime configuration (data location, sentinels, plot settings).
    plotter : object, optional
        Anything with ``plot_state(points, state_code, year, output_path=...)``.
        Defaults to ``StateMapPlotter(config)``.
    output_path : Path or str, optional
        Passed through to the plotter.

    Returns
    -------
    object or None
        Whatever the plotter returns, or None when nothing was plotted.

    Raises
    ------
    FarsFileNotFoundError
        If the year's file does not exist.
    SchemaError
        If the records lack STATE, LONGITUD or LATITUDE (possible with
        ``data.on_missing_columns="warn"``).
    InvalidStateError
        If ``state_code`` does not occur in the year's STATE column.

    Examples
    --------
    >>> map_state(22, 2014, output_path="plots/la_2014.png")  # Louisiana
    'plots/la_2014.png'
    """
    config = config or default_config()
    records = load_records(build_filename(year, config), config)
    year = coerce_year(year)
    state_code = coerce_int(state_code, "state code")

    missing = [col for col in MAP_COLUMNS if col not in records.columns]
    if missing:
        raise SchemaError(f"cannot map year {year}: missing columns {', '.join(missing)}")

    if state_code not in records["STATE"].unique():
        raise InvalidStateError(f"invalid STATE number: {state_code}")

    state_records = select_state(records, state_code)
    if state_records.empty:
        logger.info("no accidents to plot")
        return None

    points = sanitize_coordinates(
        state_records,
        config.mapping.longitude_sentinel,
        config.mapping.latitude_sentinel,
    )

    located = points["LONGITUD"].notna() & points["LATITUDE"].notna()
    if not located.any():
        logger.warning("State %d in %d has no recorded coordinates; nothing to plot", state_code, year)
        return None

    logger.info(
        "Mapping %d accidents for state %d in %d (%d without coordinates)",
        len(points), state_code, year, int((~located).sum()),
    )
    plotter = plotter or StateMapPlotter(config)
    return plotter.plot_state(points, state_code, year, output_path=output_path)
