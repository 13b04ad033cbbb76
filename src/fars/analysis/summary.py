"""Month-by-year fatal accident counts.

Concatenates the (MONTH, year) tables of the requested years, counts rows
per (year, MONTH) and pivots years into columns:

    MONTH  2013  2014
        1  2230  2168
        2  1952  1893
      ...
"""

import logging
from typing import Iterable, Optional

import pandas as pd

from fars.contracts import assert_summary_table
from fars.data.years import load_years
from fars.schemas import InternalConfig, default_config

__all__ = ['summarize_tables', 'summarize_years']

logger = logging.getLogger(__name__)

MONTHS = pd.Index(range(1, 13), name="MONTH")


def summarize_tables(tables: Iterable[Optional[pd.DataFrame]],
                     config: Optional[InternalConfig] = None) -> pd.DataFrame:
    """Count rows per (MONTH, year) and pivot years into columns.

    Parameters
    ----------
    tables : iterable of DataFrame or None
        (MONTH, year) tables as returned by ``load_years``. ``None`` entries
        are skipped.
    config : InternalConfig, optional
        ``summary.fill_value`` and ``summary.complete_months`` apply.

    Returns
    -------
    pd.DataFrame
        ``MONTH`` column first, then one nullable ``Int64`` column per year
        (labelled ``"2013"``, ...) in ascending order. Months with no rows
        for a year hold ``<NA>`` unless ``fill_value`` is set.
    """
    config = config or default_config()
    frames = [t for t in tables if isinstance(t, pd.DataFrame)]

    if frames:
        combined = pd.concat(frames, ignore_index=True)
        counts = combined.groupby(["year", "MONTH"]).size().rename("n").reset_index()
        wide = counts.pivot(index="MONTH", columns="year", values="n")
        wide = wide.sort_index(axis=0).sort_index(axis=1)
    else:
        logger.warning("No year could be loaded; summary has no year columns")
        wide = pd.DataFrame(index=pd.Index([], name="MONTH", dtype="int64"))

    if config.summary.complete_months:
        outside = wide.index.difference(MONTHS)
        if len(outside):
            logger.warning("Dropping MONTH values outside 1-12: %s", list(outside))
        wide = wide.reindex(MONTHS)

    if config.summary.fill_value is not None:
        wide = wide.fillna(config.summary.fill_value)

    wide = wide.astype("Int64")
    wide.columns = [str(col) for col in wide.columns]
    wide.index.name = "MONTH"
    summary = wide.reset_index()

    assert_summary_table(summary, config.summary.complete_months)
    return summary


def summarize_years(years, config: Optional[InternalConfig] = None) -> pd.DataFrame:
    """Summarize fatal accident counts by month for the requested years.

    Years whose file cannot be loaded are skipped with a warning (see
    ``load_years``).

    Examples
    --------
    >>> summarize_years([2013, 2014]).columns.tolist()
    ['MONTH', '2013', '2014']
    """
    config = config or default_config()
    tables = load_years(years, config)
    summary = summarize_tables(tables, config)
    logger.info("Summarized %d years into %d month rows", len(summary.columns) - 1, len(summary))
    return summary
