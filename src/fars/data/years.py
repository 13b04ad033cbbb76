"""Load several FARS years at once.

A year that cannot be loaded does not stop the batch: it is logged as a
warning and its slot holds no table. read_year_results() returns the
per-year outcome with the failure reason; load_years() returns only the
tables (or None), in request order.
"""

import logging
from collections.abc import Iterable
from typing import Any, List, Optional

import pandas as pd
from pydantic import BaseModel, ConfigDict

from fars.contracts import FailurePolicy, FarsError, SchemaError, assert_year_table
from fars.data.reader import READ_ERRORS, build_filename, coerce_year, load_records
from fars.schemas import InternalConfig, default_config

__all__ = ['YearResult', 'read_year_results', 'load_years']

logger = logging.getLogger(__name__)

# Errors that make one year unusable without being a bug. load_records wraps
# read failures in UnreadableFileError; the rest are listed for direct callers.
YEAR_ERRORS = (FarsError, ValueError, TypeError) + READ_ERRORS


class YearResult(BaseModel):
    """Outcome of loading one requested year.

    Attributes
    ----------
    year : Any
        The year value as requested.
    table : pd.DataFrame or None
        Two-column (MONTH, year) table when loading succeeded.
    error : str or None
        Why the year could not be loaded.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    year: Any
    table: Optional[pd.DataFrame] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.table is not None


def _as_year_list(years) -> list:
    if isinstance(years, (str, bytes)) or not isinstance(years, Iterable):
        return [years]
    return list(years)


def _read_year(year, config: InternalConfig) -> YearResult:
    filename = build_filename(year, config)
    year_value = coerce_year(year)
    records = load_records(filename, config)

    if "MONTH" not in records.columns:
        raise SchemaError(f"file '{filename}' has no MONTH column")

    table = records[["MONTH"]].assign(year=year_value)
    assert_year_table(table, year_value)
    return YearResult(year=year, table=table)


def read_year_results(years, config: Optional[InternalConfig] = None) -> List[YearResult]:
    """Load the (MONTH, year) table of every requested year.

    Parameters
    ----------
    years : iterable of int/float/str, or a single year
        Requested years. Duplicates are loaded independently.
    config : InternalConfig, optional
        Runtime configuration (data directory, filename template).

    Returns
    -------
    list of YearResult
        One result per requested year, in request order. Failed years carry
        ``table=None`` and the error message.

    Notes
    -----
    Failures follow ``FailurePolicy.SKIP_YEAR``: each is logged as
    ``invalid year: <year>`` at WARNING level and the batch continues.
    """
    config = config or default_config()
    requested = _as_year_list(years)
    policy = FailurePolicy.SKIP_YEAR

    results = []
    for year in requested:
        try:
            results.append(_read_year(year, config))
        except YEAR_ERRORS as e:
            logger.warning("invalid year: %s (%s)", year, e)
            results.append(YearResult(year=year, error=str(e)))

    n_ok = sum(1 for r in results if r.ok)
    logger.info("Loaded %d of %d requested years (policy=%s)", n_ok, len(results), policy.value)
    return results


def load_years(years, config: Optional[InternalConfig] = None) -> List[Optional[pd.DataFrame]]:
    """Load the (MONTH, year) table of every requested year.

    Returns a list the same length and order as ``years``; each element is a
    DataFrame with columns ``MONTH`` and ``year``, or ``None`` where the year
    could not be loaded.

    Examples
    --------
    >>> tables = load_years([2013, 2014])
    >>> tables[0].columns.tolist()
    ['MONTH', 'year']
    """
    return [result.table for result in read_year_results(years, config)]
