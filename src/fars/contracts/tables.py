"""Table contracts for each stage.

- record table: what load_records() hands out
- year table: the (MONTH, year) projection built per year
- summary table: the month-by-year pivot
"""

import pandas as pd
from fars.contracts.base import require


def assert_record_table(df: pd.DataFrame) -> None:
    """Enforce the loader contract: a DataFrame with named columns."""
    require(
        isinstance(df, pd.DataFrame),
        f"Record contract violated: output is {type(df)}, expected DataFrame"
    )
    require(
        df.columns.is_unique,
        "Record contract violated: duplicate column names"
    )


def assert_year_table(df: pd.DataFrame, year: int) -> None:
    """Enforce the per-year projection contract.

    Parameters
    ----------
    df : pd.DataFrame
        Output of the multi-year loader for one year.
    year : int
        The year the table was built for.

    Raises
    ------
    ContractViolation
        If columns are not exactly (MONTH, year) or the year column is
        not constant.
    """
    require(
        isinstance(df, pd.DataFrame),
        f"Year table contract violated: output is {type(df)}, expected DataFrame"
    )
    require(
        list(df.columns) == ["MONTH", "year"],
        f"Year table contract violated: columns {list(df.columns)}, expected ['MONTH', 'year']"
    )
    require(
        bool((df["year"] == year).all()),
        f"Year table contract violated: 'year' column is not constant {year}"
    )


def assert_summary_table(df: pd.DataFrame, complete_months: bool) -> None:
    """Enforce the summary contract.

    MONTH is the first column and ascending; with complete_months the rows
    are exactly months 1..12.
    """
    require(
        isinstance(df, pd.DataFrame),
        f"Summary contract violated: output is {type(df)}, expected DataFrame"
    )
    require(
        len(df.columns) > 0 and df.columns[0] == "MONTH",
        f"Summary contract violated: first column is not 'MONTH' ({list(df.columns)})"
    )
    require(
        df["MONTH"].is_monotonic_increasing,
        "Summary contract violated: MONTH is not ascending"
    )
    if complete_months:
        require(
            df["MONTH"].tolist() == list(range(1, 13)),
            f"Summary contract violated: got {len(df)} month rows, expected 1..12"
        )
