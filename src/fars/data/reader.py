"""Read yearly FARS accident files into pandas DataFrames.

FARS (the NHTSA Fatality Analysis Reporting System) publishes one accident
file per year. This module builds the expected filename for a year and reads
a file into a DataFrame, applying the declared dtypes of the columns the
rest of the package relies on.
"""

import logging
import lzma
import zipfile
import zlib
from pathlib import Path
from typing import Optional, Union

import pandas as pd

from fars.contracts import (
    FarsFileNotFoundError,
    SchemaError,
    UnreadableFileError,
    assert_record_table,
)
from fars.schemas import InternalConfig, default_config

__all__ = ['COLUMN_DTYPES', 'BUNDLED_DATA_DIR', 'READ_ERRORS', 'coerce_int', 'coerce_year', 'build_filename', 'load_records']

logger = logging.getLogger(__name__)

# Declared types for the columns used downstream. Other columns keep the
# types pandas infers.
COLUMN_DTYPES = {
    "MONTH": "int64",
    "STATE": "int64",
    "LONGITUD": "float64",
    "LATITUDE": "float64",
}

BUNDLED_DATA_DIR = Path(__file__).resolve().parent.parent / "extdata"

# Truncated or corrupt files. Decompressors disagree on the exception type:
# bz2 raises EOFError or OSError, xz raises LZMAError, gzip zlib.error.
READ_ERRORS = (
    OSError,
    EOFError,
    lzma.LZMAError,
    zlib.error,
    zipfile.BadZipFile,
    UnicodeDecodeError,
    pd.errors.ParserError,
    pd.errors.EmptyDataError,
)


def coerce_int(value, name: str = "value") -> int:
    """Convert a numeric value to int, truncating any fractional part.

    Accepts ints, floats and numeric strings (``"2014"``, ``"22.0"``).

    Raises
    ------
    TypeError
        For booleans and non-numeric objects.
    ValueError
        For strings that are not numbers, NaN or infinity.
    """
    if isinstance(value, bool):
        raise TypeError(f"{name} must be a number, got {value!r}")
    if isinstance(value, str):
        value = float(value.strip())
    try:
        return int(value)
    except OverflowError as e:
        raise ValueError(f"{name} must be finite, got {value!r}") from e


def coerce_year(year) -> int:
    """Convert a year value to int (see :func:`coerce_int`)."""
    return coerce_int(year, "year")


def _data_dir(config: InternalConfig) -> Path:
    if config.data.data_dir is None:
        return BUNDLED_DATA_DIR
    return Path(config.data.data_dir).expanduser()


def build_filename(year, config: Optional[InternalConfig] = None) -> Path:
    """Build the path of the accident file for ``year``.

    Parameters
    ----------
    year : int, float or str
        Data year. Coerced with :func:`coerce_year`.
    config : InternalConfig, optional
        Supplies ``data.data_dir`` and ``data.filename_template``.

    Returns
    -------
    Path
        ``<data_dir>/accident_<year>.csv.bz2`` with the default template.
        The file is not checked for existence.

    Examples
    --------
    >>> build_filename(2014).name
    'accident_2014.csv.bz2'
    >>> build_filename(2013.7).name
    'accident_2013.csv.bz2'
    """
    config = config or default_config()
    year = coerce_year(year)
    filename = config.data.filename_template.format(year=year)
    return _data_dir(config) / filename


def _apply_schema(df: pd.DataFrame, config: InternalConfig, path: Path) -> pd.DataFrame:
    """Check required columns and cast them to their declared types."""
    required = config.data.required_columns
    missing = [col for col in required if col not in df.columns]

    if missing:
        message = f"file '{path}' is missing required columns: {', '.join(missing)}"
        if config.data.on_missing_columns == "reject":
            raise SchemaError(message)
        logger.warning(message)

    for col in required:
        dtype = COLUMN_DTYPES.get(col)
        if dtype is None or col not in df.columns:
            continue
        try:
            df[col] = df[col].astype(dtype)
        except (ValueError, TypeError) as e:
            raise SchemaError(
                f"column '{col}' in file '{path}' cannot be read as {dtype}: {e}"
            ) from e

    return df


def load_records(path: Union[Path, str], config: Optional[InternalConfig] = None) -> pd.DataFrame:
    """Read one FARS accident file into a DataFrame.

    Compressed (``.bz2``, ``.gz``, ``.zip``, ``.xz``) and plain CSV files
    are both accepted; compression is inferred from the suffix.

    Parameters
    ----------
    path : Path or str
        Path to the accident file, usually from :func:`build_filename`.
    config : InternalConfig, optional
        Supplies the required columns and the missing-column policy.

    Returns
    -------
    pd.DataFrame
        All rows and columns of the file. Required columns carry the dtypes
        in ``COLUMN_DTYPES``.

    Raises
    ------
    FarsFileNotFoundError
        If ``path`` does not exist.
    UnreadableFileError
        If the file is truncated, corrupt or not parseable as CSV.
    SchemaError
        If a required column is missing (policy ``"reject"``) or cannot be
        cast to its declared type.

    Examples
    --------
    >>> df = load_records(build_filename(2014))
    >>> df[["MONTH", "STATE"]].head()
    """
    config = config or default_config()
    path = Path(path)

    if not path.exists():
        raise FarsFileNotFoundError(f"file '{path}' does not exist")

    try:
        df = pd.read_csv(path, low_memory=False)
    except READ_ERRORS as e:
        raise UnreadableFileError(f"file '{path}' could not be read: {e}") from e
    df = _apply_schema(df, config, path)

    assert_record_table(df)
    logger.debug("Read %d records (%d columns) from %s", len(df), len(df.columns), path)
    return df
