"""Reading FARS accident files: one year, or many."""

from .reader import build_filename, coerce_year, load_records
from .years import YearResult, load_years, read_year_results

__all__ = [
    'build_filename',
    'coerce_year',
    'load_records',
    'YearResult',
    'load_years',
    'read_year_results',
]
