"""`fars` - read, summarize and map FARS fatal accident data.

FARS is the NHTSA Fatality Analysis Reporting System: one accident file per
year, one row per fatal crash.

Subpackages:
- data: Filename building, single and multi-year loading
- analysis: Month-by-year summary
- visualization: State accident maps
- schemas: Layered configuration
- contracts: Failure types and stage contracts
- cli: Command-line entry point
"""

__version__ = "0.1.0"

from fars.data import build_filename, load_records, load_years, read_year_results
from fars.analysis import summarize_years
from fars.visualization import map_state

__all__ = [
    'build_filename',
    'load_records',
    'load_years',
    'read_year_results',
    'summarize_years',
    'map_state',
]
