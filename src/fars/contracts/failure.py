"""Failure types and policies for FARS data access.

Two families of errors:

- FarsError and its subclasses: problems with the data a caller asked for
  (missing year file, unusable schema, unknown state). Surfaced to callers.
- ContractViolation: a stage did not produce what it promised. A bug.
"""

from enum import Enum


class FailurePolicy(str, Enum):
    """How an operation reacts to a failing year.

    FAIL_FAST: Raise immediately (single-year operations)
    SKIP_YEAR: Log a warning, leave the slot empty, continue (multi-year)
    """
    FAIL_FAST = "fail_fast"
    SKIP_YEAR = "skip_year"


class FarsError(Exception):
    """Base class for data errors raised to callers."""


class FarsFileNotFoundError(FarsError, FileNotFoundError):
    """The accident file for a requested year does not exist."""


class SchemaError(FarsError, ValueError):
    """A required column is missing or cannot take its declared type."""


class InvalidStateError(FarsError, ValueError):
    """The requested state code does not occur in the year's data."""


class UnreadableFileError(FarsError, OSError):
    """The accident file exists but is truncated, corrupt or not CSV."""


class ContractViolation(RuntimeError):
    """Raised when a stage contract is violated.

    Key distinction:
    - ValueError / ValidationError: User or config error
    - FarsError: Requested data is missing or unusable
    - ContractViolation: Logic bug (programmer error)
    """
    pass
