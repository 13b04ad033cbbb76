"""Contracts and failure types.

- Pydantic validates config correctness
- FarsError subclasses report unusable data to callers
- Contracts validate that each stage produced what it promised
"""

from fars.contracts.failure import (
    ContractViolation,
    FailurePolicy,
    FarsError,
    FarsFileNotFoundError,
    InvalidStateError,
    UnreadableFileError,
    SchemaError,
)
from fars.contracts.base import require
from fars.contracts.tables import (
    assert_record_table,
    assert_year_table,
    assert_summary_table,
)

__all__ = [
    "ContractViolation",
    "FailurePolicy",
    "FarsError",
    "FarsFileNotFoundError",
    "InvalidStateError",
    "UnreadableFileError",
    "SchemaError",
    "require",
    "assert_record_table",
    "assert_year_table",
    "assert_summary_table",
]
