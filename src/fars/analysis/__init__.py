"""Aggregations over loaded FARS years."""

from .summary import summarize_tables, summarize_years

__all__ = ['summarize_tables', 'summarize_years']
