"""Diagnostics package.

- new_year_table, round_trip: always available
- new_year_scatter: needs the diagnostics extras (numpy, matplotlib)
"""

__all__ = ["new_year_table", "round_trip", "new_year_scatter"]
