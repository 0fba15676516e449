"""Diagnostics package.

Light-weight text tools plus the numpy-based leap-year statistics
(plots need the `diagnostics` extra for matplotlib).
"""

__all__ = ["pretty_month", "new_years_table", "round_trip", "leap_years"]
