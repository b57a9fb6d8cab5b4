"""Diagnostics package.

- round_trip: sweep both ends of a calendar's epoch-day range through from/to epoch
- bias_table: solved shift, K, L and working widths for every registered calendar
"""

__all__ = ["round_trip", "bias_table"]
