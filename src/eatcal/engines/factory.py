"""
eatcal.engines.factory
----------------------
Transforms pure data specifications into live calendar objects.
"""

from __future__ import annotations

from eatcal.core.types import CalendarSpec
from eatcal.engines.gregorian import GregorianCalendar


def make_calendar(spec: CalendarSpec) -> GregorianCalendar:
    """The universal entry point. Overflow-unsafe specs fail here, not at conversion time."""
    if not isinstance(spec, CalendarSpec):
        raise TypeError(f"Unknown spec type: {type(spec)}")
    return GregorianCalendar(spec)
