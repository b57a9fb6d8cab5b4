"""eatcal public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    list_calendars,
    calendar_info,
    get_calendar,
    make_calendar,
    register_calendar,
    from_epoch,
    to_epoch,
    add,
    weekday,
    epoch_bounds,
    date,
)
from .core.errors import (
    EatcalError,
    ConfigurationError,
    PreconditionError,
    EpochDayRangeError,
    InvalidDateError,
    DurationRangeError,
)
from .core.ints import IntType, I16, I32, I64, U16, U32, U64
from .core.types import CalendarId, CalendarSpec, CivilDate, Date, Duration, Month, Weekday
from .engines.gregorian import GregorianCalendar, gregorian
from .engines.rules import ERA_DAYS, ERA_YEARS, days_in_month, is_leap
from .engines.span import UNIX, WINDOWS, day_of_year, days_since

__version__ = "0.1.0"

__all__ = [
    "list_calendars",
    "calendar_info",
    "get_calendar",
    "make_calendar",
    "register_calendar",
    "from_epoch",
    "to_epoch",
    "add",
    "weekday",
    "epoch_bounds",
    "date",
    "EatcalError",
    "ConfigurationError",
    "PreconditionError",
    "EpochDayRangeError",
    "InvalidDateError",
    "DurationRangeError",
    "IntType",
    "I16",
    "I32",
    "I64",
    "U16",
    "U32",
    "U64",
    "CalendarId",
    "CalendarSpec",
    "CivilDate",
    "Date",
    "Duration",
    "Month",
    "Weekday",
    "GregorianCalendar",
    "gregorian",
    "ERA_DAYS",
    "ERA_YEARS",
    "days_in_month",
    "is_leap",
    "UNIX",
    "WINDOWS",
    "day_of_year",
    "days_since",
]
