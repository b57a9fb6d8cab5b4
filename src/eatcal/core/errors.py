class EatcalError(Exception):
    """Base error."""

class ConfigurationError(EatcalError):
    """Raised when a (year type, epoch) configuration cannot be made overflow-safe."""

class AffineBoundError(ConfigurationError):
    """Raised while building a calendar when a reciprocal division step could be fed beyond its proven bound."""

class PreconditionError(EatcalError, ValueError):
    """Base for call-time contract violations."""

class EpochDayRangeError(PreconditionError):
    """Raised when an epoch day lies outside [min_epoch_day, max_epoch_day]."""

class InvalidDateError(PreconditionError):
    """Raised when a date is outside the year range or its day does not fit its month."""

class DurationRangeError(PreconditionError):
    """Raised when a Duration's day or month field exceeds the configuration's duration widths."""
