class CaljalaliError(Exception):
    """Base error."""

class DateTimeError(CaljalaliError, ValueError):
    """A date could not be built, queried or computed."""

class DateTimeRangeError(DateTimeError):
    """A field value lies outside the bounds the calendar defines for it."""

class InvalidDateError(DateTimeError):
    """Year, month and day are in range but do not name a real day."""

class InvalidEraError(DateTimeError):
    """Raised for any era value other than the single supported era."""

class UnsupportedFieldError(DateTimeError):
    """Raised when querying a field the calendar does not define."""

class UnsupportedUnitError(DateTimeError):
    """Raised when measuring or adding in a unit the calendar does not define."""

class DateParseError(DateTimeError):
    """Raised when text cannot be read as a Persian date."""

class NonPositiveJulianDayError(CaljalaliError, ValueError):
    """Raised when the inverse conversion is given a Julian day <= 0."""
