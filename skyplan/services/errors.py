"""Engine-specific exceptions."""


class SkyPlanError(Exception):
    """Base exception for all SkyPlan errors."""


class CoordinateError(SkyPlanError, ValueError):
    """Raised when coordinate text or values cannot be interpreted."""


class DMSFormatError(CoordinateError):
    """Raised by strict DMS parsers on malformed text.

    The message is meant to be shown next to the offending input field.
    """

    def __init__(self, text: str, reason: str):
        self.text = text
        self.reason = reason
        super().__init__(reason)


class TimeFormatError(SkyPlanError, ValueError):
    """Raised when a clock string is not a valid 24-hour ``HH:MM``."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Invalid time {text!r}, expected HH:MM")


class ReferenceDataError(SkyPlanError):
    """Raised when an airport or NAVAID dataset cannot be loaded."""
