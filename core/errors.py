"""
Exception types and reason codes shared by the resolver, the compass and
their collaborators.
"""

# Reasons the compass can end up unavailable.
SENSOR_MISSING = "sensor_missing"
PERMISSION_DENIED = "permission_denied"
NO_FIX = "no_fix"
SENSOR_ERROR = "sensor_error"

REASON_MESSAGES = {
    SENSOR_MISSING: "This device has no compass sensor.",
    PERMISSION_DENIED: "Location permission is required to find the Qibla direction.",
    NO_FIX: "Location could not be determined. Turn on GPS and try again.",
    SENSOR_ERROR: "An error occurred while reading location or sensor data.",
}


class VakitError(Exception):
    """Base class for every error raised by this package."""


class InsufficientData(VakitError):
    """Raised when the resolver is asked for a next prayer before any slots exist."""


class ReasonedError(VakitError):
    def __init__(self, reason: str, detail: str = ""):
        super().__init__(detail or REASON_MESSAGES.get(reason, reason))
        self.reason = reason

    @property
    def message(self) -> str:
        return REASON_MESSAGES.get(self.reason, self.reason)


class LocationUnavailable(ReasonedError):
    """Raised by location providers. `reason` is PERMISSION_DENIED or NO_FIX."""


class CompassUnavailable(ReasonedError):
    """The compass cannot track. `reason` is one of the codes above."""
