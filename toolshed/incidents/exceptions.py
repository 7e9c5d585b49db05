class IncidentLogError(Exception):
    """Base exception for incident log scraping errors."""


class InvalidPeriodError(IncidentLogError):
    """Raised when the requested month or year is outside the supported range."""


class IncidentFetchError(IncidentLogError):
    """Raised when the incident log page cannot be retrieved."""


class IncidentParseError(IncidentLogError):
    """Raised when the incident log page does not have the expected table layout."""


class IncidentWriteError(IncidentLogError):
    """Raised when the JSON report cannot be written."""
