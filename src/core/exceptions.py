"""Custom exception classes for the family schedule backend.

Domain failures travel as ``Err`` results (see ``core.result``). The
exceptions here cover the cases that are not per-request outcomes.
"""


class FamilyScheduleError(Exception):
    """Base exception for all family schedule backend errors."""

    pass


class ConfigurationError(FamilyScheduleError):
    """Raised when there is a configuration error."""

    pass
