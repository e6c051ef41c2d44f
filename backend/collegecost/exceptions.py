"""Custom exception hierarchy for the college cost lookup service."""

from __future__ import annotations


class CollegeCostError(Exception):
    """Base exception for all college cost errors."""


class DatasetLoadError(CollegeCostError):
    """Raised when the college cost dataset cannot be loaded."""


class MalformedDataError(CollegeCostError):
    """Raised when a stored cost field is not a valid decimal number."""


class DirectoryNotReadyError(CollegeCostError):
    """Raised when a lookup arrives before the dataset has been loaded."""


class LookupRequestError(CollegeCostError):
    """Base for lookup errors reported to the client as a 400 response."""

    message = "Error: Invalid lookup request"

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class MissingCollegeError(LookupRequestError):
    """Raised when the college query parameter is absent or empty."""

    message = "Error: College name is required"


class CollegeNotFoundError(LookupRequestError):
    """Raised when the requested college is not in the directory."""

    message = "Error: College not found"
