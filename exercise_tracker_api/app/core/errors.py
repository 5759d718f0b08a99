"""
Error taxonomy shared by the store adapter, services and endpoints.

Services raise these exceptions; endpoints translate them into
plain-text responses (404 for ``NotFoundError``, 500 otherwise).
"""


class TrackerError(Exception):
    """Base class for all errors raised by the exercise tracker."""


class NotFoundError(TrackerError):
    """A referenced record (currently only users) does not exist."""


class StorageError(TrackerError):
    """The store rejected or failed an operation."""


class ValidationError(TrackerError):
    """A request carried missing or malformed fields."""
