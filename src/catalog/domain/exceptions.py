"""Domain-level exceptions.

All storage contract violations are expressed as subclasses of
DomainException so the CLI layer can catch them uniformly and display
user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class InvalidArgumentError(DomainException):
    """The caller supplied an argument the operation cannot accept."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class StorageUnavailableError(DomainException):
    """The backing store could not be read or written."""
