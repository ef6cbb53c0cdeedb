"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class InvalidInput(DomainException):
    """A selection value (quantity, channel) is malformed."""


class EmptyOrder(DomainException):
    """An order was submitted without any selected products."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""
