"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the service and CLI layers can catch them uniformly.  Anything that is
*not* a DomainException is treated as an internal failure.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class InternalError(DomainException):
    """An unexpected failure, reported to callers with a generic message only."""
