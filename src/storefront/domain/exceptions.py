"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class IncompleteRecordError(DomainException):
    """A nested field needed for a calculation is absent or malformed.

    Orders left half-way through checkout routinely miss variant prices or
    shipment methods, so callers that sum over them treat this as a soft
    failure rather than a crash.
    """
