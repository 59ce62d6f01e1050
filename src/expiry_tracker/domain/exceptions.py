"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class DuplicateProductError(ValidationError):
    """A product with the same barcode and lot is already registered."""


class DuplicateUserError(ValidationError):
    """The username or email is already registered."""


class InvalidStateTransitionError(ValidationError):
    """The product's current status does not allow the requested change."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""
