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


class DuplicateIdError(ValidationError):
    """An id is already taken in the registry of its kind."""


class InvalidTypeError(ValidationError):
    """A type tag does not name a known computer, component or peripheral kind."""


class DuplicateTypeError(ValidationError):
    """A computer already holds an item of the same kind."""


class BudgetExceededError(ValidationError):
    """No registered computer fits within the requested budget."""


class UnknownComputerError(EntityNotFoundError):
    """The referenced computer id is not registered."""


class NotFoundError(EntityNotFoundError):
    """A computer holds no item of the requested kind."""
