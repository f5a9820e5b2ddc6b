"""Domain-level exceptions.

Handlers and entities raise these; the CLI turns any DomainException
into a ``click.ClickException``.  Storage errors (``OSError``, bad JSON)
are not wrapped and reach the caller as they are.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested product, variant or lease does not exist."""
