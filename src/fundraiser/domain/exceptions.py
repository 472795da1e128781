"""Domain-level exceptions.

All failures of an order submission are expressed as subclasses of
DomainException so the web and CLI layers can catch them uniformly and
map them to a response without leaking internal details.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """The submission violates a business rule the customer can correct."""


class PersistenceError(DomainException):
    """The order ledger could not be written."""


class TransportError(DomainException):
    """A notification email could not be handed to the mail relay."""
