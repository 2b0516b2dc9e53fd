"""Domain-level exceptions.

Every failure aborts the whole operation that raised it. All of them
subclass DomainException so the CLI layer can catch them uniformly and
display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class Unauthorized(DomainException):
    """The caller is not the vendor, owner or approver the operation needs."""


class InvalidInput(DomainException):
    """Malformed request, e.g. product ids and quantities of different lengths."""


class InsufficientResource(DomainException):
    """Not enough stock, or not enough payment."""


class AlreadyDone(DomainException):
    """Duplicate approval, or an order that is already fulfilled."""


class NotEligible(DomainException):
    """Approval attempted on an order below the high-value threshold."""


class ArithmeticFault(DomainException):
    """A price computation produced a value outside the currency domain."""


class TransferFailed(DomainException):
    """The payment gateway rejected a refund transfer."""


class EntityNotFoundError(DomainException):
    """A record requested by a read-only view does not exist."""
