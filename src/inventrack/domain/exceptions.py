"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
Storage failures are not business errors and use their own base class.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Input was malformed or a business rule was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class ProductNotFoundError(EntityNotFoundError):
    """No product exists with the given id."""

    def __init__(self, product_id: object = None) -> None:
        super().__init__("Product not found")
        self.product_id = product_id


class InsufficientStockError(DomainException):
    """An OUT movement would drive stock below zero."""

    def __init__(self, product_id: int | None = None, available: int = 0, requested: int = 0) -> None:
        super().__init__("Insufficient stock")
        self.product_id = product_id
        self.available = available
        self.requested = requested


class StorageError(Exception):
    """The durable store could not be read or written.

    Raised by units of work; any uncommitted changes have already been
    discarded by the time this propagates.
    """

    def __init__(
        self, message: str = "Storage operation failed", original_exception: Exception | None = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.original_exception = original_exception

    def __str__(self) -> str:
        if self.original_exception:
            return f"{self.message} (Original error: {self.original_exception})"
        return self.message
