"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
Each error carries the context a caller needs to explain the failure.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class UserNotFoundError(EntityNotFoundError):

    def __init__(self, user_id: str) -> None:
        super().__init__(f"User '{user_id}' does not exist")
        self.user_id = user_id


class ProductNotFoundError(EntityNotFoundError):

    def __init__(self, product_id: str) -> None:
        super().__init__(f"Product with ID '{product_id}' not found")
        self.product_id = product_id


class OrderNotFoundError(EntityNotFoundError):

    def __init__(self, order_id: int) -> None:
        super().__init__(f"Order #{order_id} not found")
        self.order_id = order_id


class CartMismatchError(ValidationError):
    """Some requested cart items do not exist or belong to another user.

    The two cases are deliberately reported as one error kind.
    """

    def __init__(self, requested: list[int], resolved: list[int]) -> None:
        super().__init__(
            "One or more cart items do not exist or do not belong to the user "
            f"(requested {len(requested)}, found {len(resolved)})"
        )
        self.requested = list(requested)
        self.resolved = list(resolved)


class InsufficientStockError(ValidationError):

    def __init__(
        self, product_id: str, product_name: str, requested: int, available: int
    ) -> None:
        super().__init__(
            f"Insufficient stock for {product_name} "
            f"(need {requested}, have {available} in stock)"
        )
        self.product_id = product_id
        self.product_name = product_name
        self.requested = requested
        self.available = available


class InvalidStatusError(ValidationError):

    def __init__(self, value: str, valid_statuses: list[str]) -> None:
        super().__init__(
            f"Invalid status '{value}'. Valid statuses are: {', '.join(valid_statuses)}"
        )
        self.value = value
        self.valid_statuses = list(valid_statuses)


class InvalidTransitionError(ValidationError):

    def __init__(self, current: str, requested: str) -> None:
        super().__init__(
            f"Cannot change order status from {current} to {requested}"
        )
        self.current = current
        self.requested = requested


class NotificationFailure(DomainException):
    """A notification could not be delivered.

    Non-fatal: publishers catch and log it, it never reaches a caller.
    """
