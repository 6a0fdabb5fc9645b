"""Иерархия исключений бизнес-логики проката."""


class CarRentalError(Exception):
    """Base exception for all car rental errors."""


class NotFoundError(CarRentalError):
    """Raised when a referenced entity does not exist."""


class CustomerNotFoundError(NotFoundError):
    """Raised when a user has no customer profile."""

    def __init__(self, message: str = "Customer profile not found for this user."):
        super().__init__(message)


class CarModelNotFoundError(NotFoundError):
    """Raised when a car model id does not resolve."""

    def __init__(self, message: str = "Car model not found."):
        super().__init__(message)


class RentalNotFoundError(NotFoundError):
    """Raised when a rental id does not resolve."""

    def __init__(self, message: str = "Rental not found."):
        super().__init__(message)


class ValidationError(CarRentalError):
    """Raised when an operation receives invalid input."""


class ConflictError(CarRentalError):
    """Raised when an entity already exists."""
