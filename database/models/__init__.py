from .user import User, UserRole
from .customer import Customer
from .car_model import CarModel, CarCategory
from .rental import Rental, RentalStatus

__all__ = [
    "User", "UserRole",
    "Customer",
    "CarModel", "CarCategory",
    "Rental", "RentalStatus",
]
