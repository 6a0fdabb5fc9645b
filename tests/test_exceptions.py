"""Tests for the exception hierarchy."""

from services.exceptions import (
    CarModelNotFoundError,
    CarRentalError,
    ConflictError,
    CustomerNotFoundError,
    NotFoundError,
    RentalNotFoundError,
    ValidationError,
)


class TestExceptionHierarchy:
    """Test exception inheritance chain."""

    def test_not_found_errors_share_base(self) -> None:
        for error_class in (CustomerNotFoundError, CarModelNotFoundError, RentalNotFoundError):
            err = error_class()
            assert isinstance(err, NotFoundError)
            assert isinstance(err, CarRentalError)

    def test_customer_and_car_model_errors_are_distinct(self) -> None:
        assert not isinstance(CustomerNotFoundError(), CarModelNotFoundError)
        assert not isinstance(CarModelNotFoundError(), CustomerNotFoundError)

    def test_default_messages(self) -> None:
        assert str(CustomerNotFoundError()) == "Customer profile not found for this user."
        assert str(CarModelNotFoundError()) == "Car model not found."
        assert str(RentalNotFoundError()) == "Rental not found."

    def test_validation_and_conflict_are_car_rental_errors(self) -> None:
        assert isinstance(ValidationError("bad"), CarRentalError)
        assert isinstance(ConflictError("dup"), CarRentalError)
        assert not isinstance(ValidationError("bad"), NotFoundError)
