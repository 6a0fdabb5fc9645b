"""
Жизненный цикл аренды.

RentalSnapshot - неизменяемый снимок аренды. Переходы (возврат, штраф)
возвращают новый снимок, исходный не меняется. Записью снимка в БД
занимается репозиторий.
"""
from dataclasses import dataclass, replace
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Optional

from database.models.rental import Rental, RentalStatus
from services.exceptions import ValidationError


PENALTY_REQUIRED_MESSAGE = "Valid penalty amount is required."

# Денежные суммы хранятся с точностью до копейки (Numeric(10, 2))
CENT = Decimal("0.01")


def parse_penalty_amount(amount) -> Decimal:
    """
    Проверить и привести сумму штрафа к Decimal

    Raises:
        ValidationError: сумма не передана, не число, не конечна, <= 0
            или точнее копейки
    """
    if amount is None or isinstance(amount, bool):
        raise ValidationError(PENALTY_REQUIRED_MESSAGE)

    try:
        value = Decimal(str(amount).strip())
    except (InvalidOperation, ValueError):
        raise ValidationError(PENALTY_REQUIRED_MESSAGE)

    if not value.is_finite() or value <= 0:
        raise ValidationError(PENALTY_REQUIRED_MESSAGE)

    try:
        cents = value.quantize(CENT)
    except InvalidOperation:
        raise ValidationError(PENALTY_REQUIRED_MESSAGE)
    if cents != value:
        raise ValidationError(PENALTY_REQUIRED_MESSAGE)

    return value


@dataclass(frozen=True)
class RentalSnapshot:
    car_model_id: Optional[int]
    customer_id: int
    issue_date: datetime
    return_date: datetime
    calculated_cost: Decimal
    final_cost: Decimal
    deposit: Decimal
    discount: int = 0
    penalty: Decimal = Decimal(0)
    status: RentalStatus = RentalStatus.ACTIVE
    id: Optional[int] = None

    @classmethod
    def from_model(cls, rental: Rental) -> "RentalSnapshot":
        return cls(
            id=rental.id,
            car_model_id=rental.car_model_id,
            customer_id=rental.customer_id,
            issue_date=rental.issue_date,
            return_date=rental.return_date,
            calculated_cost=Decimal(rental.calculated_cost),
            final_cost=Decimal(rental.final_cost),
            deposit=Decimal(rental.deposit),
            discount=rental.discount or 0,
            penalty=Decimal(rental.penalty or 0),
            status=rental.status,
        )

    def to_model(self) -> Rental:
        rental = Rental()
        self.apply_to(rental)
        return rental

    def apply_to(self, rental: Rental) -> None:
        """Перенести поля снимка в ORM-объект (id не переносится)"""
        rental.car_model_id = self.car_model_id
        rental.customer_id = self.customer_id
        rental.issue_date = self.issue_date
        rental.return_date = self.return_date
        rental.calculated_cost = self.calculated_cost
        rental.final_cost = self.final_cost
        rental.deposit = self.deposit
        rental.discount = self.discount
        rental.penalty = self.penalty
        rental.status = self.status

    @property
    def is_completed(self) -> bool:
        return self.status == RentalStatus.COMPLETED

    def with_return(self) -> "RentalSnapshot":
        """Возврат автомобиля: аренда завершается, стоимость не меняется"""
        if self.is_completed:
            return self
        return replace(self, status=RentalStatus.COMPLETED)

    def with_penalty(self, amount) -> "RentalSnapshot":
        """Начислить штраф: увеличивает penalty и final_cost на одну и ту же сумму"""
        value = parse_penalty_amount(amount)
        return replace(
            self,
            penalty=self.penalty + value,
            final_cost=self.final_cost + value,
        )
