"""
Расчет стоимости аренды и оформление аренды
"""
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from decimal import Decimal, ROUND_HALF_UP
from typing import Callable, List

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from database.models.car_model import CarModel
from database.models.customer import Customer
from database.models.rental import Rental
from database.repositories import CarModelRepository, CustomerRepository, RentalRepository
from services.discounts import Discount, DiscountContext, evaluate_discounts, total_percentage
from services.exceptions import CarModelNotFoundError, CustomerNotFoundError
from services.rate_table import daily_rate
from services.rental_lifecycle import RentalSnapshot


ONE_DAY = timedelta(days=1)


def rental_duration_days(issue_date: datetime, return_date: datetime) -> int:
    """Длительность аренды в сутках, с округлением половины вверх"""
    microseconds = abs(return_date - issue_date) // timedelta(microseconds=1)
    days = Decimal(microseconds) / (ONE_DAY // timedelta(microseconds=1))
    return int(days.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def apply_discount(price: Decimal, percentage: int) -> Decimal:
    if percentage > 0:
        return price * (1 - Decimal(percentage) / 100)
    return price


@dataclass(frozen=True)
class PriceQuote:
    number_of_days: int
    daily_rate: Decimal
    price_before_discounts: Decimal
    discount_applied: int
    calculated_cost: Decimal
    deposit: Decimal
    final_cost: Decimal
    car_model: CarModel
    customer: Customer
    discount_details: List[Discount] = field(default_factory=list)


def calculate_quote(
    car_model: CarModel,
    customer: Customer,
    rentals_count: int,
    issue_date: datetime,
    return_date: datetime,
    current_year: int,
) -> PriceQuote:
    """
    Рассчитать стоимость аренды без обращения к БД

    Args:
        car_model: Модель автомобиля
        customer: Клиент
        rentals_count: Количество прошлых аренд клиента
        issue_date: Дата выдачи
        return_date: Дата возврата
        current_year: Текущий год (для скидки за возраст автомобиля)

    Returns:
        PriceQuote: Полная разбивка стоимости
    """
    number_of_days = rental_duration_days(issue_date, return_date)
    rate = daily_rate(car_model.category, number_of_days)
    price_before_discounts = number_of_days * rate

    discounts = evaluate_discounts(DiscountContext(
        car_year=car_model.year,
        rentals_count=rentals_count,
        current_year=current_year,
    ))
    discount_applied = total_percentage(discounts)

    calculated_cost = apply_discount(price_before_discounts, discount_applied)
    deposit = Decimal(str(car_model.rental_price))

    return PriceQuote(
        number_of_days=number_of_days,
        daily_rate=rate,
        price_before_discounts=price_before_discounts,
        discount_applied=discount_applied,
        discount_details=discounts,
        calculated_cost=calculated_cost,
        deposit=deposit,
        final_cost=calculated_cost + deposit,
        car_model=car_model,
        customer=customer,
    )


class PricingService:
    """Сервис расчета стоимости и создания аренд"""

    def __init__(self, session: AsyncSession, today: Callable[[], date] = date.today):
        self.session = session
        self.today = today
        self.car_models = CarModelRepository(session)
        self.customers = CustomerRepository(session)
        self.rentals = RentalRepository(session)

    async def quote_price(
        self,
        car_model_id: int,
        user_id: int,
        issue_date: datetime,
        return_date: datetime,
    ) -> PriceQuote:
        """
        Рассчитать стоимость аренды для пользователя

        Raises:
            CustomerNotFoundError: у пользователя нет профиля клиента
            CarModelNotFoundError: модель автомобиля не найдена
        """
        customer = await self.customers.find_by_user_id(user_id)
        if not customer:
            raise CustomerNotFoundError()

        car_model = await self.car_models.find_by_id(car_model_id)
        if not car_model:
            raise CarModelNotFoundError()

        rentals_count = await self.rentals.count_for_customer(customer.id)

        quote = calculate_quote(
            car_model,
            customer,
            rentals_count,
            issue_date,
            return_date,
            current_year=self.today().year,
        )
        logger.debug(
            f"Расчет стоимости: car_model={car_model.id}, customer={customer.id}, "
            f"days={quote.number_of_days}, discount={quote.discount_applied}%, final={quote.final_cost}"
        )
        return quote

    async def create_rental(
        self,
        car_model_id: int,
        user_id: int,
        issue_date: datetime,
        return_date: datetime,
    ) -> Rental:
        """Рассчитать стоимость и сохранить новую активную аренду"""
        quote = await self.quote_price(car_model_id, user_id, issue_date, return_date)

        snapshot = RentalSnapshot(
            car_model_id=quote.car_model.id,
            customer_id=quote.customer.id,
            issue_date=issue_date,
            return_date=return_date,
            calculated_cost=quote.calculated_cost,
            final_cost=quote.final_cost,
            deposit=quote.deposit,
            discount=quote.discount_applied,
        )
        rental = snapshot.to_model()
        # Связанные объекты уже загружены при расчете, повторное чтение не нужно
        rental.car_model = quote.car_model
        rental.customer = quote.customer

        await self.rentals.save(rental)
        await self.session.commit()

        logger.info(
            f"✅ Аренда {rental.id} создана: клиент {quote.customer.id}, "
            f"автомобиль {quote.car_model.id}, итого {quote.final_cost}"
        )
        return rental
