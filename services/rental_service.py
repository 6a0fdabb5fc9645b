"""
Сервис управления арендами: просмотр, возврат автомобиля, штрафы
"""
from typing import List

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from database.models.rental import Rental
from database.repositories import CustomerRepository, RentalRepository
from services.exceptions import CustomerNotFoundError, RentalNotFoundError
from services.rental_lifecycle import RentalSnapshot, parse_penalty_amount


class RentalService:
    """Операции над существующими арендами"""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.rentals = RentalRepository(session)
        self.customers = CustomerRepository(session)

    async def get_rental(self, rental_id: int) -> Rental:
        rental = await self.rentals.find_by_id(rental_id)
        if not rental:
            raise RentalNotFoundError()
        return rental

    async def list_rentals(self) -> List[Rental]:
        """Все аренды, новые первыми"""
        return await self.rentals.list_all()

    async def list_customer_rentals(self, user_id: int) -> List[Rental]:
        """Аренды клиента, привязанного к пользователю"""
        customer = await self.customers.find_by_user_id(user_id)
        if not customer:
            raise CustomerNotFoundError()
        return await self.rentals.list_for_customer(customer.id)

    async def return_rental(self, rental_id: int) -> Rental:
        """
        Отметить возврат автомобиля

        Повторный возврат завершенной аренды ничего не меняет и не считается ошибкой.
        """
        rental = await self.get_rental(rental_id)
        snapshot = RentalSnapshot.from_model(rental)

        if snapshot.is_completed:
            logger.warning(f"⚠️ Аренда {rental_id} уже завершена, повторный возврат")
            return rental

        await self.rentals.update(rental, snapshot.with_return())
        await self.session.commit()

        logger.info(f"✅ Аренда {rental_id} завершена")
        return rental

    async def apply_penalty(self, rental_id: int, amount) -> Rental:
        """
        Начислить штраф по аренде

        Raises:
            ValidationError: некорректная сумма штрафа (проверяется до поиска аренды)
            RentalNotFoundError: аренда не найдена
        """
        value = parse_penalty_amount(amount)

        rental = await self.get_rental(rental_id)
        updated = RentalSnapshot.from_model(rental).with_penalty(value)

        await self.rentals.update(rental, updated)
        await self.session.commit()

        logger.info(
            f"💸 Штраф {value} начислен по аренде {rental_id}: "
            f"итого штрафов {updated.penalty}, к оплате {updated.final_cost}"
        )
        return rental
