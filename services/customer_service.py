"""
Сервис профилей клиентов
"""
from typing import Any, Dict, List

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from database.models.customer import Customer
from database.models.user import User
from database.repositories import CustomerRepository
from services.exceptions import ConflictError, NotFoundError


class CustomerService:
    """CRUD для профилей клиентов"""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.customers = CustomerRepository(session)

    async def list_customers(self) -> List[Customer]:
        return await self.customers.list()

    async def get_customer(self, customer_id: int) -> Customer:
        customer = await self.customers.find_by_id(customer_id)
        if not customer:
            raise NotFoundError("Customer not found")
        return customer

    async def create_customer(self, user: User, data: Dict[str, Any]) -> Customer:
        """Создать профиль клиента для пользователя (не более одного)"""
        existing = await self.customers.find_by_user_id(user.id)
        if existing:
            raise ConflictError("Customer profile already exists for this user.")

        customer = await self.customers.add(Customer(user_id=user.id, **data))
        await self.session.commit()
        logger.info(f"👤 Создан профиль клиента {customer.id} для пользователя {user.id}")
        return customer

    async def update_customer(self, customer_id: int, data: Dict[str, Any]) -> Customer:
        customer = await self.get_customer(customer_id)
        if data:
            await self.customers.update(customer, data)
            await self.session.commit()
        return customer

    async def delete_customer(self, customer_id: int) -> None:
        customer = await self.get_customer(customer_id)
        await self.customers.delete(customer)
        await self.session.commit()
        logger.info(f"🗑️ Профиль клиента {customer_id} удален")
