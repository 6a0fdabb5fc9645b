"""
Доступ к данным: запросы к моделям автомобилей, клиентам и арендам
"""
from decimal import Decimal
from typing import Any, Dict, List, Optional

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from database.models.user import User
from database.models.customer import Customer
from database.models.car_model import CarModel
from database.models.rental import Rental


class UserRepository:
    """Пользователи"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_by_token(self, api_token: str) -> Optional[User]:
        result = await self.session.execute(
            select(User).where(User.api_token == api_token)
        )
        return result.scalar_one_or_none()


class CarModelRepository:
    """Модели автомобилей"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_by_id(self, car_model_id: int) -> Optional[CarModel]:
        return await self.session.get(CarModel, car_model_id)

    async def list(
        self,
        brand: Optional[str] = None,
        category: Optional[str] = None,
        engine_type: Optional[str] = None,
        year: Optional[int] = None,
        min_price: Optional[Decimal] = None,
        max_price: Optional[Decimal] = None,
    ) -> List[CarModel]:
        """Список моделей с фильтрами, отсортированный по марке"""
        query = select(CarModel)

        # Текстовые фильтры: поиск подстроки без учета регистра
        if brand:
            query = query.where(CarModel.brand.ilike(f"%{brand}%"))
        if category:
            query = query.where(CarModel.category.ilike(f"%{category}%"))
        if engine_type:
            query = query.where(CarModel.engine_type.ilike(f"%{engine_type}%"))
        if year is not None:
            query = query.where(CarModel.year == year)
        if min_price is not None:
            query = query.where(CarModel.price >= min_price)
        if max_price is not None:
            query = query.where(CarModel.price <= max_price)

        result = await self.session.execute(query.order_by(CarModel.brand, CarModel.id))
        return list(result.scalars().all())

    async def add(self, car_model: CarModel) -> CarModel:
        self.session.add(car_model)
        await self.session.flush()
        return car_model

    async def update(self, car_model: CarModel, fields: Dict[str, Any]) -> CarModel:
        """Обновить только переданные поля"""
        for name, value in fields.items():
            setattr(car_model, name, value)
        await self.session.flush()
        return car_model

    async def delete(self, car_model: CarModel) -> None:
        await self.session.delete(car_model)
        await self.session.flush()


class CustomerRepository:
    """Профили клиентов"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_by_id(self, customer_id: int) -> Optional[Customer]:
        return await self.session.get(Customer, customer_id)

    async def find_by_user_id(self, user_id: int) -> Optional[Customer]:
        result = await self.session.execute(
            select(Customer).where(Customer.user_id == user_id)
        )
        return result.scalar_one_or_none()

    async def list(self) -> List[Customer]:
        result = await self.session.execute(
            select(Customer).order_by(Customer.last_name, Customer.id)
        )
        return list(result.scalars().all())

    async def add(self, customer: Customer) -> Customer:
        self.session.add(customer)
        await self.session.flush()
        return customer

    async def update(self, customer: Customer, fields: Dict[str, Any]) -> Customer:
        for name, value in fields.items():
            setattr(customer, name, value)
        await self.session.flush()
        return customer

    async def delete(self, customer: Customer) -> None:
        await self.session.delete(customer)
        await self.session.flush()


class RentalRepository:
    """Аренды"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_by_id(self, rental_id: int) -> Optional[Rental]:
        return await self.session.get(Rental, rental_id)

    async def count_for_customer(self, customer_id: int) -> int:
        """Количество аренд клиента (все статусы, без фильтра по датам)"""
        result = await self.session.execute(
            select(func.count(Rental.id)).where(Rental.customer_id == customer_id)
        )
        return result.scalar_one()

    async def list_for_customer(self, customer_id: int) -> List[Rental]:
        result = await self.session.execute(
            select(Rental)
            .where(Rental.customer_id == customer_id)
            .order_by(Rental.issue_date.desc(), Rental.id.desc())
        )
        return list(result.scalars().all())

    async def list_all(self) -> List[Rental]:
        result = await self.session.execute(
            select(Rental).order_by(Rental.issue_date.desc(), Rental.id.desc())
        )
        return list(result.scalars().all())

    async def save(self, rental: Rental) -> Rental:
        self.session.add(rental)
        await self.session.flush()
        return rental

    async def update(self, rental: Rental, snapshot) -> Rental:
        """Записать состояние снимка аренды в строку БД"""
        snapshot.apply_to(rental)
        await self.session.flush()
        return rental
