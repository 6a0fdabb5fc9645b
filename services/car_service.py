"""
Сервис управления моделями автомобилей (каталог)
"""
from typing import Any, Dict, List

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from database.models.car_model import CarModel
from database.repositories import CarModelRepository
from services.exceptions import CarModelNotFoundError


class CarModelService:
    """CRUD для моделей автомобилей"""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.car_models = CarModelRepository(session)

    async def list_car_models(self, **filters) -> List[CarModel]:
        return await self.car_models.list(**filters)

    async def get_car_model(self, car_model_id: int) -> CarModel:
        car_model = await self.car_models.find_by_id(car_model_id)
        if not car_model:
            raise CarModelNotFoundError("Car model not found")
        return car_model

    async def create_car_model(self, data: Dict[str, Any]) -> CarModel:
        car_model = await self.car_models.add(CarModel(**data))
        await self.session.commit()
        logger.info(f"🚗 Добавлена модель автомобиля {car_model.id}: {car_model.brand}")
        return car_model

    async def update_car_model(self, car_model_id: int, data: Dict[str, Any]) -> CarModel:
        """
        Обновить только переданные поля.

        Залог уже оформленных аренд не пересчитывается при изменении rental_price.
        """
        car_model = await self.get_car_model(car_model_id)
        if data:
            await self.car_models.update(car_model, data)
            await self.session.commit()
            logger.info(f"✏️ Модель автомобиля {car_model_id} обновлена: {sorted(data)}")
        return car_model

    async def delete_car_model(self, car_model_id: int) -> None:
        car_model = await self.get_car_model(car_model_id)
        await self.car_models.delete(car_model)
        await self.session.commit()
        logger.info(f"🗑️ Модель автомобиля {car_model_id} удалена")
