import asyncio
import sys
import os
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from decimal import Decimal

from database.base import async_session_factory, init_db
from database.models.car_model import CarModel, CarCategory
from sqlalchemy import select, func


async def add_test_cars():
    """Добавить тестовые модели автомобилей в базу данных"""
    await init_db()

    async with async_session_factory() as session:
        # Проверяем, есть ли уже автомобили
        count = (await session.execute(select(func.count(CarModel.id)))).scalar()

        if count > 0:
            print(f"В базе уже есть {count} моделей автомобилей. Пропускаем добавление.")
            return

        cars_data = [
            {
                "brand": "Kia Rio",
                "category": CarCategory.ECONOMY.value,
                "year": 2021,
                "engine_type": "Бензин 1.6",
                "price": Decimal("1450000.00"),
                "rental_price": Decimal("100.00"),
            },
            {
                "brand": "Hyundai Solaris",
                "category": CarCategory.ECONOMY.value,
                "year": 2017,
                "engine_type": "Бензин 1.4",
                "price": Decimal("980000.00"),
                "rental_price": Decimal("80.00"),
            },
            {
                "brand": "Skoda Octavia",
                "category": CarCategory.COMFORT.value,
                "year": 2022,
                "engine_type": "Бензин 1.4 TSI",
                "price": Decimal("2300000.00"),
                "rental_price": Decimal("150.00"),
            },
            {
                "brand": "Toyota Camry",
                "category": CarCategory.BUSINESS.value,
                "year": 2023,
                "engine_type": "Бензин 2.5",
                "price": Decimal("3900000.00"),
                "rental_price": Decimal("250.00"),
            },
            {
                "brand": "Toyota RAV4",
                "category": CarCategory.CROSSOVER.value,
                "year": 2019,
                "engine_type": "Гибрид 2.5",
                "price": Decimal("3200000.00"),
                "rental_price": Decimal("200.00"),
            },
        ]

        for car_data in cars_data:
            session.add(CarModel(**car_data))

        await session.commit()
        print(f"✅ Добавлено {len(cars_data)} тестовых моделей автомобилей")

        print("\n📋 Созданные модели:")
        for car_data in cars_data:
            print(f"🚗 {car_data['brand']} ({car_data['category']}, {car_data['year']})")


if __name__ == "__main__":
    asyncio.run(add_test_cars())
