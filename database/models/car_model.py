from sqlalchemy import Column, Integer, String, DateTime, Numeric
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from database.base import Base
import enum


class CarCategory(enum.Enum):
    ECONOMY = "Economy"
    COMFORT = "Comfort"
    BUSINESS = "Business"
    CROSSOVER = "Crossover"


class CarModel(Base):
    __tablename__ = "cars"

    id = Column(Integer, primary_key=True, index=True)
    brand = Column(String(255), nullable=False, index=True)

    # Категория хранится строкой: неизвестные категории допустимы (тариф 0)
    category = Column(String(50), nullable=False)
    year = Column(Integer, nullable=False)
    engine_type = Column(String(100), nullable=False)
    image_url = Column(String(500), nullable=True)

    # Цены
    price = Column(Numeric(10, 2), nullable=False)          # Стоимость автомобиля
    rental_price = Column(Numeric(10, 2), nullable=False)   # Залог за каждую аренду

    # Временные метки
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Связи
    rentals = relationship("Rental", back_populates="car_model", passive_deletes=True)

    def __repr__(self):
        return f"<CarModel(id={self.id}, brand={self.brand}, category={self.category})>"
