from sqlalchemy import Column, Integer, DateTime, Enum, ForeignKey, Numeric
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from database.base import Base
import enum


class RentalStatus(enum.Enum):
    ACTIVE = "active"           # Активная аренда
    COMPLETED = "completed"     # Завершена
    OVERDUE = "overdue"         # Просрочена (зарезервировано)


class Rental(Base):
    __tablename__ = "rentals"

    id = Column(Integer, primary_key=True, index=True)

    # Связи. Удаление модели автомобиля не запрещено: ссылка обнуляется
    car_model_id = Column(Integer, ForeignKey("cars.id", ondelete="SET NULL"), nullable=True)
    customer_id = Column(Integer, ForeignKey("customers.id", ondelete="CASCADE"), nullable=False, index=True)

    status = Column(Enum(RentalStatus), default=RentalStatus.ACTIVE, nullable=False)

    # Временные рамки
    issue_date = Column(DateTime(timezone=True), nullable=False)
    return_date = Column(DateTime(timezone=True), nullable=False)

    # Финансы
    calculated_cost = Column(Numeric(10, 2), nullable=False)  # Стоимость после скидок, без залога
    discount = Column(Integer, default=0, nullable=False)     # Суммарная скидка в процентах
    penalty = Column(Numeric(10, 2), default=0, nullable=False)
    final_cost = Column(Numeric(10, 2), nullable=False)
    deposit = Column(Numeric(10, 2), nullable=False)

    # Временные метки
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Связи (загружаются сразу: в async-сессии ленивая загрузка недоступна)
    car_model = relationship("CarModel", back_populates="rentals", lazy="selectin")
    customer = relationship("Customer", back_populates="rentals", lazy="selectin")

    def __repr__(self):
        return f"<Rental(id={self.id}, customer_id={self.customer_id}, car_model_id={self.car_model_id}, status={self.status.value})>"
