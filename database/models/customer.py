from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from database.base import Base


class Customer(Base):
    __tablename__ = "customers"

    id = Column(Integer, primary_key=True, index=True)

    # Один профиль клиента на одного пользователя
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False)

    # Персональные данные
    last_name = Column(String(255), nullable=False)
    first_name = Column(String(255), nullable=False)
    patronymic = Column(String(255), nullable=True)
    address = Column(String(500), nullable=False)
    phone = Column(String(20), nullable=False)

    # Временные метки
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Связи
    user = relationship("User", back_populates="customer")
    rentals = relationship(
        "Rental", back_populates="customer", cascade="all, delete-orphan", passive_deletes=True
    )

    def __repr__(self):
        return f"<Customer(id={self.id}, user_id={self.user_id}, name={self.full_name})>"

    @property
    def full_name(self) -> str:
        parts = [self.last_name, self.first_name, self.patronymic]
        return " ".join(part for part in parts if part)
