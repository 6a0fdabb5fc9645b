from sqlalchemy import Column, Integer, String, DateTime, Enum
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from database.base import Base
import enum


class UserRole(enum.Enum):
    CLIENT = "client"
    ADMIN = "admin"


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(255), unique=True, nullable=True)

    # Токен для заголовка x-auth-token (выдается скриптом create_user.py)
    api_token = Column(String(64), unique=True, nullable=False, index=True)

    role = Column(Enum(UserRole), default=UserRole.CLIENT, nullable=False)

    # Временные метки
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Связи
    customer = relationship("Customer", back_populates="user", uselist=False, passive_deletes=True)

    def __repr__(self):
        return f"<User(id={self.id}, username={self.username}, role={self.role.value})>"

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN
