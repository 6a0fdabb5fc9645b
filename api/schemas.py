"""
Схемы запросов и ответов API (pydantic)
"""
from datetime import datetime, timezone
from decimal import Decimal
from typing import Annotated, ClassVar, FrozenSet, List, Optional

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, field_validator
from pydantic.alias_generators import to_camel


# Денежные суммы отдаются в JSON числами
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class ApiModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class PartialUpdate(ApiModel):
    """Частичное обновление: только переданные поля"""

    # Поля, которые можно явно очистить значением null
    nullable_fields: ClassVar[FrozenSet[str]] = frozenset()

    def changes(self) -> dict:
        data = self.model_dump(exclude_unset=True)
        return {
            name: value for name, value in data.items()
            if value is not None or name in self.nullable_fields
        }


# ---------- Модели автомобилей ----------

class CarModelCreate(ApiModel):
    brand: str = Field(min_length=1)
    price: Decimal = Field(ge=0)
    rental_price: Decimal = Field(ge=0)
    category: str = Field(min_length=1)
    year: int
    engine_type: str = Field(min_length=1)
    image_url: Optional[str] = None


class CarModelUpdate(PartialUpdate):
    nullable_fields: ClassVar[FrozenSet[str]] = frozenset({"image_url"})

    brand: Optional[str] = Field(default=None, min_length=1)
    price: Optional[Decimal] = Field(default=None, ge=0)
    rental_price: Optional[Decimal] = Field(default=None, ge=0)
    category: Optional[str] = Field(default=None, min_length=1)
    year: Optional[int] = None
    engine_type: Optional[str] = Field(default=None, min_length=1)
    image_url: Optional[str] = None


class CarModelFilter(ApiModel):
    brand: Optional[str] = None
    category: Optional[str] = None
    engine_type: Optional[str] = None
    year: Optional[int] = None
    min_price: Optional[Decimal] = None
    max_price: Optional[Decimal] = None


class CarModelOut(ApiModel):
    id: int
    brand: str
    price: Money
    rental_price: Money
    category: str
    year: int
    engine_type: str
    image_url: Optional[str] = None


# ---------- Клиенты ----------

class CustomerCreate(ApiModel):
    last_name: str = Field(min_length=1)
    first_name: str = Field(min_length=1)
    patronymic: Optional[str] = None
    address: str = Field(min_length=1)
    phone: str = Field(min_length=1)


class CustomerUpdate(PartialUpdate):
    nullable_fields: ClassVar[FrozenSet[str]] = frozenset({"patronymic"})

    last_name: Optional[str] = Field(default=None, min_length=1)
    first_name: Optional[str] = Field(default=None, min_length=1)
    patronymic: Optional[str] = None
    address: Optional[str] = Field(default=None, min_length=1)
    phone: Optional[str] = Field(default=None, min_length=1)


class CustomerOut(ApiModel):
    id: int
    user_id: int
    last_name: str
    first_name: str
    patronymic: Optional[str] = None
    address: str
    phone: str


class CustomerBrief(ApiModel):
    id: int
    first_name: str
    last_name: str


# ---------- Аренды ----------

def assume_utc(value):
    """Даты без часового пояса считаются UTC"""
    if isinstance(value, datetime) and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class RentalRequest(ApiModel):
    car_model: int
    issue_date: datetime
    return_date: datetime

    dates_in_utc = field_validator("issue_date", "return_date")(assume_utc)


class RentalOut(ApiModel):
    id: int
    car_model: Optional[CarModelOut] = None
    customer: Optional[CustomerBrief] = None
    issue_date: datetime
    return_date: datetime
    calculated_cost: Money
    discount: int
    penalty: Money
    final_cost: Money
    deposit: Money
    status: str

    # SQLite возвращает даты без часового пояса
    dates_in_utc = field_validator("issue_date", "return_date")(assume_utc)

    @field_validator("status", mode="before")
    @classmethod
    def status_value(cls, value):
        return getattr(value, "value", value)


class DiscountOut(ApiModel):
    description: str
    percentage: int


class PriceQuoteOut(ApiModel):
    number_of_days: int
    daily_rate: Money
    price_before_discounts: Money
    discount_applied: int
    discount_details: List[DiscountOut]
    calculated_cost: Money
    deposit: Money
    final_cost: Money
    car_model: CarModelOut
    customer: CustomerBrief
