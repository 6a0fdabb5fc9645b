"""
Правила скидок.

Каждое правило получает DiscountContext и возвращает Discount либо None.
Правила независимы друг от друга, итоговая скидка складывается из процентов.
"""
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional


CAR_AGE_THRESHOLD_YEARS = 5
CAR_AGE_DISCOUNT = 10

LOYAL_CUSTOMER_MIN_RENTALS = 3
LOYAL_CUSTOMER_DISCOUNT = 10


@dataclass(frozen=True)
class Discount:
    description: str
    percentage: int


@dataclass(frozen=True)
class DiscountContext:
    car_year: int
    rentals_count: int
    current_year: int


DiscountRule = Callable[[DiscountContext], Optional[Discount]]


def car_age_discount(context: DiscountContext) -> Optional[Discount]:
    if context.current_year - context.car_year > CAR_AGE_THRESHOLD_YEARS:
        return Discount(
            description=f"Discount for car age (over {CAR_AGE_THRESHOLD_YEARS} years)",
            percentage=CAR_AGE_DISCOUNT,
        )
    return None


def loyal_customer_discount(context: DiscountContext) -> Optional[Discount]:
    # Учитываются все аренды клиента, независимо от статуса и дат
    if context.rentals_count >= LOYAL_CUSTOMER_MIN_RENTALS:
        return Discount(
            description=f"Loyal customer discount ({LOYAL_CUSTOMER_MIN_RENTALS}+ rentals)",
            percentage=LOYAL_CUSTOMER_DISCOUNT,
        )
    return None


DISCOUNT_RULES: tuple = (car_age_discount, loyal_customer_discount)


def evaluate_discounts(
    context: DiscountContext,
    rules: Iterable[DiscountRule] = DISCOUNT_RULES,
) -> List[Discount]:
    """Применить все правила и вернуть сработавшие скидки"""
    discounts = []
    for rule in rules:
        discount = rule(context)
        if discount is not None:
            discounts.append(discount)
    return discounts


def total_percentage(discounts: Iterable[Discount]) -> int:
    return sum(discount.percentage for discount in discounts)
