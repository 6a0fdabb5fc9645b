"""
Тарифная сетка: суточная ставка по категории автомобиля и длительности аренды
"""
from decimal import Decimal
from typing import Dict, Optional, Tuple

from loguru import logger

from database.models.car_model import CarCategory


# Верхние границы (включительно) тарифных диапазонов в днях: 1-3, 4-9, 10-29.
# Всё, что не попало в диапазоны, считается по долгосрочному тарифу (30+).
DURATION_TIERS: Tuple[Tuple[int, int], ...] = ((1, 3), (4, 9), (10, 29))
LONG_TERM_TIER = len(DURATION_TIERS)

# Ставки по диапазонам: 1-3, 4-9, 10-29, 30+
RATE_TABLE: Dict[CarCategory, Tuple[Decimal, ...]] = {
    CarCategory.ECONOMY: (Decimal(40), Decimal(30), Decimal(25), Decimal(22)),
    CarCategory.COMFORT: (Decimal(50), Decimal(40), Decimal(34), Decimal(29)),
    # Долгосрочный тариф Business ниже, чем у 10-29 дней: так задано в прайсе
    CarCategory.BUSINESS: (Decimal(60), Decimal(50), Decimal(45), Decimal(22)),
    CarCategory.CROSSOVER: (Decimal(70), Decimal(60), Decimal(55), Decimal(52)),
}


def duration_tier(duration_days: int) -> int:
    """Индекс тарифного диапазона для длительности аренды"""
    for index, (lower, upper) in enumerate(DURATION_TIERS):
        if lower <= duration_days <= upper:
            return index
    return LONG_TERM_TIER


def resolve_category(category) -> Optional[CarCategory]:
    """Привести строку категории к CarCategory, None для неизвестных"""
    if isinstance(category, CarCategory):
        return category
    try:
        return CarCategory(category)
    except ValueError:
        return None


def daily_rate(category, duration_days: int) -> Decimal:
    """
    Получить суточную ставку

    Args:
        category: Категория автомобиля (CarCategory или строка)
        duration_days: Длительность аренды в днях

    Returns:
        Decimal: Ставка за сутки, 0 для неизвестной категории
    """
    resolved = resolve_category(category)
    if resolved is None:
        logger.warning(f"Неизвестная категория автомобиля {category!r}, ставка 0")
        return Decimal(0)

    return RATE_TABLE[resolved][duration_tier(duration_days)]
