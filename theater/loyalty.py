from typing import Union
from .domain import Category

BASE_VOLUME_CREDIT_THRESHOLD = 30
COMEDY_EXTRA_VOLUME_FACTOR = 5


def credits_of(audience: int, category: Union[Category, str]) -> int:
    """
    Бонусные баллы за выступление:
    max(audience - 30, 0), а для комедий ещё audience // 5 (дробная часть отбрасывается)
    """
    credits = max(audience - BASE_VOLUME_CREDIT_THRESHOLD, 0)

    if Category.parse(category) is Category.COMEDY:
        credits += audience // COMEDY_EXTRA_VOLUME_FACTOR

    return credits
