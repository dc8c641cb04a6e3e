from typing import Union
from .domain import Category
from .errors import UnknownCategory

# Все суммы в центах

TRAGEDY_BASE_AMOUNT = 40000
TRAGEDY_AUDIENCE_THRESHOLD = 30
TRAGEDY_OVER_BASE_CAPACITY_PER_PERSON = 1000

COMEDY_BASE_AMOUNT = 30000
COMEDY_AUDIENCE_THRESHOLD = 20
COMEDY_OVER_BASE_CAPACITY_AMOUNT = 10000
COMEDY_OVER_BASE_CAPACITY_PER_PERSON = 500
COMEDY_AMOUNT_PER_AUDIENCE = 300


def tragedy_amount(audience: int) -> int:
    """База + доплата за каждого зрителя сверх порога (порог не включается)"""
    result = TRAGEDY_BASE_AMOUNT
    if audience > TRAGEDY_AUDIENCE_THRESHOLD:
        result += TRAGEDY_OVER_BASE_CAPACITY_PER_PERSON * (
            audience - TRAGEDY_AUDIENCE_THRESHOLD
        )
    return result


def comedy_amount(audience: int) -> int:
    """
    База + бонус и поштучная доплата сверх порога.
    Доплата за каждое место начисляется всегда, в том числе за места,
    уже учтённые сверх порога.
    """
    result = COMEDY_BASE_AMOUNT
    if audience > COMEDY_AUDIENCE_THRESHOLD:
        result += COMEDY_OVER_BASE_CAPACITY_AMOUNT + (
            COMEDY_OVER_BASE_CAPACITY_PER_PERSON
            * (audience - COMEDY_AUDIENCE_THRESHOLD)
        )
    result += COMEDY_AMOUNT_PER_AUDIENCE * audience
    return result


def price_of(audience: int, category: Union[Category, str]) -> int:
    """Стоимость одного выступления в центах"""
    category = Category.parse(category)

    if category is Category.TRAGEDY:
        return tragedy_amount(audience)
    if category is Category.COMEDY:
        return comedy_amount(audience)

    # новый член Category без правила цены
    raise UnknownCategory(category)
