from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union

from .errors import UnknownCategory


class Category(Enum):
    """Закрытый набор жанров: других категорий не бывает"""

    TRAGEDY = "tragedy"
    COMEDY = "comedy"

    @classmethod
    def parse(cls, value: Union["Category", str]) -> "Category":
        """Строка из каталога → Category, иначе UnknownCategory"""
        try:
            return cls(value)
        except ValueError:
            raise UnknownCategory(value) from None


@dataclass(frozen=True)
class Play:
    name: str
    category: Category

    def __post_init__(self) -> None:
        # "tragedy" из JSON превращается в Category.TRAGEDY прямо при создании
        object.__setattr__(self, "category", Category.parse(self.category))


@dataclass(frozen=True)
class Performance:
    play_id: str
    audience: int  # места

    def __post_init__(self) -> None:
        if self.audience < 0:
            raise ValueError("Audience cannot be negative")


@dataclass(frozen=True)
class Invoice:
    customer: str
    performances: Tuple[Performance, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "performances", tuple(self.performances))


@dataclass(frozen=True)
class EnrichedPerformance:
    play_id: str
    audience: int
    play: Play
    amount: int  # центы
    volume_credits: int


@dataclass(frozen=True)
class StatementTotals:
    total_amount: int  # центы
    total_volume_credits: int
