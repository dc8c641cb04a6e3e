"""Доменные ошибки расчёта счёта (statement).

Ошибки не перехватываются в ядре: они поднимаются в месте обнаружения
и доходят до вызывающего кода render_statement как есть.
"""

from enum import Enum


class ErrorCode(Enum):
    """Коды доменных ошибок."""

    UNKNOWN_PLAY = "UNKNOWN_PLAY"
    UNKNOWN_CATEGORY = "UNKNOWN_CATEGORY"


class DomainError(Exception):
    """Базовая доменная ошибка: код + сообщение для пользователя."""

    def __init__(self, code: ErrorCode, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class UnknownCategory(DomainError):
    """Категория пьесы вне {tragedy, comedy}."""

    def __init__(self, category) -> None:
        super().__init__(ErrorCode.UNKNOWN_CATEGORY, f"unknown type: {category}")
        self.category = category


class UnknownPlay(DomainError, KeyError):
    """Выступление ссылается на пьесу, которой нет в каталоге."""

    def __init__(self, play_id: str) -> None:
        super().__init__(ErrorCode.UNKNOWN_PLAY, f"unknown play: {play_id}")
        self.play_id = play_id

    # KeyError.__str__ оборачивает сообщение в кавычки
    __str__ = DomainError.__str__
