from typing import Mapping
from .domain import Performance, Play
from .errors import UnknownPlay
from .ftypes import Maybe


def safe_play(plays: Mapping[str, Play], play_id: str) -> Maybe[Play]:
    """Безопасный поиск пьесы по ID"""
    found = plays.get(play_id)
    return Maybe.some(found) if found is not None else Maybe.nothing()


def play_for(plays: Mapping[str, Play], performance: Performance) -> Play:
    """Пьеса выступления; UnknownPlay, если в каталоге её нет"""
    return safe_play(plays, performance.play_id).or_raise(
        lambda: UnknownPlay(performance.play_id)
    )
