"""Общие фикстуры: каталог пьес, счета и чистое окружение конфигурации."""

import sys
import os

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest
from theater.config import get_config
from theater.domain import Category, Invoice, Performance, Play

DATA_PATH = os.path.join(os.path.dirname(__file__), "..", "data", "theater.json")


@pytest.fixture(autouse=True)
def clean_theater_env(monkeypatch):
    for key in [
        "THEATER_CURRENCY_SYMBOL",
        "THEATER_MINOR_UNIT_FACTOR",
        "THEATER_LOG_LEVEL",
    ]:
        monkeypatch.delenv(key, raising=False)
    get_config.cache_clear()
    yield
    get_config.cache_clear()


@pytest.fixture
def plays():
    return {
        "hamlet": Play(name="Hamlet", category=Category.TRAGEDY),
        "as-like": Play(name="As You Like It", category=Category.COMEDY),
        "othello": Play(name="Othello", category=Category.TRAGEDY),
    }


@pytest.fixture
def big_co():
    return Invoice(
        customer="BigCo",
        performances=(
            Performance(play_id="hamlet", audience=55),
            Performance(play_id="as-like", audience=35),
            Performance(play_id="othello", audience=40),
        ),
    )


@pytest.fixture
def data_path():
    return DATA_PATH
