import sys
import os

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))
import pytest
from theater.config import StatementConfig, get_config, load_config, refresh_config
from Statement_Service.statement import format_currency


def test_defaults():
    config = load_config()
    assert config == StatementConfig()
    assert config.currency_symbol == "$"
    assert config.minor_unit_factor == 100
    assert config.log_level == "WARNING"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("THEATER_CURRENCY_SYMBOL", "£")
    monkeypatch.setenv("THEATER_MINOR_UNIT_FACTOR", "1000")
    monkeypatch.setenv("THEATER_LOG_LEVEL", "debug")
    config = load_config()
    assert config.currency_symbol == "£"
    assert config.minor_unit_factor == 1000
    assert config.log_level == "DEBUG"


def test_bad_factor_falls_back_to_default(monkeypatch):
    monkeypatch.setenv("THEATER_MINOR_UNIT_FACTOR", "cents")
    assert load_config().minor_unit_factor == 100


def test_non_positive_factor_is_rejected(monkeypatch):
    monkeypatch.setenv("THEATER_MINOR_UNIT_FACTOR", "0")
    with pytest.raises(ValueError):
        load_config()


def test_refresh_config_picks_up_env(monkeypatch):
    assert get_config().currency_symbol == "$"
    monkeypatch.setenv("THEATER_CURRENCY_SYMBOL", "€")
    assert get_config().currency_symbol == "$"  # закэшировано
    assert refresh_config().currency_symbol == "€"
    assert format_currency(65000) == "€650.00"


@pytest.mark.parametrize("value", ["loud", "", "  "])
def test_unknown_log_level_falls_back_to_default(monkeypatch, value):
    monkeypatch.setenv("THEATER_LOG_LEVEL", value)
    assert load_config().log_level == "WARNING"
