from decimal import Decimal
from typing import Mapping, Optional, Tuple
from theater.config import StatementConfig, get_config
from theater.domain import EnrichedPerformance, Invoice, Play, StatementTotals
from theater.transforms import enrich_invoice, statement_totals


# ============ Форматирование валюты ============


def format_currency(cents: int, config: Optional[StatementConfig] = None) -> str:
    """
    Центы → строка валюты, например 173000 → "$1,730.00".
    Одинаково для строк выступлений и для итога.
    """
    config = config or get_config()
    amount = Decimal(cents) / config.minor_unit_factor
    sign = "-" if amount < 0 else ""
    return f"{sign}{config.currency_symbol}{abs(amount):,.2f}"


# ============ Текст счёта ============


def render_line(
    perf: EnrichedPerformance, config: Optional[StatementConfig] = None
) -> str:
    """Строка одного выступления"""
    return f"  {perf.play.name}: {format_currency(perf.amount, config)} ({perf.audience} seats)"


def render_statement_data(
    customer: str,
    enriched: Tuple[EnrichedPerformance, ...],
    totals: StatementTotals,
    config: Optional[StatementConfig] = None,
) -> str:
    """Собирает готовый текст из уже посчитанных данных"""
    lines = (
        (f"Statement for {customer}",)
        + tuple(render_line(p, config) for p in enriched)
        + (
            f"Amount owed is {format_currency(totals.total_amount, config)}",
            f"You earned {totals.total_volume_credits} credits",
        )
    )
    return "".join(f"{line}\n" for line in lines)


def render_statement(
    invoice: Invoice,
    plays: Mapping[str, Play],
    config: Optional[StatementConfig] = None,
) -> str:
    """
    Единственная публичная точка входа: счёт + каталог → текст.
    UnknownPlay / UnknownCategory пробрасываются вызывающему, частичного текста нет.
    """
    enriched = enrich_invoice(invoice, plays)
    return render_statement_data(
        invoice.customer, enriched, statement_totals(enriched), config
    )
