import json
import logging
from functools import reduce
from typing import Dict, Mapping, Tuple
from .catalog import play_for
from .domain import (
    EnrichedPerformance,
    Invoice,
    Performance,
    Play,
    StatementTotals,
)
from .loyalty import credits_of
from .pricing import price_of

logger = logging.getLogger(__name__)


def load_seed(path: str) -> Tuple[Dict[str, Play], Tuple[Invoice, ...]]:
    """Загружает каталог пьес и счета из JSON и возвращает иммутабельные данные"""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    plays = {
        play_id: Play(name=str(p["name"]), category=p["type"])
        for play_id, p in data.get("plays", {}).items()
    }

    def _to_invoice(raw: dict) -> Invoice:
        performances = tuple(
            Performance(play_id=str(p["playID"]), audience=int(p["audience"]))
            for p in raw.get("performances", [])
        )
        return Invoice(customer=str(raw["customer"]), performances=performances)

    invoices = tuple(map(_to_invoice, data.get("invoices", [])))
    logger.debug("Loaded %d plays and %d invoices from %s", len(plays), len(invoices), path)
    return plays, invoices


# ============ Обогащение (чистые функции) ============


def enrich_performance(
    performance: Performance, plays: Mapping[str, Play]
) -> EnrichedPerformance:
    """Выступление + пьеса из каталога + сумма + баллы → одна неизменяемая запись"""
    play = play_for(plays, performance)
    enriched = EnrichedPerformance(
        play_id=performance.play_id,
        audience=performance.audience,
        play=play,
        amount=price_of(performance.audience, play.category),
        volume_credits=credits_of(performance.audience, play.category),
    )
    logger.debug(
        "Enriched %s: amount=%d credits=%d",
        performance.play_id,
        enriched.amount,
        enriched.volume_credits,
    )
    return enriched


def enrich_invoice(
    invoice: Invoice, plays: Mapping[str, Play]
) -> Tuple[EnrichedPerformance, ...]:
    """Все выступления счёта в исходном порядке; первая ошибка прерывает расчёт"""
    return tuple(enrich_performance(p, plays) for p in invoice.performances)


# ============ Агрегация ============


def total_amount(enriched: Tuple[EnrichedPerformance, ...]) -> int:
    """Сумма всех выступлений через reduce"""
    return reduce(lambda acc, p: acc + p.amount, enriched, 0)


def total_volume_credits(enriched: Tuple[EnrichedPerformance, ...]) -> int:
    """Сумма бонусных баллов через reduce"""
    return reduce(lambda acc, p: acc + p.volume_credits, enriched, 0)


def statement_totals(enriched: Tuple[EnrichedPerformance, ...]) -> StatementTotals:
    return StatementTotals(
        total_amount=total_amount(enriched),
        total_volume_credits=total_volume_credits(enriched),
    )
