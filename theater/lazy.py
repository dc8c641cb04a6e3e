from typing import Iterator, Mapping
from .domain import EnrichedPerformance, Invoice, Play, StatementTotals
from .transforms import enrich_performance


## ленивый генератор обогащённых выступлений в порядке счёта
## ошибка каталога/категории поднимается на том выступлении, где возникла
def iter_enriched_performances(
    invoice: Invoice, plays: Mapping[str, Play]
) -> Iterator[EnrichedPerformance]:
    for performance in invoice.performances:
        yield enrich_performance(performance, plays)


## итоги по требованию: не хранит всю обогащённую последовательность в памяти
def lazy_totals(invoice: Invoice, plays: Mapping[str, Play]) -> StatementTotals:
    amount, credits = 0, 0
    for perf in iter_enriched_performances(invoice, plays):
        amount += perf.amount
        credits += perf.volume_credits
    return StatementTotals(total_amount=amount, total_volume_credits=credits)
