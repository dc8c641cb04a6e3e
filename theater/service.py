import logging
from typing import Mapping, Optional, Tuple
from Statement_Service.statement import format_currency, render_statement_data
from theater.config import StatementConfig, get_config
from theater.domain import EnrichedPerformance, Invoice, Play, StatementTotals
from theater.errors import DomainError
from theater.ftypes import Either
from theater.transforms import enrich_invoice, statement_totals

logger = logging.getLogger(__name__)


class StatementService:
    """Фасад для печати счетов по одному каталогу пьес"""

    def __init__(
        self, plays: Mapping[str, Play], config: Optional[StatementConfig] = None
    ):
        self.plays = plays
        self.config = config or get_config()

    def enrich(self, invoice: Invoice) -> Tuple[EnrichedPerformance, ...]:
        return enrich_invoice(invoice, self.plays)

    def totals(self, invoice: Invoice) -> StatementTotals:
        return statement_totals(self.enrich(invoice))

    def statement(self, invoice: Invoice) -> str:
        """Текст счёта; доменные ошибки пробрасываются"""
        enriched = self.enrich(invoice)
        return render_statement_data(
            invoice.customer, enriched, statement_totals(enriched), self.config
        )

    def try_statement(self, invoice: Invoice) -> Either[str, str]:
        """
        Для UI: Right(текст) или Left(сообщение об ошибке).
        Ловит только доменные ошибки.
        """
        try:
            return Either.right(self.statement(invoice))
        except DomainError as exc:
            logger.warning("Statement for %s failed: %s", invoice.customer, exc)
            return Either.left(exc.message)

    def statement_data(self, invoice: Invoice) -> dict:
        """Строки и итоги для отображения таблицей"""
        enriched = self.enrich(invoice)
        totals = statement_totals(enriched)
        return {
            "customer": invoice.customer,
            "lines": [
                {
                    "play": p.play.name,
                    "category": p.play.category.value,
                    "audience": p.audience,
                    "amount": format_currency(p.amount, self.config),
                    "credits": p.volume_credits,
                }
                for p in enriched
            ],
            "total_amount": format_currency(totals.total_amount, self.config),
            "total_volume_credits": totals.total_volume_credits,
        }
