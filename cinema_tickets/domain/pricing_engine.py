"""Pricing Engine: totals the cost of a set of ticket requests.

Pure arithmetic: no business rules are enforced here, so callers in the
purchase flow must validate first.  Also usable standalone for quotes.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from cinema_tickets.domain.exceptions import InvalidPurchaseError
from cinema_tickets.domain.models import PriceTable, TicketTypeRequest

logger = logging.getLogger(__name__)


class PricingEngine:
    """Sums unit price × count over every request in an order."""

    def calculate_total(
        self,
        requests: Iterable[TicketTypeRequest | None],
        price_table: PriceTable | None = None,
    ) -> int:
        """Calculate the total amount to charge.

        Args:
            requests: Ticket type requests; repeated types are summed.
            price_table: Unit prices per type.  Defaults to the standard table.

        Returns:
            The total in whole currency units.

        Raises:
            InvalidPurchaseError: If a request is null or its type has no price.
        """
        price_table = price_table or PriceTable()
        total = 0
        for request in requests:
            if request is None:
                raise InvalidPurchaseError("Ticket request cannot be null")
            total += price_table.price_for(request.ticket_type) * request.count

        logger.debug("Pricing calculated: total=%s", total)
        return total
