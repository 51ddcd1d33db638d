"""Ticket service: purchase workflow orchestration.

Flow: PurchaseRuleEngine.validate() → PricingEngine.calculate_total()
→ SeatingEngine.calculate_seats() → reserve seats → take payment.

Each step runs once.  Nothing is retried or rolled back: if payment fails
after seats were reserved, the reservation stands.
"""

import logging

from cinema_tickets.domain.exceptions import InvalidPurchaseError
from cinema_tickets.domain.models import (
    PriceTable,
    PurchaseQuote,
    PurchaseReceipt,
    PurchaseState,
    TicketTypeRequest,
)
from cinema_tickets.domain.pricing_engine import PricingEngine
from cinema_tickets.domain.rule_engine import DEFAULT_MAX_TICKETS, PurchaseRuleEngine
from cinema_tickets.domain.seating_engine import SeatingEngine
from cinema_tickets.services.gateways import PaymentGateway, SeatReservationGateway

logger = logging.getLogger(__name__)


class TicketService:
    """Orchestrates a ticket purchase across the rule, pricing and seating engines.

    Collaborators are injected; the service holds no per-purchase state, so
    one instance can serve concurrent callers.
    """

    def __init__(
        self,
        payment_gateway: PaymentGateway,
        seat_reservation_gateway: SeatReservationGateway,
        price_table: PriceTable | None = None,
        max_tickets: int = DEFAULT_MAX_TICKETS,
        rule_engine: PurchaseRuleEngine | None = None,
        pricing_engine: PricingEngine | None = None,
        seating_engine: SeatingEngine | None = None,
    ):
        self._payment_gateway = payment_gateway
        self._seat_reservation_gateway = seat_reservation_gateway
        self._price_table = price_table or PriceTable()
        self._rule_engine = rule_engine or PurchaseRuleEngine(max_tickets=max_tickets)
        self._pricing_engine = pricing_engine or PricingEngine()
        self._seating_engine = seating_engine or SeatingEngine()

    def purchase_tickets(self, account_id: int, *requests: TicketTypeRequest) -> PurchaseReceipt:
        """Validate, price and complete a purchase.

        Steps:
          1. Validate the order against business rules
          2. Calculate the total amount
          3. Calculate the seats needed
          4. Reserve seats
          5. Take payment

        Raises:
            InvalidPurchaseError: On any failure.  Collaborator errors are
                wrapped, with the original kept as ``cause``.
        """
        state = PurchaseState.RECEIVED
        try:
            self._rule_engine.validate(account_id, requests)
            state = self._advance(account_id, state, PurchaseState.VALIDATED)

            quote = self._totals(account_id, requests)
            state = self._advance(account_id, state, PurchaseState.PRICED)

            self._seat_reservation_gateway.reserve_seat(account_id, quote.total_seats)
            state = self._advance(account_id, state, PurchaseState.SEATS_RESERVED)

            self._payment_gateway.make_payment(account_id, quote.total_amount)
            state = self._advance(account_id, state, PurchaseState.PAYMENT_TAKEN)
        except InvalidPurchaseError:
            self._advance(account_id, state, PurchaseState.FAILED)
            raise
        except Exception as err:
            self._advance(account_id, state, PurchaseState.FAILED)
            raise InvalidPurchaseError(
                f"Ticket purchase failed in state '{state.value}': {err}",
                cause=err,
            ) from err

        self._advance(account_id, state, PurchaseState.COMPLETE)
        logger.info(
            "Purchase complete account=%s tickets=%s seats=%s total=%s",
            account_id, quote.total_tickets, quote.total_seats, quote.total_amount,
        )
        return PurchaseReceipt(
            account_id=quote.account_id,
            total_amount=quote.total_amount,
            total_seats=quote.total_seats,
            total_tickets=quote.total_tickets,
            state=PurchaseState.COMPLETE,
        )

    def quote_tickets(self, account_id: int, *requests: TicketTypeRequest) -> PurchaseQuote:
        """Validate an order and return its totals without reserving or charging."""
        self._rule_engine.validate(account_id, requests)
        return self._totals(account_id, requests)

    def ticket_config(self) -> dict:
        """Return the prices and purchase limit currently in force."""
        return {
            "prices": self._price_table.to_dict(),
            "max_tickets": self._rule_engine.max_tickets,
        }

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _totals(self, account_id: int, requests) -> PurchaseQuote:
        """Price and seat totals for requests that already passed validation."""
        return PurchaseQuote(
            account_id=account_id,
            total_amount=self._pricing_engine.calculate_total(requests, self._price_table),
            total_seats=self._seating_engine.calculate_seats(requests),
            total_tickets=sum(r.count for r in requests),
        )

    @staticmethod
    def _advance(account_id: int, current: PurchaseState, target: PurchaseState) -> PurchaseState:
        if target is PurchaseState.FAILED:
            logger.warning("Purchase account=%r failed at state '%s'", account_id, current.value)
        else:
            logger.debug("Purchase account=%s %s -> %s", account_id, current.value, target.value)
        return target
