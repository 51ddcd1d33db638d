"""Rule Engine: validates ticket purchases against the cinema's business rules.

Pure business logic with no Flask dependency.
"""

import logging
from collections.abc import Sequence

from cinema_tickets.domain.exceptions import InvalidPurchaseError
from cinema_tickets.domain.models import Order, TicketType, TicketTypeRequest

logger = logging.getLogger(__name__)

DEFAULT_MAX_TICKETS = 25


class PurchaseRuleEngine:
    """Checks a whole order against a fixed, ordered rule set.

    Validation is fail-fast: the first broken rule raises
    ``InvalidPurchaseError`` and later rules are not evaluated, so the
    reported reason is always reproducible for a given order.
    """

    def __init__(self, max_tickets: int = DEFAULT_MAX_TICKETS):
        self.max_tickets = max_tickets

    def validate(self, account_id, requests: Sequence[TicketTypeRequest | None]) -> None:
        """Run all rule checks in order.  Raises ``InvalidPurchaseError`` on the first failure.

        Args:
            account_id: Purchasing account; must be a positive integer.
            requests: Ticket type requests making up the order.
        """
        try:
            self._validate_account(account_id)
            self._validate_requests_present(requests)
            self._validate_no_zero_counts(requests)

            order = Order(account_id=account_id, requests=tuple(requests))
            self._validate_max_tickets(order, self.max_tickets)

            counts = order.count_by_type()
            self._validate_adult_present(counts)
            self._validate_infants_have_laps(counts)
        except InvalidPurchaseError as err:
            logger.warning("Purchase rejected for account=%r: %s", account_id, err.reason)
            raise

    # ------------------------------------------------------------------
    # Private validation helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _validate_account(account_id) -> None:
        if isinstance(account_id, bool) or not isinstance(account_id, int) or account_id <= 0:
            raise InvalidPurchaseError("Invalid account: account id must be a positive integer")

    @staticmethod
    def _validate_requests_present(requests) -> None:
        """Order must hold at least one request and no null entries."""
        if not requests or any(not isinstance(r, TicketTypeRequest) for r in requests):
            raise InvalidPurchaseError("At least one ticket request required")

    @staticmethod
    def _validate_no_zero_counts(requests) -> None:
        """A request for 0 of a type is invalid, unlike omitting the type."""
        if any(r.count < 1 for r in requests):
            raise InvalidPurchaseError("Ticket request was for zero tickets")

    @staticmethod
    def _validate_max_tickets(order: Order, max_tickets: int) -> None:
        if order.total_tickets > max_tickets:
            raise InvalidPurchaseError(
                f"Purchase exceeds maximum allowed of {max_tickets} tickets. "
                f"Requested: {order.total_tickets}.",
            )

    @staticmethod
    def _validate_adult_present(counts: dict[TicketType, int]) -> None:
        dependants = counts[TicketType.CHILD] + counts[TicketType.INFANT]
        if dependants > 0 and counts[TicketType.ADULT] == 0:
            raise InvalidPurchaseError("Child/infant requires at least one adult ticket")

    @staticmethod
    def _validate_infants_have_laps(counts: dict[TicketType, int]) -> None:
        """One adult lap per infant."""
        if counts[TicketType.INFANT] > counts[TicketType.ADULT]:
            raise InvalidPurchaseError(
                "Infants exceed adults: each infant must sit on an adult's lap",
            )
