"""Domain value objects for ticket purchases.

Everything here is immutable and built per request; nothing is persisted.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType

from cinema_tickets.domain.exceptions import InvalidPurchaseError


# ---------------------------------------------------------------------------
# Ticket type
# ---------------------------------------------------------------------------
class TicketType(str, Enum):
    """Closed set of ticket categories."""

    ADULT = "ADULT"
    CHILD = "CHILD"
    INFANT = "INFANT"

    @property
    def consumes_seat(self) -> bool:
        # Infants sit on an adult's lap.
        return self is not TicketType.INFANT


# ---------------------------------------------------------------------------
# Ticket type request
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class TicketTypeRequest:
    """One line item of an order: a ticket type and how many of it.

    A count of zero is representable so the rule engine can reject it
    with its own message.
    """

    ticket_type: TicketType
    count: int

    def __post_init__(self):
        if not isinstance(self.ticket_type, TicketType):
            raise InvalidPurchaseError(
                f"Ticket type must be one of {[t.value for t in TicketType]}",
            )
        if isinstance(self.count, bool) or not isinstance(self.count, int):
            raise InvalidPurchaseError("Number of tickets must be an integer")
        if self.count < 0:
            raise InvalidPurchaseError("Number of tickets cannot be negative")


# ---------------------------------------------------------------------------
# Order
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Order:
    """All ticket requests submitted by one account in a single purchase."""

    account_id: int | None
    requests: tuple[TicketTypeRequest, ...] = ()

    def count_by_type(self) -> dict[TicketType, int]:
        """Sum counts per ticket type; repeated types are aggregated."""
        counts = {ticket_type: 0 for ticket_type in TicketType}
        for request in self.requests:
            counts[request.ticket_type] += request.count
        return counts

    @property
    def total_tickets(self) -> int:
        return sum(request.count for request in self.requests)


# ---------------------------------------------------------------------------
# Price table
# ---------------------------------------------------------------------------
DEFAULT_TICKET_PRICES = {
    TicketType.ADULT: 25,
    TicketType.CHILD: 15,
    TicketType.INFANT: 0,
}


@dataclass(frozen=True)
class PriceTable:
    """Unit price per ticket type, in whole currency units."""

    prices: Mapping[TicketType, int] = field(
        default_factory=lambda: MappingProxyType(dict(DEFAULT_TICKET_PRICES)),
    )

    @classmethod
    def from_config(cls, prices: Mapping) -> PriceTable:
        """Build a table from a mapping keyed by ``TicketType`` or type name."""
        resolved: dict[TicketType, int] = {}
        for key, price in prices.items():
            try:
                ticket_type = key if isinstance(key, TicketType) else TicketType(str(key).upper())
            except ValueError as err:
                raise InvalidPurchaseError(f"Unknown ticket type in price table: '{key}'") from err
            resolved[ticket_type] = int(price)
        return cls(prices=MappingProxyType(resolved))

    def price_for(self, ticket_type: TicketType) -> int:
        try:
            return self.prices[ticket_type]
        except KeyError:
            raise InvalidPurchaseError(
                f"Missing price for ticket type: {getattr(ticket_type, 'value', ticket_type)}",
            ) from None

    def to_dict(self) -> dict:
        return {ticket_type.value: price for ticket_type, price in self.prices.items()}


# ---------------------------------------------------------------------------
# Purchase lifecycle
# ---------------------------------------------------------------------------
class PurchaseState(str, Enum):
    """States a purchase passes through; ``FAILED`` is reachable from any step."""

    RECEIVED = "received"
    VALIDATED = "validated"
    PRICED = "priced"
    SEATS_RESERVED = "seats_reserved"
    PAYMENT_TAKEN = "payment_taken"
    COMPLETE = "complete"
    FAILED = "failed"


@dataclass(frozen=True)
class PurchaseQuote:
    """Price and seat totals for a validated order, without side effects."""

    account_id: int
    total_amount: int
    total_seats: int
    total_tickets: int

    def to_dict(self) -> dict:
        return {
            "account_id": self.account_id,
            "total_amount": self.total_amount,
            "total_seats": self.total_seats,
            "total_tickets": self.total_tickets,
        }


@dataclass(frozen=True)
class PurchaseReceipt(PurchaseQuote):
    """Summary of a completed purchase."""

    state: PurchaseState = PurchaseState.COMPLETE

    def to_dict(self) -> dict:
        data = super().to_dict()
        data["state"] = self.state.value
        return data
