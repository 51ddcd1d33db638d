"""Seating Engine: counts the seats an order needs."""

from collections.abc import Iterable

from cinema_tickets.domain.exceptions import InvalidPurchaseError
from cinema_tickets.domain.models import TicketTypeRequest


class SeatingEngine:
    """Sums counts of seat-consuming ticket types; infants get no seat."""

    def calculate_seats(self, requests: Iterable[TicketTypeRequest | None]) -> int:
        total = 0
        for request in requests:
            if request is None:
                raise InvalidPurchaseError("Ticket request cannot be null")
            if request.ticket_type.consumes_seat:
                total += request.count
        return total
