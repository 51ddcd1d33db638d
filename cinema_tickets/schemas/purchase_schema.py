"""Pydantic schemas for ticket purchase request parsing.

Only shape and types are checked here; business rules (positive account,
non-zero counts, limits) belong to the rule engine so its messages reach
the client unchanged.
"""

from pydantic import BaseModel, Field, StrictInt

from cinema_tickets.domain.models import TicketType, TicketTypeRequest


class TicketRequestSchema(BaseModel):
    """One ticket line in a purchase body."""

    ticket_type: TicketType
    count: StrictInt = Field(..., ge=0)

    def to_domain(self) -> TicketTypeRequest:
        return TicketTypeRequest(ticket_type=self.ticket_type, count=self.count)


class PurchaseSchema(BaseModel):
    """Schema for purchase and quote requests."""

    account_id: StrictInt | None = None
    tickets: list[TicketRequestSchema] = Field(default_factory=list)

    def ticket_requests(self) -> list[TicketTypeRequest]:
        return [ticket.to_domain() for ticket in self.tickets]
