"""Unit tests for the Pricing and Seating engines and the price table.

These tests are pure arithmetic: no Flask dependency.
"""

import pytest

from cinema_tickets.domain.exceptions import InvalidPurchaseError
from cinema_tickets.domain.models import PriceTable, TicketType, TicketTypeRequest
from cinema_tickets.domain.pricing_engine import PricingEngine
from cinema_tickets.domain.seating_engine import SeatingEngine

ADULT, CHILD, INFANT = TicketType.ADULT, TicketType.CHILD, TicketType.INFANT


# ---------------------------------------------------------------------------
# Pricing
# ---------------------------------------------------------------------------
class TestPricingEngine:
    """Tests for the PricingEngine."""

    def setup_method(self):
        self.engine = PricingEngine()

    def test_adults_and_children(self):
        requests = [TicketTypeRequest(ADULT, 2), TicketTypeRequest(CHILD, 3)]
        # 2 * 25 + 3 * 15 = 95
        assert self.engine.calculate_total(requests, PriceTable()) == 95

    def test_infants_are_free(self):
        requests = [TicketTypeRequest(ADULT, 2), TicketTypeRequest(INFANT, 2)]
        assert self.engine.calculate_total(requests) == 50

    def test_repeated_types_are_summed(self):
        requests = [TicketTypeRequest(ADULT, 1), TicketTypeRequest(ADULT, 2)]
        assert self.engine.calculate_total(requests) == 75

    def test_custom_price_table(self):
        table = PriceTable.from_config({"ADULT": 30, "CHILD": 20, "INFANT": 5})
        requests = [TicketTypeRequest(ADULT, 1), TicketTypeRequest(CHILD, 1), TicketTypeRequest(INFANT, 1)]
        assert self.engine.calculate_total(requests, table) == 55

    def test_missing_price_raises(self):
        table = PriceTable.from_config({"ADULT": 25})
        with pytest.raises(InvalidPurchaseError) as exc_info:
            self.engine.calculate_total([TicketTypeRequest(CHILD, 1)], table)
        assert "missing price" in exc_info.value.reason.lower()

    def test_null_request_raises(self):
        with pytest.raises(InvalidPurchaseError):
            self.engine.calculate_total([TicketTypeRequest(ADULT, 1), None])

    def test_does_not_enforce_rules(self):
        # A child-only order is invalid for purchase but still priceable.
        assert self.engine.calculate_total([TicketTypeRequest(CHILD, 2)]) == 30

    def test_repeatable(self):
        requests = [TicketTypeRequest(ADULT, 3), TicketTypeRequest(CHILD, 1)]
        first = self.engine.calculate_total(requests)
        assert self.engine.calculate_total(requests) == first == 90


# ---------------------------------------------------------------------------
# Seating
# ---------------------------------------------------------------------------
class TestSeatingEngine:
    """Tests for the SeatingEngine."""

    def setup_method(self):
        self.engine = SeatingEngine()

    def test_adults_and_children_take_seats(self):
        requests = [TicketTypeRequest(ADULT, 2), TicketTypeRequest(CHILD, 3)]
        assert self.engine.calculate_seats(requests) == 5

    def test_infants_take_no_seat(self):
        requests = [TicketTypeRequest(ADULT, 2), TicketTypeRequest(INFANT, 2)]
        assert self.engine.calculate_seats(requests) == 2

    def test_empty_order_needs_no_seats(self):
        assert self.engine.calculate_seats([]) == 0

    def test_null_request_raises(self):
        with pytest.raises(InvalidPurchaseError):
            self.engine.calculate_seats([None])

    def test_repeatable(self):
        requests = [TicketTypeRequest(ADULT, 4), TicketTypeRequest(INFANT, 1)]
        assert self.engine.calculate_seats(requests) == self.engine.calculate_seats(requests) == 4


# ---------------------------------------------------------------------------
# Price table
# ---------------------------------------------------------------------------
class TestPriceTable:
    """Tests for PriceTable construction and lookup."""

    def test_defaults(self):
        assert PriceTable().to_dict() == {"ADULT": 25, "CHILD": 15, "INFANT": 0}

    def test_from_config_accepts_lowercase_names(self):
        table = PriceTable.from_config({"adult": "40"})
        assert table.price_for(ADULT) == 40

    def test_from_config_rejects_unknown_type(self):
        with pytest.raises(InvalidPurchaseError, match="Unknown ticket type"):
            PriceTable.from_config({"SENIOR": 10})
