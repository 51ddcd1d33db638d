"""Shared test fixtures."""

from unittest.mock import Mock

import pytest

from cinema_tickets import create_app
from cinema_tickets.domain.models import PriceTable
from cinema_tickets.services.ticket_service import TicketService


@pytest.fixture(scope="session")
def app():
    """Create an application instance configured for testing."""
    return create_app("testing")


@pytest.fixture()
def collaborators():
    """Mock payment and seat gateways sharing one parent to record call order."""
    parent = Mock()
    return parent, parent.payment, parent.seats


@pytest.fixture()
def ticket_service(app, collaborators):
    """Install a fresh ticket service wired to the mock gateways for each test."""
    _, payment, seats = collaborators
    service = TicketService(
        payment_gateway=payment,
        seat_reservation_gateway=seats,
        price_table=PriceTable.from_config(app.config["TICKET_PRICES"]),
        max_tickets=app.config["MAX_TICKETS_PER_PURCHASE"],
    )
    previous = app.extensions["ticket_service"]
    app.extensions["ticket_service"] = service
    yield service
    app.extensions["ticket_service"] = previous


@pytest.fixture()
def client(app, ticket_service):
    """Flask test client."""
    return app.test_client()
