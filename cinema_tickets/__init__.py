"""Flask application factory.

Creates and configures the Flask app, wires the ticket service with its
collaborators, and registers error handlers and API namespaces.
"""

import logging
import os

from flask import Flask
from flask_restx import Api

from cinema_tickets.config.settings import CONFIG_MAP
from cinema_tickets.domain.models import PriceTable
from cinema_tickets.services.gateways import (
    PaymentGateway,
    SeatReservationGateway,
    SeatReservationService,
    TicketPaymentService,
)
from cinema_tickets.services.ticket_service import TicketService


def create_app(
    config_name: str | None = None,
    payment_gateway: PaymentGateway | None = None,
    seat_reservation_gateway: SeatReservationGateway | None = None,
) -> Flask:
    """Build and configure the Flask application.

    Args:
        config_name: One of 'development', 'testing', 'production'.
                     Defaults to the FLASK_ENV environment variable.
        payment_gateway: Payment collaborator; the bundled stub if omitted.
        seat_reservation_gateway: Seat collaborator; the bundled stub if omitted.
    """
    app = Flask(__name__)

    # --- Configuration ---
    config_name = config_name or os.getenv("FLASK_ENV", "development")
    app.config.from_object(CONFIG_MAP[config_name])

    # --- Logging ---
    logging.basicConfig(
        level=app.config["LOG_LEVEL"],
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    # --- Services ---
    app.extensions["ticket_service"] = TicketService(
        payment_gateway=payment_gateway or TicketPaymentService(),
        seat_reservation_gateway=seat_reservation_gateway or SeatReservationService(),
        price_table=PriceTable.from_config(app.config["TICKET_PRICES"]),
        max_tickets=app.config["MAX_TICKETS_PER_PURCHASE"],
    )

    # --- API ---
    api = Api(
        app,
        title="Cinema Tickets",
        version="1.0",
        description="Cinema ticket purchase rules, pricing and seat reservation",
    )

    from cinema_tickets.api.tickets import ns as tickets_ns

    api.add_namespace(tickets_ns, path="/tickets")

    # --- Global error handler ---
    _register_error_handlers(app)

    return app


def _register_error_handlers(app: Flask) -> None:
    """Map application exceptions to JSON responses."""
    from cinema_tickets.domain.exceptions import AppError
    from cinema_tickets.schemas.response import error_response

    @app.errorhandler(AppError)
    def handle_app_error(error: AppError):
        return error_response(error.message, error.error_code, error.status_code)

    @app.errorhandler(404)
    def handle_not_found(_error):
        return error_response("Resource not found", "NOT_FOUND", 404)

    @app.errorhandler(500)
    def handle_internal(_error):
        logging.getLogger(__name__).exception("Unhandled server error")
        return error_response("Internal server error", "INTERNAL_ERROR", 500)
