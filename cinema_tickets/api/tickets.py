"""Tickets API namespace: purchase, quote and pricing read-out.

Controllers are kept thin (parse → call service → respond); every business
decision is made by ``TicketService``.
"""

from datetime import datetime, timezone

from flask import current_app, request
from flask_restx import Namespace, Resource, fields
from pydantic import ValidationError as PydanticValidationError

from cinema_tickets.domain.exceptions import AppError
from cinema_tickets.schemas.purchase_schema import PurchaseSchema
from cinema_tickets.schemas.response import error_response, success_response
from cinema_tickets.services.ticket_service import TicketService

ns = Namespace("tickets", description="Cinema ticket purchase APIs")

# ---------------------------------------------------------------------------
# Swagger models (for documentation only)
# ---------------------------------------------------------------------------
ticket_request_model = ns.model("TicketRequest", {
    "ticket_type": fields.String(
        required=True, enum=["ADULT", "CHILD", "INFANT"], description="Ticket type",
    ),
    "count": fields.Integer(required=True, description="Number of tickets of this type"),
})

purchase_input_model = ns.model("PurchaseInput", {
    "account_id": fields.Integer(required=True, description="Purchasing account ID"),
    "tickets": fields.List(fields.Nested(ticket_request_model), required=True),
})


def _ticket_service() -> TicketService:
    return current_app.extensions["ticket_service"]


def _parse_purchase():
    data = PurchaseSchema.model_validate(request.get_json(silent=True) or {})
    return data.account_id, data.ticket_requests()


def _invalid_input(err: PydanticValidationError):
    return error_response(
        "Invalid input", "VALIDATION_ERROR", 400,
        details=err.errors(include_url=False, include_context=False),
    )


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------
@ns.route("/purchase")
class TicketPurchase(Resource):
    """Purchase tickets for an account."""

    @ns.doc("purchase_tickets")
    @ns.expect(purchase_input_model)
    def post(self):
        """Validate the order, reserve seats and take payment."""
        try:
            account_id, requests = _parse_purchase()
            receipt = _ticket_service().purchase_tickets(account_id, *requests)
            return success_response(receipt.to_dict(), 201)
        except PydanticValidationError as err:
            return _invalid_input(err)
        except AppError as err:
            return error_response(err.message, err.error_code, err.status_code)


@ns.route("/quote")
class TicketQuote(Resource):
    """Price an order without purchasing it."""

    @ns.doc("quote_tickets")
    @ns.expect(purchase_input_model)
    def post(self):
        """Validate the order and return its total amount and seat count."""
        try:
            account_id, requests = _parse_purchase()
            quote = _ticket_service().quote_tickets(account_id, *requests)
            return success_response(quote.to_dict())
        except PydanticValidationError as err:
            return _invalid_input(err)
        except AppError as err:
            return error_response(err.message, err.error_code, err.status_code)


@ns.route("/config")
class TicketConfig(Resource):
    """Current ticket prices and purchase limit."""

    @ns.doc("ticket_config")
    def get(self):
        """Return the prices and maximum tickets the rule engine uses."""
        config = _ticket_service().ticket_config()
        config["timestamp"] = datetime.now(timezone.utc).isoformat()
        return success_response(config)
