"""External collaborator interfaces and the bundled third-party stand-ins.

The purchase flow depends only on the two interfaces; the concrete services
below log the call and always succeed.
"""

import logging
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)


class SeatReservationGateway(ABC):
    """Interface for reserving seats against an account."""

    @abstractmethod
    def reserve_seat(self, account_id: int, total_seats: int) -> None:
        """Reserve ``total_seats`` seats.  Any exception fails the purchase."""


class PaymentGateway(ABC):
    """Interface for charging an account."""

    @abstractmethod
    def make_payment(self, account_id: int, total_amount: int) -> None:
        """Charge ``total_amount``.  Any exception fails the purchase."""


class SeatReservationService(SeatReservationGateway):
    """Stand-in for the third-party seat booking service."""

    def reserve_seat(self, account_id: int, total_seats: int) -> None:
        logger.info("Seats reserved account=%s seats=%s", account_id, total_seats)


class TicketPaymentService(PaymentGateway):
    """Stand-in for the third-party payment gateway."""

    def make_payment(self, account_id: int, total_amount: int) -> None:
        logger.info("Payment taken account=%s amount=%s", account_id, total_amount)
