"""Custom business exception classes.

Every purchase failure is normalised into ``InvalidPurchaseError`` before it
reaches the caller; the HTTP layer maps ``AppError`` subclasses to responses.
"""


class AppError(Exception):
    """Base application error."""

    def __init__(self, message: str, error_code: str = "INTERNAL_ERROR", status_code: int = 500):
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        super().__init__(self.message)


class InvalidPurchaseError(AppError):
    """Raised when a ticket purchase cannot be completed.

    Rule violations, missing prices and collaborator failures all surface
    as this one error kind, differentiated only by ``reason``.
    """

    def __init__(self, reason: str, cause: BaseException | None = None):
        self.reason = reason
        self.cause = cause
        super().__init__(
            message=reason,
            error_code="INVALID_PURCHASE",
            status_code=400,
        )
