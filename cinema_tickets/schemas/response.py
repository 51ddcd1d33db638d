"""Consistent API response helpers.

Return ``(body, status)`` tuples; Flask-RESTX serialises the dict.
"""


def success_response(data, status_code: int = 200):
    """Wrap a serialisable payload in the success envelope."""
    return {"status": "success", "data": data}, status_code


def error_response(
    message: str,
    error_code: str = "INTERNAL_ERROR",
    status_code: int = 500,
    details=None,
):
    """Wrap an error in the error envelope; ``details`` is omitted when empty."""
    body = {
        "status": "error",
        "error_code": error_code,
        "message": message,
    }
    if details:
        body["details"] = details
    return body, status_code
