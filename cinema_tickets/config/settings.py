"""Application configuration classes.

Supports multiple environments via class inheritance.
Ticket prices and the purchase limit can be overridden through environment
variables; defaults match the standard cinema price list.
"""

import os


def _env_int(name: str, default: int) -> int:
    """Read a non-negative integer from the environment, falling back to ``default``."""
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    try:
        number = int(value)
    except ValueError:
        raise ValueError(f"{name} must be a non-negative integer, got {value!r}") from None
    if number < 0:
        raise ValueError(f"{name} must be a non-negative integer, got {value!r}")
    return number


class BaseConfig:
    """Base configuration shared across all environments."""

    JSON_SORT_KEYS = False
    RESTX_MASK_SWAGGER = False
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    TICKET_PRICES = {
        "ADULT": _env_int("ADULT_TICKET_PRICE", 25),
        "CHILD": _env_int("CHILD_TICKET_PRICE", 15),
        "INFANT": _env_int("INFANT_TICKET_PRICE", 0),
    }
    MAX_TICKETS_PER_PURCHASE = _env_int("MAX_TICKETS_PER_PURCHASE", 25)


class DevelopmentConfig(BaseConfig):
    """Development configuration: verbose logging."""

    DEBUG = True
    LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")


class TestingConfig(BaseConfig):
    """Testing configuration: fixed prices regardless of the environment."""

    TESTING = True
    TICKET_PRICES = {"ADULT": 25, "CHILD": 15, "INFANT": 0}
    MAX_TICKETS_PER_PURCHASE = 25


class ProductionConfig(BaseConfig):
    """Production configuration."""

    DEBUG = False


CONFIG_MAP = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
}
