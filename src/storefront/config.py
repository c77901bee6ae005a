"""Configuration utilities for STOREFRONT.

This module centralizes small helpers and constants related to application configuration.
"""

import logging
import os

DB_URL_ENV_VAR = "STOREFRONT_DB_URL"  # pragma: no mutate

#: Logger levels applied at startup unless overridden.
DEFAULT_LOGGER_LEVELS: dict[str, int] = {"sqlalchemy": logging.WARNING}


class DatabaseUrlNotSetError(Exception):
    """Raised when the STOREFRONT_DB_URL environment variable is not set."""

    def __init__(self) -> None:
        super().__init__(f"{DB_URL_ENV_VAR} is not set")


def get_db_url() -> str:
    """Get the database URL from the environment.

    Returns:
        The value of the `STOREFRONT_DB_URL` environment variable.

    Raises:
        DatabaseUrlNotSetError: If `STOREFRONT_DB_URL` is not set.
    """
    if not (url := os.environ.get(DB_URL_ENV_VAR)):
        raise DatabaseUrlNotSetError
    return url
