"""Translation of SQLAlchemy errors into repository errors."""

from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import DBAPIError, IntegrityError

from storefront.interfaces.repositories import PersistenceError

EMPTY_STRING = ""


@contextmanager
def storage_errors(operation: str) -> Iterator[None]:
    """Map driver-level failures raised in the block to `PersistenceError`.

    Args:
        operation: Short description used in the error message,
            e.g. ``"create Order 123"``.

    Raises:
        PersistenceError: For integrity violations (duplicate ids, foreign
            keys, check constraints) and any other DBAPI error.
    """
    try:
        yield
    except IntegrityError as e:
        raise PersistenceError(f"Cannot {operation}: {_driver_message(e)}") from e
    except DBAPIError as e:  # OperationalError, DataError, InterfaceError, ...
        raise PersistenceError(
            f"Storage failure during {operation}: {_driver_message(e)}"
        ) from e


def _driver_message(error: DBAPIError) -> str:
    return str(error.orig) if error.orig not in (None, EMPTY_STRING) else str(error)
