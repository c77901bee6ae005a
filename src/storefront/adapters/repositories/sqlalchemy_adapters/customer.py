"""SQLAlchemy-backed Customer repository."""

from collections.abc import Sequence
from typing import Any

from sqlalchemy import RowMapping, insert, select, update
from sqlalchemy.engine import Connection

from storefront.domain.aggregates import Customer
from storefront.domain.value_objects import Address
from storefront.interfaces.repositories import CustomerRepository, NotFoundError

from ...db.schema import customers
from .errors import storage_errors

ENTITY_NAME = "Customer"


class SqlAlchemyCustomerRepository(CustomerRepository):
    """Customer repository over the ``customers`` table.

    The address is flattened into the ``street``/``number``/``zipcode``/``city``
    columns, all NULL when the customer has none.
    """

    def __init__(self, connection: Connection):
        self.connection = connection

    def create(self, entity: Customer) -> None:
        with storage_errors(f"create {ENTITY_NAME} {entity.id}"):
            self.connection.execute(insert(customers).values(**_to_row(entity)))

    def update(self, entity: Customer) -> None:
        values = _to_row(entity)
        del values["id"]
        with storage_errors(f"update {ENTITY_NAME} {entity.id}"):
            result = self.connection.execute(
                update(customers).where(customers.c.id == entity.id).values(**values)
            )
        if result.rowcount == 0:
            raise NotFoundError(ENTITY_NAME, entity.id)

    def find(self, entity_id: str) -> Customer:
        with storage_errors(f"find {ENTITY_NAME} {entity_id}"):
            row = (
                self.connection.execute(
                    select(customers).where(customers.c.id == entity_id)
                )
                .mappings()
                .one_or_none()
            )
        if row is None:
            raise NotFoundError(ENTITY_NAME, entity_id)
        return _to_entity(row)

    def find_all(self) -> Sequence[Customer]:
        with storage_errors(f"list {ENTITY_NAME} rows"):
            rows = (
                self.connection.execute(select(customers).order_by(customers.c.id))
                .mappings()
                .all()
            )
        return [_to_entity(row) for row in rows]


# --------------------------------------------------------------------------- #
# Mapping
# --------------------------------------------------------------------------- #


def _to_row(customer: Customer) -> dict[str, Any]:
    address = customer.address
    return {
        "id": customer.id,
        "name": customer.name,
        "active": customer.active,
        "reward_points": customer.reward_points,
        "street": address.street if address else None,
        "number": address.number if address else None,
        "zipcode": address.zip if address else None,
        "city": address.city if address else None,
    }


def _to_entity(row: RowMapping) -> Customer:
    address = (
        Address(
            street=row["street"],
            number=row["number"],
            zip=row["zipcode"],
            city=row["city"],
        )
        if row["street"] is not None
        else None
    )
    return Customer(
        row["id"],
        row["name"],
        address,
        active=row["active"],
        reward_points=row["reward_points"],
    )
