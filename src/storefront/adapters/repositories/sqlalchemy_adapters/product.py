"""SQLAlchemy-backed Product repository."""

from collections.abc import Sequence

from sqlalchemy import RowMapping, insert, select, update
from sqlalchemy.engine import Connection

from storefront.domain.aggregates import Product
from storefront.interfaces.repositories import NotFoundError, ProductRepository

from ...db.schema import products
from .errors import storage_errors

ENTITY_NAME = "Product"


class SqlAlchemyProductRepository(ProductRepository):
    """Product repository over the ``products`` table."""

    def __init__(self, connection: Connection):
        self.connection = connection

    def create(self, entity: Product) -> None:
        with storage_errors(f"create {ENTITY_NAME} {entity.id}"):
            self.connection.execute(
                insert(products).values(
                    id=entity.id, name=entity.name, price=entity.price
                )
            )

    def update(self, entity: Product) -> None:
        with storage_errors(f"update {ENTITY_NAME} {entity.id}"):
            result = self.connection.execute(
                update(products)
                .where(products.c.id == entity.id)
                .values(name=entity.name, price=entity.price)
            )
        if result.rowcount == 0:
            raise NotFoundError(ENTITY_NAME, entity.id)

    def find(self, entity_id: str) -> Product:
        with storage_errors(f"find {ENTITY_NAME} {entity_id}"):
            row = (
                self.connection.execute(
                    select(products).where(products.c.id == entity_id)
                )
                .mappings()
                .one_or_none()
            )
        if row is None:
            raise NotFoundError(ENTITY_NAME, entity_id)
        return _to_entity(row)

    def find_all(self) -> Sequence[Product]:
        with storage_errors(f"list {ENTITY_NAME} rows"):
            rows = (
                self.connection.execute(select(products).order_by(products.c.id))
                .mappings()
                .all()
            )
        return [_to_entity(row) for row in rows]


def _to_entity(row: RowMapping) -> Product:
    return Product(row["id"], row["name"], row["price"])
