"""Product Aggregate"""

from storefront.domain import events
from storefront.domain.errors import InvalidEntityError

from .base import Aggregate


class Product(Aggregate):
    """Aggregate root representing a product in the catalogue."""

    def __init__(self, aggregate_id: str, name: str, price: float) -> None:
        super().__init__(aggregate_id)
        self.name: str = self._validated_name(name)
        self.price: float = self._validated_price(price)

    @classmethod
    def create(cls, aggregate_id: str, name: str, price: float) -> "Product":
        """Create a new product and record a `ProductCreated` event."""
        product = cls(aggregate_id, name, price)
        product._enqueue(
            events.ProductCreated(
                event_data={"id": aggregate_id, "name": name, "price": price}
            )
        )
        return product

    def change_name(self, name: str) -> None:
        """Rename the product."""
        self.name = self._validated_name(name)

    def change_price(self, price: float) -> None:
        """Reprice the product. Existing order items keep their snapshot price."""
        self.price = self._validated_price(price)

    def _state(self) -> tuple[object, ...]:
        return (self.id, self.name, self.price)

    @staticmethod
    def _validated_name(name: str) -> str:
        if not name or not name.strip():
            raise InvalidEntityError("Product", "name is required")
        return name

    @staticmethod
    def _validated_price(price: float) -> float:
        if price < 0:
            raise InvalidEntityError("Product", "price cannot be negative")
        return price
