"""Order Aggregate and its OrderItem entity."""

from collections.abc import Iterable
from dataclasses import dataclass

from storefront.domain.errors import InvalidAggregateState, InvalidEntityError

from .base import Aggregate


@dataclass(slots=True)
class OrderItem:
    """A line of an order.

    `name` and `price` are snapshots of the product at order time, so later
    changes to the product do not affect existing orders.
    """

    id: str
    name: str
    price: float
    product_id: str
    quantity: int

    def __post_init__(self) -> None:
        if not self.id or not self.id.strip():
            raise InvalidEntityError("OrderItem", "id is required")
        if not self.product_id or not self.product_id.strip():
            raise InvalidEntityError("OrderItem", "product id is required")
        if self.price < 0:
            raise InvalidEntityError("OrderItem", "price cannot be negative")
        if self.quantity <= 0:
            raise InvalidEntityError("OrderItem", "quantity must be greater than 0")

    def total(self) -> float:
        """Price of this line: `price * quantity`."""
        return self.price * self.quantity


class Order(Aggregate):
    """Aggregate root representing an order and its items.

    Invariant: an order always holds at least one item. The total is derived
    from the items on every call and is never cached.
    """

    def __init__(
        self, aggregate_id: str, customer_id: str, items: Iterable[OrderItem]
    ) -> None:
        item_list = list(items)
        if not item_list:
            raise InvalidAggregateState("Order", "items are required")
        if not aggregate_id or not aggregate_id.strip():
            raise InvalidAggregateState("Order", "id is required")
        if not customer_id or not customer_id.strip():
            raise InvalidAggregateState("Order", "customer id is required")
        super().__init__(aggregate_id)
        self.customer_id: str = customer_id
        self._items: list[OrderItem] = item_list

    @property
    def items(self) -> list[OrderItem]:
        """A copy of the order's items, in insertion order."""
        return list(self._items)

    def add_item(self, item: OrderItem) -> None:
        """Append an item to the order."""
        self._items.append(item)

    def total(self) -> float:
        """Sum of all item totals."""
        return sum(item.total() for item in self._items)

    def _state(self) -> tuple[object, ...]:
        return (self.id, self.customer_id, self._items)
