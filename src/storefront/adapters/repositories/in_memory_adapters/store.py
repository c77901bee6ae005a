"""In-memory shared data store for repository adapters."""

from dataclasses import dataclass, field

from storefront.domain.aggregates import Customer, Order, Product


@dataclass(slots=True)
class InMemoryStoreData:
    """Shared in-memory backing store for the in-memory repositories.

    A single shared instance should be passed to all in-memory repositories of
    a unit of work so they can check cross-aggregate references (an order's
    customer and products) the way foreign keys do in the database.

    Each mapping is keyed by entity id and preserves insertion order.
    """

    customers: dict[str, Customer] = field(default_factory=dict)
    products: dict[str, Product] = field(default_factory=dict)
    orders: dict[str, Order] = field(default_factory=dict)
