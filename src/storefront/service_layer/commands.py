"""Module defining Commands."""

from dataclasses import dataclass, field

from storefront.domain.value_objects import Address


@dataclass(frozen=True)
class Command:
    """Base class for all commands."""


# --- Customers ---


@dataclass(frozen=True)
class CreateCustomer(Command):
    """Command to register a new customer."""

    customer_id: str
    name: str
    address: Address | None = None


@dataclass(frozen=True)
class ChangeCustomerAddress(Command):
    """Command to move an existing customer to a new address."""

    customer_id: str
    address: Address


@dataclass(frozen=True)
class ActivateCustomer(Command):
    """Command to activate an existing customer."""

    customer_id: str


@dataclass(frozen=True)
class AddRewardPoints(Command):
    """Command to credit reward points to an existing customer."""

    customer_id: str
    points: int


# --- Products ---


@dataclass(frozen=True)
class CreateProduct(Command):
    """Command to add a product to the catalogue."""

    product_id: str
    name: str
    price: float


# --- Orders ---


@dataclass(frozen=True)
class OrderLine:
    """One requested line of an order: which product, how many."""

    item_id: str
    product_id: str
    quantity: int


@dataclass(frozen=True)
class PlaceOrder(Command):
    """Command to place an order for an existing customer.

    Item names and prices are snapshotted from the stored products.
    """

    order_id: str
    customer_id: str
    lines: tuple[OrderLine, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class AddOrderItem(Command):
    """Command to append a line to an existing order."""

    order_id: str
    line: OrderLine
