"""Customer Aggregate"""

from storefront.domain import events
from storefront.domain.errors import CustomerActivationError, InvalidEntityError
from storefront.domain.value_objects import Address

from .base import Aggregate

# pylint: disable=too-many-arguments


class Customer(Aggregate):
    """Aggregate root representing a customer."""

    def __init__(
        self,
        aggregate_id: str,
        name: str,
        address: Address | None = None,
        *,
        active: bool = False,
        reward_points: int = 0,
    ) -> None:
        super().__init__(aggregate_id)
        self.name: str = self._validated_name(name)
        self.address: Address | None = address
        if active and address is None:
            raise CustomerActivationError(aggregate_id)
        self.active: bool = active
        if reward_points < 0:
            raise InvalidEntityError("Customer", "reward points cannot be negative")
        self.reward_points: int = reward_points

    # --- Construction Paths ---

    @classmethod
    def create(
        cls, aggregate_id: str, name: str, address: Address | None = None
    ) -> "Customer":
        """Create a new customer and record a `CustomerCreated` event."""
        customer = cls(aggregate_id, name, address)
        customer._enqueue(
            events.CustomerCreated(event_data={"id": aggregate_id, "name": name})
        )
        return customer

    # --- Behaviour ---

    @property
    def is_active(self) -> bool:
        """Whether the customer has been activated."""
        return self.active

    def change_name(self, name: str) -> None:
        """Rename the customer."""
        self.name = self._validated_name(name)

    def change_address(self, address: Address) -> None:
        """Move the customer to a new address.

        Records a `CustomerAddressChanged` event.
        """
        self.address = address
        self._enqueue(
            events.CustomerAddressChanged(
                event_data={"id": self.id, "name": self.name, "address": address}
            )
        )

    def activate(self) -> None:
        """Activate the customer.

        Raises:
            CustomerActivationError: If the customer has no address.
        """
        if self.address is None:
            raise CustomerActivationError(self.id)
        self.active = True

    def deactivate(self) -> None:
        """Deactivate the customer."""
        self.active = False

    def add_reward_points(self, points: int) -> None:
        """Credit reward points. The running total never decreases."""
        if points < 0:
            raise InvalidEntityError("Customer", "reward points cannot be negative")
        self.reward_points += points

    # --- Internals ---

    def _state(self) -> tuple[object, ...]:
        return (self.id, self.name, self.address, self.active, self.reward_points)

    @staticmethod
    def _validated_name(name: str) -> str:
        if not name or not name.strip():
            raise InvalidEntityError("Customer", "name is required")
        return name
