"""Domain-layer error definitions."""

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


class InvalidEntityError(DomainError):
    """Raised when an entity or value object is given an invalid field value."""

    def __init__(self, entity_name: str, message: str) -> None:
        super().__init__(f"{entity_name}: {message}")
        self.entity_name = entity_name
        self.message = message


class InvalidAggregateState(DomainError):
    """Raised when an aggregate would be left violating one of its invariants."""

    def __init__(self, aggregate_name: str, message: str) -> None:
        super().__init__(f"{aggregate_name}: {message}")
        self.aggregate_name = aggregate_name
        self.message = message


class InvalidTransitionError(DomainError):
    """Raised when an aggregate is in an invalid state for the attempted action."""


# ============================================================================
#                       Customer related errors
# ============================================================================


class CustomerActivationError(InvalidTransitionError):
    """Raised when activating a customer that has no address."""

    def __init__(self, customer_id: str) -> None:
        super().__init__("Address is mandatory to activate a customer")
        self.customer_id = customer_id
