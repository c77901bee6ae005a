"""Unit tests for domain errors."""

from storefront.domain import errors


class TestInvalidEntityError:
    """Tests for the InvalidEntityError domain error."""

    @staticmethod
    def test_attributes_and_message() -> None:
        """Test that the error keeps the entity name and message."""
        error = errors.InvalidEntityError("Product", "name is required")
        assert error.entity_name == "Product"
        assert error.message == "name is required"
        assert str(error) == "Product: name is required"
        assert isinstance(error, errors.DomainError)


class TestInvalidAggregateState:
    """Tests for the InvalidAggregateState domain error."""

    @staticmethod
    def test_attributes_and_message() -> None:
        """Test that the error keeps the aggregate name and message."""
        error = errors.InvalidAggregateState("Order", "items are required")
        assert error.aggregate_name == "Order"
        assert error.message == "items are required"
        assert str(error) == "Order: items are required"
        assert isinstance(error, errors.DomainError)


class TestCustomerActivationError:
    """Tests for the CustomerActivationError domain error."""

    @staticmethod
    def test_attributes_and_message() -> None:
        """Test that the error carries the customer id and fixed message."""
        error = errors.CustomerActivationError("c-1")
        assert error.customer_id == "c-1"
        assert str(error) == "Address is mandatory to activate a customer"
        assert isinstance(error, errors.InvalidTransitionError)
