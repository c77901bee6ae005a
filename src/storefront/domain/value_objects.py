"""Module including value objects used across the domain layer."""

from dataclasses import dataclass

from storefront.domain.errors import InvalidEntityError


@dataclass(frozen=True, slots=True)
class Address:
    """Value object representing a postal address.

    Immutable and compared by value, so a customer can hold it without any
    risk of aliasing.
    """

    street: str
    number: int
    zip: str
    city: str

    def __post_init__(self) -> None:
        for name in ("street", "zip", "city"):
            if not getattr(self, name).strip():
                raise InvalidEntityError("Address", f"{name} is required")
        if isinstance(self.number, bool) or not isinstance(self.number, int):
            raise InvalidEntityError("Address", "number must be an integer")

    def __str__(self) -> str:
        return f"{self.street}, {self.number}, {self.zip} {self.city}"
