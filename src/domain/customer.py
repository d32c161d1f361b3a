"""
Customer entity and input data holder.

CustomerInput is the immutable value a caller hands to the registration
service. Customer is the entity the service builds from it, enriches
with an email address and/or identifier, and hands to the repository.
"""

from dataclasses import dataclass

from .exceptions import IdentityAlreadyAssigned


@dataclass(frozen=True)
class CustomerInput:
    """First and last name supplied by a caller."""

    first_name: str
    last_name: str


class Customer:
    """
    Registered customer.

    Names are fixed at construction. The email is attached once during
    registration via include_email(); the identifier via assign_id().
    Both stay None until assigned.
    """

    def __init__(self, first_name: str, last_name: str) -> None:
        self._id: int | None = None
        self._first_name = first_name
        self._last_name = last_name
        self._email: str | None = None

    @classmethod
    def from_input(cls, customer_input: CustomerInput) -> "Customer":
        """Build an unregistered customer from caller input."""
        return cls(customer_input.first_name, customer_input.last_name)

    @property
    def id(self) -> int | None:
        return self._id

    @property
    def first_name(self) -> str:
        return self._first_name

    @property
    def last_name(self) -> str:
        return self._last_name

    @property
    def email(self) -> str | None:
        return self._email

    def include_email(self, email: str) -> None:
        """
        Attach an email address.

        No validation happens here; the registration service rejects
        blank addresses before calling this.
        """
        self._email = email

    def assign_id(self, customer_id: int) -> None:
        """
        Attach the customer's identifier.

        Args:
            customer_id: Identifier issued by an IdFactory

        Raises:
            IdentityAlreadyAssigned: If an identifier is already set
        """
        if self._id is not None:
            raise IdentityAlreadyAssigned(
                f"customer already has id {self._id}, refusing {customer_id}"
            )
        self._id = customer_id

    def __repr__(self) -> str:
        return (
            f"Customer(id={self._id!r}, first_name={self._first_name!r}, "
            f"last_name={self._last_name!r}, email={self._email!r})"
        )
