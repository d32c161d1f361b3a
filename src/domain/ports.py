"""
Port interfaces - Protocol definitions for collaborator abstraction.

This module defines the interfaces (ports) that the registration service
requires from its collaborators. Adapters implement these protocols
through structural subtyping; tests substitute mocks or fakes.
"""

from typing import Protocol

from .customer import Customer, CustomerInput


class EmailResolver(Protocol):
    """Port interface for deriving a customer's email address."""

    def resolve_email(self, customer_input: CustomerInput) -> str | None:
        """
        Derive an email address for the given input.

        Args:
            customer_input: Caller-supplied customer names

        Returns:
            Email address, or None if none could be derived
        """
        ...

    def resolve_email_flagged(self, customer_input: CustomerInput) -> tuple[bool, str]:
        """
        Derive an email address, reporting success separately.

        Args:
            customer_input: Caller-supplied customer names

        Returns:
            Tuple of (success, email). On failure email is typically empty.
        """
        ...


class IdFactory(Protocol):
    """Port interface for customer identifier issuance."""

    def next_id(self) -> int:
        """
        Issue a new identifier.

        Each call returns a value distinct from, and ordered after,
        every value previously returned within the process.
        """
        ...


class CustomerRepository(Protocol):
    """Port interface for customer persistence."""

    def save(self, customer: Customer) -> None:
        """
        Store a finalized customer.

        Failures are raised as implementation-defined exceptions.

        Args:
            customer: Customer to persist
        """
        ...
