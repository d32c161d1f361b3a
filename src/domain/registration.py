"""
Customer registration domain service.

This module contains the four registration workflows. Each call builds
fresh Customer entities from caller input, enriches them through the
injected collaborators and hands them to the repository.

Workflows
=========

register                 Resolve email (direct form), require it, save.
register_setting_email   Resolve email (flagged form), require it, save.
                         The resolver's success flag is not consulted;
                         only the returned string is checked.
register_batch           Save one customer per input. No email handling.
register_with_id         Per input: issue id, assign it, save.

Validation failures raise EmailRequired before any save. Collaborator
failures propagate unchanged; a failing save aborts the rest of a batch
and nothing already saved is undone.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from .customer import Customer, CustomerInput
from .exceptions import EmailRequired
from .ports import CustomerRepository, EmailResolver, IdFactory


@dataclass
class CustomerRegistrationService:
    """
    Domain service for customer registration.

    Holds only its three collaborators; no state is kept between calls.
    """

    email_resolver: EmailResolver
    repository: CustomerRepository
    id_factory: IdFactory

    def register(self, customer_input: CustomerInput) -> None:
        """
        Register a customer with a resolved email address.

        Args:
            customer_input: Caller-supplied customer names

        Raises:
            EmailRequired: If the resolver returns None or a blank address
        """
        customer = Customer.from_input(customer_input)

        email = self.email_resolver.resolve_email(customer_input)
        self._require_email(email, customer_input)

        customer.include_email(email)
        self.repository.save(customer)

    def register_setting_email(self, customer_input: CustomerInput) -> None:
        """
        Register a customer using the flagged email resolution form.

        Args:
            customer_input: Caller-supplied customer names

        Raises:
            EmailRequired: If the resolved address is None or blank
        """
        customer = Customer.from_input(customer_input)

        # Success flag intentionally unused: the address alone decides.
        _, email = self.email_resolver.resolve_email_flagged(customer_input)
        self._require_email(email, customer_input)

        customer.include_email(email)
        self.repository.save(customer)

    def register_batch(self, customer_inputs: Iterable[CustomerInput]) -> None:
        """
        Register each input as a customer without email or id.

        Args:
            customer_inputs: Inputs to register, saved in order
        """
        for customer_input in customer_inputs:
            customer = Customer.from_input(customer_input)
            self.repository.save(customer)

    def register_with_id(self, customer_inputs: Iterable[CustomerInput]) -> None:
        """
        Register each input with a freshly issued identifier.

        One id is requested per input, immediately before that input's save.

        Args:
            customer_inputs: Inputs to register, saved in order
        """
        for customer_input in customer_inputs:
            customer = Customer.from_input(customer_input)
            customer.assign_id(self.id_factory.next_id())
            self.repository.save(customer)

    def _require_email(self, email: str | None, customer_input: CustomerInput) -> None:
        """Reject None, empty and whitespace-only addresses."""
        if email is None or not email.strip():
            raise EmailRequired(
                f"no email resolved for {customer_input.first_name} {customer_input.last_name}"
            )
