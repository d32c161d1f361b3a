"""
In-memory repository adapter - Implements CustomerRepository protocol.

Keeps saved customers in a list for demos and integration tests.
Nothing survives the process.
"""

import logging

from src.domain.customer import Customer

logger = logging.getLogger(__name__)


class InMemoryCustomerRepository:
    """
    Implements CustomerRepository protocol with a Python list.

    Uses structural subtyping - no explicit inheritance from Protocol.
    Saves are appended in call order with no deduplication.
    """

    def __init__(self) -> None:
        self._customers: list[Customer] = []

    def save(self, customer: Customer) -> None:
        """
        Append a customer to the store.

        Args:
            customer: Customer to persist
        """
        self._customers.append(customer)
        logger.debug("Saved %r (%d stored)", customer, len(self._customers))

    def list_all(self) -> list[Customer]:
        """Return saved customers in save order (a copy)."""
        return list(self._customers)

    def __len__(self) -> int:
        return len(self._customers)
