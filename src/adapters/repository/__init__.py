"""Repository adapters - Customer storage implementations."""

from .memory import InMemoryCustomerRepository

__all__ = ["InMemoryCustomerRepository"]
