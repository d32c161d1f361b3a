"""
Domain layer - Pure business logic with zero framework imports.

This package contains the customer entity, the registration service
and the port interfaces it depends on, keeping the workflows decoupled
from any concrete resolver, id source or storage.
"""

from .customer import Customer, CustomerInput
from .exceptions import EmailRequired, IdentityAlreadyAssigned, RegistrationError, ValidationError
from .ports import CustomerRepository, EmailResolver, IdFactory
from .registration import CustomerRegistrationService

__all__ = [
    "Customer",
    "CustomerInput",
    "CustomerRegistrationService",
    "CustomerRepository",
    "EmailRequired",
    "EmailResolver",
    "IdFactory",
    "IdentityAlreadyAssigned",
    "RegistrationError",
    "ValidationError",
]
