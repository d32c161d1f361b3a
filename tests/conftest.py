"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- Customer inputs (single and batch)
- Mocked collaborators for the registration service
"""

from unittest.mock import Mock

import pytest

from src.domain.customer import CustomerInput
from src.domain.registration import CustomerRegistrationService


@pytest.fixture
def customer_input() -> CustomerInput:
    """Single customer input."""
    return CustomerInput("Maria", "Silva")


@pytest.fixture
def customer_inputs() -> list[CustomerInput]:
    """Batch of four customer inputs."""
    return [
        CustomerInput("Maria", "Silva"),
        CustomerInput("João", "Souza"),
        CustomerInput("Ana", "Costa"),
        CustomerInput("Pedro", "Lima"),
    ]


@pytest.fixture
def email_resolver() -> Mock:
    return Mock()


@pytest.fixture
def repository() -> Mock:
    return Mock()


@pytest.fixture
def id_factory() -> Mock:
    return Mock()


@pytest.fixture
def service(email_resolver: Mock, repository: Mock, id_factory: Mock) -> CustomerRegistrationService:
    """Registration service wired to mocked collaborators."""
    return CustomerRegistrationService(
        email_resolver=email_resolver,
        repository=repository,
        id_factory=id_factory,
    )
