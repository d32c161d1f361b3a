"""
Unit tests for composition root factories.
"""

from src.adapters.email.template import TemplateEmailResolver
from src.adapters.identity.sequential import SequentialIdFactory
from src.adapters.repository.memory import InMemoryCustomerRepository
from src.config.settings import Settings
from src.dependencies import (
    get_email_resolver,
    get_id_factory,
    get_registration_service,
    get_repository,
)
from src.domain.registration import CustomerRegistrationService


class TestFactories:
    """Tests for individual adapter factories."""

    def test_email_resolver_uses_configured_domain(self) -> None:
        resolver = get_email_resolver(Settings(_env_file=None, email_domain="corp.test"))

        assert isinstance(resolver, TemplateEmailResolver)
        assert resolver.domain == "corp.test"

    def test_id_factory_uses_configured_start(self) -> None:
        factory = get_id_factory(Settings(_env_file=None, id_start=42))

        assert isinstance(factory, SequentialIdFactory)
        assert factory.next_id() == 42

    def test_repository_is_fresh_each_call(self) -> None:
        assert get_repository() is not get_repository()
        assert isinstance(get_repository(), InMemoryCustomerRepository)


class TestGetRegistrationService:
    """Tests for get_registration_service wiring."""

    def test_wires_adapters(self) -> None:
        service = get_registration_service(Settings(_env_file=None))

        assert isinstance(service, CustomerRegistrationService)
        assert isinstance(service.email_resolver, TemplateEmailResolver)
        assert isinstance(service.id_factory, SequentialIdFactory)
        assert isinstance(service.repository, InMemoryCustomerRepository)

    def test_uses_given_repository(self) -> None:
        repository = InMemoryCustomerRepository()

        service = get_registration_service(Settings(_env_file=None), repository=repository)

        assert service.repository is repository

    def test_defaults_to_cached_settings(self) -> None:
        service = get_registration_service()

        assert isinstance(service, CustomerRegistrationService)
