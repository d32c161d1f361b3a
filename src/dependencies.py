"""
Composition root - Factories wiring adapters into the domain service.

Settings drive the choice of mail domain and first identifier; callers
may pass their own repository to inspect what was saved.
"""

import logging

from src.adapters.email.template import TemplateEmailResolver
from src.adapters.identity.sequential import SequentialIdFactory
from src.adapters.repository.memory import InMemoryCustomerRepository
from src.config.logging_config import setup_logging
from src.config.settings import Settings, get_settings
from src.domain.ports import CustomerRepository
from src.domain.registration import CustomerRegistrationService

logger = logging.getLogger(__name__)


def get_email_resolver(settings: Settings) -> TemplateEmailResolver:
    """Create template email resolver for the configured domain."""
    return TemplateEmailResolver(settings.email_domain)


def get_id_factory(settings: Settings) -> SequentialIdFactory:
    """Create sequential id factory starting at the configured id."""
    return SequentialIdFactory(start=settings.id_start)


def get_repository() -> InMemoryCustomerRepository:
    """Create an empty in-memory repository."""
    return InMemoryCustomerRepository()


def get_registration_service(
    settings: Settings | None = None,
    repository: CustomerRepository | None = None,
) -> CustomerRegistrationService:
    """
    Create registration service with injected dependencies.

    Args:
        settings: Settings to wire from (cached settings when omitted)
        repository: Repository to save into (fresh in-memory one when omitted)
    """
    if settings is None:
        settings = get_settings()
    setup_logging(settings.log_level)

    if repository is None:
        repository = get_repository()

    logger.info(
        "Wiring registration service (email domain %s, first id %d)",
        settings.email_domain,
        settings.id_start,
    )
    return CustomerRegistrationService(
        email_resolver=get_email_resolver(settings),
        repository=repository,
        id_factory=get_id_factory(settings),
    )
