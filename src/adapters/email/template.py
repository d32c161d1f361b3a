"""
Template email resolver adapter - Implements EmailResolver protocol.

Derives addresses of the form ``first.last@domain`` from customer names.
"""

import logging

from src.domain.customer import CustomerInput

logger = logging.getLogger(__name__)


class TemplateEmailResolver:
    """
    Implements EmailResolver protocol from a fixed address template.

    Uses structural subtyping - no explicit inheritance from Protocol.
    Each name part is stripped, lowercased and has inner whitespace
    collapsed to dots. A blank name part means no address is derived.
    """

    def __init__(self, domain: str) -> None:
        """
        Initialize resolver for a mail domain.

        Args:
            domain: Mail domain appended after ``@``

        Raises:
            ValueError: If domain is blank
        """
        domain = domain.strip().lower()
        if not domain:
            raise ValueError("email domain must not be blank")
        self._domain = domain

    @property
    def domain(self) -> str:
        return self._domain

    def resolve_email(self, customer_input: CustomerInput) -> str | None:
        """
        Derive the address for a customer.

        Returns:
            ``first.last@domain``, or None if either name is blank
        """
        first = self._local_part(customer_input.first_name)
        last = self._local_part(customer_input.last_name)
        if not first or not last:
            logger.warning(
                "Cannot derive email for %r %r: blank name part",
                customer_input.first_name,
                customer_input.last_name,
            )
            return None
        email = f"{first}.{last}@{self._domain}"
        logger.debug("Derived email %s", email)
        return email

    def resolve_email_flagged(self, customer_input: CustomerInput) -> tuple[bool, str]:
        """
        Derive the address and report whether derivation succeeded.

        Returns:
            ``(True, address)`` on success, ``(False, "")`` otherwise
        """
        email = self.resolve_email(customer_input)
        if email is None:
            return False, ""
        return True, email

    def _local_part(self, name: str) -> str:
        return ".".join(name.lower().split())
