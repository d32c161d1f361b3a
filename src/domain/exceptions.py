"""
Domain exceptions - Semantic error types for customer registration.

This module defines domain-specific exceptions that communicate
business rule violations without leaking infrastructure details.
Collaborator failures (repository, resolver, id factory) are never
wrapped in these types; they propagate to the caller unchanged.
"""


class RegistrationError(Exception):
    """Base class for registration domain errors."""

    pass


class ValidationError(RegistrationError, ValueError):
    """Input for a registration workflow was rejected."""

    pass


class EmailRequired(ValidationError):
    """Resolved email address was missing, empty or blank."""

    pass


class IdentityAlreadyAssigned(RegistrationError):
    """Customer already carries an identifier."""

    pass
