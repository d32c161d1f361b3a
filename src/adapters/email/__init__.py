"""Email resolver adapters."""

from .template import TemplateEmailResolver

__all__ = ["TemplateEmailResolver"]
