"""Adapters - Implementations of the domain ports."""
