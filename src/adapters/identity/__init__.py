"""Identifier factory adapters."""

from .sequential import SequentialIdFactory

__all__ = ["SequentialIdFactory"]
