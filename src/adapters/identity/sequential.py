"""
Sequential id factory adapter - Implements IdFactory protocol.

Issues increasing integer identifiers from an in-process counter.
"""

import itertools
import logging

logger = logging.getLogger(__name__)


class SequentialIdFactory:
    """
    Implements IdFactory protocol via an incrementing counter.

    Uses structural subtyping - no explicit inheritance from Protocol.
    Identifiers are unique per instance only; nothing is persisted.
    """

    def __init__(self, start: int = 1) -> None:
        if start < 1:
            raise ValueError(f"start must be >= 1, got {start}")
        self._counter = itertools.count(start)
        self._last_id: int | None = None

    @property
    def last_id(self) -> int | None:
        """Most recently issued identifier, or None before the first call."""
        return self._last_id

    def next_id(self) -> int:
        self._last_id = next(self._counter)
        logger.debug("Issued customer id %d", self._last_id)
        return self._last_id
