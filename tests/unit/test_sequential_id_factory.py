"""
Unit tests for SequentialIdFactory adapter.
"""

import pytest

from src.adapters.identity.sequential import SequentialIdFactory


class TestSequentialIdFactory:
    """Tests for identifier issuance."""

    def test_starts_at_one_by_default(self) -> None:
        factory = SequentialIdFactory()
        assert [factory.next_id() for _ in range(4)] == [1, 2, 3, 4]

    def test_custom_start(self) -> None:
        factory = SequentialIdFactory(start=100)
        assert factory.next_id() == 100
        assert factory.next_id() == 101

    @pytest.mark.parametrize("start", [0, -5])
    def test_start_below_one_rejected(self, start: int) -> None:
        with pytest.raises(ValueError):
            SequentialIdFactory(start=start)

    def test_last_id_tracks_issued_value(self) -> None:
        """last_id is None until the first id is issued."""
        factory = SequentialIdFactory()
        assert factory.last_id is None

        factory.next_id()
        factory.next_id()

        assert factory.last_id == 2

    def test_instances_are_independent(self) -> None:
        first = SequentialIdFactory()
        second = SequentialIdFactory()

        first.next_id()
        first.next_id()

        assert second.next_id() == 1

    def test_no_explicit_inheritance(self) -> None:
        assert SequentialIdFactory.__bases__ == (object,)
