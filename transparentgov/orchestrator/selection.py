"""Bounded multi-select of records for comparison."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


class SelectionManager:
    """Ordered set of at most ``capacity`` record ids.

    Selecting past capacity is rejected rather than evicting the oldest.
    """

    def __init__(self, capacity: int = 2) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._ids: list[str] = []

    def toggle(self, record_id: str) -> bool:
        """Flip membership of ``record_id``; return whether it is now selected."""
        if record_id in self._ids:
            self._ids.remove(record_id)
            return False
        if len(self._ids) < self.capacity:
            self._ids.append(record_id)
            return True
        logger.debug("Selection full (%d), ignoring %s", self.capacity, record_id)
        return False

    def reset(self) -> None:
        self._ids.clear()

    def size(self) -> int:
        return len(self._ids)

    def contains(self, record_id: str) -> bool:
        return record_id in self._ids

    def ids(self) -> tuple[str, ...]:
        return tuple(self._ids)

    def is_full(self) -> bool:
        return len(self._ids) == self.capacity

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._ids

    def __len__(self) -> int:
        return len(self._ids)
