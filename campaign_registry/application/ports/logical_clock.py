"""Logical Clock port - source of logical timestamps.

Timestamps are block heights supplied by the execution environment, not
wall-clock time. They are monotonically non-decreasing.
"""

from abc import ABC, abstractmethod


class LogicalClock(ABC):
    """Abstract interface for the current logical timestamp."""

    @abstractmethod
    def current(self) -> int:
        """Return the current logical timestamp."""
        ...
