"""Stub LogicalClock simulating block height.

WARNING: This stub is for development/testing only.
"""

from __future__ import annotations

from campaign_registry.application.ports.logical_clock import LogicalClock


class BlockHeightClockStub(LogicalClock):
    """Manually advanced block-height clock. Starts at 0 by default."""

    def __init__(self, height: int = 0) -> None:
        if height < 0:
            raise ValueError(f"height must be non-negative, got {height}")
        self._height = height

    def current(self) -> int:
        return self._height

    def advance(self, blocks: int = 1) -> int:
        """Move the clock forward and return the new height."""
        if blocks < 0:
            raise ValueError(f"blocks must be non-negative, got {blocks}")
        self._height += blocks
        return self._height

    def set_height(self, height: int) -> None:
        """Jump to a height. Going backwards is rejected."""
        if height < self._height:
            raise ValueError(
                f"height cannot go backwards: {height} < {self._height}"
            )
        self._height = height
