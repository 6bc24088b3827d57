"""Stub AuthorityOracle backed by an in-memory set of principals.

WARNING: This stub is for development/testing only.
Production should verify authorities against the real authority registry.
"""

from __future__ import annotations

from collections.abc import Iterable

from campaign_registry.application.ports.authority_oracle import AuthorityOracle


class AuthorityOracleStub(AuthorityOracle):
    """Authority oracle answering from a mutable set of verified principals.

    Attributes:
        verified: Principals currently treated as verified authorities.
    """

    def __init__(self, verified: Iterable[str] = ()) -> None:
        self._verified: set[str] = set(verified)
        self.queries: list[str] = []

    def is_verified_authority(self, principal: str) -> bool:
        self.queries.append(principal)
        return principal in self._verified

    @property
    def verified(self) -> frozenset[str]:
        return frozenset(self._verified)

    def grant(self, principal: str) -> None:
        """Test helper: mark a principal as a verified authority."""
        self._verified.add(principal)

    def revoke(self, principal: str) -> None:
        """Test helper: drop a principal's authority. No-op if absent."""
        self._verified.discard(principal)

    def clear(self) -> None:
        """Test helper: revoke every principal."""
        self._verified.clear()
        self.queries.clear()
