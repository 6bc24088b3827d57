"""Authority Oracle port - interface for authority verification.

The registry does not decide who is an authority. It asks this oracle,
once per registration, after field validation and before the duplicate
check. Answers must be deterministic for a given state snapshot.
"""

from abc import ABC, abstractmethod


class AuthorityOracle(ABC):
    """Abstract interface answering "is this principal a verified authority?"."""

    @abstractmethod
    def is_verified_authority(self, principal: str) -> bool:
        """Check whether a principal may register campaigns.

        Args:
            principal: Identity of the caller.

        Returns:
            True if the principal is a verified authority.
        """
        ...
