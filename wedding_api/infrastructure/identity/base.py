"""Identity provider interfaces."""

from abc import ABC, abstractmethod

from wedding_api.domain.schemas.auth import FederatedIdentity


class AssertionVerifier(ABC):
    """Provider-neutral verification of a third-party identity assertion."""

    provider: str

    @abstractmethod
    def verify(self, assertion: str) -> FederatedIdentity:
        """Verify the assertion or raise InvalidAssertionError."""
