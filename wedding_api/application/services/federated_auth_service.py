"""Federated sign-in — maps a verified third-party assertion onto a local user."""

from typing import Tuple

import structlog

from wedding_api.application.services.auth_service import CredentialStore
from wedding_api.application.services.token_service import TokenIssuer
from wedding_api.domain.models.user import User
from wedding_api.infrastructure.identity.base import AssertionVerifier

logger = structlog.get_logger(__name__)


class IdentityProviderBridge:
    def __init__(
        self,
        verifier: AssertionVerifier,
        store: CredentialStore,
        issuer: TokenIssuer,
        default_role: str = "client",
    ):
        self.verifier = verifier
        self.store = store
        self.issuer = issuer
        self.default_role = default_role

    def sign_in(self, raw_assertion: str) -> Tuple[str, User]:
        """Verify the assertion, upsert the user, and mint a session token."""
        identity = self.verifier.verify(raw_assertion)
        user = self.store.upsert_federated(
            provider_id=identity.provider,
            subject=identity.subject,
            email=identity.email,
            name=identity.name,
            role=self.default_role,
        )
        logger.info("Federated sign-in", provider=identity.provider, user_id=user.id)
        return self.issuer.issue(user.id, user.role), user
