"""FastAPI dependencies — auth components and the verified caller identity."""

from typing import Optional

import structlog
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from wedding_api.application.services.auth_service import CredentialStore
from wedding_api.application.services.federated_auth_service import IdentityProviderBridge
from wedding_api.application.services.token_service import TokenIssuer, TokenVerifier
from wedding_api.config import Settings
from wedding_api.core.exceptions import MissingTokenError
from wedding_api.domain.repositories.user_repository import UserRepository
from wedding_api.domain.schemas.auth import Identity
from wedding_api.infrastructure.identity.base import AssertionVerifier
from wedding_api.interfaces.deps import get_user_repository

logger = structlog.get_logger(__name__)

# auto_error=False so a missing or non-Bearer header becomes our own 401 body
bearer_scheme = HTTPBearer(scheme_name="bearerAuth", auto_error=False)


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_token_issuer(request: Request) -> TokenIssuer:
    return request.app.state.token_issuer


def get_token_verifier(request: Request) -> TokenVerifier:
    return request.app.state.token_verifier


def get_assertion_verifier(request: Request) -> AssertionVerifier:
    return request.app.state.assertion_verifier


def get_credential_store(
    request: Request,
    repo: UserRepository = Depends(get_user_repository),
    settings: Settings = Depends(get_app_settings),
) -> CredentialStore:
    return CredentialStore(
        repo,
        request.app.state.pwd_context,
        default_role=settings.REGISTER_DEFAULT_ROLE,
    )


def get_identity_bridge(
    verifier: AssertionVerifier = Depends(get_assertion_verifier),
    store: CredentialStore = Depends(get_credential_store),
    issuer: TokenIssuer = Depends(get_token_issuer),
    settings: Settings = Depends(get_app_settings),
) -> IdentityProviderBridge:
    return IdentityProviderBridge(verifier, store, issuer, default_role=settings.FEDERATED_DEFAULT_ROLE)


async def get_current_identity(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    verifier: TokenVerifier = Depends(get_token_verifier),
) -> Identity:
    """Verify the bearer token and hand the caller's identity to the handler."""
    if credentials is None or not credentials.credentials:
        logger.warning("Token rejected", reason="missing_or_malformed_header")
        raise MissingTokenError()
    identity = verifier.verify_token(credentials.credentials)
    structlog.contextvars.bind_contextvars(user_id=identity.user_id)
    return identity
