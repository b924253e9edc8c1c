"""Auth API routes — register, login, Google sign-in, me."""

from fastapi import APIRouter, Depends

from wedding_api.application.services.auth_service import CredentialStore
from wedding_api.application.services.federated_auth_service import IdentityProviderBridge
from wedding_api.application.services.token_service import TokenIssuer
from wedding_api.core.exceptions import InvalidTokenError
from wedding_api.domain.schemas.auth import (
    AuthResponse,
    GoogleSignInRequest,
    Identity,
    LoginRequest,
    UserCreate,
    UserRead,
)
from wedding_api.interfaces.api.deps import (
    get_credential_store,
    get_current_identity,
    get_identity_bridge,
    get_token_issuer,
)

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post("/register", response_model=AuthResponse)
def register(
    body: UserCreate,
    store: CredentialStore = Depends(get_credential_store),
    issuer: TokenIssuer = Depends(get_token_issuer),
):
    user = store.register(name=body.name, email=body.email, password=body.password, role=body.role)
    return AuthResponse(user=UserRead.model_validate(user), token=issuer.issue(user.id, user.role))


@router.post("/login", response_model=AuthResponse)
def login(
    body: LoginRequest,
    store: CredentialStore = Depends(get_credential_store),
    issuer: TokenIssuer = Depends(get_token_issuer),
):
    user = store.authenticate(body.email, body.password)
    return AuthResponse(user=UserRead.model_validate(user), token=issuer.issue(user.id, user.role))


@router.post("/google", response_model=AuthResponse)
def google_sign_in(
    body: GoogleSignInRequest,
    bridge: IdentityProviderBridge = Depends(get_identity_bridge),
):
    token, user = bridge.sign_in(body.id_token)
    return AuthResponse(user=UserRead.model_validate(user), token=token)


@router.get("/me", response_model=UserRead)
def get_me(
    identity: Identity = Depends(get_current_identity),
    store: CredentialStore = Depends(get_credential_store),
):
    user = store.get_user(identity.user_id)
    if user is None:
        raise InvalidTokenError()
    return UserRead.model_validate(user)
