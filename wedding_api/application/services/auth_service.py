"""Auth service — credential store over the user repository, with bcrypt hashing."""

from typing import Optional

import structlog
from passlib.context import CryptContext

from wedding_api.config import Settings
from wedding_api.core.exceptions import DuplicateEmailError, InvalidCredentialsError
from wedding_api.core.logging import log_digest
from wedding_api.domain.models.user import User
from wedding_api.domain.repositories.user_repository import UserRepository

logger = structlog.get_logger(__name__)


def build_password_context(settings: Settings) -> CryptContext:
    return CryptContext(
        schemes=["bcrypt"],
        deprecated="auto",
        bcrypt__rounds=settings.BCRYPT_ROUNDS,
    )


class CredentialStore:
    """Registers, authenticates and upserts users.

    Password hashes never leave this class; callers get ``User`` rows and
    serialize them through ``UserRead``, which has no hash field.
    """

    def __init__(
        self,
        repo: UserRepository,
        pwd_context: CryptContext,
        default_role: Optional[str] = None,
    ):
        self.repo = repo
        self.pwd_context = pwd_context
        self.default_role = default_role

    def register(self, name: str, email: str, password: str, role: Optional[str] = None) -> User:
        email = email.strip().lower()
        if self.repo.get_by_email(email) is not None:
            logger.info("Registration rejected", reason="duplicate_email", email=log_digest(email))
            raise DuplicateEmailError()

        user = self.repo.create_password_user(
            name=name,
            email=email,
            password_hash=self.pwd_context.hash(password),
            role=role if role is not None else self.default_role,
        )
        logger.info("User registered", user_id=user.id, role=user.role)
        return user

    def authenticate(self, email: str, password: str) -> User:
        user = self.repo.get_by_email(email)
        if user is None or not user.password_hash:
            # Burn the same hashing time as a real check
            self.pwd_context.dummy_verify()
            logger.info("Login failed", email=log_digest(email))
            raise InvalidCredentialsError()

        if not self.pwd_context.verify(password, user.password_hash):
            logger.info("Login failed", email=log_digest(email))
            raise InvalidCredentialsError()

        logger.info("Login succeeded", user_id=user.id)
        return user

    def upsert_federated(
        self,
        provider_id: str,
        subject: str,
        email: Optional[str] = None,
        name: Optional[str] = None,
        role: Optional[str] = None,
    ) -> User:
        auth_id = f"{provider_id}:{subject}"
        return self.repo.upsert_federated(auth_id=auth_id, email=email, name=name, role=role)

    def get_user(self, user_id: int) -> Optional[User]:
        return self.repo.get_by_id(user_id)
