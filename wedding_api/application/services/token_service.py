"""Token service — issues and verifies the signed session tokens (JWT, python-jose)."""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import structlog
from jose import JWTError, jwt

from wedding_api.config import Settings
from wedding_api.core.exceptions import InvalidTokenError, MissingSubjectError, MissingTokenError
from wedding_api.domain.schemas.auth import Identity

logger = structlog.get_logger(__name__)

# "sub" is what we issue; "uid" was written by the old Google sign-in path
SUBJECT_CLAIMS = ("sub", "uid")


def _subject_id(raw: Any) -> Optional[int]:
    """Accept a JSON integer or a digit-only string; booleans and floats are not ids."""
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str) and raw.isascii() and raw.isdigit():
        return int(raw)
    return None


class TokenIssuer:
    def __init__(self, secret_key: str, algorithm: str = "HS256", expires_delta: timedelta = timedelta(days=7)):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expires_delta = expires_delta

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenIssuer":
        return cls(
            secret_key=settings.SECRET_KEY,
            algorithm=settings.JWT_ALGORITHM,
            expires_delta=timedelta(minutes=settings.JWT_EXPIRATION_MINUTES),
        )

    def issue(self, subject_id: int, role: Optional[str] = None, now: Optional[datetime] = None) -> str:
        issued_at = now or datetime.now(timezone.utc)
        claims: Dict[str, Any] = {
            "sub": str(subject_id),
            "iat": issued_at,
            "exp": issued_at + self.expires_delta,
        }
        if role:
            claims["role"] = role
        return jwt.encode(claims, self.secret_key, algorithm=self.algorithm)


class TokenVerifier:
    """Turns an ``Authorization`` header value into an ``Identity``.

    Every failure is one of MissingToken, InvalidToken or MissingSubject, all
    rendered to the client as the same 401. The underlying cause is only logged.
    """

    def __init__(self, secret_key: str, algorithm: str = "HS256"):
        self.secret_key = secret_key
        self.algorithm = algorithm

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenVerifier":
        return cls(secret_key=settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)

    @staticmethod
    def bearer_token(authorization: Optional[str]) -> str:
        scheme, _, token = (authorization or "").strip().partition(" ")
        token = token.strip()
        if scheme.lower() != "bearer" or not token:
            logger.warning("Token rejected", reason="missing_or_malformed_header")
            raise MissingTokenError()
        return token

    def verify(self, authorization: Optional[str]) -> Identity:
        """Verify a raw ``Authorization`` header value."""
        return self.verify_token(self.bearer_token(authorization))

    def verify_token(self, token: str) -> Identity:
        try:
            claims = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except JWTError as exc:
            logger.warning("Token rejected", reason=str(exc) or exc.__class__.__name__)
            raise InvalidTokenError() from exc

        raw_subject = next(
            (claims[name] for name in SUBJECT_CLAIMS if claims.get(name) not in (None, "")),
            None,
        )
        if raw_subject is None:
            logger.warning("Token rejected", reason="missing_subject")
            raise MissingSubjectError()

        user_id = _subject_id(raw_subject)
        if user_id is None:
            logger.warning("Token rejected", reason="non_integer_subject")
            raise InvalidTokenError()

        return Identity(user_id=user_id, role=claims.get("role"))
