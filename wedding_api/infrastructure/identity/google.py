"""Google ID token verifier."""

import structlog
from google.auth import exceptions as google_exceptions
from google.auth.transport import requests as google_requests
from google.oauth2 import id_token

from wedding_api.core.exceptions import InvalidAssertionError
from wedding_api.domain.schemas.auth import FederatedIdentity
from wedding_api.infrastructure.identity.base import AssertionVerifier

logger = structlog.get_logger(__name__)


class GoogleAssertionVerifier(AssertionVerifier):
    """Checks signature against Google's certs, plus audience, issuer and expiry."""

    provider = "google"

    def __init__(self, client_id: str):
        self._client_id = client_id
        self._request = google_requests.Request()

    def verify(self, assertion: str) -> FederatedIdentity:
        if not self._client_id:
            # Without an audience google-auth skips the audience check entirely
            raise RuntimeError("GOOGLE_CLIENT_ID is not configured")

        try:
            payload = id_token.verify_oauth2_token(assertion, self._request, audience=self._client_id)
        except google_exceptions.TransportError:
            raise
        except (ValueError, google_exceptions.GoogleAuthError) as exc:
            logger.warning("Google assertion rejected", reason=str(exc))
            raise InvalidAssertionError() from exc

        subject = str(payload.get("sub") or "").strip()
        if not subject:
            logger.warning("Google assertion rejected", reason="missing_subject")
            raise InvalidAssertionError()

        return FederatedIdentity(
            provider=self.provider,
            subject=subject,
            email=payload.get("email"),
            name=payload.get("name"),
        )
