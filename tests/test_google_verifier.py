"""Google ID-token verifier tests with google-auth's verification patched out."""

from __future__ import annotations

import unittest
from unittest import mock

from google.auth import exceptions as google_exceptions

from wedding_api.core.exceptions import InvalidAssertionError
from wedding_api.domain.schemas.auth import FederatedIdentity
from wedding_api.infrastructure.identity.google import GoogleAssertionVerifier

CLIENT_ID = "client-id.apps.googleusercontent.com"
VERIFY_PATH = "wedding_api.infrastructure.identity.google.id_token.verify_oauth2_token"


class GoogleAssertionVerifierTests(unittest.TestCase):
    def setUp(self) -> None:
        self.verifier = GoogleAssertionVerifier(CLIENT_ID)
        patcher = mock.patch(VERIFY_PATH)
        self.verify_oauth2_token = patcher.start()
        self.addCleanup(patcher.stop)

    def test_valid_assertion_becomes_federated_identity(self) -> None:
        self.verify_oauth2_token.return_value = {
            "sub": "1234567890",
            "email": "ann@x.com",
            "name": "Ann",
            "aud": CLIENT_ID,
        }

        identity = self.verifier.verify("signed.jwt.value")

        self.assertEqual(
            identity,
            FederatedIdentity(provider="google", subject="1234567890", email="ann@x.com", name="Ann"),
        )
        args, kwargs = self.verify_oauth2_token.call_args
        self.assertEqual(args[0], "signed.jwt.value")
        self.assertEqual(kwargs["audience"], CLIENT_ID)

    def test_missing_email_and_name_are_passed_through_as_none(self) -> None:
        self.verify_oauth2_token.return_value = {"sub": 42}

        identity = self.verifier.verify("signed.jwt.value")

        self.assertEqual(identity.subject, "42")
        self.assertIsNone(identity.email)
        self.assertIsNone(identity.name)

    def test_wrong_audience_is_rejected(self) -> None:
        self.verify_oauth2_token.side_effect = ValueError("Token has wrong audience other-client")

        with self.assertRaises(InvalidAssertionError) as ctx:
            self.verifier.verify("signed.jwt.value")
        self.assertEqual(ctx.exception.message, "Google sign-in failed")

    def test_expired_or_forged_assertion_is_rejected(self) -> None:
        self.verify_oauth2_token.side_effect = google_exceptions.InvalidValue("Token expired")

        with self.assertRaises(InvalidAssertionError):
            self.verifier.verify("signed.jwt.value")

    def test_empty_subject_is_rejected(self) -> None:
        for payload in ({"sub": ""}, {"sub": "   "}, {"email": "ann@x.com"}):
            self.verify_oauth2_token.return_value = payload
            with self.subTest(payload=payload), self.assertRaises(InvalidAssertionError):
                self.verifier.verify("signed.jwt.value")

    def test_certificate_fetch_failure_is_not_an_assertion_failure(self) -> None:
        self.verify_oauth2_token.side_effect = google_exceptions.TransportError("certs unreachable")

        with self.assertRaises(google_exceptions.TransportError):
            self.verifier.verify("signed.jwt.value")

    def test_unconfigured_client_id_refuses_to_verify(self) -> None:
        verifier = GoogleAssertionVerifier("")

        with self.assertRaises(RuntimeError):
            verifier.verify("signed.jwt.value")
        self.verify_oauth2_token.assert_not_called()


if __name__ == "__main__":
    unittest.main()
