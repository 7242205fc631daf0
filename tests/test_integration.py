"""
Integration tests against the live TeleSign API.

Skipped unless TRUST_ME_CUSTOMER_ID, TRUST_ME_SECRET_KEY and
TRUST_ME_TEST_NUMBER are set. Running them sends real messages.
"""

import os
import re

import pytest

from trust_me import TrustMe, Credentials, RemoteRequestError
from trust_me.constants import ENV_CUSTOMER_ID, ENV_SECRET_KEY

ENV_TEST_NUMBER = "TRUST_ME_TEST_NUMBER"


class TestIntegration:
    """Integration tests with the TeleSign REST API."""

    @pytest.fixture(scope="class", autouse=True)
    def live_credentials(self):
        """Skip the class when no live credentials are configured."""
        missing = [
            name for name in (ENV_CUSTOMER_ID, ENV_SECRET_KEY, ENV_TEST_NUMBER)
            if not os.environ.get(name)
        ]
        if missing:
            pytest.skip(f"Live API tests need {', '.join(missing)}")
        return Credentials.from_env()

    @pytest.fixture
    def client(self, live_credentials):
        """Create client with live credentials."""
        with TrustMe(credentials=live_credentials) as client:
            yield client

    @pytest.fixture
    def number(self):
        return os.environ[ENV_TEST_NUMBER]

    def test_send_verification_sms(self, client, number):
        """Test sending a verification SMS."""
        result = client.send_verification_sms(number, template="Your code: $$CODE$$")

        assert re.fullmatch(r"[0-9]{5}", result["code"])
        assert "reference_id" in result["data"]

    def test_send_verification_call(self, client, number):
        """Test placing a verification call with an explicit code."""
        result = client.send_verification_call(number, verify_code="24680")

        assert result["code"] == "24680"
        assert "reference_id" in result["data"]

    def test_wrong_secret_rejected(self, live_credentials, number):
        """Test that a bad signature is refused by the server."""
        bad = Credentials(live_credentials.customer_id, "d3Jvbmctc2VjcmV0")

        with TrustMe(credentials=bad) as client:
            with pytest.raises(RemoteRequestError) as exc_info:
                client.send_verification_sms(number)

        assert exc_info.value.status_code == 401
        assert isinstance(exc_info.value.body, dict)
