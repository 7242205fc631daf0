"""
TeleSign verification client.

This module signs requests with the TeleSign HMAC-SHA256 scheme and
wraps the verify call and verify SMS endpoints of the REST API.
"""

import base64
import binascii
import datetime
import hashlib
import hmac
import logging
import random
import string
import uuid
from email.utils import format_datetime
from typing import Any, Callable, Dict, Optional
from urllib.parse import urlencode

import requests

from .config import Credentials
from .constants import (
    AUTH_METHOD,
    AUTH_SCHEME,
    CODE_LENGTH,
    CODE_PLACEHOLDER,
    CONTENT_TYPE,
    DEFAULT_CONFIG,
    HEADER_AUTHORIZATION,
    HEADER_CONTENT_TYPE,
    HEADER_TS_AUTH_METHOD,
    HEADER_TS_DATE,
    HEADER_TS_NONCE,
    HTTP_METHOD,
    RESOURCE_VERIFY_CALL,
    RESOURCE_VERIFY_SMS,
)
from .exceptions import (
    ArgumentError,
    ConfigurationError,
    InvalidResponseError,
    MissingArgumentError,
    RemoteRequestError,
    TransportError,
)

logger = logging.getLogger(__name__)

_CALL_OPTIONS = frozenset({'verify_code', 'language', 'ucid'})
_SMS_OPTIONS = _CALL_OPTIONS | {'template'}


def _utc_now() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


class TrustMe:
    """
    Client for the TeleSign verification API.

    Every request is a single signed POST; nothing is retried and no state
    is kept between calls apart from the credentials and the HTTP session.
    """

    def __init__(
        self,
        customer_id: Optional[str] = None,
        secret_key: Optional[str] = None,
        *,
        credentials: Optional[Credentials] = None,
        clock: Optional[Callable[[], datetime.datetime]] = None,
        nonce_factory: Optional[Callable[[], Any]] = None,
        session: Optional[requests.Session] = None,
        **config
    ):
        """
        Initialize the client.

        Args:
            customer_id: TeleSign customer ID
            secret_key: base64-encoded TeleSign secret key
            credentials: Credentials object, used for any value not given directly
            clock: Callable returning the current time as an aware datetime
            nonce_factory: Callable returning a fresh nonce (UUID v4 by default)
            session: requests.Session to send requests with
            **config: Configuration options (api_url, timeout, verify, language, ucid)

        Raises:
            ConfigurationError: If credentials are missing or invalid
        """
        if credentials is not None:
            customer_id = customer_id or credentials.customer_id
            secret_key = secret_key or credentials.secret_key

        self.customer_id = customer_id
        self.secret_key = secret_key

        unknown = sorted(set(config) - set(DEFAULT_CONFIG))
        if unknown:
            raise ConfigurationError(f"Unknown configuration options: {', '.join(unknown)}")

        # Merge default config with user overrides
        self.config = {**DEFAULT_CONFIG, **config}

        self._key = self._validate_config()

        self.clock = clock or _utc_now
        self.nonce_factory = nonce_factory or uuid.uuid4

        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()

    @classmethod
    def from_env(cls, **kwargs) -> "TrustMe":
        """Create a client from TRUST_ME_CUSTOMER_ID and TRUST_ME_SECRET_KEY."""
        return cls(credentials=Credentials.from_env(), **kwargs)

    def _validate_config(self) -> bytes:
        """Validate configuration and return the decoded secret key."""
        if not self.customer_id or not self.secret_key:
            raise ConfigurationError(
                "You must supply API credentials: TrustMe(customer_id, secret_key) "
                "or TrustMe(credentials=Credentials(...))"
            )

        try:
            key = base64.b64decode(self.secret_key)
        except (binascii.Error, ValueError) as e:
            raise ConfigurationError(f"secret_key is not valid base64: {e}") from e
        if not key:
            raise ConfigurationError("secret_key decodes to an empty key")

        timeout = self.config['timeout']
        if isinstance(timeout, (int, float)) and timeout <= 0:
            raise ConfigurationError("timeout must be positive")

        if not self.config['api_url']:
            raise ConfigurationError("api_url cannot be empty")

        return key

    @staticmethod
    def _format_date(moment: datetime.datetime) -> str:
        """Format a datetime as an RFC 1123 GMT date."""
        if moment.tzinfo is None:
            moment = moment.replace(tzinfo=datetime.timezone.utc)
        return format_datetime(moment.astimezone(datetime.timezone.utc), usegmt=True)

    @staticmethod
    def canonical_string(resource: str, params: str, date: str, nonce: str) -> str:
        """
        Build the string that is signed for a request.

        The empty third line stands in for the standard Date header, which
        x-ts-date replaces; the server expects it to be there.
        """
        return "\n".join([
            HTTP_METHOD,
            CONTENT_TYPE,
            "",
            f"{HEADER_TS_AUTH_METHOD}:{AUTH_METHOD}",
            f"{HEADER_TS_NONCE}:{nonce}",
            f"{HEADER_TS_DATE}:{date}",
            params,
            resource,
        ])

    def sign(self, content: str) -> str:
        """
        Sign a canonical string.

        Args:
            content: String to sign

        Returns:
            Base64-encoded HMAC-SHA256 digest
        """
        digest = hmac.new(self._key, content.encode('utf-8'), hashlib.sha256).digest()
        return base64.b64encode(digest).decode('ascii')

    def generate_headers(self, resource: str, params: str) -> Dict[str, str]:
        """
        Generate the headers that authenticate a request.

        Args:
            resource: API resource path, e.g. "/v1/verify/sms"
            params: URL-encoded request body

        Returns:
            Dict of header name to value

        Raises:
            MissingArgumentError: If resource or params is empty
        """
        if not resource:
            raise MissingArgumentError("resource is required")
        if not params:
            raise MissingArgumentError("params is required")

        date = self._format_date(self.clock())
        nonce = str(self.nonce_factory())
        signature = self.sign(self.canonical_string(resource, params, date, nonce))

        return {
            HEADER_AUTHORIZATION: f"{AUTH_SCHEME} {self.customer_id}:{signature}",
            HEADER_CONTENT_TYPE: CONTENT_TYPE,
            HEADER_TS_DATE: date,
            HEADER_TS_AUTH_METHOD: AUTH_METHOD,
            HEADER_TS_NONCE: nonce,
        }

    def send_verification_call(self, number: str, **options) -> Dict[str, Any]:
        """
        Place a verification call to the given phone number.

        Args:
            number: Phone number to call
            **options: verify_code (generated when omitted), language, ucid

        Returns:
            Dict with the verification "code" and the parsed response "data"

        Raises:
            ArgumentError: On unknown options or a missing number
            RemoteRequestError: If the API answers with a non-2xx status
            TransportError: If the request could not be sent
        """
        return self._send_verification(RESOURCE_VERIFY_CALL, number, options, _CALL_OPTIONS)

    def send_verification_sms(self, number: str, **options) -> Dict[str, Any]:
        """
        Send a verification SMS to the given phone number.

        Args:
            number: Phone number to message
            **options: verify_code (generated when omitted), language, ucid,
                template (text containing "$$CODE$$")

        Returns:
            Dict with the verification "code" and the parsed response "data"

        Raises:
            ArgumentError: On unknown options or a missing number
            RemoteRequestError: If the API answers with a non-2xx status
            TransportError: If the request could not be sent
        """
        return self._send_verification(RESOURCE_VERIFY_SMS, number, options, _SMS_OPTIONS)

    def _send_verification(self, resource: str, number: str, options: dict, allowed) -> Dict[str, Any]:
        unknown = sorted(set(options) - allowed)
        if unknown:
            raise ArgumentError(f"Unknown options for {resource}: {', '.join(unknown)}")
        if not number:
            raise MissingArgumentError("number is required")

        verify_code = options.get('verify_code')
        if verify_code is None or verify_code == "":
            verify_code = self._generate_code()
        verify_code = str(verify_code)

        fields = [
            ('ucid', options.get('ucid') or self.config['ucid']),
            ('phone_number', number),
            ('language', options.get('language') or self.config['language']),
            ('verify_code', verify_code),
        ]

        template = options.get('template')
        if template is not None:
            if CODE_PLACEHOLDER not in template:
                logger.warning("SMS template does not contain %s", CODE_PLACEHOLDER)
            fields.append(('template', template))

        data = self._api_request(resource, urlencode(fields))
        return {'code': verify_code, 'data': data}

    def _generate_code(self) -> str:
        """Generate a random numeric verification code."""
        return ''.join(random.choice(string.digits) for _ in range(CODE_LENGTH))

    def _api_request(self, resource: str, params: str) -> Any:
        """
        Send a signed POST request.

        Args:
            resource: API resource path
            params: URL-encoded body

        Returns:
            Parsed JSON response body

        Raises:
            TransportError: If the request fails
            RemoteRequestError: If the response status is not 2xx
            InvalidResponseError: If a 2xx response is not JSON
        """
        url = self.config['api_url'].rstrip('/') + resource
        headers = self.generate_headers(resource, params)

        logger.debug("POST %s", resource)
        try:
            response = self.session.request(
                HTTP_METHOD,
                url,
                data=params,
                headers=headers,
                timeout=self.config['timeout'],
                verify=self.config['verify'],
            )
        except requests.RequestException as e:
            logger.error("Request to %s failed: %s", resource, e)
            raise TransportError(f"HTTP request failed: {e}") from e

        logger.debug("%s responded with %s", resource, response.status_code)
        return self._parse_response(response)

    def _parse_response(self, response: requests.Response) -> Any:
        """Parse a response body, raising on non-2xx status."""
        try:
            body = response.json()
            parsed = True
        except ValueError:
            body = response.text
            parsed = False

        if not 200 <= response.status_code < 300:
            logger.warning("TeleSign returned %s %s", response.status_code, response.reason)
            raise RemoteRequestError(response.status_code, response.reason, body)

        if not parsed:
            raise InvalidResponseError(response.status_code, response.text)

        return body

    def close(self):
        """Close HTTP session."""
        if self.session and self._owns_session:
            self.session.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
