"""
TeleSign verification client

A Python client library that signs requests with the TeleSign HMAC-SHA256
scheme and sends verification calls and SMS messages.

Example usage:
    from trust_me import TrustMe

    client = TrustMe("customer-id", "base64-secret-key")
    result = client.send_verification_sms("15554443333")
    print(result["code"])
"""

from .client import TrustMe
from .config import Credentials
from .exceptions import (
    TrustMeError,
    ConfigurationError,
    ArgumentError,
    MissingArgumentError,
    RemoteRequestError,
    InvalidResponseError,
    TransportError
)
from .constants import (
    API_URL,
    RESOURCE_VERIFY_CALL,
    RESOURCE_VERIFY_SMS,
    DEFAULT_CONFIG
)

__version__ = "1.0.0"
__all__ = [
    "TrustMe",
    "Credentials",
    "TrustMeError",
    "ConfigurationError",
    "ArgumentError",
    "MissingArgumentError",
    "RemoteRequestError",
    "InvalidResponseError",
    "TransportError",
    "API_URL",
    "RESOURCE_VERIFY_CALL",
    "RESOURCE_VERIFY_SMS",
    "DEFAULT_CONFIG"
]
