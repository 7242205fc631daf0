"""
Custom exceptions for the TeleSign verification client.
"""

import requests


class TrustMeError(Exception):
    """Base exception for client errors."""
    pass


class ConfigurationError(TrustMeError):
    """Raised when credentials or client configuration are invalid."""
    pass


class ArgumentError(TrustMeError, ValueError):
    """Raised when an operation receives an invalid argument."""
    pass


class MissingArgumentError(ArgumentError):
    """Raised when a required argument is missing or empty."""
    pass


class RemoteRequestError(TrustMeError):
    """Raised when the API answers with a non-2xx status."""

    def __init__(self, status_code, message, body=None):
        self.status_code = status_code
        self.message = message
        self.body = body
        super().__init__(
            f"{status_code} {message!r}\nResponse body: {body!r}"
        )


class InvalidResponseError(TrustMeError):
    """Raised when a successful response does not carry valid JSON."""

    def __init__(self, status_code, text):
        self.status_code = status_code
        self.text = text
        super().__init__(f"{status_code} response is not valid JSON: {text[:200]!r}")


class TransportError(TrustMeError, requests.RequestException):
    """Raised when the HTTP request could not be completed."""
    pass
