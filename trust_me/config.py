"""
Credential configuration for the TeleSign verification client.
"""

import os
from typing import Mapping, NamedTuple, Optional

from .constants import ENV_CUSTOMER_ID, ENV_SECRET_KEY
from .exceptions import ConfigurationError


class Credentials(NamedTuple):
    """
    TeleSign API credentials.

    Attributes:
        customer_id: TeleSign customer ID
        secret_key: base64-encoded TeleSign secret key
    """

    customer_id: str
    secret_key: str

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Credentials":
        """
        Load credentials from environment variables.

        Args:
            environ: Mapping to read from, defaults to os.environ

        Returns:
            Credentials instance

        Raises:
            ConfigurationError: If either variable is unset or empty
        """
        if environ is None:
            environ = os.environ

        customer_id = environ.get(ENV_CUSTOMER_ID)
        secret_key = environ.get(ENV_SECRET_KEY)

        missing = [
            name for name, value in ((ENV_CUSTOMER_ID, customer_id), (ENV_SECRET_KEY, secret_key))
            if not value
        ]
        if missing:
            raise ConfigurationError(f"Missing environment variables: {', '.join(missing)}")

        return cls(customer_id, secret_key)
