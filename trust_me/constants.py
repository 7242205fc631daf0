"""
Constants for the TeleSign verification client.
Values follow the TeleSign REST authentication scheme.
"""

# Remote API
API_URL = "https://rest.telesign.com"
RESOURCE_VERIFY_CALL = "/v1/verify/call"
RESOURCE_VERIFY_SMS = "/v1/verify/sms"

# HTTP Headers
HEADER_AUTHORIZATION = "Authorization"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_TS_DATE = "x-ts-date"
HEADER_TS_AUTH_METHOD = "x-ts-auth-method"
HEADER_TS_NONCE = "x-ts-nonce"

# Signing literals
HTTP_METHOD = "POST"
CONTENT_TYPE = "application/x-www-form-urlencoded"
AUTH_METHOD = "HMAC-SHA256"
AUTH_SCHEME = "TSA"

# Placeholder the SMS template must carry for the code
CODE_PLACEHOLDER = "$$CODE$$"
CODE_LENGTH = 5

# Default configuration values
DEFAULT_CONFIG = {
    'api_url': API_URL,
    'timeout': 30,          # HTTP timeout in seconds
    'verify': True,         # TLS verification flag or CA bundle path
    'language': 'en-US',
    'ucid': 'TRVF',         # Transaction Verification
}

# Environment variables read by Credentials.from_env()
ENV_CUSTOMER_ID = "TRUST_ME_CUSTOMER_ID"
ENV_SECRET_KEY = "TRUST_ME_SECRET_KEY"
