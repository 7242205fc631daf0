#!/usr/bin/env python3
"""
Basic usage examples for the TeleSign verification client.

Reads credentials from TRUST_ME_CUSTOMER_ID and TRUST_ME_SECRET_KEY and
sends a verification SMS to the number given on the command line.
"""

import logging
import sys

from trust_me import TrustMe, TrustMeError


def main():
    """Run basic usage examples."""
    logging.basicConfig(level=logging.DEBUG, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    if len(sys.argv) != 2:
        print(f"Usage: {sys.argv[0]} PHONE_NUMBER", file=sys.stderr)
        return 2
    number = sys.argv[1]

    print("=== TeleSign Verification Client Usage Examples ===\n")

    try:
        with TrustMe.from_env() as client:
            print(f"1. Client created for customer: {client.customer_id}\n")

            # Example 1: Inspect the signed headers for a request
            print("2. Generating signed headers...")
            headers = client.generate_headers("/v1/verify/sms", f"phone_number={number}")
            for name, value in headers.items():
                if name == "Authorization":
                    value = value[:16] + "..."
                print(f"   {name}: {value}")
            print()

            # Example 2: Send a verification SMS
            print("3. Sending verification SMS...")
            result = client.send_verification_sms(number, template="Your code is $$CODE$$")
            print(f"   ✓ Code sent: {result['code']}")
            print(f"   Reference: {result['data'].get('reference_id', 'N/A')}")
            print()
    except TrustMeError as e:
        print(f"   ✗ {type(e).__name__}: {e}", file=sys.stderr)
        return 1

    print("=== Examples completed ===")
    return 0


if __name__ == "__main__":
    sys.exit(main())
