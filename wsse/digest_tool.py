#!/usr/bin/env python3
"""
Password Digest Tool
Prints a fresh Base64 nonce and the matching PasswordDigest

Usage:
    python -m wsse.digest_tool
"""

import sys

from wsse.common.errors import FatalConfigurationError, InvalidTimestampFormat
from wsse.common.utils import RandomSource, current_timestamp, generate_nonce
from wsse.config import get_credentials
from wsse.crypto.digest import compute_digest
from wsse.report import report


def main(random_source=None, clock=None):
    try:
        random_source = random_source or RandomSource()
        _, password = get_credentials()

        nonce = generate_nonce(random_source)
        created = current_timestamp(clock)
        digest = compute_digest(nonce, created, password)
    except (FatalConfigurationError, InvalidTimestampFormat) as e:
        print(f"[✗] {e}", file=sys.stderr)
        return 1

    report(nonce, digest)
    return 0


if __name__ == "__main__":
    sys.exit(main())
