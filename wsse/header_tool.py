#!/usr/bin/env python3
"""
WS-Security Header Tool
Prints one <soapenv:Header> with a UsernameToken PasswordDigest and exits

Usage:
    python -m wsse.header_tool

Credentials come from WSSE_USERNAME / WSSE_PASSWORD (environment or .env).
"""

import sys

from wsse.common.errors import FatalConfigurationError, InvalidTimestampFormat
from wsse.common.utils import RandomSource
from wsse.config import get_credentials
from wsse.header import render_header


def main(random_source=None, clock=None):
    try:
        random_source = random_source or RandomSource()
        username, password = get_credentials()
        header = render_header(username, password, random_source, clock)
    except (FatalConfigurationError, InvalidTimestampFormat) as e:
        print(f"[✗] {e}", file=sys.stderr)
        sys.exit(1)

    print(header, flush=True)
    sys.exit(0)


if __name__ == "__main__":
    main()
