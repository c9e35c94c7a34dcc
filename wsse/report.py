#!/usr/bin/env python3
"""
Digest-only output: Base64 nonce and password digest on one line
"""

from wsse.common.utils import b64


def format_report(nonce, digest):
    """Report line with Base64 nonce and digest"""
    return f"nonce: [{b64(nonce)}], password digest: [{b64(digest)}]"


def report(nonce, digest):
    """Print the report line to stdout"""
    print(format_report(nonce, digest), flush=True)
