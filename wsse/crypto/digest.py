#!/usr/bin/env python3
"""
UsernameToken PasswordDigest with SHA-1

PasswordDigest = SHA1(nonce || created || password)

The nonce goes in as raw bytes, created and password as UTF-8, with no
separators. Verifiers recompute the same value from the rendered header,
so the byte order here is fixed by the UsernameToken Profile 1.0.
"""

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes

from wsse.common.errors import FatalConfigurationError

DIGEST_SIZE = 20


def compute_digest(nonce, created, password):
    """
    Compute the password digest
    Input: nonce (bytes), created (XML dateTime string), password (string)
    Returns: 20-byte SHA-1 digest
    """
    try:
        hasher = hashes.Hash(hashes.SHA1())
    except UnsupportedAlgorithm as e:
        raise FatalConfigurationError(f"SHA-1 not available: {e}") from e

    hasher.update(nonce)
    hasher.update(created.encode('utf-8'))
    hasher.update(password.encode('utf-8'))
    return hasher.finalize()
