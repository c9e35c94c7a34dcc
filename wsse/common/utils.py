#!/usr/bin/env python3
"""
Common Utility Functions
Nonce generation, creation timestamps and Base64 helpers
"""

import base64
import datetime
import threading

from Crypto.Random import get_random_bytes

from wsse.common.errors import FatalConfigurationError, InvalidTimestampFormat

NONCE_SIZE = 16


class RandomSource:
    """
    Process-wide handle on the secure random source.
    Create one per process and pass it to whatever needs nonces.
    """

    def __init__(self, read_bytes=None):
        self._read_bytes = read_bytes or get_random_bytes
        self._lock = threading.Lock()
        # Probe once so a missing OS RNG fails at startup, not mid-run
        self.read(1)

    def read(self, n):
        """Return exactly n random bytes"""
        with self._lock:
            try:
                data = self._read_bytes(n)
            except (NotImplementedError, OSError) as e:
                raise FatalConfigurationError(f"Secure random source unavailable: {e}") from e

        if len(data) != n:
            raise FatalConfigurationError(
                f"Secure random source returned {len(data)} bytes, expected {n}"
            )
        return bytes(data)


def generate_nonce(random_source):
    """Generate random 16-byte nonce"""
    return random_source.read(NONCE_SIZE)


def format_created(moment):
    """
    Format an aware datetime as an XML-Schema dateTime in UTC
    Returns: string like 2024-01-01T00:00:00.000Z
    """
    if not isinstance(moment, datetime.datetime):
        raise InvalidTimestampFormat(f"Expected datetime, got {type(moment).__name__}")
    if moment.tzinfo is None or moment.utcoffset() is None:
        raise InvalidTimestampFormat(f"Timestamp has no timezone: {moment.isoformat()}")

    moment = moment.astimezone(datetime.UTC)
    # %Y is not zero-padded below year 1000 on every platform
    return (
        f"{moment.year:04d}"
        + moment.strftime('-%m-%dT%H:%M:%S')
        + f".{moment.microsecond // 1000:03d}Z"
    )


def current_timestamp(clock=None):
    """Get current instant as an XML-Schema dateTime string"""
    if clock is None:
        return format_created(datetime.datetime.now(datetime.UTC))
    return format_created(clock())


def b64(data):
    """Standard Base64 (padded) as text"""
    return base64.b64encode(data).decode('utf-8')
