#!/usr/bin/env python3
"""
Fatal error types for the digest tools
"""


class FatalConfigurationError(RuntimeError):
    """The platform lacks the secure random source or SHA-1"""


class InvalidTimestampFormat(ValueError):
    """The clock produced a value that is not an XML dateTime"""
