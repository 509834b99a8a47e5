"""
exceptions.py

Responsibility: Defines all custom exception classes used across the application.
Does NOT: contain business logic, logging, or HTTP handling.
"""

from __future__ import annotations


class ConfigError(Exception):
    """
    Raised by load_settings() when an environment variable holds a value
    that cannot be parsed (e.g. a non-numeric TTL).
    """


class ValidationError(Exception):
    """
    Raised when caller-supplied input is malformed: a missing query parameter,
    a qualified domain name with fewer than three labels, or an address that
    is not a valid IP literal.

    Always detected locally before any provider call. The HTTP boundary maps
    it to a 400 response carrying str(exc) as the message.
    """


class AddressFamilyError(ValidationError):
    """
    Raised when a valid IP literal of the wrong family is passed to a
    parameter, e.g. an IPv6 address given in 'ip'.

    The message names the parameter the caller should use instead.
    """

    def __init__(self, raw: str, expected_param: str, message: str) -> None:
        super().__init__(message)
        # The address exactly as supplied by the caller
        self.raw = raw
        # The query parameter the address belongs in, e.g. "ipv6"
        self.expected_param = expected_param


class DnsProviderError(Exception):
    """
    Raised by any DNSProvider implementation when a DNS API call fails.

    `str(exc)` carries the detailed failure (status code, provider message)
    for logging. `public_message` is the generic text returned to HTTP
    callers so provider internals are never leaked.
    """

    def __init__(self, message: str, public_message: str = "DNS provider request failed") -> None:
        super().__init__(message)
        self.public_message = public_message
