"""
services/ip_service.py

Responsibility: Validates IP address literals, classifies them as IPv4 or
IPv6, and maps each family to its DNS record type.
Does NOT: fetch the host's public IP, talk to the DNS provider, or read
query parameters.
"""

from __future__ import annotations

import ipaddress
import logging
from enum import Enum

from exceptions import AddressFamilyError, ValidationError
from porkbun.dns_provider import RecordType

logger = logging.getLogger(__name__)


class AddressKind(str, Enum):
    """IP address family of a literal."""

    IPV4 = "IPv4"
    IPV6 = "IPv6"


# Fixed 1:1 correspondence between address family and record type
_RECORD_TYPES: dict[AddressKind, RecordType] = {
    AddressKind.IPV4: RecordType.A,
    AddressKind.IPV6: RecordType.AAAA,
}

# Query parameter each family belongs in
_PARAM_FOR_KIND: dict[AddressKind, str] = {
    AddressKind.IPV4: "ip",
    AddressKind.IPV6: "ipv6",
}


def classify_address(address: str) -> AddressKind:
    """
    Returns the family of an IP literal.

    Accepts dotted-decimal IPv4 and colon-hex IPv6. Zone-id suffixes such as
    "fe80::1%lo0" are rejected even though the ipaddress module accepts them.

    Args:
        address: The literal as supplied by the caller.

    Returns:
        AddressKind.IPV4 or AddressKind.IPV6.

    Raises:
        ValidationError: If the string is not a valid IPv4 or IPv6 literal.
    """
    if "%" in address:
        raise ValidationError(f"Invalid IP address: {address}")

    try:
        parsed = ipaddress.ip_address(address)
    except ValueError as exc:
        raise ValidationError(f"Invalid IP address: {address}") from exc

    return AddressKind.IPV4 if parsed.version == 4 else AddressKind.IPV6


def record_type_for(kind: AddressKind) -> RecordType:
    """Maps IPv4 to A and IPv6 to AAAA."""
    return _RECORD_TYPES[kind]


def validate_address_param(address: str, expected: AddressKind) -> RecordType:
    """
    Checks that an address given in a family-specific parameter matches it.

    Args:
        address: The literal from the 'ip' or 'ipv6' query parameter.
        expected: The family that parameter is for.

    Returns:
        The record type to manage for this address.

    Raises:
        ValidationError: If the literal is not a valid IP address.
        AddressFamilyError: If it is valid but of the other family.
    """
    kind = classify_address(address)
    if kind is not expected:
        correct_param = _PARAM_FOR_KIND[kind]
        logger.warning(
            "%s address %s supplied in '%s'", kind.value, address, _PARAM_FOR_KIND[expected]
        )
        raise AddressFamilyError(
            raw=address,
            expected_param=correct_param,
            message=(
                f"'{address}' is an {kind.value} address, "
                f"use query-parameter '{correct_param}' instead"
            ),
        )
    return record_type_for(kind)
