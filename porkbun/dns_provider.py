"""
porkbun/dns_provider.py

Responsibility: Defines the DNSProvider Protocol and the value objects that
cross it: Credentials, RecordType and DnsRecord.
Does NOT: make HTTP calls, validate credentials, or implement any provider logic.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol, runtime_checkable


# ---------------------------------------------------------------------------
# Value objects
# ---------------------------------------------------------------------------


class RecordType(str, Enum):
    """DNS resource record types this application manages."""

    A = "A"
    AAAA = "AAAA"


@dataclass(frozen=True)
class Credentials:
    """
    Caller-supplied Porkbun API key pair, passed through untouched.

    The core never inspects these values. repr() is masked so a Credentials
    instance can be logged without leaking either key.
    """

    api_key: str
    secret_api_key: str

    def __repr__(self) -> str:
        return "Credentials(api_key=***, secret_api_key=***)"


@dataclass(frozen=True)
class DnsRecord:
    """
    A single DNS record as reported by a DNSProvider.

    Transient: returned by the lookup, consumed by the reconciler, never
    cached across requests.
    """

    # Provider-assigned unique identifier for the record
    id: str

    # Fully-qualified DNS name as stored by the provider, e.g. "home.example.com"
    name: str

    # Record type; only A and AAAA records are ever requested
    type: RecordType

    # Current address stored in the record
    content: str


# ---------------------------------------------------------------------------
# Abstract interface
# ---------------------------------------------------------------------------


@runtime_checkable
class DNSProvider(Protocol):
    """
    Protocol for the DNS provider collaborator.

    RecordResolver and DnsService depend on this abstraction, never on
    PorkbunClient directly, so tests can substitute an AsyncMock.
    """

    async def lookup_records(
        self,
        credentials: Credentials,
        zone: str,
        record_type: RecordType,
        host: str,
    ) -> list[DnsRecord]:
        """
        Returns the records of one type in a zone, narrowed by host name.

        Args:
            credentials: Caller-supplied API key pair.
            zone: The registrable domain, e.g. "example.com".
            record_type: A or AAAA.
            host: The subdomain part, e.g. "api"; empty for the apex.

        Returns:
            A list of DnsRecord instances, possibly empty.

        Raises:
            DnsProviderError: If the API call fails or reports non-success.
        """
        ...

    async def create_record(
        self,
        credentials: Credentials,
        zone: str,
        host: str,
        record_type: RecordType,
        address: str,
    ) -> str:
        """
        Creates a new record in the given zone.

        Args:
            credentials: Caller-supplied API key pair.
            zone: The registrable domain.
            host: The subdomain part for the new record.
            record_type: A or AAAA.
            address: The IP address to store.

        Returns:
            The provider-assigned id of the new record.

        Raises:
            DnsProviderError: If the API call fails or reports non-success.
        """
        ...

    async def update_record(
        self,
        credentials: Credentials,
        zone: str,
        record_id: str,
        host: str,
        record_type: RecordType,
        address: str,
    ) -> None:
        """
        Overwrites the address of an existing record.

        Args:
            credentials: Caller-supplied API key pair.
            zone: The registrable domain.
            record_id: The provider-assigned id of the record to edit.
            host: The subdomain part of the record.
            record_type: A or AAAA.
            address: The new IP address.

        Returns:
            None

        Raises:
            DnsProviderError: If the API call fails or reports non-success.
        """
        ...
