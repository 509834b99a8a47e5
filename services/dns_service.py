"""
services/dns_service.py

Responsibility: Reconciles the requested addresses of one qualified name
against the provider. Decides per address whether to create, update or
leave the record alone, executes that decision, and joins the outcomes into
a single summary message.
Does NOT: make HTTP calls directly, read query parameters, or retry failures.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Union

from exceptions import ValidationError
from porkbun.dns_provider import Credentials, DnsRecord, DNSProvider, RecordType
from services.domain_service import QualifiedName
from services.ip_service import AddressKind, validate_address_param
from services.record_resolver import RecordResolver

logger = logging.getLogger(__name__)

SUMMARY_SEPARATOR = "; "


# ---------------------------------------------------------------------------
# Actions: what the decision table asks the provider to do
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Create:
    record_type: RecordType
    address: str


@dataclass(frozen=True)
class Update:
    record: DnsRecord
    address: str
    record_type: RecordType


@dataclass(frozen=True)
class NoOp:
    record: DnsRecord


Action = Union[Create, Update, NoOp]


def decide(existing: DnsRecord | None, desired_address: str, record_type: RecordType) -> Action:
    """
    Pure decision table for a single address.

    | existing | existing.content == desired | action |
    |----------|-----------------------------|--------|
    | None     | -                           | Create |
    | record   | True                        | NoOp   |
    | record   | False                       | Update |

    Args:
        existing: The record returned by RecordResolver, or None.
        desired_address: The address the record should hold.
        record_type: A or AAAA.

    Returns:
        Create, Update or NoOp.
    """
    if existing is None:
        return Create(record_type=record_type, address=desired_address)
    if existing.content == desired_address:
        return NoOp(record=existing)
    return Update(record=existing, address=desired_address, record_type=record_type)


# ---------------------------------------------------------------------------
# Outcomes: what happened, as reported back to the caller
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class UpToDate:
    name: str
    record_type: RecordType

    @property
    def message(self) -> str:
        return f"DNS record '{self.name}' ({self.record_type.value}) is already up to date"


@dataclass(frozen=True)
class Updated:
    name: str
    record_type: RecordType

    @property
    def message(self) -> str:
        return f"DNS record '{self.name}' ({self.record_type.value}) updated successfully"


@dataclass(frozen=True)
class Created:
    # The host part, e.g. "api"
    name: str
    record_type: RecordType
    record_id: str = ""

    @property
    def message(self) -> str:
        return (
            f"DNS record for subdomain '{self.name}' ({self.record_type.value}) "
            "successfully created"
        )


Outcome = Union[UpToDate, Updated, Created]


def aggregate_outcomes(outcomes: Sequence[Outcome]) -> str:
    """
    Joins per-address outcome messages in processing order.

    Only ever called with a complete list: a failure anywhere raises before
    aggregation, so no partial summary is ever produced.

    Args:
        outcomes: One outcome per requested address.

    Returns:
        The messages joined with "; ".
    """
    return SUMMARY_SEPARATOR.join(outcome.message for outcome in outcomes)


# ---------------------------------------------------------------------------
# Service
# ---------------------------------------------------------------------------


class DnsService:
    """
    Runs one dynamic-DNS update for a qualified name.

    Addresses are processed sequentially, IPv4 before IPv6, and processing
    stops at the first DnsProviderError. Changes already committed for an
    earlier address are not rolled back; calling again is safe because an
    applied change resolves to NoOp the second time.

    Collaborators:
        - DNSProvider: executes create/update calls
        - RecordResolver: finds the existing record for each address
    """

    def __init__(self, dns_provider: DNSProvider, resolver: RecordResolver | None = None) -> None:
        """
        Initialises the service with its collaborators.

        Args:
            dns_provider: Any DNSProvider implementation (e.g. PorkbunClient).
            resolver: Optional RecordResolver; built over dns_provider if omitted.
        """
        self._provider = dns_provider
        self._resolver = resolver or RecordResolver(dns_provider)

    # ---------------------------------------------------------------------------
    # Public API
    # ---------------------------------------------------------------------------

    async def update_dns(
        self,
        credentials: Credentials,
        name: QualifiedName,
        ipv4: str | None = None,
        ipv6: str | None = None,
    ) -> str:
        """
        Reconciles the A and/or AAAA record of `name` and returns a summary.

        Both addresses are validated before any provider call is made.

        Args:
            credentials: Caller-supplied API key pair, passed through.
            name: The split qualified name.
            ipv4: Desired IPv4 address for the A record, if any.
            ipv6: Desired IPv6 address for the AAAA record, if any.

        Returns:
            The joined outcome messages, IPv4 first.

        Raises:
            ValidationError: If neither address is given, or one is malformed
                             or of the wrong family.
            DnsProviderError: If any lookup, create or update fails.
        """
        requested: list[tuple[str, RecordType]] = []
        if ipv4:
            requested.append((ipv4, validate_address_param(ipv4, AddressKind.IPV4)))
        if ipv6:
            requested.append((ipv6, validate_address_param(ipv6, AddressKind.IPV6)))
        if not requested:
            raise ValidationError("No address supplied")

        outcomes = await self.update_addresses(credentials, name, requested)
        return aggregate_outcomes(outcomes)

    async def update_addresses(
        self,
        credentials: Credentials,
        name: QualifiedName,
        requested: Sequence[tuple[str, RecordType]],
    ) -> list[Outcome]:
        """
        Reconciles each (address, record type) pair in order, failing fast.

        Args:
            credentials: Caller-supplied API key pair.
            name: The split qualified name.
            requested: Validated (address, record type) pairs.

        Returns:
            One outcome per pair, in the order given.

        Raises:
            DnsProviderError: On the first failing provider call; pairs after
                              it are not attempted.
        """
        outcomes: list[Outcome] = []
        for address, record_type in requested:
            outcomes.append(await self.reconcile_address(credentials, name, address, record_type))
        return outcomes

    async def reconcile_address(
        self,
        credentials: Credentials,
        name: QualifiedName,
        address: str,
        record_type: RecordType,
    ) -> Outcome:
        """
        Resolves, decides and executes for a single address.

        Args:
            credentials: Caller-supplied API key pair.
            name: The split qualified name.
            address: The validated desired address.
            record_type: A or AAAA, matching the address family.

        Returns:
            UpToDate, Updated or Created.

        Raises:
            DnsProviderError: If the lookup or the resulting write fails.
        """
        existing = await self._resolver.resolve(credentials, name, record_type)
        action = decide(existing, address, record_type)

        if isinstance(action, NoOp):
            logger.info(
                "Skip updating, record with id %s is already up to date.", action.record.id
            )
            return UpToDate(name=action.record.name, record_type=record_type)

        if isinstance(action, Update):
            logger.info(
                "Updating %s record %s (id=%s) from %s to %s",
                record_type.value,
                action.record.name,
                action.record.id,
                action.record.content,
                address,
            )
            await self._provider.update_record(
                credentials, name.zone, action.record.id, name.host, record_type, address
            )
            return Updated(name=action.record.name, record_type=record_type)

        logger.info(
            "Creating new %s record for zone %s with subdomain %r and IP %s",
            record_type.value,
            name.zone,
            name.host,
            address,
        )
        record_id = await self._provider.create_record(
            credentials, name.zone, name.host, record_type, address
        )
        return Created(name=name.host, record_type=record_type, record_id=record_id)
