"""
services/record_resolver.py

Responsibility: Finds the existing provider record, if any, that exactly
matches a qualified name and record type.
Does NOT: create or edit records, or decide whether an edit is needed.
"""

from __future__ import annotations

import logging

from porkbun.dns_provider import Credentials, DnsRecord, DNSProvider, RecordType
from services.domain_service import QualifiedName

logger = logging.getLogger(__name__)


class RecordResolver:
    """
    Looks up the single record a reconciliation step acts on.

    Issues exactly one provider lookup per resolve() call, scoped to the
    requested type, so an IPv4-only request never queries AAAA records.

    Collaborators:
        - DNSProvider: performs the lookup
    """

    def __init__(self, dns_provider: DNSProvider) -> None:
        self._provider = dns_provider

    async def resolve(
        self,
        credentials: Credentials,
        name: QualifiedName,
        record_type: RecordType,
    ) -> DnsRecord | None:
        """
        Returns the first record whose name and type both match exactly.

        If the provider holds duplicates of the same name and type, the first
        in provider order wins; which one that is is not defined.

        Args:
            credentials: Caller-supplied API key pair, passed through.
            name: The split qualified name.
            record_type: A or AAAA.

        Returns:
            The matching DnsRecord, or None if there is none.

        Raises:
            DnsProviderError: If the lookup fails. Not retried.
        """
        records = await self._provider.lookup_records(
            credentials, name.zone, record_type, name.host
        )
        logger.info("Found %d '%s' record(s) in zone %s", len(records), record_type.value, name.zone)

        for record in records:
            logger.debug("Checking record %s to find %s", record, name.fqdn)
            if record.name == name.fqdn and record.type == record_type:
                logger.info("Found matching record for %s: id=%s", name.fqdn, record.id)
                return record

        logger.info("No existing '%s' record found for %s.", record_type.value, name.fqdn)
        return None
