"""
porkbun/porkbun_client.py

Responsibility: Implements the DNSProvider protocol using the Porkbun JSON API (v3).
All Porkbun HTTP calls are concentrated here; no other file may call the
Porkbun API directly.
Does NOT: decide whether a record needs changing, read environment
variables, or map failures to HTTP status codes.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from porkbun.dns_provider import Credentials, DnsRecord, RecordType
from exceptions import DnsProviderError

logger = logging.getLogger(__name__)

_SUCCESS = "SUCCESS"


class PorkbunClient:
    """
    Implements DNSProvider for the Porkbun DNS API.

    Every Porkbun endpoint is a POST whose JSON body carries the API key pair,
    so credentials are passed per call rather than held by the client. All
    requests go through the injected httpx.AsyncClient, making this class
    fully testable without real network calls (use respx.mock).

    Collaborators:
        - httpx.AsyncClient: injected HTTP client; must be kept alive externally
        - DNSProvider: this class satisfies the protocol contract
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        base_url: str,
        default_ttl: int,
        timeout: float = 10.0,
    ) -> None:
        """
        Initialises the client with an HTTP client and the API settings.

        Args:
            http_client: A long-lived httpx.AsyncClient instance.
            base_url: Root of the Porkbun API, e.g. "https://api.porkbun.com/api/json/v3".
            default_ttl: TTL in seconds written on created and edited records.
            timeout: Per-request transport timeout in seconds.
        """
        self._client = http_client
        self._base_url = base_url.rstrip("/")
        self._ttl = default_ttl
        self._timeout = timeout

    # ---------------------------------------------------------------------------
    # DNSProvider implementation
    # ---------------------------------------------------------------------------

    async def lookup_records(
        self,
        credentials: Credentials,
        zone: str,
        record_type: RecordType,
        host: str,
    ) -> list[DnsRecord]:
        """
        Retrieves the records of one type for a host via retrieveByNameType.

        Args:
            credentials: Caller-supplied API key pair.
            zone: The registrable domain, e.g. "example.com".
            record_type: A or AAAA.
            host: The subdomain part; the path segment is omitted when empty.

        Returns:
            A list of DnsRecord instances, possibly empty.

        Raises:
            DnsProviderError: If the HTTP call fails or status is not SUCCESS.
        """
        url = f"{self._base_url}/dns/retrieveByNameType/{zone}/{record_type.value}"
        if host:
            url = f"{url}/{host}"

        logger.info("Get existing '%s' records for zone %s by calling %s", record_type.value, zone, url)
        data = await self._request(
            url,
            self._auth_body(credentials),
            public_message="Failed to retrieve DNS records",
        )

        # NOTE: Porkbun sends "records": null (or omits it) when nothing matches.
        raw_records = data.get("records")
        return self._parse_records(
            [] if raw_records is None else raw_records,
            url,
            public_message="Failed to retrieve DNS records",
        )

    async def create_record(
        self,
        credentials: Credentials,
        zone: str,
        host: str,
        record_type: RecordType,
        address: str,
    ) -> str:
        """
        Creates a new record in the given Porkbun zone.

        Args:
            credentials: Caller-supplied API key pair.
            zone: The registrable domain.
            host: The subdomain part for the new record.
            record_type: A or AAAA.
            address: The IP address to store.

        Returns:
            The id of the new record, as a string.

        Raises:
            DnsProviderError: If the HTTP call fails or status is not SUCCESS,
                              or the response carries no record id.
        """
        url = f"{self._base_url}/dns/create/{zone}"
        payload = self._record_body(credentials, host, record_type, address)

        logger.info("Create DNS record: %s for subdomain %r", url, host)
        data = await self._request(url, payload, public_message="Failed to create DNS record")

        record_id = data.get("id")
        if record_id is None or str(record_id) == "":
            raise DnsProviderError(
                f"Porkbun API reported SUCCESS without a record id for POST {url}",
                "Failed to create DNS record",
            )
        record_id = str(record_id)
        logger.info("Created DNS record with id: %s", record_id)
        return record_id

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
        Edits an existing record by id.

        Args:
            credentials: Caller-supplied API key pair.
            zone: The registrable domain.
            record_id: The Porkbun record id.
            host: The subdomain part of the record.
            record_type: A or AAAA.
            address: The new IP address.

        Returns:
            None

        Raises:
            DnsProviderError: If the HTTP call fails or status is not SUCCESS.
        """
        url = f"{self._base_url}/dns/edit/{zone}/{record_id}"
        payload = self._record_body(credentials, host, record_type, address)

        logger.info("Update DNS record: %s for subdomain %r", url, host)
        await self._request(url, payload, public_message="Failed to update DNS record")
        logger.info("Updated DNS record with id: %s", record_id)

    # ---------------------------------------------------------------------------
    # Internal helpers
    # ---------------------------------------------------------------------------

    async def _request(
        self,
        url: str,
        payload: dict[str, Any],
        *,
        public_message: str,
    ) -> dict[str, Any]:
        """
        POSTs an authenticated JSON body to a Porkbun endpoint.

        Args:
            url: Full URL of the Porkbun API endpoint.
            payload: JSON body, already including the API key pair.
            public_message: Generic text attached to any raised error.

        Returns:
            The parsed JSON response body as a dict.

        Raises:
            DnsProviderError: If the HTTP call fails, the body is not JSON, or
                              the API returns a status other than SUCCESS.
        """
        try:
            response = await self._client.post(url, json=payload, timeout=self._timeout)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise DnsProviderError(
                f"Porkbun API error {exc.response.status_code} for POST {url}: "
                f"{exc.response.text}",
                public_message,
            ) from exc
        except httpx.RequestError as exc:
            raise DnsProviderError(
                f"Network error calling Porkbun API (POST {url}): {exc}",
                public_message,
            ) from exc

        try:
            body = response.json()
        except ValueError as exc:
            raise DnsProviderError(
                f"Porkbun API returned a non-JSON body for POST {url}", public_message
            ) from exc

        # NOTE: Porkbun wraps every response in {"status": "SUCCESS" | "ERROR", ...}
        if not isinstance(body, dict) or body.get("status") != _SUCCESS:
            detail = body.get("message") if isinstance(body, dict) else body
            raise DnsProviderError(
                f"Porkbun API returned a non-success status for POST {url}: {detail}",
                public_message,
            )

        return body

    @staticmethod
    def _auth_body(credentials: Credentials) -> dict[str, Any]:
        return {
            "apikey": credentials.api_key,
            "secretapikey": credentials.secret_api_key,
        }

    def _record_body(
        self,
        credentials: Credentials,
        host: str,
        record_type: RecordType,
        address: str,
    ) -> dict[str, Any]:
        """Builds the shared create/edit body; Porkbun expects the TTL as a string."""
        return {
            **self._auth_body(credentials),
            "name": host,
            "type": record_type.value,
            "content": address,
            "ttl": str(self._ttl),
        }

    def _parse_records(
        self,
        raw_records: Any,
        url: str,
        *,
        public_message: str,
    ) -> list[DnsRecord]:
        """
        Converts raw Porkbun record dicts into typed DnsRecords.

        Records of a type this application does not manage are dropped.

        Args:
            raw_records: The "records" value from a Porkbun response.
            url: The endpoint that returned it, for error messages.
            public_message: Generic text attached to any raised error.

        Returns:
            A list of DnsRecord instances in provider order.

        Raises:
            DnsProviderError: If "records" is not a list, or a record lacks
                              id, name or content.
        """
        if not isinstance(raw_records, list):
            raise DnsProviderError(
                f"Porkbun API returned records of type {type(raw_records).__name__} for POST {url}",
                public_message,
            )

        records: list[DnsRecord] = []
        for raw in raw_records:
            try:
                try:
                    record_type = RecordType(raw.get("type"))
                except ValueError:
                    logger.debug("Ignoring unmanaged record type: %s", raw.get("type"))
                    continue
                records.append(
                    DnsRecord(
                        id=str(raw["id"]),
                        name=str(raw["name"]),
                        type=record_type,
                        content=str(raw["content"]),
                    )
                )
            except (KeyError, TypeError, AttributeError) as exc:
                raise DnsProviderError(
                    f"Porkbun API returned a malformed record for POST {url}: {raw!r}",
                    public_message,
                ) from exc
        return records
