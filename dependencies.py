"""
dependencies.py

Responsibility: Declares all FastAPI Depends() provider functions for
settings, credentials, the DNS provider client and services.
Does NOT: contain business logic, HTTP handlers, or exception mapping.
"""

from __future__ import annotations

import httpx
from fastapi import Depends, Query, Request

from config import Settings
from exceptions import ValidationError
from porkbun.dns_provider import Credentials, DNSProvider
from porkbun.porkbun_client import PorkbunClient
from services.dns_service import DnsService

# ---------------------------------------------------------------------------
# Infrastructure: shared app-level resources
# ---------------------------------------------------------------------------


def get_http_client(request: Request) -> httpx.AsyncClient:
    """
    Returns the shared httpx.AsyncClient stored on app.state.

    The client is created once during the FastAPI lifespan and reused for
    all requests to avoid connection-pool overhead.

    Args:
        request: The current FastAPI Request (injected automatically).

    Returns:
        The application-level httpx.AsyncClient.
    """
    return request.app.state.http_client


def get_settings(request: Request) -> Settings:
    """Returns the Settings loaded during the lifespan."""
    return request.app.state.settings


# ---------------------------------------------------------------------------
# Request-scoped inputs
# ---------------------------------------------------------------------------


def get_credentials(
    apikey: str | None = Query(None),
    secretapikey: str | None = Query(None),
) -> Credentials:
    """
    Extracts the Porkbun API key pair from the query string.

    Nothing beyond presence is checked; the provider is the authority on
    whether the keys are valid.

    Args:
        apikey: The 'apikey' query parameter.
        secretapikey: The 'secretapikey' query parameter.

    Returns:
        A Credentials instance.

    Raises:
        ValidationError: If either parameter is missing or blank.
    """
    if not apikey:
        raise ValidationError("Missing query-parameter 'apikey'")
    if not secretapikey:
        raise ValidationError("Missing query-parameter 'secretapikey'")
    return Credentials(api_key=apikey, secret_api_key=secretapikey)


# ---------------------------------------------------------------------------
# Service providers
# ---------------------------------------------------------------------------


def get_dns_provider(
    settings: Settings = Depends(get_settings),
    http_client: httpx.AsyncClient = Depends(get_http_client),
) -> DNSProvider:
    """
    Provides a PorkbunClient configured from Settings.

    Args:
        settings: Base URL, TTL and timeout.
        http_client: The application-level httpx.AsyncClient.

    Returns:
        A PorkbunClient instance satisfying the DNSProvider protocol.
    """
    return PorkbunClient(
        http_client=http_client,
        base_url=settings.api_base_url,
        default_ttl=settings.default_ttl,
        timeout=settings.http_timeout,
    )


def get_dns_service(
    dns_provider: DNSProvider = Depends(get_dns_provider),
) -> DnsService:
    """
    Provides a DnsService wired to the active DNSProvider.

    Args:
        dns_provider: The active DNSProvider implementation.

    Returns:
        A DnsService instance ready to use.
    """
    return DnsService(dns_provider)
