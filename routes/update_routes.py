"""
routes/update_routes.py

Responsibility: The dynamic-DNS update endpoint. Reads the query string,
splits the domain, and hands off to DnsService.
Does NOT: call the Porkbun API directly, decide create vs update, or map
exceptions to status codes (see the handlers registered in app.py).
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from dependencies import get_credentials, get_dns_service
from exceptions import ValidationError
from porkbun.dns_provider import Credentials
from services.dns_service import DnsService
from services.domain_service import split_qualified_name

logger = logging.getLogger(__name__)

router = APIRouter()


@router.api_route("/update", methods=["GET", "POST"])
async def update_dns_record(
    credentials: Credentials = Depends(get_credentials),
    domain: str | None = Query(None),
    ip: str | None = Query(None),
    ipv6: str | None = Query(None),
    dns_service: DnsService = Depends(get_dns_service),
) -> JSONResponse:
    """
    Creates or updates the A and/or AAAA record for a qualified domain name.

    Query parameters:
        apikey / secretapikey: Porkbun API key pair (via get_credentials).
        domain: The name to update, e.g. "home.example.com".
        ip: Desired IPv4 address for the A record.
        ipv6: Desired IPv6 address for the AAAA record.

    At least one of ip / ipv6 is required. IPv4 is processed first.

    Args:
        credentials: The caller's Porkbun API key pair.
        domain: The 'domain' query parameter.
        ip: The 'ip' query parameter.
        ipv6: The 'ipv6' query parameter.
        dns_service: Reconciles the records.

    Returns:
        A 200 JSONResponse {"message": "<summary>"}.

    Raises:
        ValidationError: Mapped to 400 by app.py.
        DnsProviderError: Mapped to 500 by app.py.
    """
    logger.info("Validating request")
    if not domain:
        raise ValidationError("Missing query-parameter 'domain'")
    if not ip and not ipv6:
        raise ValidationError("Missing query-parameter 'ip' or 'ipv6'")

    try:
        name = split_qualified_name(domain)
    except ValidationError as exc:
        raise ValidationError(f"Invalid domain format: {exc}") from exc

    logger.info(
        "Valid request received for updating the dns-entry for domain %r to ip=%r ipv6=%r.",
        domain,
        ip,
        ipv6,
    )
    summary = await dns_service.update_dns(credentials, name, ipv4=ip, ipv6=ipv6)
    return JSONResponse(status_code=200, content={"message": summary})
