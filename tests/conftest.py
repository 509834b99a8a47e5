"""
tests/conftest.py

Shared pytest fixtures used by both unit and integration test suites.
All HTTP fixtures use respx.mock and all provider fixtures are AsyncMock
fakes. No real network calls are made in any test.
"""

from __future__ import annotations

from unittest.mock import AsyncMock

import httpx
import pytest
import respx

from config import Settings
from porkbun.dns_provider import Credentials, DnsRecord, RecordType
from services.domain_service import QualifiedName


# ---------------------------------------------------------------------------
# HTTP mock fixture: intercepts all httpx calls
# ---------------------------------------------------------------------------


@pytest.fixture()
def mock_http():
    """
    Yields a respx router that intercepts all httpx.AsyncClient calls.

    No real network traffic is allowed during tests. Use this fixture
    wherever a client would normally make an outbound request.
    """
    with respx.mock(assert_all_called=False) as router:
        yield router


@pytest.fixture()
async def http_client():
    """
    Yields a real httpx.AsyncClient instance for use in tests.

    Pair with the mock_http fixture so all requests are intercepted by respx.
    The client is closed after each test.
    """
    async with httpx.AsyncClient() as client:
        yield client


# ---------------------------------------------------------------------------
# Domain fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def settings() -> Settings:
    """Default Settings, independent of the process environment."""
    return Settings()


@pytest.fixture()
def credentials() -> Credentials:
    return Credentials(api_key="pk1_test", secret_api_key="sk1_test")


@pytest.fixture()
def api_name() -> QualifiedName:
    """The split form of "api.example.com"."""
    return QualifiedName(zone="example.com", host="api")


@pytest.fixture()
def fake_provider() -> AsyncMock:
    """
    An AsyncMock standing in for DNSProvider.

    Defaults to an empty zone: lookups return [] and creates return id "100".
    """
    provider = AsyncMock()
    provider.lookup_records.return_value = []
    provider.create_record.return_value = "100"
    provider.update_record.return_value = None
    return provider


def _make_record(
    content: str = "1.1.1.1",
    record_id: str = "42",
    name: str = "api.example.com",
    record_type: RecordType = RecordType.A,
) -> DnsRecord:
    """Helper: build a DnsRecord with sensible defaults."""
    return DnsRecord(id=record_id, name=name, type=record_type, content=content)


@pytest.fixture()
def make_record():
    """Yields the DnsRecord builder so tests can vary content, id and name."""
    return _make_record

