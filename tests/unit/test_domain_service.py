"""
tests/unit/test_domain_service.py

Unit tests for services/domain_service.py.
"""

from __future__ import annotations

import pytest

from exceptions import ValidationError
from services.domain_service import QualifiedName, split_qualified_name


def test_split_single_label_host():
    """A three-label name splits into a one-label host and the zone."""
    name = split_qualified_name("api.example.com")
    assert name.zone == "example.com"
    assert name.host == "api"
    assert name.fqdn == "api.example.com"


def test_split_multi_label_host():
    """Everything before the last two labels belongs to the host."""
    name = split_qualified_name("a.b.example.com")
    assert name.zone == "example.com"
    assert name.host == "a.b"
    assert name.fqdn == "a.b.example.com"


def test_split_long_host_label():
    """Long labels are accepted unchanged."""
    host = "very-very-very-very-very-very-very-long-subdomain"
    name = split_qualified_name(f"{host}.example.com")
    assert name.host == host
    assert name.zone == "example.com"


@pytest.mark.parametrize(
    "qualified_name",
    [
        "example.com",
        "api.example",
        "api@invalid.com",
        "com",
        "",
    ],
)
def test_split_rejects_fewer_than_three_labels(qualified_name):
    """Names with fewer than three labels are a ValidationError."""
    with pytest.raises(ValidationError, match="at least 3 parts"):
        split_qualified_name(qualified_name)


@pytest.mark.parametrize(
    "qualified_name",
    [
        "a..example.com",
        ".api.example.com",
        "api.example.com.",
        "api.example..com",
    ],
)
def test_split_rejects_empty_labels(qualified_name):
    """Leading, trailing or doubled dots are a ValidationError."""
    with pytest.raises(ValidationError, match="empty parts"):
        split_qualified_name(qualified_name)


def test_qualified_name_is_immutable():
    """QualifiedName is frozen once constructed."""
    name = split_qualified_name("api.example.com")
    with pytest.raises(AttributeError):
        name.host = "www"  # type: ignore[misc]


def test_fqdn_without_host_is_zone():
    """An empty host reconstructs to the bare zone."""
    assert QualifiedName(zone="example.com", host="").fqdn == "example.com"


def test_split_folds_case():
    """Mixed-case input splits into the lower-case form Porkbun reports."""
    name = split_qualified_name("API.Example.com")
    assert name.zone == "example.com"
    assert name.host == "api"
    assert name.fqdn == "api.example.com"
