"""
services/domain_service.py

Responsibility: Splits a fully-qualified domain name into zone and host.
Does NOT: resolve names, consult a public-suffix list, or call any provider.
"""

from __future__ import annotations

from dataclasses import dataclass

from exceptions import ValidationError

# Zone is always the last two labels; a host needs at least one more.
_ZONE_LABELS = 2
_MIN_LABELS = 3


@dataclass(frozen=True)
class QualifiedName:
    """
    A validated domain name split into its registrable zone and host part.

    Built once per request by split_qualified_name() and never mutated.
    """

    # Registrable domain, e.g. "example.com"
    zone: str

    # Labels preceding the zone, e.g. "api" or "a.b"
    host: str

    @property
    def fqdn(self) -> str:
        """The name as the provider stores it: host.zone, or zone alone."""
        return f"{self.host}.{self.zone}" if self.host else self.zone

    def __str__(self) -> str:
        return self.fqdn


def split_qualified_name(qualified_name: str) -> QualifiedName:
    """
    Parses "a.b.example.com" into zone="example.com", host="a.b".

    Pure function; no I/O.

    Args:
        qualified_name: The domain name supplied by the caller.
                        Case is folded to lower case.

    Returns:
        The QualifiedName for the input.

    Raises:
        ValidationError: If there are fewer than three labels, or any label is
                         empty (leading, trailing or doubled dots).
    """
    # DNS names are case-insensitive; Porkbun reports them in lower case.
    labels = qualified_name.lower().split(".")

    if len(labels) < _MIN_LABELS:
        raise ValidationError(
            "Domain must have at least 3 parts (e.g., sub.example.com)"
        )

    if any(label == "" for label in labels):
        raise ValidationError("Domain contains empty parts")

    return QualifiedName(
        zone=".".join(labels[-_ZONE_LABELS:]),
        host=".".join(labels[:-_ZONE_LABELS]),
    )
