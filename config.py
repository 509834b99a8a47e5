"""
config.py

Responsibility: Builds the immutable Settings object from environment variables.
Does NOT: hold credentials, make HTTP calls, or configure logging handlers.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from exceptions import ConfigError

logger = logging.getLogger(__name__)

_DEFAULT_BASE_URL = "https://api.porkbun.com/api/json/v3"
_DEFAULT_TTL = 600
_DEFAULT_TIMEOUT = 10.0

# NOTE: Lowest TTL the Porkbun API accepts.
_MIN_TTL = 60


@dataclass(frozen=True)
class Settings:
    """
    Process-wide configuration injected into the provider client.

    Nothing in the reconciliation core reads this directly; it only reaches
    PorkbunClient through dependencies.get_dns_provider().
    """

    # Root of the Porkbun JSON API, without a trailing slash
    api_base_url: str = _DEFAULT_BASE_URL

    # TTL in seconds written on every created or updated record
    default_ttl: int = _DEFAULT_TTL

    # Transport timeout for each provider call, in seconds
    http_timeout: float = _DEFAULT_TIMEOUT

    # Root log level name, e.g. "INFO" or "DEBUG"
    log_level: str = "INFO"

    # Bind address for the uvicorn runner
    host: str = "0.0.0.0"
    port: int = 8080


def load_settings() -> Settings:
    """
    Reads Settings from the environment, falling back to defaults.

    Returns:
        A populated Settings instance.

    Raises:
        ConfigError: If a numeric variable cannot be parsed or is out of range.
    """
    base_url = os.getenv("PORKBUN_API_BASE_URL", _DEFAULT_BASE_URL).rstrip("/")
    ttl = _read_int("PORKBUN_DEFAULT_TTL", _DEFAULT_TTL)
    if ttl < _MIN_TTL:
        raise ConfigError(f"PORKBUN_DEFAULT_TTL must be at least {_MIN_TTL}, got {ttl}")

    timeout = _read_float("PORKBUN_HTTP_TIMEOUT", _DEFAULT_TIMEOUT)
    if timeout <= 0:
        raise ConfigError(f"PORKBUN_HTTP_TIMEOUT must be positive, got {timeout}")

    settings = Settings(
        api_base_url=base_url,
        default_ttl=ttl,
        http_timeout=timeout,
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        host=os.getenv("HOST", "0.0.0.0"),
        port=_read_int("PORT", 8080),
    )
    logger.debug("Loaded settings: %s", settings)
    return settings


def _read_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from exc


def _read_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ConfigError(f"{name} must be a number, got {raw!r}") from exc
