"""Shared boto3 client factory with caching."""

from __future__ import annotations

from typing import Any
from typing import Optional

import boto3
from botocore.config import Config

_CLIENT_CACHE: dict[tuple[str, Optional[str], Optional[float]], Any] = {}


def get_client(
    service: str,
    region_name: Optional[str] = None,
    timeout: Optional[float] = None,
) -> Any:
    """Return a cached boto3 client for the given service.

    A positive ``timeout`` becomes the connect and read timeout of the
    client; ``None`` or ``0`` keeps the botocore defaults.
    """
    if not timeout:
        timeout = None
    cache_key = (service, region_name, timeout)
    if cache_key in _CLIENT_CACHE:
        return _CLIENT_CACHE[cache_key]

    kwargs: dict[str, Any] = {"region_name": region_name}
    if timeout is not None:
        kwargs["config"] = Config(connect_timeout=timeout, read_timeout=timeout)
    client = boto3.client(service, **kwargs)  # type: ignore[call-overload]
    _CLIENT_CACHE[cache_key] = client
    return client


def clear_client_cache() -> None:
    """Clear cached boto3 clients (useful in tests)."""
    _CLIENT_CACHE.clear()


def get_appconfigdata_client(
    region_name: Optional[str] = None,
    timeout: Optional[float] = None,
) -> Any:
    return get_client("appconfigdata", region_name=region_name, timeout=timeout)
