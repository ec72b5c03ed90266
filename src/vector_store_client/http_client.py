# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the terms described in the LICENSE file in
# the root directory of this source tree.

import ssl
from pathlib import Path
from typing import Any

import httpx

from vector_store_client.config import (
    NetworkConfig,
    ProxyConfig,
    TimeoutConfig,
    TLSConfig,
    VectorStoreClientConfig,
)
from vector_store_client.log import get_logger

logger = get_logger(name=__name__, category="client::http")


def _build_ssl_context(tls_config: TLSConfig) -> ssl.SSLContext | bool:
    """
    Build an SSL context from TLS configuration.

    Returns:
        - ssl.SSLContext if a CA bundle path or advanced options (min_version, ciphers, or mTLS) are configured
        - bool if only verify is specified as boolean
    """
    has_advanced_options = (
        isinstance(tls_config.verify, Path)
        or tls_config.min_version is not None
        or tls_config.ciphers is not None
        or tls_config.client_cert is not None
    )

    if not has_advanced_options:
        return tls_config.verify

    ctx = ssl.create_default_context()

    if isinstance(tls_config.verify, Path):
        ctx.load_verify_locations(str(tls_config.verify))
    elif not tls_config.verify:
        ctx.check_hostname = False
        ctx.verify_mode = ssl.CERT_NONE

    if tls_config.min_version == "TLSv1.2":
        ctx.minimum_version = ssl.TLSVersion.TLSv1_2
    elif tls_config.min_version == "TLSv1.3":
        ctx.minimum_version = ssl.TLSVersion.TLSv1_3

    if tls_config.ciphers:
        ctx.set_ciphers(":".join(tls_config.ciphers))

    if tls_config.client_cert and tls_config.client_key:
        ctx.load_cert_chain(certfile=str(tls_config.client_cert), keyfile=str(tls_config.client_key))

    return ctx


def _build_proxy_mounts(proxy_config: ProxyConfig) -> dict[str, httpx.AsyncHTTPTransport] | None:
    """
    Build httpx proxy mounts from proxy configuration.

    Returns:
        Dictionary of proxy mounts for httpx, or None if no proxies configured
    """
    transport_kwargs: dict[str, Any] = {}
    if proxy_config.cacert:
        transport_kwargs["verify"] = ssl.create_default_context(cafile=str(proxy_config.cacert))

    if proxy_config.url:
        proxy_url = str(proxy_config.url)
        return {
            "http://": httpx.AsyncHTTPTransport(proxy=proxy_url, **transport_kwargs),
            "https://": httpx.AsyncHTTPTransport(proxy=proxy_url, **transport_kwargs),
        }

    mounts = {}
    if proxy_config.http:
        mounts["http://"] = httpx.AsyncHTTPTransport(proxy=str(proxy_config.http), **transport_kwargs)
    if proxy_config.https:
        mounts["https://"] = httpx.AsyncHTTPTransport(proxy=str(proxy_config.https), **transport_kwargs)

    return mounts if mounts else None


def build_timeout(timeout: float | TimeoutConfig) -> httpx.Timeout:
    if isinstance(timeout, TimeoutConfig):
        # httpx.Timeout requires all four parameters (connect, read, write, pool)
        # to be set explicitly, or a default timeout value
        return httpx.Timeout(connect=timeout.connect, read=timeout.read, write=None, pool=None)
    return httpx.Timeout(timeout)


def _build_network_client_kwargs(network_config: NetworkConfig | None) -> dict[str, Any]:
    """
    Build httpx.AsyncClient kwargs from network configuration.

    Args:
        network_config: Network configuration including TLS, proxy, and timeout settings

    Returns:
        Dictionary of kwargs to pass to httpx.AsyncClient constructor
    """
    if network_config is None:
        return {}

    client_kwargs: dict[str, Any] = {}

    if network_config.tls:
        client_kwargs["verify"] = _build_ssl_context(network_config.tls)

    if network_config.proxy:
        mounts = _build_proxy_mounts(network_config.proxy)
        if mounts:
            client_kwargs["mounts"] = mounts

    if network_config.timeout is not None:
        client_kwargs["timeout"] = build_timeout(network_config.timeout)

    if network_config.headers:
        client_kwargs["headers"] = network_config.headers

    return client_kwargs


def build_http_client(
    config: VectorStoreClientConfig,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """
    Build the httpx.AsyncClient used by a VectorStoresClient.

    Args:
        config: Client configuration; its base_url becomes the client's base_url
        transport: Optional transport override, e.g. httpx.MockTransport in tests

    Returns:
        A new httpx.AsyncClient owned by the caller
    """
    client_kwargs = _build_network_client_kwargs(config.network)
    if transport is not None:
        # an explicit transport replaces any proxy mounts
        client_kwargs.pop("mounts", None)
        client_kwargs["transport"] = transport

    logger.debug(f"Building http client for {config.base_url} with options {sorted(client_kwargs)}")
    return httpx.AsyncClient(base_url=str(config.base_url), **client_kwargs)


__all__ = [
    "build_http_client",
    "build_timeout",
]
