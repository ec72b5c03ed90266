# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the terms described in the LICENSE file in
# the root directory of this source tree.

from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field, HttpUrl, field_validator, model_validator

DEFAULT_BASE_URL = "https://api.openai.com/v1"
DEFAULT_VERSION_HEADER = "OpenAI-Beta"
DEFAULT_API_VERSION = "assistants=v2"


def _resolve_existing_file(v: str | Path, what: str) -> Path:
    if isinstance(v, str):
        path = Path(v).expanduser().resolve()
    else:
        path = v.expanduser().resolve()
    if not path.exists():
        raise ValueError(f"{what} file does not exist: {v}")
    if not path.is_file():
        raise ValueError(f"{what} path is not a file: {v}")
    return path


class TLSConfig(BaseModel):
    """TLS/SSL configuration for secure connections."""

    verify: bool | Path = Field(
        default=True,
        description="Whether to verify TLS certificates. Can be a boolean or a path to a CA certificate file.",
    )
    min_version: Literal["TLSv1.2", "TLSv1.3"] | None = Field(
        default=None,
        description="Minimum TLS version to use. Defaults to system default if not specified.",
    )
    ciphers: list[str] | None = Field(
        default=None,
        description="List of allowed cipher suites (e.g., ['ECDHE+AESGCM', 'DHE+AESGCM']).",
    )
    client_cert: Path | None = Field(
        default=None,
        description="Path to client certificate file for mTLS authentication.",
    )
    client_key: Path | None = Field(
        default=None,
        description="Path to client private key file for mTLS authentication.",
    )

    @field_validator("verify", mode="before")
    @classmethod
    def validate_verify(cls, v: bool | str | Path) -> bool | Path:
        if isinstance(v, bool):
            return v
        return _resolve_existing_file(v, "TLS certificate")

    @field_validator("client_cert", "client_key", mode="before")
    @classmethod
    def validate_cert_paths(cls, v: str | Path | None) -> Path | None:
        if v is None:
            return None
        return _resolve_existing_file(v, "Certificate/key")

    @model_validator(mode="after")
    def validate_mtls_pair(self) -> "TLSConfig":
        if (self.client_cert is None) != (self.client_key is None):
            raise ValueError("Both client_cert and client_key must be provided together for mTLS")
        return self


class ProxyConfig(BaseModel):
    """Proxy configuration for HTTP connections."""

    url: HttpUrl | None = Field(
        default=None,
        description="Single proxy URL for all connections (e.g., 'http://proxy.example.com:8080').",
    )
    http: HttpUrl | None = Field(
        default=None,
        description="Proxy URL for HTTP connections.",
    )
    https: HttpUrl | None = Field(
        default=None,
        description="Proxy URL for HTTPS connections.",
    )
    cacert: Path | None = Field(
        default=None,
        description="Path to CA certificate file for verifying the proxy's certificate.",
    )

    @field_validator("cacert", mode="before")
    @classmethod
    def validate_cacert(cls, v: str | Path | None) -> Path | None:
        if v is None:
            return None
        return _resolve_existing_file(v, "Proxy CA certificate")

    @model_validator(mode="after")
    def validate_proxy_config(self) -> "ProxyConfig":
        if self.url and (self.http or self.https):
            raise ValueError("Cannot specify both 'url' and 'http'/'https' proxy settings")
        return self


class TimeoutConfig(BaseModel):
    """Timeout configuration for HTTP connections."""

    connect: float | None = Field(
        default=None,
        description="Connection timeout in seconds.",
    )
    read: float | None = Field(
        default=None,
        description="Read timeout in seconds.",
    )


class NetworkConfig(BaseModel):
    """Network configuration for the connection to the vector store service."""

    tls: TLSConfig | None = Field(
        default=None,
        description="TLS/SSL configuration for secure connections.",
    )
    proxy: ProxyConfig | None = Field(
        default=None,
        description="Proxy configuration for HTTP connections.",
    )
    timeout: float | TimeoutConfig | None = Field(
        default=None,
        description="Timeout configuration. Can be a float (for both connect and read) or a TimeoutConfig object with separate connect and read timeouts.",
    )
    headers: dict[str, str] | None = Field(
        default=None,
        description="Additional HTTP headers to include in all requests, e.g. an Authorization header.",
    )


class VectorStoreClientConfig(BaseModel):
    """Configuration for a VectorStoresClient.

    Instances are frozen so that one config can be shared by every client and task.
    """

    model_config = {"frozen": True}

    base_url: HttpUrl = Field(
        default=HttpUrl(DEFAULT_BASE_URL),
        description="Base URL of the API; endpoint paths such as /vector_stores are appended to it.",
    )
    api_version: str = Field(
        default=DEFAULT_API_VERSION,
        description="Protocol version sent with every request. Passed through unchanged.",
    )
    version_header: str = Field(
        default=DEFAULT_VERSION_HEADER,
        description="Name of the header carrying api_version.",
    )
    network: NetworkConfig | None = Field(
        default=None,
        description="Network configuration including TLS, proxy, timeout and static header settings.",
    )

    @classmethod
    def sample_run_config(
        cls,
        base_url: str = "${env.VECTOR_STORE_BASE_URL:=https://api.openai.com/v1}",
        **kwargs: Any,
    ) -> dict[str, Any]:
        return {
            "base_url": base_url,
            "api_version": "${env.VECTOR_STORE_API_VERSION:=assistants=v2}",
            "network": {
                "timeout": "${env.VECTOR_STORE_TIMEOUT:=60}",
                "tls": {
                    "verify": "${env.VECTOR_STORE_TLS_VERIFY:=true}",
                },
            },
        }


__all__ = [
    "DEFAULT_API_VERSION",
    "DEFAULT_BASE_URL",
    "DEFAULT_VERSION_HEADER",
    "NetworkConfig",
    "ProxyConfig",
    "TLSConfig",
    "TimeoutConfig",
    "VectorStoreClientConfig",
]
