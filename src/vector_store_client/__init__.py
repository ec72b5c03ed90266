# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the terms described in the LICENSE file in
# the root directory of this source tree.

"""Vector store client.

Typed async client for the vector stores API: vector stores and the files
attached to them. The client is in client.py, Pydantic models are in models.py,
and errors are in errors.py.
"""

from .client import VectorStoresClient
from .config import (
    NetworkConfig,
    ProxyConfig,
    TimeoutConfig,
    TLSConfig,
    VectorStoreClientConfig,
)
from .dispatcher import NOT_GIVEN, NotGiven, RequestDispatcher
from .errors import (
    APIConnectionError,
    APIStatusError,
    APITimeoutError,
    NotFoundError,
    RequestConstructionError,
    ResponseDecodeError,
    VectorStoreClientError,
)
from .models import (
    ListParams,
    VectorStoreDeleteResponse,
    VectorStoreFileCounts,
    VectorStoreFileDeleteResponse,
    VectorStoreFileLastError,
    VectorStoreFileObject,
    VectorStoreFileRequest,
    VectorStoreFileStatus,
    VectorStoreListFilesResponse,
    VectorStoreListResponse,
    VectorStoreObject,
    VectorStoreRequest,
)
from .pagination import AsyncCursorPaginator

__all__ = [
    # Client
    "AsyncCursorPaginator",
    "RequestDispatcher",
    "VectorStoresClient",
    # Configuration
    "NetworkConfig",
    "ProxyConfig",
    "TLSConfig",
    "TimeoutConfig",
    "VectorStoreClientConfig",
    # Errors
    "APIConnectionError",
    "APIStatusError",
    "APITimeoutError",
    "NotFoundError",
    "RequestConstructionError",
    "ResponseDecodeError",
    "VectorStoreClientError",
    # Pydantic models
    "ListParams",
    "NOT_GIVEN",
    "NotGiven",
    "VectorStoreDeleteResponse",
    "VectorStoreFileCounts",
    "VectorStoreFileDeleteResponse",
    "VectorStoreFileLastError",
    "VectorStoreFileObject",
    "VectorStoreFileRequest",
    "VectorStoreFileStatus",
    "VectorStoreListFilesResponse",
    "VectorStoreListResponse",
    "VectorStoreObject",
    "VectorStoreRequest",
]
