# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the terms described in the LICENSE file in
# the root directory of this source tree.

from typing import Any

import httpx

from vector_store_client.config import VectorStoreClientConfig
from vector_store_client.dispatcher import NOT_GIVEN, NotGiven, RequestDispatcher, Timeout
from vector_store_client.http_client import build_http_client
from vector_store_client.log import get_logger
from vector_store_client.models import (
    ListParams,
    VectorStoreDeleteResponse,
    VectorStoreFileDeleteResponse,
    VectorStoreFileObject,
    VectorStoreFileRequest,
    VectorStoreListFilesResponse,
    VectorStoreListResponse,
    VectorStoreObject,
    VectorStoreRequest,
)
from vector_store_client.pagination import AsyncCursorPaginator
from vector_store_client.urls import (
    encode_query,
    vector_store_file_path,
    vector_store_files_path,
    vector_store_path,
    vector_stores_path,
)

logger = get_logger(name=__name__, category="client")


def _vector_store_request(request: VectorStoreRequest | None, fields: dict[str, Any]) -> VectorStoreRequest:
    # keyword arguments left out never reach model_validate, so they stay unset
    if request is not None and fields:
        raise TypeError("Pass either a VectorStoreRequest or keyword fields, not both")
    if request is not None:
        return request
    return VectorStoreRequest.model_validate(fields)


class VectorStoresClient:
    """Async client for vector stores and their file attachments.

    Every method performs exactly one HTTP request and returns a fully decoded
    model or raises an error from vector_store_client.errors. The client holds only
    immutable configuration, so a single instance can be shared by concurrent tasks.

    Usage:
        async with VectorStoresClient(VectorStoreClientConfig()) as client:
            store = await client.create(name="docs", file_ids=["file-1"])
    """

    def __init__(
        self,
        config: VectorStoreClientConfig | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        :param config: Client configuration. Defaults to VectorStoreClientConfig().
        :param http_client: An externally owned httpx.AsyncClient whose base_url points at the API.
            It is not closed by aclose().
        :param transport: Transport for the client built from config (ignored when http_client is given).
        """
        self.config = config or VectorStoreClientConfig()
        self._owns_http_client = http_client is None
        self._http_client = http_client or build_http_client(self.config, transport=transport)
        self._dispatcher = RequestDispatcher(
            self._http_client,
            version_header=self.config.version_header,
            api_version=self.config.api_version,
        )

    async def __aenter__(self) -> "VectorStoresClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_http_client:
            await self._http_client.aclose()

    # Vector stores

    async def create(
        self,
        request: VectorStoreRequest | None = None,
        *,
        timeout: Timeout | NotGiven = NOT_GIVEN,
        **fields: Any,
    ) -> VectorStoreObject:
        """Create a vector store.

        :param request: The create payload. Alternatively pass its fields as keywords
            (name=..., file_ids=...); fields not passed are omitted from the payload.
        :returns: The created VectorStoreObject.
        """
        body = _vector_store_request(request, fields)
        store = await self._dispatcher.request(
            "POST", vector_stores_path(), body=body, cast_to=VectorStoreObject, timeout=timeout
        )
        logger.info(f"Created vector store {store.id}")
        return store

    async def retrieve(
        self,
        vector_store_id: str,
        *,
        timeout: Timeout | NotGiven = NOT_GIVEN,
    ) -> VectorStoreObject:
        """Retrieve a vector store.

        :raises NotFoundError: if the vector store does not exist.
        """
        return await self._dispatcher.request(
            "GET", vector_store_path(vector_store_id), cast_to=VectorStoreObject, timeout=timeout
        )

    async def modify(
        self,
        vector_store_id: str,
        request: VectorStoreRequest | None = None,
        *,
        timeout: Timeout | NotGiven = NOT_GIVEN,
        **fields: Any,
    ) -> VectorStoreObject:
        """Modify a vector store.

        Fields that are not set are left unchanged on the server; file_ids=[] clears
        the associated files and name=None clears the name.
        """
        body = _vector_store_request(request, fields)
        return await self._dispatcher.request(
            "POST", vector_store_path(vector_store_id), body=body, cast_to=VectorStoreObject, timeout=timeout
        )

    async def delete(
        self,
        vector_store_id: str,
        *,
        timeout: Timeout | NotGiven = NOT_GIVEN,
    ) -> VectorStoreDeleteResponse:
        """Delete a vector store.

        :returns: The server's acknowledgement; check `deleted` rather than relying on the absence of an error.
        """
        ack = await self._dispatcher.request(
            "DELETE", vector_store_path(vector_store_id), cast_to=VectorStoreDeleteResponse, timeout=timeout
        )
        if not ack.deleted:
            logger.warning(f"Server did not confirm deletion of vector store {vector_store_id}")
        return ack

    async def list(
        self,
        params: ListParams | None = None,
        *,
        timeout: Timeout | NotGiven = NOT_GIVEN,
    ) -> VectorStoreListResponse:
        """Return one page of vector stores. Use `iterate` to walk every page."""
        path = vector_stores_path() + encode_query(params)
        return await self._dispatcher.request("GET", path, cast_to=VectorStoreListResponse, timeout=timeout)

    def iterate(self, params: ListParams | None = None) -> AsyncCursorPaginator[VectorStoreObject]:
        return AsyncCursorPaginator(self.list, params)

    # Vector store files

    async def create_file(
        self,
        vector_store_id: str,
        request: VectorStoreFileRequest | None = None,
        *,
        timeout: Timeout | NotGiven = NOT_GIVEN,
        **fields: Any,
    ) -> VectorStoreFileObject:
        """Attach a file to a vector store.

        :param request: The attach payload, or pass file_id=... (and optionally
            attributes/chunking_strategy) as keywords.
        """
        if request is not None and fields:
            raise TypeError("Pass either a VectorStoreFileRequest or keyword fields, not both")
        body = request if request is not None else VectorStoreFileRequest.model_validate(fields)
        file = await self._dispatcher.request(
            "POST",
            vector_store_files_path(vector_store_id),
            body=body,
            cast_to=VectorStoreFileObject,
            timeout=timeout,
        )
        logger.info(f"Attached file {file.id} to vector store {vector_store_id} (status={file.status})")
        return file

    async def retrieve_file(
        self,
        vector_store_id: str,
        file_id: str,
        *,
        timeout: Timeout | NotGiven = NOT_GIVEN,
    ) -> VectorStoreFileObject:
        return await self._dispatcher.request(
            "GET", vector_store_file_path(vector_store_id, file_id), cast_to=VectorStoreFileObject, timeout=timeout
        )

    async def delete_file(
        self,
        vector_store_id: str,
        file_id: str,
        *,
        timeout: Timeout | NotGiven = NOT_GIVEN,
    ) -> VectorStoreFileDeleteResponse:
        """Detach a file from a vector store.

        The file itself is not deleted, only its association with the vector store.
        """
        ack = await self._dispatcher.request(
            "DELETE",
            vector_store_file_path(vector_store_id, file_id),
            cast_to=VectorStoreFileDeleteResponse,
            timeout=timeout,
        )
        if not ack.deleted:
            logger.warning(f"Server did not confirm deletion of file {file_id} from vector store {vector_store_id}")
        return ack

    async def list_files(
        self,
        vector_store_id: str,
        params: ListParams | None = None,
        *,
        timeout: Timeout | NotGiven = NOT_GIVEN,
    ) -> VectorStoreListFilesResponse:
        """Return one page of files attached to a vector store. Use `iterate_files` to walk every page."""
        path = vector_store_files_path(vector_store_id) + encode_query(params)
        return await self._dispatcher.request("GET", path, cast_to=VectorStoreListFilesResponse, timeout=timeout)

    def iterate_files(
        self,
        vector_store_id: str,
        params: ListParams | None = None,
    ) -> AsyncCursorPaginator[VectorStoreFileObject]:
        async def fetch_page(page_params: ListParams) -> VectorStoreListFilesResponse:
            return await self.list_files(vector_store_id, page_params)

        return AsyncCursorPaginator(fetch_page, params)


__all__ = [
    "VectorStoresClient",
]
