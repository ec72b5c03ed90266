# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the terms described in the LICENSE file in
# the root directory of this source tree.

"""Single-exchange request dispatch.

RequestDispatcher.request() is the one primitive every vector store operation is
built on. It sends exactly one request through the httpx client it was given and
either returns the decoded model or raises one of the errors in
vector_store_client.errors. Retries belong to the injected transport.
"""

from typing import Any, TypeVar, overload

import httpx
from pydantic import BaseModel, ValidationError

from vector_store_client.errors import (
    APIConnectionError,
    APITimeoutError,
    RequestConstructionError,
    ResponseDecodeError,
    make_status_error,
)
from vector_store_client.log import get_logger
from vector_store_client.models import RequestModel

logger = get_logger(name=__name__, category="client::dispatcher")

ResponseT = TypeVar("ResponseT", bound=BaseModel)


class NotGiven:
    """Sentinel for arguments where None is a meaningful value (timeout=None disables timeouts)."""

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NOT_GIVEN"


NOT_GIVEN = NotGiven()

Timeout = float | httpx.Timeout | None


class RequestDispatcher:
    """Issues requests carrying the protocol-version header and decodes typed responses.

    The dispatcher keeps no per-request state, so one instance can serve any
    number of concurrent tasks.
    """

    def __init__(self, http_client: httpx.AsyncClient, *, version_header: str, api_version: str):
        self._client = http_client
        self._version_header = version_header
        self._api_version = api_version

    @overload
    async def request(
        self,
        method: str,
        path: str,
        *,
        body: RequestModel | None = None,
        cast_to: type[ResponseT],
        timeout: Timeout | NotGiven = NOT_GIVEN,
    ) -> ResponseT: ...

    @overload
    async def request(
        self,
        method: str,
        path: str,
        *,
        body: RequestModel | None = None,
        cast_to: None = None,
        timeout: Timeout | NotGiven = NOT_GIVEN,
    ) -> None: ...

    async def request(
        self,
        method: str,
        path: str,
        *,
        body: RequestModel | None = None,
        cast_to: type[ResponseT] | None = None,
        timeout: Timeout | NotGiven = NOT_GIVEN,
    ) -> ResponseT | None:
        """Send one request and decode its response.

        :param method: HTTP method
        :param path: Path (with query string) relative to the client's base URL
        :param body: Optional request payload; only its explicitly set fields are sent
        :param cast_to: Model to decode a 2xx body into. None discards the body unread.
        :param timeout: Per-call timeout overriding the client default
        :returns: The decoded model, or None when cast_to is None
        :raises RequestConstructionError: if the URL cannot be built
        :raises APITimeoutError: if the transport timed out
        :raises APIConnectionError: on any other transport failure
        :raises APIStatusError: on a non-2xx response (NotFoundError for 404)
        :raises ResponseDecodeError: if a 2xx body does not match cast_to
        """
        request = self._build_request(method, path, body=body, timeout=timeout)
        response = await self._send(request)

        if not response.is_success:
            error = make_status_error(response)
            logger.warning(f"{method} {request.url} failed: {error}")
            raise error

        if cast_to is None:
            logger.debug(f"{method} {request.url} -> {response.status_code} (body discarded)")
            return None

        try:
            result = cast_to.model_validate_json(response.content)
        except ValidationError as e:
            logger.warning(f"{method} {request.url} returned a body that is not a valid {cast_to.__name__}")
            raise ResponseDecodeError(
                f"Could not decode response as {cast_to.__name__}: {e}",
                response=response,
            ) from e

        logger.debug(f"{method} {request.url} -> {response.status_code}")
        return result

    def _build_request(
        self,
        method: str,
        path: str,
        *,
        body: RequestModel | None,
        timeout: Timeout | NotGiven,
    ) -> httpx.Request:
        kwargs: dict[str, Any] = {"headers": {self._version_header: self._api_version}}
        if body is not None:
            kwargs["json"] = body.to_payload()
        if not isinstance(timeout, NotGiven):
            kwargs["timeout"] = timeout

        try:
            return self._client.build_request(method, path, **kwargs)
        except httpx.InvalidURL as e:
            raise RequestConstructionError(f"Invalid request URL for {method} {path}: {e}") from e

    async def _send(self, request: httpx.Request) -> httpx.Response:
        logger.debug(f"Sending {request.method} {request.url}")
        try:
            return await self._client.send(request)
        except httpx.UnsupportedProtocol as e:
            raise RequestConstructionError(f"Unsupported URL for {request.method} {request.url}: {e}") from e
        except httpx.TimeoutException as e:
            logger.warning(f"{request.method} {request.url} timed out")
            raise APITimeoutError(request) from e
        except httpx.TransportError as e:
            logger.warning(f"{request.method} {request.url} failed: {e!r}")
            raise APIConnectionError(request, message=str(e) or "Connection error.") from e


__all__ = [
    "NOT_GIVEN",
    "NotGiven",
    "RequestDispatcher",
    "Timeout",
]
