# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the terms described in the LICENSE file in
# the root directory of this source tree.

import asyncio

import httpx
import pytest

from tests.unit.fixtures import BASE_URL, RecordingHandler, respond, vector_store_json
from vector_store_client import (
    APIConnectionError,
    APIStatusError,
    APITimeoutError,
    NotFoundError,
    RequestConstructionError,
    RequestDispatcher,
    ResponseDecodeError,
    VectorStoreObject,
    VectorStoreRequest,
)


@pytest.fixture
async def dispatch():
    """Yield a factory building a RequestDispatcher on top of a mocked transport."""
    http_clients = []

    def _make(route):
        handler = RecordingHandler(route)
        http_client = httpx.AsyncClient(base_url=BASE_URL, transport=httpx.MockTransport(handler))
        http_clients.append(http_client)
        dispatcher = RequestDispatcher(http_client, version_header="OpenAI-Beta", api_version="assistants=v2")
        return dispatcher, handler

    yield _make

    for http_client in http_clients:
        await http_client.aclose()


async def test_decodes_typed_response(dispatch):
    dispatcher, handler = dispatch(respond(200, vector_store_json("vs_1")))

    store = await dispatcher.request("GET", "/vector_stores/vs_1", cast_to=VectorStoreObject)

    assert isinstance(store, VectorStoreObject)
    assert store.id == "vs_1"
    assert len(handler.requests) == 1
    assert str(handler.last_request.url) == f"{BASE_URL}/vector_stores/vs_1"


async def test_sends_protocol_version_header(dispatch):
    dispatcher, handler = dispatch(respond(200, vector_store_json("vs_1")))

    await dispatcher.request("GET", "/vector_stores/vs_1", cast_to=VectorStoreObject)

    assert handler.last_request.headers["OpenAI-Beta"] == "assistants=v2"


async def test_body_contains_only_set_fields(dispatch):
    dispatcher, handler = dispatch(respond(200, vector_store_json("vs_1")))

    await dispatcher.request(
        "POST", "/vector_stores/vs_1", body=VectorStoreRequest(file_ids=[]), cast_to=VectorStoreObject
    )

    assert handler.last_json() == {"file_ids": []}
    assert handler.last_request.headers["content-type"] == "application/json"


async def test_discard_mode_accepts_empty_204(dispatch):
    dispatcher, handler = dispatch(respond(204))

    result = await dispatcher.request("DELETE", "/vector_stores/vs_1/files/file-1")

    assert result is None
    assert handler.last_request.method == "DELETE"


async def test_discard_mode_ignores_non_json_body(dispatch):
    dispatcher, _ = dispatch(lambda request: httpx.Response(200, content=b"not json"))

    assert await dispatcher.request("DELETE", "/vector_stores/vs_1") is None


async def test_status_error_carries_code_and_body(dispatch):
    error_body = {"error": {"message": "Invalid limit", "type": "invalid_request_error"}}
    dispatcher, _ = dispatch(respond(400, error_body))

    with pytest.raises(APIStatusError) as exc_info:
        await dispatcher.request("GET", "/vector_stores?limit=1000", cast_to=VectorStoreObject)

    assert exc_info.value.status_code == 400
    assert exc_info.value.body == error_body
    assert exc_info.value.message == "Invalid limit"
    assert not isinstance(exc_info.value, NotFoundError)


async def test_status_error_without_json_body(dispatch):
    dispatcher, _ = dispatch(lambda request: httpx.Response(502, content=b"Bad Gateway"))

    with pytest.raises(APIStatusError) as exc_info:
        await dispatcher.request("GET", "/vector_stores/vs_1", cast_to=VectorStoreObject)

    assert exc_info.value.status_code == 502
    assert exc_info.value.body is None
    assert exc_info.value.message == "Bad Gateway"


async def test_404_raises_not_found(dispatch):
    dispatcher, _ = dispatch(respond(404, {"error": {"message": "No vector store found with id 'vs_x'."}}))

    with pytest.raises(NotFoundError) as exc_info:
        await dispatcher.request("GET", "/vector_stores/vs_x", cast_to=VectorStoreObject)

    assert exc_info.value.status_code == 404
    assert "vs_x" in str(exc_info.value)


async def test_malformed_json_raises_decode_error(dispatch):
    dispatcher, _ = dispatch(lambda request: httpx.Response(200, content=b"{not json"))

    with pytest.raises(ResponseDecodeError) as exc_info:
        await dispatcher.request("GET", "/vector_stores/vs_1", cast_to=VectorStoreObject)

    assert exc_info.value.status_code == 200


async def test_schema_mismatch_raises_decode_error(dispatch):
    dispatcher, _ = dispatch(respond(200, {"object": "vector_store", "name": "docs"}))

    with pytest.raises(ResponseDecodeError):
        await dispatcher.request("GET", "/vector_stores/vs_1", cast_to=VectorStoreObject)


async def test_empty_body_with_expected_model_raises_decode_error(dispatch):
    dispatcher, _ = dispatch(respond(204))

    with pytest.raises(ResponseDecodeError):
        await dispatcher.request("GET", "/vector_stores/vs_1", cast_to=VectorStoreObject)


async def test_connection_failure(dispatch):
    def route(request):
        raise httpx.ConnectError("connection refused", request=request)

    dispatcher, _ = dispatch(route)

    with pytest.raises(APIConnectionError) as exc_info:
        await dispatcher.request("GET", "/vector_stores/vs_1", cast_to=VectorStoreObject)

    assert not isinstance(exc_info.value, APITimeoutError)
    assert exc_info.value.request is not None
    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)


async def test_timeout_failure(dispatch):
    def route(request):
        raise httpx.ReadTimeout("timed out", request=request)

    dispatcher, _ = dispatch(route)

    with pytest.raises(APITimeoutError):
        await dispatcher.request("GET", "/vector_stores/vs_1", cast_to=VectorStoreObject)


async def test_per_call_timeout_is_attached_to_request(dispatch):
    dispatcher, handler = dispatch(respond(200, vector_store_json("vs_1")))

    await dispatcher.request("GET", "/vector_stores/vs_1", cast_to=VectorStoreObject, timeout=2.5)

    assert handler.last_request.extensions["timeout"] == {"connect": 2.5, "read": 2.5, "write": 2.5, "pool": 2.5}


async def test_caller_deadline_cancels_pending_request():
    started = asyncio.Event()

    async def slow_route(request):
        started.set()
        await asyncio.sleep(30)
        return httpx.Response(200, json=vector_store_json("vs_1"))

    async with httpx.AsyncClient(base_url=BASE_URL, transport=httpx.MockTransport(slow_route)) as http_client:
        dispatcher = RequestDispatcher(http_client, version_header="OpenAI-Beta", api_version="assistants=v2")

        with pytest.raises(TimeoutError):
            await asyncio.wait_for(
                dispatcher.request("GET", "/vector_stores/vs_1", cast_to=VectorStoreObject),
                timeout=0.05,
            )

    assert started.is_set()


async def test_unsupported_scheme_is_a_construction_error():
    async with httpx.AsyncClient(base_url="ftp://files.example.com") as http_client:
        dispatcher = RequestDispatcher(http_client, version_header="OpenAI-Beta", api_version="assistants=v2")

        with pytest.raises(RequestConstructionError):
            await dispatcher.request("GET", "/vector_stores/vs_1", cast_to=VectorStoreObject)


async def test_exactly_one_request_per_call_even_on_failure(dispatch):
    dispatcher, handler = dispatch(respond(500, {"error": {"message": "internal"}}))

    with pytest.raises(APIStatusError):
        await dispatcher.request("GET", "/vector_stores/vs_1", cast_to=VectorStoreObject)

    assert len(handler.requests) == 1
    assert handler.last_request.content == b""
