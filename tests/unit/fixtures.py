# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the terms described in the LICENSE file in
# the root directory of this source tree.

import json
from collections.abc import Callable

import httpx
import pytest

from vector_store_client import VectorStoreClientConfig, VectorStoresClient

BASE_URL = "https://api.example.com/v1"


def vector_store_json(store_id: str, **overrides) -> dict:
    data = {
        "id": store_id,
        "object": "vector_store",
        "created_at": 1700000000,
        "name": "docs",
        "bytes": 0,
        "file_counts": {"in_progress": 0, "completed": 0, "failed": 0, "cancelled": 0, "total": 0},
    }
    data.update(overrides)
    return data


def vector_store_file_json(file_id: str, vector_store_id: str = "vs_1", **overrides) -> dict:
    data = {
        "id": file_id,
        "object": "vector_store.file",
        "created_at": 1700000001,
        "vector_store_id": vector_store_id,
        "status": "in_progress",
        "last_error": None,
        "usage_bytes": 0,
    }
    data.update(overrides)
    return data


class RecordingHandler:
    """httpx.MockTransport handler that records requests and answers through a routing callable."""

    def __init__(self, route: Callable[[httpx.Request], httpx.Response]):
        self.route = route
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.route(request)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> dict:
        return json.loads(self.last_request.content)


@pytest.fixture
def config():
    return VectorStoreClientConfig(base_url=BASE_URL)


@pytest.fixture
async def make_client(config):
    """Build a VectorStoresClient whose requests are answered by `route`."""
    clients = []

    def _make(route: Callable[[httpx.Request], httpx.Response]) -> tuple[VectorStoresClient, RecordingHandler]:
        handler = RecordingHandler(route)
        client = VectorStoresClient(config, transport=httpx.MockTransport(handler))
        clients.append(client)
        return client, handler

    yield _make

    for client in clients:
        await client.aclose()


def respond(status_code: int = 200, json_body: dict | None = None) -> Callable[[httpx.Request], httpx.Response]:
    def route(request: httpx.Request) -> httpx.Response:
        if json_body is None:
            return httpx.Response(status_code)
        return httpx.Response(status_code, json=json_body)

    return route
