# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the terms described in the LICENSE file in
# the root directory of this source tree.

"""Errors raised by the vector store client.

Four failure kinds are kept apart so callers can decide on their own retry policy:

- RequestConstructionError: the request could not be built, nothing was sent.
- APIConnectionError / APITimeoutError: the transport failed.
- APIStatusError / NotFoundError: the server answered with a non-2xx status.
- ResponseDecodeError: a 2xx body did not match the expected schema.
"""

from typing import Any

import httpx


class VectorStoreClientError(Exception):
    """Base class for every error raised by the client."""


class RequestConstructionError(VectorStoreClientError, ValueError):
    """The request was malformed before any network call (bad base URL, empty ID)."""


class APIConnectionError(VectorStoreClientError):
    """The transport failed to complete the exchange."""

    def __init__(self, request: httpx.Request | None, message: str = "Connection error.") -> None:
        super().__init__(message)
        self.request = request


class APITimeoutError(APIConnectionError):
    def __init__(self, request: httpx.Request | None) -> None:
        super().__init__(request, message="Request timed out.")


class APIStatusError(VectorStoreClientError):
    """The server rejected the request with a non-success status.

    :param message: Error message, taken from the structured error payload when present
    :param response: The raw httpx response
    :param body: The decoded JSON error body, or None when the body was not JSON
    """

    def __init__(self, message: str, *, response: httpx.Response, body: Any | None) -> None:
        super().__init__(message)
        self.message = message
        self.response = response
        self.status_code = response.status_code
        self.body = body

    def __str__(self) -> str:
        return f"Error code: {self.status_code} - {self.message}"


class NotFoundError(APIStatusError):
    pass


class ResponseDecodeError(VectorStoreClientError):
    """A successful response body was malformed JSON or did not match the expected model."""

    def __init__(self, message: str, *, response: httpx.Response) -> None:
        super().__init__(message)
        self.response = response
        self.status_code = response.status_code


def make_status_error(response: httpx.Response) -> APIStatusError:
    """Build the status error for a non-2xx response, keeping the server's error payload."""
    body: Any | None
    try:
        body = response.json()
    except ValueError:
        body = None

    message = None
    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict):
            message = error.get("message")
        elif isinstance(error, str):
            message = error
        if message is None:
            message = body.get("detail") or body.get("message")
    if not message:
        message = response.text or response.reason_phrase

    if response.status_code == 404:
        return NotFoundError(str(message), response=response, body=body)
    return APIStatusError(str(message), response=response, body=body)


__all__ = [
    "APIConnectionError",
    "APIStatusError",
    "APITimeoutError",
    "NotFoundError",
    "RequestConstructionError",
    "ResponseDecodeError",
    "VectorStoreClientError",
    "make_status_error",
]
