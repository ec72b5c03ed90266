# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the terms described in the LICENSE file in
# the root directory of this source tree.

"""Path and query string construction for the vector store endpoints.

Everything here is plain string composition: the same inputs always give the
same URL, which keeps request lines stable in logs and caches.
"""

from urllib.parse import quote, urlencode

from vector_store_client.errors import RequestConstructionError
from vector_store_client.models import ListParams

VECTOR_STORES_PATH = "/vector_stores"
FILES_SUBPATH = "files"

# Query keys are emitted in this order regardless of how ListParams was built
QUERY_FIELD_ORDER = ("limit", "order", "after", "before")


def _escape(resource_id: str, label: str) -> str:
    if not resource_id:
        raise RequestConstructionError(f"Expected a non-empty value for `{label}` but received {resource_id!r}")
    return quote(resource_id, safe="")


def encode_query(params: ListParams | None) -> str:
    """
    Encode list parameters into a canonical query string.

    Args:
        params: Pagination parameters; None or an all-empty ListParams yields no query string

    Returns:
        "" when nothing is set, otherwise "?key=value&..." in the fixed field order,
        percent-encoded with no safe characters
    """
    if params is None:
        return ""

    pairs = []
    for key in QUERY_FIELD_ORDER:
        value = getattr(params, key)
        if value is None:
            continue
        pairs.append((key, str(value)))

    if not pairs:
        return ""
    return "?" + urlencode(pairs, safe="", quote_via=quote)


def vector_stores_path() -> str:
    return VECTOR_STORES_PATH


def vector_store_path(vector_store_id: str) -> str:
    return f"{VECTOR_STORES_PATH}/{_escape(vector_store_id, 'vector_store_id')}"


def vector_store_files_path(vector_store_id: str) -> str:
    return f"{vector_store_path(vector_store_id)}/{FILES_SUBPATH}"


def vector_store_file_path(vector_store_id: str, file_id: str) -> str:
    return f"{vector_store_files_path(vector_store_id)}/{_escape(file_id, 'file_id')}"


__all__ = [
    "QUERY_FIELD_ORDER",
    "VECTOR_STORES_PATH",
    "encode_query",
    "vector_store_file_path",
    "vector_store_files_path",
    "vector_store_path",
    "vector_stores_path",
]
