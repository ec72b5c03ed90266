# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the terms described in the LICENSE file in
# the root directory of this source tree.

"""Pydantic models for vector store requests and responses.

Response models mirror the remote JSON objects field for field. Request models
track which fields were explicitly set: a field that was never set is left out of
the payload entirely, while a field set to an empty list is sent as `[]`. On
modify, the first leaves the server-side value unchanged and the second clears it.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict

VectorStoreFileStatus = Literal["in_progress", "completed", "failed", "cancelled"]


class RequestModel(BaseModel):
    """Base class for request payloads whose unset fields are omitted on the wire."""

    model_config = ConfigDict(extra="forbid")

    def to_payload(self) -> dict[str, Any]:
        """Serialize only the fields that were explicitly set.

        :returns: A JSON-ready dict. Unset fields are absent, explicitly empty
            collections are kept, explicit None becomes null.
        """
        return self.model_dump(mode="json", exclude_unset=True)

    def is_set(self, field: str) -> bool:
        return field in self.model_fields_set


class VectorStoreFileCounts(BaseModel):
    """File processing status counts for a vector store.

    :param in_progress: Number of files currently being processed
    :param completed: Number of files that have been successfully processed
    :param failed: Number of files that failed to process
    :param cancelled: Number of files that had their processing cancelled
    :param total: Total number of files in the vector store
    """

    in_progress: int
    completed: int
    failed: int
    cancelled: int
    total: int


class VectorStoreObject(BaseModel):
    """Vector Store object.

    :param id: Unique identifier for the vector store
    :param object: Object type identifier, always "vector_store"
    :param created_at: Timestamp when the vector store was created
    :param name: (Optional) Name of the vector store
    :param bytes: Size of the vector store in bytes
    :param file_counts: (Optional) File processing status counts for the vector store
    :param usage_bytes: (Optional) Storage space used by the vector store in bytes
    :param status: (Optional) Current status of the vector store
    :param expires_after: (Optional) Expiration policy for the vector store
    :param expires_at: (Optional) Timestamp when the vector store will expire
    :param last_active_at: (Optional) Timestamp of last activity on the vector store
    :param metadata: (Optional) Set of key-value pairs attached to the vector store
    """

    id: str
    object: str = "vector_store"
    created_at: int
    name: str | None = None
    bytes: int = 0
    file_counts: VectorStoreFileCounts | None = None
    usage_bytes: int | None = None
    status: str | None = None
    expires_after: dict[str, Any] | None = None
    expires_at: int | None = None
    last_active_at: int | None = None
    metadata: dict[str, Any] | None = None


class VectorStoreRequest(RequestModel):
    """Request to create or modify a vector store.

    :param name: (Optional) Name for the vector store
    :param file_ids: (Optional) File IDs to associate with the vector store
    :param expires_after: (Optional) Expiration policy for the vector store
    :param metadata: (Optional) Set of key-value pairs for the vector store
    """

    name: str | None = None
    file_ids: list[str] | None = None
    expires_after: dict[str, Any] | None = None
    metadata: dict[str, Any] | None = None


class VectorStoreListResponse(BaseModel):
    """Response from listing vector stores.

    :param object: Object type identifier, always "list"
    :param data: List of vector store objects, in server order
    :param first_id: (Optional) ID of the first vector store in the list for pagination
    :param last_id: (Optional) ID of the last vector store in the list for pagination
    :param has_more: Whether there are more vector stores available beyond this page
    """

    object: str = "list"
    data: list[VectorStoreObject]
    first_id: str | None = None
    last_id: str | None = None
    has_more: bool = False


class VectorStoreDeleteResponse(BaseModel):
    """Response from deleting a vector store.

    :param id: Unique identifier of the deleted vector store
    :param object: Object type identifier for the deletion response
    :param deleted: Whether the server confirmed the deletion
    """

    id: str
    object: str = "vector_store.deleted"
    deleted: bool


class VectorStoreFileLastError(BaseModel):
    """Error information for failed vector store file processing.

    :param code: Error code indicating the type of failure
    :param message: Human-readable error message describing the failure
    """

    code: str
    message: str


class VectorStoreFileObject(BaseModel):
    """Vector Store File object.

    :param id: Unique identifier for the file
    :param object: Object type identifier, always "vector_store.file"
    :param created_at: Timestamp when the file was added to the vector store
    :param vector_store_id: ID of the vector store containing this file
    :param status: Current processing status of the file
    :param last_error: (Optional) Error information if file processing failed
    :param usage_bytes: Storage space used by this file in bytes
    :param attributes: (Optional) Key-value attributes associated with the file
    :param chunking_strategy: (Optional) Strategy used for splitting the file into chunks
    """

    id: str
    object: str = "vector_store.file"
    created_at: int
    vector_store_id: str
    status: VectorStoreFileStatus
    last_error: VectorStoreFileLastError | str | None = None
    usage_bytes: int = 0
    attributes: dict[str, str | float | bool] | None = None
    chunking_strategy: dict[str, Any] | None = None


class VectorStoreFileRequest(RequestModel):
    """Request to attach a file to a vector store.

    :param file_id: The ID of the file to attach
    :param attributes: (Optional) Attributes to associate with the file
    :param chunking_strategy: (Optional) Strategy for chunking the file content
    """

    file_id: str
    attributes: dict[str, Any] | None = None
    chunking_strategy: dict[str, Any] | None = None


class VectorStoreListFilesResponse(BaseModel):
    """Response from listing files in a vector store.

    :param object: Object type identifier, always "list"
    :param data: List of vector store file objects, in server order
    :param first_id: (Optional) ID of the first file in the list for pagination
    :param last_id: (Optional) ID of the last file in the list for pagination
    :param has_more: Whether there are more files available beyond this page
    """

    object: str = "list"
    data: list[VectorStoreFileObject]
    first_id: str | None = None
    last_id: str | None = None
    has_more: bool = False


class VectorStoreFileDeleteResponse(BaseModel):
    """Response from deleting a vector store file.

    :param id: Unique identifier of the deleted file
    :param object: Object type identifier for the deletion response
    :param deleted: Whether the server confirmed the deletion
    """

    id: str
    object: str = "vector_store.file.deleted"
    deleted: bool


class ListParams(BaseModel):
    """Pagination and ordering parameters for list calls.

    Values are passed through to the server as-is; range and token checks are
    left to the remote service.

    :param limit: (Optional) Maximum number of objects to return
    :param order: (Optional) Sort order by `created_at`, e.g. `asc` or `desc`
    :param after: (Optional) Cursor: return objects after this ID
    :param before: (Optional) Cursor: return objects before this ID
    """

    limit: int | None = None
    order: str | None = None
    after: str | None = None
    before: str | None = None


__all__ = [
    "ListParams",
    "RequestModel",
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
