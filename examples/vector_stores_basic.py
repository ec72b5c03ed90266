#!/usr/bin/env python3
# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the terms described in the LICENSE file in
# the root directory of this source tree.

"""
Basic vector store walkthrough: create a store, attach a file, list everything, clean up.

Set VECTOR_STORE_BASE_URL and VECTOR_STORE_API_KEY before running.
"""

import asyncio
import os
import sys

from vector_store_client import (
    ListParams,
    NetworkConfig,
    NotFoundError,
    VectorStoreClientConfig,
    VectorStoresClient,
)

BASE_URL = os.environ.get("VECTOR_STORE_BASE_URL", "http://localhost:8321/v1")
API_KEY = os.environ.get("VECTOR_STORE_API_KEY", "fake")


async def main(file_id: str | None) -> None:
    config = VectorStoreClientConfig(
        base_url=BASE_URL,
        network=NetworkConfig(headers={"Authorization": f"Bearer {API_KEY}"}, timeout=60.0),
    )
    async with VectorStoresClient(config) as client:
        store = await client.create(name="example-docs", file_ids=[file_id] if file_id else [])
        print(f"Created {store.id} ({store.name})")

        if file_id:
            attached = await client.retrieve_file(store.id, file_id)
            print(f"File {attached.id} status: {attached.status}")

        print("=== All vector stores ===")
        async for item in client.iterate(ListParams(limit=20, order="desc")):
            print(f"{item.id}\t{item.name}\t{item.file_counts.total if item.file_counts else 0} files")

        ack = await client.delete(store.id)
        print(f"Deleted {ack.id}: {ack.deleted}")

        try:
            await client.retrieve(store.id)
        except NotFoundError as e:
            print(f"Retrieve after delete: {e}")


if __name__ == "__main__":
    asyncio.run(main(sys.argv[1] if len(sys.argv) > 1 else None))
