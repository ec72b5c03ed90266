# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the terms described in the LICENSE file in
# the root directory of this source tree.

from collections.abc import AsyncIterator, Awaitable, Callable
from typing import Generic, Protocol, TypeVar

from vector_store_client.log import get_logger
from vector_store_client.models import ListParams

logger = get_logger(name=__name__, category="client::pagination")


class _Identified(Protocol):
    id: str


ItemT = TypeVar("ItemT", bound=_Identified)


class CursorPage(Protocol[ItemT]):
    data: list[ItemT]
    first_id: str | None
    last_id: str | None
    has_more: bool


class AsyncCursorPaginator(Generic[ItemT]):
    """Lazy, restartable iteration over every item of a cursor-paginated list.

    Each page is fetched on demand through `fetch_page`, items are yielded in the
    order the server returned them, and the next request continues from the page's
    `last_id` (or `first_id` when paging backwards with `before`). Iterating again
    starts over from the original parameters.

    Usage:
        async for store in client.iterate(ListParams(limit=50)):
            ...
    """

    def __init__(
        self,
        fetch_page: Callable[[ListParams], Awaitable[CursorPage[ItemT]]],
        params: ListParams | None = None,
    ):
        self._fetch_page = fetch_page
        self._params = params or ListParams()

    @property
    def _backwards(self) -> bool:
        return self._params.before is not None and self._params.after is None

    async def pages(self) -> AsyncIterator[CursorPage[ItemT]]:
        params = self._params
        while True:
            page = await self._fetch_page(params)
            yield page

            if not page.has_more:
                return

            if self._backwards:
                cursor = page.first_id or (page.data[0].id if page.data else None)
                update = {"before": cursor}
            else:
                cursor = page.last_id or (page.data[-1].id if page.data else None)
                update = {"after": cursor, "before": None}

            if cursor is None:
                logger.warning("Server reported has_more without a cursor to continue from; stopping iteration")
                return
            params = params.model_copy(update=update)

    async def _items(self) -> AsyncIterator[ItemT]:
        async for page in self.pages():
            for item in page.data:
                yield item

    def __aiter__(self) -> AsyncIterator[ItemT]:
        return self._items()

    async def to_list(self) -> list[ItemT]:
        return [item async for item in self]


__all__ = [
    "AsyncCursorPaginator",
    "CursorPage",
]
