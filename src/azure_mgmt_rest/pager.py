"""Lazy iteration over continuation-token paginated list operations.

A list operation is described by a single-page fetch function that takes the
continuation token of the previous page (``None`` for the first page) and
returns the decoded page.  Pages are fetched on demand: nothing is requested
until the caller pulls, and page N+1 is only requested after page N has been
handed out, so abandoning iteration is all it takes to stop paging.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Awaitable, Callable, Iterator
from typing import Any, Generic, TypeVar

PageT = TypeVar("PageT")

FetchPage = Callable[[str | None], PageT]
AsyncFetchPage = Callable[[str | None], Awaitable[PageT]]

_logger = logging.getLogger(__name__)


def continuation_of(page: Any) -> str | None:
    # List results without a nextLink in their schema are single pages.
    next_link = getattr(page, "next_link", None)
    if not isinstance(next_link, str) or not next_link.strip():
        return None
    return next_link


def items_of(page: Any) -> list[Any]:
    value = getattr(page, "value", None)
    return list(value) if value else []


def iter_pages(
    fetch_page: FetchPage[PageT],
    continuation_token: str | None = None,
    *,
    logger: logging.Logger | None = None,
) -> Iterator[PageT]:
    log = logger or _logger
    token = continuation_token
    page_number = 0
    while True:
        page = fetch_page(token)
        page_number += 1
        token = continuation_of(page)
        log.debug("fetched page %d with %d items (more=%s)", page_number, len(items_of(page)), token is not None)
        yield page
        if token is None:
            return


async def aiter_pages(
    fetch_page: AsyncFetchPage[PageT],
    continuation_token: str | None = None,
    *,
    logger: logging.Logger | None = None,
) -> AsyncIterator[PageT]:
    log = logger or _logger
    token = continuation_token
    page_number = 0
    while True:
        page = await fetch_page(token)
        page_number += 1
        token = continuation_of(page)
        log.debug("fetched page %d with %d items (more=%s)", page_number, len(items_of(page)), token is not None)
        yield page
        if token is None:
            return


class Pager(Generic[PageT]):
    """Iterable over the items of a paginated list operation.

    Iterating the pager yields items; :meth:`by_page` yields whole pages.
    Every iteration starts again from the first page.
    """

    def __init__(self, fetch_page: FetchPage[PageT], *, logger: logging.Logger | None = None) -> None:
        self._fetch_page = fetch_page
        self._logger = logger

    def by_page(self, continuation_token: str | None = None) -> Iterator[PageT]:
        return iter_pages(self._fetch_page, continuation_token, logger=self._logger)

    def first_page(self) -> PageT:
        return next(iter(self.by_page()))

    def __iter__(self) -> Iterator[Any]:
        for page in self.by_page():
            yield from items_of(page)


class AsyncPager(Generic[PageT]):
    """Async iterable over the items of a paginated list operation."""

    def __init__(self, fetch_page: AsyncFetchPage[PageT], *, logger: logging.Logger | None = None) -> None:
        self._fetch_page = fetch_page
        self._logger = logger

    def by_page(self, continuation_token: str | None = None) -> AsyncIterator[PageT]:
        return aiter_pages(self._fetch_page, continuation_token, logger=self._logger)

    async def first_page(self) -> PageT:
        pages = self.by_page()
        try:
            return await pages.__anext__()
        finally:
            await pages.aclose()

    async def __aiter__(self) -> AsyncIterator[Any]:
        async for page in self.by_page():
            for item in items_of(page):
                yield item

    async def to_list(self) -> list[Any]:
        return [item async for item in self]
