"""
Pagination iterator shared by every resource's `list`.

The iterator is lazy: nothing is fetched until the first `next()`. Each
exhausted page triggers one fetch through the injected `query` callable,
using the ID of the last item seen as the `starting_after` cursor (or the
first item of the page as `ending_before` when paging backwards).

Usage:

    it = client.order_returns.list(OrderReturnListParams(limit=10))
    while it.next():
        handle(it.order_return())
    if it.err:
        raise it.err

or simply `for order_return in it: ...`, which raises the stored error at
the end of iteration.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Generic, Iterator, List, Optional, TypeVar

from pydantic import BaseModel

from payments_client.contracts.base import ListMeta, ListObject, ListParams
from payments_client.errors import PaymentsClientError
from payments_client.form import FormValues, encode_params

logger = logging.getLogger(__name__)

ItemT = TypeVar("ItemT", bound=BaseModel)

# Fetches one page given the current form values and the caller's params.
PageQuery = Callable[[FormValues, ListParams], ListObject]


class IteratorState(str, Enum):
    READY = "ready"
    ADVANCING = "advancing"
    EXHAUSTED = "exhausted"
    ERRORED = "errored"


class ListIterator(Generic[ItemT]):
    """Single-pass, forward-only cursor over a paginated collection. Not thread-safe."""

    def __init__(self, params: Optional[ListParams], query: PageQuery) -> None:
        self.params = params or ListParams()
        self._query = query
        self._form = encode_params(self.params)
        self._page: List[ItemT] = []
        self._position = -1
        self._fetched_any = False
        self._current: Optional[ItemT] = None
        self._meta = ListMeta()
        self._err: Optional[PaymentsClientError] = None
        self.state = IteratorState.READY

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def next(self) -> bool:
        """Advance to the next item, fetching a page if needed. False when done or on error."""
        if self.state in (IteratorState.EXHAUSTED, IteratorState.ERRORED):
            self._current = None
            return False

        if self._position + 1 >= len(self._page):
            if not self._should_fetch():
                self._finish()
                return False
            if not self._fetch_page():
                return False
            if not self._page:
                self._finish()
                return False

        self._position += 1
        self._current = self._page[self._position]
        return True

    @property
    def current(self) -> ItemT:
        """Item at the current position. Raises IndexError when there is none."""
        if self._current is None:
            raise IndexError("Iterator is not positioned on an item; call next() first.")
        return self._current

    @property
    def err(self) -> Optional[PaymentsClientError]:
        return self._err

    @property
    def meta(self) -> ListMeta:
        """List metadata of the most recently fetched page."""
        return self._meta

    def __iter__(self) -> Iterator[ItemT]:
        while self.next():
            yield self.current
        if self._err is not None:
            raise self._err

    # ------------------------------------------------------------------
    # Paging
    # ------------------------------------------------------------------

    def _should_fetch(self) -> bool:
        if not self._fetched_any:
            return True
        return self._meta.has_more and not self.params.single

    def _advance_cursor(self) -> None:
        if not self._page:
            return
        if self.params.ending_before is not None:
            self._form.set("ending_before", self._item_id(self._page[0]))
        else:
            self._form.set("starting_after", self._item_id(self._page[-1]))

    @staticmethod
    def _item_id(item: BaseModel) -> str:
        return str(getattr(item, "id", ""))

    def _fetch_page(self) -> bool:
        self._advance_cursor()
        self.state = IteratorState.ADVANCING
        try:
            page = self._query(self._form.copy(), self.params)
        except PaymentsClientError as exc:
            logger.warning("List page fetch failed: %s", exc)
            self._err = exc
            self._page = []
            self._current = None
            self.state = IteratorState.ERRORED
            return False

        self._fetched_any = True
        self._page = list(page.data)
        self._position = -1
        self._meta = page.meta
        self.state = IteratorState.READY
        logger.debug("Fetched page of %d items (has_more=%s)", len(self._page), self._meta.has_more)
        return True

    def _finish(self) -> None:
        self._page = []
        self._current = None
        self.state = IteratorState.EXHAUSTED
