from __future__ import annotations

import asyncio

from .._results import Option
from ._zip_with_next import AsyncZipWithNext


class AsyncUpstream[T]:
    """The single cursor over an `AsyncZipWithNext`, shared by an `AsyncPartitioned` and its partitions.

    Advancing holds an `asyncio.Lock` for the whole await, so the pairer is never re-entered
    while it is suspended. Consumption stays sequential: the live partition first, then the group stream.
    """

    _pairs: AsyncZipWithNext[T]
    _lock: asyncio.Lock

    __slots__ = ("_lock", "_pairs")

    def __init__(self, pairs: AsyncZipWithNext[T]) -> None:
        self._pairs = pairs
        self._lock = asyncio.Lock()

    async def advance(self) -> Option[tuple[T, Option[T]]]:
        async with self._lock:
            return await self._pairs.next()
