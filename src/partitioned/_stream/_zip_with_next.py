from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterable, AsyncIterator

from .._core import MISSING
from .._results import NONE, Option, Some
from ._main import BaseStream

logger = logging.getLogger(__name__)


class AsyncZipWithNext[T](BaseStream[tuple[T, Option[T]]]):
    """Pair each element of **data** with the element following it, asynchronously.

    Same contract as `ZipWithNext`: the last element is paired with `NONE`, and at most one element is buffered.

    The very first pair needs two elements. Once the first one is buffered, control is handed back to the
    event loop for one turn, and the pair is completed when this coroutine is resumed. Suspension may otherwise
    happen wherever **data** itself suspends.

    Args:
        data (AsyncIterable[T]): The base stream.

    Example:
    ```python
    >>> import asyncio
    >>> import partitioned as pt
    >>> asyncio.run(pt.Stream(range(3)).zip_with_next().collect())
    Seq((0, Some(value=1)), (1, Some(value=2)), (2, NONE))

    ```
    """

    _upstream: AsyncIterator[T]
    _prev: Option[T]

    __slots__ = ("_prev", "_upstream")

    def __init__(self, data: AsyncIterable[T]) -> None:
        self._upstream = aiter(data)
        self._prev = NONE

    async def __anext__(self) -> tuple[T, Option[T]]:
        item = await anext(self._upstream, MISSING)
        if item is MISSING:
            match self._prev:
                case Some(prev):
                    self._prev = NONE
                    logger.debug("Base stream exhausted, draining the lookahead slot")
                    return (prev, NONE)
                case _:
                    raise StopAsyncIteration

        previous, self._prev = self._prev, Some(item)
        match previous:
            case Some(prev):
                return (prev, Some(item))
            case _:
                logger.debug("Lookahead slot seeded, yielding to the event loop")
                await asyncio.sleep(0)
                return await self.__anext__()


def azip_with_next[T](data: AsyncIterable[T]) -> AsyncZipWithNext[T]:
    """Pair each element of the async **data** with the following one, if any.

    Args:
        data (AsyncIterable[T]): The base stream.

    Returns:
        AsyncZipWithNext[T]: A stream of `(item, Option[next_item])` pairs.
    """
    return AsyncZipWithNext(data)
