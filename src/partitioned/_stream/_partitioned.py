from __future__ import annotations

import logging
from collections.abc import AsyncIterable, Callable

from .._core import get_config
from .._errors import PartitionNotConsumedError, UpstreamDivergedError
from .._results import NONE, Err, Ok, Option, Result, Some
from ._main import BaseStream
from ._upstream import AsyncUpstream
from ._zip_with_next import AsyncZipWithNext

logger = logging.getLogger(__name__)


class AsyncPartition[T, K](BaseStream[T]):
    """An asynchronous stream over one key-run, the counterpart of `Partition`.

    Example:
    ```python
    >>> import asyncio
    >>> import partitioned as pt
    >>> async def first_run() -> tuple[str, pt.Seq[str], bool]:
    ...     first = await anext(pt.Stream("aAb").partitioned(str.lower))
    ...     return first.key(), await first.collect(), first.is_terminated()
    >>> asyncio.run(first_run())
    ('a', Seq('a', 'A'), True)

    ```
    """

    _upstream: AsyncUpstream[T]
    _key_fn: Callable[[T], K]
    _key: K
    _current: T
    _next: Option[T]
    _terminated: bool

    __slots__ = ("_current", "_key", "_key_fn", "_next", "_terminated", "_upstream")

    def __init__(
        self,
        upstream: AsyncUpstream[T],
        key_fn: Callable[[T], K],
        key: K,
        current: T,
        next_: Option[T],
    ) -> None:
        self._upstream = upstream
        self._key_fn = key_fn
        self._key = key
        self._current = current
        self._next = next_
        self._terminated = False

    async def __anext__(self) -> T:
        if self._terminated:
            raise StopAsyncIteration

        match self._next:
            case Some(following) if self._key == self._key_fn(following):
                match await self._upstream.advance():
                    case Some((current, next_)):
                        emitted, self._current = self._current, current
                        self._next = next_
                        return emitted
                    case _:
                        raise UpstreamDivergedError(self._key)
            case _:
                self._terminated = True
                logger.debug("Partition with key %r terminated", self._key)
                return self._current

    def key(self) -> K:
        """The key shared by every element of this partition."""
        return self._key

    def is_terminated(self) -> bool:
        """Whether the last element of the run has been emitted."""
        return self._terminated


class AsyncPartitioned[T, K](BaseStream[AsyncPartition[T, K]]):
    """An asynchronous stream of `AsyncPartition`, the counterpart of `Partitioned`.

    The same consumption rule applies: each partition must be fully consumed before awaiting the next one,
    otherwise the next await raises `PartitionNotConsumedError`.
    Dropping or cancelling a partition halfway is only noticed that way, on the next await.

    Args:
        upstream (AsyncUpstream[T]): The shared cursor over the paired base stream.
        key_fn (Callable[[T], K]): Pure function computing the key of an element.

    Example:
    ```python
    >>> import asyncio
    >>> import partitioned as pt
    >>> groups = pt.Stream([1, 2, 2, 3, 3, 3]).partitioned(lambda x: x)
    >>> asyncio.run(groups.then(lambda p: p.collect()).collect())
    Seq(Seq(1,), Seq(2, 2), Seq(3, 3, 3))

    ```
    """

    _upstream: AsyncUpstream[T]
    _key_fn: Callable[[T], K]
    _key: Option[K]

    __slots__ = ("_key", "_key_fn", "_upstream")

    def __init__(self, upstream: AsyncUpstream[T], key_fn: Callable[[T], K]) -> None:
        self._upstream = upstream
        self._key_fn = key_fn
        self._key = NONE

    async def __anext__(self) -> AsyncPartition[T, K]:
        match await self._upstream.advance():
            case Some((current, next_)):
                key = self._key_fn(current)
                if self._key.map(lambda previous: previous == key).unwrap_or(False):
                    raise PartitionNotConsumedError(key)
                self._key = Some(key)
                if get_config().log_items:
                    logger.debug("Partition with key %r opened on %r", key, current)
                else:
                    logger.debug("Partition with key %r opened", key)
                return AsyncPartition(self._upstream, self._key_fn, key, current, next_)
            case _:
                raise StopAsyncIteration

    async def try_next(
        self,
    ) -> Result[Option[AsyncPartition[T, K]], PartitionNotConsumedError]:
        """Await the next partition, returning the contract violation as an `Err` instead of raising it.

        See `Partitioned.try_next()`.
        """
        try:
            return Ok(await self.next())  # noqa: TRY300
        except PartitionNotConsumedError as err:
            return Err(err)


def apartition_by[T, K](
    data: AsyncIterable[T], key: Callable[[T], K]
) -> AsyncPartitioned[T, K]:
    """Lazily split the async **data** into runs of consecutive elements sharing the same **key**.

    Args:
        data (AsyncIterable[T]): The base stream. It is never materialized.
        key (Callable[[T], K]): Pure, repeatable function computing the key of an element.

    Returns:
        AsyncPartitioned[T, K]: A stream of `AsyncPartition`.

    Example:
    ```python
    >>> import asyncio
    >>> import partitioned as pt
    >>> async def ticks():
    ...     for tick in (1, 1, 2):
    ...         await asyncio.sleep(0)
    ...         yield tick
    >>> async def sizes() -> list[int]:
    ...     return [len(await part.collect()) async for part in pt.apartition_by(ticks(), lambda t: t)]
    >>> asyncio.run(sizes())
    [2, 1]

    ```
    """
    return AsyncPartitioned(AsyncUpstream(AsyncZipWithNext(data)), key)
