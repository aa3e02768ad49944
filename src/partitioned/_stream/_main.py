from __future__ import annotations

from collections.abc import (
    AsyncIterable,
    AsyncIterator,
    Awaitable,
    Callable,
    Iterable,
)
from typing import TYPE_CHECKING

from .._core import Pipeable
from .._iter import Seq
from .._results import NONE, Option, Some

if TYPE_CHECKING:
    from ._partitioned import AsyncPartitioned
    from ._zip_with_next import AsyncZipWithNext


class BaseStream[T](Pipeable, AsyncIterator[T]):
    """Chainable methods shared by every asynchronous sequence of this package.

    Subclasses only implement `__anext__`; `__aiter__` returns `self`, as for any `AsyncIterator`.
    """

    __slots__ = ()

    async def next(self) -> Option[T]:
        """Await the next element, wrapped in an `Option`.

        Returns:
            Option[T]: `Some[T]`, or `NONE` if the stream is exhausted.

        Example:
        ```python
        >>> import asyncio
        >>> import partitioned as pt
        >>> async def first_two() -> tuple[pt.Option[int], pt.Option[int]]:
        ...     stream = pt.Stream([1])
        ...     return await stream.next(), await stream.next()
        >>> asyncio.run(first_two())
        (Some(value=1), NONE)

        ```
        """
        try:
            return Some(await self.__anext__())  # noqa: TRY300
        except StopAsyncIteration:
            return NONE

    async def collect(self) -> Seq[T]:
        """Consume the stream and collect its elements into a `Seq`.

        Example:
        ```python
        >>> import asyncio
        >>> import partitioned as pt
        >>> asyncio.run(pt.Stream(range(3)).collect())
        Seq(0, 1, 2)

        ```
        """
        return Seq(tuple([item async for item in self]))

    def map[R](self, func: Callable[[T], R]) -> Stream[R]:
        """Apply a synchronous function lazily to each element.

        Args:
            func (Callable[[T], R]): Function to apply to each element.

        Returns:
            Stream[R]: A stream of transformed elements.
        """

        async def _map() -> AsyncIterator[R]:
            async for item in self:
                yield func(item)

        return Stream(_map())

    def then[R](self, func: Callable[[T], Awaitable[R]]) -> Stream[R]:
        """Apply an asynchronous function lazily to each element, awaiting each result in turn.

        Since each result is awaited before pulling the next element,
        this is the natural way to consume the partitions of an `AsyncPartitioned`.

        Args:
            func (Callable[[T], Awaitable[R]]): Coroutine function to apply to each element.

        Returns:
            Stream[R]: A stream of awaited results.

        Example:
        ```python
        >>> import asyncio
        >>> import partitioned as pt
        >>> stream = pt.Stream([1, 2, 2]).partitioned(lambda x: x).then(lambda p: p.collect())
        >>> asyncio.run(stream.collect())
        Seq(Seq(1,), Seq(2, 2))

        ```
        """

        async def _then() -> AsyncIterator[R]:
            async for item in self:
                yield await func(item)

        return Stream(_then())

    def flatten[U](self: BaseStream[AsyncIterable[U]]) -> Stream[U]:
        """Flatten one level of nesting, each sub-stream being consumed before the next one is pulled.

        Example:
        ```python
        >>> import asyncio
        >>> import partitioned as pt
        >>> asyncio.run(pt.Stream([3, 3, 1]).partitioned(lambda x: x).flatten().collect())
        Seq(3, 3, 1)

        ```
        """

        async def _flatten() -> AsyncIterator[U]:
            async for inner in self:
                async for item in inner:
                    yield item

        return Stream(_flatten())

    def zip_with_next(self) -> AsyncZipWithNext[T]:
        """Pair each element with the following one, if any.

        See `AsyncZipWithNext` for details.
        """
        from ._zip_with_next import AsyncZipWithNext

        return AsyncZipWithNext(self)

    def partitioned[K](self, key: Callable[[T], K]) -> AsyncPartitioned[T, K]:
        """Lazily split the stream into runs of consecutive elements sharing the same **key**.

        See `AsyncPartitioned` for the consumption rules.

        Args:
            key (Callable[[T], K]): Pure function computing the key of an element. Keys are only compared with `==`.
        """
        from ._partitioned import apartition_by

        return apartition_by(self, key)


async def _from_iterable[T](data: Iterable[T]) -> AsyncIterator[T]:
    for item in data:
        yield item


class Stream[T](BaseStream[T]):
    """A wrapper around any `AsyncIterable`, giving access to the chainable methods of `BaseStream`.

    A plain `Iterable` is also accepted, and turned into an always ready stream.

    Args:
        data (AsyncIterable[T] | Iterable[T]): The source of elements.
    """

    _inner: AsyncIterator[T]

    __slots__ = ("_inner",)

    def __init__(self, data: AsyncIterable[T] | Iterable[T]) -> None:
        if isinstance(data, AsyncIterable):
            self._inner = aiter(data)
        else:
            self._inner = _from_iterable(data)

    async def __anext__(self) -> T:
        return await anext(self._inner)
