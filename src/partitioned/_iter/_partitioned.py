from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from .._core import get_config
from .._errors import PartitionNotConsumedError, UpstreamDivergedError
from .._results import NONE, Err, Ok, Option, Result, Some
from ._main import BaseIter
from ._upstream import Upstream
from ._zip_with_next import ZipWithNext

logger = logging.getLogger(__name__)


class Partition[T, K](BaseIter[T]):
    """A lazy iterator over one key-run: the consecutive elements sharing the same key.

    A partition pulls from the upstream shared with the `Partitioned` that produced it,
    and stops exactly at the key boundary. Once exhausted, it stays exhausted.

    Partitions are only created by `Partitioned`.

    Example:
    ```python
    >>> import partitioned as pt
    >>> groups = pt.partition_by(["a", "A", "b"], str.lower)
    >>> first = next(groups)
    >>> first.key()
    'a'
    >>> first.collect()
    Seq('a', 'A')
    >>> first.is_terminated()
    True
    >>> first.next()
    NONE

    ```
    """

    _upstream: Upstream[T]
    _key_fn: Callable[[T], K]
    _key: K
    _current: T
    _next: Option[T]
    _terminated: bool

    __slots__ = ("_current", "_key", "_key_fn", "_next", "_terminated", "_upstream")

    def __init__(
        self,
        upstream: Upstream[T],
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

    def __next__(self) -> T:
        if self._terminated:
            raise StopIteration

        match self._next:
            # A same-keyed lookahead means the upstream must yield `(next, next_next)`:
            # keep the pulled pair and emit the displaced current item.
            case Some(following) if self._key == self._key_fn(following):
                match self._upstream.advance():
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


class Partitioned[T, K](BaseIter[Partition[T, K]]):
    """A lazy iterator of `Partition`, one per run of consecutive elements sharing the same key.

    Nothing is buffered besides a one element lookahead: each `Partition` pulls its items from the same upstream
    as this iterator. Hence a partition must be fully consumed before advancing to the next one.

    This is checked lazily: advancing after abandoning a partition early raises `PartitionNotConsumedError`,
    since the leftover items of the run come back with the key of the previous partition.

    Note that keys are only compared to their direct neighbours with `==`.
    Runs with an equal key which are not adjacent are distinct partitions, as with `itertools.groupby`.

    Args:
        upstream (Upstream[T]): The shared cursor over the paired base sequence.
        key_fn (Callable[[T], K]): Pure function computing the key of an element.

    Example:
    ```python
    >>> import partitioned as pt
    >>> groups = pt.partition_by([1, 2, 2, 3, 3, 3, 4, 5, 5], lambda x: x)
    >>> groups.map(lambda p: p.collect()).collect()
    Seq(Seq(1,), Seq(2, 2), Seq(3, 3, 3), Seq(4,), Seq(5, 5))
    >>> pt.partition_by([], lambda x: x).next()
    NONE

    ```
    """

    _upstream: Upstream[T]
    _key_fn: Callable[[T], K]
    _key: Option[K]

    __slots__ = ("_key", "_key_fn", "_upstream")

    def __init__(self, upstream: Upstream[T], key_fn: Callable[[T], K]) -> None:
        self._upstream = upstream
        self._key_fn = key_fn
        self._key = NONE

    def __next__(self) -> Partition[T, K]:
        match self._upstream.advance():
            case Some((current, next_)):
                key = self._key_fn(current)
                if self._key.map(lambda previous: previous == key).unwrap_or(False):
                    raise PartitionNotConsumedError(key)
                self._key = Some(key)
                if get_config().log_items:
                    logger.debug("Partition with key %r opened on %r", key, current)
                else:
                    logger.debug("Partition with key %r opened", key)
                return Partition(self._upstream, self._key_fn, key, current, next_)
            case _:
                raise StopIteration

    def try_next(self) -> Result[Option[Partition[T, K]], PartitionNotConsumedError]:
        """Advance to the next partition, returning the contract violation as an `Err` instead of raising it.

        Returns:
            Result[Option[Partition[T, K]], PartitionNotConsumedError]: `Ok(Some(partition))`, `Ok(NONE)` once exhausted,
            or `Err(error)` if the previous partition was not fully consumed.

        Example:
        ```python
        >>> import partitioned as pt
        >>> groups = pt.partition_by([1, 1, 2], lambda x: x)
        >>> groups.try_next().is_ok()
        True
        >>> groups.try_next().unwrap_err().key
        1

        ```
        """
        try:
            return Ok(self.next())  # noqa: TRY300
        except PartitionNotConsumedError as err:
            return Err(err)


def partition_by[T, K](data: Iterable[T], key: Callable[[T], K]) -> Partitioned[T, K]:
    """Lazily split **data** into runs of consecutive elements sharing the same **key**.

    Args:
        data (Iterable[T]): The base sequence. It is never materialized.
        key (Callable[[T], K]): Pure, repeatable function computing the key of an element.

    Returns:
        Partitioned[T, K]: An iterator of `Partition`.

    Example:
    ```python
    >>> import partitioned as pt
    >>> for part in pt.partition_by("aabccc", lambda c: c):
    ...     print(part.key(), part.length())
    a 2
    b 1
    c 3

    ```
    """
    return Partitioned(Upstream(ZipWithNext(data)), key)
