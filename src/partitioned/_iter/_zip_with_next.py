from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from .._core import MISSING
from .._results import NONE, Option, Some
from ._main import BaseIter

logger = logging.getLogger(__name__)


class ZipWithNext[T](BaseIter[tuple[T, Option[T]]]):
    """Pair each element of **data** with the element following it.

    The last element is paired with `NONE`. At most one element is buffered: the one already pulled from
    **data** but not yet emitted as the first member of a pair.

    The iterator is finite if and only if **data** is, and can only be restarted by building a new one.

    Args:
        data (Iterable[T]): The base sequence.

    Example:
    ```python
    >>> import partitioned as pt
    >>> pt.zip_with_next(range(4)).collect()
    Seq((0, Some(value=1)), (1, Some(value=2)), (2, Some(value=3)), (3, NONE))
    >>> pt.zip_with_next([7]).collect()
    Seq((7, NONE),)
    >>> pt.zip_with_next([]).collect()
    Seq()

    ```
    """

    _upstream: Iterator[T]
    _current: Option[T]

    __slots__ = ("_current", "_upstream")

    def __init__(self, data: Iterable[T]) -> None:
        self._upstream = iter(data)
        self._current = NONE

    def __next__(self) -> tuple[T, Option[T]]:
        item = next(self._upstream, MISSING)
        if item is MISSING:
            match self._current:
                case Some(last):
                    self._current = NONE
                    logger.debug("Base sequence exhausted, draining the lookahead slot")
                    return (last, NONE)
                case _:
                    raise StopIteration

        match self._current:
            case Some(current):
                self._current = Some(item)
                return (current, Some(item))
            case _:
                # first pairing: pull once more to seed the slot
                following = next(self._upstream, MISSING)
                if following is MISSING:
                    return (item, NONE)
                self._current = Some(following)
                logger.debug("Lookahead slot seeded")
                return (item, Some(following))


def zip_with_next[T](data: Iterable[T]) -> ZipWithNext[T]:
    """Pair each element of **data** with the following one, if any.

    Args:
        data (Iterable[T]): The base sequence.

    Returns:
        ZipWithNext[T]: An iterator of `(item, Option[next_item])` pairs.
    """
    return ZipWithNext(data)
