from __future__ import annotations

from .._results import Option
from ._zip_with_next import ZipWithNext


class Upstream[T]:
    """The single cursor over a `ZipWithNext` shared by a `Partitioned` and the partitions it produces.

    Every holder keeps a reference to the same instance, so the pairs are pulled exactly once,
    whoever pulls them. Only one holder is expected to advance it at a time: the live partition
    while it has items left, the group sequence otherwise. This is not enforced here.
    """

    _pairs: ZipWithNext[T]

    __slots__ = ("_pairs",)

    def __init__(self, pairs: ZipWithNext[T]) -> None:
        self._pairs = pairs

    def advance(self) -> Option[tuple[T, Option[T]]]:
        return self._pairs.next()
