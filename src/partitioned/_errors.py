"""Exceptions raised by the partitioning engine.

Both are programming-error class failures: they are never caused by the input data itself, and retrying is pointless.
"""

from __future__ import annotations

from typing import Any


class PartitionedError(RuntimeError):
    """Base class for errors raised by `Partitioned` and `Partition`, sync or async."""


class PartitionNotConsumedError(PartitionedError):
    """The group sequence was advanced while the previous partition still had items left.

    Detection is lazy: it only happens on the group advance following the early abandon,
    when the leftover items of the previous run come back with the same key.

    Args:
        key (Any): The key of the partition that was not fully consumed.

    Example:
    ```python
    >>> import partitioned as pt
    >>> groups = pt.partition_by([1, 1, 2], lambda x: x)
    >>> ones = next(groups)
    >>> next(groups)
    Traceback (most recent call last):
        ...
    partitioned._errors.PartitionNotConsumedError: Partition with key `1` not consumed

    ```
    """

    key: Any

    def __init__(self, key: Any) -> None:
        super().__init__(f"Partition with key `{key!r}` not consumed")
        self.key = key


class UpstreamDivergedError(PartitionedError):
    """The shared upstream reported exhaustion although a same-keyed item had already been looked ahead.

    This indicates a bug inside the library, or an upstream that was advanced behind its back.

    Args:
        key (Any): The key of the partition that observed the divergence.
    """

    key: Any

    def __init__(self, key: Any) -> None:
        super().__init__(
            f"Upstream exhausted while partition with key `{key!r}` expected a next item"
        )
        self.key = key
