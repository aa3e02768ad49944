from __future__ import annotations

import itertools
from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import TYPE_CHECKING, Any, Concatenate, overload

import cytoolz as cz
import more_itertools as mit

from .._core import Pipeable, convert_data, get_config
from .._results import NONE, Option, Some

if TYPE_CHECKING:
    from ._partitioned import Partitioned
    from ._zip_with_next import ZipWithNext


class BaseIter[T](Pipeable, Iterator[T]):
    """Chainable methods shared by every lazy sequence of this package.

    Subclasses only implement `__next__`; `__iter__` returns `self`, as for any `Iterator`.
    """

    __slots__ = ()

    def next(self) -> Option[T]:
        """Return the next element in the iterator.

        Note:
            `__next__` is what is actually called when iterating over the instance.

            `next()` wraps the result in an `Option` to handle exhaustion without catching `StopIteration`.

        Returns:
            Option[T]: The next element in the iterator. `Some[T]`, or `NONE` if the iterator is exhausted.

        Example:
        ```python
        >>> import partitioned as pt
        >>> it = pt.Iter([None, 2])
        >>> it.next()
        Some(value=None)
        >>> it.next().unwrap()
        2
        >>> it.next()
        NONE

        ```
        """
        try:
            return Some(self.__next__())  # noqa: TRY300
        except StopIteration:
            return NONE

    def collect(self) -> Seq[T]:
        """Consume the iterator and collect its elements into a `Seq`.

        Returns:
            Seq[T]: A new `Seq` holding all remaining elements.

        Example:
        ```python
        >>> import partitioned as pt
        >>> pt.Iter(range(3)).collect()
        Seq(0, 1, 2)

        ```
        """
        return Seq(tuple(self))

    def map[R](self, func: Callable[[T], R]) -> Iter[R]:
        """Apply a function lazily to each element.

        Since the mapping is lazy, a partition passed to **func** is fully handled before the next one is produced.

        Args:
            func (Callable[[T], R]): Function to apply to each element.

        Returns:
            Iter[R]: An iterator of transformed elements.

        Example:
        ```python
        >>> import partitioned as pt
        >>> pt.Iter([1, 2]).map(lambda x: x * 10).collect()
        Seq(10, 20)

        ```
        """
        return Iter(map(func, self))

    def flatten[U](self: BaseIter[Iterable[U]]) -> Iter[U]:
        """Flatten one level of nesting.

        Returns:
            Iter[U]: An iterator over the elements of each sub-iterable, in order.

        Example:
        ```python
        >>> import partitioned as pt
        >>> pt.Iter([1, 1, 2, 1]).partitioned(lambda x: x).flatten().collect()
        Seq(1, 1, 2, 1)

        ```
        """
        return Iter(itertools.chain.from_iterable(self))

    def for_each[**P](
        self,
        func: Callable[Concatenate[T, P], Any],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> None:
        """Consume the iterator, applying **func** to each element for its side effects.

        Args:
            func (Callable[Concatenate[T, P], Any]): Function to call on each element.
            *args (P.args): Positional arguments to pass to **func**.
            **kwargs (P.kwargs): Keyword arguments to pass to **func**.

        Example:
        ```python
        >>> import partitioned as pt
        >>> pt.Iter("abb").partitioned(str.lower).for_each(lambda p: print(p.collect()))
        Seq('a',)
        Seq('b', 'b')

        ```
        """
        for item in self:
            func(item, *args, **kwargs)

    def length(self) -> int:
        """Consume the iterator and count its elements.

        Example:
        ```python
        >>> import partitioned as pt
        >>> pt.Iter([3, 3, 4]).partitioned(lambda x: x).map(lambda p: p.length()).collect()
        Seq(2, 1)

        ```
        """
        return cz.itertoolz.count(self)

    def last(self) -> T:
        """Consume the iterator and return its last element.

        Raises:
            IndexError: If the iterator is empty.

        Example:
        ```python
        >>> import partitioned as pt
        >>> pt.Iter([7, 8, 9]).last()
        9

        ```
        """
        return cz.itertoolz.last(self)

    def all_equal[U](self, key: Callable[[T], U] | None = None) -> bool:
        """Return True if all elements are equal, optionally after applying **key**.

        Args:
            key (Callable[[T], U] | None): Function to transform items before comparison. Defaults to None.

        Example:
        ```python
        >>> import partitioned as pt
        >>> pt.Iter("AaaA").all_equal(key=str.casefold)
        True
        >>> pt.Iter([]).all_equal()
        True

        ```
        """
        return mit.all_equal(self, key=key)

    def zip_with_next(self) -> ZipWithNext[T]:
        """Pair each element with the following one, if any.

        See `ZipWithNext` for details.

        Returns:
            ZipWithNext[T]: An iterator of `(item, Option[next_item])` pairs.

        Example:
        ```python
        >>> import partitioned as pt
        >>> pt.Iter([1, 2]).zip_with_next().collect()
        Seq((1, Some(value=2)), (2, NONE))

        ```
        """
        from ._zip_with_next import ZipWithNext

        return ZipWithNext(self)

    def partitioned[K](self, key: Callable[[T], K]) -> Partitioned[T, K]:
        """Lazily split the iterator into runs of consecutive elements sharing the same **key**.

        See `Partitioned` for the consumption rules.

        Args:
            key (Callable[[T], K]): Pure function computing the key of an element. Keys are only compared with `==`.

        Returns:
            Partitioned[T, K]: An iterator of `Partition`, each one an iterator over a single key-run.

        Example:
        ```python
        >>> import partitioned as pt
        >>> pt.Iter([1, 2, 2, 3, 3, 3]).partitioned(lambda x: x).map(lambda p: p.collect()).collect()
        Seq(Seq(1,), Seq(2, 2), Seq(3, 3, 3))

        ```
        """
        from ._partitioned import partition_by

        return partition_by(self, key)


class Iter[T](BaseIter[T]):
    """A wrapper around any `Iterable`, giving access to the chainable methods of `BaseIter`.

    Like any `Iterator`, an `Iter` is single-use: once exhausted, it cannot be reused or reset.

    Args:
        data (Iterable[T]): Any object that can be iterated over.
    """

    _inner: Iterator[T]

    __slots__ = ("_inner",)

    def __init__(self, data: Iterable[T]) -> None:
        self._inner = iter(data)

    def __next__(self) -> T:
        return next(self._inner)

    @overload
    @staticmethod
    def from_[U](data: Iterable[U]) -> Iter[U]: ...
    @overload
    @staticmethod
    def from_[U](data: U, *more_data: U) -> Iter[U]: ...
    @staticmethod
    def from_[U](data: Iterable[U] | U, *more_data: U) -> Iter[U]:
        """Create an iterator from any Iterable, or from unpacked values.

        Args:
            data (Iterable[U] | U): Iterable to convert into an iterator, or a single value.
            *more_data (U): Additional values to include if **data** is not an Iterable.

        Example:
        ```python
        >>> import partitioned as pt
        >>> pt.Iter.from_(1, 1, 2).partitioned(lambda x: x).map(lambda p: p.collect()).collect()
        Seq(Seq(1, 1), Seq(2,))

        ```
        """
        return Iter(convert_data(data, *more_data))


class Seq[T](Pipeable, Sequence[T]):
    """An immutable, in memory sequence, returned by `collect()`.

    The underlying data structure is a tuple.

    Args:
        data (tuple[T, ...]): The data to wrap.
    """

    _inner: tuple[T, ...]

    __slots__ = ("_inner",)

    def __init__(self, data: tuple[T, ...]) -> None:
        self._inner = data

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({get_config().iter_repr(self._inner)})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Seq):
            return self._inner == other._inner
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    @overload
    def __getitem__(self, index: int) -> T: ...
    @overload
    def __getitem__(self, index: slice) -> Sequence[T]: ...
    def __getitem__(self, index: int | slice) -> T | Sequence[T]:
        return self._inner.__getitem__(index)

    def __len__(self) -> int:
        return len(self._inner)

    def __iter__(self) -> Iterator[T]:
        return iter(self._inner)

    @overload
    @staticmethod
    def from_[U](data: Iterable[U]) -> Seq[U]: ...
    @overload
    @staticmethod
    def from_[U](data: U, *more_data: U) -> Seq[U]: ...
    @staticmethod
    def from_[U](data: Iterable[U] | U, *more_data: U) -> Seq[U]:
        """Create a `Seq` from an `Iterable` or unpacked values.

        If you already have a tuple, simply pass it to the constructor, without runtime checks.

        Example:
        ```python
        >>> import partitioned as pt
        >>> pt.Seq.from_(1, 2, 3)
        Seq(1, 2, 3)

        ```
        """
        converted = convert_data(data, *more_data)
        return Seq(converted if isinstance(converted, tuple) else tuple(converted))

    def inner(self) -> tuple[T, ...]:
        """Get the underlying tuple."""
        return self._inner

    def iter(self) -> Iter[T]:
        """Get an `Iter` over the sequence.

        Example:
        ```python
        >>> import partitioned as pt
        >>> pt.Seq((1, 1, 2)).iter().partitioned(lambda x: x % 2).map(lambda p: p.collect()).collect()
        Seq(Seq(1, 1), Seq(2,))

        ```
        """
        return Iter(self._inner)

    def length(self) -> int:
        return len(self._inner)
