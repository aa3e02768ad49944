from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Concatenate, Final, Self

import cytoolz as cz

MISSING: Final = object()
"""Sentinel marking an exhausted upstream, since `None` is a valid item."""


def convert_data[T](data: Iterable[T] | T, *more_data: T) -> Iterable[T]:
    return data if cz.itertoolz.isiterable(data) else (data, *more_data)


class Pipeable:
    """Mixin class providing pipeable methods for fluent chaining."""

    __slots__ = ()

    def into[**P, R](
        self,
        func: Callable[Concatenate[Self, P], R],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> R:
        """Convert `Self` to `R`.

        This method allows to pipe the instance into an object or function that can convert `Self` into another type.

        Conceptually, this allow to do `x.into(f)` instead of `f(x)`, hence keeping a fluent chaining style.

        Args:
            func (Callable[Concatenate[Self, P], R]): Function for conversion.
            *args (P.args): Positional arguments to pass to **func**.
            **kwargs (P.kwargs): Keyword arguments to pass to **func**.

        Returns:
            R: The converted value.

        Example:
        ```python
        >>> import partitioned as pt
        >>> pt.Seq((1, 2, 3)).into(sum)
        6
        >>> pt.Iter("aAbccc").partitioned(str.upper).into(lambda p: p.map(lambda x: x.length()).collect())
        Seq(2, 1, 3)

        ```
        """
        return func(self, *args, **kwargs)

    def inspect[**P](
        self,
        func: Callable[Concatenate[Self, P], object],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Self:
        """Pass `Self` to **func** to perform side effects without altering the data.

        Args:
            func (Callable[Concatenate[Self, P], object]): Function to apply to the instance for side effects.
            *args (P.args): Positional arguments to pass to **func**.
            **kwargs (P.kwargs): Keyword arguments to pass to **func**.

        Returns:
            Self: The instance itself, unchanged.

        Example:
        ```python
        >>> import partitioned as pt
        >>> pt.Seq((1, 2, 2)).inspect(print).length()
        Seq(1, 2, 2)
        3

        ```
        """
        func(self, *args, **kwargs)
        return self
