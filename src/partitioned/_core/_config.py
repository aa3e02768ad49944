from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, replace
from typing import Any


@dataclass(slots=True, frozen=True)
class Config:
    """Process-wide settings for `partitioned`.

    Args:
        repr_max_items (int): Maximum number of items rendered by `Seq.__repr__` before truncating with `...`.
        log_items (bool): Include item reprs in `DEBUG` log records, not only partition keys.
    """

    repr_max_items: int = 20
    log_items: bool = False

    def iter_repr(self, data: Sequence[Any]) -> str:
        body = ", ".join(repr(x) for x in data[: self.repr_max_items])
        if len(data) > self.repr_max_items:
            return f"{body}, ..."
        if len(data) == 1:
            return f"{body},"
        return body


_CONFIG = Config()


def get_config() -> Config:
    """Get the current `Config`.

    Example:
    ```python
    >>> import partitioned as pt
    >>> pt.get_config().repr_max_items
    20

    ```
    """
    return _CONFIG


def set_config(**changes: Any) -> Config:
    """Replace fields of the current `Config`, and return the new one.

    Args:
        **changes (Any): Field names and their new values.

    Returns:
        Config: The updated configuration.

    Raises:
        TypeError: If a field name does not exist on `Config`.

    Example:
    ```python
    >>> import partitioned as pt
    >>> _ = pt.set_config(repr_max_items=3)
    >>> pt.Seq(tuple(range(10)))
    Seq(0, 1, 2, ...)
    >>> _ = pt.set_config(repr_max_items=20)

    ```
    """
    global _CONFIG  # noqa: PLW0603
    _CONFIG = replace(_CONFIG, **changes)
    return _CONFIG
