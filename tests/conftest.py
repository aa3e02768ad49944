from collections.abc import Iterator

import pytest

import partitioned as pt


@pytest.fixture(autouse=True)
def default_config() -> Iterator[pt.Config]:
    """Restore the default configuration after each test."""
    yield pt.get_config()
    pt.set_config(repr_max_items=20, log_items=False)
