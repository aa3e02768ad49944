"""Tests for slot usage in partitioned classes."""

import pytest

import partitioned as pt


def _check_slots(obj: object) -> bool:
    try:
        _x = obj.__dict__
        return False  # noqa: TRY300
    except AttributeError:
        return True


def test_slots() -> None:  # noqa: D103
    groups = pt.partition_by([1, 2], lambda x: x)
    assert _check_slots(pt.Iter(()))
    assert _check_slots(pt.Seq(()))
    assert _check_slots(pt.zip_with_next(()))
    assert _check_slots(groups)
    assert _check_slots(next(groups))
    assert _check_slots(pt.Upstream(pt.zip_with_next(())))
    assert _check_slots(pt.Some(42))
    assert _check_slots(pt.NoneOption())
    assert _check_slots(pt.Err[int, object](42))
    assert _check_slots(pt.Ok[int, object](42))


@pytest.mark.asyncio
async def test_slots_async() -> None:  # noqa: D103
    groups = pt.Stream([1]).partitioned(lambda x: x)
    assert _check_slots(pt.Stream(()))
    assert _check_slots(pt.Stream(()).zip_with_next())
    assert _check_slots(groups)
    assert _check_slots(await anext(groups))
    assert _check_slots(pt.AsyncUpstream(pt.Stream(()).zip_with_next()))
