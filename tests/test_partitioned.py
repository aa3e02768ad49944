"""Tests for the synchronous partitioning engine."""

import itertools
import logging
from collections.abc import Callable, Iterator
from typing import Any

import pytest

import partitioned as pt


def _identity(x: int) -> int:
    return x


def _runs[T](data: list[T], key: Callable[[Any], object] = _identity) -> list[list[T]]:
    return [list(part) for part in pt.partition_by(data, key)]


class TestScenarios:
    """Reference inputs and their expected partitions."""

    def test_runs_of_integers(self) -> None:
        """Test consecutive equal integers grouped in order."""
        assert _runs([1, 2, 2, 3, 3, 3, 4, 5, 5]) == [
            [1],
            [2, 2],
            [3, 3, 3],
            [4],
            [5, 5],
        ]

    def test_empty_input(self) -> None:
        """Test that an empty input yields no partition at all."""
        groups = pt.partition_by([], _identity)
        assert groups.next().is_none()
        assert groups.next().is_none()

    def test_single_item(self) -> None:
        """Test that a single item yields a single partition."""
        groups = pt.partition_by([7], _identity)
        only = groups.next().unwrap()
        assert list(only) == [7]
        assert groups.next().is_none()

    def test_not_consumed_partition(self) -> None:
        """Test that advancing over an undrained partition is reported."""
        groups = pt.partition_by([1, 1, 2], _identity)
        ones = groups.next()
        assert ones.is_some()
        with pytest.raises(pt.PartitionNotConsumedError, match="Partition with key `1` not consumed") as exc:
            groups.next()
        assert exc.value.key == 1

    def test_all_equal_keys(self) -> None:
        """Test a single long run."""
        assert _runs([4] * 6) == [[4] * 6]

    def test_all_distinct_keys(self) -> None:
        """Test one partition per item."""
        assert _runs([1, 2, 3]) == [[1], [2], [3]]

    def test_non_adjacent_runs_are_distinct(self) -> None:
        """Test that keys are compared with their neighbour only."""
        assert _runs([1, 1, 2, 1]) == [[1, 1], [2], [1]]


class TestProperties:
    """Properties holding for any input."""

    INPUTS = (
        [],
        [0],
        [3, 3, 3],
        [1, 2, 2, 3, 3, 3, 4, 5, 5],
        [5, 4, 5, 4, 4, 5],
        list(range(20)),
        [x // 3 for x in range(20)],
    )

    @pytest.mark.parametrize("data", INPUTS)
    def test_flattened_partitions_reproduce_input(self, data: list[int]) -> None:
        """Test no loss, duplication or reordering."""
        assert pt.Iter(data).partitioned(_identity).flatten().collect().inner() == tuple(data)

    @pytest.mark.parametrize("data", INPUTS)
    def test_partitions_follow_key_runs(self, data: list[int]) -> None:
        """Test partitions against `itertools.groupby` on the same keys."""
        expected = [list(group) for _, group in itertools.groupby(data, key=lambda x: x % 2)]
        runs = _runs(data, key=lambda x: x % 2)
        assert runs == expected
        for run in runs:
            assert pt.Iter(run).all_equal(key=lambda x: x % 2)
        for previous, following in itertools.pairwise(runs):
            assert previous[0] % 2 != following[0] % 2

    def test_terminated_partition_stays_exhausted(self) -> None:
        """Test idempotent termination."""
        part = pt.partition_by([2, 2, 3], _identity).next().unwrap()
        assert not part.is_terminated()
        assert part.collect() == pt.Seq((2, 2))
        assert part.is_terminated()
        for _ in range(3):
            assert part.next().is_none()
            with pytest.raises(StopIteration):
                next(part)


class TestLaziness:
    def test_infinite_input(self) -> None:
        """Test that partitions are produced without materializing the input."""
        groups = pt.partition_by(itertools.count(), lambda x: x // 4)
        first_three = [list(next(groups)) for _ in range(3)]
        assert first_three == [[0, 1, 2, 3], [4, 5, 6, 7], [8, 9, 10, 11]]

    def test_only_one_item_ahead_is_pulled(self) -> None:
        """Test that opening a partition pulls at most two items."""
        pulled: list[int] = []

        def source() -> Iterator[int]:
            for x in (1, 1, 1, 2):
                pulled.append(x)
                yield x

        groups = pt.partition_by(source(), _identity)
        ones = next(groups)
        assert pulled == [1, 1]
        assert next(ones) == 1
        assert pulled == [1, 1, 1]


class TestContract:
    def test_partially_consumed_partition_is_reported(self) -> None:
        """Test detection after a partition was consumed halfway."""
        groups = pt.partition_by([1, 1, 1, 2], _identity)
        ones = next(groups)
        assert next(ones) == 1
        with pytest.raises(pt.PartitionNotConsumedError):
            next(groups)

    def test_undrained_last_item_is_not_reported(self) -> None:
        """Test that the check is lazy: a run whose leftover has another key goes unnoticed."""
        groups = pt.partition_by([1, 2], _identity)
        next(groups)
        twos = next(groups)
        assert list(twos) == [2]

    def test_try_next_returns_err_instead_of_raising(self) -> None:
        """Test the Result flavoured advance."""
        groups = pt.partition_by([1, 1, 2], _identity)
        first = groups.try_next()
        assert first.is_ok()
        assert first.unwrap().unwrap().key() == 1
        violation = groups.try_next()
        assert violation.is_err()
        assert isinstance(violation.unwrap_err(), pt.PartitionNotConsumedError)

    def test_try_next_on_exhausted_groups(self) -> None:
        """Test that exhaustion is `Ok(NONE)`."""
        assert pt.partition_by([], _identity).try_next() == pt.Ok(pt.NONE)

    def test_upstream_divergence_is_fatal(self) -> None:
        """Test the fatal error raised when the upstream runs dry unexpectedly."""
        upstream = pt.Upstream(pt.ZipWithNext([]))
        part = pt.Partition(upstream, _identity, 1, 1, pt.Some(1))
        with pytest.raises(pt.UpstreamDivergedError):
            next(part)

    def test_errors_share_a_base_class(self) -> None:
        assert issubclass(pt.PartitionNotConsumedError, pt.PartitionedError)
        assert issubclass(pt.UpstreamDivergedError, pt.PartitionedError)
        assert issubclass(pt.PartitionedError, RuntimeError)

    def test_key_errors_propagate(self) -> None:
        """Test that exceptions raised by the key function are not swallowed."""
        groups = pt.partition_by([{"k": 1}, {}], lambda d: d["k"])
        first = next(groups)
        with pytest.raises(KeyError):
            next(first)


class TestKeys:
    def test_unhashable_keys(self) -> None:
        """Test that keys only need equality."""
        data = [{"a": 1}, {"a": 1}, {"a": 2}]
        assert _runs(data, key=lambda d: [d["a"]]) == [[{"a": 1}, {"a": 1}], [{"a": 2}]]

    def test_none_items(self) -> None:
        """Test that `None` is a regular item."""
        assert _runs([None, None, 0], key=lambda x: x is None) == [[None, None], [0]]

    def test_items_are_not_copied(self) -> None:
        """Test that the same objects come out."""
        first, second = [1], [1]
        part = next(pt.partition_by([first, second], len))
        emitted = list(part)
        assert emitted[0] is first
        assert emitted[1] is second

    def test_partition_exposes_its_key(self) -> None:
        keys = pt.Iter("aAbB").partitioned(str.lower).map(lambda p: (p.key(), p.length())).collect()
        assert keys == pt.Seq((("a", 2), ("b", 2)))


def test_debug_logs_partition_boundaries(caplog: pytest.LogCaptureFixture) -> None:
    """Test the DEBUG records emitted while partitioning."""
    with caplog.at_level(logging.DEBUG, logger="partitioned"):
        pt.partition_by([1, 1, 2], _identity).map(lambda p: p.collect()).collect()
    messages = [r.getMessage() for r in caplog.records if r.name == "partitioned._iter._partitioned"]
    assert messages == [
        "Partition with key 1 opened",
        "Partition with key 1 terminated",
        "Partition with key 2 opened",
        "Partition with key 2 terminated",
    ]


def test_debug_logs_include_items_when_configured(caplog: pytest.LogCaptureFixture) -> None:
    pt.set_config(log_items=True)
    with caplog.at_level(logging.DEBUG, logger="partitioned"):
        next(pt.partition_by(["x"], len))
    assert "Partition with key 1 opened on 'x'" in caplog.messages
