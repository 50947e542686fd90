################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for timeline construction and point lookup."""

from __future__ import annotations

import logging

import pytest

from oasis_playback.timing.time_scale import TimeScale
from oasis_playback.timing.timeline import Timeline
from oasis_playback.timing.timeline_errors import InvalidInputError
from oasis_playback.timing.timeline_errors import TimelineError


def _identity(value: int) -> int:
    """Use an integer element as its own time."""
    return value


def test_init_sorted() -> None:
    """Ensure ordered input produces the expected bounds."""
    values: list[int] = [0, 1, 2, 3, 4, 5]
    line: Timeline[int] = Timeline(values, _identity)
    assert line.count() == len(values)
    assert len(line) == len(values)
    assert line.begin() == 0
    assert line.end() == 5
    assert line.duration() == 5


def test_init_unsorted() -> None:
    """Ensure unordered input is sorted after construction."""
    values: list[int] = [5, 2, 3, 1, 4]
    line: Timeline[int] = Timeline(values, _identity)
    assert line.count() == len(values)
    assert line.begin() == 1
    assert line.end() == 5
    assert line.duration() == 4
    assert line.times() == (1, 2, 3, 4, 5)
    assert list(line) == [1, 2, 3, 4, 5]


def test_init_unsorted_logs_sort(caplog: pytest.LogCaptureFixture) -> None:
    """Ensure the extra sort pass is reported at debug level."""
    with caplog.at_level(logging.DEBUG, logger="oasis_playback.timing.timeline"):
        Timeline([3, 1, 2], _identity)
    assert "sorting 3 times" in caplog.text

    caplog.clear()
    with caplog.at_level(logging.DEBUG, logger="oasis_playback.timing.timeline"):
        Timeline([1, 2, 3], _identity)
    assert "sorting" not in caplog.text


def test_init_from_float_seconds() -> None:
    """Ensure float timestamps can be scaled into integer times."""
    values: list[float] = [0.124, 1.1321, 123.123, 4124.124]
    line: Timeline[float] = Timeline(values, lambda d: int(round(d * 1000)))
    assert line.count() == len(values)
    assert line.begin() == 124
    assert line.end() == 4124124
    assert line.duration() == 4124000


def test_from_seconds_uses_time_scale() -> None:
    """Ensure from_seconds converts with the given resolution."""
    values: list[float] = [0.5, 0.25, 1.0]
    line: Timeline[float] = Timeline.from_seconds(values, lambda d: d)
    assert line.times() == (250, 500, 1000)
    assert line.find(600) == 0.5

    micro: Timeline[float] = Timeline.from_seconds(
        values, lambda d: d, time_scale=TimeScale(units_per_second=1000000)
    )
    assert micro.begin() == 250000
    assert micro.end() == 1000000


def test_from_seconds_rejects_non_finite() -> None:
    """Ensure conversion failures surface as invalid input."""
    with pytest.raises(InvalidInputError):
        Timeline.from_seconds([0.0, float("nan")], lambda d: d)


def test_init_rejects_none() -> None:
    """Ensure a missing element sequence is rejected."""
    with pytest.raises(InvalidInputError):
        Timeline(None, _identity)


def test_init_rejects_empty() -> None:
    """Ensure an empty element sequence is rejected."""
    with pytest.raises(InvalidInputError):
        Timeline([], _identity)
    with pytest.raises(InvalidInputError):
        Timeline(iter(()), _identity)


def test_init_rejects_duplicates() -> None:
    """Ensure two elements at the same time are rejected."""
    with pytest.raises(InvalidInputError, match="Duplicate element time: 3"):
        Timeline([0, 1, 2, 3, 3, 4, 5], _identity)


def test_init_rejects_duplicate_derived_times() -> None:
    """Ensure duplicates are detected on derived times, not elements."""
    with pytest.raises(InvalidInputError):
        Timeline(["a", "bb", "c"], len)


def test_init_rejects_non_integer_times() -> None:
    """Ensure time functions must produce integers."""
    with pytest.raises(InvalidInputError):
        Timeline([0.5, 1.5], lambda d: d)


def test_init_rejects_out_of_range_times() -> None:
    """Ensure times must fit in a signed 64-bit integer."""
    with pytest.raises(InvalidInputError):
        Timeline([0, 2**63], _identity)


def test_errors_share_base_class() -> None:
    """Ensure callers can catch every failure with one class."""
    with pytest.raises(TimelineError):
        Timeline([], _identity)


def test_times_strictly_increasing() -> None:
    """Ensure the time index is strictly increasing for any input order."""
    values: list[int] = [17, -4, 9, 0, 250, 3, -90, 12]
    line: Timeline[int] = Timeline(values, _identity)
    times: tuple[int, ...] = line.times()
    for index in range(len(times) - 1):
        assert times[index] < times[index + 1]
    assert sorted(values) == list(times)


def test_construction_order_independent() -> None:
    """Ensure permuted input produces the same timeline."""
    values: list[int] = [0, 3, 7, 8, 15, 21]
    reordered: list[int] = [15, 0, 21, 8, 3, 7]
    line_a: Timeline[int] = Timeline(values, lambda v: v * 10)
    line_b: Timeline[int] = Timeline(reordered, lambda v: v * 10)
    assert line_a.count() == line_b.count()
    assert line_a.begin() == line_b.begin()
    assert line_a.end() == line_b.end()
    assert line_a.duration() == line_b.duration()
    assert line_a.times() == line_b.times()
    for t in range(-20, 240):
        assert line_a.find(t) == line_b.find(t)


def test_find() -> None:
    """Ensure find returns the last element at or before each time."""
    values: list[int] = [index * 1000 for index in range(10)]
    line: Timeline[int] = Timeline(values, _identity)
    for index, value in enumerate(values):
        expected_before: int | None = values[index - 1] if index > 0 else None
        assert line.find(index * 1000 - 1) == expected_before
        assert line.find(index * 1000) == value
        assert line.find(index * 1000 + 1) == value


def test_find_before_and_after_bounds() -> None:
    """Ensure find is total over the whole integer range."""
    line: Timeline[str] = Timeline(["a", "bbb"], len)
    assert line.find(0) is None
    assert line.find(-(2**70)) is None
    assert line.find(2) == "a"
    assert line.find(2**70) == "bbb"


def test_find_with_none_element() -> None:
    """Ensure a None element at an exact time is returned as stored."""
    times: dict[object, int] = {None: 5, "x": 10}
    line: Timeline[object] = Timeline([None, "x"], lambda e: times[e])
    assert line.find(5) is None
    assert line.find(7) is None
    assert line.find(10) == "x"
    assert line.contains_time(5)
    assert not line.contains_time(7)


def test_index_at_or_before() -> None:
    """Ensure the binary search returns the preceding index."""
    line: Timeline[int] = Timeline([10, 20, 30], _identity)
    assert line.index_at_or_before(9) == -1
    assert line.index_at_or_before(10) == 0
    assert line.index_at_or_before(19) == 0
    assert line.index_at_or_before(20) == 1
    assert line.index_at_or_before(1000) == 2


def test_element_and_time_at() -> None:
    """Ensure sorted indices map to elements and times."""
    line: Timeline[str] = Timeline(["ccc", "a", "bb"], len)
    assert [line.time_at(index) for index in range(3)] == [1, 2, 3]
    assert [line.element_at(index) for index in range(3)] == ["a", "bb", "ccc"]
    assert isinstance(line.time_at(0), int)


def test_accepts_generators() -> None:
    """Ensure any iterable of elements is accepted."""
    line: Timeline[int] = Timeline((value for value in range(4)), _identity)
    assert line.count() == 4
