################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Immutable sequence of elements ordered by the time they occur.

Responsibility:
    Store caller-supplied elements keyed by an integer time and answer
    "which element was the latest at or before time t" queries. Cursors that
    scroll through the elements are created with Timeline.feed_from().

Inputs/outputs:
    - Inputs: a non-empty iterable of elements plus a function mapping each
      element to an integer time.
    - Outputs: point lookups and Feed cursors.

Determinism:
    - Times are signed 64-bit integers. Units are defined by the caller.
    - Element times must be unique. Input order does not affect the result.
    - The timeline is never mutated after construction, so any number of
      feeds may read it concurrently.
"""

from __future__ import annotations

import logging
import operator
from typing import Callable
from typing import Generic
from typing import Iterable
from typing import Iterator
from typing import TypeVar

import numpy as np
from numpy.typing import NDArray

from oasis_playback.timing.feed import Feed
from oasis_playback.timing.time_scale import TimeScale
from oasis_playback.timing.time_scale import TimeScaleError
from oasis_playback.timing.timeline_errors import InvalidInputError


T = TypeVar("T")

_LOG: logging.Logger = logging.getLogger(__name__)

# Representable range of element times
_TIME_MIN: int = int(np.iinfo(np.int64).min)
_TIME_MAX: int = int(np.iinfo(np.int64).max)


class Timeline(Generic[T]):
    """Elements sorted by time, with fast lookup of the element preceding a time.

    The sorted time index allows the element at or before any time to be
    found with a binary search, while the time map resolves exact hits
    directly and turns an index back into its element.
    """

    def __init__(
        self, elements: Iterable[T] | None, time_of: Callable[[T], int]
    ) -> None:
        """Build the timeline, sorting only if the input is out of order.

        Raises:
            InvalidInputError: elements is None or empty, an element time is
                not an integer, or two elements share a time
        """
        if elements is None:
            raise InvalidInputError("Empty or null element sequence")
        items: list[T] = list(elements)
        if not items:
            raise InvalidInputError("Empty or null element sequence")

        by_time: dict[int, T] = {}
        times: list[int] = []
        needs_sort: bool = False
        t_prev: int | None = None
        for element in items:
            t: int = _to_time(time_of(element))
            if t_prev is not None and t < t_prev:
                needs_sort = True
            if t in by_time:
                raise InvalidInputError(f"Duplicate element time: {t}")
            by_time[t] = element
            times.append(t)
            t_prev = t

        sorted_times: NDArray[np.int64] = np.array(times, dtype=np.int64)
        if needs_sort:
            _LOG.debug("Element times out of order, sorting %d times", len(times))
            sorted_times.sort()
        sorted_times.flags.writeable = False

        self._times: NDArray[np.int64] = sorted_times
        self._by_time: dict[int, T] = by_time

    @classmethod
    def from_seconds(
        cls,
        elements: Iterable[T] | None,
        seconds_of: Callable[[T], float],
        *,
        time_scale: TimeScale | None = None,
    ) -> Timeline[T]:
        """Build a timeline from elements timestamped in float seconds.

        Seconds are converted to integer units with the given time scale
        (milliseconds by default).
        """
        scale: TimeScale = time_scale or TimeScale()
        try:
            return cls(elements, scale.time_of(seconds_of))
        except TimeScaleError as exc:
            raise InvalidInputError(str(exc)) from exc

    def __len__(self) -> int:
        """Return the number of elements on the timeline."""
        return self.count()

    def __iter__(self) -> Iterator[T]:
        """Iterate over the elements in chronological order."""
        for t in self._times.tolist():
            yield self._by_time[t]

    def count(self) -> int:
        """Return the number of elements on the timeline."""
        return int(self._times.shape[0])

    def begin(self) -> int:
        """Return the time of the first element."""
        # Construction guarantees at least one element
        return int(self._times[0])

    def end(self) -> int:
        """Return the time of the last element."""
        return int(self._times[-1])

    def duration(self) -> int:
        """Return the time spanned by the elements."""
        return self.end() - self.begin()

    def times(self) -> tuple[int, ...]:
        """Return every element time in ascending order."""
        return tuple(self._times.tolist())

    def time_at(self, index: int) -> int:
        """Return the time of the element at a sorted index."""
        return int(self._times[index])

    def element_at(self, index: int) -> T:
        """Return the element at a sorted index."""
        return self._by_time[self.time_at(index)]

    def contains_time(self, t: int) -> bool:
        """Return True if an element occurs exactly at the given time."""
        return t in self._by_time

    def find(self, t: int) -> T | None:
        """Return the last element at or before the given time.

        Returns None if the time is before every element.
        """
        if t in self._by_time:
            return self._by_time[t]

        index: int = self.index_at_or_before(t)
        if index < 0:
            return None
        return self.element_at(index)

    def feed_from(self, t_start: int) -> Feed[T]:
        """Create a feed positioned at the given time.

        An element occurring exactly at t_start has not been passed yet.
        """
        return Feed(self, t_start)

    def index_at_or_before(self, t: int) -> int:
        """Return the index of the last element time at or before t, or -1."""
        if t < _TIME_MIN:
            return -1
        if t > _TIME_MAX:
            return self.count() - 1
        return int(np.searchsorted(self._times, t, side="right")) - 1


def _to_time(value: object) -> int:
    """Validate an element time produced by the caller's time function."""
    try:
        t: int = operator.index(value)  # type: ignore[arg-type]
    except TypeError as exc:
        raise InvalidInputError(
            f"Element time must be an integer, got {type(value).__name__}"
        ) from exc
    if t < _TIME_MIN or t > _TIME_MAX:
        raise InvalidInputError(f"Element time out of range: {t}")
    return t
