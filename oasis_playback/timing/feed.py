################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Cursor that scrolls through a timeline in chronological order."""

from __future__ import annotations

from typing import TYPE_CHECKING
from typing import Callable
from typing import Generic
from typing import TypeVar

from oasis_playback.timing.timeline_errors import InvalidArgumentError


if TYPE_CHECKING:
    from oasis_playback.timing.timeline import Timeline


T = TypeVar("T")


def is_passed(t_element: int, t_now: int) -> bool:
    """Return True if an element at t_element has occurred by t_now.

    The cursor is exclusive: an element exactly at the current position has
    not occurred yet. It is passed by the first forward motion beyond it.
    """
    return t_element < t_now


class Feed(Generic[T]):
    """Moving position along a timeline that reports the elements it crosses.

    A feed tracks a time position and a cursor counting the elements that
    have been passed, so that the cursor always equals the number of element
    times strictly less than the position. For example, a feed positioned at
    0 with an element at 10 does not pass the element when playing forward by
    10, but does when playing forward by 11.

    Feeds are created with Timeline.feed_from(). They never modify their
    timeline, and each feed owns its position exclusively. A feed is not
    thread-safe.
    """

    def __init__(self, timeline: Timeline[T], t_start: int) -> None:
        """Position the feed at t_start without passing an element there."""
        self._timeline: Timeline[T] = timeline
        self._now: int = t_start

        cursor: int = timeline.index_at_or_before(t_start)
        if not timeline.contains_time(t_start):
            # The element before t_start has been passed, so the cursor moves
            # to the one after it
            cursor += 1
        self._cursor: int = cursor

    def timeline(self) -> Timeline[T]:
        """Return the timeline this feed scrolls through."""
        return self._timeline

    def now(self) -> int:
        """Return the time the feed is positioned at."""
        return self._now

    def cursor(self) -> int:
        """Return the number of elements that have been passed."""
        return self._cursor

    def at_start(self) -> bool:
        """Return True if no element has been passed."""
        return self._cursor == 0

    def at_end(self) -> bool:
        """Return True if every element has been passed."""
        return self._cursor >= self._timeline.count()

    def last_delta(self) -> int:
        """Return the time since the last passed element, or -1 if none."""
        if self.at_start():
            return -1
        return self._now - self._timeline.time_at(self._cursor - 1)

    def next_delta(self) -> int:
        """Return the time until the next element, or -1 if none remain."""
        if self.at_end():
            return -1
        return self._timeline.time_at(self._cursor) - self._now

    def last_passed(self) -> T | None:
        """Return the most recently passed element, if any."""
        if self.at_start():
            return None
        return self._timeline.element_at(self._cursor - 1)

    def peek_next(self) -> T | None:
        """Return the next element that has yet to occur, if any."""
        if self.at_end():
            return None
        return self._timeline.element_at(self._cursor)

    def play(
        self, delta: int, callback: Callable[[T], None] | None = None
    ) -> T | None:
        """Move forward by delta, passing elements to callback as they occur.

        Args:
            delta: Non-negative amount of time to move forward
            callback: Optional function receiving each passed element in
                chronological order

        Returns:
            The last element to have occurred before the new position, even
            if it was passed by an earlier call, or None if no element has
            occurred

        Raises:
            InvalidArgumentError: delta is negative
        """
        if delta < 0:
            raise InvalidArgumentError(f"Negative delta: {delta}")

        t_target: int = self._now + delta
        count: int = self._timeline.count()
        while self._cursor < count and is_passed(
            self._timeline.time_at(self._cursor), t_target
        ):
            if callback is not None:
                callback(self._timeline.element_at(self._cursor))
            self._cursor += 1

        self._now = t_target
        return self.last_passed()

    def back(
        self, delta: int, callback: Callable[[T], None] | None = None
    ) -> T | None:
        """Move backward by delta, returning elements to callback as they un-occur.

        Elements are submitted in reverse chronological order. Because the
        cursor is exclusive, an element is un-passed as soon as the position
        reaches its time.

        Args:
            delta: Non-negative amount of time to move backward
            callback: Optional function receiving each un-passed element

        Returns:
            The last element still passed at the new position, or None if the
            feed is back at the start

        Raises:
            InvalidArgumentError: delta is negative
        """
        if delta < 0:
            raise InvalidArgumentError(f"Negative delta: {delta}")

        t_target: int = self._now - delta
        while self._cursor > 0 and not is_passed(
            self._timeline.time_at(self._cursor - 1), t_target
        ):
            if callback is not None:
                callback(self._timeline.element_at(self._cursor - 1))
            self._cursor -= 1

        self._now = t_target
        return self.last_passed()
