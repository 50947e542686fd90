################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Conversion between float seconds and integer timeline units."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable
from typing import TypeVar

from oasis_playback.timing.timeline_errors import TimelineError


T = TypeVar("T")

# Default resolution of timeline units, in units per second (milliseconds)
UNITS_PER_SECOND: int = 1000


class TimeScaleError(TimelineError):
    """Raised when time conversions or validation fail."""


@dataclass(frozen=True)
class TimeScale:
    """Fixed resolution used to turn seconds into integer timeline units.

    Attributes:
        units_per_second: Positive number of timeline units in one second
    """

    units_per_second: int = UNITS_PER_SECOND

    def __post_init__(self) -> None:
        """Validate the resolution."""
        if isinstance(self.units_per_second, bool) or not isinstance(
            self.units_per_second, int
        ):
            raise TimeScaleError("units_per_second must be an integer")
        if self.units_per_second <= 0:
            raise TimeScaleError("units_per_second must be positive")

    def to_units(self, t_sec: float) -> int:
        """Convert seconds to integer units with deterministic rounding.

        Rounds to the nearest unit using Python's built-in round
        (ties-to-even) to keep conversion stable across runs.
        """
        if not math.isfinite(t_sec):
            raise TimeScaleError("Seconds must be finite")
        return int(round(t_sec * self.units_per_second))

    def to_seconds(self, units: int) -> float:
        """Convert integer units to seconds."""
        return float(units) / float(self.units_per_second)

    def time_of(self, seconds_of: Callable[[T], float]) -> Callable[[T], int]:
        """Wrap a function returning seconds into one returning units."""

        def _time_of(element: T) -> int:
            return self.to_units(seconds_of(element))

        return _time_of
