################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Timelines of time-stamped elements and the feeds that scroll them."""

from __future__ import annotations

from oasis_playback.timing.feed import Feed
from oasis_playback.timing.feed import is_passed
from oasis_playback.timing.time_scale import TimeScale
from oasis_playback.timing.time_scale import TimeScaleError
from oasis_playback.timing.timeline import Timeline
from oasis_playback.timing.timeline_errors import InvalidArgumentError
from oasis_playback.timing.timeline_errors import InvalidInputError
from oasis_playback.timing.timeline_errors import TimelineError


__all__ = [
    "Feed",
    "InvalidArgumentError",
    "InvalidInputError",
    "TimeScale",
    "TimeScaleError",
    "Timeline",
    "TimelineError",
    "is_passed",
]
