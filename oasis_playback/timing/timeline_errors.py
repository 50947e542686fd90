################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Errors raised by timeline construction and feed scrolling."""

from __future__ import annotations


class TimelineError(Exception):
    """Base class for timeline failures."""


class InvalidInputError(TimelineError):
    """Raised when a timeline cannot be built from the given elements."""


class InvalidArgumentError(TimelineError):
    """Raised when a feed is scrolled by a negative delta."""
