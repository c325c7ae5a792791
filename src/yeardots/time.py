# SPDX-License-Identifier: MIT

from typing import Callable, Optional

import pendulum

# Progress and the "days left" counter are measured against a fixed year length
YEAR_LENGTH = 365

_REFERENCE_YEAR: int = pendulum.now("local").year


def now_local() -> pendulum.DateTime:
    return pendulum.now("local")


def reference_year() -> int:
    """The calendar year the grid is laid out for, fixed at process start."""
    return _REFERENCE_YEAR


def days_in_year(year: Optional[int] = None) -> int:
    if year is None:
        year = reference_year()
    return 366 if pendulum.datetime(year, 1, 1).is_leap_year() else 365


def current_day_index() -> int:
    """Ordinal day of today within its own calendar year (Jan 1 is 1).

    Evaluated on every call so that it tracks real time.
    """
    return now_local().day_of_year


def day_to_date(day: int, year: Optional[int] = None) -> pendulum.Date:
    """Resolve an ordinal day against Jan 1 of the reference year.

    Ordinals past the end of the year (or below 1) roll into the
    neighbouring year instead of being rejected.
    """
    if year is None:
        year = reference_year()
    return pendulum.date(year, 1, 1).add(days=day - 1)


def label_for(day: int, year: Optional[int] = None) -> str:
    return day_to_date(day, year).format("MMM D")


def fixed_day_clock(day: int) -> Callable[[], int]:
    """A clock that always reports the given day as today."""

    def clock() -> int:
        return day

    return clock
