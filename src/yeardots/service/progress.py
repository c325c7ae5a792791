# SPDX-License-Identifier: MIT

import math

from yeardots.model.snapshot import Stats
from yeardots.model.tracker import Tracker
from yeardots.repository.day_mark import DayMarkStore
from yeardots.time import YEAR_LENGTH


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up, unlike round()."""
    return math.floor(value + 0.5)


def year_progress(current_day: int) -> int:
    """Elapsed fraction of the year as a percentage. Marks do not count."""
    return round_half_up(current_day / YEAR_LENGTH * 100)


def habit_progress(checked_count: int, current_day: int) -> int:
    """
    Completion rate against the days elapsed so far.

    Not clamped: retroactive marks past the current day can push the result
    above 100.
    """
    if current_day == 0:
        return 0
    return round_half_up(checked_count / current_day * 100)


def get_tracker_progress(
    tracker: Tracker,
    store: DayMarkStore,
    current_day: int,
) -> int:
    if tracker["kind"] == "free_form":
        return year_progress(current_day)
    return habit_progress(store.checked_count(tracker["id"]), current_day)


def get_progress_by_tracker(
    trackers: list[Tracker],
    store: DayMarkStore,
    current_day: int,
) -> dict[str, int]:
    return {
        tracker["id"]: get_tracker_progress(tracker, store, current_day)
        for tracker in trackers
    }


def get_tracker_stats(
    tracker: Tracker,
    store: DayMarkStore,
    current_day: int,
) -> Stats:
    completed = None
    if tracker["kind"] == "habit":
        completed = store.checked_count(tracker["id"])
    return {
        "days_in": current_day,
        "days_left": YEAR_LENGTH - current_day,
        "completed": completed,
    }
