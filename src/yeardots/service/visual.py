# SPDX-License-Identifier: MIT

from typing import Optional

from yeardots.color import (
    HABIT_PAST_COLOR,
    HABIT_TODAY_COLOR,
    SPECIAL_GLOW_ALPHA,
    TODAY_COLOR,
    YEAR_FUTURE_COLOR,
    YEAR_PAST_COLOR,
    glow,
)
from yeardots.model.snapshot import CellKind, CellVisual
from yeardots.model.tracker import Tracker
from yeardots.repository.day_mark import DayMarkStore


def get_cell_visual(
    tracker: Tracker,
    store: DayMarkStore,
    day: int,
    current_day: int,
) -> CellVisual:
    """
    Resolve how a single day cell looks for the given tracker.

    Precedence for the free-form tracker: special mark, today, past, future.
    Precedence for habit trackers: checked, today, past, future.
    """
    is_today = day == current_day
    is_past = day < current_day

    if tracker["kind"] == "free_form":
        special_color = store.special_color_of(day)
        if special_color is not None:
            return _cell(
                day,
                "special",
                special_color,
                1,
                glow(special_color, SPECIAL_GLOW_ALPHA),
                is_today,
            )
        if is_today:
            return _cell(day, "today", TODAY_COLOR, 1, glow(TODAY_COLOR), is_today)
        if is_past:
            return _cell(day, "past", YEAR_PAST_COLOR, 0.08, None, is_today)
        return _cell(day, "future", YEAR_FUTURE_COLOR, 0.22, None, is_today)

    if store.is_checked(tracker["id"], day):
        return _cell(
            day, "checked", tracker["accent"], 1, glow(tracker["accent"]), is_today
        )
    if is_today:
        return _cell(
            day,
            "today",
            HABIT_TODAY_COLOR,
            0.85,
            glow(HABIT_TODAY_COLOR, "30"),
            is_today,
        )
    if is_past:
        return _cell(day, "past", HABIT_PAST_COLOR, 0.08, None, is_today)
    return _cell(
        day, "future", tracker["dim_color"] or HABIT_PAST_COLOR, 0.22, None, is_today
    )


def get_cell_visuals(
    tracker: Tracker,
    store: DayMarkStore,
    current_day: int,
    days: int,
) -> list[CellVisual]:
    return [
        get_cell_visual(tracker, store, day, current_day)
        for day in range(1, days + 1)
    ]


def _cell(
    day: int,
    kind: CellKind,
    color: str,
    opacity: float,
    glow_color: Optional[str],
    is_today: bool,
) -> CellVisual:
    return {
        "day": day,
        "kind": kind,
        "color": color,
        "opacity": opacity,
        "glow": glow_color,
        "is_today": is_today,
    }
