# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypedDict

from yeardots.model.interaction import ColorSession, InteractionStateName, Tooltip
from yeardots.model.switch import SwitchState
from yeardots.model.tracker import Tracker

CellKind = Literal["special", "checked", "today", "past", "future"]


class CellVisual(TypedDict):
    day: int
    kind: CellKind
    color: str
    opacity: float
    glow: Optional[str]  # Glow color with alpha, e.g. "#86efac60"
    is_today: bool


class Stats(TypedDict):
    days_in: int
    days_left: int
    completed: Optional[int]  # Only for habit trackers


class Snapshot(TypedDict):
    active_tracker: Tracker
    current_day_index: int
    year: int
    days: list[CellVisual]
    progress_by_tracker: dict[str, int]
    stats: Stats
    switch_state: SwitchState
    color_session: Optional[ColorSession]
    tooltip: Optional[Tooltip]
    interaction_state: InteractionStateName
    hint: str
    header_visible: bool
