# SPDX-License-Identifier: MIT

import logging
from typing import Callable, Optional, Union

from yeardots.engine.interaction import ActionListener, InteractionStateMachine
from yeardots.engine.scheduler import ManualScheduler, Scheduler
from yeardots.engine.switch import TrackerSwitchController
from yeardots.model.interaction import ColorSession
from yeardots.model.snapshot import Snapshot
from yeardots.model.tracker import Tracker
from yeardots.repository.day_mark import DayMarkStore
from yeardots.repository.tracker import TrackerRegistry
from yeardots.service.progress import (
    get_progress_by_tracker,
    get_tracker_progress,
    get_tracker_stats,
)
from yeardots.service.visual import get_cell_visuals
from yeardots.time import current_day_index, days_in_year, label_for, reference_year

logger = logging.getLogger(__name__)


class TrackerEngine:
    """
    Owns all day-tracking state for one view.

    The presentation layer holds a reference to an engine, forwards input
    through the on_* entry points and re-renders from snapshot(). All state
    is in memory and starts empty.
    """

    def __init__(
        self,
        registry: Optional[TrackerRegistry] = None,
        scheduler: Optional[Scheduler] = None,
        clock: Optional[Callable[[], int]] = None,
        initial_tracker: Union[int, str] = 0,
        year: Optional[int] = None,
    ) -> None:
        self.registry = registry if registry is not None else TrackerRegistry()
        self.scheduler: Scheduler = (
            scheduler if scheduler is not None else ManualScheduler()
        )
        self.year = year if year is not None else reference_year()
        self._clock = clock if clock is not None else current_day_index

        initial_index = initial_tracker
        if isinstance(initial_tracker, str):
            initial_index = self.registry.index_of(initial_tracker) or 0

        self.store = DayMarkStore(self.registry)
        self.switch = TrackerSwitchController(
            self.registry, self.scheduler, initial_index=int(initial_index)
        )
        self.interaction = InteractionStateMachine(
            self.scheduler,
            on_tap=self.__tap_action,
            on_color=self.set_special_color,
            label=lambda day: label_for(day, self.year),
        )

    # ─────────────────────────────────────────────────────────────
    # Derived values
    # ─────────────────────────────────────────────────────────────

    def current_day_index(self) -> int:
        return self._clock()

    @property
    def active_tracker(self) -> Tracker:
        return self.registry.get_tracker(self.switch.active_tracker_id)

    @property
    def days(self) -> int:
        return days_in_year(self.year)

    def progress(self, tracker_id: str, current_day: Optional[int] = None) -> int:
        tracker = self.registry.find_tracker(tracker_id)
        if tracker is None:
            return 0
        if current_day is None:
            current_day = self.current_day_index()
        return get_tracker_progress(tracker, self.store, current_day)

    # ─────────────────────────────────────────────────────────────
    # Day-mark operations
    # ─────────────────────────────────────────────────────────────

    def set_special_color(self, day: int, color: Optional[str]) -> None:
        self.store.set_special_color(day, color)
        self.interaction.close_color_session_for(day)

    def toggle_checked(self, tracker_id: str, day: int) -> bool:
        return self.store.toggle_checked(tracker_id, day)

    def __tap_action(self, day: int) -> None:
        tracker = self.active_tracker
        if tracker["kind"] == "free_form":
            self.interaction.open_color_session(day)
        else:
            self.toggle_checked(tracker["id"], day)

    # ─────────────────────────────────────────────────────────────
    # Input entry points
    # ─────────────────────────────────────────────────────────────

    def on_pointer_down(self, day: int) -> None:
        self.interaction.pointer_down(day)

    def on_pointer_up(self, day: int) -> None:
        self.interaction.pointer_up(day)

    def on_pointer_leave(self, day: int) -> None:
        self.interaction.pointer_leave(day)

    def on_tap(self, day: int) -> None:
        self.interaction.tap(day)

    def on_select_color(self, color: Optional[str]) -> bool:
        return self.interaction.select_color(color)

    def on_close_color_session(self) -> None:
        self.interaction.close_color_session()

    def on_request_tracker_switch(self, target: Union[int, str]) -> bool:
        return self.switch.request_switch(target)

    def add_action_listener(self, listener: ActionListener) -> None:
        self.interaction.add_action_listener(listener)

    def reset(self) -> None:
        """Drop every mark and transient state, keeping the active tracker."""
        self.interaction.reset()
        self.switch.cancel()
        self.store.clear()
        logger.debug("engine reset")

    # ─────────────────────────────────────────────────────────────
    # Snapshot
    # ─────────────────────────────────────────────────────────────

    def snapshot(self) -> Snapshot:
        current_day = self.current_day_index()
        tracker = self.active_tracker
        switch_state = self.switch.state()

        color_session: Optional[ColorSession] = None
        session_day = self.interaction.color_session_day
        if session_day is not None:
            color_session = {
                "day": session_day,
                "selected_color": self.store.special_color_of(session_day),
            }

        return {
            "active_tracker": tracker,
            "current_day_index": current_day,
            "year": self.year,
            "days": get_cell_visuals(tracker, self.store, current_day, self.days),
            "progress_by_tracker": get_progress_by_tracker(
                self.registry.trackers, self.store, current_day
            ),
            "stats": get_tracker_stats(tracker, self.store, current_day),
            "switch_state": switch_state,
            "color_session": color_session,
            "tooltip": self.interaction.tooltip,
            "interaction_state": self.interaction.state,
            "hint": tracker["hint"],
            "header_visible": not switch_state["in_progress"],
        }
