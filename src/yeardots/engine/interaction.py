# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from typing import Callable, Optional

from yeardots.color import is_palette_color
from yeardots.engine.scheduler import Scheduler, TimerHandle
from yeardots.model.interaction import (
    Action,
    ActionType,
    InteractionStateName,
    Press,
    Tooltip,
)
from yeardots.time import label_for

logger = logging.getLogger(__name__)

LONG_PRESS_MS = 500
TOOLTIP_MS = 1800

ActionListener = Callable[[Action], None]


class InteractionStateMachine:
    """
    Turns raw pointer input on day cells into tap and long-press actions.

    A press that is released (or left) before LONG_PRESS_MS resolves to a
    single tap. A press still held when the long-press timer fires resolves
    to a long press that shows a tooltip for TOOLTIP_MS. Its release does
    nothing further, and a click arriving together with that release is
    swallowed. Later clicks on the day are taps again. A new press on the
    day whose tooltip is showing hides it. Each timer carries the token of
    the press or tooltip that armed it, so a timer that fires after being
    superseded is ignored.

    The machine also owns the color-assignment session. What a tap does and
    how a chosen color is stored are decided by the callbacks it is given.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        on_tap: Callable[[int], None],
        on_color: Callable[[int, Optional[str]], None],
        label: Callable[[int], str] = label_for,
    ) -> None:
        self._scheduler = scheduler
        self._on_tap = on_tap
        self._on_color = on_color
        self._label = label
        self._listeners: list[ActionListener] = []
        self._token = 0

        self._press: Optional[Press] = None
        self._press_handle: Optional[TimerHandle] = None
        # Day whose press turned into a long press and is still held
        self._long_pressed_day: Optional[int] = None
        # Day and time of the release that ended a long press
        self._long_press_release: Optional[tuple[int, int]] = None

        self._tooltip: Optional[Tooltip] = None
        self._tooltip_handle: Optional[TimerHandle] = None

        self._color_session_day: Optional[int] = None

    # ─────────────────────────────────────────────────────────────
    # State
    # ─────────────────────────────────────────────────────────────

    @property
    def state(self) -> InteractionStateName:
        if self._press is not None:
            return "pending_long_press"
        if self._tooltip is not None:
            return "tooltip_shown"
        if self._color_session_day is not None:
            return "color_session_open"
        return "idle"

    @property
    def press(self) -> Optional[Press]:
        return deepcopy(self._press)

    @property
    def tooltip(self) -> Optional[Tooltip]:
        return deepcopy(self._tooltip)

    @property
    def color_session_day(self) -> Optional[int]:
        return self._color_session_day

    def add_action_listener(self, listener: ActionListener) -> None:
        self._listeners.append(listener)

    # ─────────────────────────────────────────────────────────────
    # Pointer input
    # ─────────────────────────────────────────────────────────────

    def pointer_down(self, day: int) -> None:
        # A new press supersedes whatever press was still in flight
        self.__cancel_press()
        self._long_pressed_day = None
        self._long_press_release = None
        if self._tooltip is not None and self._tooltip["day"] == day:
            self.__hide_tooltip()

        token = self.__next_token()
        self._press = {
            "token": token,
            "day": day,
            "started_at": self._scheduler.now(),
        }
        self._press_handle = self._scheduler.call_later(
            LONG_PRESS_MS,
            lambda: self.__long_press_fired(token),
            name=f"long-press:{day}",
        )
        logger.debug("press started on day %s", day)

    def pointer_up(self, day: int) -> None:
        self.__release(day, "up")

    def pointer_leave(self, day: int) -> None:
        self.__release(day, "leave")

    def tap(self, day: int) -> None:
        """Synthetic click on a day cell."""
        if self.__is_trailing_click(day):
            # The click that ends a long-press gesture is not a tap
            self._long_pressed_day = None
            self._long_press_release = None
            logger.debug("swallowed click after long press on day %s", day)
            return
        self._long_press_release = None
        self.__cancel_press()
        self.__fire_tap(day)

    def __is_trailing_click(self, day: int) -> bool:
        if self._long_pressed_day == day:
            return True
        return self._long_press_release == (day, self._scheduler.now())

    def __release(self, day: int, how: str) -> None:
        if self._press is None:
            if self._long_pressed_day == day:
                self._long_pressed_day = None
                if how == "up":
                    self._long_press_release = (day, self._scheduler.now())
            return
        if self._press["day"] != day:
            logger.debug(
                "ignoring pointer %s on day %s, press is on day %s",
                how,
                day,
                self._press["day"],
            )
            return
        held = self._scheduler.now() - self._press["started_at"]
        self.__cancel_press()
        logger.debug("press on day %s released after %sms", day, held)
        self.__fire_tap(day)

    def __long_press_fired(self, token: int) -> None:
        if self._press is None or self._press["token"] != token:
            return
        day = self._press["day"]
        self._press = None
        self._press_handle = None
        self._long_pressed_day = day
        self.__emit("long_press", day)
        self.__show_tooltip(day)

    def __fire_tap(self, day: int) -> None:
        self.__emit("tap", day)
        self._on_tap(day)

    # ─────────────────────────────────────────────────────────────
    # Tooltip
    # ─────────────────────────────────────────────────────────────

    def __show_tooltip(self, day: int) -> None:
        if self._tooltip_handle is not None:
            self._tooltip_handle.cancel()

        token = self.__next_token()
        self._tooltip = {
            "token": token,
            "day": day,
            "label": self._label(day),
            "expires_at": self._scheduler.now() + TOOLTIP_MS,
        }
        self._tooltip_handle = self._scheduler.call_later(
            TOOLTIP_MS,
            lambda: self.__tooltip_expired(token),
            name=f"tooltip:{day}",
        )

    def __tooltip_expired(self, token: int) -> None:
        if self._tooltip is None or self._tooltip["token"] != token:
            return
        self._tooltip = None
        self._tooltip_handle = None

    def __hide_tooltip(self) -> None:
        if self._tooltip_handle is not None:
            self._tooltip_handle.cancel()
        self._tooltip = None
        self._tooltip_handle = None

    # ─────────────────────────────────────────────────────────────
    # Color-assignment session
    # ─────────────────────────────────────────────────────────────

    def open_color_session(self, day: int) -> None:
        if self._color_session_day is not None and self._color_session_day != day:
            logger.debug(
                "color session moves from day %s to day %s",
                self._color_session_day,
                day,
            )
        self._color_session_day = day

    def select_color(self, color: Optional[str]) -> bool:
        """Assign a palette color (or None to remove the mark) to the pending day.

        Returns True when the store was updated.
        """
        if self._color_session_day is None:
            logger.debug("ignoring color %r, no color session open", color)
            return False
        if color is not None and not is_palette_color(color):
            logger.debug("ignoring color %r, not in the palette", color)
            return False

        day = self._color_session_day
        self._color_session_day = None
        self._on_color(day, color.lower() if color is not None else None)
        return True

    def close_color_session(self) -> None:
        self._color_session_day = None

    def close_color_session_for(self, day: int) -> None:
        if self._color_session_day == day:
            self._color_session_day = None

    # ─────────────────────────────────────────────────────────────
    # Housekeeping
    # ─────────────────────────────────────────────────────────────

    def reset(self) -> None:
        """Cancel every outstanding timer and return to idle."""
        self.__cancel_press()
        self.__hide_tooltip()
        self._long_pressed_day = None
        self._long_press_release = None
        self._color_session_day = None

    def __cancel_press(self) -> None:
        if self._press_handle is not None:
            self._press_handle.cancel()
        self._press = None
        self._press_handle = None

    def __next_token(self) -> int:
        self._token += 1
        return self._token

    def __emit(self, action_type: ActionType, day: int) -> None:
        action: Action = {"type": action_type, "day": day}
        logger.debug("%s on day %s", action_type, day)
        for listener in self._listeners:
            listener(action)
