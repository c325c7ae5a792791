# SPDX-License-Identifier: MIT

import logging
from typing import Callable, Optional, Union

from yeardots.engine.scheduler import Scheduler, TimerHandle
from yeardots.model.switch import Direction, SwitchState
from yeardots.repository.tracker import TrackerRegistry

logger = logging.getLogger(__name__)

SETTLE_DELAY_MS = 380


class TrackerSwitchController:
    """
    Gates changes of the active tracker.

    A switch stays in flight for SETTLE_DELAY_MS before the target becomes
    active. Requests that arrive while a switch is in flight are dropped.
    """

    def __init__(
        self,
        registry: TrackerRegistry,
        scheduler: Scheduler,
        initial_index: int = 0,
        on_commit: Optional[Callable[[str], None]] = None,
    ) -> None:
        if not registry.is_valid_index(initial_index):
            initial_index = 0
        self._registry = registry
        self._scheduler = scheduler
        self._on_commit = on_commit
        self._active_index = initial_index
        self._previous_index = initial_index
        self._target_index: Optional[int] = None
        self._direction: Direction = 1
        self._token = 0
        self._handle: Optional[TimerHandle] = None

    @property
    def active_index(self) -> int:
        return self._active_index

    @property
    def active_tracker_id(self) -> str:
        return self._registry.trackers[self._active_index]["id"]

    @property
    def in_progress(self) -> bool:
        return self._target_index is not None

    @property
    def direction(self) -> Direction:
        return self._direction

    def request_switch(self, target: Union[int, str]) -> bool:
        """Start a switch to a tracker given by index or id.

        Returns True when a switch was started.
        """
        target_index = self.__resolve_index(target)
        if target_index is None:
            logger.debug("ignoring switch to unknown tracker %r", target)
            return False
        if target_index == self._active_index:
            return False
        if self.in_progress:
            logger.debug(
                "dropping switch to %r, switch to %r still in flight",
                target,
                self._target_index,
            )
            return False

        self._direction = 1 if target_index > self._active_index else -1
        self._previous_index = self._active_index
        self._target_index = target_index
        self._token += 1
        token = self._token
        self._handle = self._scheduler.call_later(
            SETTLE_DELAY_MS,
            lambda: self.__commit(token),
            name="tracker-switch",
        )
        logger.debug(
            "switching tracker %s -> %s",
            self.active_tracker_id,
            self._registry.trackers[target_index]["id"],
        )
        return True

    def __commit(self, token: int) -> None:
        if token != self._token or self._target_index is None:
            return
        self._active_index = self._target_index
        self._target_index = None
        self._handle = None
        logger.debug("tracker switch settled on %s", self.active_tracker_id)
        if self._on_commit is not None:
            self._on_commit(self.active_tracker_id)

    def __resolve_index(self, target: Union[int, str]) -> Optional[int]:
        if isinstance(target, bool):
            return None
        if isinstance(target, int):
            return target if self._registry.is_valid_index(target) else None
        return self._registry.index_of(target)

    def cancel(self) -> None:
        """Abandon an in-flight switch, leaving the active tracker unchanged."""
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
        self._token += 1
        self._target_index = None

    def state(self) -> SwitchState:
        trackers = self._registry.trackers
        return {
            "active_tracker_id": trackers[self._active_index]["id"],
            "previous_tracker_id": trackers[self._previous_index]["id"],
            "target_tracker_id": (
                trackers[self._target_index]["id"]
                if self._target_index is not None
                else None
            ),
            "in_progress": self.in_progress,
            "direction": self._direction,
        }
