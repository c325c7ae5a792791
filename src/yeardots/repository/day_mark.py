# SPDX-License-Identifier: MIT

import logging
from typing import Optional

from yeardots.repository.tracker import TrackerRegistry

logger = logging.getLogger(__name__)


def is_valid_day(day: object) -> bool:
    return isinstance(day, int) and not isinstance(day, bool) and day > 0


class DayMarkStore:
    """In-memory day marks for every tracker.

    Holds a sparse day -> color mapping for the free-form tracker and a set
    of completed days per habit tracker. Invalid input is ignored rather
    than raised.
    """

    def __init__(self, registry: TrackerRegistry) -> None:
        self._registry = registry
        self._special_days: dict[int, str] = {}
        self._checked_days: dict[str, set[int]] = {}

    def set_special_color(self, day: int, color: Optional[str]) -> None:
        if not is_valid_day(day):
            logger.debug("ignoring special color for invalid day %r", day)
            return

        if color is None:
            # Removal deletes the key, never stores a null
            self._special_days.pop(day, None)
            return

        self._special_days[day] = color

    def toggle_checked(self, tracker_id: str, day: int) -> bool:
        if not self._registry.is_habit(tracker_id):
            logger.debug("ignoring toggle on non-habit tracker %r", tracker_id)
            return False
        if not is_valid_day(day):
            logger.debug("ignoring toggle for invalid day %r", day)
            return False

        checked = self._checked_days.setdefault(tracker_id, set())
        if day in checked:
            checked.remove(day)
            return False
        checked.add(day)
        return True

    def is_special(self, day: int) -> bool:
        return day in self._special_days

    def special_color_of(self, day: int) -> Optional[str]:
        return self._special_days.get(day)

    def is_checked(self, tracker_id: str, day: int) -> bool:
        return day in self._checked_days.get(tracker_id, set())

    def checked_count(self, tracker_id: str) -> int:
        return len(self._checked_days.get(tracker_id, set()))

    def special_days(self) -> dict[int, str]:
        return dict(self._special_days)

    def checked_days(self, tracker_id: str) -> set[int]:
        return set(self._checked_days.get(tracker_id, set()))

    def clear(self) -> None:
        self._special_days.clear()
        self._checked_days.clear()
