# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from yeardots.model.tracker import FREE_FORM_TRACKER_ID, Tracker
from yeardots.template.tracker import get_default_trackers


class TrackerRegistry:
    """Read-only catalog of the trackers available to the engine.

    Order matters: tracker switches are requested by index and the switch
    direction is derived from index order.
    """

    def __init__(self, trackers: Optional[list[Tracker]] = None) -> None:
        self._trackers: Optional[list[Tracker]] = None
        if trackers is not None:
            self._trackers = self.__validate(deepcopy(trackers))

    @property
    def trackers(self) -> list[Tracker]:
        if self._trackers is None:
            self.__load_data()
        if self._trackers is None:
            raise ValueError()
        return self._trackers

    def __load_data(self) -> None:
        self._trackers = self.__validate(get_default_trackers())

    def __validate(self, trackers: list[Tracker]) -> list[Tracker]:
        ids = [tracker["id"] for tracker in trackers]
        if len(ids) != len(set(ids)):
            raise ValueError(f"Tracker ids must be unique, got {ids}")

        # "year" is the free-form tracker, every other id is a habit
        for tracker in trackers:
            expected = "habit"
            if tracker["id"] == FREE_FORM_TRACKER_ID:
                expected = "free_form"
            if tracker["kind"] != expected:
                raise ValueError(
                    f"Tracker '{tracker['id']}' must be of kind '{expected}', "
                    f"got '{tracker['kind']}'"
                )
        return trackers

    def __len__(self) -> int:
        return len(self.trackers)

    def get_all_trackers(self) -> list[Tracker]:
        return deepcopy(self.trackers)

    def get_tracker(self, id: str) -> Tracker:
        return deepcopy(
            [tracker for tracker in self.trackers if tracker["id"] == id][0]
        )

    def get_tracker_by_index(self, index: int) -> Tracker:
        return deepcopy(self.trackers[index])

    def find_tracker(self, id: str) -> Optional[Tracker]:
        for tracker in self.trackers:
            if tracker["id"] == id:
                return deepcopy(tracker)
        return None

    def index_of(self, id: str) -> Optional[int]:
        for index, tracker in enumerate(self.trackers):
            if tracker["id"] == id:
                return index
        return None

    def is_valid_index(self, index: int) -> bool:
        return 0 <= index < len(self.trackers)

    def is_habit(self, id: str) -> bool:
        return any(
            tracker["id"] == id and tracker["kind"] == "habit"
            for tracker in self.trackers
        )

    def is_free_form(self, id: str) -> bool:
        return any(
            tracker["id"] == id and tracker["kind"] == "free_form"
            for tracker in self.trackers
        )

    def habit_ids(self) -> list[str]:
        return [
            tracker["id"] for tracker in self.trackers if tracker["kind"] == "habit"
        ]


TRACKER_REGISTRY = TrackerRegistry()
