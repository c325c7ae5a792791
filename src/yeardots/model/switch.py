# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypedDict

Direction = Literal[-1, 1]


class SwitchState(TypedDict):
    active_tracker_id: str
    previous_tracker_id: str
    target_tracker_id: Optional[str]  # Set only while a switch is in flight
    in_progress: bool
    direction: Direction
