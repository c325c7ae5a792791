# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypedDict

InteractionStateName = Literal[
    "idle",
    "pending_long_press",
    "tooltip_shown",
    "color_session_open",
]
ActionType = Literal["tap", "long_press"]


class Press(TypedDict):
    token: int
    day: int
    started_at: int  # Scheduler time in milliseconds


class Tooltip(TypedDict):
    token: int
    day: int
    label: str
    expires_at: int  # Scheduler time in milliseconds


class ColorSession(TypedDict):
    day: int
    selected_color: Optional[str]  # Color currently assigned to the pending day


class Action(TypedDict):
    type: ActionType
    day: int
