# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypedDict

TrackerKind = Literal["free_form", "habit"]

FREE_FORM_TRACKER_ID = "year"


class Tracker(TypedDict):
    id: str  # e.g., "year", "workout"
    kind: TrackerKind
    label: str  # e.g., "Workout"
    sublabel: str  # e.g., "365 sessions"
    description: str
    accent: str  # Hex color used for checked cells and the progress bar
    dim_color: Optional[str]  # Color for future cells of a habit tracker
    hint: str  # e.g., "tap a dot to mark a session"
