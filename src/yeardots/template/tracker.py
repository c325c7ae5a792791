# SPDX-License-Identifier: MIT

from yeardots.model.tracker import FREE_FORM_TRACKER_ID, Tracker


def get_tracker_template() -> Tracker:
    return {
        "id": "",
        "kind": "habit",
        "label": "",
        "sublabel": "",
        "description": "",
        "accent": "#94a3b8",
        "dim_color": None,
        "hint": "",
    }


def get_default_trackers() -> list[Tracker]:
    year = get_tracker_template()
    year["id"] = FREE_FORM_TRACKER_ID
    year["kind"] = "free_form"
    year["label"] = "Year"
    year["sublabel"] = "every day"
    year["description"] = "A dot for each day of the year"
    year["accent"] = "#7dd3fc"
    year["hint"] = "tap a dot to mark a special day"

    workout = get_tracker_template()
    workout["id"] = "workout"
    workout["label"] = "Workout"
    workout["sublabel"] = "365 sessions"
    workout["description"] = "Track your training streak"
    workout["accent"] = "#86efac"
    workout["dim_color"] = "#2e6e4a"
    workout["hint"] = "tap a dot to mark a session"

    better = get_tracker_template()
    better["id"] = "better"
    better["label"] = "Better"
    better["sublabel"] = "than yesterday"
    better["description"] = "Was today better than yesterday?"
    better["accent"] = "#c4b5fd"
    better["dim_color"] = "#5a3d7a"
    better["hint"] = "tap a dot to mark a win"

    return [year, workout, better]
