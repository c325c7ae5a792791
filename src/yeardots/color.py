# SPDX-License-Identifier: MIT

from typing import Optional

from yeardots.model.palette import PaletteColor

PALETTE: list[PaletteColor] = [
    {"name": "Frost", "value": "#7dd3fc"},
    {"name": "Sage", "value": "#86efac"},
    {"name": "Amber", "value": "#fcd34d"},
    {"name": "Rose", "value": "#fda4af"},
    {"name": "Lavender", "value": "#c4b5fd"},
    {"name": "Coral", "value": "#fb923c"},
    {"name": "Mint", "value": "#5eead4"},
    {"name": "Gold", "value": "#e5c07b"},
]

# Cell colors for the free-form tracker
TODAY_COLOR = "#7dd3fc"
YEAR_PAST_COLOR = "#475569"
YEAR_FUTURE_COLOR = "#2e6a8e"

# Cell colors for habit trackers
HABIT_TODAY_COLOR = "#94a3b8"
HABIT_PAST_COLOR = "#334155"

# Appended to a hex color to build its glow
GLOW_ALPHA = "60"
SPECIAL_GLOW_ALPHA = "80"


def is_palette_color(value: str) -> bool:
    return any(color["value"] == value.lower() for color in PALETTE)


def find_palette_color(name_or_value: str) -> Optional[PaletteColor]:
    """Look up a palette entry by its name (case-insensitive) or hex value."""
    needle = name_or_value.strip().lower()
    for color in PALETTE:
        if color["name"].lower() == needle or color["value"] == needle:
            return color
    return None


def glow(color: str, alpha: str = GLOW_ALPHA) -> str:
    return f"{color}{alpha}"
