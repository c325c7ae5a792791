# SPDX-License-Identifier: MIT

from typing import TypedDict


class PaletteColor(TypedDict):
    name: str  # e.g., "Sage"
    value: str  # e.g., "#86efac"
