# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from yeardots.color import PALETTE
from yeardots.model.tracker import Tracker
from yeardots.view.header import header
from yeardots.view.state import get_use_color


def trackers_view(
    year: int,
    trackers: list[Tracker],
    progress_by_tracker: dict[str, int],
    active_tracker_id: str,
    columns: list[str] = ["index", "id", "label", "sublabel", "progress"],
) -> None:
    """Display the tracker catalog in a table."""
    header(year, "trackers")
    use_color = get_use_color()

    trackers_table = Table(box=box.SIMPLE)
    for column in columns:
        trackers_table.add_column(column)

    for index, tracker in enumerate(trackers):
        row = []
        for column in columns:
            column_value = ""
            if column == "index":
                column_value = str(index)
            elif column == "progress":
                column_value = f"{progress_by_tracker.get(tracker['id'], 0)}%"
            elif column == "active":
                column_value = "●" if tracker["id"] == active_tracker_id else ""
            elif tracker.get(column) is not None:
                column_value = str(tracker[column])  # type: ignore[literal-required]

            if use_color and tracker["id"] == active_tracker_id:
                accent = tracker["accent"]
                column_value = f"[{accent}]{column_value}[/{accent}]"

            row.append(column_value)
        trackers_table.add_row(*row)

    console = Console()
    console.print(trackers_table)


def palette_view(year: int) -> None:
    """Display the colors a special day can be marked with."""
    header(year, "palette")
    use_color = get_use_color()

    palette_table = Table(box=box.SIMPLE)
    palette_table.add_column("name")
    palette_table.add_column("value")
    palette_table.add_column("swatch")

    for color in PALETTE:
        swatch = f"[{color['value']}]■■■[/{color['value']}]" if use_color else ""
        palette_table.add_row(color["name"].lower(), color["value"], swatch)

    console = Console()
    console.print(palette_table)
