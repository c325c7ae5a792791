# SPDX-License-Identifier: MIT

from typing import Optional

from rich.console import Console
from rich.padding import Padding
from rich.text import Text

from yeardots.color import PALETTE
from yeardots.model.snapshot import CellVisual, Snapshot
from yeardots.view.header import header
from yeardots.view.state import get_use_color

PROGRESS_BAR_WIDTH = 30


def get_cell_symbol(cell: CellVisual, use_color: bool) -> tuple[str, str]:
    """
    Get the symbol and style for one day cell.

    Args:
        cell: Resolved visual state of the day
        use_color: Whether to style the symbol with the cell color

    Returns:
        Tuple of (symbol, style)
    """
    kind = cell["kind"]
    if kind in ("special", "checked"):
        symbol = "●"
    elif kind == "today":
        symbol = "◉"
    elif kind == "past":
        symbol = "·"
    else:
        symbol = "○"

    if not use_color:
        return (symbol, "bold" if cell["is_today"] else "")

    style = cell["color"]
    if cell["opacity"] < 0.5:
        style = f"{style} dim"
    if cell["is_today"]:
        style = f"bold {style}"
    return (symbol, style)


def build_grid_rows(
    cells: list[CellVisual],
    columns: int,
    use_color: bool,
    highlight_day: Optional[int] = None,
) -> list[Text]:
    """Lay the cells out in rows of `columns` cells, one space apart."""
    rows: list[Text] = []
    columns = max(columns, 1)
    for start in range(0, len(cells), columns):
        row = Text()
        for cell in cells[start : start + columns]:
            symbol, style = get_cell_symbol(cell, use_color)
            if cell["day"] == highlight_day:
                style = f"{style} reverse".strip()
            if style:
                row.append(symbol, style=style)
            else:
                row.append(symbol)
            row.append(" ")
        rows.append(row)
    return rows


def build_progress_bar(progress: int, accent: str, use_color: bool) -> Text:
    filled = min(max(progress, 0), 100) * PROGRESS_BAR_WIDTH // 100
    bar = Text()
    bar.append("█" * filled, style=accent if use_color else "")
    bar.append(
        "░" * (PROGRESS_BAR_WIDTH - filled), style="grey23" if use_color else ""
    )
    bar.append(f" {progress}%")
    return bar


def grid_view(snapshot: Snapshot, columns: int = 28) -> None:
    """
    Render the full year grid for a snapshot.

    Year  A dot for each day of the year
    ████████████░░░░░░░░░░░░░░░░░░ 41%
    · · · · ◉ ○ ○ ○ ...
    """
    use_color = get_use_color()
    tracker = snapshot["active_tracker"]
    switch_state = snapshot["switch_state"]
    accent = tracker["accent"]

    header(snapshot["year"], snapshot["interaction_state"])

    console = Console()

    title = Text()
    if snapshot["header_visible"]:
        title.append(tracker["label"], style=f"bold {accent}" if use_color else "bold")
        title.append(f"  {tracker['description']}", style="grey62")
    else:
        direction = "→" if switch_state["direction"] > 0 else "←"
        title.append(
            f"{direction} {switch_state['target_tracker_id']}", style="grey62 italic"
        )
    console.print(Padding(title, (0, 1)))

    progress = snapshot["progress_by_tracker"][tracker["id"]]
    console.print(Padding(build_progress_bar(progress, accent, use_color), (0, 1)))
    console.print()

    highlight_day = None
    if snapshot["color_session"] is not None:
        highlight_day = snapshot["color_session"]["day"]
    elif snapshot["tooltip"] is not None:
        highlight_day = snapshot["tooltip"]["day"]

    for row in build_grid_rows(snapshot["days"], columns, use_color, highlight_day):
        console.print(Padding(row, (0, 1)))
    console.print()

    stats = snapshot["stats"]
    stats_line = Text()
    stats_line.append(f"{stats['days_in']}", style="bold")
    stats_line.append(" days in   ")
    stats_line.append(f"{stats['days_left']}", style="bold")
    stats_line.append(" remaining")
    if stats["completed"] is not None:
        stats_line.append("   ")
        stats_line.append(
            f"{stats['completed']}", style=f"bold {accent}" if use_color else "bold"
        )
        stats_line.append(" completed")
    console.print(Padding(stats_line, (0, 1)))

    if snapshot["tooltip"] is not None:
        console.print(
            Padding(f"[reverse] {snapshot['tooltip']['label']} [/reverse]", (0, 1))
        )

    if snapshot["color_session"] is not None:
        console.print(Padding(color_picker_text(snapshot, use_color), (0, 1)))

    console.print(Padding(f"[grey50]{snapshot['hint']}[/grey50]", (1, 1, 0, 1)))


def color_picker_text(snapshot: Snapshot, use_color: bool) -> Text:
    session = snapshot["color_session"]
    text = Text()
    if session is None:
        return text
    text.append("mark this day: ")
    for color in PALETTE:
        marker = "◆" if session["selected_color"] == color["value"] else "■"
        text.append(marker, style=color["value"] if use_color else "")
        text.append(f" {color['name'].lower()}  ")
    text.append("| remove | close", style="grey50")
    return text
