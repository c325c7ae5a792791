# SPDX-License-Identifier: MIT

from typing import Optional

from rich import print
from rich.padding import Padding

from yeardots.view.state import get_show_header


def header(year: int, sub_header: Optional[str] = None) -> None:
    """Print the application header.

    Args:
        year: The year the grid is laid out for
        sub_header: Optional sub-header text to display
    """
    if not get_show_header():
        return

    additional = ""
    if sub_header is not None:
        additional = f"[sandy_brown]{sub_header}[/sandy_brown]"

    print(
        Padding(
            f"[sky_blue1]{year}[/sky_blue1] [plum1]trackers[/plum1]", (1, 0, 0, 1)
        )
    )
    print(Padding(additional, (0, 1)))
