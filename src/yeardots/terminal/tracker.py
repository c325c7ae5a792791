# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from yeardots.terminal.parse import parse_day
from yeardots.terminal.session import build_engine
from yeardots.view.tracker import palette_view, trackers_view


def trackers(
    day: Annotated[
        Optional[int],
        typer.Option(
            "--day",
            "-d",
            help="pretend today is this day of the year",
            callback=parse_day,
        ),
    ] = None,
) -> None:
    """List the available trackers."""
    engine, _ = build_engine(day=day)
    snapshot = engine.snapshot()
    trackers_view(
        snapshot["year"],
        engine.registry.get_all_trackers(),
        snapshot["progress_by_tracker"],
        snapshot["active_tracker"]["id"],
    )


def palette() -> None:
    """List the colors a special day can be marked with."""
    engine, _ = build_engine()
    palette_view(engine.year)
