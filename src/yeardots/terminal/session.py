# SPDX-License-Identifier: MIT

import logging
from pathlib import Path
from typing import Annotated, Callable, Optional

import typer
from rich.console import Console

from yeardots.engine.engine import TrackerEngine
from yeardots.engine.interaction import LONG_PRESS_MS
from yeardots.engine.scheduler import ManualScheduler
from yeardots.repository.configuration import CONFIGURATION_REPO
from yeardots.repository.tracker import TRACKER_REGISTRY
from yeardots.terminal.parse import (
    Command,
    ScriptParseError,
    parse_command,
    parse_day,
    parse_script,
)
from yeardots.time import current_day_index, fixed_day_clock
from yeardots.view.grid import grid_view

logger = logging.getLogger(__name__)

console = Console()

HELP_TEXT = """\
[bold]press[/bold] DAY      start pressing a day
[bold]release[/bold] DAY    release the press (a tap if under 500ms)
[bold]leave[/bold] DAY      pointer leaves the day while pressed
[bold]tap[/bold] DAY        click a day
[bold]hold[/bold] DAY [MS]  press, hold for MS (default 500) and release
[bold]color[/bold] NAME     pick a palette color for the open session
[bold]remove[/bold]         remove the mark of the open session's day
[bold]close[/bold]          close the color session
[bold]switch[/bold] TARGET  switch tracker by index or id
[bold]wait[/bold] MS        let MS milliseconds pass
[bold]reset[/bold]          clear all marks
[bold]show[/bold]           render the grid
[bold]quit[/bold]           leave the session"""

TrackerOption = Annotated[
    Optional[str],
    typer.Option("--tracker", "-t", help="tracker id to start on"),
]
DayOption = Annotated[
    Optional[int],
    typer.Option(
        "--day",
        "-d",
        help="pretend today is this day of the year",
        callback=parse_day,
    ),
]


def build_engine(
    tracker: Optional[str] = None,
    day: Optional[int] = None,
) -> tuple[TrackerEngine, ManualScheduler]:
    config = CONFIGURATION_REPO.get_config()

    initial_tracker = tracker if tracker is not None else config["initial_tracker"]
    if TRACKER_REGISTRY.find_tracker(initial_tracker) is None:
        valid_ids = ", ".join(t["id"] for t in TRACKER_REGISTRY.trackers)
        raise typer.BadParameter(
            f"Unknown tracker: {initial_tracker}. Valid options: {valid_ids}"
        )

    clock: Callable[[], int] = current_day_index
    if day is not None:
        clock = fixed_day_clock(day)

    scheduler = ManualScheduler()
    engine = TrackerEngine(
        registry=TRACKER_REGISTRY,
        scheduler=scheduler,
        clock=clock,
        initial_tracker=initial_tracker,
    )
    return engine, scheduler


class SessionRunner:
    """Applies parsed gesture commands to an engine driven by a virtual clock."""

    def __init__(
        self,
        engine: TrackerEngine,
        scheduler: ManualScheduler,
        render: Optional[Callable[[], None]] = None,
    ) -> None:
        self.engine = engine
        self.scheduler = scheduler
        self._render = render if render is not None else self.render

    def render(self) -> None:
        config = CONFIGURATION_REPO.get_config()
        grid_view(self.engine.snapshot(), columns=config["grid_columns"])

    def run(self, command: Command) -> bool:
        """Apply one command. Returns False when the session should end."""
        name = command["name"]
        day = command["day"]
        logger.debug("running %s", command)

        if name == "press" and day is not None:
            self.engine.on_pointer_down(day)
        elif name == "release" and day is not None:
            self.engine.on_pointer_up(day)
        elif name == "leave" and day is not None:
            self.engine.on_pointer_leave(day)
        elif name == "tap" and day is not None:
            self.engine.on_tap(day)
        elif name == "hold" and day is not None:
            self.engine.on_pointer_down(day)
            held = LONG_PRESS_MS if command["ms"] is None else command["ms"]
            self.scheduler.advance(held)
            self.engine.on_pointer_up(day)
        elif name == "color":
            if not self.engine.on_select_color(command["color"]):
                console.print("[yellow]No color session is open[/yellow]")
        elif name == "remove":
            if not self.engine.on_select_color(None):
                console.print("[yellow]No color session is open[/yellow]")
        elif name == "close":
            self.engine.on_close_color_session()
        elif name == "switch" and command["target"] is not None:
            if not self.engine.on_request_tracker_switch(command["target"]):
                target = command["target"]
                console.print(f"[yellow]Switch to {target} ignored[/yellow]")
        elif name == "wait":
            self.scheduler.advance(command["ms"] or 0)
        elif name == "reset":
            self.engine.reset()
        elif name == "show":
            self._render()
        elif name == "help":
            console.print(HELP_TEXT)
        elif name == "quit":
            return False
        return True

    def run_all(self, commands: list[Command]) -> None:
        for command in commands:
            if not self.run(command):
                break


def show(tracker: TrackerOption = None, day: DayOption = None) -> None:
    """Render the year grid."""
    engine, scheduler = build_engine(tracker, day)
    SessionRunner(engine, scheduler).render()


def session(tracker: TrackerOption = None, day: DayOption = None) -> None:
    """Interactive session: type gesture commands, 'help' lists them."""
    engine, scheduler = build_engine(tracker, day)
    runner = SessionRunner(engine, scheduler)
    runner.render()

    while True:
        try:
            line = console.input("[bold sky_blue1]›[/bold sky_blue1] ")
        except EOFError:
            break

        try:
            command = parse_command(line)
        except ScriptParseError as e:
            console.print(f"[red]{e}[/red]")
            continue
        if command is None:
            continue

        if not runner.run(command):
            break
        if command["name"] not in ("show", "help"):
            runner.render()


def replay(
    script: Annotated[
        Path,
        typer.Argument(exists=True, dir_okay=False, readable=True),
    ],
    tracker: TrackerOption = None,
    day: DayOption = None,
) -> None:
    """Run a file of gesture commands, then render the grid."""
    try:
        commands = parse_script(script.read_text())
    except ScriptParseError as e:
        console.print(f"[red]{script}: {e}[/red]")
        raise typer.Exit(1)

    engine, scheduler = build_engine(tracker, day)
    runner = SessionRunner(engine, scheduler)
    runner.run_all(commands)
    runner.render()
