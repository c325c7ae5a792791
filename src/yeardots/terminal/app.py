# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from yeardots.terminal import configuration
from yeardots.terminal.custom_typer import OrderedAliasedTyperGroup
from yeardots.terminal.session import replay, session, show
from yeardots.terminal.tracker import palette, trackers
from yeardots.view import state as view_state

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="yeardots - a dot for every day of the year",
    no_args_is_help=True,
)
app.add_typer(configuration.app, name="config, c")
app.command(name="show, sh")(show)
app.command(name="session, se")(session)
app.command(name="replay, r")(replay)
app.command(name="trackers, tr")(trackers)
app.command(name="palette, p")(palette)


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output",
        ),
    ] = False,
    no_color: Annotated[
        bool,
        typer.Option(
            "--no-color",
            help="Render the grid without tracker colors",
        ),
    ] = False,
) -> None:
    """
    yeardots - a dot for every day of the year

    Global options that apply to all commands.
    """
    if no_header:
        view_state.set_show_header(False)
    if no_color:
        view_state.set_use_color(False)


def run() -> None:
    app()
