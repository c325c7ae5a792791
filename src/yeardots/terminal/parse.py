# SPDX-License-Identifier: MIT

import re
from typing import Literal, Optional, TypedDict, Union

import typer

from yeardots.color import find_palette_color

CommandName = Literal[
    "press",
    "release",
    "leave",
    "tap",
    "hold",
    "color",
    "remove",
    "close",
    "switch",
    "wait",
    "reset",
    "show",
    "help",
    "quit",
]

DAY_COMMANDS = ("press", "release", "leave", "tap", "hold")
BARE_COMMANDS = ("remove", "close", "reset", "show", "help", "quit")

COMMAND_ALIASES = {
    "down": "press",
    "up": "release",
    "click": "tap",
    "long": "hold",
    "select": "color",
    "sw": "switch",
    "sleep": "wait",
    "exit": "quit",
    "q": "quit",
    "?": "help",
}


class Command(TypedDict):
    name: CommandName
    day: Optional[int]
    color: Optional[str]
    ms: Optional[int]
    target: Optional[Union[int, str]]


class ScriptParseError(ValueError):
    """Raised when a gesture script line cannot be parsed."""

    def __init__(self, message: str, line_number: Optional[int] = None) -> None:
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


def parse_day_value(value: str) -> int:
    if not re.match(r"^\d+$", value):
        raise ValueError(f"Day must be a positive integer, got '{value}'")
    day = int(value)
    if day < 1:
        raise ValueError(f"Day must be a positive integer, got '{value}'")
    return day


def parse_day(day_param: Optional[Union[str, int]]) -> Optional[int]:
    """Typer-facing day parser."""
    if day_param is None:
        return None
    try:
        return parse_day_value(str(day_param))
    except ValueError as e:
        raise typer.BadParameter(str(e))


def parse_duration_ms(value: str) -> int:
    match = re.match(r"^(\d+)(ms|s)?$", value)
    if not match:
        raise ValueError(f"Duration must look like 400, 400ms or 2s, got '{value}'")
    amount = int(match.group(1))
    if match.group(2) == "s":
        return amount * 1000
    return amount


def parse_color(value: str) -> str:
    color = find_palette_color(value)
    if color is None:
        raise ValueError(f"Unknown color '{value}'")
    return color["value"]


def parse_command(line: str, line_number: Optional[int] = None) -> Optional[Command]:
    """
    Parse one gesture command. Blank lines and '#' comments yield None.

    Grammar:
        press|release|leave|tap DAY
        hold DAY [DURATION]
        color NAME|#HEX
        switch INDEX|TRACKER_ID
        wait DURATION
        remove | close | reset | show | help | quit
    """
    line = line.strip()
    if line.startswith("#"):
        return None
    # Hex colors keep their "#", comments need whitespace after it
    line = re.sub(r"\s#(\s.*)?$", "", line).strip()
    if not line:
        return None

    parts = line.split()
    name = COMMAND_ALIASES.get(parts[0].lower(), parts[0].lower())
    args = parts[1:]

    command: Command = {
        "name": name,  # type: ignore[typeddict-item]
        "day": None,
        "color": None,
        "ms": None,
        "target": None,
    }

    try:
        if name in DAY_COMMANDS:
            if name == "hold":
                __expect_args(name, args, 1, 2)
                if len(args) == 2:
                    command["ms"] = parse_duration_ms(args[1])
            else:
                __expect_args(name, args, 1, 1)
            command["day"] = parse_day_value(args[0])
        elif name == "color":
            __expect_args(name, args, 1, 1)
            command["color"] = parse_color(args[0])
        elif name == "switch":
            __expect_args(name, args, 1, 1)
            target = args[0]
            command["target"] = int(target) if target.isdigit() else target
        elif name == "wait":
            __expect_args(name, args, 1, 1)
            command["ms"] = parse_duration_ms(args[0])
        elif name in BARE_COMMANDS:
            __expect_args(name, args, 0, 0)
        else:
            raise ValueError(f"Unknown command '{parts[0]}'")
    except ValueError as e:
        raise ScriptParseError(str(e), line_number) from e

    return command


def parse_script(text: str) -> list[Command]:
    commands: list[Command] = []
    for line_number, line in enumerate(text.splitlines(), start=1):
        command = parse_command(line, line_number)
        if command is not None:
            commands.append(command)
    return commands


def __expect_args(name: str, args: list[str], minimum: int, maximum: int) -> None:
    if minimum <= len(args) <= maximum:
        return
    if minimum == maximum:
        expected = f"{minimum} argument{'s' if minimum != 1 else ''}"
    else:
        expected = f"{minimum} to {maximum} arguments"
    raise ValueError(f"'{name}' takes {expected}, got {len(args)}")
