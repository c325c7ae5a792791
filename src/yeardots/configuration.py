# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Literal, TypedDict

import platformdirs

APP_NAME = "yeardots"

CONFIG_PATH: Path = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH: Path = CONFIG_PATH / "config.yaml"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class Configuration(TypedDict):
    show_header: bool
    use_color: bool
    grid_columns: int  # Cells per rendered grid row
    initial_tracker: str  # Tracker id that is active at start
    log_level: LogLevel


def get_default_configuration() -> Configuration:
    return {
        "show_header": True,
        "use_color": True,
        "grid_columns": 28,
        "initial_tracker": "year",
        "log_level": "WARNING",
    }


def set_config_path(config_path: Path) -> None:
    """Point the application at a different configuration directory."""
    global CONFIG_PATH, APP_CONFIG_PATH

    CONFIG_PATH = config_path
    APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"
