import logging
from pathlib import Path

import pytest
import yaml
from rich.logging import RichHandler

from yeardots import configuration
from yeardots.cleanup import flush
from yeardots.initialize import initialize
from yeardots.logger import setup_logging
from yeardots.repository.configuration import (
    CONFIGURATION_REPO,
    ConfigurationRepository,
)
from yeardots.view import state as view_state


def test_defaults_without_config_file(temp_config_path: Path):
    repo = ConfigurationRepository()

    assert repo.get_config() == configuration.get_default_configuration()
    assert not (temp_config_path / "config.yaml").exists()


def test_missing_settings_are_filled_from_defaults(temp_config_path: Path):
    temp_config_path.mkdir(parents=True)
    (temp_config_path / "config.yaml").write_text("grid_columns: 7\n")

    config = ConfigurationRepository().get_config()

    assert config["grid_columns"] == 7
    assert config["initial_tracker"] == "year"
    assert config["log_level"] == "WARNING"


def test_empty_config_file_means_defaults(temp_config_path: Path):
    temp_config_path.mkdir(parents=True)
    (temp_config_path / "config.yaml").write_text("")

    assert (
        ConfigurationRepository().get_config()
        == configuration.get_default_configuration()
    )


def test_non_mapping_config_file_is_rejected(temp_config_path: Path):
    temp_config_path.mkdir(parents=True)
    (temp_config_path / "config.yaml").write_text("- a\n- list\n")

    with pytest.raises(ValueError, match="not a mapping"):
        ConfigurationRepository().get_config()


def test_get_config_returns_a_copy():
    repo = ConfigurationRepository()
    repo.get_config()["grid_columns"] = 3

    assert repo.get_config()["grid_columns"] == 28


def test_flush_writes_only_when_dirty(temp_config_path: Path):
    repo = ConfigurationRepository()
    assert repo.flush() is False

    repo.update_config(use_color=False, log_level="DEBUG")

    assert repo.flush() is True
    assert repo.flush() is False

    written = yaml.safe_load((temp_config_path / "config.yaml").read_text())
    assert written["use_color"] is False
    assert written["log_level"] == "DEBUG"
    assert written["show_header"] is True


def test_cleanup_flushes_pending_changes(temp_config_path: Path):
    CONFIGURATION_REPO.update_config(grid_columns=10)

    flush()

    written = yaml.safe_load((temp_config_path / "config.yaml").read_text())
    assert written["grid_columns"] == 10


def test_initialize_creates_config_and_applies_it(temp_config_path: Path):
    initialize()

    config_file = temp_config_path / "config.yaml"
    assert config_file.is_file()
    assert yaml.safe_load(config_file.read_text()) == (
        configuration.get_default_configuration()
    )
    assert view_state.get_show_header() is True


def test_initialize_keeps_existing_config(temp_config_path: Path):
    temp_config_path.mkdir(parents=True)
    (temp_config_path / "config.yaml").write_text(
        "show_header: false\nuse_color: false\nlog_level: DEBUG\n"
    )

    initialize()

    assert view_state.get_show_header() is False
    assert view_state.get_use_color() is False
    assert logging.getLogger("yeardots").level == logging.DEBUG


def test_setup_logging_installs_single_rich_handler():
    setup_logging("INFO")
    setup_logging("ERROR")

    package_logger = logging.getLogger("yeardots")
    assert len(package_logger.handlers) == 1
    assert isinstance(package_logger.handlers[0], RichHandler)
    assert package_logger.level == logging.ERROR
    assert package_logger.propagate is False
