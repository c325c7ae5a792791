import logging
from pathlib import Path
from typing import Callable, Iterator, Optional, Union

import pytest

from yeardots import configuration
from yeardots.engine.engine import TrackerEngine
from yeardots.engine.scheduler import ManualScheduler
from yeardots.repository.configuration import CONFIGURATION_REPO
from yeardots.repository.day_mark import DayMarkStore
from yeardots.repository.tracker import TrackerRegistry
from yeardots.time import fixed_day_clock
from yeardots.view import state as view_state

# A common (non-leap) year keeps the grid at 365 cells
YEAR = 2025

EngineFactory = Callable[..., TrackerEngine]


@pytest.fixture(autouse=True)
def temp_config_path(tmp_path: Path) -> Iterator[Path]:
    """Point the configuration at a temporary directory for every test."""
    original = configuration.CONFIG_PATH
    config_path = tmp_path / "config"
    configuration.set_config_path(config_path)
    CONFIGURATION_REPO.reload()
    yield config_path
    configuration.set_config_path(original)
    CONFIGURATION_REPO.reload()


@pytest.fixture(autouse=True)
def _reset_view_state() -> Iterator[None]:
    yield
    view_state.set_show_header(True)
    view_state.set_use_color(True)


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    yield
    package_logger = logging.getLogger("yeardots")
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True


@pytest.fixture
def registry() -> TrackerRegistry:
    return TrackerRegistry()


@pytest.fixture
def store(registry: TrackerRegistry) -> DayMarkStore:
    return DayMarkStore(registry)


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def make_engine(scheduler: ManualScheduler) -> EngineFactory:
    def factory(
        day: int = 45,
        initial_tracker: Union[int, str] = 0,
        year: int = YEAR,
        clock: Optional[Callable[[], int]] = None,
    ) -> TrackerEngine:
        return TrackerEngine(
            scheduler=scheduler,
            clock=clock if clock is not None else fixed_day_clock(day),
            initial_tracker=initial_tracker,
            year=year,
        )

    return factory


@pytest.fixture
def engine(make_engine: EngineFactory) -> TrackerEngine:
    return make_engine()
