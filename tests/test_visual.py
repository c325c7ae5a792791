"""Tests for per-day visual state resolution."""

from yeardots.repository.day_mark import DayMarkStore
from yeardots.repository.tracker import TrackerRegistry
from yeardots.service.visual import get_cell_visual, get_cell_visuals


class TestFreeFormCells:
    def test_special_day_wins_over_today(
        self, registry: TrackerRegistry, store: DayMarkStore
    ):
        store.set_special_color(45, "#fcd34d")

        cell = get_cell_visual(registry.get_tracker("year"), store, 45, 45)

        assert cell["kind"] == "special"
        assert cell["color"] == "#fcd34d"
        assert cell["opacity"] == 1
        assert cell["glow"] == "#fcd34d80"
        assert cell["is_today"]

    def test_today(self, registry: TrackerRegistry, store: DayMarkStore):
        cell = get_cell_visual(registry.get_tracker("year"), store, 45, 45)
        assert cell["kind"] == "today"
        assert cell["color"] == "#7dd3fc"

    def test_past_and_future(self, registry: TrackerRegistry, store: DayMarkStore):
        year = registry.get_tracker("year")

        past = get_cell_visual(year, store, 10, 45)
        future = get_cell_visual(year, store, 100, 45)

        assert past["kind"] == "past"
        assert past["opacity"] == 0.08
        assert past["glow"] is None
        assert future["kind"] == "future"
        assert future["opacity"] == 0.22

    def test_checked_days_do_not_show_on_free_form(
        self, registry: TrackerRegistry, store: DayMarkStore
    ):
        store.toggle_checked("workout", 10)
        cell = get_cell_visual(registry.get_tracker("year"), store, 10, 45)
        assert cell["kind"] == "past"


class TestHabitCells:
    def test_checked_uses_accent(self, registry: TrackerRegistry, store: DayMarkStore):
        store.toggle_checked("workout", 10)

        cell = get_cell_visual(registry.get_tracker("workout"), store, 10, 45)

        assert cell["kind"] == "checked"
        assert cell["color"] == "#86efac"
        assert cell["glow"] == "#86efac60"

    def test_today_unchecked(self, registry: TrackerRegistry, store: DayMarkStore):
        cell = get_cell_visual(registry.get_tracker("better"), store, 45, 45)
        assert cell["kind"] == "today"
        assert cell["opacity"] == 0.85

    def test_future_uses_dim_color(
        self, registry: TrackerRegistry, store: DayMarkStore
    ):
        workout = get_cell_visual(registry.get_tracker("workout"), store, 200, 45)
        better = get_cell_visual(registry.get_tracker("better"), store, 200, 45)

        assert workout["color"] == "#2e6e4a"
        assert better["color"] == "#5a3d7a"

    def test_special_days_do_not_show_on_habits(
        self, registry: TrackerRegistry, store: DayMarkStore
    ):
        store.set_special_color(10, "#fcd34d")
        cell = get_cell_visual(registry.get_tracker("workout"), store, 10, 45)
        assert cell["kind"] == "past"


def test_visuals_cover_every_day(registry: TrackerRegistry, store: DayMarkStore):
    cells = get_cell_visuals(registry.get_tracker("year"), store, 45, 365)

    assert len(cells) == 365
    assert [cell["day"] for cell in cells] == list(range(1, 366))
    assert sum(cell["is_today"] for cell in cells) == 1
