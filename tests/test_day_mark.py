"""Tests for the day-mark store."""

import pytest

from yeardots.repository.day_mark import DayMarkStore, is_valid_day


class TestSpecialDays:
    def test_set_then_read_back(self, store: DayMarkStore):
        store.set_special_color(45, "#86efac")

        assert store.is_special(45)
        assert store.special_color_of(45) == "#86efac"

    @pytest.mark.parametrize("color", ["#86efac", "#fb923c", "anything"])
    def test_any_non_null_color_is_stored_exactly(self, store: DayMarkStore, color):
        store.set_special_color(10, color)
        assert store.special_color_of(10) == color

    def test_overwrite(self, store: DayMarkStore):
        store.set_special_color(3, "#86efac")
        store.set_special_color(3, "#fcd34d")
        assert store.special_color_of(3) == "#fcd34d"

    def test_null_removes_the_key(self, store: DayMarkStore):
        store.set_special_color(45, "#86efac")
        store.set_special_color(45, None)

        assert not store.is_special(45)
        assert store.special_color_of(45) is None
        assert 45 not in store.special_days()

    def test_removing_absent_day_is_noop(self, store: DayMarkStore):
        store.set_special_color(99, None)
        assert store.special_days() == {}

    @pytest.mark.parametrize("day", [0, -1, True, "45", 4.5])
    def test_invalid_days_are_ignored(self, store: DayMarkStore, day):
        store.set_special_color(day, "#86efac")
        assert store.special_days() == {}

    def test_special_days_returns_a_copy(self, store: DayMarkStore):
        store.set_special_color(1, "#86efac")
        store.special_days()[2] = "#fcd34d"
        assert store.special_days() == {1: "#86efac"}


class TestCheckedDays:
    def test_toggle_returns_new_membership(self, store: DayMarkStore):
        assert store.toggle_checked("workout", 45) is True
        assert store.is_checked("workout", 45)
        assert store.toggle_checked("workout", 45) is False
        assert not store.is_checked("workout", 45)

    @pytest.mark.parametrize("tracker_id", ["workout", "better"])
    @pytest.mark.parametrize("day", [1, 45, 365])
    def test_double_toggle_restores_membership(
        self, store: DayMarkStore, tracker_id, day
    ):
        store.toggle_checked(tracker_id, 7)
        before = store.is_checked(tracker_id, day)

        store.toggle_checked(tracker_id, day)
        store.toggle_checked(tracker_id, day)

        assert store.is_checked(tracker_id, day) == before

    def test_trackers_are_independent(self, store: DayMarkStore):
        store.toggle_checked("workout", 10)

        assert store.is_checked("workout", 10)
        assert not store.is_checked("better", 10)
        assert store.checked_count("better") == 0

    def test_checked_count(self, store: DayMarkStore):
        for day in (1, 2, 3):
            store.toggle_checked("workout", day)
        store.toggle_checked("workout", 2)

        assert store.checked_count("workout") == 2
        assert store.checked_days("workout") == {1, 3}

    def test_free_form_tracker_cannot_hold_checked_days(self, store: DayMarkStore):
        assert store.toggle_checked("year", 45) is False
        assert not store.is_checked("year", 45)
        assert store.checked_count("year") == 0

    def test_unknown_tracker_is_noop(self, store: DayMarkStore):
        assert store.toggle_checked("reading", 45) is False
        assert store.checked_count("reading") == 0

    def test_invalid_day_is_noop(self, store: DayMarkStore):
        assert store.toggle_checked("workout", 0) is False
        assert store.checked_count("workout") == 0

    def test_unknown_day_is_not_checked(self, store: DayMarkStore):
        assert not store.is_checked("workout", 200)


class TestClear:
    def test_clear_empties_everything(self, store: DayMarkStore):
        store.set_special_color(1, "#86efac")
        store.toggle_checked("workout", 1)

        store.clear()

        assert store.special_days() == {}
        assert store.checked_count("workout") == 0


def test_is_valid_day():
    assert is_valid_day(1)
    assert not is_valid_day(0)
    assert not is_valid_day(False)
    assert not is_valid_day(None)
