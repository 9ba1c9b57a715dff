"""
Unit tests for cadence formatting and validation.
"""

from datetime import datetime, timedelta, timezone

import pytest

from storytime.utils.cron_utils import build_trigger, format_cadence, is_valid_cadence


class TestFormatCadence:
    def test_weekdays(self):
        assert format_cadence("0 9 * * 1-5") == "9:00 on Weekdays"

    def test_weekends(self):
        assert format_cadence("30 10 * * 0,6") == "10:30 on Weekends"

    def test_multiple_hours(self):
        assert format_cadence("15 8,20 * * 1-5") == "8:15, 20:15 on Weekdays"

    def test_other_day_of_week_is_shown_raw(self):
        assert format_cadence("0 9 * * 1") == "9:00 on 1"

    def test_daily_returns_cadence_unchanged(self):
        assert format_cadence("0 9 * * *") == "0 9 * * *"

    def test_every_hour_returns_cadence_unchanged(self):
        assert format_cadence("0 * * * 1-5") == "0 * * * 1-5"

    @pytest.mark.parametrize("cadence", ["", "0 9 * *", "0 9 * * 1-5 2026", "@daily"])
    def test_unrecognised_shapes_return_unchanged(self, cadence):
        assert format_cadence(cadence) == cadence


class TestValidation:
    def test_valid_cadence(self):
        assert is_valid_cadence("0 9 * * 1-5") is True

    @pytest.mark.parametrize("cadence", ["", "not a cron", "61 9 * * *", "0 9 * *"])
    def test_invalid_cadence(self, cadence):
        assert is_valid_cadence(cadence) is False

    def test_build_trigger_raises_value_error(self):
        with pytest.raises(ValueError):
            build_trigger("0 25 * * *")


def _fire_weekdays(cadence: str, count: int = 14) -> set[int]:
    """Python weekdays (0 = Monday) of the next ``count`` fires."""
    trigger = build_trigger(cadence, timezone="UTC")
    now = datetime(2026, 10, 17, 12, 0, tzinfo=timezone.utc)  # Saturday
    previous = None
    weekdays = set()
    for _ in range(count):
        fire = trigger.get_next_fire_time(previous, now)
        weekdays.add(fire.weekday())
        previous = fire
        now = fire + timedelta(seconds=1)
    return weekdays


class TestTriggerDays:
    """Day-of-week uses cron numbering, 0 and 7 being Sunday."""

    def test_weekdays_fire_monday_to_friday(self):
        assert _fire_weekdays("0 9 * * 1-5") == {0, 1, 2, 3, 4}

    def test_weekends_fire_saturday_and_sunday(self):
        assert _fire_weekdays("30 10 * * 0,6") == {5, 6}

    def test_seven_is_sunday(self):
        assert is_valid_cadence("0 9 * * 7") is True
        assert _fire_weekdays("0 9 * * 7") == {6}

    def test_range_ending_on_seven(self):
        assert _fire_weekdays("0 9 * * 5-7") == {4, 5, 6}

    def test_range_from_zero_to_seven(self):
        assert _fire_weekdays("0 9 * * 0-7") == {0, 1, 2, 3, 4, 5, 6}

    def test_day_names(self):
        assert _fire_weekdays("0 9 * * mon,wed") == {0, 2}

    def test_step(self):
        assert _fire_weekdays("0 9 * * */2") == {6, 1, 3, 5}

    def test_every_day(self):
        assert _fire_weekdays("0 9 * * *") == {0, 1, 2, 3, 4, 5, 6}

    def test_single_monday_first_fire(self):
        trigger = build_trigger("0 9 * * 1", timezone="UTC")
        now = datetime(2026, 10, 17, 12, 0, tzinfo=timezone.utc)
        assert trigger.get_next_fire_time(None, now) == datetime(
            2026, 10, 19, 9, 0, tzinfo=timezone.utc
        )

    @pytest.mark.parametrize(
        "cadence", ["0 9 * * 8", "0 9 * * 5-2", "0 9 * * 1/0", "0 9 * * 1/", "0 9 * * xyz"]
    )
    def test_invalid_day_of_week(self, cadence):
        assert is_valid_cadence(cadence) is False
