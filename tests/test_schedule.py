# tests/test_schedule.py

from datetime import date, timedelta

from getfit.services import schedule
from getfit.services.schedule import (
    WORKOUT_TEMPLATES,
    clamp_offset,
    days_in_month,
    workout_for_date,
    workout_for_weekday,
)

TODAY = date(2026, 10, 19)  # Monday


def test_seven_templates_in_cycle_order():
    names = [t.name for t in WORKOUT_TEMPLATES]
    assert names == [
        "Chest + Shoulders",
        "Back + Biceps",
        "Legs",
        "Rest + Stretching",
        "Back + Core",
        "Cardio",
        "Cardio + Core",
    ]
    assert [t.index for t in WORKOUT_TEMPLATES] == list(range(7))
    assert [t.is_rest for t in WORKOUT_TEMPLATES].count(True) == 1


def test_core_maps_to_abs():
    back_core = WORKOUT_TEMPLATES[4]
    assert [m.id for m in back_core.muscles] == ["back", "abs"]
    assert back_core.muscles[1].label == "Core"
    assert back_core.muscles[1].muscle_id == 12


def test_today_uses_offset():
    for offset in range(7):
        assert workout_for_date(TODAY, offset, TODAY).index == offset


def test_future_and_past_dates_shift_with_day_difference():
    assert workout_for_date(TODAY + timedelta(days=1), 0, TODAY).name == "Back + Biceps"
    assert workout_for_date(TODAY + timedelta(days=3), 0, TODAY).is_rest
    assert workout_for_date(TODAY - timedelta(days=1), 0, TODAY).name == "Cardio + Core"
    assert workout_for_date(TODAY - timedelta(days=1), 2, TODAY).name == "Back + Biceps"


def test_cycle_repeats_every_seven_days():
    for diff in range(-30, 30):
        day = TODAY + timedelta(days=diff)
        assert workout_for_date(day, 5, TODAY) == workout_for_date(day + timedelta(days=7), 5, TODAY)


def test_far_past_dates_stay_in_range():
    day = TODAY - timedelta(days=1000)
    assert workout_for_date(day, 0, TODAY).index == (0 - 1000) % 7


def test_day_difference_crosses_dst_and_year_boundaries():
    today = date(2026, 3, 28)
    assert workout_for_date(date(2026, 3, 30), 0, today).index == 2
    assert workout_for_date(date(2027, 1, 1), 0, date(2026, 12, 31)).index == 1


def test_default_today_comes_from_configured_timezone(monkeypatch):
    monkeypatch.setattr(schedule, "today", lambda: TODAY)
    assert workout_for_date(TODAY, 3).is_rest


def test_clamp_offset():
    assert clamp_offset(-4) == 0
    assert clamp_offset(3) == 3
    assert clamp_offset(12) == 6


def test_weekday_mapping():
    monday = date(2026, 10, 19)
    assert workout_for_weekday(monday).name == "Chest + Shoulders"
    assert workout_for_weekday(monday + timedelta(days=3)).name == "Rest + Stretching"
    assert workout_for_weekday(monday + timedelta(days=6)).name == "Cardio + Core"


def test_calendar_grid_has_42_days_starting_on_sunday():
    days = days_in_month(2026, 10)
    assert len(days) == 42
    assert days[0] == date(2026, 9, 27)
    assert days[0].weekday() == 6
    assert days[4] == date(2026, 10, 1)
    assert days[-1] == date(2026, 11, 7)
    assert all(b - a == timedelta(days=1) for a, b in zip(days, days[1:]))


def test_calendar_grid_month_starting_on_sunday():
    # February 2026 starts on a Sunday
    days = days_in_month(2026, 2)
    assert days[0] == date(2026, 2, 1)
    assert days[-1] == date(2026, 3, 14)


def test_names():
    assert schedule.day_name(0) == "Sun"
    assert schedule.full_day_name(6) == "Saturday"
    assert schedule.month_name(9) == "October"
    assert schedule.sunday_index(TODAY) == 1


def test_last_n_days():
    days = schedule.last_n_days(30, TODAY)
    assert len(days) == 30
    assert days[0] == date(2026, 9, 20)
    assert days[-1] == TODAY
