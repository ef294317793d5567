"""Month grid layout."""

from datetime import date, datetime

from mavera_hall.calendar_grid import (
    build_month_grid,
    days_in_month,
    group_by_day,
    month_bounds,
    month_weeks,
    parse_month,
    shift_month,
    starting_day,
    weekday_names,
)


class TestMonthGrid:

    def test_leap_february_starts_on_thursday(self):
        """February 2024 begins on a Thursday and has 29 days."""
        feb = date(2024, 2, 1)
        assert starting_day(feb) == 4
        assert days_in_month(2024, 2) == 29

        cells = build_month_grid(feb, pad_last_week=False)
        assert cells[:4] == [None] * 4
        assert cells[4] == date(2024, 2, 1)
        assert cells[-1] == date(2024, 2, 29)
        assert len(cells) == 33

    def test_padded_grid_fills_whole_weeks(self):
        cells = build_month_grid(date(2024, 2, 15))
        assert len(cells) == 35
        assert cells[-2:] == [None, None]

    def test_month_starting_on_sunday_has_no_leading_blanks(self):
        # 1 September 2024 was a Sunday
        cells = build_month_grid(date(2024, 9, 1))
        assert cells[0] == date(2024, 9, 1)

    def test_weeks_are_seven_cells(self):
        weeks = month_weeks(date(2024, 3, 1))
        assert all(len(week) == 7 for week in weeks)
        days = [cell for week in weeks for cell in week if cell]
        assert len(days) == 31


class TestMonthNavigation:

    def test_shift_across_years(self):
        assert shift_month(date(2024, 1, 20), -1) == date(2023, 12, 1)
        assert shift_month(date(2024, 11, 1), 2) == date(2025, 1, 1)
        assert shift_month(date(2024, 5, 1), 12) == date(2025, 5, 1)

    def test_parse_month(self):
        default = date(2024, 6, 18)
        assert parse_month("2025-02", default) == date(2025, 2, 1)
        assert parse_month("2025-13", default) == date(2024, 6, 1)
        assert parse_month("", default) == date(2024, 6, 1)
        assert parse_month(None, default) == date(2024, 6, 1)

    def test_month_bounds(self):
        assert month_bounds(date(2024, 12, 9)) == (date(2024, 12, 1), date(2025, 1, 1))


def test_group_by_day_accepts_datetimes():
    items = [datetime(2024, 5, 1, 9), datetime(2024, 5, 1, 18), datetime(2024, 5, 2, 10)]
    grouped = group_by_day(items, key=lambda dt: dt)
    assert len(grouped[date(2024, 5, 1)]) == 2
    assert len(grouped[date(2024, 5, 2)]) == 1


def test_weekday_names_are_sunday_first():
    assert weekday_names("en")[0] == "Sun"
    assert weekday_names("ar")[0] == "أحد"
    assert weekday_names("xx") == weekday_names("en")


def test_group_by_day_spreads_overnight_items():
    late = (datetime(2024, 5, 31, 20), datetime(2024, 6, 1, 3))
    to_midnight = (datetime(2024, 5, 30, 18), datetime(2024, 5, 31, 0))
    grouped = group_by_day([late, to_midnight], key=lambda s: s[0], end=lambda s: s[1])

    assert grouped[date(2024, 5, 31)] == [late]
    assert grouped[date(2024, 6, 1)] == [late]
    assert grouped[date(2024, 5, 30)] == [to_midnight]
