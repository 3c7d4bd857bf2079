from datetime import date

import pytest

from courtcheck.core.timeutil import Interval, format_time, parse_interval, parse_iso_date, parse_time


class TestParseTime:
    def test_valid(self):
        assert parse_time("00:00") == 0
        assert parse_time("09:30") == 570
        assert parse_time("23:59") == 1439

    @pytest.mark.parametrize(
        "value",
        ["24:00", "12:60", "9:00", "0930", "", None, 930, "ab:cd", "09:00\n", "\uff10\uff19:\uff10\uff10"],
    )
    def test_invalid(self, value):
        with pytest.raises(ValueError):
            parse_time(value)

    def test_format_pads(self):
        assert format_time(0) == "00:00"
        assert format_time(570) == "09:30"
        assert format_time(1440) == "24:00"


class TestParseDate:
    def test_valid(self):
        assert parse_iso_date("2099-01-01") == date(2099, 1, 1)
        assert parse_iso_date("2024-02-29") == date(2024, 2, 29)

    @pytest.mark.parametrize("value", ["2023-02-29", "2025-13-01", "2025-1-01", "01/02/2025", "", None, "2099-01-01\n"])
    def test_invalid(self, value):
        with pytest.raises(ValueError):
            parse_iso_date(value)


class TestInterval:
    def test_touching_does_not_overlap(self):
        assert not Interval(600, 660).overlaps(Interval(660, 720))
        assert not Interval(660, 720).overlaps(Interval(600, 660))

    def test_one_minute_overlap(self):
        assert Interval(600, 661).overlaps(Interval(660, 720))

    def test_contained(self):
        assert Interval(600, 720).overlaps(Interval(630, 640))

    def test_label_and_minutes(self):
        interval = parse_interval("08:00", "22:00")
        assert interval.label() == "08:00-22:00"
        assert interval.minutes == 14 * 60

    def test_parse_interval_to_midnight(self):
        assert parse_interval("20:00", "24:00") == Interval(1200, 1440)

    def test_parse_interval_rejects_empty(self):
        with pytest.raises(ValueError):
            parse_interval("10:00", "10:00")
