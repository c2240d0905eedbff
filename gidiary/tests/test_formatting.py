import unittest
from datetime import datetime, timedelta, timezone
from gidiary.utilities.date_time import from_iso_string, to_iso_string
from gidiary.utilities.formatting import (
    format_carb_rate,
    format_carbs,
    format_duration,
    format_duration_minutes,
)


class TestFormatting(unittest.TestCase):

    def test_format_duration(self):
        self.assertEqual(format_duration(3661), "1:01:01")
        self.assertEqual(format_duration(0), "0:00:00")
        self.assertEqual(format_duration(59), "0:00:59")
        self.assertEqual(format_duration(36000), "10:00:00")

    def test_format_carbs(self):
        self.assertEqual(format_carbs(30), "30g")
        self.assertEqual(format_carbs(30.0), "30g")
        self.assertEqual(format_carbs(27.5), "27.5g")

    def test_format_carb_rate(self):
        self.assertEqual(format_carb_rate(90), "90g/h")
        self.assertEqual(format_carb_rate(62.5), "62.5g/h")

    def test_format_duration_minutes(self):
        self.assertEqual(format_duration_minutes(0), "0min")
        self.assertEqual(format_duration_minutes(45), "45min")
        self.assertEqual(format_duration_minutes(90), "1h 30min")
        self.assertEqual(format_duration_minutes(120), "2h")


class TestIsoStrings(unittest.TestCase):

    def test_to_iso_string_is_utc_with_milliseconds(self):
        value = datetime(2025, 10, 24, 12, 0, 0, 123456, tzinfo=timezone(timedelta(hours=2)))
        self.assertEqual(to_iso_string(value), "2025-10-24T10:00:00.123Z")

    def test_naive_datetime_is_read_as_utc(self):
        self.assertEqual(to_iso_string(datetime(2025, 1, 2, 3, 4, 5)), "2025-01-02T03:04:05.000Z")

    def test_round_trip_keeps_the_instant(self):
        value = datetime(2024, 2, 29, 23, 59, 58, 987654, tzinfo=timezone.utc)
        parsed = from_iso_string(to_iso_string(value))
        self.assertEqual(parsed, value.replace(microsecond=987000))
        self.assertEqual(parsed.tzinfo, timezone.utc)

    def test_round_trip_at_year_boundaries(self):
        for year in (1, 999, 9999):
            value = datetime(year, 5, 6, 7, 8, 9, 123000, tzinfo=timezone.utc)
            text = to_iso_string(value)
            self.assertEqual(text[:5], f"{year:04d}-")
            self.assertEqual(from_iso_string(text), value)

    def test_short_and_long_fractions(self):
        self.assertEqual(from_iso_string("2025-10-24T10:00:00.1Z").microsecond, 100000)
        self.assertEqual(from_iso_string("2025-10-24T10:00:00.12345678+00:00").microsecond, 123456)

    def test_from_iso_string_with_offset(self):
        parsed = from_iso_string("2025-10-24T12:00:00+02:00")
        self.assertEqual(parsed, datetime(2025, 10, 24, 10, 0, tzinfo=timezone.utc))


if __name__ == '__main__':
    unittest.main()
