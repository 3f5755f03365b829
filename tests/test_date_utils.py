import unittest
from datetime import date, datetime, timedelta, timezone

from movie_catalog.common.utils.date_utils import parse_release_date


class TestParseReleaseDate(unittest.TestCase):

    def test_date_only_string(self):
        self.assertEqual(parse_release_date("2021-10-22"), datetime(2021, 10, 22))

    def test_utc_designator(self):
        self.assertEqual(
            parse_release_date("2021-10-22T03:30:00Z"),
            datetime(2021, 10, 22, 3, 30),
        )

    def test_offset_is_normalized_to_utc(self):
        self.assertEqual(
            parse_release_date("2021-10-22T01:00:00-03:00"),
            datetime(2021, 10, 22, 4, 0),
        )

    def test_date_and_datetime_values(self):
        self.assertEqual(parse_release_date(date(2021, 10, 22)), datetime(2021, 10, 22))
        aware = datetime(2021, 10, 22, 12, tzinfo=timezone(timedelta(hours=2)))
        self.assertEqual(parse_release_date(aware), datetime(2021, 10, 22, 10))

    def test_invalid_values(self):
        with self.assertRaises(ValueError):
            parse_release_date("October 22nd")
        with self.assertRaises(ValueError):
            parse_release_date("Oct 22, 2021")
        with self.assertRaises(TypeError):
            parse_release_date(20211022)


if __name__ == '__main__':
    unittest.main()
