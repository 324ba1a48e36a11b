"""Tests for lrc_decoder/formatter.py and lrc_decoder/models.py"""

import json
import unittest

from lrc_decoder.formatter import format_json, format_text, get_formatter
from lrc_decoder.models import TimedInterval, format_ms, interval_to_dict


def _interval(start=12000, end=17200, text="Line 1 lyrics") -> TimedInterval:
    return TimedInterval(start_ms=start, end_ms=end, lines=(text,))


class TestTimedInterval(unittest.TestCase):
    def test_frozen(self):
        with self.assertRaises(AttributeError):
            _interval().start_ms = 0

    def test_to_dict(self):
        self.assertEqual(interval_to_dict(_interval()), {
            "start_ms": 12000,
            "end_ms": 17200,
            "lines": ["Line 1 lyrics"],
        })


class TestFormatMs(unittest.TestCase):
    def test_zero(self):
        self.assertEqual(format_ms(0), "0:00:00.000")

    def test_hours(self):
        self.assertEqual(format_ms(3723004), "1:02:03.004")

    def test_unknown(self):
        self.assertEqual(format_ms(-1), "?")


class TestFormatText(unittest.TestCase):
    def test_arrow_layout(self):
        self.assertEqual(format_text(_interval()), "0:00:12.000 --> 0:00:17.200: Line 1 lyrics")

    def test_unknown_end(self):
        self.assertEqual(format_text(_interval(end=-1)), "0:00:12.000 --> ?: Line 1 lyrics")


class TestFormatJson(unittest.TestCase):
    def test_valid_json(self):
        parsed = json.loads(format_json(_interval()))
        self.assertEqual(parsed["start_ms"], 12000)
        self.assertEqual(parsed["end_ms"], 17200)
        self.assertEqual(parsed["lines"], ["Line 1 lyrics"])

    def test_single_line_output(self):
        self.assertNotIn("\n", format_json(_interval()))

    def test_non_ascii_kept(self):
        self.assertIn("歌词", format_json(_interval(text="歌词")))


class TestGetFormatter(unittest.TestCase):
    def test_default_is_text(self):
        self.assertIs(get_formatter(), format_text)

    def test_json(self):
        self.assertIs(get_formatter("json"), format_json)


if __name__ == "__main__":
    unittest.main()
