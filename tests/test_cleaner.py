"""Tests for lrc_decoder/cleaner.py"""

import unittest

from lrc_decoder.cleaner import ENHANCED_TAG_RE, clean_line


class TestEnhancedTagPattern(unittest.TestCase):
    def test_matches_centiseconds(self):
        self.assertIsNotNone(ENHANCED_TAG_RE.search("<00:34.20>"))

    def test_matches_milliseconds(self):
        self.assertIsNotNone(ENHANCED_TAG_RE.search("<00:34.200>"))

    def test_ignores_html_like_text(self):
        self.assertIsNone(ENHANCED_TAG_RE.search("<b>bold</b>"))


class TestCleanLine(unittest.TestCase):
    def test_strips_leading_timestamp(self):
        self.assertEqual(clean_line("[00:12.00] Line 1 lyrics"), "Line 1 lyrics")

    def test_strips_enhanced_markup(self):
        self.assertEqual(clean_line("[00:29.02] Line <00:34.20>lyrics"), "Line lyrics")

    def test_strips_every_enhanced_tag(self):
        line = "[00:01.00]<00:01.00>One <00:01.50>two <00:02.000>three"
        self.assertEqual(clean_line(line), "One two three")

    def test_only_first_bracket_token_removed(self):
        self.assertEqual(clean_line("[00:01.00][00:05.00] chorus"), "[00:05.00] chorus")

    def test_timestamp_without_text(self):
        self.assertEqual(clean_line("[00:39.00]"), "")

    def test_no_bracket_returns_whole_line_trimmed(self):
        self.assertEqual(clean_line("   plain words  "), "plain words")

    def test_idempotent_on_plain_text(self):
        text = "Already clean text"
        self.assertEqual(clean_line(clean_line(text)), text)

    def test_long_timestamp(self):
        self.assertEqual(clean_line("[1:00:00.000]  late line "), "late line")


if __name__ == "__main__":
    unittest.main()
