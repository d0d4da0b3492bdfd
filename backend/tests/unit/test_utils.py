"""Unit tests for shared/utils.py helpers."""

import re
import unittest

from shared.utils import markdown_to_html, numeric_id, sanitize_email, utc_now_iso


class TestSanitizeEmail(unittest.TestCase):
    """Tests for sanitize_email() function."""

    def test_plain_address_unchanged(self):
        self.assertEqual(sanitize_email("john@example.com"), "john@example.com")

    def test_plus_tag_removed(self):
        self.assertEqual(sanitize_email("john+work@example.com"), "john@example.com")

    def test_multiple_plus_parts_removed(self):
        self.assertEqual(sanitize_email("john+a+b@example.com"), "john@example.com")

    def test_missing_email(self):
        self.assertEqual(sanitize_email(None), "")
        self.assertEqual(sanitize_email(""), "")

    def test_not_an_address(self):
        self.assertEqual(sanitize_email("not-an-email"), "")


class TestMarkdownToHtml(unittest.TestCase):
    """Tests for markdown_to_html() function."""

    def test_renders_emphasis(self):
        self.assertEqual(markdown_to_html("**bold**"), "<p><strong>bold</strong></p>")

    def test_renders_links(self):
        html = markdown_to_html("[docs](https://example.com)")
        self.assertIn('<a href="https://example.com">docs</a>', html)

    def test_empty_text(self):
        self.assertEqual(markdown_to_html(""), "")
        self.assertEqual(markdown_to_html(None), "")


class TestNumericId(unittest.TestCase):
    """Tests for numeric_id() function."""

    def test_digit_strings_parsed(self):
        self.assertEqual(numeric_id("12"), 12)
        self.assertEqual(numeric_id(34), 34)

    def test_zero_kept(self):
        self.assertEqual(numeric_id("0"), 0)

    def test_non_numeric_kept(self):
        self.assertEqual(numeric_id("abc"), "abc")

    def test_empty_values(self):
        self.assertIsNone(numeric_id(None))
        self.assertIsNone(numeric_id(""))


class TestUtcNowIso(unittest.TestCase):
    """Tests for utc_now_iso() function."""

    def test_format(self):
        self.assertRegex(
            utc_now_iso(), re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$")
        )


if __name__ == "__main__":
    unittest.main()
