"""Tests for content escaping and link derivation."""

import json

from newsroom.core.content_processor import escape_json_string, format_link


class TestEscapeJsonString:
    def test_escapes_each_special_character(self):
        assert escape_json_string("\\") == "\\\\"
        assert escape_json_string('"') == '\\"'
        assert escape_json_string("/") == "\\/"
        assert escape_json_string("\b") == "\\b"
        assert escape_json_string("\f") == "\\f"
        assert escape_json_string("\n") == "\\n"
        assert escape_json_string("\r") == "\\r"
        assert escape_json_string("\t") == "\\t"

    def test_plain_text_unchanged(self):
        assert escape_json_string("Hello, мир! 123") == "Hello, мир! 123"

    def test_backslash_not_double_escaped(self):
        assert escape_json_string('a\\"b') == 'a\\\\\\"b'

    def test_reverse_rule_restores_original(self):
        original = 'He said "hi"\\ then\nleft at 10/11\ttoday\r\f\b'
        escaped = escape_json_string(original)
        assert "\n" not in escaped
        assert json.loads(f'"{escaped}"') == original


class TestFormatLink:
    def test_slug_with_id(self):
        assert format_link("Hello, World!", 42) == "hello-world-42"

    def test_deterministic(self):
        assert format_link("Budget 2025 approved", 3) == format_link("Budget 2025 approved", 3)

    def test_non_latin_title_transliterated(self):
        link = format_link("Новости спорта", 5)
        assert link.endswith("-5")
        assert link != "5"

    def test_empty_slug_falls_back_to_id(self):
        assert format_link("!!!", 9) == "9"

    def test_long_title_truncated(self):
        link = format_link("word " * 60, 12)
        assert link.endswith("-12")
        assert len(link) <= 80 + len("-12")
