"""Tests for sanitizer.py: literal pattern escaping."""

from __future__ import annotations

import re
import string

import pytest

from entity_search.application.search.sanitizer import (
    REGEX_METACHARACTERS,
    compile_pattern,
    sanitize,
)


class TestSanitize:
    """Tests for sanitize()."""

    def test_empty_input(self):
        assert sanitize("") == ""

    def test_none_input(self):
        assert sanitize(None) == ""

    def test_plain_text_unchanged(self):
        assert sanitize("Apple Inc") == "Apple Inc"

    @pytest.mark.parametrize("char", sorted(REGEX_METACHARACTERS))
    def test_each_metacharacter_escaped(self, char):
        assert sanitize(char) == "\\" + char

    def test_mixed_input(self):
        assert sanitize("C++ (beta)") == r"C\+\+ \(beta\)"

    def test_backslash_escaped_once(self):
        assert sanitize("a\\b") == "a\\\\b"

    def test_non_metacharacters_untouched(self):
        """Characters outside the metacharacter set pass through."""
        assert sanitize("a-b #1 & <c>") == "a-b #1 & <c>"

    def test_printable_ascii_matches_itself(self):
        """sanitize(s) used as a regex always matches s literally."""
        samples = [
            string.printable.strip(),
            string.punctuation,
            "price: $5.00 (approx.)",
            "[draft] a|b ^start end$",
            "{x}*?+",
        ]
        for text in samples:
            match = re.search(sanitize(text), text)
            assert match is not None
            assert match.group(0) == text

    def test_no_unescaped_metacharacters(self):
        escaped = sanitize(string.punctuation)
        # Strip escape pairs; no metacharacter may remain
        remainder = re.sub(r"\\.", "", escaped)
        assert not set(remainder) & REGEX_METACHARACTERS


class TestCompilePattern:
    """Tests for compile_pattern()."""

    def test_empty_pattern_returns_none(self):
        assert compile_pattern("") is None

    def test_case_insensitive(self):
        compiled = compile_pattern(sanitize("APP"))
        assert compiled.search("apple") is not None
