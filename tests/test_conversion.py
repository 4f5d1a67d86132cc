#!/usr/bin/env python3
"""
Tests for conversion previews (encode under the target, decode back).
"""

from charsetkit.encoding import convert, convert_encoding, decode, encode, preview


class TestConvert:

    def test_latin1_characters_survive_windows_1252(self):
        assert convert_encoding("héllo", "UTF-8", "WINDOWS-1252") == "héllo"

    def test_matches_save_and_reopen(self):
        text = "Ελληνικά and 中文"
        expected = decode(encode(text, "ISO-8859-7"), "ISO-8859-7").text
        assert convert(text, "UTF-8", "ISO-8859-7") == expected

    def test_from_label_is_ignored(self):
        text = "naïve café"
        assert convert(text, "GBK", "UTF-16BE") == convert(text, None, "UTF-16BE") == text

    def test_lossy_target_substitutes(self):
        assert convert("日本", "UTF-8", "WINDOWS-1252") == "&#26085;&#26412;"

    def test_unknown_target_uses_utf8(self):
        assert convert("ü", "UTF-8", "bogus") == "ü"


class TestPreview:

    def test_reports_target_and_length(self):
        result = preview("A", "UTF-8", "utf-16")
        assert result.encoding == "UTF-16LE"
        assert result.byte_length == 4
        assert result.text == "A"
        assert not result.lossy

    def test_reports_loss(self):
        result = preview("中文", "UTF-8", "KOI8-R")
        assert result.lossy
        assert result.encoding == "KOI8-R"
