#!/usr/bin/env python3
"""
Tests for encoding detection: BOM scan, strict UTF-8 validation and the
ordered trial-decode fallback.
"""

import pytest

from charsetkit.encoding import detect, detect_bom, TRIAL_CANDIDATES


class TestBomScan:
    """Test cases for byte order mark detection"""

    @pytest.mark.parametrize("data,expected", [
        (b"\xff\xfe\x00\x00A\x00\x00\x00", "UTF-32LE"),
        (b"\x00\x00\xfe\xff\x00\x00\x00A", "UTF-32BE"),
        (b"\xef\xbb\xbfhello", "UTF-8-BOM"),
        (b"\xff\xfeA\x00", "UTF-16LE"),
        (b"\xfe\xff\x00A", "UTF-16BE"),
    ])
    def test_bom_labels(self, data, expected):
        assert detect_bom(data) == expected
        assert detect(data) == expected

    def test_utf32_checked_before_utf16(self):
        assert detect(b"\xff\xfe\x00\x00") == "UTF-32LE"
        assert detect(b"\xff\xfe\x00") == "UTF-16LE"

    def test_no_bom(self):
        assert detect_bom(b"plain") is None
        assert detect_bom(b"") is None

    def test_utf8_bom_with_utf8_payload(self):
        data = b"\xef\xbb\xbf" + "héllo wörld".encode("utf-8")
        assert detect(data) == "UTF-8-BOM"


class TestUtf8Validation:

    def test_ascii_is_utf8(self):
        assert detect(b"Hello") == "UTF-8"

    def test_empty_buffer_is_utf8(self):
        assert detect(b"") == "UTF-8"

    def test_multibyte_utf8(self):
        assert detect("日本語のテキスト".encode("utf-8")) == "UTF-8"

    def test_accepts_bytearray(self):
        assert detect(bytearray(b"Hello")) == "UTF-8"


class TestTrialDecode:
    """Test cases for the ordered candidate fallback"""

    def test_candidate_order_is_fixed(self):
        assert TRIAL_CANDIDATES == (
            "GBK", "GB18030", "BIG5", "SHIFT_JIS",
            "EUC-JP", "EUC-KR", "WINDOWS-1251", "WINDOWS-1252",
        )

    def test_gbk_text_detected_as_gbk(self, gbk_text):
        data = gbk_text.encode("gbk")
        label = detect(data)
        assert label == "GBK"
        assert label != "UTF-8"

    def test_first_qualifying_candidate_wins(self):
        # Shift_JIS bytes that also form valid GBK pairs
        data = "日本語".encode("cp932")
        assert detect(data) == "GBK"

    def test_gbk_euro_sign_is_detected_as_gbk(self):
        data = "中文价格".encode("gbk") + b"\x80"
        assert detect(data) == "GBK"

    def test_truncated_multibyte_falls_through_to_cyrillic(self):
        # A trailing lead byte is incomplete in every CJK candidate
        assert detect(b"caf\xe9") == "WINDOWS-1251"

    def test_falls_back_to_utf8_when_nothing_qualifies(self):
        assert detect(b"caf\xe9", candidates=("GBK",)) == "UTF-8"

    def test_deterministic(self, gbk_text):
        data = gbk_text.encode("gbk")
        assert {detect(data) for _ in range(5)} == {"GBK"}
