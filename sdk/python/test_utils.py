"""Unit tests for BlockNet utilities."""

import pytest

from blocknet_sdk.utils import Utils


class TestAmounts:
    """Tests for amount parsing and validation."""

    @pytest.mark.parametrize("raw,expected", [("5", 5.0), (" 2.5 ", 2.5), (3, 3.0), ("-5", -5.0)])
    def test_parse(self, raw, expected):
        assert Utils.parse_amount(raw) == expected

    @pytest.mark.parametrize("raw", ["abc", "", None, "nan", "inf", "-inf", True])
    def test_parse_rejects(self, raw):
        assert Utils.parse_amount(raw) is None

    @pytest.mark.parametrize("amount,ok", [(0.01, True), (0, False), (-1, False), (None, False)])
    def test_validate(self, amount, ok):
        assert Utils.validate_amount(amount) is ok

    def test_format_amount(self):
        assert Utils.format_amount(5.0) == "5"
        assert Utils.format_amount(2.5) == "2.5"


class TestFormatting:
    """Tests for display helpers."""

    def test_format_name(self):
        assert Utils.format_name("Alan") == "Alan"
        assert Utils.format_name("a" * 20, length=4) == "aaaa..."

    @pytest.mark.parametrize("seconds,text", [(5, "5s"), (120, "2m"), (7200, "2h"), (172800, "2d")])
    def test_seconds_to_readable(self, seconds, text):
        assert Utils.seconds_to_readable(seconds) == text
