"""Tests for generic parsing helpers."""

from __future__ import annotations

import pytest

from scrolldown.utils.parsing import parse_float


class TestParseFloat:
    """Tests for parse_float."""

    def test_parses_numbers(self):
        assert parse_float("11") == 11.0
        assert parse_float("04.5") == 4.5
        assert parse_float(7) == 7.0

    @pytest.mark.parametrize("value", [None, "", "-", "abc", "nan", "inf", "-inf"])
    def test_missing_or_invalid(self, value):
        assert parse_float(value) is None

    @pytest.mark.parametrize("value", [" 11", "11 ", "\t5", "1_1", "1_000.5"])
    def test_rejects_padding_and_digit_separators(self, value):
        assert parse_float(value) is None
