import math
from decimal import Decimal

import pytest

from fieldguard import InvalidPatternError, is_float, is_int
from fieldguard.validation.core.utils import compile_pattern, is_blank, to_canonical_text, to_number


class TestNumberPredicates:
    @pytest.mark.parametrize(
        ["text", "expected"],
        [
            pytest.param("1", True, id="integer"),
            pytest.param("-1.25", True, id="negative fraction"),
            pytest.param("+0.5", True, id="positive sign"),
            pytest.param("3.", True, id="trailing point"),
            pytest.param(".5", False, id="leading point"),
            pytest.param("1.2.3", False, id="two points"),
            pytest.param("1e3", False, id="exponent"),
            pytest.param("", False, id="empty"),
            pytest.param("-", False, id="sign only"),
            pytest.param("\u0661\u0662", False, id="non ascii digits"),
            pytest.param("12\n", False, id="trailing newline"),
        ],
    )
    def test_is_float(self, text: str, expected: bool):
        assert is_float(text) is expected

    @pytest.mark.parametrize(
        ["text", "expected"],
        [
            pytest.param("42", True, id="integer"),
            pytest.param("-42", True, id="negative"),
            pytest.param("4.0", False, id="fraction"),
            pytest.param("4.", False, id="trailing point"),
            pytest.param("", False, id="empty"),
        ],
    )
    def test_is_int(self, text: str, expected: bool):
        assert is_int(text) is expected

    @pytest.mark.parametrize(
        ["char", "expected"],
        [
            pytest.param(" ", True, id="space"),
            pytest.param("\u00a0", True, id="no-break space"),
            pytest.param("\ufeff", True, id="byte order mark"),
            pytest.param("a", False, id="letter"),
        ],
    )
    def test_is_blank(self, char: str, expected: bool):
        assert is_blank(char) is expected


class TestCanonicalText:
    @pytest.mark.parametrize(
        ["value", "expected"],
        [
            pytest.param(None, "", id="absent"),
            pytest.param(" 12", " 12", id="text is kept"),
            pytest.param(12, "12", id="int"),
            pytest.param(-3.0, "-3", id="integral float"),
            pytest.param(0.1, "0.1", id="float"),
            pytest.param(1e-05, "0.00001", id="small float"),
            pytest.param(1e20, "100000000000000000000", id="large float"),
            pytest.param(1e21, "1e+21", id="huge float"),
            pytest.param(1e-7, "1e-07", id="tiny float"),
            pytest.param(math.inf, "inf", id="infinity"),
            pytest.param(Decimal("1.50"), "1.50", id="decimal"),
            pytest.param(True, "true", id="bool"),
        ],
    )
    def test_to_canonical_text(self, value, expected: str):
        assert to_canonical_text(value) == expected

    def test_to_number(self):
        assert to_number("-1.5") == -1.5
        assert math.isnan(to_number("abc"))
        assert math.isnan(to_number("1_000"))


class TestCompilePattern:
    def test_patterns_are_cached(self):
        assert compile_pattern("^[a-z]+$") is compile_pattern("^[a-z]+$")

    def test_invalid_pattern(self):
        with pytest.raises(InvalidPatternError) as exc_info:
            compile_pattern("[a-z")
        assert exc_info.value.pattern == "[a-z"
        assert isinstance(exc_info.value, ValueError)
