import pytest

from menumaker.normalizer.api import is_blank, parse_amount, ratio, sanitize_text


def test_sanitize_removes_nbsp_and_trims():
    assert sanitize_text("\u00a0Pota\u00a0to \n") == "Potato"
    assert sanitize_text(None) == ""


def test_is_blank_treats_nbsp_only_as_blank():
    assert is_blank("\u00a0 \u00a0")
    assert is_blank("")
    assert not is_blank("a")


def test_parse_amount_comma_separator():
    assert parse_amount("12,5") == 12.5
    assert parse_amount("\u00a012.5 ") == 12.5


@pytest.mark.parametrize("text", ["", "abc", "1,2,3", "-", "nan", "inf", "-4", "1_000", "1_0,5"])
def test_parse_amount_defaults_to_zero(text):
    assert parse_amount(text) == 0.0


def test_ratio_rounds_half_up_to_two_decimals():
    assert ratio(5.0, 3.0) == 1.67
    assert ratio(1.0, 8.0) == 0.13
    assert ratio(0.0, 95.0) == 0.0


def test_ratio_absent_for_zero_divisor():
    assert ratio(5.0, 0.0) is None


def test_ratio_custom_scale():
    assert ratio(5.0, 3.0, 3) == 1.667
    assert ratio(5.0, 3.0, 0) == 2.0
