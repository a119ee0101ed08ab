"""
Tests for flag emoji derivation
"""
import pytest

from src.modules.country_picker.flags import FLAG_OFFSET, flag_emoji, is_single_flag


def test_flag_offset_matches_regional_indicator_a():
    assert chr(ord("A") + FLAG_OFFSET) == "\U0001f1e6"


@pytest.mark.parametrize(
    ("code", "expected"),
    [
        ("FR", "\U0001f1eb\U0001f1f7"),
        ("US", "\U0001f1fa\U0001f1f8"),
        ("de", "\U0001f1e9\U0001f1ea"),
    ],
)
def test_flag_for_two_letter_code(code, expected):
    assert flag_emoji(code) == expected


def test_flag_is_one_composed_character():
    flag = flag_emoji("JP")

    assert flag is not None
    assert is_single_flag(flag)


@pytest.mark.parametrize("code", ["", "U", "USA", "GBEN", "1A", "A-", "ÉS", "\U0001f1eb"])
def test_codes_without_single_flag_fail(code):
    """Lone indicators, extra letters and non-letters never yield a partial flag"""
    assert flag_emoji(code) is None


def test_offset_past_unicode_range_fails():
    assert flag_emoji("\U000ffff0A") is None


def test_is_single_flag_rejects_pairs_of_other_symbols():
    assert not is_single_flag("ab")
    assert not is_single_flag("\U0001f1eb\U0001f1f7\U0001f1e9\U0001f1ea")
