"""
Tests for region name and dial prefix providers
"""
import pytest

from src.core.exception import UnknownLocaleError
from src.modules.country_picker.dependencies import create_picker
from src.modules.country_picker.flags import is_single_flag
from src.modules.country_picker.providers import (
    LocaleNameResolver,
    PhoneNumberRegionProvider,
    normalize_locale,
)
from src.modules.country_picker.service import collation_key


def test_dial_prefix_for_region():
    provider = PhoneNumberRegionProvider()

    assert provider("FR") == "33"
    assert provider("us") == "1"
    assert provider("ZZ") is None


def test_all_regions_are_two_letter_codes():
    regions = PhoneNumberRegionProvider().all_regions()

    assert "FR" in regions
    assert all(len(region) == 2 for region in regions)
    assert regions == sorted(regions)


def test_english_names():
    resolve_name = LocaleNameResolver("en")

    assert resolve_name("FR") == "France"
    assert resolve_name("gb") == "United Kingdom"
    assert resolve_name("ZZ") is None


def test_common_name_preferred():
    assert LocaleNameResolver("en")("BO") == "Bolivia"


def test_translated_names():
    assert LocaleNameResolver("de")("DE") == "Deutschland"


def test_unknown_locale():
    with pytest.raises(UnknownLocaleError):
        LocaleNameResolver("xx")


@pytest.mark.parametrize(
    ("locale", "expected"),
    [("pt-br", "pt_BR"), ("DE", "de"), (" en_us ", "en_US")],
)
def test_normalize_locale(locale, expected):
    assert normalize_locale(locale) == expected


def test_full_directory_properties():
    provider = PhoneNumberRegionProvider()
    directory = create_picker("en").directory

    # Regions without an ISO 3166-1 entry (e.g. Ascension Island) are left out
    assert 0 < len(directory) < len(provider.all_regions())
    assert "AC" not in {country.code for country in directory}
    assert all(is_single_flag(country.flag) for country in directory)
    assert all(country.prefix.startswith("+") and country.prefix[1:].isdigit() for country in directory)
    for first, second in zip(directory, directory[1:]):
        assert collation_key(first.name) <= collation_key(second.name)


def test_pickers_share_cached_directory():
    first = create_picker("en")
    second = create_picker("EN")

    assert first is not second
    assert first.directory is second.directory


def test_dismissing_one_picker_keeps_shared_directory():
    first = create_picker("en")
    second = create_picker("en")
    total = len(second.directory)

    first.dismiss()

    assert first.number_of_rows() == 0
    assert len(second.directory) == total > 0
