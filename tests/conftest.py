"""
Pytest configuration and fixtures
"""
import pytest
from fastapi.testclient import TestClient

from src.modules.country_picker.picker import CountryCodePicker

NAMES: dict[str, str] = {
    "US": "United States",
    "FR": "France",
    "DE": "Germany",
    "AX": "Åland Islands",
    "AT": "austria",
    "TA": "Tristan da Cunha",
}

PREFIXES: dict[str, str] = {
    "US": "1",
    "FR": "33",
    "DE": "49",
    "AX": "358",
    "AT": "43",
}


def resolve_name(code: str) -> str | None:
    return NAMES.get(code)


def resolve_prefix(code: str) -> str | None:
    return PREFIXES.get(code)


class Navigation:
    """Stand-in for the navigation container presenting the picker."""

    def __init__(self, navigation_bar_hidden: bool = False, is_being_presented: bool = False, screen_count: int = 1):
        self.navigation_bar_hidden = navigation_bar_hidden
        self.is_being_presented = is_being_presented
        self.screen_count = screen_count


class RecordingDelegate:
    def __init__(self):
        self.calls: list[tuple] = []

    def country_code_picker_did_pick_country(self, picker, country):
        self.calls.append((picker, country))


@pytest.fixture
def make_picker():
    def _make(codes=("US", "FR", "DE"), **kwargs) -> CountryCodePicker:
        return CountryCodePicker(
            resolve_name=resolve_name,
            resolve_prefix=resolve_prefix,
            region_codes=codes,
            **kwargs,
        )

    return _make


@pytest.fixture
def picker(make_picker) -> CountryCodePicker:
    return make_picker()


@pytest.fixture
def delegate() -> RecordingDelegate:
    return RecordingDelegate()


@pytest.fixture(scope="session")
def client():
    from api import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def resolvers():
    return resolve_name, resolve_prefix


@pytest.fixture
def navigation_factory():
    return Navigation
