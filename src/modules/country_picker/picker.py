"""Headless country code picker screen.

The picker owns the country directory and the search-filtered view of it and
knows nothing about how rows are drawn: hosts read rows through
``number_of_rows`` / ``row_at`` and forward taps and keystrokes to
``select_row`` / ``on_query_changed``.
"""

import weakref
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, Protocol

from src.core.logging import get_logger
from src.modules.country_picker.constants import (
    COMMON_COUNTRY_CODES,
    SECTION_ALL,
    SECTION_COMMON,
    SECTION_CURRENT,
)
from src.modules.country_picker.schemas import Country, Font, PickerConfiguration
from src.modules.country_picker.service import (
    NameResolver,
    PrefixResolver,
    build_directory,
    find_country,
    search_countries,
)

logger = get_logger(__name__)


class CountryCodePickerDelegate(Protocol):
    def country_code_picker_did_pick_country(self, picker: "CountryCodePicker", country: Country) -> None: ...


PickCallback = Callable[["CountryCodePicker", Country], None]

DirectoryLoader = Callable[[], tuple[Country, ...]]


class NavigationHost(Protocol):
    """The navigation container presenting the picker."""

    navigation_bar_hidden: bool
    is_being_presented: bool
    screen_count: int


@dataclass
class SearchController:
    placeholder: str
    font: Font
    active: bool = False
    text: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.text

    def activate(self) -> None:
        self.active = True

    def dismiss(self) -> None:
        self.active = False


class CountryCodePicker:
    """
    Searchable list of countries with their dial codes.

    Args:
        resolve_name: code -> localized display name, or None
        resolve_prefix: code -> dial prefix digits, or None
        region_codes: Candidate region codes for the directory
        common_country_codes: Codes listed in the common section, in order
        configuration: Screen appearance and row renderer
        load_directory: Returns a prebuilt directory, used instead of resolving
            every code when several pickers share one locale
    """

    def __init__(
        self,
        resolve_name: NameResolver,
        resolve_prefix: PrefixResolver,
        region_codes: Iterable[str],
        common_country_codes: Iterable[str] = COMMON_COUNTRY_CODES,
        configuration: PickerConfiguration | None = None,
        load_directory: DirectoryLoader | None = None,
    ):
        self.configuration: PickerConfiguration = configuration or PickerConfiguration.common()
        self.common_country_codes: tuple[str, ...] = tuple(code.upper() for code in common_country_codes)

        self._resolve_name = resolve_name
        self._resolve_prefix = resolve_prefix
        self._region_codes: tuple[str, ...] = tuple(region_codes)
        self._load_directory: DirectoryLoader | None = load_directory
        self._directory: tuple[Country, ...] | None = None
        self._delegate_ref: weakref.ref | None = None

        self.search = SearchController(
            placeholder=self.configuration.search_placeholder,
            font=self.configuration.search_placeholder_font,
        )
        self.filtered_countries: list[Country] = []
        self.selected_index: int | None = None
        self.reload_count: int = 0
        self.should_restore_navigation_bar_to_hidden: bool = False
        self.cancel_button_visible: bool = False
        self.is_dismissed: bool = False

    @property
    def title(self) -> str:
        return self.configuration.screen_title

    @property
    def directory(self) -> tuple[Country, ...]:
        """All countries, built on first access. Empty once the picker is dismissed."""
        if self.is_dismissed:
            return ()
        if self._directory is None:
            if self._load_directory is not None:
                self._directory = self._load_directory()
            else:
                self._directory = build_directory(self._region_codes, self._resolve_name, self._resolve_prefix)
        return self._directory

    # ----- delegate -----

    @property
    def delegate(self) -> CountryCodePickerDelegate | PickCallback | None:
        if self._delegate_ref is None:
            return None
        return self._delegate_ref()

    @delegate.setter
    def delegate(self, value: CountryCodePickerDelegate | PickCallback | None) -> None:
        # Held weakly; the presenting context keeps the delegate alive.
        if value is None:
            self._delegate_ref = None
        elif hasattr(value, "__self__") and hasattr(value, "__func__"):
            self._delegate_ref = weakref.WeakMethod(value)
        else:
            self._delegate_ref = weakref.ref(value)

    def _notify_delegate(self, country: Country) -> None:
        delegate = self.delegate
        if delegate is None:
            return
        callback = getattr(delegate, "country_code_picker_did_pick_country", None)
        if callback is not None:
            callback(picker=self, country=country)
        else:
            delegate(self, country)

    # ----- search -----

    @property
    def is_filtering(self) -> bool:
        return self.search.active and not self.search.is_empty

    def activate_search(self) -> None:
        self.search.activate()
        self.reload_count += 1

    def cancel_search(self) -> None:
        self.search.dismiss()
        self.search.text = ""
        self.reload_count += 1

    def on_query_changed(self, text: str | None) -> None:
        """Recompute the filtered view for new search text and reload all rows."""
        self.search.text = text or ""
        self.filtered_countries = search_countries(self.search.text, self.directory)
        self.reload_count += 1

    update_search_results = on_query_changed

    # ----- rows -----

    @property
    def countries(self) -> list[Country] | tuple[Country, ...]:
        """The list currently on screen."""
        return self.filtered_countries if self.is_filtering else self.directory

    def number_of_rows(self) -> int:
        return len(self.countries)

    def country_at(self, index: int) -> Country:
        countries = self.countries
        if not 0 <= index < len(countries):
            raise IndexError(f"Row {index} out of range for {len(countries)} rows")
        return countries[index]

    def row_at(self, index: int) -> Any:
        country: Country = self.country_at(index)
        return self.configuration.row_renderer(country.flag, country.name, country.prefix)

    def rows(self) -> list[Any]:
        return [
            self.configuration.row_renderer(country.flag, country.name, country.prefix)
            for country in self.countries
        ]

    def select_row(self, index: int) -> Country:
        """
        Handle a tap on a row.

        Dismisses the search presentation when filtering, reports the country
        to the delegate and clears the selection highlight.

        Returns:
            The picked country
        """
        country: Country = self.country_at(index)
        self.selected_index = index

        if self.is_filtering:
            self.search.dismiss()

        logger.debug(f"Picked {country.code} ({country.prefix}) at row {index}")
        self._notify_delegate(country)

        self.selected_index = None
        return country

    def sections(self, current_region: str | None = None) -> list[tuple[str, list[Country]]]:
        """
        Group the full directory for the unfiltered screen.

        The current region and the common countries come first, each only
        when present in the directory, followed by every country.
        """
        sections: list[tuple[str, list[Country]]] = []

        if current_region:
            current: Country | None = find_country(current_region, self.directory)
            if current is not None:
                sections.append((SECTION_CURRENT, [current]))

        common: list[Country] = []
        for code in self.common_country_codes:
            country: Country | None = find_country(code, self.directory)
            if country is not None:
                common.append(country)
        if common:
            sections.append((SECTION_COMMON, common))

        sections.append((SECTION_ALL, list(self.directory)))
        return sections

    # ----- presentation -----

    def will_appear(self, navigation: NavigationHost | None) -> None:
        if navigation is None:
            return
        self.should_restore_navigation_bar_to_hidden = navigation.navigation_bar_hidden
        navigation.navigation_bar_hidden = False
        if navigation.is_being_presented and navigation.screen_count == 1:
            self.cancel_button_visible = True

    def will_disappear(self, navigation: NavigationHost | None) -> None:
        if navigation is None:
            return
        navigation.navigation_bar_hidden = self.should_restore_navigation_bar_to_hidden

    def dismiss(self) -> None:
        """Cancel action: tear the screen down and drop the delegate."""
        self.search.dismiss()
        self.is_dismissed = True
        self._delegate_ref = None
        self._directory = None
        self.filtered_countries = []
