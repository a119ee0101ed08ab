"""Schemas for the country code picker."""

from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from src.core.schema import BaseSchema, FrozenSchema


class Country(FrozenSchema):
    """A pickable country / dial code pair."""

    code: str = Field(default=..., description="ISO 3166-1 alpha-2 code (e.g., 'FR')")
    name: str = Field(default=..., description="Localized display name (e.g., 'France')")
    prefix: str = Field(default=..., description="Dial prefix including '+' (e.g., '+33')")
    flag: str = Field(default=..., description="Flag emoji (e.g., '🇫🇷')")


class Font(FrozenSchema):
    """Font descriptor handed to the host renderer."""

    family: str = Field(default="system", description="Font family, 'system' for the platform font")
    size: float | None = Field(default=None, description="Point size")
    text_style: str | None = Field(default=None, description="Dynamic type style (e.g., 'body')")

    @classmethod
    def system(cls, size: float) -> "Font":
        return cls(size=size)

    @classmethod
    def preferred(cls, text_style: str) -> "Font":
        return cls(text_style=text_style)


class CountryRow(BaseSchema):
    """Default row: dial code and flag on top, country name as detail."""

    text: str = Field(default=..., description="Primary label (e.g., '+33 🇫🇷')")
    detail: str = Field(default=..., description="Secondary label (e.g., 'France')")
    text_font: Font = Field(default_factory=lambda: Font.preferred("callout"))
    detail_font: Font = Field(default_factory=lambda: Font.preferred("body"))


def render_country_row(flag: str, name: str, code: str) -> CountryRow:
    """Default row renderer. `code` is the dial code shown next to the flag."""
    return CountryRow(text=f"{code} {flag}", detail=name)


RowRenderer = Callable[[str, str, str], Any]


class PickerConfiguration(BaseModel):
    """Appearance of the picker screen, including how rows are rendered."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    screen_title: str = "Choose your country"
    screen_bg_color: str = "#FFFFFF"
    search_placeholder: str = "Search Country Codes"
    search_placeholder_font: Font = Field(default_factory=lambda: Font.system(14))
    cancel_title: str = "Cancel"
    row_renderer: RowRenderer = render_country_row

    @classmethod
    def common(cls) -> "PickerConfiguration":
        return cls()


# ----- API schemas -----


class CountryResponse(BaseSchema):
    """Single country information."""

    code: str = Field(default=..., description="ISO 3166-1 alpha-2 code (e.g., 'FR')")
    name: str = Field(default=..., description="Localized country name (e.g., 'France')")
    prefix: str = Field(default=..., description="Dial prefix (e.g., '+33')")
    flag: str = Field(default=..., description="Flag emoji")


class CountryRowResponse(BaseSchema):
    """A rendered row together with the country it represents."""

    index: int = Field(default=..., description="Row index, used to select the row")
    country: CountryResponse
    row: CountryRow


class CountryPickerResponse(BaseSchema):
    """Everything a host needs to draw the picker screen."""

    title: str
    search_placeholder: str
    search_placeholder_font: Font
    cancel_title: str
    background_color: str
    search: str | None = Field(default=None, description="Active search query")
    filtering: bool = Field(default=..., description="Whether rows are narrowed by the search query")
    total: int = Field(default=..., description="Number of rows")
    rows: list[CountryRowResponse]


class CountrySection(BaseSchema):
    """A titled group of countries."""

    key: str = Field(default=..., description="Section key: current, common or all")
    title: str
    countries: list[CountryResponse]


class CountrySectionsResponse(BaseSchema):
    sections: list[CountrySection]


class CountrySelectRequest(BaseModel):
    """Replay of a row tap: the query that was active and the tapped row."""

    search: str | None = Field(default=None, max_length=100, description="Search text when the row was tapped")
    index: int = Field(default=..., ge=0, description="Tapped row index")
    locale: str | None = Field(default=None, max_length=16, description="Locale for display names")
