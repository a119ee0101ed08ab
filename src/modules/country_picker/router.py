"""Router for country code picker endpoints."""

from fastapi import APIRouter, Depends, Query

from src.core.exception import AppValueError, NotFoundError
from src.core.logging import get_logger
from src.modules.country_picker.constants import SECTION_TITLES
from src.modules.country_picker.dependencies import create_picker, get_picker
from src.modules.country_picker.picker import CountryCodePicker
from src.modules.country_picker.schemas import (
    Country,
    CountryPickerResponse,
    CountryResponse,
    CountryRowResponse,
    CountrySection,
    CountrySectionsResponse,
    CountrySelectRequest,
)
from src.modules.country_picker.service import find_country

logger = get_logger(__name__)

router = APIRouter()


class _PickRecorder:
    """Delegate that remembers what the picker reported."""

    def __init__(self) -> None:
        self.picks: list[Country] = []

    def country_code_picker_did_pick_country(self, picker: CountryCodePicker, country: Country) -> None:  # noqa: ARG002
        self.picks.append(country)


def _to_response(country: Country) -> CountryResponse:
    return CountryResponse(**country.model_dump())


@router.get(
    path="/",
    response_model=CountryPickerResponse,
    summary="Get picker screen",
    description="Returns the picker rows with dial codes and flags. Supports search by name, code or dial code.",
)
async def get_country_codes(
    search: str | None = Query(default=None, max_length=100, description="Search by name, code or dial code"),
    picker: CountryCodePicker = Depends(dependency=get_picker),
) -> CountryPickerResponse:
    """
    Render the picker screen.

    Args:
        search: Optional search text; empty text shows every country

    Returns:
        Screen configuration with the rows currently on screen
    """
    if search:
        picker.activate_search()
        picker.on_query_changed(search)

    countries = picker.countries
    rows = picker.rows()
    config = picker.configuration

    return CountryPickerResponse(
        title=picker.title,
        search_placeholder=config.search_placeholder,
        search_placeholder_font=config.search_placeholder_font,
        cancel_title=config.cancel_title,
        background_color=config.screen_bg_color,
        search=search or None,
        filtering=picker.is_filtering,
        total=len(countries),
        rows=[
            CountryRowResponse(index=index, country=_to_response(country), row=row)
            for index, (country, row) in enumerate(zip(countries, rows, strict=True))
        ],
    )


@router.get(
    path="/sections",
    response_model=CountrySectionsResponse,
    summary="Get grouped countries",
    description="Countries grouped into current region, common countries and all countries.",
)
async def get_country_sections(
    region: str | None = Query(default=None, min_length=2, max_length=2, description="Current region code"),
    picker: CountryCodePicker = Depends(dependency=get_picker),
) -> CountrySectionsResponse:
    sections = [
        CountrySection(
            key=key,
            title=SECTION_TITLES[key],
            countries=[_to_response(country) for country in countries],
        )
        for key, countries in picker.sections(current_region=region)
    ]
    return CountrySectionsResponse(sections=sections)


@router.post(
    path="/select",
    response_model=CountryResponse,
    summary="Select a row",
    description="Replays a row tap with the search text that was active and returns the picked country.",
)
async def select_country(payload: CountrySelectRequest) -> CountryResponse:
    """
    Select a row of the picker.

    Raises:
        400: Row index out of range for the given search
    """
    picker: CountryCodePicker = create_picker(payload.locale)
    recorder = _PickRecorder()
    picker.delegate = recorder

    if payload.search:
        picker.activate_search()
        picker.on_query_changed(payload.search)

    if payload.index >= picker.number_of_rows():
        raise AppValueError(f"Row {payload.index} out of range ({picker.number_of_rows()} rows)")

    picker.select_row(payload.index)
    picker.dismiss()

    logger.info(f"Country picked: {recorder.picks[0].code}")
    return _to_response(recorder.picks[0])


@router.get(
    path="/{code}",
    response_model=CountryResponse,
    summary="Get country by code",
    description="Get a single country with its dial code by ISO 3166-1 alpha-2 code.",
)
async def get_country(
    code: str,
    picker: CountryCodePicker = Depends(dependency=get_picker),
) -> CountryResponse:
    """
    Get single country by code.

    Raises:
        404: Country not found or without a dial code
    """
    country: Country | None = find_country(code, picker.directory)

    if country is None:
        raise NotFoundError(f"Country with code '{code}' not found")

    return _to_response(country)
