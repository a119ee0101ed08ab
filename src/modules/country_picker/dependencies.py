from functools import lru_cache, partial

from fastapi import Query

from src.core.config import settings
from src.core.logging import get_logger
from src.modules.country_picker.constants import COMMON_COUNTRY_CODES
from src.modules.country_picker.picker import CountryCodePicker
from src.modules.country_picker.providers import LocaleNameResolver, get_region_provider, normalize_locale
from src.modules.country_picker.schemas import Country, Font, PickerConfiguration
from src.modules.country_picker.service import build_directory

logger = get_logger(__name__)


def get_picker_configuration() -> PickerConfiguration:
    """Picker appearance from application settings."""
    return PickerConfiguration(
        screen_title=settings.PICKER_SCREEN_TITLE,
        screen_bg_color=settings.PICKER_BG_COLOR,
        search_placeholder=settings.PICKER_SEARCH_PLACEHOLDER,
        search_placeholder_font=Font.system(settings.PICKER_SEARCH_FONT_SIZE),
        cancel_title=settings.PICKER_CANCEL_TITLE,
    )


@lru_cache(maxsize=32)
def get_country_directory(locale: str) -> tuple[Country, ...]:
    """
    Directory of every region with phone metadata for one locale.

    The tuple is immutable, so pickers of the same locale share it instead of
    resolving every region again.

    Raises:
        UnknownLocaleError: No name catalog for the locale
    """
    provider = get_region_provider()
    directory = build_directory(provider.all_regions(), LocaleNameResolver(locale), provider)
    logger.info(f"Country directory for locale '{locale}' cached with {len(directory)} countries")
    return directory


def initialize_country_directory() -> None:
    """Preload the directory for the default locale. Called from the app lifespan."""
    get_country_directory(normalize_locale(settings.PICKER_LOCALE))


def create_picker(locale: str | None = None) -> CountryCodePicker:
    """A fresh picker over every region with phone metadata."""
    locale = normalize_locale(locale or settings.PICKER_LOCALE)
    provider = get_region_provider()
    return CountryCodePicker(
        resolve_name=LocaleNameResolver(locale),
        resolve_prefix=provider,
        region_codes=provider.all_regions(),
        common_country_codes=settings.PICKER_COMMON_COUNTRY_CODES or COMMON_COUNTRY_CODES,
        configuration=get_picker_configuration(),
        load_directory=partial(get_country_directory, locale),
    )


def get_picker(
    locale: str | None = Query(default=None, max_length=16, description="Locale for country names (e.g., 'de')"),
) -> CountryCodePicker:
    return create_picker(locale)
