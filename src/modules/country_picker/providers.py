"""Region data providers backing the country directory.

Dial prefixes and the list of known regions come from ``phonenumbers``
(libphonenumber metadata). Display names come from ``pycountry``'s ISO 3166-1
data, translated through the gettext catalogs shipped with it.
"""

import gettext
from functools import lru_cache

import phonenumbers
import pycountry

from src.core.exception import UnknownLocaleError
from src.core.logging import get_logger

logger = get_logger(__name__)

ISO3166_DOMAIN = "iso3166-1"

# ISO 3166 names are written in English, so English needs no catalog.
_SOURCE_LANGUAGE = "en"


def normalize_locale(locale: str) -> str:
    """Normalize 'pt-BR' / 'pt_br' style identifiers to gettext's 'pt_BR'."""
    language, _, territory = locale.strip().replace("-", "_").partition("_")
    if territory:
        return f"{language.lower()}_{territory.upper()}"
    return language.lower()


@lru_cache(maxsize=32)
def get_translation(locale: str) -> gettext.NullTranslations:
    """
    Load the ISO 3166-1 name catalog for a locale.

    Catalogs are read-only and cached for the lifetime of the process.

    Raises:
        UnknownLocaleError: No catalog exists for a non-English locale
    """
    locale = normalize_locale(locale)
    if locale.split("_")[0] == _SOURCE_LANGUAGE:
        return gettext.NullTranslations()

    if gettext.find(ISO3166_DOMAIN, pycountry.LOCALES_DIR, languages=[locale]) is None:
        raise UnknownLocaleError(locale)

    logger.info(f"Loading {ISO3166_DOMAIN} catalog for locale '{locale}'")
    return gettext.translation(ISO3166_DOMAIN, pycountry.LOCALES_DIR, languages=[locale])


class LocaleNameResolver:
    """Resolves region codes to display names in one locale."""

    def __init__(self, locale: str = _SOURCE_LANGUAGE):
        self.locale: str = normalize_locale(locale)
        self._translation: gettext.NullTranslations = get_translation(self.locale)

    def __call__(self, code: str) -> str | None:
        country = pycountry.countries.get(alpha_2=code.upper())
        if country is None:
            return None

        name: str = getattr(country, "common_name", None) or country.name
        return self._translation.gettext(name)


class PhoneNumberRegionProvider:
    """Region enumeration and dial prefixes from libphonenumber metadata."""

    def all_regions(self) -> list[str]:
        """Every two-letter region with phone metadata, alphabetically."""
        return sorted(region for region in phonenumbers.SUPPORTED_REGIONS if len(region) == 2)

    def __call__(self, code: str) -> str | None:
        """Dial prefix digits for a region (e.g. 'FR' -> '33'), None if unassigned."""
        country_code: int = phonenumbers.country_code_for_region(code.upper())
        if not country_code:
            return None
        return str(country_code)


@lru_cache(maxsize=1)
def get_region_provider() -> PhoneNumberRegionProvider:
    return PhoneNumberRegionProvider()
