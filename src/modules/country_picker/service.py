"""Building and searching the country directory."""

import unicodedata
from collections.abc import Callable, Iterable, Sequence

from src.core.logging import get_logger
from src.modules.country_picker.flags import flag_emoji
from src.modules.country_picker.schemas import Country

logger = get_logger(__name__)

NameResolver = Callable[[str], str | None]
PrefixResolver = Callable[[str], str | None]


def make_country(code: str, resolve_name: NameResolver, resolve_prefix: PrefixResolver) -> Country | None:
    """
    Construct a Country for a region code.

    Args:
        code: ISO 3166-1 alpha-2 region code
        resolve_name: code -> localized display name, or None
        resolve_prefix: code -> dial prefix digits, or None

    Returns:
        Country, or None when the name, prefix or flag cannot be resolved
    """
    name: str | None = resolve_name(code)
    prefix: str | None = resolve_prefix(code)
    if not name or not prefix:
        return None

    flag: str | None = flag_emoji(code)
    if flag is None:
        return None

    return Country(code=code.upper(), name=name, prefix=f"+{prefix}", flag=flag)


def collation_key(name: str) -> str:
    """Case- and accent-insensitive sort key ('Åland Islands' sorts with 'A')."""
    decomposed: str = unicodedata.normalize("NFKD", name)
    stripped = "".join(char for char in decomposed if not unicodedata.combining(char))
    return stripped.casefold()


def build_directory(
    codes: Iterable[str],
    resolve_name: NameResolver,
    resolve_prefix: PrefixResolver,
) -> tuple[Country, ...]:
    """
    Build the sorted country directory.

    Codes that cannot be turned into a Country are left out. The sort is
    stable, so countries with equal names keep their input order.
    """
    candidates: list[str] = list(codes)
    countries: list[Country] = []
    for code in candidates:
        country: Country | None = make_country(code, resolve_name, resolve_prefix)
        if country is not None:
            countries.append(country)

    countries.sort(key=lambda country: collation_key(country.name))

    logger.debug(f"Built country directory with {len(countries)} of {len(candidates)} regions")

    return tuple(countries)


def search_countries(query: str, directory: Sequence[Country]) -> list[Country]:
    """
    Countries whose name, code or dial prefix contains the query (case-insensitive).

    An empty query matches everything; callers treat it as "no filter" instead.
    """
    query_lower: str = query.lower()

    return [
        country
        for country in directory
        if query_lower in country.name.lower()
        or query_lower in country.code.lower()
        or query_lower in country.prefix.lower()
    ]


def find_country(code: str, directory: Sequence[Country]) -> Country | None:
    code_upper: str = code.upper()

    for country in directory:
        if country.code == code_upper:
            return country

    return None
