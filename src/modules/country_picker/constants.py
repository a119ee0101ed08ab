# Regions shown in the "common" section when the host does not supply its own list.
COMMON_COUNTRY_CODES: tuple[str, ...] = (
    "US",
    "GB",
    "CA",
    "AU",
    "DE",
    "FR",
    "ES",
    "IT",
    "IN",
    "BR",
    "MX",
    "JP",
)

SECTION_CURRENT = "current"
SECTION_COMMON = "common"
SECTION_ALL = "all"

SECTION_TITLES: dict[str, str] = {
    SECTION_CURRENT: "Current",
    SECTION_COMMON: "Common",
    SECTION_ALL: "All Countries",
}
