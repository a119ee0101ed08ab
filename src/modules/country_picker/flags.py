"""Region code → flag emoji.

A flag is the pair of regional indicator symbols spelling the region code,
e.g. "FR" -> U+1F1EB U+1F1F7. Renderers compose the pair into a single glyph.
"""

REGIONAL_INDICATOR_A: int = 0x1F1E6
REGIONAL_INDICATOR_Z: int = 0x1F1FF

# Distance between "🇦" and "A"
FLAG_OFFSET: int = REGIONAL_INDICATOR_A - ord("A")

_MAX_SCALAR: int = 0x10FFFF
_SURROGATES = range(0xD800, 0xE000)


def _is_regional_indicator(char: str) -> bool:
    return REGIONAL_INDICATOR_A <= ord(char) <= REGIONAL_INDICATOR_Z


def is_single_flag(flag: str) -> bool:
    """Whether `flag` is exactly one user-perceived flag glyph.

    Two regional indicators always compose into one glyph; a lone indicator,
    three or more of them, or any other scalar does not form a flag.
    """
    return len(flag) == 2 and all(_is_regional_indicator(char) for char in flag)


def flag_emoji(code: str) -> str | None:
    """
    Derive the flag emoji for a two-letter region code.

    Args:
        code: ISO 3166-1 alpha-2 code, any case (e.g. 'fr', 'US')

    Returns:
        Flag emoji, or None when the code does not map to exactly one flag
    """
    scalars: list[str] = []
    for letter in code.upper():
        value: int = ord(letter) + FLAG_OFFSET
        if value > _MAX_SCALAR or value in _SURROGATES:
            return None
        scalars.append(chr(value))

    flag = "".join(scalars)
    if not is_single_flag(flag):
        return None
    return flag
