from types import MappingProxyType
from typing import Optional

SIGNS = (
    "Aries", "Taurus", "Gemini", "Cancer",
    "Leo", "Virgo", "Libra", "Scorpio",
    "Sagittarius", "Capricorn", "Aquarius", "Pisces",
)
SIGN_INDEX = MappingProxyType({s: i for i, s in enumerate(SIGNS)})

SIGN_ABBR = MappingProxyType({
    "Aries": "Ari", "Taurus": "Tau", "Gemini": "Gem", "Cancer": "Can",
    "Leo": "Leo", "Virgo": "Vir", "Libra": "Lib", "Scorpio": "Sco",
    "Sagittarius": "Sag", "Capricorn": "Cap", "Aquarius": "Aqu", "Pisces": "Pis",
})

PLANET_ABBR = MappingProxyType({
    "Sun": "Su", "Moon": "Mo", "Mars": "Ma", "Mercury": "Me",
    "Jupiter": "Ju", "Venus": "Ve", "Saturn": "Sa", "Rahu": "Ra",
    "Ketu": "Ke", "Uranus": "Ur", "Neptune": "Ne", "Pluto": "Pl",
})

# Placements carrying the lagna itself rather than a body
ASCENDANT_NAMES = ("Ascendant", "Lagna")
FALLBACK_SIGN = "Aries"
RETROGRADE_MARK = "R"
ASCENDANT_MARK = "*"


def sign_index(sign: str) -> Optional[int]:
    """0-based position of ``sign`` in the zodiac, ``None`` if it is not a canonical name.

    Matching is exact and case-sensitive: ``"leo"`` is not ``"Leo"``.
    """
    return SIGN_INDEX.get(sign)


def sign_at(index: int) -> str:
    return SIGNS[index % 12]


def sign_abbr(sign: str) -> str:
    return SIGN_ABBR.get(sign, sign[:3])


def planet_abbr(name: str) -> str:
    abbr = PLANET_ABBR.get(name)
    if abbr is None:
        abbr = name[:2].title()
    return abbr


def is_ascendant(name: str) -> bool:
    return name in ASCENDANT_NAMES
