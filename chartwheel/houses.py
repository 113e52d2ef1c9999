"""Whole-sign house assignment anchored on the Ascendant.

The chart service returns a flat list of placements (each already carrying its
sidereal sign). ``build_houses`` folds that list into the 12 houses of the
birth chart, house 1 being the Ascendant sign.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from .schemas import House, HouseMap, PlanetPlacement
from .zodiac import (
    FALLBACK_SIGN,
    RETROGRADE_MARK,
    is_ascendant,
    planet_abbr,
    sign_at,
    sign_index,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AscendantAnchor:
    """Sign occupying house 1 and where it came from."""

    sign: str
    index: int
    source: str  # "ascendant", "first_planet" or "fallback"

    @property
    def is_fallback(self) -> bool:
        return self.source == "fallback"


def _find_ascendant(placements: Sequence[PlanetPlacement]) -> Optional[PlanetPlacement]:
    # First match wins if the payload repeats the lagna
    return next((p for p in placements if is_ascendant(p.name)), None)


def resolve_ascendant(placements: Sequence[PlanetPlacement]) -> AscendantAnchor:
    """Pick the anchor sign for house 1.

    Resolution order:
    1. the placement named "Ascendant" or "Lagna";
    2. the first placement of the list (an approximation, not the real lagna);
    3. Aries, flagged as ``fallback``.

    A candidate whose sign is not a canonical name is skipped.
    """
    candidates = []
    asc = _find_ascendant(placements)
    if asc is not None:
        candidates.append((asc, "ascendant"))
    if placements:
        candidates.append((placements[0], "first_planet"))

    for placement, source in candidates:
        idx = sign_index(placement.sign)
        if idx is not None:
            return AscendantAnchor(sign=placement.sign, index=idx, source=source)
        logger.debug("Ascendant candidate %r has unknown sign %r", placement.name, placement.sign)

    logger.warning("No usable Ascendant in %d placements, anchoring house 1 on %s", len(placements), FALLBACK_SIGN)
    return AscendantAnchor(sign=FALLBACK_SIGN, index=sign_index(FALLBACK_SIGN), source="fallback")


def house_from_signs(asc_idx: int, sign_idx: int) -> int:
    """Whole-sign house number (1..12)."""
    return ((sign_idx - asc_idx + 12) % 12) + 1


def occupant_label(placement: PlanetPlacement) -> str:
    label = planet_abbr(placement.name)
    if placement.retrograde:
        label += RETROGRADE_MARK
    return label


def build_houses(placements: Sequence[PlanetPlacement]) -> HouseMap:
    anchor = resolve_ascendant(placements)

    houses: List[House] = [
        House(house=i + 1, sign=sign_at(anchor.index + i), planets=[])
        for i in range(12)
    ]

    dropped: List[str] = []
    for p in placements:
        if is_ascendant(p.name):
            continue
        p_idx = sign_index(p.sign)
        if p_idx is None:
            dropped.append(p.name)
            continue
        house_num = house_from_signs(anchor.index, p_idx)
        houses[house_num - 1].planets.append(occupant_label(p))

    if dropped:
        logger.debug("Dropped %d placement(s) with unrecognized sign: %s", len(dropped), ", ".join(dropped))

    return HouseMap(
        houses=houses,
        ascendant_sign=anchor.sign,
        ascendant_source=anchor.source,
        dropped=dropped,
    )
