r"""North-Indian (diamond) birth chart geometry.

Construction for a square of side ``s`` drawn with inset margin ``m``:

    A ----------- E ----------- B
    | \  12     /   \     2   / |
    |   \     /       \     /   |
    | 11  P1      1      P2   3 |
    |   /     \       /     \   |
    H    10      O       4      F
    |   \     /       \     /   |
    |  9  P4      7      P3   5 |
    |   /     \       /     \   |
    | /   8     \   /     6   \ |
    D ----------- G ----------- C

Houses run clockwise on the page starting from the top kite
(house 1, the Ascendant). Every point is a fixed fraction of the inset
square, so the regions never depend on chart data.
"""
from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from .schemas import DrawSpec, House, HouseRegion, Point, TextLabel
from .zodiac import ASCENDANT_MARK, sign_abbr

logger = logging.getLogger(__name__)

# Construction points in unit-square coordinates (y grows downwards)
UNIT_POINTS: Dict[str, Tuple[float, float]] = {
    "A": (0.0, 0.0),
    "B": (1.0, 0.0),
    "C": (1.0, 1.0),
    "D": (0.0, 1.0),
    "E": (0.5, 0.0),
    "F": (1.0, 0.5),
    "G": (0.5, 1.0),
    "H": (0.0, 0.5),
    "O": (0.5, 0.5),
    "P1": (0.25, 0.25),
    "P2": (0.75, 0.25),
    "P3": (0.75, 0.75),
    "P4": (0.25, 0.75),
}

# Region i is drawn for house i + 1
HOUSE_REGIONS: Tuple[Tuple[str, ...], ...] = (
    ("E", "P2", "O", "P1"),   # 1  top kite
    ("B", "E", "P2"),         # 2
    ("B", "P2", "F"),         # 3
    ("P2", "F", "P3", "O"),   # 4  right kite
    ("F", "C", "P3"),         # 5
    ("C", "G", "P3"),         # 6
    ("G", "P3", "O", "P4"),   # 7  bottom kite
    ("D", "G", "P4"),         # 8
    ("D", "P4", "H"),         # 9
    ("P4", "H", "P1", "O"),   # 10 left kite
    ("A", "P1", "H"),         # 11
    ("A", "E", "P1"),         # 12
)

OUTER_SQUARE = ("A", "B", "C", "D")
INNER_DIAMOND = ("E", "F", "G", "H")
DIAGONALS = (("A", "C"), ("B", "D"))

MIN_FONT_SIZE = 8.0
MIN_PLANET_FONT_SIZE = 7.0

HOUSE_NUMBER_OFFSET = -0.8
HOUSE_NUMBER_SCALE = 0.75
SIGN_OFFSET = 0.3
PLANETS_OFFSET = 1.4


def construction_points(size: float, margin: float) -> Dict[str, np.ndarray]:
    """Scale the unit construction onto the inset drawing square."""
    # P1..P4 move with the margin too, unlike a bare s/4, 3s/4 construction
    # (76 rather than 75 on a 300px canvas with margin 2)
    span = size - 2 * margin
    return {name: margin + np.array(unit) * span for name, unit in UNIT_POINTS.items()}


def centroid(points: Sequence[Sequence[float]]) -> Point:
    cx, cy = np.mean(np.asarray(points, dtype=float), axis=0)
    return float(cx), float(cy)


def font_sizes(size: float) -> Tuple[float, float]:
    """(sign font, planet font) for a chart of ``size`` pixels."""
    return max(MIN_FONT_SIZE, size / 30), max(MIN_PLANET_FONT_SIZE, size / 35)


def _as_point(arr: np.ndarray) -> Point:
    return float(arr[0]), float(arr[1])


def _polyline(pts: Dict[str, np.ndarray], names: Sequence[str]) -> List[Point]:
    return [_as_point(pts[n]) for n in names]


def house_labels(house: House, center: Point, font: float, planet_font: float) -> List[TextLabel]:
    """Three stacked labels: house number, sign abbreviation, occupants."""
    cx, cy = center
    is_asc = house.house == 1
    abbr = sign_abbr(house.sign)

    labels = [
        TextLabel(
            role="house_number",
            text=str(house.house),
            x=cx,
            y=cy + font * HOUSE_NUMBER_OFFSET,
            font_size=font * HOUSE_NUMBER_SCALE,
            font_weight="400",
        ),
        TextLabel(
            role="sign",
            text=f"{abbr}{ASCENDANT_MARK}" if is_asc else abbr,
            x=cx,
            y=cy + font * SIGN_OFFSET,
            font_size=font,
            font_weight="700" if is_asc else "500",
            highlight=is_asc,
        ),
    ]

    planet_text = " ".join(house.planets)
    if planet_text:
        labels.append(
            TextLabel(
                role="planets",
                text=planet_text,
                x=cx,
                y=cy + font * PLANETS_OFFSET,
                font_size=planet_font,
                font_weight="600",
            )
        )
    return labels


def north_indian_layout(houses: Sequence[House], size: float, margin: float) -> DrawSpec:
    """
    Build the drawable primitives of a North-Indian chart.

    :param houses: houses in order 1..12 (``houses[i]`` is drawn in region ``i``)
    :param size: side of the drawing square in pixels
    :param margin: inset of the chart border from each edge
    """
    pts = construction_points(size, margin)
    font, planet_font = font_sizes(size)

    regions: List[HouseRegion] = []
    for i, names in enumerate(HOUSE_REGIONS):
        polygon = _polyline(pts, names)
        center = centroid(polygon)
        house: Optional[House] = houses[i] if i < len(houses) else None
        labels = house_labels(house, center, font, planet_font) if house is not None else []
        regions.append(
            HouseRegion(
                house=house.house if house is not None else i + 1,
                points=polygon,
                centroid=center,
                labels=labels,
            )
        )

    logger.debug("Laid out %d houses on a %.1fpx canvas (margin %.1f)", len(houses), size, margin)
    return DrawSpec(
        size=size,
        margin=margin,
        regions=regions,
        outer_square=_polyline(pts, OUTER_SQUARE),
        inner_diamond=_polyline(pts, INNER_DIAMOND),
        diagonals=[(_as_point(pts[a]), _as_point(pts[b])) for a, b in DIAGONALS],
        font_size=font,
        planet_font_size=planet_font,
    )
