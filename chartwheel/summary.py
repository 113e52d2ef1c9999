"""Plain-text rows shown next to the chart: key signs, positions, aspects."""
from typing import List, Optional, Sequence

from .schemas import Aspect, AspectRow, ChartData, ChartSummary, PlanetPlacement, PlanetRow


def find_planet(planets: Sequence[PlanetPlacement], name: str) -> Optional[PlanetPlacement]:
    return next((p for p in planets if p.name == name), None)


def retro_label(p: PlanetPlacement) -> str:
    return " (R)" if p.retrograde else ""


def format_position(p: PlanetPlacement) -> str:
    """'Leo 12.3°': sign plus degree within the sign, one decimal."""
    return f"{p.sign} {p.degree_in_sign:.1f}°"


def key_signs(planets: Sequence[PlanetPlacement]) -> dict:
    sun = find_planet(planets, "Sun")
    moon = find_planet(planets, "Moon")
    return {
        "sun_sign": sun.sign if sun else None,
        "moon_sign": moon.sign if moon else None,
    }


def format_orb(orb: float) -> str:
    """Orb as sent by the chart service, whole numbers without the trailing .0."""
    text = str(int(orb)) if orb.is_integer() else repr(orb)
    return f"orb {text}°"


def aspect_rows(aspects: Sequence[Aspect]) -> List[AspectRow]:
    return [
        AspectRow(title=f"{a.planet1} {a.aspect} {a.planet2}", orb=format_orb(a.orb))
        for a in aspects
    ]


def summarize_chart(chart: ChartData) -> ChartSummary:
    rows = [
        PlanetRow(name=p.name, position=format_position(p), retrograde_label=retro_label(p))
        for p in chart.planets
    ]
    return ChartSummary(
        **key_signs(chart.planets),
        planets=rows,
        aspects=aspect_rows(chart.aspects),
    )
