from pydantic import BaseModel, Field, computed_field
from typing import List, Literal, Optional, Tuple

from .settings import DEFAULT_CHART_MARGIN, DEFAULT_CHART_SIZE

Point = Tuple[float, float]


class PlanetPlacement(BaseModel):
    name: str
    # Ecliptic longitude from the chart service; house math only looks at `sign`
    longitude: float = 0.0
    sign: str
    degree_in_sign: float = 0.0
    retrograde: bool = False


class Aspect(BaseModel):
    planet1: str
    planet2: str
    aspect: str
    angle: float
    orb: float


class ChartData(BaseModel):
    planets: List[PlanetPlacement] = Field(default_factory=list)
    aspects: List[Aspect] = Field(default_factory=list)
    ayanamsa: Optional[str] = None
    julian_day: Optional[float] = None


class House(BaseModel):
    house: int
    sign: str
    planets: List[str] = Field(default_factory=list)


class HouseMap(BaseModel):
    houses: List[House]
    ascendant_sign: str
    ascendant_source: Literal["ascendant", "first_planet", "fallback"]
    # Placements whose sign did not match a canonical name
    dropped: List[str] = Field(default_factory=list)

    @computed_field
    @property
    def dropped_count(self) -> int:
        return len(self.dropped)


class TextLabel(BaseModel):
    role: Literal["house_number", "sign", "planets"]
    text: str
    x: float
    y: float
    font_size: float
    font_weight: str
    highlight: bool = False


class HouseRegion(BaseModel):
    house: int
    points: List[Point]
    centroid: Point
    labels: List[TextLabel] = Field(default_factory=list)


class DrawSpec(BaseModel):
    size: float
    margin: float
    regions: List[HouseRegion]
    outer_square: List[Point]
    inner_diamond: List[Point]
    diagonals: List[Tuple[Point, Point]]
    font_size: float
    planet_font_size: float


class LayoutRequest(BaseModel):
    chart: ChartData
    size: float = Field(DEFAULT_CHART_SIZE, gt=0, allow_inf_nan=False)
    margin: float = Field(DEFAULT_CHART_MARGIN, ge=0, allow_inf_nan=False)


class ChartLayoutResponse(BaseModel):
    houses: HouseMap
    layout: DrawSpec


class PlanetRow(BaseModel):
    name: str
    position: str
    retrograde_label: str = ""


class AspectRow(BaseModel):
    title: str
    orb: str


class ChartSummary(BaseModel):
    sun_sign: Optional[str] = None
    moon_sign: Optional[str] = None
    planets: List[PlanetRow] = Field(default_factory=list)
    aspects: List[AspectRow] = Field(default_factory=list)
