import pytest

from chartwheel.houses import build_houses
from chartwheel.north_indian import (
    HOUSE_REGIONS,
    UNIT_POINTS,
    centroid,
    construction_points,
    font_sizes,
    north_indian_layout,
)
from chartwheel.schemas import PlanetPlacement


def _houses():
    placements = [
        PlanetPlacement(name="Ascendant", sign="Virgo"),
        PlanetPlacement(name="Sun", sign="Leo"),
        PlanetPlacement(name="Saturn", sign="Pisces", retrograde=True),
        PlanetPlacement(name="Moon", sign="Pisces"),
    ]
    return build_houses(placements).houses


def _labels(region):
    return {label.role: label for label in region.labels}


def test_layout_is_deterministic():
    houses = _houses()
    first = north_indian_layout(houses, 300, 2)
    second = north_indian_layout(houses, 300, 2)
    assert first == second
    assert first.model_dump() == second.model_dump()


def test_twelve_regions_in_house_order():
    layout = north_indian_layout(_houses(), 300, 2)
    assert len(layout.regions) == 12
    assert [r.house for r in layout.regions] == list(range(1, 13))
    kites = [i for i, names in enumerate(HOUSE_REGIONS) if len(names) == 4]
    assert kites == [0, 3, 6, 9]


@pytest.mark.parametrize("size,margin", [(300, 2), (280, 0), (120, 10), (1000, 37.5)])
def test_region_vertices_come_from_construction_points(size, margin):
    layout = north_indian_layout(_houses(), size, margin)
    span = size - 2 * margin
    allowed = {(margin + ux * span, margin + uy * span) for ux, uy in UNIT_POINTS.values()}
    for region in layout.regions:
        for point in region.points:
            assert point in allowed
    assert set(layout.outer_square) <= allowed
    assert set(layout.inner_diamond) <= allowed


def test_top_kite_geometry_without_margin():
    layout = north_indian_layout(_houses(), 300, 0)
    top = layout.regions[0]
    assert top.points == [(150.0, 0.0), (225.0, 75.0), (150.0, 150.0), (75.0, 75.0)]
    assert top.centroid == pytest.approx((150.0, 75.0))
    assert layout.outer_square == [(0.0, 0.0), (300.0, 0.0), (300.0, 300.0), (0.0, 300.0)]
    assert layout.inner_diamond == [(150.0, 0.0), (300.0, 150.0), (150.0, 300.0), (0.0, 150.0)]
    assert layout.diagonals == [((0.0, 0.0), (300.0, 300.0)), ((300.0, 0.0), (0.0, 300.0))]


def test_margin_insets_border():
    pts = construction_points(300, 2)
    assert tuple(pts["A"]) == (2.0, 2.0)
    assert tuple(pts["C"]) == (298.0, 298.0)
    assert tuple(pts["E"]) == (150.0, 2.0)
    assert tuple(pts["O"]) == (150.0, 150.0)
    assert tuple(pts["P1"]) == (76.0, 76.0)


def test_centroid_is_vertex_mean():
    assert centroid([(0, 0), (3, 0), (0, 3)]) == pytest.approx((1.0, 1.0))


def test_font_sizes_scale_with_floor():
    assert font_sizes(300) == pytest.approx((10.0, 300 / 35))
    assert font_sizes(60) == (8.0, 7.0)


def test_labels_stack_around_centroid():
    layout = north_indian_layout(_houses(), 300, 0)
    asc = _labels(layout.regions[0])
    cx, cy = layout.regions[0].centroid

    assert asc["house_number"].text == "1"
    assert asc["house_number"].y == pytest.approx(cy - 8.0)
    assert asc["house_number"].font_size == pytest.approx(7.5)
    assert asc["sign"].text == "Vir*"
    assert asc["sign"].highlight
    assert asc["sign"].font_weight == "700"
    assert asc["sign"].y == pytest.approx(cy + 3.0)
    assert "planets" not in asc
    assert all(label.x == cx for label in layout.regions[0].labels)

    seventh = _labels(layout.regions[6])
    assert seventh["sign"].text == "Pis"
    assert not seventh["sign"].highlight
    assert seventh["sign"].font_weight == "500"
    assert seventh["planets"].text == "SaR Mo"
    assert seventh["planets"].y == pytest.approx(layout.regions[6].centroid[1] + 14.0)
    assert seventh["planets"].font_size == pytest.approx(300 / 35)

    assert _labels(layout.regions[11])["planets"].text == "Su"


def test_missing_houses_keep_polygons_but_no_labels():
    layout = north_indian_layout(_houses()[:3], 300, 2)
    assert len(layout.regions) == 12
    assert layout.regions[2].labels
    assert layout.regions[3].labels == []
    assert layout.regions[3].house == 4
