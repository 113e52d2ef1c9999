from fastapi import FastAPI, HTTPException, Response
from fastapi.middleware.cors import CORSMiddleware

from .houses import build_houses
from .north_indian import north_indian_layout
from .render import render_svg
from .schemas import (
    ChartData,
    ChartLayoutResponse,
    ChartSummary,
    HouseMap,
    LayoutRequest,
)
from .settings import CORS_ORIGINS
from .summary import summarize_chart

app = FastAPI(title="chartwheel")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _layout(data: LayoutRequest) -> ChartLayoutResponse:
    if 2 * data.margin >= data.size:
        raise HTTPException(
            status_code=400,
            detail=f"Margin {data.margin} leaves no drawable area on a {data.size}px chart",
        )
    house_map = build_houses(data.chart.planets)
    layout = north_indian_layout(house_map.houses, data.size, data.margin)
    return ChartLayoutResponse(houses=house_map, layout=layout)


@app.get("/health")
def health():
    return {"ok": True, "service": "chartwheel"}


@app.post("/api/chart/houses", response_model=HouseMap)
def houses_endpoint(data: ChartData) -> HouseMap:
    return build_houses(data.planets)


@app.post("/api/chart/layout", response_model=ChartLayoutResponse)
def layout_endpoint(data: LayoutRequest) -> ChartLayoutResponse:
    return _layout(data)


@app.post("/api/chart/svg")
def svg_endpoint(data: LayoutRequest) -> Response:
    svg = render_svg(_layout(data).layout)
    return Response(content=svg, media_type="image/svg+xml")


@app.post("/api/chart/summary", response_model=ChartSummary)
def summary_endpoint(data: ChartData) -> ChartSummary:
    return summarize_chart(data)
