"""SVG output for a laid-out North-Indian chart.

Returns an SVG string; the geometry comes entirely from ``DrawSpec``.
"""
from __future__ import annotations

import logging
from typing import Dict, Optional

import svgwrite

from .schemas import DrawSpec, TextLabel

logger = logging.getLogger(__name__)

DEFAULT_THEME: Dict[str, str] = {
    "background": "#0F0A1A",
    "border": "#2D2248",
    "primary_light": "#A78BFA",
    "secondary": "#F59E0B",
    "text": "#F5F3FF",
    "text_secondary": "#A8A0B8",
}

HOUSE_STROKE_WIDTH = 1.2
OUTER_STROKE_WIDTH = 2
DIAMOND_STROKE_WIDTH = 1.5
DIAGONAL_STROKE_WIDTH = 1


def _label_color(label: TextLabel, theme: Dict[str, str]) -> str:
    if label.role == "house_number":
        return theme["text_secondary"]
    if label.role == "planets" or label.highlight:
        return theme["secondary"]
    return theme["text"]


def render_svg(layout: DrawSpec, theme: Optional[Dict[str, str]] = None, background: bool = False) -> str:
    colors = {**DEFAULT_THEME, **(theme or {})}
    size = layout.size

    dwg = svgwrite.Drawing(size=(size, size))
    dwg.viewbox(0, 0, size, size)
    if background:
        dwg.add(dwg.rect((0, 0), (size, size), fill=colors["background"]))

    for region in layout.regions:
        dwg.add(dwg.polygon(
            points=region.points,
            fill="none",
            stroke=colors["border"],
            stroke_width=HOUSE_STROKE_WIDTH,
        ))

    dwg.add(dwg.polygon(
        points=layout.outer_square,
        fill="none",
        stroke=colors["primary_light"],
        stroke_width=OUTER_STROKE_WIDTH,
    ))
    dwg.add(dwg.polygon(
        points=layout.inner_diamond,
        fill="none",
        stroke=colors["primary_light"],
        stroke_width=DIAMOND_STROKE_WIDTH,
    ))
    for start, end in layout.diagonals:
        dwg.add(dwg.line(start=start, end=end, stroke=colors["border"], stroke_width=DIAGONAL_STROKE_WIDTH))

    for region in layout.regions:
        for label in region.labels:
            dwg.add(dwg.text(
                label.text,
                insert=(label.x, label.y),
                fill=_label_color(label, colors),
                font_size=label.font_size,
                font_weight=label.font_weight,
                text_anchor="middle",
            ))

    logger.debug("Rendered chart SVG (%d regions)", len(layout.regions))
    return dwg.tostring()
