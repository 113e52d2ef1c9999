from .houses import AscendantAnchor, build_houses, resolve_ascendant
from .north_indian import north_indian_layout
from .render import render_svg

__all__ = [
    "AscendantAnchor",
    "build_houses",
    "north_indian_layout",
    "render_svg",
    "resolve_ascendant",
]
