"""Small SVG markup helpers shared by the boxplot renderers."""

from __future__ import annotations

import html
from typing import Any, Iterable, Tuple


def num(value: float) -> str:
    """Format a coordinate with at most three decimals."""
    text = f"{value:.3f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def attrs(**kwargs: Any) -> str:
    """
    Render keyword arguments as SVG attributes.

    Underscores become hyphens (``stroke_width`` -> ``stroke-width``), a
    trailing underscore is dropped (``class_``), ``None`` is skipped, floats
    go through ``num`` and everything is attribute-escaped.
    """
    parts = []
    for key, value in kwargs.items():
        if value is None:
            continue
        name = key.rstrip("_").replace("_", "-")
        if isinstance(value, bool):
            text = "true" if value else "false"
        elif isinstance(value, float):
            text = num(value)
        else:
            text = str(value)
        parts.append(f'{name}="{html.escape(text, quote=True)}"')
    return " ".join(parts)


def element(tag: str, content: str = "", **kwargs: Any) -> str:
    """Return ``<tag attrs/>`` or ``<tag attrs>content</tag>``."""
    attr_text = attrs(**kwargs)
    opening = f"<{tag} {attr_text}" if attr_text else f"<{tag}"
    if content:
        return f"{opening}>{content}</{tag}>"
    return f"{opening}/>"


def line(x1: float, y1: float, x2: float, y2: float, **kwargs: Any) -> str:
    return element("line", x1=float(x1), y1=float(y1), x2=float(x2), y2=float(y2), **kwargs)


def text(x: float, y: float, content: str, **kwargs: Any) -> str:
    """Return a ``<text>`` element; content is escaped."""
    return element("text", html.escape(str(content)), x=float(x), y=float(y), **kwargs)


def group(children: Iterable[str], **kwargs: Any) -> str:
    """Wrap children in ``<g>``; an empty group is still emitted."""
    body = "".join(children)
    attr_text = attrs(**kwargs)
    opening = f"<g {attr_text}>" if attr_text else "<g>"
    return f"{opening}{body}</g>"


def place(value_px: float, cross_px: float, orientation: str) -> Tuple[float, float]:
    """
    Return (x, y) for a value-axis position and a cross-axis position.

    Vertical charts run values along y; horizontal charts along x.
    """
    if orientation == "vertical":
        return cross_px, value_px
    return value_px, cross_px


def path_from_points(points: Iterable[Tuple[float, float]]) -> str:
    """Return a closed path ``d`` attribute through the given points."""
    coords = [f"{num(x)},{num(y)}" for x, y in points]
    if not coords:
        return ""
    return "M" + " L".join(coords) + " Z"
